#!/usr/bin/env python3
# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""CLI/Imperative shell for gflagrange."""

import sys
import logging
from typing import List
from typing import Tuple
from typing import Optional
from typing import Sequence
from typing import NamedTuple

import click

from . import gf
from . import errors
from . import primes
from . import gf_poly
from . import polynom
from . import gf_random

logger = logging.getLogger("gflagrange.cli")


class LogConfig(NamedTuple):
    fmt: str
    lvl: int


LOG_FORMAT_DEFAULT = "%(levelname)-7s - %(message)s"

LOG_FORMAT_VERBOSE = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-20s - %(message)s"


def _parse_logging_config(verbosity: int) -> LogConfig:
    if verbosity == 0:
        return LogConfig(LOG_FORMAT_DEFAULT, logging.WARNING)
    elif verbosity == 1:
        return LogConfig(LOG_FORMAT_VERBOSE, logging.INFO)
    else:
        assert verbosity >= 2
        return LogConfig(LOG_FORMAT_VERBOSE, logging.DEBUG)


_PREV_VERBOSITY: int = -1


def _configure_logging(verbosity: int = 0) -> None:
    # pylint: disable=global-statement
    global _PREV_VERBOSITY

    if verbosity <= _PREV_VERBOSITY:
        # allow function to be called multiple times
        return

    _PREV_VERBOSITY = verbosity

    # remove previous logging handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)

    log_cfg = _parse_logging_config(verbosity)
    logging.basicConfig(level=log_cfg.lvl, format=log_cfg.fmt, datefmt="%Y-%m-%dT%H:%M:%S")


def echo(msg: str = "") -> bool:
    click.echo(msg)
    return True


def _fail(msg: str) -> None:
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _parse_modulus(ctx: click.Context, param: click.Parameter, value: str) -> int:
    try:
        modulus = errors.check_modulus(primes.parse_modulus(value))
    except (TypeError, ValueError) as ex:
        raise click.BadParameter(str(ex))

    if not primes.is_probable_prime(modulus):
        logger.warning(f"Modulus {modulus} is not prime, division may fail.")
    return modulus


def _parse_point(raw: str, modulus: int) -> gf_poly.Point:
    try:
        raw_x, raw_y = raw.split(":")
        return gf_poly.Point.from_ints(int(raw_x, 0), int(raw_y, 0), modulus)
    except ValueError:
        raise click.BadParameter(f"Invalid point '{raw}', expected X:Y")


def _parse_coeffs(raw: str, modulus: int) -> polynom.Poly:
    try:
        vals = [int(part, 0) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"Invalid coefficients '{raw}', expected C0,C1,...")
    return polynom.Poly.from_ints(vals, modulus)


_opt_modulus = click.option(
    '-m',
    '--modulus',
    required=True,
    callback=_parse_modulus,
    help=(
        "Field modulus, decimal, 0x-prefixed hex or one of "
        + ", ".join(sorted(primes.WELL_KNOWN_MODULI))
    ),
)


_opt_verbose = click.option(
    '-v',
    '--verbose',
    count=True,
    help="Control log level. -vv for debug level.",
)


MAX_EVAL_ALL_MODULUS = 4096


@click.group(context_settings={'help_option_names': ["-h", "--help"]})
@_opt_verbose
def cli(verbose: int = 0) -> None:
    """CLI for gflagrange: Lagrange interpolation over GF(p)."""
    _configure_logging(verbose)


@cli.command()
def version() -> None:
    """Show version number."""
    from . import __version__

    echo(f"gflagrange version: {__version__}")


@cli.command()
@_opt_modulus
@click.option(
    '--eval-all',
    is_flag=True,
    default=False,
    help=f"Evaluate the polynomial at every x of the field (modulus <= {MAX_EVAL_ALL_MODULUS}).",
)
@_opt_verbose
@click.argument('points', nargs=-1)
def interpolate(
    modulus : int,
    points  : Tuple[str, ...],
    eval_all: bool = False,
    verbose : int  = 0,
) -> None:
    """Interpolate a polynomial through POINTS (given as X:Y)."""
    _configure_logging(verbose)

    if eval_all and modulus > MAX_EVAL_ALL_MODULUS:
        raise click.BadParameter(
            f"--eval-all requires modulus <= {MAX_EVAL_ALL_MODULUS}", param_hint="--eval-all"
        )

    gf_points: List[gf_poly.Point] = [_parse_point(raw, modulus) for raw in points]
    try:
        poly = gf_poly.interpolate(gf_points)
    except errors.InvalidInput as ex:
        _fail(str(ex))
        return
    except ZeroDivisionError:
        _fail("points must have distinct x coordinates")
        return

    for i, coeff in enumerate(poly.coeffs):
        echo(f"f[{i}]: {coeff}")

    if eval_all:
        field = gf.Field(modulus)
        for x in range(modulus):
            at_x = field[x]
            echo(f"({at_x}, {poly(at_x)})")


@cli.command(name="eval")
@_opt_modulus
@click.option(
    '-c',
    '--coeffs',
    required=True,
    help="Coefficients in ascending powers of x: C0,C1,C2,...",
)
@_opt_verbose
@click.argument('xs', nargs=-1, required=True)
def eval_poly(
    modulus: int,
    coeffs : str,
    xs     : Sequence[str],
    verbose: int = 0,
) -> None:
    """Evaluate a polynomial at each of XS."""
    _configure_logging(verbose)

    poly = _parse_coeffs(coeffs, modulus)
    for raw_x in xs:
        try:
            x = int(raw_x, 0)
        except ValueError:
            raise click.BadParameter(f"Invalid x '{raw_x}'", param_hint="XS")
        echo(f"f({x}) = {poly(x).val}")


@cli.command()
@_opt_modulus
@click.option('-d', '--degree', type=int, required=True, help="Exact degree of the polynomial.")
@click.option(
    '--seed',
    default=None,
    help="Derive the coefficients deterministically from this text (slow, uses argon2).",
)
@_opt_verbose
def random_poly(
    modulus: int,
    degree : int,
    seed   : Optional[str] = None,
    verbose: int = 0,
) -> None:
    """Generate a random polynomial of exact degree."""
    _configure_logging(verbose)

    if degree < 0:
        raise click.BadParameter("must be >= 0", param_hint="--degree")

    raw_seed  = None if seed is None else seed.encode("utf-8")
    randrange = gf_random.init_randrange(raw_seed)
    poly      = polynom.Poly.random(degree, modulus, randrange)
    for i, coeff in enumerate(poly.coeffs):
        echo(f"f[{i}]: {coeff}")


if __name__ == '__main__':
    cli()
