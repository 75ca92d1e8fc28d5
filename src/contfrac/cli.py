"""Command line: print the continued fraction of a number.

    python -m contfrac 7/3
    python -m contfrac 355/113 --convergents
    python -m contfrac "sqrt(2)" --symbolic --steps 20
"""

from __future__ import annotations
import argparse
import logging
import sys
from fractions import Fraction
from typing import Any, List, Optional

import sympy

from contfrac.api import continued_fraction, convergents_up_to, is_rational_terminating
from contfrac.config import get_config
from contfrac.errors import ContFracError
from contfrac.field import Field
from contfrac.pretty import pp, pps


def _parse_value(text: str, symbolic: bool) -> Any:
    if symbolic:
        try:
            return Field.Symbolic.coerce(text)
        except (TypeError, ValueError, sympy.SympifyError) as e:
            raise argparse.ArgumentTypeError(f"{text!r} is not an exact real number: {e}") from e
    try:
        return Fraction(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"{text!r} is not a rational number; use --symbolic for expressions like sqrt(2)"
        ) from e


def _steps(text: str) -> int:
    try:
        n = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer") from e
    if n < 0:
        raise argparse.ArgumentTypeError(f"step count must be non-negative, got {n}")
    return n


def main(argv: Optional[List[str]] = None) -> int:
    cfg = get_config()
    p = argparse.ArgumentParser(
        prog="contfrac",
        description="Expand a number into its simple continued fraction.",
    )
    p.add_argument("value", help="a rational such as 7/3 or 1.25, or an expression with --symbolic")
    p.add_argument("--symbolic", action="store_true", help="read the value as a sympy expression")
    p.add_argument("--steps", type=_steps, default=cfg.max_steps, help="maximum number of levels")
    p.add_argument("--convergents", action="store_true", help="also list the convergents")
    p.add_argument("--nested", action="store_true", help="print a0 + 1/(a1 + ...) instead of [a0; a1, ...]")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=cfg.log_level,
        help="logging level (default from CONTFRAC_LOG_LEVEL)",
    )
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        value = _parse_value(args.value, args.symbolic)
    except argparse.ArgumentTypeError as e:
        p.error(str(e))

    try:
        cf = continued_fraction(value, args.steps)
        print(pps(cf, args.steps) if args.nested else pp(cf, args.steps))
        if args.convergents:
            for i, c in enumerate(convergents_up_to(value, args.steps + 1)):
                print(f"  c{i} = {c}")
        if isinstance(value, Fraction):
            cert = is_rational_terminating(value)
            print(f"terminates at step {cert.terminated_at} (bound {cert.step_bound})")
    except ContFracError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
