"""Pretty printer for continued fractions."""

from __future__ import annotations
from fractions import Fraction
from typing import Any

from contfrac.cfrac import GenContFract, Pair

# Levels shown before eliding the rest with "..."
_PREVIEW = 8


def _fmt_num(v: Any) -> str:
    if isinstance(v, Fraction) and v.denominator == 1:
        return str(v.numerator)
    return str(v)


def _wrap(inner: str) -> str:
    """Parenthesize anything that is not a bare number."""
    needs = any(c in inner for c in " +-/") and not inner.lstrip("-").isdigit()
    return f"({inner})" if needs else inner


def pp(gcf: GenContFract, max_terms: int = _PREVIEW) -> str:
    """Bracket notation: [a0; a1, a2, ...] for simple fractions,
    [h; (a0, b0), (a1, b1), ...] otherwise."""
    shown = gcf.terms.take(max_terms)
    more = gcf.truncated or gcf.terms.get(max_terms) is not None
    simple = all(p.a == 1 for p in shown)
    if simple:
        body = ", ".join(_fmt_num(p.b) for p in shown)
    else:
        body = ", ".join(f"({_fmt_num(p.a)}, {_fmt_num(p.b)})" for p in shown)
    if more:
        body = f"{body}, ..." if body else "..."
    if not body:
        return f"[{_fmt_num(gcf.head)}]"
    return f"[{_fmt_num(gcf.head)}; {body}]"


def pps(gcf: GenContFract, max_terms: int = _PREVIEW) -> str:
    """Nested notation: a0 + 1/(a1 + 1/(a2 + ...))."""
    shown = gcf.terms.take(max_terms)
    tail = "..." if gcf.truncated or gcf.terms.get(max_terms) is not None else None
    out = tail
    for p in reversed(shown):
        out = _level(p, out)
    if out is None:
        return _fmt_num(gcf.head)
    return f"{_fmt_num(gcf.head)} + {out}"


def _level(p: Pair, rest: str | None) -> str:
    den = _fmt_num(p.b) if rest is None else f"{_fmt_num(p.b)} + {rest}"
    return f"{_wrap(_fmt_num(p.a))}/{_wrap(den)}"
