# SPDX-License-Identifier: GPL-3.0-only
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO

import pydantic

from fibcompare.core.fib import FibCache, fib_iter, fib_recursive, fib_recursive_cache

log = logging.getLogger(__name__)


class FibRow(pydantic.BaseModel):
    """Results of every implementation that was run for a single index."""

    n: int
    recursive: Optional[float] = None
    cached: float
    iterative: float


_SKIP_RECURSION_BANNER = (
    "Pure recursion is showing growth problem...",
    "Lets just continue with cache and iterative",
)


def _fmt(value: float) -> str:
    # same shape as a double written to a C++ ostream: 6 significant digits
    return f"{value:g}"


def build_rows(
    recursive_limit: int = 20,
    upper_bound: int = 100,
    cache: FibCache | None = None,
) -> list[FibRow]:
    """
    Compute the comparison table.

    All three implementations run for n in [0, recursive_limit). Plain recursion is skipped for
    n in [recursive_limit, upper_bound], its runtime would be impractical there.
    """
    rows = []
    for n in range(0, min(recursive_limit, upper_bound + 1)):
        rows.append(
            FibRow(
                n=n,
                recursive=fib_recursive(n),
                cached=fib_recursive_cache(n, cache),
                iterative=fib_iter(n),
            )
        )

    log.debug("Skipping plain recursion for n >= %d", recursive_limit)
    for n in range(recursive_limit, upper_bound + 1):
        rows.append(FibRow(n=n, cached=fib_recursive_cache(n, cache), iterative=fib_iter(n)))

    return rows


def render_lines(rows: Iterable[FibRow], upper_bound: int = 100) -> Iterator[str]:
    """Render the table as console lines."""
    yield f"Print fibonacci numbers from 0-{upper_bound}"
    yield "recursive, cached, and Iteratve methods"

    in_recursive_section = True
    for row in rows:
        if row.recursive is not None:
            yield (
                f"n: {row.n} recursive: {_fmt(row.recursive)}"
                f" cache: {_fmt(row.cached)} iter: {_fmt(row.iterative)}"
            )
            continue

        if in_recursive_section:
            yield from _SKIP_RECURSION_BANNER
            in_recursive_section = False
        yield f"n: {row.n} cache: {_fmt(row.cached)} iter: {_fmt(row.iterative)}"

    if in_recursive_section:
        yield from _SKIP_RECURSION_BANNER


def run_report(
    recursive_limit: int = 20,
    upper_bound: int = 100,
    cache: FibCache | None = None,
    out: TextIO | None = None,
) -> int:
    """Print the comparison table and return the process exit status, which is always 0."""
    if out is None:
        out = sys.stdout
    rows = build_rows(recursive_limit, upper_bound, cache)
    for line in render_lines(rows, upper_bound):
        print(line, file=out)
    return 0
