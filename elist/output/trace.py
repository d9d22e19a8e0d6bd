"""Trace presentation.

Prints an ErrorChain to a console, one line per node. The most recent
context is highlighted; deeper lines are dimmed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from elist.core.chain import ErrorChain, render_lines
from elist.output.console import Style

if TYPE_CHECKING:
    from elist.output.console import ConsoleProtocol

__all__ = ["print_chain"]


def print_chain(
    chain: ErrorChain | None,
    console: ConsoleProtocol,
    *,
    header: str | None = None,
) -> None:
    """Print a chain's trace lines to the console.

    Nothing is printed for None, not even the header.
    """
    lines = render_lines(chain)
    if not lines:
        return

    if header:
        console.header(header)
    for n, line in enumerate(lines):
        console.print(line, Style.ERROR if n == 0 else Style.DIM)
