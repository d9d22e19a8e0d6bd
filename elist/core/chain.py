"""Error-message stack for error trace-backs.

An ErrorChain is a singly linked stack of error nodes. Each caller that
receives an error pushes its own context message on top, so the final value
renders as a trace-back from the outermost context to the root cause.

Usage:
    def load_settings(path: Path) -> Settings:
        try:
            raw = path.read_text()
        except OSError as e:
            raise push(e, f"load_settings: cannot read {path}") from e
        ...

    def start() -> None:
        try:
            load_settings(SETTINGS_PATH)
        except ErrorChain as e:
            raise push(e, "start: settings unavailable") from e

Rendered output (most recent context first):
    Error 1: "start: settings unavailable".
    Error 2: "load_settings: cannot read /etc/app.toml".
    Error 3: "[Errno 2] No such file or directory: '/etc/app.toml'".

Nodes are immutable. Pushing onto an existing chain reuses its nodes by
reference instead of copying them; treat the chain passed to push() as
consumed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from .formatting import format_string

__all__ = [
    "Absent",
    "ErrorChain",
    "ErrorNode",
    "Message",
    "Payload",
    "Wrapped",
    "new",
    "newf",
    "push",
    "pushf",
    "render",
    "render_lines",
]


@dataclass(frozen=True, slots=True)
class Message:
    """A literal error description."""

    text: str


@dataclass(frozen=True, slots=True)
class Wrapped:
    """A foreign error adopted into the chain verbatim."""

    error: BaseException


@dataclass(frozen=True, slots=True)
class Absent:
    """Node without a payload. Never produced by the public constructors."""


Payload: TypeAlias = "Message | Wrapped | Absent"


@dataclass(frozen=True, slots=True)
class ErrorNode:
    """One element of the stack.

    Attributes:
        payload: What this node reports.
        next: The chronologically prior node, or None for the root cause.
    """

    payload: Payload
    next: ErrorNode | None = None


class ErrorChain(Exception):
    """An exception carrying a stack of error nodes.

    str() of a chain is its rendered trace-back, so a chain can be raised,
    logged or printed like any other exception.
    """

    def __init__(self, head: ErrorNode) -> None:
        super().__init__(head)
        self._head = head

    @property
    def head(self) -> ErrorNode:
        """The most recently pushed node."""
        return self._head

    def __iter__(self) -> Iterator[ErrorNode]:
        node: ErrorNode | None = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"ErrorChain(len={len(self)}, head={self._head.payload!r})"


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------


def new(message: str) -> ErrorChain:
    """Create a single-node chain from a message.

    Args:
        message: Error description, taken as-is.

    Returns:
        A chain of length 1.
    """
    return ErrorChain(ErrorNode(Message(message)))


def newf(format: str, *args: object) -> ErrorChain:
    """Create a single-node chain from a printf-style format.

    Example:
        raise newf("parse_header: bad field count %d", n)
    """
    return new(format_string(format, *args))


def push(existing: BaseException | None, message: str) -> ErrorChain:
    """Return a new chain with message on top of existing.

    - None: the result is a fresh single-node chain.
    - ErrorChain: its head becomes the tail of the new node (no copy).
    - Any other exception: it is adopted as a Wrapped tail node.

    Args:
        existing: Error returned or raised by the callee, if any.
        message: Context describing what this caller was doing.

    Returns:
        The new chain. The chain passed in must not be reused afterwards.
    """
    tail: ErrorNode | None
    if existing is None:
        tail = None
    elif isinstance(existing, ErrorChain):
        tail = existing.head
    else:
        tail = ErrorNode(Wrapped(existing))
    return ErrorChain(ErrorNode(Message(message), tail))


def pushf(existing: BaseException | None, format: str, *args: object) -> ErrorChain:
    """Formatted version of push()."""
    return push(existing, format_string(format, *args))


# -----------------------------------------------------------------------------
# Rendering
# -----------------------------------------------------------------------------


def _describe(error: object) -> str:
    # Rendering must not fail because a foreign error has a broken __str__.
    try:
        return str(error)
    except Exception:
        return object.__repr__(error)


def _render_node(n: int, payload: object) -> str:
    match payload:
        case Message(text=text):
            return f'Error {n}: "{text}".'
        case Wrapped(error=error):
            return f'Error {n}: "{_describe(error)}".'
        case Absent() | None:
            return f"Error {n}: [error == nil]."
        case _:
            return f'Error {n}: [Unrecognized error] "{_describe(payload)}".'


def render_lines(chain: ErrorChain | None) -> list[str]:
    """Return one trace line per node, head first, without newlines."""
    if chain is None:
        return []
    return [_render_node(n, node.payload) for n, node in enumerate(chain, start=1)]


def render(chain: ErrorChain | None) -> str:
    """Render a chain as newline-terminated lines in LIFO order.

    Example output:
        Error 1: "handler: request failed".
        Error 2: "service: query failed".
        Error 3: "db: connection refused".

    Returns:
        The trace, or "" for None.
    """
    return "".join(f"{line}\n" for line in render_lines(chain))
