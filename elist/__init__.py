"""Error-message stacks for readable error trace-backs."""

from .core.chain import (
    Absent,
    ErrorChain,
    ErrorNode,
    Message,
    Wrapped,
    new,
    newf,
    push,
    pushf,
    render,
    render_lines,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # chain
    "Absent",
    "ErrorChain",
    "ErrorNode",
    "Message",
    "Wrapped",
    "new",
    "newf",
    "push",
    "pushf",
    "render",
    "render_lines",
]
