"""Core domain types and logic."""

from .chain import ErrorChain, ErrorNode, new, newf, push, pushf, render, render_lines
from .config import Config, OutputConfig, load_config, load_config_or_default
from .formatting import format_string

__all__ = [
    # chain
    "ErrorChain",
    "ErrorNode",
    "new",
    "newf",
    "push",
    "pushf",
    "render",
    "render_lines",
    # config
    "Config",
    "OutputConfig",
    "load_config",
    "load_config_or_default",
    # formatting
    "format_string",
]
