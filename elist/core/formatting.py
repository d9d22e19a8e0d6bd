"""Permissive printf-style formatting.

format_string() behaves like the % operator, one directive at a time, but it
never raises. Problems are reported inline in the result instead:

    format_string("%d items", "ten")   -> '%!d(str=ten) items'
    format_string("%s and %s", "a")    -> 'a and %!s(MISSING)'
    format_string("done", 42)          -> 'done%!(EXTRA int=42)'
    format_string("100%")              -> '100%!(NOVERB)'
    format_string("%!", 1)             -> '%!!(int=1)'
    format_string("%d", True)          -> '%!d(bool=true)'
    format_string("%*d", "x", 3)       -> '%!(BADWIDTH)3'

Besides the verbs of the % operator, a few extra verbs are understood:
    %v  plain value (booleans as true/false, None as <nil>)
    %q  double-quoted, escaped string
    %t  boolean as true/false
    %T  type name of the argument
"""

from __future__ import annotations

import json
import re

__all__ = ["format_string"]

_DIRECTIVE = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\*|\d*)(?:\.(?P<precision>\*|\d*))?(?P<verb>.)?",
    re.DOTALL,
)

# Verbs handled directly by the % operator.
_NATIVE_VERBS = frozenset("diouxXeEfFgGcrsa")
# Native verbs that reject booleans instead of printing them as 0/1.
_NUMERIC_VERBS = frozenset("diouxXeEfFgGc")


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _value_text(value: object) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return _safe_str(value)


def _type_name(value: object) -> str:
    return "<nil>" if value is None else type(value).__name__


def _bad_verb(verb: str, value: object) -> str:
    if value is None:
        return f"%!{verb}(<nil>)"
    return f"%!{verb}({_type_name(value)}={_value_text(value)})"


def _extra_text(value: object) -> str:
    if value is None:
        return "<nil>"
    return f"{_type_name(value)}={_value_text(value)}"


def _convert(directive: str, verb: str, value: object) -> str:
    as_str = directive + "s"
    try:
        if verb in _NATIVE_VERBS:
            if isinstance(value, bool) and verb in _NUMERIC_VERBS:
                return _bad_verb(verb, value)
            return (directive + verb) % (value,)
        if verb == "v":
            return as_str % (_value_text(value),)
        if verb == "q":
            return as_str % (json.dumps(_safe_str(value), ensure_ascii=False),)
        if verb == "t" and isinstance(value, bool):
            return as_str % (_value_text(value),)
        if verb == "T":
            return as_str % (_type_name(value),)
    except Exception:
        # Any failure in a single directive is reported inline.
        return _bad_verb(verb, value)
    return _bad_verb(verb, value)


def _int_arg(args: tuple[object, ...], index: int) -> int | None:
    if index >= len(args):
        return None
    value = args[index]
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def format_string(format: str, *args: object) -> str:
    """Substitute args into a printf-style format without ever raising.

    A `*` width or precision takes its value from the next argument, which
    must be an int. A negative `*` width left-justifies; a negative `*`
    precision is ignored.

    Args:
        format: Format string with %-directives.
        *args: Values consumed left to right by the directives.

    Returns:
        The formatted text, with %!-markers wherever a directive could not be
        satisfied.
    """
    if "%" not in format and not args:
        return format

    out: list[str] = []
    pos = 0
    index = 0
    for match in _DIRECTIVE.finditer(format):
        out.append(format[pos : match.start()])
        pos = match.end()

        flags = match.group("flags")
        width = match.group("width")
        precision = match.group("precision")

        if width == "*":
            star = _int_arg(args, index)
            if index < len(args):
                index += 1
            if star is None:
                out.append("%!(BADWIDTH)")
                width = ""
            else:
                if star < 0:
                    flags += "-"
                width = str(abs(star))

        if precision == "*":
            star = _int_arg(args, index)
            if index < len(args):
                index += 1
            if star is None:
                out.append("%!(BADPREC)")
                precision = None
            else:
                precision = str(star) if star >= 0 else None

        verb = match.group("verb")
        if verb is None:
            out.append("%!(NOVERB)")
            continue
        if verb == "%":
            out.append("%")
            continue
        if index >= len(args):
            out.append(f"%!{verb}(MISSING)")
            continue

        directive = "%" + flags + width
        if precision is not None:
            directive += "." + precision

        out.append(_convert(directive, verb, args[index]))
        index += 1

    out.append(format[pos:])

    if index < len(args):
        extra = ", ".join(_extra_text(value) for value in args[index:])
        out.append(f"%!(EXTRA {extra})")

    return "".join(out)
