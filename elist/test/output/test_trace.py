"""Tests for elist.output.trace module."""

from __future__ import annotations

from elist.core.chain import new, push
from elist.output.console import MockConsole, OutputRecord, Style
from elist.output.trace import print_chain


def test_prints_one_record_per_node() -> None:
    console = MockConsole()
    chain = push(push(new("db: connection refused"), "service: query failed"), "handler: failed")

    print_chain(chain, console)

    assert console.outputs == [
        OutputRecord('Error 1: "handler: failed".', Style.ERROR),
        OutputRecord('Error 2: "service: query failed".', Style.DIM),
        OutputRecord('Error 3: "db: connection refused".', Style.DIM),
    ]


def test_header_is_printed_first() -> None:
    console = MockConsole()
    print_chain(new("boom"), console, header="Error trace")
    assert console.outputs[0] == OutputRecord("Error trace", Style.HEADER)
    assert console.messages[1] == 'Error 1: "boom".'


def test_none_prints_nothing() -> None:
    console = MockConsole()
    print_chain(None, console, header="Error trace")
    assert console.outputs == []


def test_wrapped_error_line() -> None:
    console = MockConsole()
    print_chain(push(TimeoutError("timed out after 5s"), "fetch failed"), console)
    assert console.messages == ['Error 1: "fetch failed".', 'Error 2: "timed out after 5s".']
