#!/usr/bin/env python3
"""
Tests for the parser: run fusion, loops and bracket errors.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bftree import (
    Add, Input, Loop, Parser, Print, Shift, Token, UnmatchedBracketError, lex, parse,
)


def test_empty_program():
    assert parse([]) == []


@pytest.mark.parametrize("n", [1, 2, 7, 300])
def test_right_moves_fuse(n):
    assert parse([Token.MOVE_RIGHT] * n) == [Shift(n)]


def test_mixed_runs_fuse_by_class():
    assert parse(lex("++>>--<")) == [Add(2), Shift(2), Add(-2), Shift(-1)]


def test_cancelling_run_keeps_one_node():
    assert parse(lex("+-")) == [Add(0)]
    assert parse(lex("<><>")) == [Shift(0)]


def test_comments_do_not_split_runs():
    assert parse(lex("+ one + two + three")) == [Add(3)]


def test_print_and_input_are_single_nodes():
    assert parse(lex("..,")) == [Print(), Print(), Input()]


def test_loop_body():
    assert parse(lex("++++[->++++<]>.")) == [
        Add(4),
        Loop([Add(-1), Shift(1), Add(4), Shift(-1)]),
        Shift(1),
        Print(),
    ]


def test_empty_loop():
    assert parse(lex("[]")) == [Loop([])]


def test_nested_loops():
    assert parse(lex("[[-]>]")) == [Loop([Loop([Add(-1)]), Shift(1)])]


def test_parser_state_after_parse():
    parser = Parser(lex("[+]"))
    parser.parse()
    assert parser.index == 3
    assert parser.loop_depth == 0


def test_unmatched_open():
    with pytest.raises(UnmatchedBracketError) as exc:
        parse(lex("["))
    assert exc.value.bracket == '['
    assert exc.value.index == 0


def test_unmatched_close():
    with pytest.raises(UnmatchedBracketError) as exc:
        parse(lex("]"))
    assert exc.value.bracket == ']'
    assert exc.value.index == 0


def test_unmatched_open_reports_innermost():
    with pytest.raises(UnmatchedBracketError) as exc:
        parse(lex("[+[-]>[<"))
    assert exc.value.index == 6


def test_extra_close_after_balanced_loop():
    with pytest.raises(UnmatchedBracketError) as exc:
        parse(lex("+[-]]."))
    assert exc.value.bracket == ']'
    assert exc.value.index == 4


def test_error_message_has_context_and_hint():
    with pytest.raises(UnmatchedBracketError) as exc:
        parse(lex("++]"))
    text = str(exc.value)
    assert "Unmatched ']'" in text
    assert "++]" in exc.value.context
    assert exc.value.context.splitlines()[1].endswith("^")
    assert "Hint:" in text


def test_deeply_nested_loops_parse():
    depth = 2000
    nodes = parse(lex("[" * depth + "+" + "]" * depth))
    for _ in range(depth):
        assert len(nodes) == 1
        assert isinstance(nodes[0], Loop)
        nodes = nodes[0].body
    assert nodes == [Add(1)]


def test_deeply_nested_unclosed_loop_reports_innermost():
    with pytest.raises(UnmatchedBracketError) as exc:
        parse(lex("[" * 2000))
    assert exc.value.index == 1999


def test_parser_can_be_reused():
    parser = Parser(lex("+[>]."))
    first = parser.parse()
    assert parser.parse() == first
    assert first == [Add(1), Loop([Shift(1)]), Print()]
