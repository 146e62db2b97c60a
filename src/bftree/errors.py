from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .lexer import Token


def _build_context(tokens: Sequence[Token], index: int, *, context: int = 12) -> str:
    start = max(0, index - context)
    end = min(len(tokens), index + context + 1)

    text = ''.join(t.value for t in tokens[start:end])
    caret = ' ' * (index - start) + '^'
    prefix = '...' if start > 0 else ''
    suffix = '...' if end < len(tokens) else ''
    pad = ' ' * len(prefix)
    return f"  {prefix}{text}{suffix}\n  {pad}{caret}"


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'parse':
        if "unmatched '['" in msg:
            return 'Every "[" needs a matching "]" later in the program.'
        if "unmatched ']'" in msg:
            return 'A "]" appeared with no open loop. Check for an extra "]" or a missing "[".'
        return None
    if kind == 'runtime':
        if 'underflow' in msg:
            return 'The tape only grows to the right. Cell 0 is the leftmost cell.'
        return None
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnmatchedBracketError(BFError):
    index: int
    bracket: str
    context: str


@dataclass
class TapeBoundsError(BFError):
    pointer: int
    delta: int
    context: str


@dataclass
class PointerUnderflowError(TapeBoundsError):
    pass


def make_bracket_error(*, tokens: Sequence[Token], index: int) -> UnmatchedBracketError:
    bracket = tokens[index].value
    message = f"Unmatched '{bracket}'"
    ctx = _build_context(tokens, index)
    hint = _hint_for(message, kind='parse')
    hint_block = f"\nHint: {hint}" if hint else ""
    return UnmatchedBracketError(
        message=f"ParseError: {message} (token {index})\n{ctx}{hint_block}",
        index=index,
        bracket=bracket,
        context=ctx,
    )


def make_underflow_error(*, pointer: int, delta: int, tape_length: int) -> PointerUnderflowError:
    message = f"Pointer underflow: cannot shift by {delta} from cell {pointer}"
    ctx = f"  pointer={pointer} delta={delta} target={pointer + delta} tape_length={tape_length}"
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return PointerUnderflowError(
        message=f"RuntimeError: {message}\n{ctx}{hint_block}",
        pointer=pointer,
        delta=delta,
        context=ctx,
    )
