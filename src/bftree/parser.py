from __future__ import annotations

from typing import List, Sequence

from .errors import make_bracket_error
from .lexer import Token
from .nodes import Add, Input, Loop, Node, Print, Shift


_SHIFT_STEPS = {Token.MOVE_LEFT: -1, Token.MOVE_RIGHT: 1}
_ADD_STEPS = {Token.DEC_VALUE: -1, Token.INC_VALUE: 1}


class Parser:
    """
    Descent parser from tokens to AST nodes.

    Runs of pointer moves and runs of value changes are folded into a single
    Shift / Add carrying the net delta, so ``>>><`` becomes ``Shift(2)``.

    Loop bodies being built are kept on an explicit stack rather than the
    Python call stack, so nesting depth is limited only by memory.
    ``loop_depth`` counts the loops currently open and tells a stray ``]``
    at the top level from the end of a loop body.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.index = 0
        self.tokens = list(tokens)
        self.loop_depth = 0

    def advance(self) -> None:
        self.index += 1

    def current_token(self) -> Token:
        return self.tokens[self.index]

    def is_valid(self) -> bool:
        return self.index < len(self.tokens)

    # ===== Run fusion =====

    def _sum_run(self, steps) -> int:
        value = 0
        while self.is_valid():
            step = steps.get(self.current_token())
            if step is None:
                break
            value += step
            self.advance()
        return value

    def parse_shift_sequence(self) -> Shift:
        return Shift(self._sum_run(_SHIFT_STEPS))

    def parse_add_sequence(self) -> Add:
        return Add(self._sum_run(_ADD_STEPS))

    # ===== Blocks =====

    def parse(self) -> List[Node]:
        self.index = 0
        self.loop_depth = 0

        blocks: List[List[Node]] = [[]]
        open_indices: List[int] = []
        while self.is_valid():
            token = self.current_token()
            if token in _SHIFT_STEPS:
                blocks[-1].append(self.parse_shift_sequence())
            elif token in _ADD_STEPS:
                blocks[-1].append(self.parse_add_sequence())
            elif token is Token.LOOP_OPEN:
                open_indices.append(self.index)
                self.advance()
                self.loop_depth += 1
                blocks.append([])
            elif token is Token.LOOP_CLOSE:
                if self.loop_depth == 0:
                    raise make_bracket_error(tokens=self.tokens, index=self.index)
                self.advance()
                self.loop_depth -= 1
                open_indices.pop()
                body = blocks.pop()
                blocks[-1].append(Loop(body))
            elif token is Token.PRINT:
                blocks[-1].append(Print())
                self.advance()
            elif token is Token.INPUT:
                blocks[-1].append(Input())
                self.advance()

        if self.loop_depth > 0:
            # report the innermost unclosed loop
            raise make_bracket_error(tokens=self.tokens, index=open_indices[-1])
        return blocks[0]


def parse(tokens: Sequence[Token]) -> List[Node]:
    return Parser(tokens).parse()
