from enum import Enum
from typing import List


class Token(Enum):
    MOVE_LEFT = '<'
    MOVE_RIGHT = '>'
    INC_VALUE = '+'
    DEC_VALUE = '-'
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    PRINT = '.'
    INPUT = ','


_TOKENS_BY_CHAR = {t.value: t for t in Token}


def is_code_char(ch: str) -> bool:
    return ch in _TOKENS_BY_CHAR


def lex(source: str) -> List[Token]:
    """Turn program text into tokens. Anything that isn't an instruction is a comment."""
    tokens = []
    for ch in source:
        token = _TOKENS_BY_CHAR.get(ch)
        if token is not None:
            tokens.append(token)
    return tokens
