from .lexer import Token, lex
from .nodes import Add, Input, Loop, Node, Print, Shift
from .parser import Parser, parse
from .interpreter import Interpreter, run
from .errors import BFError, PointerUnderflowError, TapeBoundsError, UnmatchedBracketError
from .api import RunOptions, RunResult, parse_string, run_string

__all__ = [
    'Token',
    'lex',
    'Add',
    'Input',
    'Loop',
    'Node',
    'Print',
    'Shift',
    'Parser',
    'parse',
    'Interpreter',
    'run',
    'BFError',
    'PointerUnderflowError',
    'TapeBoundsError',
    'UnmatchedBracketError',
    'RunOptions',
    'RunResult',
    'parse_string',
    'run_string',
]
