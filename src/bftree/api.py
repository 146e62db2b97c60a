from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, TextIO

from .interpreter import Interpreter
from .lexer import lex
from .nodes import Node
from .parser import parse


@dataclass(frozen=True)
class RunOptions:
    stream: Optional[TextIO] = None
    echo: bool = True


@dataclass(frozen=True)
class RunResult:
    output: List[int]
    tape: bytes
    pointer: int


def parse_string(source: str) -> List[Node]:
    return parse(lex(source))


def run_string(source: str, *, options: Optional[RunOptions] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    nodes = parse_string(source)
    interpreter = Interpreter(opts.stream, echo=opts.echo)
    interpreter.run(nodes)
    state = interpreter.state
    return RunResult(output=list(interpreter.output), tape=state.tape.tobytes(), pointer=state.pointer)
