from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .nodes import Add, Input, Loop, Node, Print, Shift
from .state import TapeState


class Interpreter:
    """
    Tree-walking evaluator for parsed programs.

    Each interpreter owns one tape. ``Print`` writes the cell's decimal value
    on its own line to ``stream`` (stdout unless given) and also records it in
    ``output``. Pass ``echo=False`` to only record.

    Loop bodies are walked on an explicit frame stack, so nesting depth is
    not bounded by the interpreter's recursion limit.
    """

    def __init__(self, stream: Optional[TextIO] = None, *, echo: bool = True):
        self.state = TapeState()
        self.stream = stream
        self.echo = echo
        self.output: List[int] = []

    def reset(self) -> None:
        self.state.reset()
        self.output = []

    def run(self, nodes: List[Node]) -> None:
        self._run_block(nodes)

    def _run_block(self, nodes: List[Node]) -> None:
        state = self.state
        # frames are [body, next index, is loop body]
        frames: List[list] = [[nodes, 0, False]]
        while frames:
            frame = frames[-1]
            body, i, is_loop = frame
            if i >= len(body):
                if is_loop and state.current() != 0:
                    frame[1] = 0
                else:
                    frames.pop()
                continue

            node = body[i]
            frame[1] = i + 1
            if isinstance(node, Shift):
                state.shift(node.delta)
            elif isinstance(node, Add):
                state.add(node.delta)
            elif isinstance(node, Loop):
                if state.current() != 0:
                    frames.append([node.body, 0, True])
            elif isinstance(node, Print):
                self._print(state.current())
            elif isinstance(node, Input):
                pass
            else:
                raise TypeError(f"Unknown node: {node!r}")

    def _print(self, value: int) -> None:
        self.output.append(value)
        if self.echo:
            stream = self.stream if self.stream is not None else sys.stdout
            stream.write(f"{value}\n")


def run(nodes: List[Node], stream: Optional[TextIO] = None, *, echo: bool = True) -> Interpreter:
    interpreter = Interpreter(stream, echo=echo)
    interpreter.run(nodes)
    return interpreter
