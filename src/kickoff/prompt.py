"""Line oriented question and answer driver."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = ["Prompter", "is_affirmative"]


_AFFIRMATIVE = frozenset({"y", "yes"})


def is_affirmative(answer: str) -> bool:
    """Return ``True`` for ``y``/``yes`` in any case; everything else is "no"."""

    return answer.strip().lower() in _AFFIRMATIVE


class Prompter:
    """Ask fixed questions over a pair of text streams.

    Each call writes the question, blocks until one line is available and
    returns it with surrounding whitespace removed. End of input is treated
    as an empty answer so a closed stdin behaves like pressing enter.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def ask(self, question: str, default: str = "") -> str:
        self._stdout.write(question)
        self._stdout.flush()
        line = self._stdin.readline()
        answer = line.strip()
        return answer or default

    def confirm(self, question: str) -> bool:
        return is_affirmative(self.ask(question))

    def say(self, message: str = "") -> None:
        self._stdout.write(f"{message}\n")
        self._stdout.flush()
