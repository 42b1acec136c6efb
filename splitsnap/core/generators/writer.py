from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List


class IndentedWriter:
    """Line buffer with a current indentation level (4 spaces per level)."""

    INDENT = "    "

    def __init__(self) -> None:
        self._lines: List[str] = []
        self._level = 0

    def line(self, text: str = "") -> "IndentedWriter":
        # Blank lines carry no trailing whitespace.
        self._lines.append(f"{self.INDENT * self._level}{text}" if text else "")
        return self

    @contextmanager
    def indent(self) -> Iterator["IndentedWriter"]:
        self._level += 1
        try:
            yield self
        finally:
            self._level -= 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def empty(self) -> bool:
        return not self._lines

    def getvalue(self) -> str:
        return "\n".join(self._lines)
