"""Data models shared by the scan, align, assemble, and write steps"""

from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Optional


class EditKind(str, Enum):
    equal = "equal"
    add = "add"
    remove = "remove"


@dataclass(frozen=True)
class IndexedLine:
    """A source line tagged with its absolute 0-based position in the source."""
    index: int
    text:  str


@dataclass(frozen=True)
class EditRun:
    """One run of an edit script: `count` consecutive lines of the same kind."""
    kind:  EditKind
    count: int


@dataclass
class SourceInfo:
    """One side of a diff: a readable stream (None = empty) and an optional header label."""
    stream: Optional[IO] = None
    label:  str = ""


@dataclass(frozen=True)
class HunkLine:
    marker: str     # ' ', '-' or '+'
    text:   str

    def render(self) -> str:
        return f"{self.marker}{self.text}"


@dataclass
class Hunk:
    """A contiguous change region; counts are kept in step with the lines added."""
    start_old: int
    start_new: int
    count_old: int = 0
    count_new: int = 0
    lines: list[HunkLine] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return any(line.marker != " " for line in self.lines)

    def add_context(self, text: str) -> None:
        self.lines.append(HunkLine(" ", text))
        self.count_old += 1
        self.count_new += 1

    def add_remove(self, text: str) -> None:
        self.lines.append(HunkLine("-", text))
        self.count_old += 1

    def add_new(self, text: str) -> None:
        self.lines.append(HunkLine("+", text))
        self.count_new += 1

    def header(self) -> str:
        """Render the `@@ -a,b +c,d @@` line; starts are 1-based, zero counts are kept."""
        return (
            f"@@ -{self.start_old + 1},{self.count_old} "
            f"+{self.start_new + 1},{self.count_new} @@"
        )


@dataclass
class LineBuffer:
    """Retained lines of one source; maps absolute line indices onto the list."""
    first_line: int = 0
    lines: list[IndexedLine] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def line_at(self, absolute: int) -> IndexedLine:
        """Return the retained line whose stored index is `absolute`."""
        base = self.lines[0].index if self.lines else self.first_line
        local = absolute - base
        if local < 0:
            raise IndexError(f"Line {absolute} precedes the retained window (first={base})")
        return self.lines[local]

    def text_at(self, absolute: int) -> str:
        return self.line_at(absolute).text

    def append(self, text: str) -> IndexedLine:
        line = IndexedLine(self.first_line + len(self.lines), text)
        self.lines.append(line)
        return line
