"""Shared fixtures for core unit tests"""

import io

import pytest

from hunkdiff.core.models import Hunk, LineBuffer, SourceInfo


def _text_of(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _apply_hunks(old: list[str], hunks: list[Hunk]) -> list[str]:
    """Replay hunks over old, checking context/removed lines match, and return the result."""
    out, pos = [], 0
    for h in hunks:
        assert h.start_old >= pos, "hunks overlap or are out of order"
        out.extend(old[pos:h.start_old])
        pos = h.start_old
        for line in h.lines:
            if line.marker == "+":
                out.append(line.text)
                continue
            assert old[pos] == line.text
            if line.marker == " ":
                out.append(line.text)
            pos += 1
    out.extend(old[pos:])
    return out


def _buffer_of(lines: list[str], first_line: int = 0) -> LineBuffer:
    buf = LineBuffer(first_line)
    for text in lines:
        buf.append(text)
    return buf


@pytest.fixture(name="source")
def source_fixture():
    """Factory: source(lines, label='') -> SourceInfo over a text stream."""
    def _make(lines: list[str], label: str = "") -> SourceInfo:
        return SourceInfo(io.StringIO(_text_of(lines)), label)
    return _make


@pytest.fixture(name="apply_hunks")
def apply_hunks_fixture():
    return _apply_hunks


@pytest.fixture(name="buffer_of")
def buffer_of_fixture():
    return _buffer_of


@pytest.fixture(name="sample_pair")
def sample_pair_fixture():
    return ["1", "2", "3", "4", "5"], ["1", "2", "X", "4", "5"]
