"""Unit tests for core/scan.py"""

import io

import pytest

from hunkdiff.core.compare import ExactComparer, IgnoreCaseComparer
from hunkdiff.core.scan import scan_sources, trim_suffix


def _io(lines: list[str]) -> io.StringIO:
    return io.StringIO("".join(f"{line}\n" for line in lines))


def _texts(buf) -> list[str]:
    return [line.text for line in buf.lines]


# --- scan_sources ---

def test_scan_keeps_only_context_of_shared_prefix():
    """Only the last context_lines equal lines before the first difference are retained."""
    old = [str(i) for i in range(1000)] + ["x", "tail"]
    new = [str(i) for i in range(1000)] + ["y", "tail"]
    old_buf, new_buf, start = scan_sources(_io(old), _io(new), 3, ExactComparer())
    assert start == 3
    assert old_buf.first_line == new_buf.first_line == 997
    assert _texts(old_buf) == ["997", "998", "999", "x", "tail"]
    assert _texts(new_buf) == ["997", "998", "999", "y", "tail"]


def test_scan_indices_are_absolute():
    """Retained lines carry their position in the input stream."""
    old_buf, _, _ = scan_sources(_io(["a", "b", "c", "d"]), _io(["a", "b", "c", "e"]), 1, ExactComparer())
    assert [line.index for line in old_buf.lines] == [2, 3]


def test_scan_identical_sources_keep_tail_window():
    """Identical sources leave only the final context window in each buffer."""
    lines = ["a", "b", "c", "d", "e"]
    old_buf, new_buf, start = scan_sources(_io(lines), _io(lines), 2, ExactComparer())
    assert start == 2
    assert _texts(old_buf) == _texts(new_buf) == ["d", "e"]
    assert old_buf.first_line == 3


def test_scan_zero_context_retains_nothing_equal():
    """With context_lines=0 no prefix line is kept."""
    old_buf, new_buf, start = scan_sources(_io(["a", "b"]), _io(["a", "c"]), 0, ExactComparer())
    assert start == 0
    assert old_buf.first_line == 1
    assert _texts(old_buf) == ["b"]
    assert _texts(new_buf) == ["c"]


def test_scan_drains_longer_source():
    """When one source ends first, the rest of the other is read in full."""
    old_buf, new_buf, start = scan_sources(_io(["a"]), _io(["a", "b", "c"]), 5, ExactComparer())
    assert start == 1
    assert _texts(old_buf) == ["a"]
    assert _texts(new_buf) == ["a", "b", "c"]


def test_scan_no_eviction_after_divergence():
    """Equal lines after the first difference are all retained."""
    old = ["x"] + ["same"] * 10
    new = ["y"] + ["same"] * 10
    old_buf, new_buf, start = scan_sources(_io(old), _io(new), 1, ExactComparer())
    assert start == 0
    assert len(old_buf) == len(new_buf) == 11


@pytest.mark.parametrize("old,new", [(None, None), (None, io.StringIO("")), (io.StringIO(""), None)])
def test_scan_missing_streams(old, new):
    """None streams scan as empty sources."""
    old_buf, new_buf, start = scan_sources(old, new, 3, ExactComparer())
    assert (len(old_buf), len(new_buf), start) == (0, 0, 0)


def test_scan_uses_comparer():
    """The prefix scan treats comparer-equal lines as shared."""
    old_buf, _, start = scan_sources(_io(["A", "B", "x"]), _io(["a", "b", "y"]), 5, IgnoreCaseComparer())
    assert start == 2
    assert _texts(old_buf) == ["A", "B", "x"]


# --- trim_suffix ---

def test_trim_suffix_bounds_to_context(buffer_of):
    """Trailing equal lines beyond context_lines are dropped from both buffers."""
    old = buffer_of(["x", "s1", "s2", "s3", "s4"])
    new = buffer_of(["y", "s1", "s2", "s3", "s4"])
    end = trim_suffix(old, new, 0, 2, ExactComparer())
    assert end == 2
    assert _texts(old) == ["x", "s1", "s2"]
    assert _texts(new) == ["y", "s1", "s2"]


def test_trim_suffix_short_run(buffer_of):
    """A trailing run shorter than context_lines is counted and kept."""
    old = buffer_of(["x", "s"])
    new = buffer_of(["y", "z", "s"])
    assert trim_suffix(old, new, 0, 3, ExactComparer()) == 1
    assert len(old) == 2 and len(new) == 3


def test_trim_suffix_does_not_cross_prefix(buffer_of):
    """Lines already counted as leading equal are not re-used as trailing."""
    old = buffer_of(["a", "b"])
    new = buffer_of(["a", "b", "a", "b"])
    assert trim_suffix(old, new, 2, 3, ExactComparer()) == 0
    assert len(old) == 2 and len(new) == 4


def test_trim_suffix_zero_context(buffer_of):
    """With context_lines=0 the whole trailing equal run is removed."""
    old = buffer_of(["x", "s", "t"])
    new = buffer_of(["y", "s", "t"])
    assert trim_suffix(old, new, 0, 0, ExactComparer()) == 0
    assert _texts(old) == ["x"]
    assert _texts(new) == ["y"]
