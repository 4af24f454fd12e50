"""Prefix scan and suffix trim: keep only the lines the aligner and hunks can need"""

from collections import deque
from typing import IO, Optional

from hunkdiff.core.compare import LineComparer
from hunkdiff.core.models import LineBuffer
from hunkdiff.core.source import iter_lines


def scan_sources(
    old: Optional[IO],
    new: Optional[IO],
    context_lines: int,
    comparer: LineComparer,
    encoding: str = "utf-8",
    ) -> tuple[LineBuffer, LineBuffer, int]:
    """Read both streams into buffers, dropping all but the last context_lines of the shared prefix.

    Returns (old_buffer, new_buffer, start) where start is the number of retained
    leading lines known to be equal. Both buffers share the same first_line.
    """
    old_lines = iter_lines(old, encoding)
    new_lines = iter_lines(new, encoding)
    old_window: deque[str] = deque(maxlen=context_lines)
    new_window: deque[str] = deque(maxlen=context_lines)
    matched = 0

    while True:
        line1 = next(old_lines, None)
        line2 = next(new_lines, None)
        if line1 is None or line2 is None or not comparer.equal(line1, line2):
            break
        old_window.append(line1)
        new_window.append(line2)
        matched += 1

    first_line = matched - len(old_window)
    old_buf, new_buf = LineBuffer(first_line), LineBuffer(first_line)
    for text in old_window:
        old_buf.append(text)
    for text in new_window:
        new_buf.append(text)

    # Past the first difference every line goes to the aligner
    if line1 is not None:
        old_buf.append(line1)
        for text in old_lines:
            old_buf.append(text)
    if line2 is not None:
        new_buf.append(line2)
        for text in new_lines:
            new_buf.append(text)

    return old_buf, new_buf, len(old_window)


def trim_suffix(
    old_buf: LineBuffer,
    new_buf: LineBuffer,
    start: int,
    context_lines: int,
    comparer: LineComparer,
    ) -> int:
    """Count up to context_lines trailing equal lines and delete any equal lines beyond that.

    Returns end, the number of trailing lines left in both buffers that are known equal.
    """
    end = remove = 0
    for i in range(1, min(len(old_buf), len(new_buf)) - start + 1):
        if not comparer.equal(old_buf.lines[-i].text, new_buf.lines[-i].text):
            break
        if end == context_lines:
            remove += 1
        else:
            end += 1

    if remove:
        del old_buf.lines[-remove:]
        del new_buf.lines[-remove:]
    return end
