"""Unified diff serialization to a caller-owned text or byte stream"""

import codecs
from typing import IO, Iterable, Iterator

from hunkdiff.core.models import Hunk
from hunkdiff.core.source import is_binary


def render_lines(hunks: Iterable[Hunk], old_label: str = "", new_label: str = "") -> Iterator[str]:
    """Yield output lines (without newlines): optional headers, then each hunk, then a blank line."""
    if old_label:
        yield f"--- {old_label}"
    if new_label:
        yield f"+++ {new_label}"
    for hunk in hunks:
        yield hunk.header()
        for line in hunk.lines:
            yield line.render()
    yield ""


def write_unified(
    output: IO,
    hunks: list[Hunk],
    old_label: str = "",
    new_label: str = "",
    encoding: str = "utf-8",
    ) -> bool:
    """Write hunks in unified format and flush. Writes nothing and returns False if hunks is empty."""
    if not hunks:
        return False
    if is_binary(output):
        # One encoder for the whole output so a BOM is written once
        encoder = codecs.getincrementalencoder(encoding)()
        for line in render_lines(hunks, old_label, new_label):
            output.write(encoder.encode(line + "\n"))
        output.write(encoder.encode("", final=True))
    else:
        for line in render_lines(hunks, old_label, new_label):
            output.write(line + "\n")
    output.flush()
    return True
