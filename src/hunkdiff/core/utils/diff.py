"""String-level helpers over the streaming diff: one-shot unified diffs and hunk stats"""

import io

from hunkdiff.core.compare import get_comparer
from hunkdiff.core.models import Hunk, SourceInfo
from hunkdiff.core.pipeline import create


def diff_summary(hunks: list[Hunk]) -> dict[str, int]:
    """Return added/deleted/unchanged line counts across hunks (unchanged = context shown)."""
    added = deleted = unchanged = 0

    for hunk in hunks:
        for line in hunk.lines:
            if line.marker == "+":
                added += 1
            elif line.marker == "-":
                deleted += 1
            else:
                unchanged += 1

    return {"added": added, "deleted": deleted, "unchanged": unchanged}


def unified_diff(
    old: str,
    new: str,
    from_label: str = "",
    to_label: str = "",
    context: int = 3,
    comparison: str = "exact",
    ) -> str:
    """Return the unified diff of old -> new as one string. Empty string if identical.

    Pass labels (e.g. 'a/file.txt') to get the ---/+++ header lines.
    """
    out = io.StringIO()
    create(
        SourceInfo(io.StringIO(old, newline=None), from_label),
        SourceInfo(io.StringIO(new, newline=None), to_label),
        out,
        context,
        comparer=get_comparer(comparison),
    )
    return out.getvalue()
