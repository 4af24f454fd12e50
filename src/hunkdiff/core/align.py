"""Edit-script engine: align two line sequences into Equal/Remove/Add runs via difflib"""

import difflib
from typing import Sequence

from hunkdiff.core.compare import LineComparer
from hunkdiff.core.models import EditKind, EditRun, IndexedLine


def _push(script: list[EditRun], kind: EditKind, count: int) -> None:
    """Append a run, merging it into the previous one when the kinds match."""
    if count <= 0:
        return
    if script and script[-1].kind == kind:
        script[-1] = EditRun(kind, script[-1].count + count)
    else:
        script.append(EditRun(kind, count))


def align(
    seq_a: Sequence[IndexedLine],
    seq_b: Sequence[IndexedLine],
    leading: int,
    trailing: int,
    comparer: LineComparer,
    ) -> list[EditRun]:
    """Return the edit script turning seq_a into seq_b.

    The first `leading` and last `trailing` items of both sequences are known to
    be equal; they become Equal runs and only the middle is aligned. Within a
    replaced region all removals precede the additions.
    """
    a_end = len(seq_a) - trailing
    b_end = len(seq_b) - trailing
    if leading < 0 or trailing < 0 or leading > min(a_end, b_end):
        raise ValueError(f"Equal hints out of range: leading={leading}, trailing={trailing}")

    script: list[EditRun] = []
    _push(script, EditKind.equal, leading)

    keys_a = [comparer.key(line.text) for line in seq_a[leading:a_end]]
    keys_b = [comparer.key(line.text) for line in seq_b[leading:b_end]]
    matcher = difflib.SequenceMatcher(None, keys_a, keys_b, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _push(script, EditKind.equal, i2 - i1)
            continue
        _push(script, EditKind.remove, i2 - i1)
        _push(script, EditKind.add, j2 - j1)

    _push(script, EditKind.equal, trailing)
    return script
