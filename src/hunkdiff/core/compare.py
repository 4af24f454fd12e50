"""Line comparison strategies used by the prefix scan, suffix trim, and aligner"""

import re
from typing import Hashable


_WS_RE = re.compile(r'\s+')


class LineComparer:
    """Exact textual equality. Subclasses override `key` to normalize lines first.

    The aligner matches on `key(text)`, so `equal` must stay consistent with it.
    """
    name = "exact"

    def key(self, text: str) -> Hashable:
        return text

    def equal(self, a: str, b: str) -> bool:
        return self.key(a) == self.key(b)


class ExactComparer(LineComparer):
    pass


class IgnoreCaseComparer(LineComparer):
    name = "ignore_case"

    def key(self, text: str) -> Hashable:
        return text.casefold()


class IgnoreWhitespaceComparer(LineComparer):
    """Treats runs of whitespace as one space and ignores leading/trailing whitespace."""
    name = "ignore_whitespace"

    def key(self, text: str) -> Hashable:
        return _WS_RE.sub(' ', text).strip()


COMPARERS: dict[str, type[LineComparer]] = {
    cls.name: cls for cls in (ExactComparer, IgnoreCaseComparer, IgnoreWhitespaceComparer)
}


def get_comparer(name: str) -> LineComparer:
    """Return a comparer instance by name. Raises ValueError for unknown names."""
    try:
        return COMPARERS[name]()
    except KeyError:
        raise ValueError(f"Unknown comparison '{name}'; expected one of {sorted(COMPARERS)}") from None
