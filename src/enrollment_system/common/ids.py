from __future__ import annotations

from typing import Iterable, Mapping


def next_id(records: Iterable[Mapping]) -> int:
    """Next sequential id for a collection: max existing id + 1, or 1 when empty.

    Not safe on its own: call it only inside a store transform so the
    read-allocate-write sequence is serialized.
    """
    return max((int(r["id"]) for r in records), default=0) + 1
