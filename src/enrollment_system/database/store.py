from __future__ import annotations

import copy
import json
import logging
import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, ContextManager, Dict, Iterator, List, Mapping, Optional, Protocol, Sequence, TypeVar

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Document = Dict[str, List[Dict[str, Any]]]


class DocumentStore(Protocol):
    """Transactional store over named collections of JSON records.

    Note (DIP): repositories depend on this interface, never on the file layout.
    """

    def transaction(self) -> ContextManager[Document]:
        raise NotImplementedError

    def read(self, collection: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def update(self, collection: str, transform: Callable[[List[Dict[str, Any]]], T]) -> T:
        raise NotImplementedError

    def ensure_defaults(self, defaults: Mapping[str, Sequence[Mapping[str, Any]]]) -> List[str]:
        raise NotImplementedError


class JsonDocumentStore(DocumentStore):
    """Single JSON document holding every collection.

    Every call goes back to the backing file (no cached snapshot) and every
    mutation runs read -> transform -> write under one lock. ``path=None``
    keeps the document in memory.
    """

    def __init__(self, path: Optional[str | Path] = None):
        self._path = Path(path) if path is not None else None
        self._memory: Document = {}
        self._lock = threading.RLock()

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def _load(self) -> Document:
        if self._path is None:
            return copy.deepcopy(self._memory)

        try:
            if not self._path.exists():
                return {}
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Cannot read data file {self._path}: {e}") from e

        if not raw.strip():
            return {}
        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupted data file {self._path}: {e}") from e
        if not isinstance(doc, dict):
            raise StoreError(f"Corrupted data file {self._path}: top-level value must be an object")
        return doc

    def _dump(self, doc: Document) -> None:
        if self._path is None:
            self._memory = copy.deepcopy(doc)
            return

        # Write to a sibling temp file then swap, so readers never see a partial document.
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except OSError as e:
            raise StoreError(f"Cannot write data file {self._path}: {e}") from e

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Exclusive read-modify-write of the whole document.

        Commits when the block exits normally; an exception leaves the
        backing medium untouched.
        """
        with self._lock:
            doc = self._load()
            yield doc
            self._dump(doc)

    def read(self, collection: str) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._load().get(collection, []))

    def update(self, collection: str, transform: Callable[[List[Dict[str, Any]]], T]) -> T:
        with self.transaction() as doc:
            records = doc.setdefault(collection, [])
            return transform(records)

    def ensure_defaults(self, defaults: Mapping[str, Sequence[Mapping[str, Any]]]) -> List[str]:
        """Write default records for collections that are absent.

        Returns the names of the collections that were seeded.
        """
        seeded: List[str] = []
        with self.transaction() as doc:
            for name, records in defaults.items():
                if name not in doc:
                    doc[name] = [dict(r) for r in records]
                    seeded.append(name)
        if seeded:
            logger.info("Seeded collections %s", ", ".join(seeded))
        return seeded
