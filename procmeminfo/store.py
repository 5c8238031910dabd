"""
procmeminfo.store
AUTHOR: carter-vin

Attribute cache shared between the refresher and metric readers

- writes: one exclusive lock hold per merge -> readers never see half a merge
- reads: shared, any number of concurrent exporters
- entries are only added or overwritten, never removed
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, MutableMapping, Optional

from procmeminfo.mapping import ATTRIBUTE_NAMES


class ReadWriteLock:
    """
    Many readers or one writer

    Waiting writers block new readers so refreshes are not starved by a busy exporter.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class AttributeStore:
    """
    Last known value per mapped attribute name

    Only keys present in ATTRIBUTE_NAMES are ever stored.
    """

    def __init__(self) -> None:
        self._attrs: dict[str, Any] = {}
        self._lock = ReadWriteLock()

    def merge_from_raw(self, raw: Optional[Mapping[str, str]]) -> None:
        """
        Merge raw file keys, translated through ATTRIBUTE_NAMES; unmapped keys are dropped
        """
        if not raw:
            return

        with self._lock.write_locked():
            for key, value in raw.items():
                attr = ATTRIBUTE_NAMES.get(key)
                if attr is not None:
                    self._attrs[attr] = value

    def export_into(self, target: Optional[MutableMapping[str, Any]]) -> None:
        """
        Copy cached attributes into target in place

        Existing keys with the same name are overwritten, others are left alone.
        """
        if target is None:
            return

        with self._lock.read_locked():
            for attr, value in self._attrs.items():
                target[attr] = value

    def snapshot(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {}
        self.export_into(attrs)
        return attrs

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._attrs)
