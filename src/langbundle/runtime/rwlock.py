"""Readers-writer lock guarding a Bundle's catalog and language settings.

Readers are translations and setting queries (translate, get_lang, languages).
Writers are loads and setting changes (load_*, set_lang, set_fallback_lang).

Properties:
- Many readers at once, or exactly one writer
- Writer preference: once a writer waits, new readers queue behind it, so a
  steady stream of translations cannot starve a reload
- Reentrant reads: a thread already reading may read again
- No read-to-write upgrade, no write-to-read downgrade, no nested writes;
  each raises RuntimeError instead of deadlocking

Acquisition blocks until granted. Every critical section in langbundle is a
short in-memory operation, so there is no timeout parameter.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared
        >>> with lock.write():
        ...     pass  # exclusive
        >>> with lock.read(), lock.read():
        ...     pass  # same thread may nest reads
    """

    __slots__ = (
        "_condition",
        "_reader_depth",
        "_readers",
        "_waiting_writers",
        "_writer",
    )

    def __init__(self) -> None:
        """Initialize an unlocked lock."""
        self._condition = threading.Condition(threading.Lock())
        # Distinct threads currently reading
        self._readers: int = 0
        # Thread ident -> nesting depth of its read acquisitions
        self._reader_depth: dict[int, int] = {}
        # Ident of the thread holding the write lock
        self._writer: int | None = None
        self._waiting_writers: int = 0

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the lock in shared mode for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds the write lock
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the lock in exclusive mode for the duration of the block.

        Raises:
            RuntimeError: If the calling thread already reads or writes
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._reader_depth.get(me)
            if depth is not None:
                self._reader_depth[me] = depth + 1
                return

            if self._writer == me:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock first."
                )
                raise RuntimeError(msg)

            while self._writer is not None or self._waiting_writers > 0:
                self._condition.wait()

            self._readers += 1
            self._reader_depth[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._reader_depth.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)

            if depth > 1:
                self._reader_depth[me] = depth - 1
                return

            del self._reader_depth[me]
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def _acquire_write(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if me in self._reader_depth:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release the read lock first."
                )
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock."
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                while self._readers > 0 or self._writer is not None:
                    self._condition.wait()
                self._writer = me
            finally:
                self._waiting_writers -= 1

    def _release_write(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if self._writer != me:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            # Wake both queued writers and readers; readers re-check
            # _waiting_writers, so writer preference still holds.
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read locks."""
        with self._condition:
            return self._readers

    @property
    def writer_active(self) -> bool:
        """True if any thread currently holds the write lock."""
        with self._condition:
            return self._writer is not None
