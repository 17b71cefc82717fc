"""In-memory storage backend for tests and ephemeral stores."""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.errors import BackendIOError


@dataclass
class InMemoryBackend:
    """Hold the blob in a bytes attribute.

    Each test should create its own backend instance to avoid cross-test
    pollution. Failure switches simulate an unreliable medium.

    Attributes:
        data: Current blob; ``b""`` means never written.
        writes: Number of successful ``write_all`` calls.
        fail_reads: When True, ``read_all`` raises BackendIOError.
        fail_writes: When True, ``write_all`` raises BackendIOError and keeps ``data``.

    Example:
        >>> backend = InMemoryBackend()
        >>> backend.read_all()
        b''
        >>> backend.write_all(b"abc")
        >>> backend.data, backend.writes
        (b'abc', 1)
    """

    data: bytes = b""
    writes: int = 0
    fail_reads: bool = False
    fail_writes: bool = False

    def read_all(self) -> bytes:
        if self.fail_reads:
            raise BackendIOError("Simulated read failure")
        return self.data

    def write_all(self, data: bytes) -> None:
        if self.fail_writes:
            raise BackendIOError("Simulated write failure")
        self.data = bytes(data)
        self.writes += 1

    def exists(self) -> bool:
        return bool(self.data)

    def delete(self) -> bool:
        """Drop the blob; report whether one was held."""
        if self.fail_writes:
            raise BackendIOError("Simulated delete failure")
        existed = bool(self.data)
        self.data = b""
        return existed

    def clear(self) -> None:
        """Forget the stored blob and reset counters and failure switches."""
        self.data = b""
        self.writes = 0
        self.fail_reads = False
        self.fail_writes = False


__all__ = ["InMemoryBackend"]
