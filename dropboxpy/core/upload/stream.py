"""
Sequential multi-source byte stream.

Concatenates in-memory buffers and sized streams into one read-only,
forward-only stream with a length known before the first read, so it can
be handed to an HTTP client as a request body with a Content-Length.
"""
import io
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .models import UploadProgress
from .protocols import ReadableStream
from ..logging import get_logger


Part = Union[bytes, str, Tuple[ReadableStream, int]]

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class _Entry:
    """One producer of the sequence with the bytes it still owes."""
    stream: ReadableStream
    remaining: int
    in_memory: bool


class SequentialByteSource:
    """
    Read-only concatenation of buffers and ``(stream, size)`` pairs.

    Entries are consumed front to back and each is closed exactly once, as
    soon as it has produced its declared size or runs dry. A retired entry is
    never read again.

    Example:
        >>> source = SequentialByteSource(b"AB", (io.BytesIO(b"CDE"), 3), b"FG")
        >>> source.size()
        7
        >>> source.read(2), source.read(2), source.read(2), source.read(2)
        (b'AB', b'CD', b'EF', b'G')
        >>> source.read(2)
        b''
    """

    def __init__(
        self,
        *parts: Part,
        progress_callback: Optional[Callable[[UploadProgress], None]] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE
    ):
        """
        Build the sequence.

        Args:
            *parts: bytes / str buffers or (stream, declared size) tuples
            progress_callback: Called with an UploadProgress after each read
            chunk_size: Block size used when iterating

        Raises:
            TypeError: If a part is neither a buffer nor a (stream, size) pair
            ValueError: If a declared size is negative
        """
        self._entries: List[_Entry] = []
        for part in parts:
            self._entries.append(self._make_entry(part))
        self._index = 0
        self._total = sum(entry.remaining for entry in self._entries)
        self._progress = UploadProgress(total_bytes=self._total)
        self._progress_callback = progress_callback
        self.chunk_size = chunk_size
        self._logger = get_logger('dropboxpy.upload.stream')

    @staticmethod
    def _make_entry(part: Part) -> _Entry:
        if isinstance(part, str):
            part = part.encode('utf-8')
        if isinstance(part, (bytes, bytearray)):
            return _Entry(io.BytesIO(bytes(part)), len(part), in_memory=True)
        if isinstance(part, tuple) and len(part) == 2:
            stream, size = part
            if size < 0:
                raise ValueError(f"Declared size must not be negative: {size}")
            return _Entry(stream, size, in_memory=False)
        raise TypeError(f"Unsupported part: {type(part).__name__}")

    def size(self) -> int:
        """Total declared size, fixed at construction."""
        return self._total

    length = size

    def __len__(self) -> int:
        return self._total

    @property
    def closed(self) -> bool:
        """True once every entry has been retired."""
        return self._index >= len(self._entries)

    def readable(self) -> bool:
        return True

    def _retire(self) -> None:
        entry = self._entries[self._index]
        if entry.remaining > 0 and not entry.in_memory:
            self._logger.warning(
                f"Stream ended {entry.remaining} bytes short of its declared size"
            )
        entry.stream.close()
        self._index += 1

    def _advance(self, count: int) -> None:
        if not count:
            return
        self._progress.bytes_sent += count
        if self._progress_callback:
            self._progress_callback(self._progress)

    def read(self, max_bytes: Optional[int] = None) -> bytes:
        """
        Read from the sequence.

        Args:
            max_bytes: Upper bound on returned bytes; None or negative drains
                every remaining entry

        Returns:
            Data, or b"" once every entry has been retired
        """
        if self.closed:
            return b''
        if max_bytes is None or max_bytes < 0:
            return self._read_all()

        chunks = []
        needed = max_bytes
        while needed > 0 and not self.closed:
            entry = self._entries[self._index]
            wanted = min(needed, entry.remaining)
            data = entry.stream.read(wanted) if wanted else b''
            if data:
                chunks.append(data)
                entry.remaining -= len(data)
                needed -= len(data)
            if len(data) < wanted or entry.remaining == 0:
                self._retire()

        result = b''.join(chunks)
        self._advance(len(result))
        return result

    def _read_all(self) -> bytes:
        chunks = []
        while not self.closed:
            entry = self._entries[self._index]
            data = entry.stream.read(entry.remaining) if entry.remaining else b''
            if data:
                chunks.append(data)
                entry.remaining -= len(data)
            self._retire()

        result = b''.join(chunks)
        self._advance(len(result))
        return result

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(self.chunk_size)
            if not chunk:
                break
            yield chunk

    def close(self) -> None:
        """Retire every entry that has not been consumed yet."""
        while not self.closed:
            entry = self._entries[self._index]
            entry.stream.close()
            self._index += 1

    def __enter__(self) -> 'SequentialByteSource':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
