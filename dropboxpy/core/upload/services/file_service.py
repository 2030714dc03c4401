"""
File validation and scanning services.

Single Responsibility: Each class handles one specific task.
"""
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from ..multipart import RandomBoundaryStrategy
from ..protocols import BoundaryStrategy
from ...logging import get_logger


class FileValidator:
    """
    Validates files before upload.

    Responsibilities:
    - Check file existence
    - Verify file is not a directory
    """

    def validate(self, file_path: Union[str, Path]) -> Path:
        """
        Validate a file for upload.

        Args:
            file_path: Path to the file

        Returns:
            Validated Path

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")

        return path


class FileScanner:
    """
    Measures an open file and picks a boundary that does not occur in it.

    The file is read block by block, never held in memory as a whole. The
    size comes from the bytes actually read, not from filesystem metadata.
    After scanning, the stream is rewound to its start.
    """

    def __init__(
        self,
        boundary_strategy: Optional[BoundaryStrategy] = None,
        block_size: int = 1024 * 1024
    ):
        """
        Initialize scanner.

        Args:
            boundary_strategy: Boundary candidate generator
            block_size: Read block size in bytes
        """
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self._strategy = boundary_strategy or RandomBoundaryStrategy()
        self.block_size = block_size
        self._logger = get_logger('dropboxpy.upload.file')

    def choose_boundary(self, stream: BinaryIO) -> Tuple[str, int]:
        """
        Pick a boundary absent from the stream content.

        Candidates found in the content are discarded and a new one is
        generated until one is absent.

        Args:
            stream: Seekable binary stream positioned at its start

        Returns:
            Tuple of (boundary, content size in bytes)
        """
        while True:
            boundary = self._strategy.generate()
            size, found = self.scan(stream, boundary.encode('ascii'))
            stream.seek(0)
            if not found:
                self._logger.debug(f"Boundary {boundary} chosen for {size} bytes")
                return boundary, size
            self._logger.debug(f"Boundary {boundary} occurs in file content, regenerating")

    def scan(self, stream: BinaryIO, needle: bytes) -> Tuple[int, bool]:
        """
        Read the stream to its end.

        Args:
            stream: Binary stream
            needle: Byte sequence to look for

        Returns:
            Tuple of (bytes read, whether needle occurs)
        """
        total = 0
        found = False
        overlap = len(needle) - 1
        tail = b''

        while True:
            block = stream.read(self.block_size)
            if not block:
                break
            total += len(block)
            if found:
                continue
            # Keep the last len(needle) - 1 bytes so matches spanning blocks are seen
            window = tail + block
            if needle in window:
                found = True
            tail = window[-overlap:] if overlap > 0 else b''

        return total, found
