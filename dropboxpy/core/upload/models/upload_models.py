"""
Data models for upload module.
"""
from dataclasses import dataclass
from typing import BinaryIO


@dataclass
class UploadProgress:
    """
    Upload progress information.

    Attributes:
        total_bytes: Size of the whole request body
        bytes_sent: Bytes handed to the transport so far
    """
    total_bytes: int
    bytes_sent: int = 0

    @property
    def percentage(self) -> float:
        """Returns upload progress as percentage."""
        if self.total_bytes == 0:
            return 100.0
        return (self.bytes_sent / self.total_bytes) * 100

    @property
    def is_complete(self) -> bool:
        """Returns True if the whole body has been sent."""
        return self.bytes_sent >= self.total_bytes


@dataclass
class MultipartBody:
    """
    A multipart/form-data body split around one file part.

    ``pre`` holds every field part plus the file part header, ``post``
    the line break and closing delimiter. The file itself stays a stream.

    Attributes:
        boundary: Delimiter absent from the file content
        pre: Bytes sent before the file
        stream: Open binary file, positioned at its start
        file_size: Exact number of bytes the stream yields
        post: Bytes sent after the file
    """
    boundary: str
    pre: bytes
    stream: BinaryIO
    file_size: int
    post: bytes

    @property
    def content_type(self) -> str:
        """Content-Type header value for this body."""
        return f"multipart/form-data; boundary={self.boundary}"

    @property
    def size(self) -> int:
        """Total body length."""
        return len(self.pre) + self.file_size + len(self.post)
