"""
Multipart/form-data framing.

Builds the text that surrounds a streamed file part and generates
boundaries that are absent from the file content.
"""
import os
from typing import BinaryIO, Dict

from Crypto.Random import get_random_bytes

from .models import MultipartBody

CRLF = "\r\n"


class RandomBoundaryStrategy:
    """
    Random boundary generator.

    Boundaries are ``prefix`` followed by the hex form of ``nbytes`` random
    bytes.
    """

    def __init__(self, prefix: str = "DropboxPy", nbytes: int = 8):
        if nbytes <= 0:
            raise ValueError("nbytes must be positive")
        self.prefix = prefix
        self.nbytes = nbytes

    def generate(self) -> str:
        """Generate a boundary candidate."""
        return f"{self.prefix}{get_random_bytes(self.nbytes).hex()}"


def encode_field(boundary: str, name: str, value: str) -> str:
    """Encode one plain form field part, including its trailing CRLF."""
    return (
        f"--{boundary}{CRLF}"
        f'Content-Disposition: form-data; name="{name}"{CRLF}'
        f"{CRLF}"
        f"{value}{CRLF}"
    )


def encode_file_header(
    boundary: str,
    filename: str,
    field_name: str = "file",
    content_type: str = "application/octet-stream"
) -> str:
    """Encode the header of the file part, up to and including the blank line."""
    return (
        f"--{boundary}{CRLF}"
        f'Content-Disposition: form-data; name="{field_name}"; filename="{filename}"{CRLF}'
        f"Content-Type: {content_type}{CRLF}"
        f"{CRLF}"
    )


def build_multipart(
    fields: Dict[str, str],
    file_path: str,
    stream: BinaryIO,
    file_size: int,
    boundary: str
) -> MultipartBody:
    """
    Frame ``stream`` as the ``file`` part after the given fields.

    Fields are emitted in the mapping's iteration order.

    Args:
        fields: Plain form fields
        file_path: Local path; only its base name is sent
        stream: Open file positioned at its start
        file_size: Exact number of bytes in the file
        boundary: Boundary absent from the file content

    Returns:
        MultipartBody ready to be wrapped in a SequentialByteSource
    """
    pre = "".join(encode_field(boundary, name, value) for name, value in fields.items())
    pre += encode_file_header(boundary, os.path.basename(file_path))

    post = f"{CRLF}--{boundary}--{CRLF}"

    return MultipartBody(
        boundary=boundary,
        pre=pre.encode("utf-8"),
        stream=stream,
        file_size=file_size,
        post=post.encode("utf-8"),
    )
