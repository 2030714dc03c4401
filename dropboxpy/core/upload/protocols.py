"""
Protocol definitions for upload module.

Defines the seams the upload flow is assembled from.
"""
from typing import Optional, Protocol


class ReadableStream(Protocol):
    """Protocol for binary streams fed into a SequentialByteSource."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining when negative)."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...


class BoundaryStrategy(Protocol):
    """
    Protocol for multipart boundary generation.

    Each call must return a fresh candidate; the caller rejects candidates
    found in the file content and asks again.
    """

    def generate(self) -> str:
        """
        Generate a boundary candidate.

        Returns:
            ASCII boundary string
        """
        ...


class TokenExtractor(Protocol):
    """Protocol for pulling a form's hidden token out of HTML."""

    def __call__(self, html: str, form_action: str) -> Optional[str]:
        """
        Extract the token of the form submitting to ``form_action``.

        Returns:
            Token value, or None when the form or its field is missing
        """
        ...
