"""Upload services."""
from .file_service import FileValidator, FileScanner

__all__ = [
    'FileValidator',
    'FileScanner',
]
