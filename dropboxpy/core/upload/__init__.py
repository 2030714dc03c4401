"""
Upload module.

Multipart framing, form token extraction and the sequential byte source
the request body is streamed from.
"""
from .stream import SequentialByteSource
from .token import extract_token
from .multipart import RandomBoundaryStrategy, build_multipart
from .models import UploadProgress, MultipartBody
from .services import FileValidator, FileScanner
from .protocols import BoundaryStrategy, ReadableStream, TokenExtractor

__all__ = [
    # Main classes
    'SequentialByteSource',
    'extract_token',
    'build_multipart',
    'RandomBoundaryStrategy',
    'FileValidator',
    'FileScanner',
    
    # Models
    'UploadProgress',
    'MultipartBody',
    
    # Protocols
    'BoundaryStrategy',
    'ReadableStream',
    'TokenExtractor',
]
