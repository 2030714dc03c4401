"""
dropboxpy - Upload files to Dropbox through its web forms.

Usage:
    >>> from dropboxpy import DropboxUploader
    >>> 
    >>> with DropboxUploader("email@example.com", "MyPassword") as dropbox:
    ...     dropbox.upload("localfile.txt", "/")
"""
import logging
from .client import DropboxUploader, UploadSession

# Configuration and transport
from .core.api import (
    UploaderConfig,
    SSLConfig,
    HTTPTransport,
    HTTPResponse,
    RequestsTransport
)

# Errors
from .core.exceptions import (
    DropboxException,
    AuthenticationError,
    TokenNotFoundError,
    LoginTokenNotFoundError,
    UploadError
)

# Building blocks
from .core.session import SessionState
from .core.upload import SequentialByteSource, UploadProgress, extract_token

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for dropboxpy modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'dropboxpy',
        'dropboxpy.client',
        'dropboxpy.transport',
        'dropboxpy.upload.stream',
        'dropboxpy.upload.file',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'DropboxUploader',
    'UploadSession',
    'UploaderConfig',
    'SSLConfig',
    'HTTPTransport',
    'HTTPResponse',
    'RequestsTransport',
    'DropboxException',
    'AuthenticationError',
    'TokenNotFoundError',
    'LoginTokenNotFoundError',
    'UploadError',
    'SessionState',
    'SequentialByteSource',
    'UploadProgress',
    'extract_token',
    'setup_logging',
]
