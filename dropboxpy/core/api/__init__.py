"""HTTP transport and configuration."""
from .config import UploaderConfig, SSLConfig
from .session_factory import SessionFactory
from .transport import HTTPTransport, HTTPResponse, RequestsTransport

__all__ = [
    # Transport
    'HTTPTransport',
    'HTTPResponse',
    'RequestsTransport',
    'SessionFactory',
    
    # Configuration
    'UploaderConfig',
    'SSLConfig',
]
