"""Session state for the upload client."""
from .models import SessionState

__all__ = [
    'SessionState',
]
