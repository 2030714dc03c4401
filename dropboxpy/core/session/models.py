"""
Session state model.

Holds the cookie and authentication flag of one uploader instance.
"""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SessionState:
    """
    Authentication state spanning the requests of one uploader.
    
    Attributes:
        cookie: Last Set-Cookie value observed, sent back verbatim
        authenticated: True once a login has been accepted
    """
    cookie: Optional[str] = None
    authenticated: bool = False
    
    def remember_cookie(self, value: Optional[str]) -> None:
        """Store a Set-Cookie value; the last one observed wins."""
        if value:
            self.cookie = value
    
    def mark_authenticated(self) -> None:
        """Record a successful login."""
        self.authenticated = True
    
    def headers(self) -> Dict[str, str]:
        """Request headers carrying the session cookie."""
        if self.cookie:
            return {'Cookie': self.cookie}
        return {}
