"""
Custom exceptions for dropboxpy.

Every failure of the login and upload flow surfaces as one of these classes.
"""
from typing import Optional


class DropboxException(Exception):
    """Base exception for all dropboxpy errors."""
    
    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        reason: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            status: HTTP status code of the offending response (if any)
            reason: HTTP reason phrase of the offending response (if any)
        """
        self.status = status
        self.reason = reason
        super().__init__(message)


class AuthenticationError(DropboxException):
    """Raised when the login form submission is not accepted."""
    pass


class TokenNotFoundError(DropboxException):
    """Raised when a form's hidden token cannot be found in served HTML."""
    
    def __init__(self, message: str, action: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            action: Form action the token was looked up for
        """
        self.action = action
        super().__init__(message)


class LoginTokenNotFoundError(TokenNotFoundError, AuthenticationError):
    """Raised when the login page carries no login token."""
    pass


class UploadError(DropboxException):
    """Raised when the upload request ends outside the 2xx/3xx range."""
    pass
