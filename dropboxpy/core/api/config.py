"""
Uploader configuration module.

Endpoints, TLS and transport settings for the upload client.
"""
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.

    When ``ca_path`` is given, peers are verified against the CA files in
    that directory (or bundle) instead of the default trust store.
    """
    verify: bool = True
    ca_path: Optional[str] = None

    def verify_value(self) -> Union[bool, str]:
        """Value for the ``verify`` argument of requests."""
        if not self.verify:
            return False
        if self.ca_path:
            return self.ca_path
        return True


@dataclass
class UploaderConfig:
    """
    Complete uploader configuration.

    Attributes:
        login_url: Page serving the login form, also its submission target
        login_action: ``action`` attribute of the login form
        home_location: Redirect target that marks a successful login
        upload_page_url: Page serving the upload form
        upload_url: Upload form submission target (also its ``action``)
        user_agent: User-Agent header sent with every request
        ssl: TLS settings
        timeout: Per-request timeout in seconds (None keeps the transport default)
        chunk_size: Block size used when streaming the request body
    """
    login_url: str = 'https://www.dropbox.com/login'
    login_action: str = '/login'
    home_location: str = '/home'
    upload_page_url: str = 'https://www.dropbox.com/home?upload=1'
    upload_url: str = 'https://dl-web.dropbox.com/upload'

    user_agent: str = 'dropboxpy/1.0.0'

    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: Optional[float] = None

    chunk_size: int = 64 * 1024

    @classmethod
    def default(cls) -> 'UploaderConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_ca_path(cls, ca_path: str, **kwargs) -> 'UploaderConfig':
        """Create configuration verifying peers against ``ca_path``."""
        return cls(ssl=SSLConfig(ca_path=ca_path), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'UploaderConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False), **kwargs)

    @property
    def upload_action(self) -> str:
        """``action`` attribute of the upload form."""
        return self.upload_url
