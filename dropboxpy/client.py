"""
DropboxUploader - Synchronous upload client for Dropbox.

Logs in through the HTML login form and uploads files through the web
upload form, carrying the session cookie across requests.

Example:
    >>> with DropboxUploader("email@example.com", "MyPassword") as dropbox:
    ...     dropbox.upload("localfile.txt", "/")
"""
from dataclasses import replace
from typing import Callable, Dict, Optional
from urllib.parse import urlencode, urljoin

from .core.api import HTTPResponse, HTTPTransport, RequestsTransport, UploaderConfig, SSLConfig
from .core.exceptions import (
    AuthenticationError,
    LoginTokenNotFoundError,
    TokenNotFoundError,
    UploadError
)
from .core.logging import get_logger
from .core.session import SessionState
from .core.upload import (
    FileScanner,
    FileValidator,
    MultipartBody,
    SequentialByteSource,
    TokenExtractor,
    UploadProgress,
    build_multipart,
    extract_token
)


class DropboxUploader:
    """
    Upload session against the Dropbox web interface.

    The session starts unauthenticated. ``upload()`` logs in on first use;
    once a login is accepted the instance stays authenticated for its
    lifetime. A single instance must not be shared between threads.
    """

    def __init__(
        self,
        email: str,
        password: str,
        ca_path: Optional[str] = None,
        *,
        config: Optional[UploaderConfig] = None,
        transport: Optional[HTTPTransport] = None,
        token_extractor: TokenExtractor = extract_token,
        scanner: Optional[FileScanner] = None
    ):
        """
        Initialize uploader.

        Args:
            email: Account email
            password: Account password
            ca_path: Directory (or bundle) of CA certificates to verify against
            config: Optional uploader configuration
            transport: HTTP transport (requests-backed by default)
            token_extractor: Function pulling form tokens out of HTML
            scanner: File scanner choosing boundaries
        """
        self._config = config or UploaderConfig.default()
        if ca_path:
            self._config = replace(self._config, ssl=SSLConfig(ca_path=ca_path))

        self._email = email
        self._password = password
        self._transport = transport or RequestsTransport(self._config)
        self._extract_token = token_extractor
        self._validator = FileValidator()
        self._scanner = scanner or FileScanner()
        self._state = SessionState()
        self._logger = get_logger('dropboxpy.client')

    @property
    def config(self) -> UploaderConfig:
        return self._config

    @property
    def state(self) -> SessionState:
        """Session cookie and authentication flag."""
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state.authenticated

    # Requests

    def _send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data=None
    ) -> HTTPResponse:
        request_headers = self._state.headers()
        if headers:
            request_headers.update(headers)

        response = self._transport.request(method, url, headers=request_headers, data=data)
        self._state.remember_cookie(response.set_cookie)
        return response

    def _get(self, url: str) -> HTTPResponse:
        return self._send('GET', url)

    def _post_form(self, url: str, params: Dict[str, str]) -> HTTPResponse:
        return self._send(
            'POST',
            url,
            headers={'Content-Type': 'application/x-www-form-urlencoded'},
            data=urlencode(params),
        )

    def _post_multipart(self, url: str, body: MultipartBody, source: SequentialByteSource) -> HTTPResponse:
        return self._send(
            'POST',
            url,
            headers={
                'Content-Type': body.content_type,
                'Content-Length': str(source.size()),
            },
            data=source,
        )

    def _fetch_token(self, page_url: str, form_action: str) -> Optional[str]:
        html = self._get(page_url).text
        return self._extract_token(html, form_action)

    def _is_home(self, location: Optional[str]) -> bool:
        if not location:
            return False
        base = self._config.login_url
        return urljoin(base, location) == urljoin(base, self._config.home_location)

    # Operations

    def login(self) -> None:
        """
        Log in through the login form.

        Raises:
            LoginTokenNotFoundError: If the login page carries no token
            AuthenticationError: If the submission is not redirected home
        """
        config = self._config
        token = self._fetch_token(config.login_url, config.login_action)
        if not token:
            raise LoginTokenNotFoundError(
                f"token not found on {config.login_action}",
                action=config.login_action
            )

        response = self._post_form(config.login_url, {
            'login_email': self._email,
            'login_password': self._password,
            't': token,
        })

        if not self._is_home(response.location):
            raise AuthenticationError(
                f"login failed {response.status}:{response.reason}",
                status=response.status,
                reason=response.reason
            )

        self._state.mark_authenticated()
        self._logger.info(f"Logged in as {self._email}")

    def upload(
        self,
        file_path: str,
        remote_dir: str,
        progress_callback: Optional[Callable[[UploadProgress], None]] = None
    ) -> bool:
        """
        Upload a local file into a remote directory.

        Args:
            file_path: Local file path
            remote_dir: Target remote directory
            progress_callback: Called with UploadProgress while the body is sent

        Returns:
            True on success

        Raises:
            AuthenticationError: If the implicit login fails
            TokenNotFoundError: If the upload page carries no upload token
            UploadError: If the upload is answered outside 2xx/3xx
            FileNotFoundError: If the file doesn't exist
            ValueError: If the path is not a regular file
        """
        if not self._state.authenticated:
            self.login()

        config = self._config
        token = self._fetch_token(config.upload_page_url, config.upload_action)
        if not token:
            raise TokenNotFoundError(
                f"token not found on {config.upload_action}",
                action=config.upload_action
            )

        path = self._validator.validate(file_path)
        stream = open(path, 'rb')
        try:
            boundary, file_size = self._scanner.choose_boundary(stream)
            body = build_multipart(
                {'dest': remote_dir, 't': token},
                str(path),
                stream,
                file_size,
                boundary
            )
            source = SequentialByteSource(
                body.pre,
                (body.stream, body.file_size),
                body.post,
                progress_callback=progress_callback,
                chunk_size=config.chunk_size
            )
            self._logger.info(f"Uploading {path.name} ({file_size} bytes) to {remote_dir}")
            response = self._post_multipart(config.upload_url, body, source)
        finally:
            # Already closed by the source once drained
            stream.close()

        if not response.is_success:
            raise UploadError(
                f"upload failed {response.status}:{response.reason}",
                status=response.status,
                reason=response.reason
            )

        self._logger.info(f"Upload finished: {path.name} -> {remote_dir}")
        return True

    def close(self) -> None:
        """Close the transport."""
        self._transport.close()

    def __enter__(self) -> 'DropboxUploader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


# The session/token protocol under its generic name
UploadSession = DropboxUploader
