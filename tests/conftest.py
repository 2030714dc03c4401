"""Pytest fixtures for dropboxpy tests."""
from typing import List, Optional

import pytest
from requests.structures import CaseInsensitiveDict

from dropboxpy.core.api import HTTPResponse, UploaderConfig


LOGIN_PAGE = """
<html><body>
<form action="/login" method="post" id="login-form">
    <input type="hidden" name="t" value="{token}" />
    <input type="text" name="login_email" />
    <input type="password" name="login_password" />
</form>
</body></html>
"""

UPLOAD_PAGE = """
<html><body>
<form action="/search" method="get">
    <input type="hidden" name="t" value="WRONG" />
</form>
<form action="https://dl-web.dropbox.com/upload" method="post" enctype="multipart/form-data">
    <input type="hidden" name="dest" value="" />
    <input type="hidden" name="t" value="{token}" />
    <input type="file" name="file" />
</form>
</body></html>
"""


def make_response(
    status: int = 200,
    reason: str = 'OK',
    headers: Optional[dict] = None,
    text: str = ''
) -> HTTPResponse:
    """Build an HTTPResponse with case-insensitive headers."""
    return HTTPResponse(
        status=status,
        reason=reason,
        headers=CaseInsensitiveDict(headers or {}),
        text=text
    )


class RecordedRequest:
    """One request seen by StubTransport, with any streamed body drained."""

    def __init__(self, method, url, headers, data):
        self.method = method
        self.url = url
        self.headers = dict(headers or {})
        if hasattr(data, 'read'):
            self.declared_length = len(data)
            self.body = data.read()
        elif isinstance(data, str):
            self.declared_length = None
            self.body = data.encode('utf-8')
        else:
            self.declared_length = None
            self.body = data


class StubTransport:
    """
    HTTP transport answering like the Dropbox web forms.

    Serves a login page with ``login_token``, redirects to ``login_location``
    on login submission, serves an upload page with ``upload_token`` and
    answers the upload with ``upload_status``.
    """

    def __init__(
        self,
        config: Optional[UploaderConfig] = None,
        login_token: Optional[str] = 'T1',
        upload_token: Optional[str] = 'T2',
        login_location: str = '/home',
        upload_status: int = 200,
        upload_reason: str = 'OK'
    ):
        self.config = config or UploaderConfig.default()
        self.login_token = login_token
        self.upload_token = upload_token
        self.login_location = login_location
        self.upload_status = upload_status
        self.upload_reason = upload_reason
        self.requests: List[RecordedRequest] = []
        self.closed = False

    def _page(self, template: str, token: Optional[str]) -> str:
        if token is None:
            return '<html><body>maintenance</body></html>'
        return template.format(token=token)

    def request(self, method, url, headers=None, data=None) -> HTTPResponse:
        recorded = RecordedRequest(method, url, headers, data)
        self.requests.append(recorded)
        config = self.config

        if method == 'GET' and url == config.login_url:
            return make_response(
                headers={'Set-Cookie': 'locale=en'},
                text=self._page(LOGIN_PAGE, self.login_token)
            )
        if method == 'POST' and url == config.login_url:
            return make_response(
                302, 'Found',
                headers={'Location': self.login_location, 'Set-Cookie': 'session=abc'}
            )
        if method == 'GET' and url == config.upload_page_url:
            return make_response(text=self._page(UPLOAD_PAGE, self.upload_token))
        if method == 'POST' and url == config.upload_url:
            return make_response(self.upload_status, self.upload_reason)
        return make_response(404, 'Not Found')

    def close(self) -> None:
        self.closed = True

    def find(self, method: str, url: str) -> List[RecordedRequest]:
        return [r for r in self.requests if r.method == method and r.url == url]


@pytest.fixture
def config():
    """Default uploader configuration."""
    return UploaderConfig.default()


@pytest.fixture
def transport(config):
    """Stub transport accepting the login and the upload."""
    return StubTransport(config)


@pytest.fixture
def local_file(tmp_path):
    """Create local.txt with known content."""
    path = tmp_path / "local.txt"
    path.write_bytes(b"hello dropbox\r\nsecond line\n")
    return path


@pytest.fixture
def make_transport(config):
    """Factory for stub transports with custom answers."""
    def factory(**kwargs):
        return StubTransport(config, **kwargs)
    return factory
