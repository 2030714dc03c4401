"""Tests for the requests-backed transport."""
import io
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from dropboxpy.core.api import (
    HTTPResponse,
    RequestsTransport,
    SessionFactory,
    SSLConfig,
    UploaderConfig
)
from dropboxpy.core.upload import SequentialByteSource


def fake_requests_response(status=200, reason='OK', headers=None, text=''):
    response = Mock()
    response.status_code = status
    response.reason = reason
    response.headers = CaseInsensitiveDict(headers or {})
    response.text = text
    return response


class TestHTTPResponse:
    """Test suite for HTTPResponse."""

    @pytest.mark.parametrize("status,expected", [
        (200, True), (204, True), (302, True), (399, True),
        (100, False), (400, False), (404, False), (500, False),
    ])
    def test_is_success(self, status, expected):
        """Test success is decided by the leading digit."""
        assert HTTPResponse(status=status).is_success is expected

    def test_header_accessors(self):
        """Test Location and Set-Cookie lookups are case-insensitive."""
        response = HTTPResponse(
            status=302,
            headers=CaseInsensitiveDict({'location': '/home', 'set-cookie': 'a=1'})
        )

        assert response.location == '/home'
        assert response.set_cookie == 'a=1'

    def test_missing_headers(self):
        """Test absent headers give None."""
        response = HTTPResponse(status=200)

        assert response.location is None
        assert response.set_cookie is None


class TestRequestsTransport:
    """Test suite for RequestsTransport."""

    @pytest.fixture
    def session(self):
        session = Mock(spec=requests.Session)
        session.request.return_value = fake_requests_response(
            302, 'Found', {'Location': '/home', 'Set-Cookie': 'sid=1'}, 'moved'
        )
        return session

    def test_request_maps_response(self, session):
        """Test the requests response is translated."""
        transport = RequestsTransport(UploaderConfig.default(), session=session)

        response = transport.request('GET', 'https://example.com/login', headers={'Cookie': 'a=b'})

        assert response.status == 302
        assert response.reason == 'Found'
        assert response.location == '/home'
        assert response.set_cookie == 'sid=1'
        assert response.text == 'moved'

    def test_redirects_not_followed(self, session):
        """Test requests is told not to follow redirects."""
        transport = RequestsTransport(UploaderConfig.default(), session=session)

        transport.request('POST', 'https://example.com/login', data='a=b')

        _, kwargs = session.request.call_args
        assert kwargs['allow_redirects'] is False
        assert kwargs['data'] == 'a=b'
        assert kwargs['verify'] is True
        assert kwargs['timeout'] is None

    def test_ca_path_and_timeout(self, session):
        """Test TLS and timeout settings are passed through."""
        config = UploaderConfig(ssl=SSLConfig(ca_path='/etc/certs'), timeout=12.5)
        transport = RequestsTransport(config, session=session)

        transport.request('GET', 'https://example.com/')

        _, kwargs = session.request.call_args
        assert kwargs['verify'] == '/etc/certs'
        assert kwargs['timeout'] == 12.5

    def test_streamed_body_passed_through(self, session):
        """Test a sequential source is handed to requests untouched."""
        transport = RequestsTransport(UploaderConfig.default(), session=session)
        source = SequentialByteSource(b"pre", (io.BytesIO(b"file"), 4), b"post")

        transport.request('POST', 'https://example.com/upload', data=source)

        _, kwargs = session.request.call_args
        assert kwargs['data'] is source

    def test_close(self, session):
        """Test close() closes the session."""
        transport = RequestsTransport(UploaderConfig.default(), session=session)

        transport.close()

        session.close.assert_called_once()


class TestSessionFactory:
    """Test suite for SessionFactory."""

    def test_user_agent(self):
        """Test the user agent header is set."""
        session = SessionFactory.create_sync_session('dropboxpy/test')

        assert session.headers['User-Agent'] == 'dropboxpy/test'
        session.close()

    def test_cookie_jar_rejects_cookies(self):
        """Test the session never stores cookies on its own."""
        session = SessionFactory.create_sync_session('dropboxpy/test')
        policy = session.cookies.get_policy()

        assert policy.is_not_allowed("www.dropbox.com")
        assert policy.is_not_allowed("dl-web.dropbox.com")
        session.close()


class TestSSLConfig:
    """Test suite for SSLConfig."""

    def test_default_verifies(self):
        assert SSLConfig().verify_value() is True

    def test_ca_path(self):
        assert SSLConfig(ca_path='/certs').verify_value() == '/certs'

    def test_insecure(self):
        assert UploaderConfig.insecure().ssl.verify_value() is False

    def test_with_ca_path(self):
        config = UploaderConfig.with_ca_path('/certs', timeout=3)

        assert config.ssl.ca_path == '/certs'
        assert config.timeout == 3
