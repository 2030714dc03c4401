"""Session factory using Factory Pattern."""
from http.cookiejar import DefaultCookiePolicy

import requests
from requests.adapters import HTTPAdapter


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(user_agent: str) -> requests.Session:
        """
        Creates a synchronous HTTP session.

        The session's cookie jar accepts no cookies: cookie state belongs to
        the uploader and travels in an explicit ``Cookie`` header.
        """
        session = requests.Session()
        session.headers['User-Agent'] = user_agent
        session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        session.mount('http://', HTTPAdapter(max_retries=0))
        session.mount('https://', HTTPAdapter(max_retries=0))
        return session
