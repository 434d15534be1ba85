"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 502/503/504) with exponential
backoff.  The dataset loader uses it whenever a source is an ``http(s)`` URL.

Usage::

    from gsl_migration.services.http import session

    resp = session.get("https://example.org/climate_data/oni_data.txt")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Static file hosts occasionally throttle or bounce; retry those.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 20  # seconds
USER_AGENT = "gsl-migration/0.1"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: Value for the ``User-Agent`` header.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()


def get_checked(url: str, *, http: requests.Session | None = None) -> requests.Response:
    """GET ``url`` and raise ``requests.HTTPError`` on a 4xx/5xx status."""
    resp = (http or session).get(url)
    resp.raise_for_status()
    return resp
