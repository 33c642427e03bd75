"""Shared HTTP session for calls to the news API."""

import requests
from requests.adapters import HTTPAdapter

USER_AGENT = "newsfront/0.1.0"


def new_session(pool_size: int = 10) -> requests.Session:
    """Return a requests.Session with a pooled adapter and no automatic retries.

    Failed upstream calls surface to the caller immediately.
    """
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size, max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = USER_AGENT
    return session
