"""
Line sources.

Reads a whole course file into memory from a local path or an http(s) URL.
The loader scans its input twice, so sources are always materialized once
here rather than reopened per pass.
"""

from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    DEFAULT_ENCODING,
    URL_SCHEMES,
    HTTP_TIMEOUT,
    HTTP_RETRIES,
    HTTP_BACKOFF_FACTOR,
    RETRY_STATUS_CODES,
    USER_AGENT,
)


class SourceUnreadable(Exception):
    """The course source could not be opened or read."""
    
    def __init__(self, location, reason: str):
        self.location = str(location)
        self.reason = reason
        super().__init__(f"Could not open {self.location}: {reason}")


def is_url(location) -> bool:
    return isinstance(location, str) and location.lower().startswith(URL_SCHEMES)


def create_retry_session() -> requests.Session:
    """HTTP session that retries GETs on rate limiting and server errors."""
    session = requests.Session()
    retries = Retry(
        total=HTTP_RETRIES,
        backoff_factor=HTTP_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def _fetch_lines(url: str, encoding: str) -> list:
    with create_retry_session() as session:
        resp = session.get(url, timeout=HTTP_TIMEOUT)
        resp.raise_for_status()
        # Without an explicit charset requests assumes ISO-8859-1 for text/*
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = encoding
        return resp.text.splitlines()


def _read_file_lines(path: Path, encoding: str) -> list:
    with open(path, "r", encoding=encoding) as f:
        return f.read().splitlines()


def read_lines(location, encoding: str = DEFAULT_ENCODING) -> list:
    """
    Read every line of a course source.
    
    Args:
        location: Filesystem path (str or Path) or http(s) URL
        encoding: Text encoding for files, and for responses without a charset
    
    Returns:
        List of lines without terminators
    
    Raises:
        SourceUnreadable: Missing file, permission problem, undecodable bytes,
            network failure or non-2xx HTTP status
    """
    try:
        if is_url(location):
            return _fetch_lines(location, encoding)
        return _read_file_lines(Path(location), encoding)
    except (requests.RequestException, OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(location, str(e)) from e
