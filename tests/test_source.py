"""Tests for reading course sources from files and URLs."""

import pytest
import requests

from advising import SourceUnreadable, load, read_lines
from advising.config import HTTP_RETRIES, USER_AGENT
from advising.data import source


class FakeSession:
    """Stands in for requests.Session; records the requested URL."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requested = None
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def get(self, url, timeout=None):
        self.requested = url
        if self.error:
            raise self.error
        return self.response


def _response(body: bytes, status: int = 200, content_type: str = "text/plain"):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.headers["Content-Type"] = content_type
    resp.url = "https://example.edu/courses.csv"
    return resp


@pytest.fixture
def fake_session(monkeypatch):
    def install(**kwargs):
        session = FakeSession(**kwargs)
        monkeypatch.setattr(source, "create_retry_session", lambda: session)
        return session
    return install


def test_reads_file_lines(course_file, abcu_lines):
    assert read_lines(course_file) == abcu_lines


def test_reads_crlf_file(tmp_path):
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"CS101,Intro\r\nCS201,DS,CS101\r\n")
    assert read_lines(path) == ["CS101,Intro", "CS201,DS,CS101"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(SourceUnreadable) as excinfo:
        read_lines(tmp_path / "nope.csv")
    assert "nope.csv" in str(excinfo.value)


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"CS101,Caf\xe9\n")
    with pytest.raises(SourceUnreadable):
        read_lines(path)


def test_directory_raises(tmp_path):
    with pytest.raises(SourceUnreadable):
        read_lines(tmp_path)


def test_reads_url(fake_session):
    session = fake_session(response=_response(b"CS101,Intro\nCS201,DS,CS101\n"))
    lines = read_lines("https://example.edu/courses.csv")
    assert lines == ["CS101,Intro", "CS201,DS,CS101"]
    assert session.requested == "https://example.edu/courses.csv"
    assert session.closed


def test_url_without_charset_uses_default_encoding(fake_session):
    fake_session(response=_response("MUS101,Übung\n".encode("utf-8")))
    assert read_lines("http://example.edu/courses.csv") == ["MUS101,Übung"]


def test_http_error_status_raises(fake_session):
    fake_session(response=_response(b"not found", status=404))
    with pytest.raises(SourceUnreadable) as excinfo:
        read_lines("https://example.edu/courses.csv")
    assert "404" in excinfo.value.reason


def test_connection_error_raises(fake_session):
    fake_session(error=requests.ConnectionError("connection refused"))
    with pytest.raises(SourceUnreadable):
        read_lines("https://example.edu/courses.csv")


def test_load_from_url(fake_session):
    fake_session(response=_response(b"CS101,Intro\nCS201,DS,CS101\n"))
    result = load("https://example.edu/courses.csv")
    assert result.course_count == 2


def test_load_from_unreachable_url(fake_session):
    fake_session(error=requests.Timeout("timed out"))
    result = load("https://example.edu/courses.csv")
    assert result.source_readable is False
    assert len(result.catalog) == 0


def test_retry_session_configuration():
    with source.create_retry_session() as session:
        adapter = session.get_adapter("https://example.edu/")
        assert adapter.max_retries.total == HTTP_RETRIES
        assert 503 in adapter.max_retries.status_forcelist
        assert session.headers["User-Agent"] == USER_AGENT


def test_is_url():
    assert source.is_url("https://example.edu/x.csv")
    assert source.is_url("HTTP://example.edu/x.csv")
    assert not source.is_url("courses.csv")
