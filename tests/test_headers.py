import pytest

from mobiledetect.headers import HttpHeaders
from mobiledetect.headers import MOBILE_HEADERS
from mobiledetect.headers import normalize_header_name
from mobiledetect.headers import UA_HTTP_HEADERS


@pytest.mark.parametrize(
    ("name", "expect"),
    [
        ("User-Agent", "HTTP_USER_AGENT"),
        ("user-agent", "HTTP_USER_AGENT"),
        ("HTTP_USER_AGENT", "HTTP_USER_AGENT"),
        ("http_user_agent", "HTTP_USER_AGENT"),
        ("X-Wap-Profile", "HTTP_X_WAP_PROFILE"),
        (" Accept ", "HTTP_ACCEPT"),
    ],
)
def test_normalize_header_name(name, expect):
    assert normalize_header_name(name) == expect


class TestHttpHeaders:
    def test_basic_interface(self):
        h = HttpHeaders({"User-Agent": "Mozilla/5.0", "HTTP_ACCEPT": "text/html"})
        assert len(h) == 2
        assert h
        assert h["user-agent"] == "Mozilla/5.0"
        assert h["HTTP_USER_AGENT"] == "Mozilla/5.0"
        assert h["Accept"] == "text/html"
        assert "User-Agent" in h
        assert "http_accept" in h
        assert "X-Wap-Profile" not in h
        assert 42 not in h

        with pytest.raises(KeyError):
            h["X-Wap-Profile"]

    def test_get(self):
        h = HttpHeaders([("Content-Length", "42"), ("Accept", "text/html")])
        assert h.get("content-length", type=int) == 42
        assert h.get("accept", -1, type=int) == -1
        assert h.get("missing") is None
        assert h.get("missing", "default") == "default"

    def test_empty(self):
        h = HttpHeaders()
        assert not h
        assert len(h) == 0
        assert list(h) == []

    def test_bytes_values(self):
        h = HttpHeaders({"User-Agent": "Fran\xe7ais".encode("latin-1")})
        assert h["User-Agent"] == "Fran\xe7ais"

    def test_from_environ(self):
        environ = {
            "HTTP_USER_AGENT": "Mozilla/5.0",
            "HTTP_X_WAP_PROFILE": "http://example.com/uaprof.xml",
            "REQUEST_METHOD": "GET",
            "PATH": "/usr/bin",
            "wsgi.input": object(),
        }
        h = HttpHeaders.from_environ(environ)
        assert h.to_dict() == {
            "HTTP_USER_AGENT": "Mozilla/5.0",
            "HTTP_X_WAP_PROFILE": "http://example.com/uaprof.xml",
        }

    def test_items(self):
        h = HttpHeaders({"User-Agent": "ua", "X-Wap-Profile": "p"})
        assert list(h) == [("HTTP_USER_AGENT", "ua"), ("HTTP_X_WAP_PROFILE", "p")]
        assert list(h.items(http_case=True)) == [
            ("User-Agent", "ua"),
            ("X-Wap-Profile", "p"),
        ]
        assert list(h.keys()) == ["HTTP_USER_AGENT", "HTTP_X_WAP_PROFILE"]
        assert list(h.values()) == ["ua", "p"]

    def test_copy(self):
        h = HttpHeaders({"User-Agent": "ua"})
        c = h.copy()
        assert c == h
        assert c is not h
        assert HttpHeaders(h) == h

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(HttpHeaders())

    def test_repr(self):
        h = HttpHeaders({"User-Agent": "ua"})
        assert repr(h) == "HttpHeaders({'HTTP_USER_AGENT': 'ua'})"


def test_header_lists():
    assert UA_HTTP_HEADERS[0] == "HTTP_USER_AGENT"
    assert all(name.startswith("HTTP_") for name in UA_HTTP_HEADERS)
    assert all(name.startswith("HTTP_") for name in MOBILE_HEADERS)
    assert MOBILE_HEADERS["HTTP_X_WAP_PROFILE"] is None
    assert MOBILE_HEADERS["HTTP_UA_CPU"] == ("ARM",)
