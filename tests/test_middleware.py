import pytest

from mobiledetect import MobileDetect
from mobiledetect import testapp
from mobiledetect.middleware import DetectorMiddleware

IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_2 like Mac OS X) AppleWebKit/605.1.15"
    " (KHTML, like Gecko) Version/14.0.1 Mobile/15E148 Safari/604.1"
)
DESKTOP_CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    " (KHTML, like Gecko) Chrome/86.0.4240.75 Safari/537.36"
)


class StartResponse:
    def __init__(self):
        self.status = None
        self.headers = None

    def __call__(self, status, headers, exc_info=None):
        self.status = status
        self.headers = dict(headers)


def run(app, **environ):
    environ.setdefault("REQUEST_METHOD", "GET")
    environ.setdefault("PATH_INFO", "/")
    start_response = StartResponse()
    body = b"".join(app(environ, start_response))
    return start_response, body, environ


def hello_app(environ, start_response):
    detect = environ["mobiledetect.detector"]
    start_response("200 OK", [("Content-Type", "text/plain")])
    return [b"mobile" if detect.is_mobile() else b"desktop"]


@pytest.mark.parametrize(
    ("user_agent", "expect"), [(IPHONE, b"mobile"), (DESKTOP_CHROME, b"desktop")]
)
def test_detector_middleware(user_agent, expect):
    app = DetectorMiddleware(hello_app)
    sr, body, environ = run(app, HTTP_USER_AGENT=user_agent)
    assert sr.status == "200 OK"
    assert body == expect
    detect = environ["mobiledetect.detector"]
    assert isinstance(detect, MobileDetect)
    assert detect.get_user_agent() == user_agent


def test_detector_middleware_options():
    def app(environ, start_response):
        start_response("204 No Content", [])
        return []

    app = DetectorMiddleware(app, environ_key="detect", cache_ttl=5)
    _, _, environ = run(app, HTTP_USER_AGENT=IPHONE)
    assert "mobiledetect.detector" not in environ
    assert environ["detect"].cache_ttl == 5


def test_detector_per_request():
    seen = []

    def app(environ, start_response):
        seen.append(environ["mobiledetect.detector"])
        start_response("204 No Content", [])
        return []

    app = DetectorMiddleware(app)
    run(app, HTTP_USER_AGENT=IPHONE)
    run(app, HTTP_USER_AGENT=DESKTOP_CHROME)
    assert seen[0] is not seen[1]
    assert seen[0].is_iphone()
    assert not seen[1].is_iphone()


def test_testapp():
    sr, body, _ = run(testapp.test_app, HTTP_USER_AGENT=IPHONE)
    assert sr.status == "200 OK"
    assert sr.headers["Content-Type"] == "text/html; charset=utf-8"
    assert sr.headers["Content-Length"] == str(len(body))
    assert b"<title>Mobile Detect Test Application</title>" in body
    assert b'<tr><th>Mobile<td><tt class="yes">yes</tt>' in body
    assert b'<tr><th>Tablet<td><tt class="no">no</tt>' in body
    assert b"<tr><th>Phone<td>iPhone" in body
    assert b"<tr><th>Operating System<td>iOS" in body
    assert b"<tr><th>Browser<td>Safari" in body
    assert b"<tr><th>iOS<td>14.2" in body
    assert b"<tr><th>Android<td>" not in body


def test_testapp_desktop():
    _, body, _ = run(testapp.test_app, HTTP_USER_AGENT=DESKTOP_CHROME)
    assert b'<tr><th>Mobile<td><tt class="no">no</tt>' in body
    assert b"<tr><th>Utility<td>WebKit" in body


def test_testapp_escapes_user_agent():
    _, body, _ = run(testapp.test_app, HTTP_USER_AGENT="<script>alert(1)</script>")
    assert b"<script>" not in body
    assert b"&lt;script&gt;alert(1)&lt;/script&gt;" in body


def test_testapp_no_user_agent():
    _, body, _ = run(testapp.test_app)
    assert b"<code>(none)</code>" in body
