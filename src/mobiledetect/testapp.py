"""A small WSGI application that shows what the detector makes of the
requesting client.  Point a phone at it to check the rules::

    $ python -m mobiledetect.testapp
"""
import typing as t

from markupsafe import escape
from markupsafe import Markup

from .detector import MobileDetect
from .middleware import DetectorMiddleware
from .rules import Category

TEMPLATE = """\
<!doctype html>
<html lang=en>
<title>Mobile Detect Test Application</title>
<style type="text/css">
  body {
    font-family: 'Lucida Grande', 'Lucida Sans Unicode', 'Geneva',
                 'Verdana', sans-serif;
    background-color: white;
    color: #000;
    font-size: 15px;
    text-align: center;
  }
  div.box {
    text-align: left;
    width: 720px;
    margin: auto;
    padding: 50px 0;
    background-color: white;
  }
  h1, h2 {
    font-family: 'Ubuntu', 'Lucida Grande', 'Lucida Sans Unicode',
                 'Geneva', 'Verdana', sans-serif;
    font-weight: normal;
  }
  h1 { margin: 0 0 30px 0; }
  h2 { font-size: 1.4em; margin: 1em 0 0.5em 0; }
  table { width: 100%%; border-collapse: collapse; border: 1px solid #AFC5C9 }
  table th { background-color: #AFC1C4; color: white; font-size: 0.72em;
             font-weight: normal; width: 18em; vertical-align: top;
             padding: 0.5em 0 0.1em 0.5em; }
  table td { border: 1px solid #AFC5C9; padding: 0.1em 0 0.1em 0.5em; }
  code { font-family: 'Consolas', 'Monaco', 'Bitstream Vera Sans Mono',
         monospace; font-size: 0.7em; }
  tt.yes { color: #2a8a2a; }
  tt.no { color: #a33; }
</style>
<div class="box">
  <h1>Mobile Detect</h1>
  <p>
    Mobile Detect %(version)s classifies the client below.
  <h2 id="user-agent">User-Agent</h2>
  <p><code>%(user_agent)s</code>
  <h2 id="summary">Summary</h2>
  <table>
  %(summary)s
  </table>
  <h2 id="rules">Matching Rules</h2>
  <table>
  %(rules)s
  </table>
  <h2 id="versions">Versions</h2>
  <table>
  %(versions)s
  </table>
</div>
"""

#: The version properties shown on the page.
VERSION_PROPERTIES = (
    "iOS",
    "Android",
    "BlackBerry",
    "Windows Phone OS",
    "Chrome",
    "Firefox",
    "Safari",
    "Opera",
    "Edge",
    "Webkit",
    "Build",
)

_row = Markup("<tr><th>{0}<td>{1}")


def _yes_no(value: bool) -> Markup:
    if value:
        return Markup('<tt class="yes">yes</tt>')
    return Markup('<tt class="no">no</tt>')


def _matching_rules(detect: MobileDetect) -> t.Iterator[Markup]:
    for category in Category:
        names = [
            rule.name
            for rule in detect.rules.rules_in(category)
            if detect.is_(rule.name)
        ]
        yield _row.format(category.name.replace("_", " ").title(), ", ".join(names))


def _versions(detect: MobileDetect) -> t.Iterator[Markup]:
    for name in VERSION_PROPERTIES:
        ver = detect.version(name)
        if ver is not False:
            yield _row.format(name, ver)


def render_testapp(detect: MobileDetect) -> bytes:
    summary = [
        _row.format("Mobile", _yes_no(detect.is_mobile())),
        _row.format("Tablet", _yes_no(detect.is_tablet())),
        _row.format("Mobile headers", _yes_no(detect.check_http_headers_for_mobile())),
    ]
    return (
        TEMPLATE
        % {
            "version": escape(detect.get_script_version()),
            "user_agent": escape(detect.get_user_agent() or "(none)"),
            "summary": Markup("\n  ").join(summary),
            "rules": Markup("\n  ").join(_matching_rules(detect)),
            "versions": Markup("\n  ").join(_versions(detect)),
        }
    ).encode("utf-8")


def _test_app(environ: t.Dict[str, t.Any], start_response: t.Callable) -> t.List[bytes]:
    detect = environ["mobiledetect.detector"]
    body = render_testapp(detect)
    start_response(
        "200 OK",
        [
            ("Content-Type", "text/html; charset=utf-8"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


#: Simple test application that shows the detection results for the
#: requesting client.
test_app = DetectorMiddleware(_test_app)


if __name__ == "__main__":
    from wsgiref.simple_server import make_server

    with make_server("localhost", 5000, test_app) as server:
        server.serve_forever()
