"""
mobiledetect.detector
~~~~~~~~~~~~~~~~~~~~~

The :class:`MobileDetect` engine.  A detector wraps the request headers
and the User-Agent built from them, and answers questions about the
client by testing the User-Agent against the rules of a
:class:`~mobiledetect.rules.RuleTable`::

    from mobiledetect import MobileDetect

    detect = MobileDetect(environ_headers)

    if detect.is_tablet():
        ...
    elif detect.is_mobile():
        ...

    if detect.is_ios():
        ios_version = detect.version("iOS", MobileDetect.VERSION_TYPE_FLOAT)

Answers are remembered in a :class:`~mobiledetect.cache.Cache` for
``cache_ttl`` seconds, keyed by a fingerprint of the rule and the
User-Agent.  The composite questions also take the headers and the
fingerprint of the whole rule table into account.  A detector
is meant for one request at a time; create a new one per request or
call :meth:`~MobileDetect.set_http_headers` and
:meth:`~MobileDetect.set_user_agent` again.
"""
from __future__ import annotations

import hashlib
import os
import re
import typing as t

from ._internal import _log
from ._internal import _missing
from .cache import Cache
from .cache import TTL
from .exceptions import InvalidArgumentError
from .headers import CLOUDFRONT_HEADERS
from .headers import HttpHeaders
from .headers import MOBILE_HEADERS
from .headers import UA_HTTP_HEADERS
from .rules import DEFAULT_RULE_TABLE
from .rules import Rule
from .rules import RuleTable

#: Return versions as the normalized string, e.g. ``"4.3.1"``.
VERSION_TYPE_STRING = "text"
#: Return versions as a number, e.g. ``4.31``.
VERSION_TYPE_FLOAT = "float"

_version_float_re = re.compile(r"^\d+(\.\d*)?$")
_version_sep_re = re.compile(r"[_ /]")


def default_cache_key(value: str) -> str:
    """Turn the text describing a question into a cache key."""
    return hashlib.sha1(value.encode("utf-8")).hexdigest()


def prepare_version_no(ver: str) -> float:
    """Convert a version string to a float.  The first dot is kept as the
    decimal point and every following one is dropped, so ``"4.3.1"``
    becomes ``4.31``.

    :raises ValueError: if `ver` is not a dotted number.
    """
    ver = ver.replace("_", ".").replace(" ", ".")
    head, sep, tail = ver.partition(".")
    ver = head + sep + tail.replace(".", "")
    if _version_float_re.match(ver) is None:
        raise ValueError(f"{ver!r} is not a version number.")
    return float(ver)


class MobileDetect:
    """Detect mobile devices, their operating systems and browsers from
    the HTTP headers of a request.

    :param headers: the request headers as an
                    :class:`~mobiledetect.headers.HttpHeaders`, a dict or a
                    list of ``(name, value)`` tuples.  Names may use either
                    the HTTP or the CGI spelling.
    :param user_agent: overrides the User-Agent built from the headers.
    :param cache: the cache for answers.  A new :class:`Cache` is used if
                  not given.
    :param rules: the :class:`~mobiledetect.rules.RuleTable` to use.
                  Defaults to the shipped rules.
    :param auto_init_http_headers: if no headers are given, read them
                                   from the process environment, the way
                                   a CGI script receives them.
    :param cache_ttl: how long answers are cached, in seconds.  ``None``
                      or ``0`` keeps them forever.
    :param cache_key_fn: a callable turning a string into a cache key.
                         Defaults to the SHA-1 hex digest.
    """

    VERSION_TYPE_STRING = VERSION_TYPE_STRING
    VERSION_TYPE_FLOAT = VERSION_TYPE_FLOAT

    #: The version of the rule table shipped with this package.
    script_version = "4.8.0"

    def __init__(
        self,
        headers: t.Any = None,
        user_agent: str | None = None,
        cache: Cache | None = None,
        rules: RuleTable | None = None,
        auto_init_http_headers: bool = True,
        cache_ttl: TTL = 86400,
        cache_key_fn: t.Callable[[str], str] | None = None,
    ) -> None:
        self.rules = rules if rules is not None else DEFAULT_RULE_TABLE
        self.cache = cache if cache is not None else Cache()
        self.auto_init_http_headers = auto_init_http_headers
        self.cache_ttl = cache_ttl
        self.cache_key_fn = cache_key_fn or default_cache_key

        self.http_headers = HttpHeaders()
        self.user_agent: str | None = None
        #: the pattern that made the last successful :meth:`match`
        self.matching_regex: str | None = None
        #: the full match and the groups of the last successful match
        self.matches: tuple[str, ...] | None = None

        if headers or auto_init_http_headers:
            self.set_http_headers(headers)

        if user_agent is not None:
            self.set_user_agent(user_agent)

    @classmethod
    def from_environ(cls, environ: t.Mapping[str, t.Any], **options: t.Any):
        """Create a detector for the request described by a WSGI
        environment.  The remaining arguments are passed to the
        constructor.
        """
        options.setdefault("auto_init_http_headers", False)
        return cls(HttpHeaders.from_environ(environ), **options)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.user_agent!r}>"

    # User-Agent

    def set_user_agent(self, user_agent: str | None) -> str | None:
        """Set the User-Agent to be used and forget the last match."""
        self.user_agent = user_agent
        self.matching_regex = None
        self.matches = None
        return user_agent

    def get_user_agent(self) -> str | None:
        return self.user_agent

    def has_user_agent(self) -> bool:
        return self.user_agent is not None

    def is_user_agent_empty(self) -> bool:
        return not self.user_agent

    # Headers

    def set_http_headers(self, headers: t.Any = None) -> None:
        """Replace the request headers and rebuild the User-Agent from
        them.  If `headers` is empty and ``auto_init_http_headers`` is
        enabled the headers are taken from :data:`os.environ`.
        """
        if not headers and self.auto_init_http_headers:
            _log("debug", "No headers given, reading them from the environment.")
            self.http_headers = HttpHeaders.from_environ(os.environ)
        else:
            self.http_headers = HttpHeaders(headers)

        self.set_user_agent(self._user_agent_from_headers())

    def _user_agent_from_headers(self) -> str | None:
        parts = [
            self.http_headers[name].strip()
            for name in UA_HTTP_HEADERS
            if self.http_headers.get(name)
        ]

        if parts:
            return " ".join(parts).strip()

        if self.get_cloudfront_http_headers():
            return "Amazon CloudFront"

        return None

    def get_http_headers(self) -> HttpHeaders:
        return self.http_headers

    def has_http_headers(self) -> bool:
        return bool(self.http_headers)

    def get_http_header(self, name: str) -> str | None:
        """Return the value of a request header, or ``None``.  `name` may
        be ``User-Agent`` or ``HTTP_USER_AGENT``.
        """
        return self.http_headers.get(name)

    def get_mobile_headers(self) -> dict[str, tuple[str, ...] | None]:
        return dict(MOBILE_HEADERS)

    def get_ua_http_headers(self) -> tuple[str, ...]:
        return UA_HTTP_HEADERS

    def get_cloudfront_http_headers(self) -> dict[str, str]:
        """The CloudFront device headers present in the request."""
        return {
            name: self.http_headers[name]
            for name in CLOUDFRONT_HEADERS
            if name in self.http_headers
        }

    def check_http_headers_for_mobile(self) -> bool:
        """Check the headers that give a mobile client away without
        looking at the User-Agent.
        """
        for name, needles in MOBILE_HEADERS.items():
            value = self.http_headers.get(name)

            if not value:
                continue

            if needles is None:
                return True

            if any(needle in value for needle in needles):
                return True

        return False

    # Matching

    def get_rules(self) -> dict[str, str]:
        return self.rules.as_dict()

    def get_matching_regex(self) -> str | None:
        return self.matching_regex

    def get_matches_array(self) -> tuple[str, ...] | None:
        return self.matches

    def get_cache(self) -> Cache:
        return self.cache

    def get_script_version(self) -> str:
        return self.script_version

    def match(self, regex: str | None, user_agent: t.Any = _missing) -> bool:
        """Search a regular expression in a User-Agent.

        :param regex: the pattern, matched case sensitively.
        :param user_agent: the string to search.  Defaults to the current
                           User-Agent, which is also used if ``None`` is
                           passed.
        :raises InvalidArgumentError: if neither a pattern nor a
                                      User-Agent is given.
        """
        if regex is None:
            if user_agent is _missing or user_agent is None:
                raise InvalidArgumentError("A pattern or a User-Agent is required.")
            return False

        if user_agent is _missing or user_agent is None:
            user_agent = self.user_agent

        return self._search(re.compile(regex), user_agent)

    def _search(self, pattern: t.Pattern[str], subject: str | None) -> bool:
        if not subject:
            return False

        m = pattern.search(subject)

        if m is None:
            return False

        self.matching_regex = pattern.pattern
        self.matches = (m.group(0),) + tuple(g or "" for g in m.groups())
        return True

    def _match_rule(self, rule: Rule) -> bool:
        return self._search(self.rules.compiled(rule), self.user_agent)

    def _cached(self, parts: t.Iterable[str], func: t.Callable[[], bool]) -> bool:
        key = self.cache_key_fn("\n".join(parts))
        rv = self.cache.get(key, _missing)

        if rv is not _missing:
            return rv

        rv = func()
        self.cache.set(key, rv, self.cache_ttl)
        return rv

    def is_(self, name: str) -> bool:
        """Check the User-Agent against the rule called `name`, ignoring
        case.

        :raises ~mobiledetect.exceptions.UnknownRuleError: if there is no
            such rule.
        """
        rule = self.rules.lookup(name)
        return self._cached(
            (rule.name, rule.pattern, self.user_agent or ""),
            lambda: self._match_rule(rule),
        )

    def _composite_parts(self, kind: str) -> list[str]:
        parts = [kind, self.rules.fingerprint, self.user_agent or ""]
        parts.extend(f"{k}: {v}" for k, v in sorted(self.http_headers.items()))
        return parts

    def is_mobile(self) -> bool:
        """Check if the client is a phone, a tablet or another mobile
        device.  Every tablet is mobile.
        """

        def check():
            if self.check_http_headers_for_mobile():
                return True
            return any(self._match_rule(rule) for rule in self.rules.mobile_rules())

        return self._cached(self._composite_parts("mobile"), check)

    def is_tablet(self) -> bool:
        """Check if the client is a tablet."""

        def check():
            viewer = self.http_headers.get("HTTP_CLOUDFRONT_IS_TABLET_VIEWER")
            if viewer == "true":
                return True
            return any(self._match_rule(rule) for rule in self.rules.tablet_rules())

        return self._cached(self._composite_parts("tablet"), check)

    # Versions

    def version(
        self, property_name: str, type: str = VERSION_TYPE_STRING
    ) -> str | float | t.Literal[False]:
        """Extract the version of a device, operating system, browser or
        engine from the User-Agent.

        >>> detect = MobileDetect(user_agent="... CPU OS 4_3_1 like Mac OS X ...")
        >>> detect.version("iOS")
        '4.3.1'
        >>> detect.version("iOS", MobileDetect.VERSION_TYPE_FLOAT)
        4.31

        :param property_name: the name of the version property, ignoring
                              case.
        :param type: :data:`VERSION_TYPE_STRING` or
                     :data:`VERSION_TYPE_FLOAT`.  Anything else is treated
                     as a string.
        :return: the version or ``False`` if it cannot be found or
                 converted.
        :raises ~mobiledetect.exceptions.UnknownPropertyError: if there is
            no such property.
        """
        patterns = self.rules.lookup_property(property_name)

        if not self.user_agent:
            return False

        for pattern in patterns:
            m = pattern.search(self.user_agent)

            if m is None or not m.group(1):
                continue

            ver = _version_sep_re.sub(".", m.group(1))

            if type != VERSION_TYPE_FLOAT:
                return ver

            try:
                return prepare_version_no(ver)
            except ValueError:
                _log("debug", "Cannot convert version %r of %r.", ver, property_name)
                return False

        return False


def _make_rule_shortcut(name: str) -> t.Callable[[MobileDetect], bool]:
    def shortcut(self: MobileDetect) -> bool:
        return self.is_(name)

    shortcut.__name__ = f"is_{name.lower()}"
    shortcut.__qualname__ = f"MobileDetect.{shortcut.__name__}"
    shortcut.__doc__ = f"Check the User-Agent against the ``{name}`` rule."
    return shortcut


for _rule in DEFAULT_RULE_TABLE:
    setattr(MobileDetect, f"is_{_rule.name.lower()}", _make_rule_shortcut(_rule.name))

del _rule
