"""
mobiledetect.headers
~~~~~~~~~~~~~~~~~~~~

The request headers a detector looks at, and the lists of headers that
carry a User-Agent or give a mobile client away on their own.

Header names are accepted in both spellings, the HTTP one
(``User-Agent``) and the CGI/WSGI one (``HTTP_USER_AGENT``).  They are
stored in the latter form.
"""
import collections.abc as cabc

#: Headers that may contain the User-Agent, in the order their values are
#: joined together.  Proxies and transcoders such as Opera Mini move the
#: device's real User-Agent into one of the ``X-`` headers.
UA_HTTP_HEADERS = (
    "HTTP_USER_AGENT",
    "HTTP_X_OPERAMINI_PHONE_UA",
    "HTTP_X_DEVICE_USER_AGENT",
    "HTTP_X_ORIGINAL_USER_AGENT",
    "HTTP_X_SKYFIRE_PHONE",
    "HTTP_X_BOLT_PHONE_UA",
    "HTTP_DEVICE_STOCK_UA",
    "HTTP_X_UCBROWSER_DEVICE_UA",
)

#: Headers set by Amazon CloudFront when it is configured to forward the
#: device type instead of the User-Agent.
CLOUDFRONT_HEADERS = (
    "HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER",
    "HTTP_CLOUDFRONT_IS_MOBILE_VIEWER",
    "HTTP_CLOUDFRONT_IS_TABLET_VIEWER",
    "HTTP_CLOUDFRONT_IS_SMARTTV_VIEWER",
)

#: Headers that identify a mobile client by themselves.  ``None`` means
#: any non-empty value counts, otherwise the value has to contain one of
#: the listed strings.
MOBILE_HEADERS = {
    "HTTP_ACCEPT": (
        # Opera Mini
        "application/x-obml2d",
        # BlackBerry devices
        "application/vnd.rim.html",
        "text/vnd.wap.wml",
        "application/vnd.wap.xhtml+xml",
    ),
    "HTTP_X_WAP_PROFILE": None,
    "HTTP_X_WAP_CLIENTID": None,
    "HTTP_WAP_CONNECTION": None,
    "HTTP_PROFILE": None,
    # Reported by Opera Mini
    "HTTP_X_OPERAMINI_PHONE_UA": None,
    # Operator gateways
    "HTTP_X_NOKIA_GATEWAY_ID": None,
    "HTTP_X_ORANGE_ID": None,
    "HTTP_X_VODAFONE_3GPDPCONTEXT": None,
    "HTTP_X_HUAWEI_USERID": None,
    # Reported by Windows Smartphones
    "HTTP_UA_OS": None,
    "HTTP_X_MOBILE_GATEWAY": None,
    # Reported by AT&T
    "HTTP_X_ATT_DEVICEID": None,
    # Seen this on a HTC
    "HTTP_UA_CPU": ("ARM",),
    "HTTP_CLOUDFRONT_IS_MOBILE_VIEWER": ("true",),
    "HTTP_CLOUDFRONT_IS_TABLET_VIEWER": ("true",),
}


def normalize_header_name(name):
    """Convert a header name to the ``HTTP_UPPER_SNAKE`` form.

    >>> normalize_header_name("User-Agent")
    'HTTP_USER_AGENT'
    >>> normalize_header_name("HTTP_USER_AGENT")
    'HTTP_USER_AGENT'
    """
    name = name.strip().upper().replace("-", "_")
    if not name.startswith("HTTP_"):
        name = f"HTTP_{name}"
    return name


def _str_header_value(value):
    if isinstance(value, bytes):
        value = value.decode("latin-1")
    elif not isinstance(value, str):
        value = str(value)
    return value


class HttpHeaders:
    """A read only, case insensitive view of request headers.  Pass it a
    dict or a list of ``(name, value)`` tuples.  Names may be given in
    either spelling, bytes values are latin1 decoded.

    Iterating yields ``(name, value)`` pairs with the normalized names.

    >>> h = HttpHeaders({"User-Agent": "Mozilla/5.0"})
    >>> h["HTTP_USER_AGENT"]
    'Mozilla/5.0'
    >>> h.get("user-agent")
    'Mozilla/5.0'
    """

    def __init__(self, defaults=None):
        self._dict = {}
        if defaults is None:
            return
        if isinstance(defaults, HttpHeaders):
            self._dict.update(defaults._dict)
            return
        if isinstance(defaults, cabc.Mapping):
            defaults = defaults.items()
        for key, value in defaults:
            self._dict[normalize_header_name(key)] = _str_header_value(value)

    @classmethod
    def from_environ(cls, environ):
        """Collect the headers from a WSGI environment or a CGI style
        process environment.  Only ``HTTP_*`` keys are headers, everything
        else in there is server or process state and is skipped.
        """
        rv = cls()
        for key, value in environ.items():
            if isinstance(key, str) and key.startswith("HTTP_"):
                rv._dict[key] = _str_header_value(value)
        return rv

    def __getitem__(self, key):
        if not isinstance(key, str):
            raise KeyError(key)
        return self._dict[normalize_header_name(key)]

    def get(self, key, default=None, type=None):
        """Return the default value if the requested header doesn't
        exist.  If `type` is provided and is a callable it should convert
        the value, return it or raise a :exc:`ValueError` if that is not
        possible.  In this case the function will return the default as
        if the value was not found.

        :param key: the header name in either spelling.
        :param default: returned for missing headers.
        :param type: a callable used to convert the value.
        """
        try:
            rv = self[key]
        except KeyError:
            return default
        if type is None:
            return rv
        try:
            return type(rv)
        except ValueError:
            return default

    def __contains__(self, key):
        if not isinstance(key, str):
            return False
        return normalize_header_name(key) in self._dict

    def __iter__(self):
        return iter(self._dict.items())

    def __len__(self):
        return len(self._dict)

    def __bool__(self):
        return bool(self._dict)

    def __eq__(self, other):
        if isinstance(other, HttpHeaders):
            return self._dict == other._dict
        return NotImplemented

    __hash__ = None

    def items(self, http_case=False):
        """Iterate over ``(name, value)`` pairs.

        :param http_case: yield ``User-Agent`` style names instead of the
                          stored ``HTTP_USER_AGENT`` ones.
        """
        for key, value in self._dict.items():
            if http_case:
                key = key[5:].replace("_", "-").title()
            yield key, value

    def keys(self, http_case=False):
        for key, _ in self.items(http_case):
            yield key

    def values(self):
        return iter(self._dict.values())

    def to_dict(self):
        return dict(self._dict)

    def copy(self):
        return self.__class__(self)

    def __copy__(self):
        return self.copy()

    def __repr__(self):
        return f"{type(self).__name__}({self._dict!r})"
