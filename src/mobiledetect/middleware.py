"""
Detector Middleware
===================

Attach a :class:`~mobiledetect.MobileDetect` to every request handled by
a WSGI application.  The detector is stored in the WSGI environment
under ``environ_key``.

.. code-block:: python

    from mobiledetect.middleware import DetectorMiddleware

    app = DetectorMiddleware(app, cache_ttl=3600)

    def view(environ, start_response):
        detect = environ["mobiledetect.detector"]
        ...

.. autoclass:: DetectorMiddleware
"""
import typing as t

from .detector import MobileDetect


class DetectorMiddleware:
    """Create a detector from the request environment before calling the
    wrapped application.

    :param app: The WSGI application to wrap.
    :param environ_key: Key the detector is stored under.
    :param options: Passed on to :meth:`MobileDetect.from_environ`, for
        example ``cache_ttl`` or ``rules``.
    """

    def __init__(
        self,
        app: t.Callable,
        environ_key: str = "mobiledetect.detector",
        **options: t.Any,
    ) -> None:
        self.app = app
        self.environ_key = environ_key
        self.options = options

    def __call__(
        self, environ: t.Dict[str, t.Any], start_response: t.Callable
    ) -> t.Iterable[bytes]:
        environ[self.environ_key] = MobileDetect.from_environ(environ, **self.options)
        return self.app(environ, start_response)
