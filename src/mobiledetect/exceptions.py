"""
mobiledetect.exceptions
~~~~~~~~~~~~~~~~~~~~~~~

Errors raised when the detector or its cache is used incorrectly. Every
error derives from :exc:`MobileDetectException` so callers can catch
them all at once::

    from mobiledetect import MobileDetect
    from mobiledetect.exceptions import MobileDetectException

    try:
        detect.is_(name_from_config)
    except MobileDetectException:
        ...

The lookup errors are also :exc:`KeyError` subclasses and the argument
errors are :exc:`ValueError` subclasses, so code written against plain
mappings keeps working.

Data that merely fails to parse, such as a version fragment that is not
a number, never raises; the affected method returns ``False`` instead.
"""
from __future__ import annotations


class MobileDetectException(Exception):
    """Base class for all errors raised by this package."""


class UnknownRuleError(MobileDetectException, KeyError):
    """Raised by :meth:`~mobiledetect.MobileDetect.is_` and
    :meth:`~mobiledetect.rules.RuleTable.lookup` if no rule with the
    given name exists.
    """

    def __init__(self, rule_name: str) -> None:
        super().__init__(rule_name)
        self.rule_name = rule_name

    def __str__(self) -> str:
        return f"Unknown rule {self.rule_name!r}."


class UnknownPropertyError(MobileDetectException, KeyError):
    """Raised by :meth:`~mobiledetect.MobileDetect.version` if there is
    no version pattern for the given property.
    """

    def __init__(self, property_name: str) -> None:
        super().__init__(property_name)
        self.property_name = property_name

    def __str__(self) -> str:
        return f"Unknown property {self.property_name!r}."


class InvalidArgumentError(MobileDetectException, ValueError):
    """Raised by :meth:`~mobiledetect.MobileDetect.match` if it gets
    neither a pattern nor a User-Agent to work with.
    """


class CacheException(MobileDetectException):
    """Base class for errors raised by :class:`~mobiledetect.cache.Cache`."""


class InvalidKeyError(CacheException, ValueError):
    """Raised when a cache key is empty."""

    def __init__(self, key: object = None) -> None:
        super().__init__(f"Invalid cache key {key!r}.")
        self.key = key
