"""
mobiledetect
~~~~~~~~~~~~

Mobile Detect classifies the client of an HTTP request as a phone, a
tablet or neither, and tells its operating system, browser and their
versions apart.  It looks at the User-Agent and at a few headers that
mobile gateways and proxies add, and tests them against a table of
named regular expressions.

It has no network or database dependencies and keeps its answers in a
small in-memory cache.
"""
from .cache import Cache
from .cache import CacheItem
from .detector import MobileDetect
from .detector import VERSION_TYPE_FLOAT
from .detector import VERSION_TYPE_STRING
from .headers import HttpHeaders
from .rules import Category
from .rules import DEFAULT_RULE_TABLE
from .rules import Rule
from .rules import RuleTable

__version__ = "4.8.0"
