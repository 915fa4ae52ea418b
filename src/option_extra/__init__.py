"""Additional utilities for Option and Result values.

Lazy and predicate-based combinators on top of two small sum types:
- Option: Some(value) | Nothing, with no truthiness
- Result: Ok(value) | Err(error)

Example:
    >>> from option_extra import Err, Nothing, Ok, Some
    >>>
    >>> Some("abc").zip_lazy(lambda: Some(1))
    Some(('abc', 1))
    >>> Nothing().zip_lazy(lambda: Some(1))  # producer never runs
    Nothing
    >>> Ok(1).satisfies(lambda n: n % 2 == 1)
    True
    >>> Err("boom").satisfies(lambda _: True)
    False
"""

import logging

from .config import OptionExtraSettings, clear_settings_cache, configure_logging, get_settings
from .core import NOTHING, Err, Nothing, Ok, Option, Result, Some
from .errors import ErrorCode, PanicInfo, UnwrapError
from .ext import OptionExt, ResultExt
from .extract import some

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Carriers
    "Option", "Some", "Nothing", "NOTHING",
    "Result", "Ok", "Err",
    # Extensions
    "OptionExt", "ResultExt", "some",
    # Errors
    "ErrorCode", "PanicInfo", "UnwrapError",
    # Configuration
    "OptionExtraSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
