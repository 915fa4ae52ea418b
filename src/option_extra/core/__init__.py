"""Option and Result carrier types."""

from .option import NOTHING, Nothing, Option, Some
from .result import Err, Ok, Result

__all__ = ["NOTHING", "Err", "Nothing", "Ok", "Option", "Result", "Some"]
