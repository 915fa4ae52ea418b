"""Extension mixins for Option and Result.

The function forms live in the submodules (``option_extra.ext.option``,
``option_extra.ext.result``) since both define ``satisfies`` and ``zip_lazy``.
"""

from .option import OptionExt
from .result import ResultExt

__all__ = ["OptionExt", "ResultExt"]
