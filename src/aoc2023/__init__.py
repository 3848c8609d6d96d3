from __future__ import annotations

from .api import Answer, available_days, solve_file, solve_source
from .errors import NumberOverflowError, ParseError

__all__ = [
    "Answer",
    "NumberOverflowError",
    "ParseError",
    "available_days",
    "solve_file",
    "solve_source",
]
