from dataclasses import dataclass
from typing import Any

from .validation_error import ValidationError


@dataclass
class ParseResult:
    """ Returns the result of a non-raising parse. Exactly one of data / error is set. """
    success: bool
    data: Any = None
    error: ValidationError | None = None
