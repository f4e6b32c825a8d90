"""Sum delimited number sequences."""

from .calculator import (
    CUSTOM_DELIMITER_MARKER,
    DEFAULT_DELIMITER,
    UPPER_BOUND,
    CalculatorConfig,
    StringCalculator,
    add,
)
from .errors import (
    CalculatorError,
    InvalidSequenceError,
    NegativesNotAllowedError,
    NumberFormatError,
)

__version__ = "1.0.0"

__all__ = [
    "CUSTOM_DELIMITER_MARKER",
    "DEFAULT_DELIMITER",
    "UPPER_BOUND",
    "CalculatorConfig",
    "StringCalculator",
    "add",
    "CalculatorError",
    "InvalidSequenceError",
    "NegativesNotAllowedError",
    "NumberFormatError",
]
