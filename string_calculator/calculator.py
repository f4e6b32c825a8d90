"""Sum a delimited sequence of numbers."""

import logging
import re
from dataclasses import dataclass

from .errors import InvalidSequenceError, NegativesNotAllowedError, NumberFormatError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ','
CUSTOM_DELIMITER_MARKER = '//'
UPPER_BOUND = 1000

# An ASCII base-10 integer with an optional sign. int() alone would also accept
# underscores ("1_000") and non-ASCII digits, which are not valid in a sequence.
number_pattern = re.compile(r'\s*[+-]?\d+\s*', re.ASCII)


@dataclass(frozen=True)
class CalculatorConfig:
    """Constants the calculator parses with"""

    default_delimiter: str = DEFAULT_DELIMITER
    custom_delimiter_marker: str = CUSTOM_DELIMITER_MARKER
    upper_bound: int = UPPER_BOUND


class StringCalculator:
    def __init__(self, config=None):
        self.config = config or CalculatorConfig()

    def add(self, numbers):
        """
        Add a delimited sequence of numbers.

        Args:
            numbers: The input to sum, optionally starting with a
                ``//<delimiters>\\n`` header naming one or two custom
                delimiters.

        Returns:
            Sum of every number up to the configured upper bound.

        Raises:
            InvalidSequenceError: The sequence ends with a delimiter.
            NegativesNotAllowedError: The sequence holds negative numbers.
            NumberFormatError: A token is not an integer.
        """
        if not numbers:
            return 0

        delimiters = self.resolve_delimiters(numbers)
        body = self.strip_header(numbers, delimiters)
        self.validate_sequence(self.normalise_newlines(body))

        values = self.to_ints(body, delimiters)
        self.validate_no_negatives(values)

        return sum(value for value in values if value <= self.config.upper_bound)

    def has_custom_delimiter(self, numbers):
        return numbers.startswith(self.config.custom_delimiter_marker)

    def resolve_delimiters(self, numbers):
        """Return the custom delimiter(s) named in the header, or the default one."""
        if not self.has_custom_delimiter(numbers):
            return (self.config.default_delimiter,)

        offset = len(self.config.custom_delimiter_marker)
        if len(numbers) <= offset:
            logger.debug("Header %r names no delimiter", numbers)
            raise NumberFormatError(f"no delimiter after {numbers!r}")

        # Two delimiters only when the header ends exactly after the second one
        if numbers.find('\n') == offset + 2:
            delimiters = (numbers[offset], numbers[offset + 1])
        else:
            delimiters = (numbers[offset],)

        logger.debug("Resolved custom delimiters %r", delimiters)
        return delimiters

    def strip_header(self, numbers, delimiters):
        """Remove a leading ``//<delimiters>\\n`` header, if there is one."""
        if self.has_custom_delimiter(numbers):
            header = f"{self.config.custom_delimiter_marker}{''.join(delimiters)}\n"
            if numbers.startswith(header):
                return numbers[len(header):]
        return numbers

    def normalise_newlines(self, body):
        return body.replace('\n', self.config.default_delimiter)

    def validate_sequence(self, cleaned):
        if cleaned.endswith(self.config.default_delimiter):
            logger.debug("Rejected %r: trailing delimiter", cleaned)
            raise InvalidSequenceError()

    def to_ints(self, body, delimiters):
        # Newline splits alongside whatever delimiters are active
        all_delimiters = dict.fromkeys(delimiters + ('\n',))
        split_pattern = '|'.join(map(re.escape, all_delimiters))

        values = []
        for token in re.split(split_pattern, body):
            if not number_pattern.fullmatch(token):
                logger.debug("Rejected token %r", token)
                raise NumberFormatError(
                    f"invalid literal for int() with base 10: {token!r}", token=token
                )
            values.append(int(token))
        return values

    def validate_no_negatives(self, values):
        negatives = [value for value in values if value < 0]
        if negatives:
            logger.debug("Rejected negatives %r", negatives)
            raise NegativesNotAllowedError(negatives)


_default_calculator = StringCalculator()


def add(numbers):
    """Sum ``numbers`` with the default configuration."""
    return _default_calculator.add(numbers)
