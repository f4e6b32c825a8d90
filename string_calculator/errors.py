"""Exceptions raised by the string calculator."""


class CalculatorError(ValueError):
    """Base class for input the calculator rejects by design"""

    kind = "CalculatorError"


class InvalidSequenceError(CalculatorError):
    """The number sequence ends with a dangling delimiter"""

    kind = "InvalidSequence"

    def __init__(self, message="Invalid character in sequence."):
        super().__init__(message)


class NegativesNotAllowedError(CalculatorError):
    """One or more negative numbers were found in the sequence"""

    kind = "NegativesNotAllowed"

    def __init__(self, negatives):
        self.negatives = list(negatives)
        super().__init__(
            f"Negatives not allowed: {','.join(map(str, self.negatives))}"
        )


class NumberFormatError(ValueError):
    """A token could not be read as a base-10 integer.

    Not a CalculatorError: callers treat it as a generic parse error.
    """

    kind = "ParseFailure"

    def __init__(self, message, token=None):
        self.token = token
        super().__init__(message)
