"""Error taxonomy shared by the statistics engine, the drawing algorithms
and the generation pipeline.

Every error carries a human-readable ``description``; callers tell the
cases apart by class, never by message.
"""


class EuroMillionsError(Exception):
    """Base class for every error raised by the package."""

    description: str = "Unexpected error"

    def __init__(self, description: str | None = None):
        self.description = description or self.description
        super().__init__(self.description)


# --- Input validation ---

class InputValidationError(EuroMillionsError):
    description = "Invalid input"


class EmptyTableError(InputValidationError):
    description = "The draw table is empty"


class EmptyRowError(InputValidationError):
    description = "The first row of the draw table is empty"


class InvalidRowLengthError(InputValidationError):
    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row} has {actual} values, expected {expected}")


class InvalidNumberRangeError(InputValidationError):
    def __init__(self, value: int | None = None, description: str | None = None):
        self.value = value
        if description is None:
            description = (
                f"Number out of range: {value}" if value is not None
                else "No valid number available for this draw"
            )
        super().__init__(description)


class InvalidDistanceError(InputValidationError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid distance value: {value}. Must be greater than 0")


class InvalidDrawCountError(InputValidationError):
    description = "The requested number of combinations is not valid"


class InvalidPreferredNumbersError(InputValidationError):
    description = "The preferred numbers list is not valid"


# --- Drawing ---

class DrawingError(EuroMillionsError):
    description = "The draw could not be completed"


class InsufficientCandidatesError(DrawingError):
    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Cannot draw {requested} numbers from a list with only {available} numbers"
        )


# --- Generation ---

class MaxAttemptsExceededError(EuroMillionsError):
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"No valid combination found after {attempts} attempts"
        )


class ServiceNotReadyError(EuroMillionsError):
    description = "Drawing algorithm not properly initialized"


# --- Parsing ---

class ParserError(EuroMillionsError):
    description = "Unable to parse the draw history"


class InvalidFormatError(ParserError):
    description = "No data rows found"


class InvalidDateFormatError(ParserError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class InvalidNumberFormatError(ParserError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid number: {value!r}")
