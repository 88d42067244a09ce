from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class InvalidArgumentError(ValueError):
    """Raised for caller bugs: wrong-arity date sequences, unknown names."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


@dataclass(frozen=True, kw_only=True)
class InvalidTimeFormat:
    """Result of building an instant from fields that form no real date.

    Attributes:
        hour, minute, second, day, month, year: The rejected fields
        kind: Always ``ErrorKind.INVALID_TIME_FORMAT``
        epoch_seconds: Always 0, the zero state of a rejected instant
    """

    hour: int
    minute: int
    second: int
    day: int
    month: int
    year: int
    kind: ErrorKind = ErrorKind.INVALID_TIME_FORMAT
    epoch_seconds: int = 0

    def is_valid(self) -> bool:
        return False

    def __str__(self) -> str:
        return (
            f"{self.kind}: {self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"is not a Gregorian calendar date"
        )
