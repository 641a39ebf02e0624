"""Validation error values and their aggregation."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Which rule violation a ValidationError describes."""

    DATE_FORMAT = "date_format"
    DAY_OF_WEEK_MISMATCH = "day_of_week_mismatch"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    DATE_INCONSISTENCY = "date_inconsistency"


class ValidationError(BaseModel):
    """One rule violation found in a feed document.

    Returned as data by the rules, never raised.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class ValidationResult(BaseModel):
    """All violations from one validation pass, in rule order."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[ValidationError, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    @classmethod
    def join(
        cls, *parts: Union["ValidationResult", ValidationError, None]
    ) -> "ValidationResult":
        """Combine results and single errors into one result.

        None parts are skipped so rules returning "no error" can be passed
        straight through. Order and identity of every error are kept.
        """
        errors: list[ValidationError] = []
        for part in parts:
            if part is None:
                continue
            if isinstance(part, ValidationResult):
                errors.extend(part.errors)
            else:
                errors.append(part)
        return cls(errors=tuple(errors))

    def __str__(self) -> str:
        return "\n".join(self.messages)
