from __future__ import annotations

from typing import List

from pydantic import ValidationError


class FinanceEngineError(ValueError):
    """Base class for every error the engine raises."""


class InvalidArgument(FinanceEngineError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidArgument":
        messages = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            message = error["msg"]
            messages.append(f"{location}: {message}" if location else message)
        return cls(messages)


class DivisionDegenerate(FinanceEngineError):
    """A zero denominator reached arithmetic that has no special case for it."""
