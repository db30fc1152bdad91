from typing import Dict, List, Optional


class QuizError(Exception):
    """Base class for questionnaire errors."""


class ValidationError(QuizError):
    """Raised on submit while some statements are still unanswered."""

    def __init__(self, errors: Dict[int, str]):
        self.errors = dict(errors)
        self.missing: List[int] = list(self.errors)
        first = self.missing[0] if self.missing else None
        super().__init__(
            f"{len(self.missing)} statement(s) unanswered, first missing: q{first}"
        )


class IncompleteResponseError(QuizError):
    """Raised when scores are requested for a partial response set."""

    def __init__(self, missing: List[int]):
        self.missing = list(missing)
        super().__init__(f"cannot score incomplete responses, missing: {self.missing}")


class InvalidRatingError(QuizError, ValueError):
    def __init__(self, value, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"rating must be one of 1, 2, 3, 4 (got {value!r})")


class UnknownStatementError(QuizError, KeyError):
    def __init__(self, statement_id):
        self.statement_id = statement_id
        super().__init__(statement_id)

    def __str__(self) -> str:
        return f"no statement with id {self.statement_id!r}"
