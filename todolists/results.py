from enum import Enum


class Outcome(Enum):
    """
    Result of a single-statement write.

    Only SUCCESS is truthy, so callers that just need "did a row change"
    can test the outcome directly. Unexpected store errors are raised, never
    reported through an Outcome.
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

    def __bool__(self) -> bool:
        return self is Outcome.SUCCESS

    @classmethod
    def from_rowcount(cls, rowcount: int | None) -> "Outcome":
        return cls.SUCCESS if (rowcount or 0) > 0 else cls.NOT_FOUND
