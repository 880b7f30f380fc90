from __future__ import annotations

import enum
from typing import Any, Optional


class Operation(enum.Enum):
    CREATE         = "create challenge"
    LIST           = "list challenges"
    GET            = "get challenge"
    UPDATE         = "update challenge"
    DELETE         = "delete challenge"
    SEARCH         = "search challenges"
    LIST_BY_STATUS = "list challenges by status"
    LIST_BY_MEMBER = "list challenges by member"


class ChallengeStoreError(Exception):
    """Base class for everything the challenge store raises."""

    def __init__(self, message: str, operation: Optional[Operation] = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation


class ChallengeNotFound(ChallengeStoreError):
    """No challenge exists with the requested id."""

    def __init__(self, challenge_id: Any, operation: Optional[Operation] = None) -> None:
        super().__init__(f"Challenge {challenge_id!r} not found.", operation)
        self.challenge_id = challenge_id


class InvalidArgument(ChallengeStoreError, ValueError):
    """A required input is missing or a field may not be written."""


class ProviderFailure(ChallengeStoreError):
    """
    The database layer failed while running ``operation``.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, operation: Operation, cause: BaseException) -> None:
        super().__init__(f"Failed to {operation.value}: {cause}", operation)
