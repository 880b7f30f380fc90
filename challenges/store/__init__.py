from .errors import (
    ChallengeNotFound,
    ChallengeStoreError,
    InvalidArgument,
    Operation,
    ProviderFailure,
)
from .repository import (
    CREATABLE_FIELDS,
    UPDATABLE_FIELDS,
    ChallengeFilters,
    ChallengeStore,
    challenge_store,
)

__all__ = [
    "CREATABLE_FIELDS",
    "UPDATABLE_FIELDS",
    "ChallengeFilters",
    "ChallengeNotFound",
    "ChallengeStore",
    "ChallengeStoreError",
    "InvalidArgument",
    "Operation",
    "ProviderFailure",
    "challenge_store",
]
