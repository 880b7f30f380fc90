from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.db.models import Q, QuerySet

from challenges.models import Challenge
from challenges.store.errors import (
    ChallengeNotFound,
    InvalidArgument,
    Operation,
    ProviderFailure,
)

log = logging.getLogger("challenges.store")

UPDATABLE_FIELDS = frozenset({
    "title",
    "description",
    "reward_type",
    "reward_value",
    "due_date",
    "status",
    "is_weekly",
    "recurrence_rule",
})
CREATABLE_FIELDS = UPDATABLE_FIELDS | {"community_member_id"}

# Newest first; id breaks ties between rows created in the same instant.
ORDERING = ("-created_at", "-id")

# What the ORM raises for a failing database or values it cannot store.
PROVIDER_ERRORS = (DatabaseError, ValidationError, ValueError, TypeError)

Record = dict[str, Any]


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ChallengeFilters:
    """
    Optional predicates for :meth:`ChallengeStore.list_all`.

    ``None`` means "not filtered", so ``is_weekly=False`` is a real filter.
    """

    status: Optional[str] = None
    community_member_id: Optional[int] = None
    is_weekly: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ChallengeFilters:
        """Build filters from a plain mapping, ignoring keys that are not filters."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def as_lookup(self) -> dict[str, Any]:
        lookup: dict[str, Any] = {}
        if self.status:
            lookup["status"] = self.status
        if self.community_member_id is not None:
            lookup["community_member_id"] = self.community_member_id
        if self.is_weekly is not None:
            lookup["is_weekly"] = self.is_weekly
        return lookup


FiltersArg = Union[ChallengeFilters, Mapping[str, Any], None]


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class ChallengeStore:
    """
    Async CRUD and search over challenge rows.

    Every method returns plain dict records and raises only
    :class:`~challenges.store.errors.ChallengeStoreError` subclasses.
    """

    def __init__(self, model: type[Challenge] = Challenge) -> None:
        self._model = model

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _failure(operation: Operation, exc: BaseException) -> ProviderFailure:
        log.error("Could not %s: %s", operation.value, exc)
        return ProviderFailure(operation, exc)

    @staticmethod
    def _checked_fields(
        data: Mapping[str, Any], allowed: frozenset[str], operation: Operation
    ) -> dict[str, Any]:
        rejected = sorted(set(data) - allowed)
        if rejected:
            raise InvalidArgument(
                f"Fields cannot be written: {', '.join(rejected)}.", operation
            )
        return dict(data)

    @staticmethod
    def _record(challenge: Challenge, include_member: bool = False) -> Record:
        record = challenge.as_dict()
        if include_member:
            # Only valid on rows loaded with select_related("community_member").
            record["member"] = challenge.community_member.as_dict()
        return record

    async def _collect(self, queryset: QuerySet, include_member: bool = False) -> list[Record]:
        if include_member:
            queryset = queryset.select_related("community_member")
        return [
            self._record(challenge, include_member)
            async for challenge in queryset.order_by(*ORDERING)
        ]

    async def _fetch(
        self, challenge_id: Any, operation: Operation, include_member: bool = False
    ) -> Challenge:
        queryset = self._model.objects.all()
        if include_member:
            queryset = queryset.select_related("community_member")
        try:
            return await queryset.aget(pk=challenge_id)
        except self._model.DoesNotExist:
            raise ChallengeNotFound(challenge_id, operation) from None
        except PROVIDER_ERRORS as exc:
            raise self._failure(operation, exc) from exc

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def create(self, data: Mapping[str, Any]) -> Record:
        """
        Insert a challenge and return the stored record.

        ``id`` and ``created_at`` are assigned by the database; passing
        either (or any unknown field) raises :class:`InvalidArgument`.
        """
        values = self._checked_fields(data, CREATABLE_FIELDS, Operation.CREATE)
        try:
            challenge = await self._model.objects.acreate(**values)
            await challenge.arefresh_from_db()
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.CREATE, exc) from exc
        log.info("Created challenge %s (%s).", challenge.pk, challenge.title)
        return self._record(challenge)

    async def list_all(
        self, filters: FiltersArg = None, *, include_member: bool = False
    ) -> list[Record]:
        """Return every challenge matching ``filters``, newest first."""
        if filters is None:
            filters = ChallengeFilters()
        elif not isinstance(filters, ChallengeFilters):
            if not isinstance(filters, Mapping):
                raise InvalidArgument(
                    f"Filters must be a mapping, not {type(filters).__name__}.", Operation.LIST
                )
            filters = ChallengeFilters.from_mapping(filters)
        lookup = filters.as_lookup()
        log.debug("Listing challenges with %r.", lookup)
        try:
            return await self._collect(self._model.objects.filter(**lookup), include_member)
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.LIST, exc) from exc

    async def get_by_id(self, challenge_id: Any, *, include_member: bool = False) -> Record:
        challenge = await self._fetch(challenge_id, Operation.GET, include_member)
        return self._record(challenge, include_member)

    async def update(self, challenge_id: Any, partial_data: Mapping[str, Any]) -> Record:
        """
        Change the supplied fields of a challenge and return the new record.

        Only fields in ``UPDATABLE_FIELDS`` are accepted; others raise
        :class:`InvalidArgument` before the row is read.
        """
        changes = self._checked_fields(partial_data, UPDATABLE_FIELDS, Operation.UPDATE)
        challenge = await self._fetch(challenge_id, Operation.UPDATE)
        if not changes:
            return self._record(challenge)

        for name, value in changes.items():
            setattr(challenge, name, value)
        try:
            await challenge.asave(update_fields=[*changes, "updated_at"])
            await challenge.arefresh_from_db()
        except self._model.DoesNotExist:
            raise ChallengeNotFound(challenge_id, Operation.UPDATE) from None
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.UPDATE, exc) from exc
        log.info("Updated challenge %s: %s.", challenge.pk, ", ".join(sorted(changes)))
        return self._record(challenge)

    async def delete(self, challenge_id: Any) -> dict[str, Any]:
        challenge = await self._fetch(challenge_id, Operation.DELETE)
        try:
            await challenge.adelete()
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.DELETE, exc) from exc
        log.info("Deleted challenge %s.", challenge_id)
        return {"id": challenge_id, "deleted": True, "message": "Challenge deleted successfully."}

    async def search(self, term: Any) -> list[Record]:
        """
        Challenges whose title or description contains ``term``, newest first.

        A missing, blank or non-string term matches nothing.
        """
        if not isinstance(term, str) or not term.strip():
            return []
        lookup = "icontains" if getattr(settings, "CHALLENGES_SEARCH_IGNORE_CASE", False) else "contains"
        query = Q(**{f"title__{lookup}": term}) | Q(**{f"description__{lookup}": term})
        log.debug("Searching challenges for %r.", term)
        try:
            return await self._collect(self._model.objects.filter(query))
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.SEARCH, exc) from exc

    async def list_by_status(self, status: str) -> list[Record]:
        if not status:
            raise InvalidArgument("Status must not be empty.", Operation.LIST_BY_STATUS)
        try:
            return await self._collect(self._model.objects.filter(status=status))
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.LIST_BY_STATUS, exc) from exc

    async def list_by_member(self, community_member_id: Any) -> list[Record]:
        if community_member_id is None:
            raise InvalidArgument("Community member id must be given.", Operation.LIST_BY_MEMBER)
        try:
            return await self._collect(
                self._model.objects.filter(community_member_id=community_member_id)
            )
        except PROVIDER_ERRORS as exc:
            raise self._failure(Operation.LIST_BY_MEMBER, exc) from exc


challenge_store = ChallengeStore()
