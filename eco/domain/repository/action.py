"""Action record repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from datetime import datetime
from decimal import Decimal
from typing import Optional

from eco.domain.model.action import ActionRecord
from eco.domain.model.community import ActionTypeTotals
from eco.domain.model.progress import TypeTotals
from eco.domain.value import ActionId, ActionType, UserId


class ActionRepository(ABC):
    """Repository for ActionRecord entities.

    Defines the contract for action persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, action_id: ActionId) -> Optional[ActionRecord]:
        """Find an action record by ID.

        Args:
            action_id: The record's unique identifier

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, action: ActionRecord) -> ActionRecord:
        """Save an action record (create or update).

        Only REFLECTION records are ever updated.

        Args:
            action: The record to save

        Returns:
            The saved record
        """
        pass

    @abstractmethod
    async def save_all(self, actions: list[ActionRecord]) -> list[ActionRecord]:
        """Insert a batch of new action records.

        Args:
            actions: Records to insert

        Returns:
            The saved records, in input order
        """
        pass

    @abstractmethod
    async def find_types_logged_since(
        self,
        user_id: UserId,
        since: datetime,
        types: Collection[ActionType],
    ) -> set[ActionType]:
        """Which of the given types the user has logged at or after an instant.

        Args:
            user_id: The user's ID
            since: Inclusive lower bound on the record date
            types: Action types to look for

        Returns:
            Subset of ``types`` already recorded
        """
        pass

    @abstractmethod
    async def find_by_user(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ActionRecord]:
        """Find a user's records, newest first.

        Args:
            user_id: The user's ID
            start: Inclusive lower bound on the record date
            end: Exclusive upper bound on the record date
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            List of records
        """
        pass

    @abstractmethod
    async def find_all_by_user(self, user_id: UserId) -> list[ActionRecord]:
        """Find every record of a user, newest first.

        Args:
            user_id: The user's ID

        Returns:
            List of records
        """
        pass

    @abstractmethod
    async def count_by_user(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        """Count a user's records, optionally within a date range.

        Args:
            user_id: The user's ID
            start: Inclusive lower bound on the record date
            end: Exclusive upper bound on the record date

        Returns:
            Number of records
        """
        pass

    @abstractmethod
    async def find_by_user_in_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[ActionRecord]:
        """Find a user's records in ``[start, end)``, oldest first.

        Args:
            user_id: The user's ID
            start: Inclusive lower bound
            end: Exclusive upper bound

        Returns:
            List of records
        """
        pass

    @abstractmethod
    async def count_by_user_and_type(
        self, user_id: UserId, action_type: ActionType
    ) -> int:
        """Count a user's records of one type (all time).

        Args:
            user_id: The user's ID
            action_type: Type to count

        Returns:
            Number of records
        """
        pass

    @abstractmethod
    async def count_by_type_for_user(self, user_id: UserId) -> dict[ActionType, int]:
        """Count a user's records grouped by type (all time).

        Args:
            user_id: The user's ID

        Returns:
            Mapping of type to count; types never logged are absent
        """
        pass

    @abstractmethod
    async def totals_by_type_for_user(self, user_id: UserId) -> list[TypeTotals]:
        """Count, points and carbon saved per type for one user (all time).

        Args:
            user_id: The user's ID

        Returns:
            Totals sorted by count descending, then type name
        """
        pass

    @abstractmethod
    async def aggregate_totals(self) -> tuple[int, Decimal]:
        """Total record count and carbon saved across all users.

        Returns:
            (total actions, total carbon saved)
        """
        pass

    @abstractmethod
    async def aggregate_by_type(self) -> list[ActionTypeTotals]:
        """Count and carbon saved per type across all users.

        Returns:
            Totals sorted by count descending
        """
        pass

    @abstractmethod
    async def count_since(self, since: datetime) -> int:
        """Count records of all users at or after an instant.

        Args:
            since: Inclusive lower bound on the record date

        Returns:
            Number of records
        """
        pass
