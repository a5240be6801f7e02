"""In-memory action repository for testing."""

from collections import Counter
from collections.abc import Collection
from datetime import datetime
from decimal import Decimal
from typing import Optional

from eco.domain.model.action import ActionRecord
from eco.domain.model.community import ActionTypeTotals
from eco.domain.model.progress import TypeTotals
from eco.domain.repository.action import ActionRepository
from eco.domain.value import ActionId, ActionType, UserId


class InMemoryActionRepository(ActionRepository):
    """In-memory implementation of ActionRepository for testing."""

    def __init__(self) -> None:
        self._actions: dict[ActionId, ActionRecord] = {}

    async def find_by_id(self, action_id: ActionId) -> Optional[ActionRecord]:
        """Find an action record by ID."""
        return self._actions.get(action_id)

    async def save(self, action: ActionRecord) -> ActionRecord:
        """Save or update an action record."""
        self._actions[action.id] = action
        return action

    async def save_all(self, actions: list[ActionRecord]) -> list[ActionRecord]:
        """Save a batch of action records."""
        for action in actions:
            self._actions[action.id] = action
        return list(actions)

    async def find_types_logged_since(
        self,
        user_id: UserId,
        since: datetime,
        types: Collection[ActionType],
    ) -> set[ActionType]:
        """Which of the given types the user has logged since an instant."""
        wanted = set(types)
        return {
            a.type
            for a in self._user_actions(user_id, start=since)
            if a.type in wanted
        }

    async def find_by_user(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ActionRecord]:
        """Find a user's records, newest first."""
        actions = sorted(
            self._user_actions(user_id, start, end), key=lambda a: a.date, reverse=True
        )
        return actions[offset : offset + limit]

    async def find_all_by_user(self, user_id: UserId) -> list[ActionRecord]:
        """Find every record of a user, newest first."""
        return sorted(self._user_actions(user_id), key=lambda a: a.date, reverse=True)

    async def count_by_user(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        """Count a user's records."""
        return len(self._user_actions(user_id, start, end))

    async def find_by_user_in_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[ActionRecord]:
        """Find a user's records in ``[start, end)``, oldest first."""
        return sorted(self._user_actions(user_id, start, end), key=lambda a: a.date)

    async def count_by_user_and_type(
        self, user_id: UserId, action_type: ActionType
    ) -> int:
        """Count a user's records of one type."""
        return sum(1 for a in self._user_actions(user_id) if a.type == action_type)

    async def count_by_type_for_user(self, user_id: UserId) -> dict[ActionType, int]:
        """Count a user's records grouped by type."""
        return dict(Counter(a.type for a in self._user_actions(user_id)))

    async def totals_by_type_for_user(self, user_id: UserId) -> list[TypeTotals]:
        """Count, points and carbon saved per type for one user."""
        grouped: dict[ActionType, list[ActionRecord]] = {}
        for action in self._user_actions(user_id):
            grouped.setdefault(action.type, []).append(action)
        totals = [
            TypeTotals(
                type=action_type,
                count=len(actions),
                points=sum((a.points for a in actions), Decimal("0")),
                carbon_saved=sum((a.carbon_saved for a in actions), Decimal("0")),
            )
            for action_type, actions in grouped.items()
        ]
        return sorted(totals, key=lambda t: (-t.count, t.type.value))

    async def aggregate_totals(self) -> tuple[int, Decimal]:
        """Total record count and carbon saved."""
        actions = list(self._actions.values())
        return len(actions), sum((a.carbon_saved for a in actions), Decimal("0"))

    async def aggregate_by_type(self) -> list[ActionTypeTotals]:
        """Count and carbon saved per type, most logged first."""
        counts: Counter[str] = Counter()
        carbon: dict[str, Decimal] = {}
        for action in self._actions.values():
            name = action.type.value
            counts[name] += 1
            carbon[name] = carbon.get(name, Decimal("0")) + action.carbon_saved
        return [
            ActionTypeTotals(name=name, count=counts[name], carbon_saved=carbon[name])
            for name in sorted(counts, key=lambda n: (-counts[n], n))
        ]

    async def count_since(self, since: datetime) -> int:
        """Count records of all users since an instant."""
        return sum(1 for a in self._actions.values() if a.date >= since)

    def _user_actions(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[ActionRecord]:
        return [
            a
            for a in self._actions.values()
            if a.user_id == user_id
            and (start is None or a.date >= start)
            and (end is None or a.date < end)
        ]
