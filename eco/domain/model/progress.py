"""Per-user totals used by the progress views."""

from eco.domain.model.common import DomainModel
from eco.domain.value import ActionType, Amount


class TypeTotals(DomainModel):
    """A user's records of one action type, summed."""

    type: ActionType
    count: int
    points: Amount
    carbon_saved: Amount
