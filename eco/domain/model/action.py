"""Action record entity.

One row per eco-action a user logged. Points and carbon saved are copied from
the action catalog at creation time and never recomputed.
"""

from datetime import datetime

from pydantic import Field

from eco.domain.model.common import DomainModel
from eco.domain.value import ActionId, ActionType, Amount, UserId


class ActionRecord(DomainModel):
    """Logged action.

    Business rules:
    - Immutable once created, except REFLECTION records whose notes are upserted
    - At most one record per non-custom type per user per calendar day
    """

    id: ActionId
    user_id: UserId
    type: ActionType
    points: Amount = Field(ge=0)
    carbon_saved: Amount = Field(ge=0)
    notes: str = ""
    date: datetime = Field(default_factory=datetime.now)
