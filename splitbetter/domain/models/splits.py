"""Domain models for splits."""

from dataclasses import dataclass
from decimal import Decimal

ParticipantId = str


@dataclass(frozen=True)
class Split:
    """Shared expense group among a fixed set of participants.

    Attributes:
        split_id: Identifier of the split in the backing store.
        title: Display name of the trip or event.
        currency: Currency code every expense amount is expressed in.
        budget: Spending ceiling for regular expenses.
        participants: Ordered, unique participant identifiers.
    """

    split_id: str
    title: str
    currency: str
    budget: Decimal
    participants: tuple[ParticipantId, ...]

    def has_participant(self, participant: ParticipantId) -> bool:
        """Return True when the participant belongs to the split."""
        return participant in self.participants


__all__ = ["ParticipantId", "Split"]
