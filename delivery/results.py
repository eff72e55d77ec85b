"""
Delivery result types.

Adapters return a DeliveryOutcome instead of raising; the dispatcher
collects them into a DeliveryReceipt for the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DeliveryChannel(Enum):
    EMAIL = "email"
    SMS = "sms"


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of one best-effort delivery attempt."""
    channel: DeliveryChannel
    destination: str
    delivered: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "channel": self.channel.value,
            "destination": self.destination,
            "delivered": self.delivered,
            "error": self.error,
        }


@dataclass(frozen=True)
class DeliveryReceipt:
    """All delivery outcomes for one request."""
    outcomes: List[DeliveryOutcome] = field(default_factory=list)

    @property
    def all_delivered(self) -> bool:
        return all(outcome.delivered for outcome in self.outcomes)

    def outcome_for(self, channel: DeliveryChannel) -> Optional[DeliveryOutcome]:
        for outcome in self.outcomes:
            if outcome.channel == channel:
                return outcome
        return None

    def to_dict(self) -> dict:
        return {
            "all_delivered": self.all_delivered,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }
