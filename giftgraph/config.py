"""Configuration values for gift graph construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from giftgraph.errors import InvalidInput


@dataclass(frozen=True)
class CapacityConfig:
    """Edge capacities used when wiring a gift graph.

    A participant receives at most one gift per month from the source and can
    give at most one per month to the sink. Between two participants the limit
    is one gift every three months.
    """

    # Source -> participant, gifts received per year
    source_capacity: int = 12

    # Participant -> sink, gifts given per year
    sink_capacity: int = 12

    # Participant -> participant, gifts exchanged per year
    peer_capacity: int = 4

    def validate(self) -> None:
        """Raise ``InvalidInput`` unless every capacity is a positive integer."""
        for field_name in ("source_capacity", "sink_capacity", "peer_capacity"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInput(
                    f"{field_name} must be a positive integer, got {value!r}"
                )


@dataclass(frozen=True)
class ParticipantConfig:
    """Participant input as supplied by the caller.

    Attributes:
        names: Explicit ordered display names, or None.
        count: Number of auto-named participants, or None.
    """

    names: Optional[Sequence[str]] = None
    count: Optional[int] = None

    @classmethod
    def from_cli(
        cls, names: Optional[str] = None, count: Optional[int] = None
    ) -> "ParticipantConfig":
        """Build a config from raw CLI values.

        Empty strings and a zero count are treated as "not given", matching the
        flag defaults of the command line.

        Args:
            names: Comma-separated names, e.g. ``"Alice,Bob"``.
            count: Participant count.

        Returns:
            ParticipantConfig with unset values normalised to None.
        """
        parsed = parse_names(names) if names else None
        return cls(names=parsed, count=count or None)


def parse_names(text: str) -> List[str]:
    """Split a comma-separated name list, keeping order and empty entries."""
    return text.split(",")


# Global configuration instance
CAPACITY_CONFIG = CapacityConfig()
