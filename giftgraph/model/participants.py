"""Creation of participant nodes from names or a head count."""

from __future__ import annotations

from typing import Dict, Sequence

from giftgraph.config import ParticipantConfig
from giftgraph.errors import InvalidInput
from giftgraph.logging import get_logger
from giftgraph.model.entities import Node, NodeKind

logger = get_logger(__name__)

#: Fewest participants that can exchange gifts.
MIN_PARTICIPANTS = 2


def participants_from_names(names: Sequence[str]) -> Dict[int, Node]:
    """Create one participant per name, numbered from 1 in input order.

    Args:
        names: Ordered display names, kept exactly as given.

    Returns:
        Mapping of participant id to Node.

    Raises:
        InvalidInput: If fewer than two names are given.
    """
    if isinstance(names, str):
        raise InvalidInput("names must be a sequence of strings, not a single string")
    if len(names) < MIN_PARTICIPANTS:
        raise InvalidInput(
            "names is either empty or has only one entry; at least "
            f"{MIN_PARTICIPANTS} participants are required"
        )

    participants: Dict[int, Node] = {}
    for idx, name in enumerate(names, start=1):
        if not name.strip():
            logger.warning(f"Participant {idx} has a blank name")
        participants[idx] = Node(id=idx, kind=NodeKind.PARTICIPANT, name=name)

    logger.debug(f"Created {len(participants)} participants from names")
    return participants


def participants_from_count(count: int) -> Dict[int, Node]:
    """Create ``count`` participants named "Person 1" .. "Person N".

    Raises:
        InvalidInput: If ``count`` is not an integer or is below two.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidInput(f"count must be an integer, got {count!r}")
    if count < MIN_PARTICIPANTS:
        raise InvalidInput(
            f"count is {count}; at least {MIN_PARTICIPANTS} participants are required"
        )

    participants = {
        pid: Node(id=pid, kind=NodeKind.PARTICIPANT, name=f"Person {pid}")
        for pid in range(1, count + 1)
    }
    logger.debug(f"Created {len(participants)} participants from count")
    return participants


def resolve_participants(config: ParticipantConfig) -> Dict[int, Node]:
    """Pick the input mode from ``config`` and create the participants.

    Names take precedence over a count when both are present.

    Raises:
        InvalidInput: If neither names nor a count is supplied, or the chosen
            input is invalid.
    """
    if config.names is not None:
        return participants_from_names(config.names)
    if config.count is not None:
        return participants_from_count(config.count)
    raise InvalidInput("provide some input: either participant names or a count")
