"""Exception types raised while building a gift graph.

Two failure kinds are kept apart so callers can tell a usage error from a
defect: ``InvalidInput`` for bad participant input and ``InternalInconsistency``
for adjacency bookkeeping that should be impossible.
"""

from __future__ import annotations


class GiftGraphError(Exception):
    """Base class for all giftgraph errors."""


class InvalidInput(GiftGraphError, ValueError):
    """Participant input is missing or cannot form a network."""


class InternalInconsistency(GiftGraphError, RuntimeError):
    """The graph's adjacency index contradicts itself."""
