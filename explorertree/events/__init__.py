"""Change notification for explorertree.

The bus is the per-node observer registry; propagation decides which
buses hear about a mutation and with which relation tag.
"""

from .bus import (
    ChangeBus,
    ChangeEvent,
    ChangeKind,
    Relation,
    STRUCTURAL_KINDS,
    parse_event_name,
)
from .propagation import propagate, broadcast, collect, deliver, iter_targets

__all__ = [
    'ChangeBus',
    'ChangeEvent',
    'ChangeKind',
    'Relation',
    'STRUCTURAL_KINDS',
    'parse_event_name',
    'propagate',
    'broadcast',
    'iter_targets',
    'collect',
    'deliver',
]
