"""
Core components of the dedupe shim.

- adornment: pure request mutations adding the replication marker
- adorner: client wrappers that adorn and forward write requests
- protocols: the client capability the wrappers expect
"""

from .adorner import (
    DedupeAdorner,
    dedupe_batch_write,
    dedupe_put,
    dedupe_transact_write,
    dedupe_update,
    validate_delegate,
)
from .adornment import (
    REPLICATION_MARKER_ATTRIBUTE,
    adorn_batch_write,
    adorn_put,
    adorn_transact_write,
    adorn_update,
    mark_item,
    marker_alias,
)
from .protocols import DocumentClient

__all__ = [
    "DedupeAdorner",
    "DocumentClient",
    "REPLICATION_MARKER_ATTRIBUTE",
    "adorn_batch_write",
    "adorn_put",
    "adorn_transact_write",
    "adorn_update",
    "dedupe_batch_write",
    "dedupe_put",
    "dedupe_transact_write",
    "dedupe_update",
    "mark_item",
    "marker_alias",
    "validate_delegate",
]
