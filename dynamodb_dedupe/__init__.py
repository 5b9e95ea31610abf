"""
DynamoDB Replication Dedupe

Adorns DynamoDB document client writes with the ``aws:rep:updateregion``
marker so global tables replication can deduplicate replicated writes.
"""

from .config import ReplicationConfig
from .exceptions import (
    DedupeError,
    InvalidDelegateError,
)
from .core import (
    # Client wrappers
    DedupeAdorner,
    DocumentClient,
    dedupe_batch_write,
    dedupe_put,
    dedupe_transact_write,
    dedupe_update,
    # Request mutations
    REPLICATION_MARKER_ATTRIBUTE,
    adorn_batch_write,
    adorn_put,
    adorn_transact_write,
    adorn_update,
)
from .utils import create_logger

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "ReplicationConfig",

    # Exceptions
    "DedupeError",
    "InvalidDelegateError",

    # Client wrappers
    "DedupeAdorner",
    "DocumentClient",
    "dedupe_batch_write",
    "dedupe_put",
    "dedupe_transact_write",
    "dedupe_update",

    # Request mutations
    "REPLICATION_MARKER_ATTRIBUTE",
    "adorn_batch_write",
    "adorn_put",
    "adorn_transact_write",
    "adorn_update",

    # Logging
    "create_logger",
]
