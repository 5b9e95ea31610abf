from .config import ReplicationConfig

__all__ = [
    "ReplicationConfig",
]
