import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class ReplicationConfig(BaseModel):
    """Configuration for replication marker adornment."""

    region_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_REGION"),
        validate_default=True,
        description="Active AWS region, written as the replication marker value"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for adornment decisions"
    )

    @field_validator('region_name')
    @classmethod
    def normalize_region(cls, v):
        """Treat blank region names as not configured."""
        if v is None:
            return v
        v = v.strip()
        return v or None

    @property
    def is_enabled(self) -> bool:
        """Whether requests should be adorned with the replication marker."""
        return self.region_name is not None

    @classmethod
    def from_env(cls) -> 'ReplicationConfig':
        """Create configuration from environment variables.

        Returns:
            ReplicationConfig instance
        """
        return cls()

    @classmethod
    def for_region(cls, region_name: str, **kwargs) -> 'ReplicationConfig':
        """Create configuration pinned to a specific region.

        Args:
            region_name: AWS region (e.g., 'us-west-2')
            **kwargs: Additional configuration parameters

        Returns:
            ReplicationConfig instance
        """
        return cls(region_name=region_name, **kwargs)

    @classmethod
    def disabled(cls) -> 'ReplicationConfig':
        """Create configuration that forwards every request unchanged."""
        return cls(region_name=None)

    model_config = ConfigDict(frozen=True)
