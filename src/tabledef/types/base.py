"""Base model class for all hive-tabledef models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class TableDefBaseModel(BaseModel):
    """Base model for all hive-tabledef models.

    Models are read-only snapshots: they are built once per invocation from
    caller-supplied data and never mutated afterwards.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        frozen=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return self.model_dump(mode="json", by_alias=False, exclude_none=True)
