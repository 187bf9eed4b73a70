"""Common response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SnapshotModel(BaseModel):
    """Frozen base for decoded API resources.

    Unknown keys are ignored and every field defaults to ``None``, so a key
    missing from the response reads as "unknown" rather than as a zero value.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
