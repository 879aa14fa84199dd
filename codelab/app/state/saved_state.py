"""Saved instance state exchanged with the host on view recreation."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class StateBundle(BaseModel):
    """Opaque, serializable snapshot of the UI state.

    Only the two booleans the screen cares about are kept: whether onboarding
    is still shown, and which greeting cards are expanded.
    """
    model_config = ConfigDict(extra='forbid')

    onboarding_visible: bool = Field(default=True, description="Onboarding screen still shown")
    expanded: Dict[str, bool] = Field(default_factory=dict, description="Expansion flag per item name")
