"""Configuration models for OrgChart.

OrgChartConfig holds per-chart settings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OrgChartConfig(BaseModel):
    """Per-chart configuration."""

    # Re-check uniqueness/acyclicity of the whole tree after every operation.
    validate_after_each_operation: bool = False
    # Raise if undo cannot find a snapshotted report under the old supervisor.
    strict_undo: bool = True
    default_log_limit: int = Field(default=20, ge=1)
