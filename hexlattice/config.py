"""Validated settings shared by a grid and the coordinates it accepts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import DoubleLayout, OffsetLayout

_DOUBLE_ALIASES = {
    "width": DoubleLayout.DOUBLED_WIDTH,
    "doubled_width": DoubleLayout.DOUBLED_WIDTH,
    "double_width": DoubleLayout.DOUBLED_WIDTH,
    "height": DoubleLayout.DOUBLED_HEIGHT,
    "doubled_height": DoubleLayout.DOUBLED_HEIGHT,
    "double_height": DoubleLayout.DOUBLED_HEIGHT,
}


def _normalise_token(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(" ", "_")


class GridSettings(BaseModel):
    """Conventions fixed for the lifetime of a :class:`~hexlattice.grid.HexGrid`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    offset_layout: OffsetLayout = Field(default=OffsetLayout.ODD_R)
    double_layout: DoubleLayout = Field(default=DoubleLayout.DOUBLED_WIDTH)
    min_step_cost: float = Field(default=1.0, gt=0.0)
    strict_layouts: bool = Field(default=True)

    @field_validator("offset_layout", mode="before")
    @classmethod
    def _coerce_offset_layout(cls, value: Any) -> Any:
        if isinstance(value, str):
            token = _normalise_token(value)
            for layout in OffsetLayout:
                if layout.value == token:
                    return layout
        return value

    @field_validator("double_layout", mode="before")
    @classmethod
    def _coerce_double_layout(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _DOUBLE_ALIASES.get(_normalise_token(value), value)
        return value

    @field_validator("min_step_cost")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)


__all__ = ["GridSettings"]
