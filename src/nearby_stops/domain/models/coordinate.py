"""Coordinate domain model."""

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A point on the earth's surface in signed decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)
