"""
Domain models for GrenLoc.

Pydantic models passed between the codec core, the presenters and the CLI.
All models are frozen: a result record never changes after the pipeline
builds it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """A latitude/longitude pair in decimal degrees.

    Any finite float is accepted; range is not checked. NaN and infinity are
    rejected so the codec is total over every Coordinate that can be built.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{self.lat:.6f}, {self.lng:.6f}"


class Parish(BaseModel):
    """An administrative parish (or the offshore fallback)."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=3, max_length=3, description="Three-letter parish code")
    name: str


# =============================================================================
# Codec
# =============================================================================


class GridCell(BaseModel):
    """A 50 m encoder grid cell plus the metre values it was floored from.

    ``grid_x`` comes from latitude and ``grid_y`` from longitude.
    """

    model_config = ConfigDict(frozen=True)

    grid_x: int = Field(..., ge=0)
    grid_y: int = Field(..., ge=0)
    lat_meters: float
    lng_meters: float


class ParsedCode(BaseModel):
    """The fields of a syntactically valid location code."""

    model_config = ConfigDict(frozen=True)

    parish_code: str
    gx: int = Field(..., ge=0, le=999)
    gy: int = Field(..., ge=0, le=999)

    @property
    def code(self) -> str:
        """Canonical string form."""
        return f"GN-{self.parish_code}-{self.gx:03d}{self.gy:03d}"


class EncodedLocation(BaseModel):
    """Everything the encode pipeline produces for one coordinate."""

    model_config = ConfigDict(frozen=True)

    code: str
    coordinate: Coordinate
    parish: Parish
    grid_x: int
    grid_y: int
    lat_meters: float
    lng_meters: float
    maps_url: str
