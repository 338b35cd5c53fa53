"""
FieldGuard Size Model

A Size describes one rendition of an uploaded image: its scale bucket,
orientation and pixel dimensions. The model stores whatever the client
sent; whether the entry is acceptable is decided by the list-sizes
constraint, which reports offending entries in their JSON form.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SizeScale(str, Enum):
    """Scale buckets, smallest to largest."""
    XXSM = "XXSM"
    XSM = "XSM"
    SM = "SM"
    MD = "MD"
    LG = "LG"
    XLG = "XLG"
    XXLG = "XXLG"


class SizeOrientation(str, Enum):
    """Image orientations."""
    THUMBNAIL = "THUMBNAIL"
    LANDSCAPE = "LANDSCAPE"
    PORTRAIT = "PORTRAIT"


SCALES = frozenset(scale.value for scale in SizeScale)
ORIENTATIONS = frozenset(orientation.value for orientation in SizeOrientation)


class Size(BaseModel):
    """One image rendition as received from a client."""
    model_config = ConfigDict(frozen=True)

    scale: str = Field(..., description="Scale bucket, one of SizeScale")
    orientation: str = Field(..., description="Orientation, one of SizeOrientation")
    width: int = Field(default=0, description="Width in pixels")
    height: int = Field(default=0, description="Height in pixels")

    @field_validator("scale", "orientation", mode="before")
    @classmethod
    def _enum_to_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    def has_known_scale(self) -> bool:
        return self.scale in SCALES

    def has_known_orientation(self) -> bool:
        return self.orientation in ORIENTATIONS

    def to_json(self) -> str:
        """Compact JSON used when reporting this entry."""
        return self.model_dump_json()
