"""Scene document model: the JSON shape a host hands us."""

from __future__ import annotations

import enum
import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeType(str, enum.Enum):
    DOCUMENT = "DOCUMENT"
    PAGE = "PAGE"
    FRAME = "FRAME"
    GROUP = "GROUP"
    SECTION = "SECTION"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    POLYGON = "POLYGON"
    STAR = "STAR"
    LINE = "LINE"
    VECTOR = "VECTOR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    TEXT = "TEXT"


class PaintType(str, enum.Enum):
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"


class BlendMode(str, enum.Enum):
    PASS_THROUGH = "PASS_THROUGH"
    NORMAL = "NORMAL"
    DARKEN = "DARKEN"
    MULTIPLY = "MULTIPLY"
    LINEAR_BURN = "LINEAR_BURN"
    COLOR_BURN = "COLOR_BURN"
    LIGHTEN = "LIGHTEN"
    SCREEN = "SCREEN"
    LINEAR_DODGE = "LINEAR_DODGE"
    COLOR_DODGE = "COLOR_DODGE"
    OVERLAY = "OVERLAY"
    SOFT_LIGHT = "SOFT_LIGHT"
    HARD_LIGHT = "HARD_LIGHT"
    DIFFERENCE = "DIFFERENCE"
    EXCLUSION = "EXCLUSION"
    HUE = "HUE"
    SATURATION = "SATURATION"
    COLOR = "COLOR"
    LUMINOSITY = "LUMINOSITY"


def _channel_to_byte(value: float) -> int:
    # Half-up rounding, matching how design tools display 8-bit channels
    return int(math.floor(min(max(value, 0.0), 1.0) * 255 + 0.5))


class Color(BaseModel):
    """Paint color with channels in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)

    def to_rgb(self) -> RGB:
        return RGB(
            r=_channel_to_byte(self.r),
            g=_channel_to_byte(self.g),
            b=_channel_to_byte(self.b),
        )


class RGB(BaseModel):
    """8-bit color, the unit every resolved background is reported in."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @classmethod
    def from_hex(cls, value: str) -> RGB:
        """Parse ``#RGB`` or ``#RRGGBB`` (leading ``#`` optional)."""
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"Invalid hex color: {value!r}")
        return cls(r=int(text[0:2], 16), g=int(text[2:4], 16), b=int(text[4:6], 16))


class BBox(BaseModel):
    """Axis-aligned bounding box in document space."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Fill(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: PaintType = PaintType.SOLID
    color: Color | None = None
    visible: bool = True
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    blend_mode: BlendMode = BlendMode.NORMAL

    @property
    def is_solid(self) -> bool:
        return self.type == PaintType.SOLID and self.color is not None


class SceneNodeModel(BaseModel):
    """One node of a scene document. Children are ordered bottom-most first."""

    id: str
    name: str = ""
    type: NodeType = NodeType.RECTANGLE
    visible: bool = True
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    blend_mode: BlendMode | None = None
    fills: list[Fill] = Field(default_factory=list)
    bbox: BBox | None = None
    children: list[SceneNodeModel] = Field(default_factory=list)

    @field_validator("type")
    @classmethod
    def _not_a_container_root(cls, value: NodeType) -> NodeType:
        if value in (NodeType.PAGE, NodeType.DOCUMENT):
            raise ValueError("Pages and documents cannot be nested inside a page")
        return value


class SceneDocument(BaseModel):
    """A single page of a design document plus the host's current selection."""

    id: str = "page"
    name: str = "Page 1"
    background: list[Fill] = Field(default_factory=list)
    children: list[SceneNodeModel] = Field(default_factory=list)
    selection: list[str] = Field(default_factory=list)
