from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1


# ----------------- SAMPLERS ---------------------


class SamplerLinearScanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear_scan"] = "linear_scan"


class SamplerCumulativeModel(BaseModel):
    """Binary search over a numpy cumulative length table."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["cumulative"] = "cumulative"


SamplerUnion = Annotated[
    SamplerLinearScanModel | SamplerCumulativeModel,
    Field(discriminator="kind"),
]


# ----------------- FOLLOWER ---------------------


class ClockModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    rate: float = 0.1  # arc length per second
    start_t: float = 0.0

    @field_validator("rate")
    @classmethod
    def _positive_rate(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("rate must be > 0")
        return v


class FollowerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    heading_step: float = 0.02
    marker_radius: float = 10.0
    indicator_length: float = 2.0

    @field_validator("heading_step", "marker_radius", "indicator_length")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


class CanvasModel(BaseModel):
    """Screen rectangle the canvas is mapped onto."""

    model_config = ConfigDict(extra="forbid")
    x: float = 0.0
    y: float = 0.0
    width: float = 800.0
    height: float = 600.0

    @field_validator("width", "height")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


RGB = tuple[int, int, int]


class StrokeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: float = 1.0
    color: RGB = (0, 255, 0)


class RenderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path_stroke: StrokeModel = StrokeModel()
    indicator_stroke: StrokeModel = StrokeModel(width=2.0, color=(255, 255, 255))
    marker_color: RGB = (255, 255, 255)


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "trajectory"
    run_id: str = "local"
    log: LogModel = LogModel()
    sampler: SamplerUnion = Field(default_factory=SamplerLinearScanModel)
    clock: ClockModel = ClockModel()
    follower: FollowerModel = FollowerModel()
    canvas: CanvasModel = CanvasModel()
    render: RenderModel = RenderModel()
