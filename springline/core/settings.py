import json
import logging
from dataclasses import dataclass, asdict, fields

from .math import Point
from .physics import DEFAULT_SPRING_CONSTANT, DEFAULT_DAMPING
from .sampler import DEFAULT_RESOLUTION, DEFAULT_TANGENT_COUNT, DEFAULT_TANGENT_LENGTH

log = logging.getLogger(__name__)

_POINT_FIELDS = ("p1_offset", "p2_offset", "p1_start_offset", "p2_start_offset")


@dataclass(frozen=True)
class Settings:
    """
    Every tunable of the scene:
      - canvas size and the horizontal margin of the fixed endpoints
      - spring constants shared by both dynamic control points
      - pointer -> target offsets and start offsets from the canvas centre
      - sampling density of the path and tangent overlays
      - frame clock reference and FPS readout interval
    """
    canvas_width: int = 1000
    canvas_height: int = 600
    endpoint_margin: float = 200.0

    spring_constant: float = DEFAULT_SPRING_CONSTANT
    damping: float = DEFAULT_DAMPING

    p1_offset: Point = (-100.0, -50.0)
    p2_offset: Point = (100.0, 50.0)
    p1_start_offset: Point = (-150.0, -100.0)
    p2_start_offset: Point = (150.0, 100.0)

    curve_resolution: float = DEFAULT_RESOLUTION
    tangent_count: int = DEFAULT_TANGENT_COUNT
    tangent_length: float = DEFAULT_TANGENT_LENGTH

    nominal_frame_ms: float = 16.67
    max_frame_scale: float = 2.0
    fps_update_interval_ms: float = 500.0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.canvas_width}x{self.canvas_height}")
        if self.spring_constant < 0:
            raise ValueError(f"spring_constant must be >= 0, got {self.spring_constant}")
        if not (0.0 <= self.damping <= 1.0):
            raise ValueError(f"damping must be in [0, 1], got {self.damping}")
        if not (0.0 < self.curve_resolution <= 1.0):
            raise ValueError(f"curve_resolution must be in (0, 1], got {self.curve_resolution}")
        if self.tangent_count < 1:
            raise ValueError(f"tangent_count must be >= 1, got {self.tangent_count}")
        if self.nominal_frame_ms <= 0:
            raise ValueError(f"nominal_frame_ms must be > 0, got {self.nominal_frame_ms}")
        if self.max_frame_scale <= 0:
            raise ValueError(f"max_frame_scale must be > 0, got {self.max_frame_scale}")
        if self.fps_update_interval_ms <= 0:
            raise ValueError(f"fps_update_interval_ms must be > 0, got {self.fps_update_interval_ms}")

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        data = asdict(self)
        for name in _POINT_FIELDS:
            data[name] = list(data[name])
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(sorted(unknown))}")
        kwargs = dict(data)
        for name in _POINT_FIELDS:
            if name in kwargs:
                p = kwargs[name]
                if len(p) != 2:
                    raise ValueError(f"{name} must have 2 components, got {p!r}")
                kwargs[name] = (float(p[0]), float(p[1]))
        return cls(**kwargs)


def load_settings(path: str) -> Settings:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    settings = Settings.from_dict(data)
    log.debug("Loaded settings from %s: %s", path, settings)
    return settings
