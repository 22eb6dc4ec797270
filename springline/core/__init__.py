from .math import Point, Curve, add, dist2, curve_point, curve_tangent, normalize
from .physics import ControlPoint
from .sampler import Sample, PathSamples, sample_path, sample_tangents
from .settings import Settings, load_settings
from .timing import FrameClock, FpsCounter
from .rig import SpringCurve
