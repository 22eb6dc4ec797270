from dataclasses import dataclass, field

from .math import Point

DEFAULT_SPRING_CONSTANT = 0.15
DEFAULT_DAMPING = 0.85

# fraction of the damping factor applied as an additive force
DAMPING_FORCE_SCALE = 0.1


@dataclass
class ControlPoint:
    """
    Spring-damped control point that relaxes toward `target`.

      - position / velocity / target: plain (x, y) tuples, replaced on every change
      - spring_constant: Hooke stiffness pulling position toward target
      - damping: applied twice per step, once as an additive force
        (-damping * velocity * 0.1) and once as a velocity multiplier
    """
    position: Point
    velocity: Point = (0.0, 0.0)
    target: Point | None = None
    spring_constant: float = DEFAULT_SPRING_CONSTANT
    damping: float = DEFAULT_DAMPING
    _home: Point = field(init=False, repr=False)

    def __post_init__(self):
        self.position = (float(self.position[0]), float(self.position[1]))
        if self.target is None:
            self.target = self.position
        self._home = self.position

    @classmethod
    def at(cls, x: float, y: float, **kwargs) -> "ControlPoint":
        return cls(position=(x, y), **kwargs)

    def set_target(self, x: float, y: float) -> None:
        self.target = (float(x), float(y))

    def step(self, dt: float) -> None:
        """
        Advance one integration step. `dt` is a multiple of the nominal frame
        interval, not seconds.
        """
        px, py = self.position
        vx, vy = self.velocity
        tx, ty = self.target
        k = self.spring_constant
        d = self.damping

        ax = -k * (px - tx) - d * vx * DAMPING_FORCE_SCALE
        ay = -k * (py - ty) - d * vy * DAMPING_FORCE_SCALE

        vx = (vx + ax * dt) * d
        vy = (vy + ay * dt) * d

        self.velocity = (vx, vy)
        self.position = (px + vx * dt, py + vy * dt)

    def reset(self, position: Point | None = None) -> None:
        """Put the point back at `position` (or where it was created), at rest."""
        pos = self._home if position is None else (float(position[0]), float(position[1]))
        self.position = pos
        self.velocity = (0.0, 0.0)
        self.target = pos
