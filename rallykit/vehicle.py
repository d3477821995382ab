"""Vehicle kinds, control state, unit conversions and engine state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

MPS_MPH_SPEED_MULT = 2.23693629
MPS_KPH_SPEED_MULT = 3.6

# Speedo needle start, in degrees counter-clockwise from the x axis.
MPH_ZERO_DEG = 210
KPH_ZERO_DEG = 220

# Needle rotation per unit of speed.
DEG_PER_MPH = 1.5
DEG_PER_KPH = 1.0

MPS_MPH_DEG_MULT = MPS_MPH_SPEED_MULT * DEG_PER_MPH
MPS_KPH_DEG_MULT = MPS_KPH_SPEED_MULT * DEG_PER_KPH


def mps_to_mph(x: float) -> float:
    """Metres per second to miles per hour."""
    return x * MPS_MPH_SPEED_MULT


def mps_to_kph(x: float) -> float:
    """Metres per second to kilometres per hour."""
    return x * MPS_KPH_SPEED_MULT


def rpm_to_rps(x: float) -> float:
    """Revolutions per minute to radians per second."""
    return x * (math.pi / 30.0)


def rps_to_rpm(x: float) -> float:
    """Radians per second to revolutions per minute."""
    return x * (30.0 / math.pi)


class CoreType(Enum):
    """Basic kind of vehicle."""

    CAR = auto()
    TANK = auto()
    HELICOPTER = auto()
    PLANE = auto()
    HOVERCRAFT = auto()


class ClipType(Enum):
    """Kind of collision clip point."""

    BODY = auto()
    DRIVE_LEFT = auto()
    DRIVE_RIGHT = auto()
    HOVER = auto()


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class ControlState:
    """Control inputs of a vehicle (also used for control rates)."""

    throttle: float = 0.0
    brake1: float = 0.0
    brake2: float = 0.0
    turn: Vec3 = (0.0, 0.0, 0.0)
    aim: Vec2 = (0.0, 0.0)
    collective: float = 0.0

    def set_zero(self) -> None:
        """Release every control."""
        self.throttle = 0.0
        self.brake1 = 0.0
        self.brake2 = 0.0
        self.turn = (0.0, 0.0, 0.0)
        self.aim = (0.0, 0.0)
        self.collective = 0.0

    def set_default_rates(self) -> None:
        """Set the default control change rates."""
        self.throttle = 10.0
        self.brake1 = 10.0
        self.brake2 = 10.0
        self.turn = (10.0, 10.0, 10.0)
        self.aim = (10.0, 10.0)
        self.collective = 10.0

    def clamp(self) -> None:
        """Bring every value into its valid range."""
        self.throttle = _clamp(self.throttle, -1.0, 1.0)
        self.brake1 = _clamp(self.brake1, 0.0, 1.0)
        self.brake2 = _clamp(self.brake2, 0.0, 1.0)
        self.turn = tuple(_clamp(v, -1.0, 1.0) for v in self.turn)  # type: ignore[assignment]
        self.aim = tuple(_clamp(v, -1.0, 1.0) for v in self.aim)  # type: ignore[assignment]
        self.collective = _clamp(self.collective, -1.0, 1.0)


@dataclass
class ClipPoint:
    """A point of the vehicle that collides with the ground."""

    pt: Vec3 = (0.0, 0.0, 0.0)
    type: ClipType = ClipType.BODY
    force: float = 0.0
    dampening: float = 0.0


@dataclass
class WheelType:
    """Placement and performance of one wheel of a vehicle type."""

    pt: Vec3 = (0.0, 0.0, 0.0)
    radius: float = 0.0
    drive: float = 0.0
    steer: float = 0.0
    brake1: float = 0.0
    brake2: float = 0.0
    force: float = 0.0
    dampening: float = 0.0
    friction: float = 0.0


@dataclass
class EngineInstance:
    """Running state of a vehicle's engine."""

    min_rps: float
    rps: float = field(default=0.0)
    currentgear: int = 0
    targetgear_rel: int = 0
    gearch: float = 0.0
    reverse: bool = False
    out_torque: float = 0.0
    flag_gearchange: bool = False
    shiftdirection: int = 0

    def __post_init__(self) -> None:
        self.rps = self.min_rps

    def engine_rpm(self) -> float:
        """Current engine speed in revolutions per minute."""
        return rps_to_rpm(self.rps)

    def current_gear(self) -> int:
        """Current gear index, or -1 when reversing."""
        return -1 if self.reverse else self.currentgear

    def take_gear_change_flag(self) -> bool:
        """Report whether the gear changed since the last call, clearing the flag."""
        changed = self.flag_gearchange
        self.flag_gearchange = False
        return changed

    def reset(self) -> None:
        """Return the engine to idle in first gear."""
        self.rps = self.min_rps
        self.currentgear = 0
        self.targetgear_rel = 0
        self.gearch = 0.0
        self.out_torque = 0.0