"""
Data models for the licensing cost engine.

Uses enums for the closed tier sets and dataclasses for configuration
and results.
"""
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Resolution(str, Enum):
    """Camera resolution tier, in display order."""
    HD_720P = "720p"
    MP2 = "2MP"
    MP5 = "5MP"
    UHD_4K = "4K"

    @classmethod
    def parse(cls, value: Union["Resolution", str]) -> "Resolution":
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if member.value.lower() == text.lower():
                return member
        raise ValueError(f"Unknown resolution tier: {value!r}")


class RecordingMode(str, Enum):
    """Recording mode; continuous lines sort before motion lines."""
    CONTINUOUS = "continuous"
    MOTION = "motion"

    @classmethod
    def parse(cls, value: Union["RecordingMode", str]) -> "RecordingMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown recording mode: {value!r}") from None


class Bitrate(int, Enum):
    """Selectable bitrate tiers in kbps."""
    KBPS_1024 = 1024
    KBPS_2048 = 2048
    KBPS_4096 = 4096
    KBPS_8192 = 8192

    @property
    def label(self) -> str:
        return f"{self.value}kbps"

    @classmethod
    def parse(cls, value: Union["Bitrate", int, str]) -> "Bitrate":
        """Accept the enum, its kbps value, or text such as '4096' / '4096kbps'."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text.endswith("kbps"):
            text = text[:-4].strip()
        try:
            return cls(int(text))
        except ValueError:
            raise ValueError(f"Unsupported bitrate: {value!r}") from None


# Cost scales linearly with bitrate relative to this baseline
BASELINE_BITRATE = Bitrate.KBPS_2048
DEFAULT_BITRATE = Bitrate.KBPS_2048

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_count(value) -> int:
    """
    Turn raw widget input into an integer camera count before clamping.

    Text uses its leading integer ("12abc" -> 12), floats truncate toward
    zero, anything non-numeric becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    if match:
        return int(match.group(1))
    return 0


@dataclass(frozen=True)
class TierPrice:
    """Unit prices for one resolution tier."""
    continuous: float
    motion: float

    def for_mode(self, mode: RecordingMode) -> float:
        if mode is RecordingMode.CONTINUOUS:
            return self.continuous
        return self.motion


@dataclass(frozen=True)
class PriceTable:
    """Static resolution → unit price mapping. Must cover every tier."""
    prices: dict[Resolution, TierPrice]

    def __post_init__(self):
        missing = [r.value for r in Resolution if r not in self.prices]
        if missing:
            raise ValueError(f"Price table missing tiers: {', '.join(missing)}")
        for resolution, tier in self.prices.items():
            for mode in RecordingMode:
                price = tier.for_mode(mode)
                if not (isinstance(price, (int, float)) and math.isfinite(price) and price > 0):
                    raise ValueError(
                        f"{resolution.value} {mode.value} price must be a finite number > 0, got {price!r}"
                    )

    def __getitem__(self, resolution: Union[Resolution, str]) -> TierPrice:
        return self.prices[Resolution.parse(resolution)]

    def unit_price(self, resolution: Union[Resolution, str], mode: Union[RecordingMode, str]) -> float:
        return self[resolution].for_mode(RecordingMode.parse(mode))

    @classmethod
    def default(cls) -> "PriceTable":
        return cls(prices=dict(DEFAULT_PRICES))


DEFAULT_PRICES = {
    Resolution.HD_720P: TierPrice(continuous=10.0, motion=7.0),
    Resolution.MP2: TierPrice(continuous=15.0, motion=10.0),
    Resolution.MP5: TierPrice(continuous=20.0, motion=15.0),
    Resolution.UHD_4K: TierPrice(continuous=30.0, motion=25.0),
}


@dataclass
class TierConfig:
    """Camera counts and bitrate for a single resolution tier."""
    continuous_count: int = 0
    motion_count: int = 0
    bitrate: Bitrate = DEFAULT_BITRATE

    def count(self, mode: RecordingMode) -> int:
        if mode is RecordingMode.CONTINUOUS:
            return self.continuous_count
        return self.motion_count


def _initial_tiers() -> dict[Resolution, TierConfig]:
    return {resolution: TierConfig() for resolution in Resolution}


@dataclass
class CameraConfiguration:
    """
    The user's camera setup, mutated in place by UI edits.

    Counts are clamped to >= 0 at this boundary so the engine never sees
    negative values.
    """
    tiers: dict[Resolution, TierConfig] = field(default_factory=_initial_tiers)

    def __post_init__(self):
        for resolution in Resolution:
            self.tiers.setdefault(resolution, TierConfig())

    def __getitem__(self, resolution: Union[Resolution, str]) -> TierConfig:
        return self.tiers[Resolution.parse(resolution)]

    def count(self, mode: Union[RecordingMode, str], resolution: Union[Resolution, str]) -> int:
        return self[resolution].count(RecordingMode.parse(mode))

    def bitrate(self, resolution: Union[Resolution, str]) -> Bitrate:
        return self[resolution].bitrate

    def set_count(self, mode: Union[RecordingMode, str], resolution: Union[Resolution, str], new_value) -> int:
        """Store max(0, new_value) for (mode, resolution); returns the stored count."""
        mode = RecordingMode.parse(mode)
        tier = self[resolution]
        value = max(0, coerce_count(new_value))
        if mode is RecordingMode.CONTINUOUS:
            tier.continuous_count = value
        else:
            tier.motion_count = value
        return value

    def increment(self, mode: Union[RecordingMode, str], resolution: Union[Resolution, str]) -> int:
        return self.set_count(mode, resolution, self.count(mode, resolution) + 1)

    def decrement(self, mode: Union[RecordingMode, str], resolution: Union[Resolution, str]) -> int:
        return self.set_count(mode, resolution, self.count(mode, resolution) - 1)

    def set_bitrate(self, resolution: Union[Resolution, str], value: Union[Bitrate, int, str]) -> Bitrate:
        """Replace the bitrate for one resolution; other tiers are untouched."""
        bitrate = Bitrate.parse(value)
        self[resolution].bitrate = bitrate
        return bitrate

    def reset(self, default_bitrate: Union[Bitrate, int, str] = DEFAULT_BITRATE):
        """Return every tier to zero cameras at the given default bitrate."""
        bitrate = Bitrate.parse(default_bitrate)
        self.tiers = {resolution: TierConfig(bitrate=bitrate) for resolution in Resolution}

    @property
    def total_cameras(self) -> int:
        return sum(t.continuous_count + t.motion_count for t in self.tiers.values())


@dataclass
class TraceStep:
    """A single step in the cost computation trace."""
    step: str
    description: str
    value: Optional[str] = None


def format_currency(value: float, symbol: str = "$") -> str:
    """Render a cost for display, rounded to cents."""
    return f"{symbol}{value:.2f}"


@dataclass
class LineItem:
    """A non-zero cost entry for one (resolution, mode) pair."""
    resolution: Resolution
    mode: RecordingMode
    count: int
    bitrate: Bitrate
    unit_price: float
    multiplier: float
    cost: float

    def describe(self) -> str:
        """e.g. '2 720p continuous @ 2048kbps'"""
        return f"{self.count} {self.resolution.value} {self.mode.value} @ {self.bitrate.label}"

    def to_dict(self) -> dict:
        return {
            "resolution": self.resolution.value,
            "mode": self.mode.value,
            "count": self.count,
            "bitrate": self.bitrate.value,
            "unit_price": self.unit_price,
            "multiplier": self.multiplier,
            "cost": round(self.cost, 2),
        }


@dataclass
class Result:
    """Total licensing cost and its itemized breakdown."""
    total: float
    lines: list[LineItem] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the result-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def cost_for(self, resolution: Union[Resolution, str]) -> float:
        """Combined continuous + motion cost of one resolution tier."""
        resolution = Resolution.parse(resolution)
        return sum(line.cost for line in self.lines if line.resolution is resolution)

    @property
    def camera_count(self) -> int:
        return sum(line.count for line in self.lines)

    def to_dict(self) -> dict:
        """Display-rounded dict form of the result."""
        return {
            "total": round(self.total, 2),
            "lines": [line.to_dict() for line in self.lines],
        }
