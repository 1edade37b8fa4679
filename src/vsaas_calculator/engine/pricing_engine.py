"""
Pricing Engine - Licensing cost computation with traceability.

Cost for each resolution tier is the camera count times the mode's unit
price, scaled linearly by the tier's bitrate relative to 2048 kbps. Totals
keep full precision; rounding happens only when a figure is displayed.
"""
import logging
from typing import Optional

from ..config.settings import get_settings, Settings
from .models import (
    BASELINE_BITRATE,
    Bitrate,
    CameraConfiguration,
    LineItem,
    PriceTable,
    RecordingMode,
    Resolution,
    Result,
)

logger = logging.getLogger(__name__)


def bitrate_multiplier(bitrate: Bitrate) -> float:
    """Cost scale for a bitrate, e.g. 4096 kbps -> 2.0."""
    return int(bitrate) / int(BASELINE_BITRATE)


def compute_cost(config: CameraConfiguration, prices: PriceTable) -> Result:
    """
    Compute the total licensing cost and itemized breakdown.

    Args:
        config: Camera counts and bitrate per resolution tier (not mutated)
        prices: Unit prices per resolution tier and recording mode

    Returns:
        Result with the unrounded total and one LineItem per non-zero cost,
        ordered by resolution tier then continuous before motion
    """
    result = Result(total=0.0)

    for resolution in Resolution:
        tier = config[resolution]
        multiplier = bitrate_multiplier(tier.bitrate)
        result.add_trace("Bitrate", f"{resolution.value} @ {tier.bitrate.label}", f"×{multiplier:g}")

        for mode in RecordingMode:
            count = tier.count(mode)
            unit_price = prices[resolution].for_mode(mode)
            cost = count * unit_price * multiplier

            if cost > 0:
                result.lines.append(LineItem(
                    resolution=resolution,
                    mode=mode,
                    count=count,
                    bitrate=tier.bitrate,
                    unit_price=unit_price,
                    multiplier=multiplier,
                    cost=cost,
                ))
                result.add_trace(
                    "Extension",
                    f"{count} × ${unit_price:.2f} × {multiplier:g} ({resolution.value} {mode.value})",
                    f"${cost:.2f}",
                )

            result.total += cost

    result.add_trace("Total", f"{len(result.lines)} line items", f"${result.total:.2f}")
    logger.debug("Computed total %.4f across %d line items", result.total, len(result.lines))
    return result


class PricingEngine:
    """
    Holds the active price table and prices camera configurations against it.

    The price table comes from, in order: the explicit argument, the file
    named in settings, or the built-in defaults.
    """

    def __init__(self, prices: Optional[PriceTable] = None, settings: Optional[Settings] = None):
        """Initialize engine with a price table."""
        self.settings = settings or get_settings()

        if prices is None:
            # Deferred: the loader imports engine models
            from ..services.price_table_service import load_price_table
            prices = load_price_table(self.settings.price_table)

        self.prices = prices

    def new_configuration(self) -> CameraConfiguration:
        """Fresh configuration: zero cameras, default bitrate on every tier."""
        config = CameraConfiguration()
        self.reset(config)
        return config

    def reset(self, config: CameraConfiguration) -> CameraConfiguration:
        """Clear a configuration in place back to the configured default bitrate."""
        config.reset(self.settings.default_bitrate)
        return config

    def calculate(self, config: CameraConfiguration) -> Result:
        """Recompute the cost of a configuration from scratch."""
        return compute_cost(config, self.prices)

    def unit_cost(self, config: CameraConfiguration, mode: RecordingMode, resolution: Resolution) -> float:
        """Cost of one more camera for (mode, resolution) at the configured bitrate."""
        resolution = Resolution.parse(resolution)
        return self.prices.unit_price(resolution, mode) * bitrate_multiplier(config.bitrate(resolution))
