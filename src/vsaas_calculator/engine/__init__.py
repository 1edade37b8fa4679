"""Engine subpackage - configuration model and cost computation."""
from .pricing_engine import PricingEngine, compute_cost, bitrate_multiplier
from .models import (
    Bitrate,
    CameraConfiguration,
    LineItem,
    PriceTable,
    RecordingMode,
    Resolution,
    Result,
    TierPrice,
    format_currency,
)

__all__ = [
    'PricingEngine', 'compute_cost', 'bitrate_multiplier',
    'Bitrate', 'CameraConfiguration', 'LineItem', 'PriceTable',
    'RecordingMode', 'Resolution', 'Result', 'TierPrice', 'format_currency',
]
