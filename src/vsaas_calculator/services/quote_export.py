"""
Quote Export - Tabular cost breakdown for display and CSV download.
"""
import pandas as pd

from ..engine.models import Result

EXPORT_COLUMNS = ['Resolution', 'Mode', 'Cameras', 'Bitrate (kbps)', 'Unit Price', 'Multiplier', 'Cost']


def breakdown_frame(result: Result) -> pd.DataFrame:
    """One row per line item; cost rounded to cents."""
    return pd.DataFrame([{
        'Resolution': line.resolution.value,
        'Mode': line.mode.value,
        'Cameras': line.count,
        'Bitrate (kbps)': line.bitrate.value,
        'Unit Price': line.unit_price,
        'Multiplier': line.multiplier,
        'Cost': round(line.cost, 2),
    } for line in result.lines], columns=EXPORT_COLUMNS)


def breakdown_csv(result: Result) -> str:
    """CSV text of the breakdown with a trailing total row."""
    rows = breakdown_frame(result).to_dict(orient='records')
    rows.append({'Resolution': 'TOTAL', 'Cost': round(result.total, 2)})
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS).to_csv(index=False)
