"""
Price Table Service - Loads unit prices from CSV/Excel into a PriceTable.

The engine consumes a PriceTable but does not own it; this service is the
collaborator that supplies one, either built-in or from a file.
"""
import logging
from pathlib import Path
from typing import Optional

import pandas as pd
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..engine.models import PriceTable, Resolution, TierPrice

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('resolution', 'continuous', 'motion')


class PriceTableError(ValueError):
    """Raised when a price table file is malformed."""


class PriceRow(BaseModel):
    """One row of a price table file."""
    resolution: Resolution
    continuous: float = Field(gt=0, allow_inf_nan=False)
    motion: float = Field(gt=0, allow_inf_nan=False)

    @field_validator('resolution', mode='before')
    @classmethod
    def _parse_resolution(cls, value):
        return Resolution.parse(value)


def _read_frame(path: Path) -> pd.DataFrame:
    if path.suffix.lower() in ('.xlsx', '.xls'):
        return pd.read_excel(path, dtype=str)
    return pd.read_csv(path, dtype=str)


def price_table_from_frame(df: pd.DataFrame) -> PriceTable:
    """
    Build a PriceTable from a DataFrame with resolution/continuous/motion columns.

    Header names are matched case-insensitively. Every resolution tier must
    appear exactly once with positive prices.
    """
    df = df.rename(columns=lambda c: str(c).strip().lower())
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise PriceTableError(f"Price table missing columns: {', '.join(missing)}")

    df = df.dropna(how='all', subset=list(REQUIRED_COLUMNS))

    prices: dict[Resolution, TierPrice] = {}
    for idx, record in enumerate(df[list(REQUIRED_COLUMNS)].to_dict(orient='records'), start=1):
        record = {k: (v.strip() if isinstance(v, str) else v) for k, v in record.items()}
        try:
            row = PriceRow(**record)
        except ValidationError as e:
            errors = "; ".join(err['msg'] for err in e.errors())
            raise PriceTableError(f"Row {idx}: {errors}") from e
        if row.resolution in prices:
            raise PriceTableError(f"Row {idx}: duplicate entry for {row.resolution.value}")
        prices[row.resolution] = TierPrice(continuous=row.continuous, motion=row.motion)

    missing_tiers = [r.value for r in Resolution if r not in prices]
    if missing_tiers:
        raise PriceTableError(f"Price table missing tiers: {', '.join(missing_tiers)}")

    return PriceTable(prices=prices)


def load_price_table(path: Optional[Path] = None) -> PriceTable:
    """
    Load a price table from a CSV or Excel file.

    With no path, the built-in price table is returned.
    """
    if path is None:
        logger.info("Using built-in price table")
        return PriceTable.default()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Price table not found at {path}.")

    table = price_table_from_frame(_read_frame(path))
    logger.info("Loaded price table from %s", path)
    return table


def price_table_frame(table: PriceTable) -> pd.DataFrame:
    """Tabular view of a price table, one row per tier in display order."""
    return pd.DataFrame([
        {
            'Resolution': resolution.value,
            'Continuous': table[resolution].continuous,
            'Motion': table[resolution].motion,
        }
        for resolution in Resolution
    ])
