import io
import os
import sys

import pandas as pd

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from vsaas_calculator.engine import CameraConfiguration, PriceTable, compute_cost
from vsaas_calculator.services.quote_export import EXPORT_COLUMNS, breakdown_csv, breakdown_frame


def sample_result():
    config = CameraConfiguration()
    config.set_count('continuous', '720p', 2)
    config.set_count('motion', '2MP', 3)
    config.set_bitrate('2MP', 1024)
    return compute_cost(config, PriceTable.default())


def test_breakdown_frame_rows():
    df = breakdown_frame(sample_result())

    assert list(df.columns) == EXPORT_COLUMNS
    assert df['Resolution'].tolist() == ['720p', '2MP']
    assert df['Mode'].tolist() == ['continuous', 'motion']
    assert df['Cameras'].tolist() == [2, 3]
    assert df['Bitrate (kbps)'].tolist() == [2048, 1024]
    assert df['Cost'].tolist() == [20.0, 15.0]


def test_breakdown_frame_empty():
    df = breakdown_frame(compute_cost(CameraConfiguration(), PriceTable.default()))

    assert df.empty
    assert list(df.columns) == EXPORT_COLUMNS


def test_breakdown_csv_has_total_row():
    df = pd.read_csv(io.StringIO(breakdown_csv(sample_result())))

    assert len(df) == 3
    assert df.iloc[-1]['Resolution'] == 'TOTAL'
    assert df.iloc[-1]['Cost'] == 35.0
