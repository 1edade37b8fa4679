"""
Streamlit UI for the VSaaS Licensing Cost Calculator.

Features:
- Continuous / motion camera counts per resolution with -/+ steppers
- Independent bitrate selection per resolution
- Live cost breakdown and total, recomputed on every edit
- Export breakdown to CSV
"""
import streamlit as st
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from vsaas_calculator.engine import Bitrate, PricingEngine, RecordingMode, Resolution, format_currency
from vsaas_calculator.config.settings import get_settings
from vsaas_calculator.services.price_table_service import price_table_frame
from vsaas_calculator.services.quote_export import breakdown_csv, breakdown_frame


settings = get_settings()

st.set_page_config(
    page_title=settings.app_title,
    layout="wide",
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine(settings=settings)


try:
    engine = get_engine()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SESSION STATE
# ============================================================================
if 'camera_config' not in st.session_state:
    st.session_state.camera_config = engine.new_configuration()

config = st.session_state.camera_config


def count_key(mode: RecordingMode, resolution: Resolution) -> str:
    return f"{mode.value}-{resolution.value}"


def bitrate_key(resolution: Resolution) -> str:
    return f"bitrate-{resolution.value}"


def on_count_edit(mode: RecordingMode, resolution: Resolution):
    key = count_key(mode, resolution)
    st.session_state[key] = config.set_count(mode, resolution, st.session_state[key])


def on_step(mode: RecordingMode, resolution: Resolution, delta: int):
    if delta > 0:
        stored = config.increment(mode, resolution)
    else:
        stored = config.decrement(mode, resolution)
    st.session_state[count_key(mode, resolution)] = stored


def on_bitrate_edit(resolution: Resolution):
    config.set_bitrate(resolution, st.session_state[bitrate_key(resolution)])


def on_reset():
    engine.reset(config)
    for resolution in Resolution:
        for mode in RecordingMode:
            st.session_state[count_key(mode, resolution)] = 0
        st.session_state[bitrate_key(resolution)] = config.bitrate(resolution)


def render_count_column(mode: RecordingMode):
    for resolution in Resolution:
        key = count_key(mode, resolution)
        if key not in st.session_state:
            st.session_state[key] = config.count(mode, resolution)

        st.markdown(resolution.value)
        minus, field, plus = st.columns([1, 2, 1])
        minus.button("−", key=f"dec-{key}", on_click=on_step, args=(mode, resolution, -1))
        field.number_input(
            resolution.value,
            min_value=0,
            step=1,
            key=key,
            on_change=on_count_edit,
            args=(mode, resolution),
            label_visibility="collapsed",
        )
        plus.button("+", key=f"inc-{key}", on_click=on_step, args=(mode, resolution, 1))


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title(settings.app_title)
st.caption("Configure your camera setup and view pricing in real-time")

col1, col2, col3, col4 = st.columns(4, gap="large")

with col1:
    st.subheader("Continuous Recording")
    render_count_column(RecordingMode.CONTINUOUS)

with col2:
    st.subheader("Motion Recording")
    render_count_column(RecordingMode.MOTION)

with col3:
    st.subheader("Bitrate Selection")
    for resolution in Resolution:
        key = bitrate_key(resolution)
        if key not in st.session_state:
            st.session_state[key] = config.bitrate(resolution)
        st.selectbox(
            resolution.value,
            options=list(Bitrate),
            format_func=lambda b: b.label,
            key=key,
            on_change=on_bitrate_edit,
            args=(resolution,),
        )

# Recomputed from scratch on every rerun
result = engine.calculate(config)

with col4:
    st.subheader("Cost Breakdown")
    with st.container(border=True):
        if result.lines:
            for line in result.lines:
                st.caption(line.describe())
                st.markdown(f"**{format_currency(line.cost, settings.currency_symbol)}**")
        else:
            st.info("No cameras configured")

        st.divider()
        m1, m2 = st.columns(2)
        m1.metric("Total Cost", format_currency(result.total, settings.currency_symbol))
        m2.metric("Cameras", config.total_cameras)

st.divider()

btn_col1, btn_col2, _ = st.columns([1, 1, 4])
with btn_col1:
    st.download_button(
        "📥 CSV",
        data=breakdown_csv(result),
        file_name="vsaas_quote.csv",
        mime="text/csv",
        use_container_width=True,
        disabled=not result.lines,
    )
with btn_col2:
    st.button("🗑️ Reset", on_click=on_reset, use_container_width=True)

with st.expander("📊 Detailed Breakdown"):
    st.dataframe(breakdown_frame(result), use_container_width=True, hide_index=True)
    st.text(result.get_trace_text())

with st.expander("💲 Price Table"):
    st.dataframe(price_table_frame(engine.prices), use_container_width=True, hide_index=True)
