# app.py
import logging

import streamlit as st

from simulation.config import AnimationConfig
from simulation.data_loader import load_all
from simulation.frame import build_frame, make_tick
from simulation.scheduler import AnimationState, FrameScheduler, Playback
from simulation.visual_elements import build_figure

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# -------------------------
# STREAMLIT PAGE CONFIG
# -------------------------
st.set_page_config(layout="wide", page_title="Trip Animation")
st.title("🚗 Trip Animation")

base_config = AnimationConfig.from_env()

# -------------------------
# Load data
# -------------------------
@st.cache_data
def cached_datasets():
    return load_all()

datasets = cached_datasets()

# -------------------------
# Sidebar controls
# -------------------------
st.sidebar.header("Animation Settings")
speed_factor = st.sidebar.number_input(
    "Speed factor", min_value=0.01, max_value=100.0,
    value=float(base_config.speed_factor), step=0.1
)
trail_length = st.sidebar.slider(
    "Trail length (fraction of trip)", min_value=0.0, max_value=1.0,
    value=float(base_config.trail_length), step=0.05
)
config = base_config.with_overrides(speed_factor=speed_factor, trail_length=trail_length)

if "animation" not in st.session_state:
    st.session_state.animation = AnimationState(current_time=config.min_time)
state = st.session_state.animation
if "playback" not in st.session_state:
    st.session_state.playback = Playback()
playback = st.session_state.playback

col1, col2 = st.sidebar.columns([1, 1])
play = col1.button("▶ Play")
stop = col2.button("■ Stop")

# Scrubber: direct set, last write wins over the frame loop
def on_scrub():
    playback.scrub(state, st.session_state.scrub)

st.session_state.scrub = float(round(min(max(state.current_time, config.min_time), config.max_time)))
st.slider(
    "Simulation time (minutes)",
    min_value=float(config.min_time), max_value=float(config.max_time),
    step=1.0, key="scrub", on_change=on_scrub
)

# -------------------------
# Clock above the map
# -------------------------
label_area = st.empty()
map_area = st.empty()


def render(frame):
    label_area.markdown(f"<h3 style='text-align:center'>{frame.label}</h3>", unsafe_allow_html=True)
    map_area.plotly_chart(build_figure(frame), use_container_width=True)


render(build_frame(state.current_time, datasets, config))

if stop:
    playback.pause(st.session_state.pop("scheduler", None))
if play:
    playback.resume()

# plays from first load; any widget change reruns the script and the loop
# picks up again from the (possibly scrubbed) clock value
scheduler = FrameScheduler(fps=config.fps)
st.session_state.scheduler = scheduler
playback.run(scheduler, make_tick(datasets, render, config), state)
