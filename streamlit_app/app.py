"""CardioZone — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py

Set GEMINI_API_KEY to enable the smart-coach advice.
"""

from __future__ import annotations

from datetime import date

import numpy as np
import streamlit as st
import streamlit.components.v1 as components

from cardio_engine.math.zones import calculate_zones, select_target_zone
from cardio_engine.models.enums import (
    EFFORT_STEP,
    MAX_AGE,
    MIN_AGE,
    SessionPhase,
)
from cardio_engine.serialization import (
    report_filename,
    to_csv_bytes,
    to_html_report,
    zones_to_frame,
)
from cardio_engine.serialization.spreadsheet import CSV_MIME, REPORT_MIME
from cardio_engine.workout import QueuedSpeech, WorkoutSession
from cardio_engine.workout.clock import format_elapsed

from helpers import (
    FEEDBACK_COLORS,
    GENDER_LABELS,
    WARMING_UP_COLORS,
    build_zone_chart,
    fetch_advice_text,
    format_bpm_range,
    speech_script,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="CardioZone",
    page_icon="❤️",
    layout="centered",
)


# ---------------------------------------------------------------------------
# Workout session lifecycle (one per browser session)
# ---------------------------------------------------------------------------


def _open_workout(target_zone, max_hr: int) -> None:
    _close_workout()
    speech = QueuedSpeech()
    session = WorkoutSession(rng=np.random.default_rng(), speech=speech)
    if session.start(target_zone, max_hr):
        st.session_state["workout"] = session
        st.session_state["speech"] = speech


def _close_workout() -> None:
    session = st.session_state.pop("workout", None)
    st.session_state.pop("speech", None)
    if session is not None:
        session.close()


@st.fragment(run_every=1)
def _render_workout() -> None:
    """Workout panel, redrawn every second while a session exists."""
    session: WorkoutSession | None = st.session_state.get("workout")
    if session is None:
        return

    snap = session.snapshot()
    zone = snap.target_zone

    header, mute_col = st.columns([5, 1])
    header.subheader("Guided workout")
    if mute_col.button("🔇" if snap.is_muted else "🔊", key="mute"):
        session.set_muted(not snap.is_muted)

    if snap.feedback is None:
        banner = "Warming up"
        bg, border, fg = WARMING_UP_COLORS
    else:
        banner = snap.feedback.message
        bg, border, fg = FEEDBACK_COLORS[snap.feedback.color]

    time_col, bpm_col = st.columns(2)
    time_col.metric("Time", format_elapsed(snap.elapsed_seconds))
    bpm_col.metric("Current BPM (simulated)", snap.current_bpm)
    st.progress(int(snap.gauge_percent), text=f"{snap.gauge_percent:.0f}% of max HR")

    st.markdown(
        f'<div style="background:{bg};border:2px solid {border};color:{fg};'
        f'padding:10px 20px;border-radius:999px;font-weight:bold;text-align:center;">'
        f"{banner}</div>",
        unsafe_allow_html=True,
    )
    if zone is not None:
        st.caption(f"Target zone ({zone.name}): {format_bpm_range(zone.min_bpm, zone.max_bpm)}")

    st.markdown(f"**Effort simulator:** {snap.effort_level}%")
    less, more = st.columns(2)
    if less.button("▼ Less", key="effort_down", use_container_width=True):
        session.adjust_effort(-EFFORT_STEP)
    if more.button("▲ More", key="effort_up", use_container_width=True):
        session.adjust_effort(EFFORT_STEP)

    play, stop = st.columns(2)
    play_label = "⏸ Pause" if snap.phase == SessionPhase.ACTIVE else "▶ Resume"
    if play.button(play_label, key="toggle", use_container_width=True):
        session.toggle_running()
    if stop.button("⏹ Stop", key="stop", use_container_width=True):
        _close_workout()
        st.rerun(scope="app")

    speech: QueuedSpeech | None = st.session_state.get("speech")
    if speech is not None:
        script = speech_script(speech.drain())
        if script:
            components.html(script, height=0)


# ---------------------------------------------------------------------------
# Sidebar: user input
# ---------------------------------------------------------------------------

st.sidebar.title("Your profile")
age = st.sidebar.number_input("Age", MIN_AGE, MAX_AGE, 30, step=1)
gender = st.sidebar.radio(
    "Sex",
    list(GENDER_LABELS),
    format_func=lambda g: GENDER_LABELS[g],
    horizontal=True,
)

max_hr, zones = calculate_zones(int(age), gender)
target_zone = select_target_zone(zones)

# Parameters changed: drop stale advice and any running workout.
params = (int(age), gender)
if st.session_state.get("params") != params:
    st.session_state["params"] = params
    st.session_state.pop("advice", None)
    _close_workout()

st.sidebar.metric("Estimated max HR", f"{max_hr} BPM")

# ---------------------------------------------------------------------------
# Main page
# ---------------------------------------------------------------------------

st.title("CardioZone")

if st.session_state.get("workout") is not None:
    _render_workout()
    st.stop()

advice_col, workout_col = st.columns(2)
if advice_col.button("✨ Smart coach advice", use_container_width=True):
    with st.spinner("Asking the coach..."):
        st.session_state["advice"] = fetch_advice_text(int(age), gender, max_hr)
if workout_col.button("▶ Start guided workout", type="primary", use_container_width=True):
    _open_workout(target_zone, max_hr)
    st.rerun()

if st.session_state.get("advice"):
    st.info(st.session_state["advice"])

st.plotly_chart(build_zone_chart(zones, max_hr), use_container_width=True)

st.subheader("Training zones")
st.dataframe(zones_to_frame(zones), hide_index=True, use_container_width=True)
if target_zone is not None:
    st.caption(
        f"Target: {target_zone.name}, {format_bpm_range(target_zone.min_bpm, target_zone.max_bpm)}"
    )

csv_col, report_col = st.columns(2)
csv_col.download_button(
    "Download CSV",
    data=to_csv_bytes(zones),
    file_name=f"cardiozone_{date.today().isoformat()}.csv",
    mime=CSV_MIME,
    use_container_width=True,
)
report_col.download_button(
    "Export report (Excel / print)",
    data=to_html_report(zones, int(age), gender, max_hr),
    file_name=report_filename(),
    mime=REPORT_MIME,
    use_container_width=True,
)
