"""Utility helpers bridging the Streamlit UI and the cardio engine.

Pure functions for formatting, chart construction, browser speech and
advice retrieval with user-facing fallback text.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Sequence

import plotly.graph_objects as go

from advice_client import (
    AdviceAuthError,
    AdviceClient,
    AdviceClientError,
    AdviceEmptyResponseError,
)
from cardio_engine.models.enums import ColorCategory, Gender
from cardio_engine.models.zone import HeartRateZone

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_bpm_range(low: int | None, high: int | None) -> str:
    """Format a BPM range. e.g. 114, 152 -> '114 - 152 BPM'."""
    if low is None and high is None:
        return "--"
    if low is not None and high is not None:
        return f"{low} - {high} BPM"
    return f"{low if low is not None else high} BPM"


# ---------------------------------------------------------------------------
# Color maps / labels
# ---------------------------------------------------------------------------

# (background, border, text)
FEEDBACK_COLORS: dict[ColorCategory, tuple[str, str, str]] = {
    ColorCategory.INFO: ("#EEF2FF", "#C7D2FE", "#4338CA"),     # indigo
    ColorCategory.SUCCESS: ("#F0FDF4", "#BBF7D0", "#15803D"),  # green
    ColorCategory.WARNING: ("#FEF2F2", "#FECACA", "#B91C1C"),  # red
}

WARMING_UP_COLORS = ("#F1F5F9", "#E2E8F0", "#334155")  # slate

GENDER_LABELS: dict[Gender, str] = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
}

# ---------------------------------------------------------------------------
# Chart
# ---------------------------------------------------------------------------


def build_zone_chart(zones: Sequence[HeartRateZone], max_hr: int) -> go.Figure:
    """Bar chart of each zone's upper bound with a dashed max-HR line."""
    fig = go.Figure(
        go.Bar(
            x=[z.name.split(" ")[0] for z in zones],
            y=[z.max_bpm for z in zones],
            marker_color=[z.color for z in zones],
            customdata=[[z.name, z.min_bpm, z.max_bpm, z.goal] for z in zones],
            hovertemplate=(
                "<b>%{customdata[0]}</b><br>%{customdata[1]} - %{customdata[2]} BPM"
                "<br>%{customdata[3]}<extra></extra>"
            ),
        )
    )
    fig.add_hline(
        y=max_hr,
        line_dash="dash",
        line_color="red",
        annotation_text="Max HR",
        annotation_position="top left",
    )
    fig.update_layout(
        title="Heart-rate zone distribution",
        yaxis=dict(title="BPM", range=[0, max_hr + 10]),
        template="plotly_white",
        height=320,
        margin=dict(l=10, r=10, t=50, b=10),
        showlegend=False,
    )
    return fig


# ---------------------------------------------------------------------------
# Browser speech
# ---------------------------------------------------------------------------


def speech_script(utterances: Sequence[tuple[str, str]]) -> str:
    """HTML snippet that speaks each ``(text, locale)`` via speechSynthesis.

    Silently does nothing in browsers without the Web Speech API.
    """
    if not utterances:
        return ""
    payload = json.dumps([{"text": t, "lang": lang} for t, lang in utterances])
    return (
        "<script>\n"
        "const synth = window.parent.speechSynthesis || window.speechSynthesis;\n"
        "if (synth) {\n"
        f"  for (const u of {payload}) {{\n"
        "    const utt = new SpeechSynthesisUtterance(u.text);\n"
        "    utt.lang = u.lang;\n"
        "    utt.rate = 1.0;\n"
        "    synth.speak(utt);\n"
        "  }\n"
        "}\n"
        "</script>"
    )


# ---------------------------------------------------------------------------
# Advice
# ---------------------------------------------------------------------------

ADVICE_MISSING_KEY = (
    "API key missing. Personalised suggestions are unavailable right now."
)
ADVICE_FAILED = (
    "Something went wrong while generating suggestions. Please try again later."
)
ADVICE_EMPTY = "Couldn't generate suggestions at the moment."


def fetch_advice_text(
    age: int,
    gender: Gender | str,
    max_hr: int,
    client_factory: Callable[[], AdviceClient] = AdviceClient,
) -> str:
    """Return coaching advice, or a fixed fallback message on failure."""
    try:
        client = client_factory()
        return client.get_fitness_advice(age, gender, max_hr)
    except AdviceAuthError as exc:
        logger.warning("Advice unavailable: %s", exc)
        return ADVICE_MISSING_KEY
    except AdviceEmptyResponseError:
        logger.warning("Advice service returned no text")
        return ADVICE_EMPTY
    except AdviceClientError as exc:
        logger.error("Error generating fitness advice: %s", exc)
        return ADVICE_FAILED
