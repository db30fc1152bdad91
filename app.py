# =========================
# Standard imports
# =========================
import logging

import streamlit as st

from assessment.config import load_config, configure_logging
from assessment.statements import STATEMENTS, RATING_LABELS
from assessment.responses import (
    initialize, set_rating, randomize_all, answered_count, progress, submit,
)
from assessment.errors import ValidationError
from assessment.scoring import aggregate, primary_style
from assessment.transfer import to_params, decode, has_scores
from assessment.chart import chart_data, radar_figure
from assessment.styles import describe

# =========================
# App bootstrapping
# =========================
CFG = load_config()
configure_logging(CFG["logging"]["level"])
logger = logging.getLogger("app")

st.set_page_config(
    page_title=CFG["app"]["page_title"],
    page_icon=CFG["app"]["page_icon"],
    layout=CFG["app"]["layout"],
)

# =========================
# Helpers
# =========================
def _current_responses():
    rs = initialize()
    for s in STATEMENTS:
        value = st.session_state.get(s.field)
        if value is not None:
            rs = set_rating(rs, s.id, value)
    return rs

def _on_randomize():
    rs = randomize_all(_current_responses())
    for s in STATEMENTS:
        st.session_state[s.field] = rs[s.id]
    st.session_state.pop("errors", None)

def _on_submit():
    try:
        rs = submit(_current_responses())
    except ValidationError as e:
        st.session_state["errors"] = e.errors
        return
    st.session_state.pop("errors", None)
    scores = aggregate(rs)
    logger.info("primary style: %s", primary_style(scores))
    # results view is driven by the query string
    st.query_params.from_dict(to_params(scores))

def _on_restart():
    st.query_params.clear()
    for s in STATEMENTS:
        st.session_state.pop(s.field, None)
    st.session_state.pop("errors", None)

# ---------------------------
# Questionnaire view
# ---------------------------
def quiz_view():
    st.title("Conflict Management Styles Quiz")

    rs = _current_responses()
    st.progress(progress(rs) / 100)
    st.caption(f"{answered_count(rs)} of {len(STATEMENTS)} questions answered")

    errors = st.session_state.get("errors", {})
    for s in STATEMENTS:
        with st.container(border=True):
            # passing index alongside a session value makes streamlit warn
            extra = {} if s.field in st.session_state else {"index": None}
            st.radio(
                f"{s.id}. {s.text}",
                options=list(RATING_LABELS),
                format_func=RATING_LABELS.get,
                horizontal=True,
                key=s.field,
                **extra,
            )
            if s.id in errors and st.session_state.get(s.field) is None:
                st.error(errors[s.id])

    col1, col2 = st.columns(2)
    col1.button("🔀 Randomize", key="randomize", on_click=_on_randomize)
    col2.button("✔ Submit", key="submit", type="primary", on_click=_on_submit)

# ---------------------------
# Results view
# ---------------------------
def result_view():
    scores = decode(st.query_params.to_dict())
    top = primary_style(scores)
    info = describe(top)

    st.title("Your Conflict Management Style Results")
    st.caption("Based on your responses, here's your conflict management profile")
    st.plotly_chart(radar_figure(chart_data(scores), CFG["chart"]))

    st.subheader(f"Your Primary Style: {info.name}")
    st.markdown("**Description**")
    st.write(info.description)
    st.markdown("**When to Use**")
    st.write(info.when_to_use)
    st.markdown("**When to Avoid**")
    st.write(info.when_to_avoid)

    st.button("← Take the Quiz Again", key="restart", on_click=_on_restart)

# =========================
# Routing
# =========================
if has_scores(st.query_params.to_dict()):
    result_view()
else:
    quiz_view()
