import streamlit as st

from components.ui_theme import apply_theme, section_header
from config import ACTIVITY_OPTIONS, ACTIVITY_VIBES, MAX_ACTIVITY_VIBES
from scoring.activity_match import match_activities, match_strength

st.set_page_config(page_title="Activity Ideas", page_icon="🎯", layout="wide")
apply_theme()

st.title("Activity Ideas")
st.caption("Twelve quick questions about the honoree and the group.")

_QUESTIONS = {
    "h1": "How does the honoree like to spend energy?",
    "h2": "How much spotlight can they handle?",
    "h3": "Competition style",
    "h4": "What do they enjoy most?",
    "h5": "Indoor or outdoor?",
    "h6": "How should the evening go?",
    "g1": "Average age of the group",
    "g2": "How well does the group know each other?",
    "g3": "Group fitness level",
    "g4": "Role of drinking",
    "g5": "Group dynamic",
}

saved = st.session_state.get("questionnaire") or {}
answers = {}

section_header("A) The honoree", "Questions H1-H6.")
for question in ("h1", "h2", "h3", "h4", "h5", "h6"):
    options = ACTIVITY_OPTIONS[question]
    default = saved.get(question, options[0])
    answers[question] = st.selectbox(
        _QUESTIONS[question],
        options,
        index=options.index(default) if default in options else 0,
        format_func=lambda o: o.replace("_", " ").title(),
        key=f"q_{question}",
    )

section_header("B) The group", "Questions G1-G6.")
for question in ("g1", "g2", "g3", "g4", "g5"):
    options = ACTIVITY_OPTIONS[question]
    default = saved.get(question, options[0])
    answers[question] = st.selectbox(
        _QUESTIONS[question],
        options,
        index=options.index(default) if default in options else 0,
        format_func=lambda o: o.replace("_", " ").title(),
        key=f"q_{question}",
    )

answers["g6"] = st.multiselect(
    f"Group vibe (up to {MAX_ACTIVITY_VIBES})",
    ACTIVITY_VIBES,
    default=saved.get("g6") or [],
    max_selections=MAX_ACTIVITY_VIBES,
)

if st.button("Score Activities", type="primary", use_container_width=True):
    st.session_state.questionnaire = answers

result = match_activities(st.session_state.get("questionnaire"))

if result["activities"]:
    if result["has_strong_matches"]:
        st.success(f"{len(result['top_activities'])} strong matches for this group.")
    else:
        st.info("No strong matches. Here are the closest fits.")

    for activity in result["activities"][:10]:
        with st.container(border=True):
            st.markdown(f"**{activity.name}** · {activity.category}")
            tags = [f"score {activity.total_score} ({match_strength(activity.total_score)})"]
            if activity.ice_breaker:
                tags.append("ice-breaker")
            if activity.seasonal:
                tags.append("seasonal")
            st.caption(" | ".join(tags))
