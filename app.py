from __future__ import annotations

from pathlib import Path
import logging

from dotenv import load_dotenv
load_dotenv()

import streamlit as st

from components.package_catalog import load_catalog, packages_for_city
from components.preferences_builder import build_user_preferences
from components.ui_theme import (
    apply_theme,
    breakdown_caption,
    match_badge,
    render_stepper,
    section_header,
    top_nav,
)
from config import (
    DEFAULT_ENERGY_LEVEL,
    DEFAULT_GATHERING_SIZE,
    DEFAULT_VIBES,
    ENERGY_LEVELS,
    GATHERING_SIZES,
    VIBES,
    catalog_path_override,
    default_currency,
    log_level,
)
from scoring.package_match import rank_packages
from scoring.presentation import format_price, per_person_price

logging.basicConfig(level=log_level())

st.set_page_config(page_title="Game Over · Packages", page_icon="🎉", layout="wide")
apply_theme()

for key, default in {
    "event_preferences": {},
    "questionnaire": {},
    "_results": [],
    "_catalog_name": "",
}.items():
    if key not in st.session_state:
        st.session_state[key] = default

base_dir = Path(__file__).resolve().parent


def _label(token: str) -> str:
    return token.replace("_", " ").title()


top_nav()

prefs_done = bool(st.session_state.event_preferences.get("gathering_size"))
results_done = bool(st.session_state._results)
render_stepper([("City", True), ("Preferences", prefs_done), ("Packages", results_done)])

override = catalog_path_override()
try:
    packages, packages_path = load_catalog(base_dir, Path(override) if override else None)
except (FileNotFoundError, ValueError) as exc:
    st.error(f"Could not load the package catalog: {exc}")
    st.stop()

section_header("1) Where's the party?", "Pick the city and how many people are coming.")

city_options = sorted({p["city_id"] for p in packages if p.get("city_id")})
col_city, col_count = st.columns(2)
with col_city:
    city_id = st.selectbox("City", city_options, format_func=_label)
with col_count:
    participant_count = st.number_input("Participants", min_value=1, max_value=60, value=8, step=1)

section_header("2) Your group", "These answers map directly to the match score.")

saved = st.session_state.event_preferences
col_a, col_b = st.columns(2)
with col_a:
    default_size = saved.get("gathering_size") or DEFAULT_GATHERING_SIZE
    gathering_size = st.selectbox(
        "Gathering size",
        GATHERING_SIZES,
        index=GATHERING_SIZES.index(default_size),
        format_func=_label,
    )
with col_b:
    default_energy = saved.get("energy_level") or DEFAULT_ENERGY_LEVEL
    energy_level = st.selectbox(
        "Energy level",
        ENERGY_LEVELS,
        index=ENERGY_LEVELS.index(default_energy),
        format_func=_label,
    )

vibes = st.multiselect(
    "What's the vibe? (select multiple)",
    VIBES,
    default=saved.get("vibe_preferences") or DEFAULT_VIBES,
    format_func=_label,
    placeholder="Choose vibes...",
)

section_header("3) Packages", "Matched against your group's preferences.")

if st.button("Find Packages", type="primary", use_container_width=True):
    manual = {
        "gathering_size": gathering_size,
        "energy_level": energy_level,
        "vibe_preferences": vibes,
    }
    preferences = build_user_preferences(manual, st.session_state.questionnaire)
    st.session_state.event_preferences = preferences

    city_packages = packages_for_city(packages, city_id)
    st.session_state._results = rank_packages(city_packages, preferences)
    st.session_state._catalog_name = packages_path.name

if st.session_state.get("_results"):
    currency = default_currency()
    st.caption(f"Catalog source: {st.session_state._catalog_name}")

    for idx, item in enumerate(st.session_state._results, start=1):
        p = item["package"]
        with st.container(border=True):
            left, right = st.columns([1, 2])
            with left:
                if p.get("hero_image_url"):
                    st.image(p["hero_image_url"], width=280)
                match_badge(item["match_score"])
            with right:
                st.markdown(f"### {idx}. {p.get('name', 'Package')}")
                st.caption(f"{_label(p.get('tier', ''))} · ★ {p.get('rating', 0)} ({p.get('review_count', 0)})")
                if p.get("description"):
                    st.write(p["description"])
                st.caption(item["explanation"])
                total = p.get("base_price_cents", 0)
                share = per_person_price(total, int(participant_count))
                st.caption(
                    f"💰 {format_price(total, currency)} total · "
                    f"{format_price(share, currency)} per person"
                )
                with st.expander("Score breakdown", expanded=False):
                    st.caption(breakdown_caption(item["breakdown"].as_dict()))
