from __future__ import annotations

from typing import Dict, List, Tuple

import streamlit as st

from scoring.presentation import format_match_percentage, is_best_match_score


def apply_theme() -> None:
    st.markdown(
        """
        <style>
          @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;700&display=swap');

          :root {
            --bg: #15171c;
            --surface: #1e2128;
            --text: #f4f2ee;
            --muted: #9a9ca3;
            --line: #2d3139;
            --accent: #ff6b3d;
            --accent-dark: #e0552a;
            --best: #3ccf8e;
          }

          .stApp {
            background: var(--bg);
            color: var(--text);
            font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
          }

          .block-container {
            max-width: 900px;
            padding-top: 1.0rem;
            padding-bottom: 2rem;
          }

          .top-nav {
            border-bottom: 1px solid var(--line);
            padding: 0.45rem 0;
            margin-bottom: 0.9rem;
          }

          .brand-mark {
            font-size: 1.35rem;
            font-weight: 700;
            letter-spacing: 0.04em;
            text-transform: uppercase;
          }

          .stepper {
            display: grid;
            grid-template-columns: repeat(3, 1fr);
            gap: 0.4rem;
            margin: 0.2rem 0 1rem 0;
          }

          .step {
            display: flex;
            flex-direction: column;
            align-items: center;
            gap: 0.24rem;
            color: var(--muted);
            font-size: 0.72rem;
          }

          .step .dot {
            width: 26px;
            height: 26px;
            border-radius: 999px;
            border: 1px solid var(--line);
            display: flex;
            align-items: center;
            justify-content: center;
          }

          .step.active .dot,
          .step.done .dot {
            background: var(--accent);
            color: #fff;
            border-color: transparent;
          }

          .section-card {
            border: 1px solid var(--line);
            border-radius: 14px;
            background: var(--surface);
            padding: 0.8rem 0.95rem;
            margin: 0.9rem 0 0.45rem 0;
          }

          .section-title { font-weight: 600; font-size: 1.01rem; }
          .section-hint { color: var(--muted) !important; font-size: 0.89rem; }

          .match-badge {
            display: inline-block;
            border-radius: 999px;
            padding: 0.15rem 0.6rem;
            font-size: 0.78rem;
            font-weight: 600;
            border: 1px solid var(--line);
            color: var(--text);
          }

          .match-badge.best {
            background: var(--best);
            color: #0d1a13;
            border-color: transparent;
          }

          .stButton > button[kind="primary"] {
            background: var(--accent);
            color: white;
            border-color: transparent;
          }

          .stButton > button[kind="primary"]:hover {
            background: var(--accent-dark);
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


def top_nav() -> None:
    st.markdown(
        """
        <div class="top-nav">
          <div class="brand-mark">Game Over</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_stepper(states: List[Tuple[str, bool]]) -> None:
    # Active is first incomplete step
    active_idx = len(states) - 1
    for i, (_, done) in enumerate(states):
        if not done:
            active_idx = i
            break

    bits = ["<div class='stepper'>"]
    for i, (label, done) in enumerate(states):
        cls = "done" if done else ("active" if i == active_idx else "")
        marker = "✓" if done else str(i + 1)
        bits.append(
            f"<div class='step {cls}'><div class='dot'>{marker}</div><div>{label}</div></div>"
        )
    bits.append("</div>")
    st.markdown("".join(bits), unsafe_allow_html=True)


def section_header(title: str, hint: str) -> None:
    st.markdown(
        f"""
        <div class="section-card">
          <div class="section-title">{title}</div>
          <div class="section-hint">{hint}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def match_badge(score: float) -> None:
    cls = "match-badge best" if is_best_match_score(score) else "match-badge"
    prefix = "Best match · " if is_best_match_score(score) else ""
    st.markdown(
        f"<span class='{cls}'>{prefix}{format_match_percentage(score)}</span>",
        unsafe_allow_html=True,
    )


def breakdown_caption(breakdown: Dict[str, float]) -> str:
    return (
        f"Total {breakdown['total_score']:.1f} · Group size {breakdown['gathering_score']:.1f} "
        f"· Energy {breakdown['energy_score']:.1f} · Vibe {breakdown['vibe_score']:.1f}"
    )
