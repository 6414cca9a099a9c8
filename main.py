# main.py
# Streamlit Bowling Score Sheet (configurable frames & strike)
# Run: streamlit run main.py

import logging

import streamlit as st

from scoresheet import ScoreSheet, default_name, frame_table, summary_table
from settings import SettingsError, default_config, load_config

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Bowling Score Sheet", layout="wide")

if "sheet" not in st.session_state:
    st.session_state.sheet = ScoreSheet(default_config())
    st.session_state.generation = 0
    st.session_state.settings_error = None

# -------------------------
# Event handlers
# -------------------------

def on_throw_edit(player: int, slot: int, key: str):
    st.session_state.sheet.set_throw(player, slot, st.session_state[key])


def on_name_edit(player: int, key: str):
    st.session_state.sheet.set_name(player, st.session_state[key])


def on_settings_submit():
    try:
        config = load_config(st.session_state.cfg_frames, st.session_state.cfg_strike)
    except SettingsError as e:
        logger.info("rejected settings: %s", e.detail)
        st.session_state.settings_error = e.detail
        return
    st.session_state.settings_error = None
    st.session_state.sheet.reset(config)
    # New widget keys give every input field a fresh, empty value.
    st.session_state.generation += 1


sheet: ScoreSheet = st.session_state.sheet
config = sheet.config
gen = st.session_state.generation

# -------------------------
# Sidebar: settings
# -------------------------
st.title("🎳 Bowling Score Sheet")
st.caption("Enter pins knocked down per throw. Leave a field blank for a throw not yet made.")

with st.sidebar:
    st.header("Settings")
    with st.form("settings"):
        st.number_input("Frames", min_value=1, value=config.frames, step=1, key="cfg_frames")
        st.number_input("Pins for a strike", min_value=1, value=config.strike, step=1, key="cfg_strike")
        st.form_submit_button("Start new game", on_click=on_settings_submit)
    if st.session_state.settings_error:
        st.error(st.session_state.settings_error)

st.divider()

# ----------------------------------
# Main: per-player input & scoring UI
# ----------------------------------

def render_player_inputs(pid: int):
    name_key = f"g{gen}_name_{pid}"
    st.text_input(
        "Player name", key=name_key, placeholder=default_name(pid),
        on_change=on_name_edit, args=(pid, name_key),
    )

    cols = st.columns(config.frames + 1, gap="small")
    cols[0].markdown("**Frame**")
    for f in range(1, config.frames + 1):
        cols[f].markdown(f"**{f}**")

    rows = [("_Roll 1_", 0), ("_Roll 2_", 1), ("_Bonus_", 2)]
    for label, ball in rows:
        row_cols = st.columns(config.frames + 1, gap="small")
        row_cols[0].markdown(label)
        for f in range(config.frames):
            if ball == 2 and f != config.frames - 1:
                continue
            slot = config.bonus_slot if ball == 2 else f * 2 + ball
            key = f"g{gen}_p{pid}_s{slot}"
            row_cols[f + 1].text_input(
                f"Frame {f + 1} throw {ball + 1}", key=key,
                label_visibility="collapsed",
                on_change=on_throw_edit, args=(pid, slot, key),
            )


summaries = sheet.summaries()

for pid, summary in enumerate(summaries):
    with st.container(border=True):
        label = summary.name or default_name(pid)
        st.subheader(f"🧑‍💼 {label}")
        render_player_inputs(pid)
        st.dataframe(frame_table(summary), hide_index=True, width="stretch")
        if summary.total is not None:
            st.success(f"**{label} — Total: {summary.total}**")
        else:
            st.info(f"**{label} — Total: (incomplete)**")

st.divider()
st.subheader("📊 Score Summary (Totals)")
st.dataframe(summary_table(summaries), hide_index=True, width="stretch")

# -------------------------
# Instructions & Notes
# -------------------------
with st.expander("Scoring Notes"):
    st.markdown(f"""
- **Marks**:
  • `X` = strike ({config.strike} pins on the first throw)
  • `/` = spare (both throws reach {config.strike})
  • `G` = gutter on a first throw
  • `-` = miss on a second throw

- **Frames 1–{max(config.frames - 1, 1)}**: a strike ends the frame; the second throw is ignored.
  Two throws together cannot exceed {config.strike}.

- **Last frame**: a strike or spare earns a bonus throw; after an open last frame the bonus is cleared.

- Totals fill in once every throw a frame depends on has been entered.
""")
