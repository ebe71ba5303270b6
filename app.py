"""
Split Simulator Web App
Streamlit interface for finding the best front/middle/back split.
"""

import streamlit as st
import sys
from pathlib import Path

import pandas as pd

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from chinese_poker_sim.engine.errors import InvalidInputError, SimulationError
from chinese_poker_sim.engine.hand_detector import detect_hand
from chinese_poker_sim.engine.deck import format_cards
from chinese_poker_sim.presets import PRESETS
from chinese_poker_sim.simulator import Simulator

SAMPLE_HAND = "AH KD QC JS 9H 8D 7C 6S 4H 4D 3C 2S 2H"

# Page config
st.set_page_config(
    page_title="Split Simulator",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Split Simulator")
st.markdown("*Monte Carlo search for the best 3/5/5 split of a 13-card hand*")

# Sidebar for settings
st.sidebar.header("Settings")

preset_options = list(PRESETS.keys())
preset_display = {k: f"{PRESETS[k].name}" for k in preset_options}

selected_preset = st.sidebar.selectbox(
    "Preset",
    options=preset_options,
    index=preset_options.index("standard"),
    format_func=lambda x: preset_display[x]
)

preset = PRESETS[selected_preset]
st.sidebar.markdown(f"*{preset.description}*")

iterations = st.sidebar.slider(
    "Iterations per candidate",
    min_value=100, max_value=20000,
    value=preset.config.iterations, step=100
)
seed_text = st.sidebar.text_input("Seed (optional)", value="")

cards_text = st.text_input("Your 13 cards", value=SAMPLE_HAND,
                           help="Rank 2-9, T, J, Q, K, A followed by suit H, D, C, S")

st.divider()

if st.button("🎲 Run Simulation", type="primary", use_container_width=True):
    seed = int(seed_text) if seed_text.strip().lstrip("-").isdigit() else None

    try:
        with st.spinner("Searching splits and dealing opponents..."):
            result = Simulator(preset).run(cards_text.replace(",", " ").split(),
                                           iterations=iterations, seed=seed)
    except InvalidInputError as e:
        st.error(f"Invalid input: {e}")
        st.stop()
    except SimulationError as e:
        st.error(f"Simulation failed: {e}")
        st.stop()

    if result.auto_win:
        st.success(f"🏆 AUTO WIN: {result.auto_win.value}")
    elif result.win_rate > 0.5:
        st.success(f"Win rate: {result.win_rate * 100:.2f}%")
    elif result.win_rate > 0:
        st.warning(f"Win rate: {result.win_rate * 100:.2f}%")
    else:
        st.error(f"Win rate: {result.win_rate * 100:.2f}%")

    # Rows
    col1, col2, col3 = st.columns(3)
    for col, label, row in ((col1, "Front", result.front),
                            (col2, "Middle", result.middle),
                            (col3, "Back", result.back)):
        with col:
            st.subheader(label)
            st.code(" ".join(format_cards(row)))
            st.caption(detect_hand(row).hand_type.label)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Valid Splits", f"{result.splits_considered:,}")
    with col2:
        st.metric("Candidates Simulated", len(result.candidates))
    with col3:
        st.metric("Time", f"{result.elapsed:.2f}s")

    if result.candidates:
        st.subheader("Candidate Win Rates")

        chart_data = pd.DataFrame({
            "Candidate": range(1, len(result.candidates) + 1),
            "Win Rate": [c.win_rate for c in result.candidates],
        })
        st.bar_chart(chart_data.set_index("Candidate"))

        with st.expander("All candidates"):
            table = pd.DataFrame([
                {
                    "Front": " ".join(format_cards(c.split.front)),
                    "Middle": " ".join(format_cards(c.split.middle)),
                    "Back": " ".join(format_cards(c.split.back)),
                    "Heuristic": c.heuristic,
                    "Win Rate": round(c.win_rate, 4),
                }
                for c in result.candidates
            ])
            st.dataframe(table, use_container_width=True)

    with st.expander("Result record (JSON)"):
        st.json(result.to_dict())

# Footer
st.divider()
st.markdown("*Built with the split simulator engine*")
