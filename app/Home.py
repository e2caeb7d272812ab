"""Treatment CBA - entry, results and export page.

Thin collaborator over the cba engine:
- Reads raw text fields and coerces them with parse_number
- Pushes edits into the TreatmentStore held in st.session_state
- Pulls ranked results, cards, narrative and CSV from the engine
"""

import plotly.express as px
import streamlit as st

from cba.config import get_report_config, setup_logging
from cba.core import TreatmentStore, load_demo, parse_number
from cba.results import (
    EmptyExportError,
    export_csv,
    rank,
    results_table,
    summarize,
    summary_cards,
    to_json,
    top_treatments,
)

st.set_page_config(page_title="Treatment CBA", layout="wide")

LEADERBOARD_VIEWS = {
    "All treatments": None,
    "Top 5 by NPV": "npv",
    "Top 5 by BCR": "bcr",
}

if "report_config" not in st.session_state:
    st.session_state.report_config = get_report_config()
    setup_logging(st.session_state.report_config)

if "store" not in st.session_state:
    st.session_state.store = TreatmentStore()

config = st.session_state.report_config
store: TreatmentStore = st.session_state.store


def _reset_inputs() -> None:
    """Drop cached widget values after ids are reassigned."""
    for key in [k for k in st.session_state.keys() if str(k).startswith("input_")]:
        del st.session_state[key]


def _raw_value(value: float) -> str:
    """Text shown in an input field; whole numbers without ".0"."""
    return str(int(value)) if value.is_integer() else repr(value)


st.title("Treatment Cost-Benefit Comparison")

st.info("""
**What this does**: Compare treatment options using present values you supply.

Enter PV benefits and PV costs for each treatment. Results are ranked by
net present value (NPV), with benefit-cost ratio (BCR) and return on
investment (ROI) where a cost base exists.
""")

# ===== Commands =====
cmd_col1, cmd_col2, cmd_col3 = st.columns(3)

with cmd_col1:
    if st.button("Add treatment", use_container_width=True):
        store.add()

with cmd_col2:
    if st.button("Load demo data", use_container_width=True):
        load_demo(store)
        _reset_inputs()

with cmd_col3:
    if st.button("Clear all", use_container_width=True):
        store.clear()
        _reset_inputs()

st.divider()

# ===== Inputs =====
st.subheader("Treatments")

if len(store) == 0:
    st.caption("No treatments yet. Add one or load the demo data.")

for record in store.list():
    with st.container(border=True):
        col_name, col_pvb, col_pvc, col_notes, col_remove = st.columns([3, 2, 2, 3, 1])
        with col_name:
            name = st.text_input("Treatment", value=record.name, key=f"input_name_{record.id}")
        with col_pvb:
            pv_benefits = st.text_input(
                "PV benefits", value=_raw_value(record.pv_benefits), key=f"input_pvb_{record.id}"
            )
        with col_pvc:
            pv_costs = st.text_input(
                "PV costs", value=_raw_value(record.pv_costs), key=f"input_pvc_{record.id}"
            )
        with col_notes:
            notes = st.text_input("Notes", value=record.notes, key=f"input_notes_{record.id}")
        with col_remove:
            st.write("")
            if st.button("Remove", key=f"remove_{record.id}"):
                store.remove(record.id)
                st.rerun()

        store.update(
            record.id,
            name=name,
            pv_benefits=parse_number(pv_benefits),
            pv_costs=parse_number(pv_costs),
            notes=notes,
        )

st.divider()

# ===== Results =====
ranked = rank(store.list())

tab_table, tab_cards, tab_narrative, tab_export = st.tabs(
    ["Results table", "Summary cards", "Narrative", "Export"]
)

with tab_table:
    view = st.selectbox("Show", list(LEADERBOARD_VIEWS), key="leaderboard_view")
    metric = LEADERBOARD_VIEWS[view]
    shown = ranked if metric is None else top_treatments(ranked, by=metric, n=5)

    st.dataframe(results_table(shown, config), hide_index=True, use_container_width=True)
    if shown:
        fig = px.bar(
            x=[r.name for r in shown],
            y=[r.npv for r in shown],
            labels={"x": "Treatment", "y": "NPV"},
            title="Net present value by treatment",
        )
        st.plotly_chart(fig, use_container_width=True)

with tab_cards:
    for card in summary_cards(ranked, config):
        with st.container(border=True):
            st.markdown(f"**#{card.rank} {card.name}**")
            m1, m2, m3, m4, m5 = st.columns(5)
            m1.metric("PV benefits", card.pv_benefits)
            m2.metric("PV costs", card.pv_costs)
            m3.metric("NPV", card.npv)
            m4.metric("BCR", card.bcr)
            m5.metric("ROI", card.roi)
            if card.notes:
                st.caption(card.notes)

with tab_narrative:
    st.markdown(summarize(ranked, config))

with tab_export:
    # CSV is rebuilt from the current store on every run
    if len(store) == 0:
        if st.button("Download CSV", type="primary"):
            try:
                export_csv(store.list())
            except EmptyExportError as e:
                st.error(str(e))
    else:
        st.download_button(
            "Download CSV",
            data=export_csv(store.list()),
            file_name=config.export_filename,
            mime="text/csv",
            type="primary",
        )
        st.download_button(
            "Download results (JSON)",
            data=to_json(store.list()),
            file_name="treatment_results.json",
            mime="application/json",
        )
