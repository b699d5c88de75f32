"""GST / Tax 计算器"""
import streamlit as st

from components.forms import get_history, render_gst_form
from components.metrics import render_field_errors, render_result_metrics
from components.tables import render_history
from config.constants import GSTMode
from config.logging_config import setup_logging
from config.settings import GST_CURRENCY
from core.runner import run_gst
from utils.formatters import fmt_currency

setup_logging()

st.set_page_config(page_title="GST / Tax Calculator", page_icon="🧾", layout="wide")
st.title("🧾 GST / Tax Calculator")
st.caption("Calculate GST component and final amount")

history = get_history("gst")

form_data = render_gst_form("gst")
if form_data is not None:
    outcome = run_gst(**form_data)
    st.session_state["gst_outcome"] = outcome
    if outcome.ok:
        history.add(outcome.entry)

outcome = st.session_state.get("gst_outcome")
if outcome is not None and not outcome.ok:
    render_field_errors(outcome.errors)
elif outcome is not None:
    query, result = outcome.query, outcome.result
    is_add = query.mode is GSTMode.ADD
    render_result_metrics([
        ("Base Amount" if is_add else "Base Amount (Excl. GST)",
         fmt_currency(result.base_amount, GST_CURRENCY)),
        (f"GST ({query.rate:g}%)", fmt_currency(result.gst_amount, GST_CURRENCY)),
        ("Final Amount (Incl. GST)" if is_add else "Total Amount (Incl. GST)",
         fmt_currency(result.final_amount, GST_CURRENCY)),
    ])

st.divider()
render_history(history, "GST Calculation History", key="gst")
