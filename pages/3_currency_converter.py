"""汇率换算"""
import streamlit as st

from components.forms import get_history, render_currency_form
from components.metrics import render_field_errors, render_result_metrics
from components.tables import render_history
from config.constants import CURRENCIES, PIVOT_CURRENCY
from config.logging_config import setup_logging
from core.runner import run_currency
from utils.formatters import fmt_currency, fmt_number

setup_logging()

st.set_page_config(page_title="Currency Converter", page_icon="💱", layout="wide")
st.title("💱 Currency Converter")
st.caption("Convert between currencies")

history = get_history("currency")

form_data = render_currency_form("currency")
if form_data is not None:
    outcome = run_currency(**form_data)
    st.session_state["currency_outcome"] = outcome
    if outcome.ok:
        history.add(outcome.entry)

outcome = st.session_state.get("currency_outcome")
if outcome is not None and not outcome.ok:
    render_field_errors(outcome.errors)
elif outcome is not None:
    result = outcome.result
    render_result_metrics([
        (f"Original ({result.from_code})", fmt_currency(result.original_amount, result.from_code)),
        (f"Converted ({result.to_code})", fmt_currency(result.converted_amount, result.to_code)),
        ("Exchange Rate", f"1 {result.from_code} = {fmt_number(result.exchange_rate, 4)} {result.to_code}"),
    ])

st.caption(
    f"Rates are static approximations against {PIVOT_CURRENCY} "
    f"({len(CURRENCIES)} currencies) and are for demonstration only."
)

st.divider()
render_history(history, "Conversion History", key="currency")
