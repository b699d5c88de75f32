"""Loan / EMI 计算器"""
import streamlit as st

from components.charts import THEMES, create_balance_line, create_emi_breakdown_pie
from components.forms import get_history, render_emi_form, render_theme_toggle
from components.metrics import render_field_errors, render_result_metrics
from components.tables import render_history, render_schedule_table
from config.logging_config import setup_logging
from config.settings import EMI_CURRENCY, MAX_SCHEDULE_MONTHS
from core.calculator import generate_emi_schedule
from core.runner import run_emi, schedule_allowed
from utils.formatters import fmt_currency, fmt_months, fmt_rate

setup_logging()

st.set_page_config(page_title="Loan / EMI Calculator", page_icon="🧮", layout="wide")
st.title("🧮 Loan / EMI Calculator")
st.caption("Calculate monthly EMI and total interest")

template = THEMES[render_theme_toggle()]
history = get_history("emi")

form_data = render_emi_form("emi")
if form_data is not None:
    outcome = run_emi(**form_data)
    st.session_state["emi_outcome"] = outcome
    if outcome.ok:
        history.add(outcome.entry)

outcome = st.session_state.get("emi_outcome")
if outcome is not None and not outcome.ok:
    render_field_errors(outcome.errors)
elif outcome is not None:
    terms, result = outcome.query, outcome.result
    render_result_metrics([
        ("Monthly EMI", fmt_currency(result.emi, EMI_CURRENCY)),
        ("Total Interest", fmt_currency(result.total_interest, EMI_CURRENCY)),
        ("Total Amount", fmt_currency(result.total_amount, EMI_CURRENCY)),
    ])
    st.caption(f"Tenure: {fmt_months(terms.tenure_months)} at {fmt_rate(terms.annual_rate)} p.a.")

    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(
            create_emi_breakdown_pie(terms.principal, result.total_interest, template=template),
            width='stretch',
        )

    if schedule_allowed(terms.tenure_months):
        schedule = generate_emi_schedule(terms.principal, terms.annual_rate, terms.tenure_months)
        with c2:
            st.plotly_chart(create_balance_line(schedule, template=template), width='stretch')
        with st.expander("Amortization schedule"):
            render_schedule_table(schedule)
    else:
        st.info(
            f"Amortization schedule is shown for tenures up to {MAX_SCHEDULE_MONTHS} months "
            f"({fmt_months(MAX_SCHEDULE_MONTHS)})."
        )

st.divider()
render_history(history, "EMI Calculation History", key="emi")
