"""BMI 计算器"""
import streamlit as st

from components.charts import THEMES, create_bmi_scale
from components.forms import get_history, render_bmi_form, render_theme_toggle
from components.metrics import render_field_errors, render_result_metrics
from components.tables import render_history
from config.constants import BMICategory
from config.logging_config import setup_logging
from config.settings import BMI_PRECISION
from core.runner import run_bmi
from utils.formatters import fmt_number

setup_logging()

st.set_page_config(page_title="BMI Calculator", page_icon="🏃", layout="wide")
st.title("🏃 BMI Calculator")
st.caption("Calculate Body Mass Index")

template = THEMES[render_theme_toggle()]
history = get_history("bmi")

form_data = render_bmi_form("bmi")
if form_data is not None:
    outcome = run_bmi(**form_data)
    st.session_state["bmi_outcome"] = outcome
    if outcome.ok:
        history.add(outcome.entry)

outcome = st.session_state.get("bmi_outcome")
if outcome is not None and not outcome.ok:
    render_field_errors(outcome.errors)
elif outcome is not None:
    result = outcome.result
    render_result_metrics([
        ("Your BMI", fmt_number(result.bmi, BMI_PRECISION)),
        ("Category", result.category.value),
    ])
    st.plotly_chart(create_bmi_scale(result.bmi, template=template), width='stretch')

with st.expander("BMI categories (WHO)"):
    for category in BMICategory:
        st.markdown(f"- {category.label}")

st.divider()
render_history(history, "BMI Calculation History", key="bmi")
