"""Finance Calculator Suite - 主入口"""
import streamlit as st

from config.logging_config import setup_logging
from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT

setup_logging()

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

st.markdown("""
A set of quick finance and health calculators. Everything is computed locally,
nothing is stored: history lives only in the current session.

### Calculators

| Page | What it does |
|------|------|
| 🧮 **Loan / EMI Calculator** | Monthly EMI, total interest and amortization schedule |
| 🧾 **GST / Tax Calculator** | Add GST to an amount or extract it from a GST-inclusive price |
| 💱 **Currency Converter** | Convert between 10 currencies using static rates |
| 🏃 **BMI Calculator** | Body Mass Index with WHO category, metric or imperial input |

Each calculator keeps its last 10 results in a history list.
""")

# 侧边栏
with st.sidebar:
    st.markdown("### About")
    st.markdown(f"{PAGE_TITLE} v1.0")
    st.markdown("No data leaves your browser session.")
