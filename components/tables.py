"""格式化表格组件"""
import pandas as pd
import streamlit as st

from core.history import CalculationHistory


def render_history(history: CalculationHistory, title: str, key: str) -> None:
    """渲染历史记录，附带清空按钮"""
    if not len(history):
        return

    c1, c2 = st.columns([4, 1])
    with c1:
        st.subheader(title)
    with c2:
        if st.button("Clear History", key=f"{key}_clear_history"):
            history.clear()
            st.rerun()

    display_df = history.to_frame().rename(columns={"label": "Input", "value": "Result"})
    st.dataframe(display_df, width='stretch', hide_index=True)


def render_schedule_table(schedule: pd.DataFrame, show_all: bool = False) -> None:
    """渲染 EMI 还款计划表格"""
    if schedule.empty:
        st.info("No schedule to display")
        return

    col_map = {
        "period": "Month",
        "emi": "EMI",
        "principal": "Principal",
        "interest": "Interest",
        "remaining_principal": "Balance",
        "cumulative_interest": "Interest Paid",
    }
    display_df = schedule[list(col_map)].rename(columns=col_map)

    for col in ["EMI", "Principal", "Interest", "Balance", "Interest Paid"]:
        display_df[col] = display_df[col].apply(lambda x: f"{x:,.2f}")

    if not show_all and len(display_df) > 24:
        st.dataframe(display_df, width='stretch', height=600, hide_index=True)
    else:
        st.dataframe(display_df, width='stretch', hide_index=True)
