"""结果指标卡片组件"""
from typing import Dict, List, Tuple

import streamlit as st


def render_result_metrics(items: List[Tuple[str, str]], title: str = "Results") -> None:
    """按网格渲染 (标签, 值) 结果"""
    st.subheader(title)
    columns = st.columns(len(items))
    for col, (label, value) in zip(columns, items):
        with col:
            st.metric(label, value)


def render_field_errors(errors: Dict[str, str]) -> None:
    """逐字段显示校验错误"""
    for message in errors.values():
        st.error(message)
