"""表单组件"""
from typing import Optional

import streamlit as st

from config.constants import CURRENCIES, GSTMode, TenureUnit, UnitSystem
from config.settings import (
    DEFAULT_FROM_CURRENCY, DEFAULT_GST_RATE, DEFAULT_TO_CURRENCY, GST_RATE_OPTIONS,
)
from core.history import CalculationHistory


def get_history(key: str) -> CalculationHistory:
    """每个计算器在 session_state 中各自保存一份历史"""
    state_key = f"{key}_history"
    if state_key not in st.session_state:
        st.session_state[state_key] = CalculationHistory()
    return st.session_state[state_key]


def reset_form(key_prefix: str) -> None:
    """清空表单输入和结果，保留历史"""
    keep = f"{key_prefix}_history"
    for key in [k for k in st.session_state if k.startswith(f"{key_prefix}_") and k != keep]:
        del st.session_state[key]


def render_emi_form(key_prefix: str = "emi") -> Optional[dict]:
    """EMI 表单，返回原始输入 dict 或 None（未提交）"""
    # 单位放在 form 外部，切换时立即重渲染
    tenure_unit = st.radio(
        "Tenure Type",
        options=[u.value for u in TenureUnit],
        format_func=lambda x: TenureUnit(x).label,
        horizontal=True,
        key=f"{key_prefix}_tenure_unit",
    )

    with st.form(f"{key_prefix}_form"):
        principal = st.text_input("Principal Amount (₹)", placeholder="e.g. 500000",
                                  key=f"{key_prefix}_principal")
        c1, c2 = st.columns(2)
        with c1:
            interest_rate = st.text_input("Annual Interest Rate (%)", placeholder="e.g. 8.5",
                                          key=f"{key_prefix}_rate")
        with c2:
            tenure = st.text_input(f"Loan Tenure ({TenureUnit(tenure_unit).label})",
                                   placeholder="e.g. 60", key=f"{key_prefix}_tenure")

        c1, c2 = st.columns(2)
        with c1:
            submitted = st.form_submit_button("Calculate EMI", type="primary", width='stretch')
        with c2:
            st.form_submit_button("Reset", width='stretch', on_click=reset_form, args=(key_prefix,))

    if submitted:
        return {
            "principal": principal,
            "interest_rate": interest_rate,
            "tenure": tenure,
            "tenure_unit": tenure_unit,
        }
    return None


def render_gst_form(key_prefix: str = "gst") -> Optional[dict]:
    """GST 表单"""
    with st.form(f"{key_prefix}_form"):
        amount = st.text_input("Amount (₹)", placeholder="e.g. 1000", key=f"{key_prefix}_amount")
        c1, c2 = st.columns(2)
        with c1:
            rate = st.selectbox(
                "GST Rate",
                options=list(GST_RATE_OPTIONS),
                index=list(GST_RATE_OPTIONS).index(DEFAULT_GST_RATE),
                format_func=lambda x: "0% (Exempt)" if x == 0 else f"{x}% GST",
                key=f"{key_prefix}_rate",
            )
        with c2:
            mode = st.radio(
                "Calculation Mode",
                options=[m.value for m in GSTMode],
                format_func=lambda x: GSTMode(x).label,
                horizontal=True,
                key=f"{key_prefix}_mode",
            )

        c1, c2 = st.columns(2)
        with c1:
            submitted = st.form_submit_button("Calculate GST", type="primary", width='stretch')
        with c2:
            st.form_submit_button("Reset", width='stretch', on_click=reset_form, args=(key_prefix,))

    if submitted:
        return {"amount": amount, "rate": rate, "mode": mode}
    return None


def render_currency_form(key_prefix: str = "currency") -> Optional[dict]:
    """汇率换算表单，币种选择放在 form 外部以支持互换"""
    codes = list(CURRENCIES)

    def _fmt(code: str) -> str:
        return f"{code} - {CURRENCIES[code].name}"

    st.session_state.setdefault(f"{key_prefix}_from", DEFAULT_FROM_CURRENCY)
    st.session_state.setdefault(f"{key_prefix}_to", DEFAULT_TO_CURRENCY)

    c1, c2, c3 = st.columns([5, 1, 5])
    with c1:
        from_code = st.selectbox("From Currency", options=codes, format_func=_fmt,
                                 key=f"{key_prefix}_from")
    with c2:
        st.write("")
        st.button("⇄", key=f"{key_prefix}_swap", on_click=_swap_currencies, args=(key_prefix,))
    with c3:
        to_code = st.selectbox("To Currency", options=codes, format_func=_fmt,
                               key=f"{key_prefix}_to")

    with st.form(f"{key_prefix}_form"):
        amount = st.text_input("Amount", placeholder="e.g. 100", key=f"{key_prefix}_amount")
        c1, c2 = st.columns(2)
        with c1:
            submitted = st.form_submit_button("Convert", type="primary", width='stretch')
        with c2:
            st.form_submit_button("Reset", width='stretch', on_click=reset_form, args=(key_prefix,))

    if submitted:
        return {"amount": amount, "from_code": from_code, "to_code": to_code}
    return None


def _swap_currencies(key_prefix: str) -> None:
    from_key, to_key = f"{key_prefix}_from", f"{key_prefix}_to"
    st.session_state[from_key], st.session_state[to_key] = (
        st.session_state[to_key], st.session_state[from_key],
    )
    st.session_state.pop(f"{key_prefix}_outcome", None)


def render_bmi_form(key_prefix: str = "bmi") -> Optional[dict]:
    """BMI 表单"""
    unit = st.radio(
        "Measurement Unit",
        options=[u.value for u in UnitSystem],
        format_func=lambda x: UnitSystem(x).label,
        horizontal=True,
        key=f"{key_prefix}_unit",
    )
    unit_system = UnitSystem(unit)

    with st.form(f"{key_prefix}_form"):
        c1, c2 = st.columns(2)
        with c1:
            weight = st.text_input(f"Weight ({unit_system.weight_unit})",
                                   key=f"{key_prefix}_weight")
        with c2:
            height = st.text_input(f"Height ({unit_system.height_unit})",
                                   key=f"{key_prefix}_height")

        c1, c2 = st.columns(2)
        with c1:
            submitted = st.form_submit_button("Calculate BMI", type="primary", width='stretch')
        with c2:
            st.form_submit_button("Reset", width='stretch', on_click=reset_form, args=(key_prefix,))

    if submitted:
        return {"weight": weight, "height": height, "unit": unit}
    return None


def render_theme_toggle() -> str:
    """侧边栏图表主题切换，返回 light / dark"""
    with st.sidebar:
        dark = st.toggle("Dark charts", key="theme_dark")
    return "dark" if dark else "light"
