"""核心计算：EMI、GST、汇率换算、BMI"""
import math
from typing import Union

import pandas as pd

from config.constants import (
    BMI_THRESHOLDS, BMICategory, CURRENCIES, CurrencyInfo,
    EMI_SCHEDULE_COLUMNS, GSTMode,
)
from core.exceptions import UnsupportedCurrencyError
from core.schema import BMIResult, CurrencyResult, EMIResult, GSTResult


def compute_emi(
    principal: float,
    annual_rate: float,
    tenure_months: int,
) -> EMIResult:
    """等额本息月供：EMI = P·r·(1+r)^n / ((1+r)^n - 1)"""
    r = annual_rate / 12 / 100
    if r == 0:
        # 零利率时公式为 0/0，退化为平均分摊
        return EMIResult(
            emi=principal / tenure_months,
            total_amount=principal,
            total_interest=0.0,
        )
    # 等价于 P·r / (1 - (1+r)^-n)，用 log1p/expm1 避免极小利率除零和长期限溢出
    emi = principal * r / -math.expm1(-tenure_months * math.log1p(r))
    total_amount = emi * tenure_months
    return EMIResult(
        emi=emi,
        total_amount=total_amount,
        total_interest=total_amount - principal,
    )


def generate_emi_schedule(
    principal: float,
    annual_rate: float,
    tenure_months: int,
) -> pd.DataFrame:
    """生成逐月还款计划表"""
    r = annual_rate / 12 / 100
    emi = compute_emi(principal, annual_rate, tenure_months).emi
    records = []
    remaining = principal
    cum_interest = 0.0

    for i in range(tenure_months):
        interest = remaining * r
        prin = emi - interest

        # 最后一期尾差调整
        if i == tenure_months - 1:
            prin = remaining

        remaining -= prin
        if remaining < 0.005:
            remaining = 0.0
        cum_interest += interest

        records.append({
            "period": i + 1,
            "emi": round(prin + interest, 2),
            "principal": round(prin, 2),
            "interest": round(interest, 2),
            "remaining_principal": round(remaining, 2),
            "cumulative_interest": round(cum_interest, 2),
        })

    return pd.DataFrame(records, columns=EMI_SCHEDULE_COLUMNS)


def compute_gst(
    amount: float,
    rate: float,
    mode: Union[GSTMode, str] = GSTMode.ADD,
) -> GSTResult:
    """GST 计算：加税或从含税金额中拆税"""
    if GSTMode(mode) is GSTMode.ADD:
        gst_amount = amount * rate / 100
        return GSTResult(
            base_amount=amount,
            gst_amount=gst_amount,
            final_amount=amount + gst_amount,
        )
    # amount = base + base * rate / 100
    base_amount = amount / (1 + rate / 100)
    return GSTResult(
        base_amount=base_amount,
        gst_amount=amount - base_amount,
        final_amount=amount,
    )


def get_currency(code: str) -> CurrencyInfo:
    """按货币代码查表，不支持的代码抛出 UnsupportedCurrencyError"""
    try:
        return CURRENCIES[code]
    except KeyError:
        raise UnsupportedCurrencyError(code) from None


def convert(amount: float, from_code: str, to_code: str) -> CurrencyResult:
    """以 USD 为中间货币换算"""
    from_rate = get_currency(from_code).rate_to_usd
    to_rate = get_currency(to_code).rate_to_usd
    if from_code == to_code:
        return CurrencyResult(amount, amount, 1.0, from_code, to_code)
    amount_in_usd = amount / from_rate
    return CurrencyResult(
        original_amount=amount,
        converted_amount=amount_in_usd * to_rate,
        exchange_rate=to_rate / from_rate,
        from_code=from_code,
        to_code=to_code,
    )


def classify_bmi(bmi: float) -> BMICategory:
    """WHO 分级，区间左闭右开，边界值归入上一级"""
    for lower, category in BMI_THRESHOLDS:
        if bmi >= lower:
            return category
    return BMICategory.UNDERWEIGHT


def compute_bmi(weight_kg: float, height_cm: float) -> BMIResult:
    """BMI = 体重(kg) / 身高(m)²"""
    height_m = height_cm / 100
    bmi = weight_kg / (height_m * height_m)
    category = classify_bmi(bmi)
    return BMIResult(bmi=bmi, category=category, category_tag=category.tag)
