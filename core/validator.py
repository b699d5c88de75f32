"""输入校验：返回 {字段: 错误信息}，空 dict 表示通过，从不抛异常"""
import math
from typing import Dict, Optional, Union

from config.constants import CURRENCIES, UnitSystem
from config.settings import BMI_MAX_HEIGHT_CM, BMI_MAX_WEIGHT_KG

RawValue = Union[str, int, float, None]
Errors = Dict[str, str]


def parse_number(raw: RawValue) -> Optional[float]:
    """把表单原始输入解析为有限浮点数，空值或非法输入返回 None"""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "")
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_emi(
    principal: RawValue,
    interest_rate: RawValue,
    tenure: RawValue,
) -> Errors:
    errors = {}

    p = parse_number(principal)
    if p is None or p <= 0:
        errors["principal"] = "Please enter a valid principal amount"

    rate = parse_number(interest_rate)
    if rate is None or rate < 0:
        errors["interest_rate"] = "Please enter a valid interest rate"

    t = parse_number(tenure)
    if t is None or t <= 0:
        errors["tenure"] = "Please enter a valid tenure"
    elif not t.is_integer():
        errors["tenure"] = "Tenure must be a whole number"

    return errors


def validate_gst(amount: RawValue, rate: RawValue = 0) -> Errors:
    errors = {}

    a = parse_number(amount)
    if a is None or a <= 0:
        errors["amount"] = "Please enter a valid amount"

    r = parse_number(rate)
    if r is None or r < 0:
        errors["rate"] = "Please select a valid GST rate"

    return errors


def validate_currency(amount: RawValue, from_code: str, to_code: str) -> Errors:
    errors = {}

    a = parse_number(amount)
    if a is None or a <= 0:
        errors["amount"] = "Please enter a valid amount"

    unknown = [c for c in (from_code, to_code) if c not in CURRENCIES]
    if unknown:
        errors["currency"] = f"Unsupported currency: {', '.join(map(str, unknown))}"
    elif from_code == to_code:
        errors["currency"] = "Please select different currencies"

    return errors


def validate_bmi(
    weight: RawValue,
    height: RawValue,
    unit: Union[UnitSystem, str] = UnitSystem.METRIC,
) -> Errors:
    errors = {}

    w = parse_number(weight)
    if w is None or w <= 0:
        errors["weight"] = "Please enter a valid weight"

    h = parse_number(height)
    if h is None or h <= 0:
        errors["height"] = "Please enter a valid height"

    try:
        unit = UnitSystem(unit)
    except ValueError:
        errors["unit"] = "Please select a valid measurement unit"
        return errors

    # 公制下的合理性上限，只是提示性校验
    if unit is UnitSystem.METRIC:
        if w is not None and w > BMI_MAX_WEIGHT_KG:
            errors["weight"] = "Weight seems too high. Please check your input."
        if h is not None and h > BMI_MAX_HEIGHT_CM:
            errors["height"] = "Height seems too high. Please check your input."

    return errors
