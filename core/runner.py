"""表单提交流程：校验 -> 解析/单位换算 -> 计算 -> 生成历史摘要

页面和 CLI 共用这里的函数，只要校验有任何错误就不会调用计算函数。
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from config.constants import CURRENCIES, GSTMode, TenureUnit, UnitSystem
from config.settings import EMI_CURRENCY, GST_CURRENCY, INCH_TO_CM, LB_TO_KG, MAX_SCHEDULE_MONTHS
from core.calculator import compute_bmi, compute_emi, compute_gst, convert
from core.schema import BMIQuery, CurrencyQuery, GSTQuery, HistoryEntry, LoanTerms
from core.validator import (
    RawValue, parse_number,
    validate_bmi, validate_currency, validate_emi, validate_gst,
)
from utils.formatters import fmt_currency, fmt_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    errors: Dict[str, str] = field(default_factory=dict)
    query: Any = None
    result: Any = None
    entry: Optional[HistoryEntry] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def tenure_to_months(tenure: int, unit: Union[TenureUnit, str] = TenureUnit.MONTHS) -> int:
    if TenureUnit(unit) is TenureUnit.YEARS:
        return tenure * 12
    return tenure


def schedule_allowed(tenure_months: int) -> bool:
    """期数过多时不生成逐月还款计划"""
    return tenure_months <= MAX_SCHEDULE_MONTHS


def pounds_to_kg(pounds: float) -> float:
    return pounds * LB_TO_KG


def inches_to_cm(inches: float) -> float:
    return inches * INCH_TO_CM


def _display(raw: RawValue) -> str:
    """历史记录里原样展示用户输入，整数浮点去掉 .0"""
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw).strip()


def _rejected(name: str, errors: Dict[str, str]) -> CalculationOutcome:
    logger.info("%s input rejected: %s", name, ", ".join(sorted(errors)))
    return CalculationOutcome(errors=errors)


def run_emi(
    principal: RawValue,
    interest_rate: RawValue,
    tenure: RawValue,
    tenure_unit: Union[TenureUnit, str] = TenureUnit.MONTHS,
) -> CalculationOutcome:
    errors = validate_emi(principal, interest_rate, tenure)
    if errors:
        return _rejected("EMI", errors)

    unit = TenureUnit(tenure_unit)
    terms = LoanTerms(
        principal=parse_number(principal),
        annual_rate=parse_number(interest_rate),
        tenure_months=tenure_to_months(int(parse_number(tenure)), unit),
    )
    result = compute_emi(terms.principal, terms.annual_rate, terms.tenure_months)
    symbol = CURRENCIES[EMI_CURRENCY].symbol
    entry = HistoryEntry(
        label=f"{symbol}{fmt_number(terms.principal, 0)} @ {_display(interest_rate)}% "
              f"for {_display(tenure)} {unit.value}",
        value=f"EMI: {fmt_currency(result.emi, EMI_CURRENCY)}",
    )
    logger.debug("EMI computed: %s -> %s", terms, result)
    return CalculationOutcome(query=terms, result=result, entry=entry)


def run_gst(
    amount: RawValue,
    rate: RawValue,
    mode: Union[GSTMode, str] = GSTMode.ADD,
) -> CalculationOutcome:
    errors = validate_gst(amount, rate)
    if errors:
        return _rejected("GST", errors)

    query = GSTQuery(
        amount=parse_number(amount),
        rate=parse_number(rate),
        mode=GSTMode(mode),
    )
    result = compute_gst(query.amount, query.rate, query.mode)
    symbol = CURRENCIES[GST_CURRENCY].symbol
    entry = HistoryEntry(
        label=f"{symbol}{fmt_number(query.amount, 0)} @ {_display(rate)}% ({query.mode.label})",
        value=f"GST: {fmt_currency(result.gst_amount, GST_CURRENCY)}",
    )
    logger.debug("GST computed: %s -> %s", query, result)
    return CalculationOutcome(query=query, result=result, entry=entry)


def run_currency(amount: RawValue, from_code: str, to_code: str) -> CalculationOutcome:
    errors = validate_currency(amount, from_code, to_code)
    if errors:
        return _rejected("Currency", errors)

    query = CurrencyQuery(amount=parse_number(amount), from_code=from_code, to_code=to_code)
    result = convert(query.amount, query.from_code, query.to_code)
    src, dst = CURRENCIES[from_code], CURRENCIES[to_code]
    entry = HistoryEntry(
        label=f"{src.symbol}{fmt_number(query.amount)} {from_code}",
        value=f"{dst.symbol}{fmt_number(result.converted_amount)} {to_code}",
    )
    logger.debug("Currency converted: %s -> %s", query, result)
    return CalculationOutcome(query=query, result=result, entry=entry)


def run_bmi(
    weight: RawValue,
    height: RawValue,
    unit: Union[UnitSystem, str] = UnitSystem.METRIC,
) -> CalculationOutcome:
    errors = validate_bmi(weight, height, unit)
    if errors:
        return _rejected("BMI", errors)

    unit = UnitSystem(unit)
    weight_val, height_val = parse_number(weight), parse_number(height)
    if unit is UnitSystem.IMPERIAL:
        query = BMIQuery(weight_kg=pounds_to_kg(weight_val), height_cm=inches_to_cm(height_val))
    else:
        query = BMIQuery(weight_kg=weight_val, height_cm=height_val)
    result = compute_bmi(query.weight_kg, query.height_cm)
    entry = HistoryEntry(
        label=f"{_display(weight)} {unit.weight_unit}, {_display(height)} {unit.height_unit}",
        value=f"BMI: {fmt_number(result.bmi, 1)} ({result.category.value})",
    )
    logger.debug("BMI computed: %s -> %s", query, result)
    return CalculationOutcome(query=query, result=result, entry=entry)
