from dataclasses import dataclass

from config.constants import BMICategory, GSTMode


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_rate: float  # 年利率 (%)
    tenure_months: int


@dataclass(frozen=True)
class EMIResult:
    emi: float
    total_amount: float
    total_interest: float


@dataclass(frozen=True)
class GSTQuery:
    amount: float
    rate: float  # 税率 (%)
    mode: GSTMode = GSTMode.ADD


@dataclass(frozen=True)
class GSTResult:
    base_amount: float
    gst_amount: float
    final_amount: float


@dataclass(frozen=True)
class CurrencyQuery:
    amount: float
    from_code: str
    to_code: str


@dataclass(frozen=True)
class CurrencyResult:
    original_amount: float
    converted_amount: float
    exchange_rate: float
    from_code: str
    to_code: str


@dataclass(frozen=True)
class BMIQuery:
    weight_kg: float
    height_cm: float


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: BMICategory
    category_tag: str


@dataclass(frozen=True)
class HistoryEntry:
    label: str
    value: str
