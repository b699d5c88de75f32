from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class GSTMode(str, Enum):
    ADD = "add"  # 在金额上加税
    EXTRACT = "extract"  # 从含税金额中拆出税额

    @property
    def label(self) -> str:
        return {
            "add": "Add GST",
            "extract": "Extract GST",
        }[self.value]


class TenureUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"

    @property
    def label(self) -> str:
        return {
            "months": "Months",
            "years": "Years",
        }[self.value]


class UnitSystem(str, Enum):
    METRIC = "metric"  # kg / cm
    IMPERIAL = "imperial"  # lb / in

    @property
    def label(self) -> str:
        return {
            "metric": "Metric (kg, cm)",
            "imperial": "Imperial (lb, in)",
        }[self.value]

    @property
    def weight_unit(self) -> str:
        return "kg" if self is UnitSystem.METRIC else "lb"

    @property
    def height_unit(self) -> str:
        return "cm" if self is UnitSystem.METRIC else "in"


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @property
    def tag(self) -> str:
        return self.value.lower()

    @property
    def label(self) -> str:
        return {
            "Underweight": "Underweight (< 18.5)",
            "Normal": "Normal (18.5 - 24.9)",
            "Overweight": "Overweight (25 - 29.9)",
            "Obese": "Obese (>= 30)",
        }[self.value]


# WHO 分级下限，按降序匹配
BMI_THRESHOLDS = (
    (30.0, BMICategory.OBESE),
    (25.0, BMICategory.OVERWEIGHT),
    (18.5, BMICategory.NORMAL),
)


@dataclass(frozen=True)
class CurrencyInfo:
    code: str
    rate_to_usd: float  # 1 USD 可兑换的数量
    symbol: str
    name: str


# 静态汇率，以 USD 为基准，仅供演示
CURRENCIES: Mapping[str, CurrencyInfo] = MappingProxyType({
    info.code: info for info in (
        CurrencyInfo("USD", 1.0, "$", "US Dollar"),
        CurrencyInfo("EUR", 0.92, "€", "Euro"),
        CurrencyInfo("GBP", 0.79, "£", "British Pound"),
        CurrencyInfo("INR", 83.12, "₹", "Indian Rupee"),
        CurrencyInfo("JPY", 149.50, "¥", "Japanese Yen"),
        CurrencyInfo("AUD", 1.53, "A$", "Australian Dollar"),
        CurrencyInfo("CAD", 1.36, "C$", "Canadian Dollar"),
        CurrencyInfo("CHF", 0.88, "CHF", "Swiss Franc"),
        CurrencyInfo("CNY", 7.24, "¥", "Chinese Yuan"),
        CurrencyInfo("SGD", 1.34, "S$", "Singapore Dollar"),
    )
})

PIVOT_CURRENCY = "USD"

# 历史表格列
HISTORY_COLUMNS = ["label", "value"]

EMI_SCHEDULE_COLUMNS = [
    "period", "emi", "principal", "interest",
    "remaining_principal", "cumulative_interest",
]
