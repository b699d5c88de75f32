from decimal import Decimal, ROUND_HALF_UP

from config.constants import CURRENCIES


def _quantize(value: float, decimals: int) -> Decimal:
    """按最短十进制表示四舍五入（.5 远离零）"""
    exp = Decimal(1).scaleb(-decimals)
    return Decimal(repr(float(value))).quantize(exp, rounding=ROUND_HALF_UP)


def fmt_number(value: float, decimals: int = 2) -> str:
    """千分位 + 固定小数位：1234567.891 -> 1,234,567.89"""
    q = _quantize(value, decimals)
    if q == 0:
        q = abs(q)
    return f"{q:,.{decimals}f}"


def fmt_currency(value: float, code: str = "USD") -> str:
    """货币格式：1234.5, INR -> ₹1,234.50；-5, USD -> -$5.00"""
    info = CURRENCIES.get(code)
    symbol = info.symbol if info is not None else code
    if symbol.isalpha():
        symbol += " "
    number = fmt_number(value, 2)
    if number.startswith("-"):
        return f"-{symbol}{number[1:]}"
    return f"{symbol}{number}"


def fmt_rate(value: float) -> str:
    """格式化利率百分比：3.45 -> 3.45%"""
    return f"{fmt_number(value, 2)}%"


def fmt_months(months: int) -> str:
    """格式化月数：18 -> 1 year 6 months"""
    years, remain = divmod(months, 12)
    parts = []
    if years:
        parts.append(f"{years} year{'s' if years != 1 else ''}")
    if remain or not years:
        parts.append(f"{remain} month{'s' if remain != 1 else ''}")
    return " ".join(parts)
