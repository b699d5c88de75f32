"""计算器异常"""


class CalculatorError(Exception):
    """Base exception for the calculation engine"""

    pass


class UnsupportedCurrencyError(CalculatorError, KeyError):
    """Currency code is not in the static rate table"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Unsupported currency code: {self.code!r}"
