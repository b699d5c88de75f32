import os

# 页面配置
PAGE_TITLE = "Finance Calculator Suite"
PAGE_ICON = "💰"
LAYOUT = "wide"

# 日志级别，可通过环境变量覆盖
LOG_LEVEL = os.environ.get("FINCALC_LOG_LEVEL", "INFO")

# 每个计算器保留的历史条数
HISTORY_LIMIT = 10

# GST 税率选项 (%)
GST_RATE_OPTIONS = (0, 5, 12, 18, 28)
DEFAULT_GST_RATE = 18

# 默认货币对
DEFAULT_FROM_CURRENCY = "USD"
DEFAULT_TO_CURRENCY = "INR"

# EMI / GST 结果使用的货币
EMI_CURRENCY = "INR"
GST_CURRENCY = "INR"

# 还款计划表最多生成的期数（100 年），超出时页面和 CLI 只显示汇总
MAX_SCHEDULE_MONTHS = 1200

# BMI 合理性上限（仅公制下校验）
BMI_MAX_WEIGHT_KG = 500
BMI_MAX_HEIGHT_CM = 300

# 英制换算
LB_TO_KG = 0.453592
INCH_TO_CM = 2.54

# 图表配色
COLORS = {
    "danger": "#d62728",
    "principal": "#1f77b4",
    "interest": "#ff7f0e",
    "underweight": "#17becf",
    "normal": "#2ca02c",
    "overweight": "#bcbd22",
    "obese": "#d62728",
}

# BMI 展示精度
BMI_PRECISION = 1
