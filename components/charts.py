"""Plotly 图表工厂"""
import plotly.graph_objects as go
import plotly.express as px
import pandas as pd

import plotly.io as pio
from config.constants import BMI_THRESHOLDS, BMICategory
from config.settings import COLORS


def _theme_template(font: str, grid: str, tick: str, legend_bg: str) -> go.layout.Template:
    axis = dict(
        gridcolor=grid,
        linecolor=grid,
        zerolinecolor=grid,
        tickfont=dict(color=tick),
        title_font=dict(color=tick),
    )
    return go.layout.Template(
        layout=go.Layout(
            font=dict(family="sans-serif", color=font),
            title_font=dict(size=20, color=font),
            paper_bgcolor="rgba(0,0,0,0)",
            plot_bgcolor="rgba(0,0,0,0)",
            xaxis=axis,
            yaxis=axis,
            legend=dict(
                font=dict(color=tick),
                bgcolor=legend_bg,
                bordercolor=grid,
                borderwidth=1,
            ),
            colorway=px.colors.qualitative.Plotly,
        )
    )


# 自定义 Plotly 主题
pio.templates["fincalc_light"] = _theme_template("#333", "#e0e0e0", "#666", "rgba(255,255,255,0.5)")
pio.templates["fincalc_dark"] = _theme_template("#fafafa", "#444", "#aaa", "rgba(0,0,0,0.5)")

# 设置默认主题
pio.templates.default = "fincalc_light"

THEMES = {"light": "fincalc_light", "dark": "fincalc_dark"}


def create_emi_breakdown_pie(
    principal: float,
    total_interest: float,
    template: str = "fincalc_light",
) -> go.Figure:
    """本金/利息构成环形图"""
    fig = go.Figure(data=[go.Pie(
        labels=["Principal", "Interest"],
        values=[principal, total_interest],
        hole=0.45,
        marker_colors=[COLORS["principal"], COLORS["interest"]],
        textinfo="label+percent",
        textposition="outside",
    )])
    fig.update_layout(
        title="Payment Breakdown",
        showlegend=True,
        margin=dict(t=60, b=20, l=20, r=20),
        height=380,
        template=template,
    )
    return fig


def create_balance_line(schedule: pd.DataFrame, template: str = "fincalc_light") -> go.Figure:
    """剩余本金下降曲线 + 累计利息"""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=schedule["period"],
        y=schedule["remaining_principal"],
        mode="lines",
        name="Outstanding principal",
        line=dict(color=COLORS["principal"], width=2),
        fill="tozeroy",
        hovertemplate="Month %{x}<br>Outstanding: %{y:,.2f}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=schedule["period"],
        y=schedule["cumulative_interest"],
        mode="lines",
        name="Interest paid",
        line=dict(color=COLORS["interest"], width=2, dash="dash"),
        hovertemplate="Month %{x}<br>Interest paid: %{y:,.2f}<extra></extra>",
    ))

    fig.update_layout(
        title="Amortization",
        xaxis_title="Month",
        yaxis_title="Amount",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
        template=template,
    )
    return fig


def create_bmi_scale(bmi: float, template: str = "fincalc_light", upper: float = 40.0) -> go.Figure:
    """BMI 分级色带，并标出当前值"""
    bounds = [0.0] + sorted(lower for lower, _ in BMI_THRESHOLDS) + [max(upper, bmi + 2)]
    categories = [BMICategory.UNDERWEIGHT] + [c for _, c in sorted(BMI_THRESHOLDS)]

    fig = go.Figure()
    for (start, end), category in zip(zip(bounds, bounds[1:]), categories):
        fig.add_trace(go.Bar(
            x=[end - start],
            y=["BMI"],
            base=start,
            orientation="h",
            name=category.value,
            marker_color=COLORS[category.tag],
            hovertemplate=f"{category.label}<extra></extra>",
        ))

    fig.add_vline(x=bmi, line_width=3, line_color=COLORS["danger"])
    fig.add_annotation(x=bmi, y=1, yref="paper", text=f"{bmi:.1f}", showarrow=False, yshift=10)
    fig.update_layout(
        barmode="overlay",
        showlegend=True,
        margin=dict(t=40, b=20, l=20, r=20),
        height=200,
        yaxis=dict(showticklabels=False),
        template=template,
    )
    return fig
