import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go
import seaborn as sns

sns.set_theme(style="darkgrid")

GRID = "rgba(255,255,255,0.08)"


def clean_axes(ax):
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(alpha=0.2)
    ax.tick_params(labelsize=9)


def line_plot(df, x, y, title, ylabel):
    fig, ax = plt.subplots(figsize=(8, 3.5), dpi=150)
    sns.lineplot(data=df, x=x, y=y, marker="o", ax=ax)
    ax.set_title(title, fontsize=12)
    ax.set_ylabel(ylabel)
    ax.set_xlabel("")
    clean_axes(ax)
    fig.tight_layout()
    return fig


def workout_load_plot(exercise, weeks, loads):
    if not weeks:
        return None
    df = pd.DataFrame({"week": weeks, "load": loads})
    fig = line_plot(df, "week", "load", exercise, "Load (lb)")
    fig.axes[0].set_xlabel("Week")
    return fig


def _layout(fig, title, ytitle):
    fig.update_layout(
        template="plotly_dark",
        height=360,
        margin=dict(l=16, r=16, t=52, b=16),
        title=dict(text=title, x=0.02),
        font=dict(size=13),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_xaxes(showgrid=True, gridcolor=GRID, title="Date")
    fig.update_yaxes(showgrid=True, gridcolor=GRID, title=ytitle)
    return fig


def weight_chart(frame, title="Weight trend"):
    # frame from features.insights.weight_frame
    if frame.empty:
        return None
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=frame["date"], y=frame["weight"], mode="lines+markers",
                             name="Weight", line=dict(width=3)))
    if frame["avg_7d"].notna().any():
        fig.add_trace(go.Scatter(x=frame["date"], y=frame["avg_7d"], mode="lines",
                                 name="7-day Avg", line=dict(width=2, dash="dash")))
    return _layout(fig, title, "Weight (lb)")


def macros_chart(frame, title="Calories & macros"):
    if frame.empty:
        return None
    fig = go.Figure()
    for col, label in [("calories", "Calories"), ("protein", "Protein (g)"),
                       ("carbs", "Carbs (g)"), ("fat", "Fat (g)")]:
        fig.add_trace(go.Scatter(x=frame["date"], y=frame[col], mode="lines+markers", name=label))
    return _layout(fig, title, "Calories / Grams")
