# analysis/trend_smoother.py
"""
Trend Smoother: turns a chronological run of readings into the dashboard's
trend line using a trailing (causal) moving average.
"""
import numpy as np
import pandas as pd


def format_time_label(timestamp) -> str:
    """Formats a timestamp as HH:MM in the server's local time."""
    ts = pd.to_datetime(timestamp, utc=True)
    return ts.to_pydatetime().astimezone().strftime("%H:%M")


def smooth(readings: list, window: int = 5) -> list:
    """
    Args:
        readings: readings sorted oldest first, each with 'tds' and 'timestamp'.
        window: number of trailing samples averaged for each point.

    Returns:
        list of trend points: each reading's fields plus 'smoothed_tds' (int)
        and 'time_label'. Early points average over the samples available so
        far; nothing is padded.
    """
    if window < 1:
        raise ValueError(f"Smoothing window must be at least 1, got {window}.")
    if not readings:
        return []

    tds = pd.Series([float(r["tds"]) for r in readings])
    means = tds.rolling(window=window, min_periods=1).mean().to_numpy()
    # Round half up, as the dashboard chart does.
    smoothed = np.floor(means + 0.5).astype(int)

    points = []
    for reading, value in zip(readings, smoothed):
        point = dict(reading)
        point["smoothed_tds"] = int(value)
        point["time_label"] = format_time_label(reading["timestamp"])
        points.append(point)
    return points
