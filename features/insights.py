from datetime import timedelta

import pandas as pd

from app_utils.dates import format_date, month_bounds, try_parse_date
from app_utils.progress import compute_month_progress


def completion_frame(completions) -> pd.DataFrame:
    # one row per done day, sorted
    days = sorted(d for d in (try_parse_date(k) for k in completions) if d is not None)
    df = pd.DataFrame({"date": pd.to_datetime(days)})
    df["done"] = 1
    return df


def month_summary(completions, today):
    first, last = month_bounds(today)
    total = compute_month_progress(today).total_cells
    df = completion_frame(completions)
    in_month = df[(df["date"] >= pd.Timestamp(first)) & (df["date"] <= pd.Timestamp(last))]
    done = int(len(in_month))
    return {
        "done": done,
        "total": total,
        "rate": done / total,
    }


def current_streak(completions, today) -> int:
    """Consecutive done days ending today, or yesterday when today is still open."""
    day = today
    if format_date(day) not in completions:
        day = day - timedelta(days=1)
    streak = 0
    while format_date(day) in completions:
        streak += 1
        day = day - timedelta(days=1)
    return streak


def longest_streak(completions) -> int:
    df = completion_frame(completions)
    if df.empty:
        return 0
    gaps = df["date"].diff().dt.days.fillna(1).ne(1)
    runs = gaps.cumsum()
    return int(df.groupby(runs).size().max())


def weekly_counts(completions, today, weeks=8) -> pd.DataFrame:
    # weeks start on Monday
    end = pd.Timestamp(today)
    start = (end - pd.Timedelta(days=end.weekday())) - pd.Timedelta(weeks=weeks - 1)
    index = pd.date_range(start, periods=weeks, freq="7D")

    df = completion_frame(completions)
    df = df[(df["date"] >= start) & (df["date"] <= end)].copy()
    df["week"] = df["date"] - pd.to_timedelta(df["date"].dt.weekday, unit="D")
    counts = df.groupby("week")["done"].sum().reindex(index, fill_value=0)

    out = counts.rename_axis("week").reset_index(name="days_done")
    out["days_done"] = out["days_done"].astype(int)
    return out
