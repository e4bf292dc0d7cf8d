#!/usr/bin/env python3
"""
General utilities for the Planets Simulator.
"""
from datetime import datetime, timedelta
from typing import Optional


def try_float(val) -> Optional[float]:
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def duration_short_string(d: timedelta) -> str:
    """Compact label for a speed preset: 90d, 4h, 15m, 30s."""
    total = int(d.total_seconds())
    if d.days > 0:
        return f"{d.days}d"
    if total >= 3600:
        return f"{total // 3600}h"
    if total >= 60:
        return f"{total // 60}m"
    return f"{total}s"


def format_timestamp(ts: datetime) -> str:
    return ts.strftime("%Y-%m-%d %H:%M UTC")
