from __future__ import annotations

import json
from typing import Any, Dict, List

from workday_time.time_value import Time


MINUTES_PER_DAY = 24 * 60


def to_data(time: Time) -> Dict[str, Any]:
    """
    Convert a Time into a plain dict.
    """
    if time is None:
        raise ValueError("time is None")

    total = time.to_integer()
    return {
        "time": time.to_string(),
        "hours": time.hours,
        "minutes": time.minutes,
        "total_minutes": total,
        "days": total // MINUTES_PER_DAY,
    }


def render_text(data: Dict[str, Any]) -> str:
    lines: List[str] = []

    def add_kv(key: str, label: str) -> None:
        val = data.get(key, None)
        if val is None:
            return
        s = str(val).strip()
        if not s:
            return
        lines.append(f"{label}: {s}")

    add_kv("time", "Time")
    add_kv("hours", "Hours")
    add_kv("minutes", "Minutes")
    add_kv("total_minutes", "TotalMinutes")
    # only worth showing once the value runs past midnight
    if data.get("days"):
        add_kv("days", "Days")

    return "\n".join(lines).rstrip() + "\n"


def render_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=True, indent=2, sort_keys=True) + "\n"


def write_json(data: Dict[str, Any], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_json(data))
