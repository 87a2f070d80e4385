import logging
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

import numpy as np

import config
from models.day_record import DayRecord
from models.profile import Profile
from models.trend import TrendPoint, TrendSummary
from services.day_stats import get_day_derived
from utils.coercion import round_half_up, validate_soft


def _to_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _record_date(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get("date", record.get("dateKey"))
    return getattr(record, "date", None)


def iso_days_range(end: Any, count: int) -> List[date]:
    """The `count` calendar days ending at `end`, oldest first."""
    end_date = _to_date(end)
    if end_date is None or count <= 0:
        return []
    return [end_date - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def index_day_logs(day_logs: Any) -> Dict[date, Any]:
    """
    Keys day records by calendar date.

    Accepts a mapping of date keys to records, or a list of records
    carrying their own `date`. Entries without a usable date are skipped.
    """
    indexed: Dict[date, Any] = {}
    if isinstance(day_logs, Mapping):
        items = list(day_logs.items())
    elif isinstance(day_logs, (list, tuple)):
        items = [(_record_date(record), record) for record in day_logs]
    else:
        items = []
    for key, record in items:
        day = _to_date(key)
        if day is None:
            logging.warning(f"Skipping day log with unusable date key {key!r}.")
            continue
        indexed[day] = record
    return indexed


def build_trend_series(
    day_logs: Any, profile: Any = None, dates: Optional[Iterable[Any]] = None
) -> List[TrendPoint]:
    """
    Runs the day facade once per date, oldest first.

    Dates without a record are computed from an empty day, so the series has
    no gaps. Without `dates`, every logged day is used.
    """
    indexed = index_day_logs(day_logs)
    profile = validate_soft(Profile, profile)
    wanted = sorted(indexed) if dates is None else [d for d in map(_to_date, dates) if d]

    logging.debug(f"Building trend series for {len(wanted)} day(s).")
    points: List[TrendPoint] = []
    for day in wanted:
        record = validate_soft(DayRecord, indexed.get(day))
        derived = get_day_derived(record, profile)
        deficit = derived.tdee - derived.total_intake
        points.append(
            TrendPoint(
                date=day,
                tdee=derived.tdee,
                intake=derived.total_intake,
                net_kcal=derived.net_kcal,
                deficit=deficit,
                est_delta_kg=-(deficit / config.KCAL_PER_KG_BODY_WEIGHT),
                activity_factor=derived.tdee_breakdown.af_computed,
                neat=derived.tdee_breakdown.neat,
                eat=derived.tdee_breakdown.eat,
                tef=derived.tdee_breakdown.tef,
                lunch=derived.meals.lunch,
                dinner=derived.meals.dinner,
                extras=derived.meals.extras,
            )
        )
    return points


def summarize_trend(points: List[TrendPoint]) -> TrendSummary:
    """
    Aggregates a trend series for the dashboard.

    Only days with logged intake count toward totals, averages, the streak
    and the latest activity factor. The streak runs back from the most recent
    logged day while the day stays in deficit.
    """
    ordered = sorted(points, key=lambda p: p.date)
    logged = [p for p in ordered if p.intake > 0]

    intake = np.array([p.intake for p in logged], dtype=float)
    tdee = np.array([p.tdee for p in logged], dtype=float)
    deficits = tdee - intake

    streak = 0
    for deficit in deficits[::-1]:
        if deficit < 0:
            break
        streak += 1

    total_intake = float(intake.sum())
    total_tdee = float(tdee.sum())
    net_deficit = total_tdee - total_intake

    return TrendSummary(
        days=len(ordered),
        logged_days=len(logged),
        total_intake=round_half_up(total_intake),
        total_tdee=round_half_up(total_tdee),
        net_deficit=round_half_up(net_deficit),
        avg_intake=float(intake.mean()) if logged else 0.0,
        avg_tdee=float(tdee.mean()) if logged else 0.0,
        est_total_delta_kg=-(net_deficit / config.KCAL_PER_KG_BODY_WEIGHT),
        latest_activity_factor=(logged or ordered)[-1].activity_factor if ordered else None,
        current_streak=streak,
    )
