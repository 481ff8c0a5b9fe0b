# services/due_state.py

from models import HOUR_MS, DueState

GOOD = "good"
WARNING = "warning"
URGENT = "urgent"
OVERDUE = "overdue"

STATUS_COLORS = {
    GOOD: "#22c55e",
    WARNING: "#eab308",
    URGENT: "#f97316",
    OVERDUE: "#ef4444",
}


def compute_due_state(chore, config, now) -> DueState:
    """Classify how close ``chore`` is to being due at instant ``now``.

    Progress is the fraction of the chore's cycle that has elapsed since it was
    last tended. It is floored at 0 but not capped, so an overdue chore reports
    progress above 1. Thresholds are percentages taken from ``config``.
    A chore that has never been tended is always ``good``.
    """
    if chore.last_completed is None or chore.due_date is None:
        return DueState(progress=0, status=GOOD, time_remaining=chore.cycle_duration)

    elapsed = now - chore.last_completed
    progress = elapsed / (chore.cycle_duration * HOUR_MS)
    time_remaining = (chore.due_date - now) / HOUR_MS

    if progress >= 1:
        status = OVERDUE
    elif progress >= config.urgent_threshold / 100:
        status = URGENT
    elif progress >= config.warning_threshold / 100:
        status = WARNING
    else:
        status = GOOD

    return DueState(progress=max(0, progress), status=status, time_remaining=time_remaining)


def format_time_remaining(hours: float) -> str:
    """Render signed hours as e.g. '5h left', '2d 3h left' or '1d overdue'."""
    if hours < 0:
        overdue = abs(hours)
        if overdue < 1:
            return "overdue"
        return f"{_span(overdue)} overdue"
    if hours < 1:
        return "due soon"
    return f"{_span(hours)} left"


def _span(hours):
    if hours < 24:
        return f"{round(hours)}h"
    days = int(hours // 24)
    remaining_hours = round(hours % 24)
    if remaining_hours == 24:
        days, remaining_hours = days + 1, 0
    if remaining_hours == 0:
        return f"{days}d"
    return f"{days}d {remaining_hours}h"


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, STATUS_COLORS[GOOD])


def describe_chores(instance, now):
    """Due-state of every chore in catalog order, ready for JSON."""
    described = []
    for chore in instance.chores:
        state = compute_due_state(chore, instance.config, now)
        row = {"choreId": chore.id}
        row.update(state.to_dict())
        row["label"] = format_time_remaining(state.time_remaining)
        row["color"] = status_color(state.status)
        described.append(row)
    return described
