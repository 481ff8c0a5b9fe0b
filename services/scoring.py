# services/scoring.py

"""Leaderboard and score aggregation.

Scores are never authoritative state: everything here is a pure function of
the tending log and the current chore catalog. The ``tender_scores`` list kept
on an instance is a cache of ``compute_scores``; writes that can change past
awards resynchronise it from the log.
"""

from models import DEFAULT_POINTS, LeaderboardEntry, Tender, TenderScore
from errors import ValidationError

RECENT_COMPLETIONS = 5
DAY_MS = 24 * 60 * 60 * 1000

PERIODS = {"all": None, "7d": 7 * DAY_MS, "30d": 30 * DAY_MS}


def chore_points(chores, chore_id) -> int:
    """Current point value of a chore; deleted chores are worth the default."""
    for chore in chores:
        if chore.id == chore_id:
            return chore.points
    return DEFAULT_POINTS


def _people(tenders, log):
    """Catalog tenders in order, then names that only appear in the log."""
    people = list(tenders)
    known = {t.name for t in tenders}
    for entry in log:
        if entry.person not in known:
            known.add(entry.person)
            people.append(Tender(id=None, name=entry.person))
    return people


def _score(tender, entries, chores):
    return TenderScore(
        tender_id=tender.id,
        name=tender.name,
        total_points=sum(chore_points(chores, e.chore_id) for e in entries),
        completion_count=len(entries),
        last_activity=max((e.timestamp for e in entries), default=0),
    )


def compute_scores(log, chores, tenders=()):
    """One ``TenderScore`` per person with at least one completion.

    ``tenders`` only supplies ids and ordering; people who never tended are
    left out, matching what incremental updates on tend would have produced.
    """
    scores = []
    for person in _people(tenders, log):
        entries = [e for e in log if e.person == person.name]
        if entries:
            scores.append(_score(person, entries, chores))
    return scores


def compute_leaderboard(instance, since=None):
    """Rank every person by total points.

    Person names are matched against the log case-sensitively. When ``since``
    is given only completions strictly after it count. Ties keep catalog order.
    """
    log = instance.tending_log
    if since is not None:
        log = [e for e in log if e.timestamp > since]

    board = []
    for person in _people(instance.tenders, instance.tending_log):
        entries = [e for e in log if e.person == person.name]
        recent = sorted(entries, key=lambda e: e.timestamp, reverse=True)[:RECENT_COMPLETIONS]
        board.append(LeaderboardEntry(
            tender=person,
            score=_score(person, entries, instance.chores),
            recent_completions=recent,
        ))
    return rank_leaderboard(board, "points")


def _average(entry):
    count = entry.score.completion_count
    return entry.score.total_points / count if count > 0 else 0


_SORTERS = {
    "points": lambda e: e.score.total_points,
    "completions": lambda e: e.score.completion_count,
    "average": _average,
}


def rank_leaderboard(entries, sort_by="points"):
    """Stable descending sort on ``sort_by``, then 1-based ranks."""
    if sort_by not in _SORTERS:
        raise ValidationError(f"Invalid sort key: {sort_by}")
    ranked = sorted(entries, key=_SORTERS[sort_by], reverse=True)
    for index, entry in enumerate(ranked):
        entry.rank = index + 1
    return ranked


def period_cutoff(period, now):
    """Instant completions must be newer than for ``period``; None for all time."""
    if period not in PERIODS:
        raise ValidationError(f"Invalid period: {period}")
    window = PERIODS[period]
    return None if window is None else now - window


def sync_score_cache(instance):
    """Replace the cached scores with a fresh aggregation of the log.

    Returns True when the cache had drifted.
    """
    fresh = compute_scores(instance.tending_log, instance.chores, instance.tenders)
    drifted = _comparable(fresh) != _comparable(instance.tender_scores)
    instance.tender_scores = fresh
    return drifted


def _comparable(scores):
    return sorted(
        (s.name, s.total_points, s.completion_count, s.last_activity) for s in scores
    )
