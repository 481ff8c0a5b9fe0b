import logging

from errors import NotFound, ValidationError
from models import DEFAULT_POINTS, HistoryEntry, TenderScore
from services.scoring import sync_score_cache
from utils.clock import now_ms
from utils.ids import new_history_id
from utils.validation import optional_text

logger = logging.getLogger(__name__)


# -------------------------------
# Tending
# -------------------------------

def tend(instance, person_name, chore_id, notes=None, now=None):
    """Record that ``person_name`` completed ``chore_id`` at ``now``.

    An unknown chore id is still logged; only the chore state is left alone.
    Returns ``(instance, entry)``; ``instance`` is updated in place.
    """
    if not isinstance(person_name, str) or not person_name.strip() \
            or not isinstance(chore_id, str) or not chore_id.strip():
        raise ValidationError("Invalid tender or chore identifier")

    now = now if now is not None else now_ms()
    person = person_name.strip()
    chore_id = chore_id.strip()

    chore = instance.find_chore(chore_id)
    if chore:
        # The current cycle duration decides the next due date
        chore.mark_tended(now)
    else:
        logger.warning("[TEND] Chore %s not in catalog; logging orphaned completion", chore_id)

    entry = HistoryEntry(
        id=new_history_id(now),
        timestamp=now,
        person=person,
        chore_id=chore_id,
        notes=optional_text(notes),
    )
    instance.tending_log.append(entry)
    instance.last_tended_timestamp = now
    instance.last_tender = person

    _credit(instance, person, chore.points if chore else DEFAULT_POINTS, now)

    logger.info("[TEND] %s tended %s", person, chore.name if chore else chore_id)
    return instance, entry


def _credit(instance, person, points, now):
    score = next((s for s in instance.tender_scores if s.name == person), None)
    if score is None:
        tender = next((t for t in instance.tenders if t.name == person), None)
        score = TenderScore(tender_id=tender.id if tender else None, name=person, last_activity=now)
        instance.tender_scores.append(score)
    score.total_points += points
    score.completion_count += 1
    score.last_activity = now


# -------------------------------
# History
# -------------------------------

def sorted_history(instance):
    """The log, newest first. Storage order is insertion order."""
    return sorted(instance.tending_log, key=lambda e: e.timestamp, reverse=True)


def refresh_last_tended(instance):
    """Point last_tender/last_tended_timestamp at the newest remaining entry."""
    if instance.tending_log:
        latest = max(instance.tending_log, key=lambda e: e.timestamp)
        instance.last_tended_timestamp = latest.timestamp
        instance.last_tender = latest.person
    else:
        instance.last_tended_timestamp = None
        instance.last_tender = None
    return instance


def delete_entry(instance, entry_id):
    """Remove one log entry by id; cached scores are rebuilt from what remains."""
    remaining = [e for e in instance.tending_log if e.id != entry_id]
    if len(remaining) == len(instance.tending_log):
        raise NotFound("History entry not found")

    instance.tending_log = remaining
    refresh_last_tended(instance)
    sync_score_cache(instance)
    logger.info("[HISTORY] Deleted entry %s", entry_id)
    return instance
