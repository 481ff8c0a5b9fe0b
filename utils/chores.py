from errors import NotFound, ValidationError
from models import Chore
from services.scoring import sync_score_cache
from utils.ids import new_chore_id
from utils.validation import (
    is_number, require_text, require_positive_number, require_positive_int, require_object,
)

EDITABLE_FIELDS = ("name", "icon", "cycleDuration", "points")


# -------------------------------
# Chore Utilities
# -------------------------------

def add_chore(instance, payload, now=None) -> Chore:
    """Append a new chore; missing durations and points come from the config."""
    payload = require_object(payload)
    name = require_text(payload.get("name"), "Invalid name or icon for chore")
    icon = require_text(payload.get("icon"), "Invalid name or icon for chore")

    cycle = payload.get("cycleDuration")
    points = payload.get("points")
    cycle = instance.config.default_cycle_duration if cycle is None else \
        require_positive_number(cycle, "cycleDuration must be a positive number")
    points = instance.config.default_points if points is None else \
        require_positive_int(points, "points must be a positive integer")

    chore = Chore(id=new_chore_id(now), name=name, icon=icon, cycle_duration=cycle, points=points)
    instance.chores.append(chore)
    return chore


def update_chore(instance, chore_id, payload) -> Chore:
    """Apply any subset of name/icon/cycleDuration/points.

    A new cycleDuration does not move an existing due date; it applies from
    the next tend.
    """
    payload = require_object(payload)
    if not any(key in payload for key in EDITABLE_FIELDS):
        raise ValidationError("Invalid chore data")

    changes = {}
    if "name" in payload:
        changes["name"] = require_text(payload["name"], "Invalid chore name")
    if "icon" in payload:
        changes["icon"] = require_text(payload["icon"], "Invalid chore icon")
    if "cycleDuration" in payload:
        changes["cycle_duration"] = require_positive_number(
            payload["cycleDuration"], "cycleDuration must be a positive number")
    if "points" in payload:
        changes["points"] = require_positive_int(payload["points"], "points must be a positive integer")

    chore = instance.find_chore(chore_id)
    if chore is None:
        raise NotFound("Chore not found")
    for attr, value in changes.items():
        setattr(chore, attr, value)
    if "points" in changes:
        # past completions are scored at the chore's current value
        sync_score_cache(instance)
    return chore


def delete_chore(instance, chore_id):
    """History that references the chore is left as it is."""
    remaining = [c for c in instance.chores if c.id != chore_id]
    if len(remaining) == len(instance.chores):
        raise NotFound("Chore not found")
    instance.chores = remaining
    sync_score_cache(instance)
    return instance


def reorder_chores(instance, chores):
    """Replace the catalog wholesale with ``chores`` in the given order."""
    if not isinstance(chores, list):
        raise ValidationError("chores must be a list")
    reordered = []
    seen = set()
    for item in chores:
        if not isinstance(item, dict) or not isinstance(item.get("id"), str) or not item["id"]:
            raise ValidationError("Each chore needs an id")
        if item["id"] in seen:
            raise ValidationError(f"Duplicate chore id: {item['id']}")
        seen.add(item["id"])
        require_text(item.get("name"), "Invalid name or icon for chore")
        require_text(item.get("icon"), "Invalid name or icon for chore")
        if item.get("cycleDuration") is not None:
            require_positive_number(item["cycleDuration"], "cycleDuration must be a positive number")
        if item.get("points") is not None:
            require_positive_int(item["points"], "points must be a positive integer")
        for key in ("lastCompleted", "dueDate"):
            if item.get(key) is not None and not is_number(item[key]):
                raise ValidationError(f"{key} must be a timestamp")
        chore = Chore.from_dict(item)
        chore.points = int(chore.points)
        reordered.append(chore)
    instance.chores = reordered
    sync_score_cache(instance)
    return reordered
