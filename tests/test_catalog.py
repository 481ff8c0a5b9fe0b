# tests/test_catalog.py

import pytest

from errors import NotFound, ValidationError
from models import Chore, ChoreConfig, HOUR_MS
from utils.chores import add_chore, update_chore, delete_chore, reorder_chores
from utils.history import tend
from utils.settings import update_config
from utils.tenders import add_tender, rename_tender, delete_tender


# -------------------------------
# Chores
# -------------------------------

def test_add_chore_defaults_from_config(instance):
    instance.config = ChoreConfig(default_cycle_duration=48, default_points=5)
    chore = add_chore(instance, {"name": " Vacuum ", "icon": "🧹"})

    assert chore.name == "Vacuum"
    assert chore.cycle_duration == 48
    assert chore.points == 5
    assert chore.last_completed is None and chore.due_date is None
    assert chore.id.startswith("chore_")
    assert instance.chores[-1] is chore


@pytest.mark.parametrize("payload", [
    {"icon": "🧹"},
    {"name": "Vacuum"},
    {"name": "", "icon": "🧹"},
    {"name": "Vacuum", "icon": 7},
    {"name": "Vacuum", "icon": "🧹", "cycleDuration": 0},
    {"name": "Vacuum", "icon": "🧹", "cycleDuration": "12"},
    {"name": "Vacuum", "icon": "🧹", "points": -1},
    {"name": "Vacuum", "icon": "🧹", "points": 2.5},
    {"name": "Vacuum", "icon": "🧹", "points": True},
    ["not", "an", "object"],
])
def test_add_chore_validation(instance, payload):
    with pytest.raises(ValidationError):
        add_chore(instance, payload)
    assert len(instance.chores) == 2


def test_update_chore_partial(instance):
    chore = update_chore(instance, "chore_trash", {"points": 40})
    assert chore.points == 40
    assert chore.name == "Trash"


def test_update_chore_cycle_does_not_move_due_date(instance, now):
    chore = instance.find_chore("chore_dishes")
    chore.mark_tended(now)
    update_chore(instance, "chore_dishes", {"cycleDuration": 2})

    assert chore.cycle_duration == 2
    assert chore.due_date == now + 24 * HOUR_MS


def test_update_chore_validates_before_mutating(instance):
    with pytest.raises(ValidationError):
        update_chore(instance, "chore_trash", {"name": "Bins", "points": 0})
    assert instance.find_chore("chore_trash").name == "Trash"


def test_update_chore_errors(instance):
    with pytest.raises(ValidationError):
        update_chore(instance, "chore_trash", {"colour": "red"})
    with pytest.raises(NotFound):
        update_chore(instance, "chore_nope", {"name": "x"})


def test_delete_chore(instance):
    delete_chore(instance, "chore_dishes")
    assert [c.id for c in instance.chores] == ["chore_trash"]
    with pytest.raises(NotFound):
        delete_chore(instance, "chore_dishes")


def test_reorder_replaces_catalog(instance):
    payload = [c.to_dict() for c in reversed(instance.chores)]
    reorder_chores(instance, payload)
    assert [c.id for c in instance.chores] == ["chore_trash", "chore_dishes"]


def test_reorder_rescores_past_completions(instance, now):
    tend(instance, "Ann", "chore_dishes", now=now)
    payload = [dict(c.to_dict(), points=15) for c in instance.chores]
    reorder_chores(instance, payload)

    assert instance.tender_scores[0].total_points == 15


_OK = {"id": "x", "name": "a", "icon": "b"}


@pytest.mark.parametrize("payload", [
    None,
    {"id": "x"},
    [{"name": "a", "icon": "b"}],
    [{"id": "x", "name": ""}],
    [{**_OK, "points": "5"}],
    [{**_OK, "points": 0}],
    [{**_OK, "points": 2.5}],
    [{**_OK, "cycleDuration": "abc"}],
    [{**_OK, "cycleDuration": -1}],
    [{**_OK, "lastCompleted": "yesterday"}],
    [{**_OK, "dueDate": True}],
    [_OK, {**_OK, "name": "again"}],
])
def test_reorder_validation(instance, payload):
    with pytest.raises(ValidationError):
        reorder_chores(instance, payload)
    assert [c.id for c in instance.chores] == ["chore_dishes", "chore_trash"]


def test_legacy_chore_record_gets_defaults(now):
    chore = Chore.from_dict({"id": "ch1", "name": "Old", "icon": "🧺", "lastCompleted": now})

    assert chore.cycle_duration == 24
    assert chore.points == 10
    assert chore.due_date == now + 24 * HOUR_MS


# -------------------------------
# Tenders
# -------------------------------

def test_tender_lifecycle(instance):
    tender = add_tender(instance, {"name": "  Ann "})
    assert tender.name == "Ann"
    assert tender.id.startswith("c_")

    rename_tender(instance, tender.id, {"name": "Annie"})
    assert instance.tenders[0].name == "Annie"

    delete_tender(instance, tender.id)
    assert instance.tenders == []


def test_tender_errors(instance):
    with pytest.raises(ValidationError):
        add_tender(instance, {"name": ""})
    with pytest.raises(ValidationError):
        add_tender(instance, {"name": 5})
    with pytest.raises(NotFound):
        rename_tender(instance, "c_missing", {"name": "Bob"})
    with pytest.raises(NotFound):
        delete_tender(instance, "c_missing")


# -------------------------------
# Configuration
# -------------------------------

VALID_CONFIG = {
    "defaultCycleDuration": 12,
    "defaultPoints": 15,
    "warningThreshold": 60,
    "urgentThreshold": 80,
}


def test_update_config(instance):
    config = update_config(instance, dict(VALID_CONFIG))
    assert instance.config is config
    assert config.to_dict() == VALID_CONFIG


@pytest.mark.parametrize("field,value", [
    ("defaultCycleDuration", 0),
    ("defaultCycleDuration", "24"),
    ("defaultPoints", -5),
    ("warningThreshold", 101),
    ("urgentThreshold", -1),
    ("urgentThreshold", None),
    ("warningThreshold", False),
])
def test_update_config_rejects_bad_values(instance, field, value):
    payload = dict(VALID_CONFIG, **{field: value})
    with pytest.raises(ValidationError):
        update_config(instance, payload)
    assert instance.config == ChoreConfig()


def test_update_config_rejects_inverted_thresholds(instance):
    with pytest.raises(ValidationError):
        update_config(instance, dict(VALID_CONFIG, warningThreshold=95, urgentThreshold=50))
