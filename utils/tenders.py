from errors import NotFound
from models import Tender
from utils.ids import new_tender_id
from utils.validation import require_text, require_object


# -------------------------------
# Tender Utilities
# -------------------------------

def add_tender(instance, payload, now=None) -> Tender:
    payload = require_object(payload)
    name = require_text(payload.get("name"), "Invalid name for tender")
    tender = Tender(id=new_tender_id(now), name=name)
    instance.tenders.append(tender)
    return tender


def rename_tender(instance, tender_id, payload) -> Tender:
    """Renaming does not rewrite history; old entries keep the old name."""
    payload = require_object(payload)
    name = require_text(payload.get("name"), "Invalid new name for tender")
    tender = instance.find_tender(tender_id)
    if tender is None:
        raise NotFound("Tender not found")
    tender.name = name
    return tender


def delete_tender(instance, tender_id):
    remaining = [t for t in instance.tenders if t.id != tender_id]
    if len(remaining) == len(instance.tenders):
        raise NotFound("Tender not found")
    instance.tenders = remaining
    return instance
