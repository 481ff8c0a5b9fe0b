import random
import string

from utils.clock import now_ms

_ALPHABET = string.ascii_lowercase + string.digits


def new_id(prefix: str, now: int | None = None) -> str:
    """Return ``<prefix>_<epoch ms>_<5 random base36 chars>``."""
    stamp = now if now is not None else now_ms()
    suffix = "".join(random.choices(_ALPHABET, k=5))
    return f"{prefix}_{stamp}_{suffix}"


def new_chore_id(now=None):
    return new_id("chore", now)


def new_tender_id(now=None):
    return new_id("c", now)


def new_history_id(now=None):
    return new_id("h", now)
