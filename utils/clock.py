import time


def now_ms() -> int:
    """Current instant as epoch milliseconds."""
    return int(time.time() * 1000)
