from errors import ValidationError
from models import ChoreConfig
from utils.validation import (
    require_object, require_positive_number, require_positive_int, require_percentage,
)

INVALID_CONFIG = "Invalid configuration values"


def update_config(instance, payload) -> ChoreConfig:
    """Validate all four settings, then replace the instance configuration."""
    payload = require_object(payload)
    config = ChoreConfig(
        default_cycle_duration=require_positive_number(payload.get("defaultCycleDuration"), INVALID_CONFIG),
        default_points=require_positive_int(payload.get("defaultPoints"), INVALID_CONFIG),
        warning_threshold=require_percentage(payload.get("warningThreshold"), INVALID_CONFIG),
        urgent_threshold=require_percentage(payload.get("urgentThreshold"), INVALID_CONFIG),
    )
    # warning must not come after urgent
    if config.warning_threshold > config.urgent_threshold:
        raise ValidationError("warningThreshold must not exceed urgentThreshold")

    instance.config = config
    return config
