# services/store.py

import logging
from sqlalchemy.exc import SQLAlchemyError

from errors import StoreError
from models import (
    db, Instance, InstanceData, Chore, ChoreConfig,
    DEFAULT_CYCLE_DURATION, DEFAULT_POINTS, SEED_CHORE_NAME, SEED_CHORE_ICON,
)
from utils.ids import new_chore_id

logger = logging.getLogger(__name__)


def seed_instance() -> InstanceData:
    """State of a sync space the first time anyone touches it."""
    chore = Chore(
        id=new_chore_id(),
        name=SEED_CHORE_NAME,
        icon=SEED_CHORE_ICON,
        cycle_duration=DEFAULT_CYCLE_DURATION,
        points=DEFAULT_POINTS,
    )
    return InstanceData(chores=[chore], config=ChoreConfig())


class InstanceStore:
    """Whole-record persistence of instances, keyed by sync id.

    Every write replaces the full record. There is no merge and no locking:
    two requests that load the same sync space and both save will keep only
    the later write.
    """

    def __init__(self, session=None):
        self.session = session or db.session

    def load(self, sync_id) -> InstanceData:
        """Return the instance for ``sync_id``, creating a seeded one if needed."""
        try:
            record = self.session.get(Instance, sync_id)
            if record is None:
                logger.info("[STORE] Creating new instance for sync id %s", sync_id)
                record = Instance(sync_id=sync_id)
                seed_instance().apply_to(record)
                self.session.add(record)
                self.session.commit()
            data = InstanceData.from_record(record)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("[STORE] Failed to load instance %s", sync_id)
            raise StoreError("Failed to load instance data") from e

        logger.debug("[STORE] Loaded %s with %d chores", sync_id, len(data.chores))
        return data

    def save(self, sync_id, data: InstanceData):
        try:
            record = self.session.get(Instance, sync_id)
            if record is None:
                record = Instance(sync_id=sync_id)
                self.session.add(record)
            data.apply_to(record)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("[STORE] Failed to update instance %s", sync_id)
            raise StoreError("Failed to save instance data") from e

        logger.debug("[STORE] Saved instance %s", sync_id)
