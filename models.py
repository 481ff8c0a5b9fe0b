import logging
from dataclasses import dataclass, field
from flask_sqlalchemy import SQLAlchemy

logger = logging.getLogger(__name__)

db = SQLAlchemy()

HOUR_MS = 60 * 60 * 1000

DEFAULT_CYCLE_DURATION = 24  # hours
DEFAULT_POINTS = 10
DEFAULT_WARNING_THRESHOLD = 75  # percent of the cycle
DEFAULT_URGENT_THRESHOLD = 90

SEED_CHORE_NAME = "Water the plants"
SEED_CHORE_ICON = "🪴"


class Instance(db.Model):
    """One row per sync space. Collections are stored whole as JSON."""

    __tablename__ = "kinobi_instances"

    sync_id = db.Column(db.String(255), primary_key=True)
    tenders = db.Column(db.JSON, nullable=False, default=list)
    tending_log = db.Column(db.JSON, nullable=False, default=list)
    last_tended_timestamp = db.Column(db.BigInteger, nullable=True)
    last_tender = db.Column(db.String(255), nullable=True)
    chores = db.Column(db.JSON, nullable=False, default=list)
    config = db.Column(db.JSON, nullable=True)
    tender_scores = db.Column(db.JSON, nullable=True)

    def __repr__(self):
        return f"<Instance {self.sync_id}>"


# -------------------------------
# Domain records
# -------------------------------

@dataclass
class Tender:
    id: str
    name: str

    @classmethod
    def from_dict(cls, d):
        return cls(id=d.get("id"), name=d.get("name", ""))

    def to_dict(self):
        return {"id": self.id, "name": self.name}


@dataclass
class Chore:
    id: str
    name: str
    icon: str
    cycle_duration: float = DEFAULT_CYCLE_DURATION
    points: int = DEFAULT_POINTS
    last_completed: int | None = None
    due_date: int | None = None

    @classmethod
    def from_dict(cls, d):
        """Build a chore from its stored form, filling fields older records lack."""
        cycle = d.get("cycleDuration") or DEFAULT_CYCLE_DURATION
        last_completed = d.get("lastCompleted") or None
        due_date = d.get("dueDate") or None
        if last_completed is None:
            due_date = None
        elif due_date is None:
            due_date = int(last_completed + cycle * HOUR_MS)
        return cls(
            id=d.get("id"),
            name=d.get("name", ""),
            icon=d.get("icon", ""),
            cycle_duration=cycle,
            points=d.get("points") or DEFAULT_POINTS,
            last_completed=last_completed,
            due_date=due_date,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "cycleDuration": self.cycle_duration,
            "points": self.points,
            "lastCompleted": self.last_completed,
            "dueDate": self.due_date,
        }

    def mark_tended(self, now):
        self.last_completed = now
        self.due_date = int(now + self.cycle_duration * HOUR_MS)


@dataclass
class HistoryEntry:
    id: str
    timestamp: int
    person: str
    chore_id: str
    notes: str | None = None

    @classmethod
    def from_dict(cls, d):
        return cls(
            id=d.get("id"),
            timestamp=d.get("timestamp", 0),
            person=d.get("person", ""),
            chore_id=d.get("chore_id", ""),
            notes=d.get("notes"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "person": self.person,
            "chore_id": self.chore_id,
            "notes": self.notes,
        }


@dataclass
class ChoreConfig:
    default_cycle_duration: float = DEFAULT_CYCLE_DURATION
    default_points: int = DEFAULT_POINTS
    warning_threshold: float = DEFAULT_WARNING_THRESHOLD
    urgent_threshold: float = DEFAULT_URGENT_THRESHOLD

    @classmethod
    def from_dict(cls, d):
        """Stored values are merged over the defaults."""
        if d is None:
            return cls()
        if not isinstance(d, dict):
            logger.warning("[STORE] Invalid stored config %r, using defaults", d)
            return cls()
        defaults = cls()
        return cls(
            default_cycle_duration=d.get("defaultCycleDuration", defaults.default_cycle_duration),
            default_points=d.get("defaultPoints", defaults.default_points),
            warning_threshold=d.get("warningThreshold", defaults.warning_threshold),
            urgent_threshold=d.get("urgentThreshold", defaults.urgent_threshold),
        )

    def to_dict(self):
        return {
            "defaultCycleDuration": self.default_cycle_duration,
            "defaultPoints": self.default_points,
            "warningThreshold": self.warning_threshold,
            "urgentThreshold": self.urgent_threshold,
        }


@dataclass
class TenderScore:
    tender_id: str | None
    name: str
    total_points: int = 0
    completion_count: int = 0
    last_activity: int = 0

    @classmethod
    def from_dict(cls, d):
        return cls(
            tender_id=d.get("tenderId"),
            name=d.get("name", ""),
            total_points=d.get("totalPoints", 0),
            completion_count=d.get("completionCount", 0),
            last_activity=d.get("lastActivity", 0),
        )

    def to_dict(self):
        return {
            "tenderId": self.tender_id,
            "name": self.name,
            "totalPoints": self.total_points,
            "completionCount": self.completion_count,
            "lastActivity": self.last_activity,
        }


@dataclass
class InstanceData:
    """Everything one sync space owns, as typed collections."""

    tenders: list[Tender] = field(default_factory=list)
    tending_log: list[HistoryEntry] = field(default_factory=list)
    chores: list[Chore] = field(default_factory=list)
    config: ChoreConfig = field(default_factory=ChoreConfig)
    tender_scores: list[TenderScore] = field(default_factory=list)
    last_tended_timestamp: int | None = None
    last_tender: str | None = None

    @classmethod
    def from_record(cls, record):
        return cls(
            tenders=[Tender.from_dict(t) for t in record.tenders or []],
            tending_log=[HistoryEntry.from_dict(e) for e in record.tending_log or []],
            chores=[Chore.from_dict(c) for c in record.chores or []],
            config=ChoreConfig.from_dict(record.config),
            tender_scores=[TenderScore.from_dict(s) for s in record.tender_scores or []],
            last_tended_timestamp=record.last_tended_timestamp,
            last_tender=record.last_tender,
        )

    def apply_to(self, record):
        """Overwrite every column of ``record`` with this instance's state."""
        record.tenders = [t.to_dict() for t in self.tenders]
        record.tending_log = [e.to_dict() for e in self.tending_log]
        record.chores = [c.to_dict() for c in self.chores]
        record.config = self.config.to_dict()
        record.tender_scores = [s.to_dict() for s in self.tender_scores]
        record.last_tended_timestamp = self.last_tended_timestamp
        record.last_tender = self.last_tender

    def find_chore(self, chore_id):
        return next((c for c in self.chores if c.id == chore_id), None)

    def find_tender(self, tender_id):
        return next((t for t in self.tenders if t.id == tender_id), None)


@dataclass
class DueState:
    progress: float
    status: str  # good | warning | urgent | overdue
    time_remaining: float  # hours, negative when overdue

    def to_dict(self):
        return {
            "progress": self.progress,
            "status": self.status,
            "timeRemaining": self.time_remaining,
        }


@dataclass
class LeaderboardEntry:
    tender: Tender
    score: TenderScore
    rank: int = 0
    recent_completions: list[HistoryEntry] = field(default_factory=list)

    def to_dict(self):
        return {
            "tender": self.tender.to_dict(),
            "score": self.score.to_dict(),
            "rank": self.rank,
            "recentCompletions": [e.to_dict() for e in self.recent_completions],
        }
