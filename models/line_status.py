"""
Line Status model.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

NORMAL = 'normal'
DELAYED = 'delayed'
SUSPENDED = 'suspended'
UNKNOWN = 'unknown'

STATUSES = (NORMAL, DELAYED, SUSPENDED, UNKNOWN)
DISRUPTED_STATUSES = (DELAYED, SUSPENDED)

STATUS_EMOJI = {
    NORMAL: '✅',
    DELAYED: '⚠️',
    SUSPENDED: '🚫',
    UNKNOWN: '❓',
}

MAX_MESSAGE_LENGTH = 300


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LineStatus:
    """Outcome of checking a single line."""

    line: str
    operator: str
    status: str = UNKNOWN
    message: str = ''
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self):
        if self.status not in STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if len(self.message) > MAX_MESSAGE_LENGTH:
            object.__setattr__(self, 'message', self.message[:MAX_MESSAGE_LENGTH])

    def __str__(self) -> str:
        return f"{self.emoji} {self.line}（{self.operator}）: {self.message}"

    @property
    def is_disrupted(self) -> bool:
        """True when the line is delayed or suspended."""
        return self.status in DISRUPTED_STATUSES

    @property
    def emoji(self) -> str:
        return STATUS_EMOJI.get(self.status, STATUS_EMOJI[UNKNOWN])

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'line': self.line,
            'operator': self.operator,
            'status': self.status,
            'message': self.message,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
        }
