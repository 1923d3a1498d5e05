"""
Check Result model.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from models.line_status import LineStatus


@dataclass
class CheckResult:
    """Aggregated statuses of all monitored lines for one run."""

    lines: List[LineStatus] = field(default_factory=list)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return '\n'.join(str(line) for line in self.lines)

    @property
    def requires_notification(self) -> bool:
        """True iff at least one line is delayed or suspended."""
        return any(line.is_disrupted for line in self.lines)

    @property
    def disrupted_lines(self) -> List[LineStatus]:
        """Delayed or suspended lines, in configuration order."""
        return [line for line in self.lines if line.is_disrupted]

    def summary(self) -> str:
        """Human-readable one-line outcome of the run."""
        if not self.requires_notification:
            return 'All lines running normally'
        names = ', '.join(line.line for line in self.disrupted_lines)
        return f"Delays detected: {names}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'checked_at': self.checked_at.isoformat() if self.checked_at else None,
            'requires_notification': self.requires_notification,
            'summary': self.summary(),
            'lines': [line.to_dict() for line in self.lines],
        }
