"""
Notification Formatter - Builds the e-mail subject and bodies for a run.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
from zoneinfo import ZoneInfo

from jinja2 import Environment, PackageLoader, select_autoescape

from models.check_result import CheckResult
from models.line_status import LineStatus

MODE_FULL = 'full'
MODE_DISRUPTED_ONLY = 'disrupted_only'
MODES = (MODE_FULL, MODE_DISRUPTED_ONLY)

SUBJECT_PREFIX = '🚃 電車遅延アラート'
TITLE = '電車遅延アラート'
LEAD = '帰宅ルートに遅延が発生しています'

OFFICIAL_LINKS = (
    ('東京メトロ運行情報', 'https://www.tokyometro.jp/unkou/'),
    ('JR東日本運行情報', 'https://traininfo.jreast.co.jp/train_info/'),
)


@dataclass(frozen=True)
class Notification:
    """Rendered notification payload."""

    subject: str
    text_body: str
    html_body: str


class NotificationFormatter:
    """
    Renders a CheckResult into a Notification.

    Rendering is pure: the check time shown comes from the result itself.
    """

    def __init__(
        self,
        mode: str = MODE_FULL,
        timezone: str = 'Asia/Tokyo',
        links: Sequence[Tuple[str, str]] = OFFICIAL_LINKS
    ):
        if mode not in MODES:
            raise ValueError(f"Unknown notification mode '{mode}', expected one of {MODES}")
        self.mode = mode
        self.tz = ZoneInfo(timezone)
        self.links = list(links)
        self._env = Environment(
            loader=PackageLoader('notifiers', 'templates'),
            autoescape=select_autoescape(['html']),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def format(self, result: CheckResult) -> Notification:
        lines = self._select_lines(result)
        checked_at = self._local_time(result)
        return Notification(
            subject=self.subject(result),
            text_body=self._render_text(lines, checked_at),
            html_body=self._render_html(lines, checked_at),
        )

    def subject(self, result: CheckResult) -> str:
        names = ', '.join(line.line for line in result.disrupted_lines)
        return f"{SUBJECT_PREFIX}: {names}"

    def _select_lines(self, result: CheckResult) -> List[LineStatus]:
        if self.mode == MODE_DISRUPTED_ONLY:
            return result.disrupted_lines
        return list(result.lines)

    def _local_time(self, result: CheckResult) -> str:
        return result.checked_at.astimezone(self.tz).strftime('%Y/%m/%d %H:%M:%S')

    def _render_text(self, lines: List[LineStatus], checked_at: str) -> str:
        rows = [str(line) for line in lines]
        rows.append('')
        rows.append(f"チェック時刻: {checked_at}")
        return '\n'.join(rows)

    def _render_html(self, lines: List[LineStatus], checked_at: str) -> str:
        template = self._env.get_template('alert.html')
        return template.render(
            title=TITLE,
            lead=LEAD,
            lines=lines,
            checked_at=checked_at,
            links=self.links,
        )
