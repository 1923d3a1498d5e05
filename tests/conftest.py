"""
Pytest configuration and fixtures.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.line_config import LineConfig
from notifiers.email_sender import EmailSender


KEIYO = {
    'name': '京葉線',
    'name_en': 'Keiyo Line',
    'operator': 'JR東日本',
    'url': 'https://traininfo.jreast.co.jp/train_info/line.aspx?gid=1&lineid=keiyoline',
    'disruption_keywords': ['運転見合', '運休', '運転取りやめ', '遅延', '遅れ', 'ダイヤ乱れ', '折返し運転'],
    'normal_keywords': ['平常運転', '平常どおり', '平常通り'],
    'silence_is_normal': False,
}

HIBIYA = {
    'name': '日比谷線',
    'name_en': 'Hibiya Line',
    'operator': '東京メトロ',
    'url': 'https://www.tokyometro.jp/unkou/history/hibiya.html',
    'disruption_keywords': [
        '運転見合',
        '運休',
        {'keyword': '直通運転中止', 'severity': 'delayed'},
        '遅延',
        '遅れ',
        '折返し運転',
    ],
    'normal_keywords': ['平常運転', '平常どおり', '通常運行'],
    'boilerplate_phrases': ['15分以上の遅れが発生した場合'],
    'silence_is_normal': True,
}


class RecordingSender(EmailSender):
    """Sender that records calls instead of delivering mail."""

    def __init__(self, error: Exception = None):
        super().__init__()
        self.sent = []
        self.error = error

    def send(self, notification, recipient):
        self.sent.append((notification, recipient))
        if self.error:
            raise self.error


def fetcher_from(pages):
    """
    Build a fetcher from a {line name: text or exception} mapping.
    """
    def fetch(line_config):
        page = pages[line_config.name]
        if isinstance(page, Exception):
            raise page
        return page
    return fetch


@pytest.fixture
def keiyo_config():
    return LineConfig.from_dict('keiyo', KEIYO)


@pytest.fixture
def hibiya_config():
    return LineConfig.from_dict('hibiya', HIBIYA)


@pytest.fixture
def line_configs(keiyo_config, hibiya_config):
    return [keiyo_config, hibiya_config]


@pytest.fixture
def recording_sender():
    return RecordingSender()


@pytest.fixture
def config_files(tmp_path):
    """Write lines.yaml and settings.yaml for both lines into tmp_path."""
    import yaml

    lines_path = tmp_path / 'lines.yaml'
    settings_path = tmp_path / 'settings.yaml'
    lines_path.write_text(
        yaml.safe_dump({'keiyo': KEIYO, 'hibiya': HIBIYA}, allow_unicode=True, sort_keys=False),
        encoding='utf-8'
    )
    settings_path.write_text(
        yaml.safe_dump({
            'notification': {'mode': 'full', 'timezone': 'Asia/Tokyo'},
            'http': {'timeout': 5},
            'email': {'provider': 'smtp', 'smtp_host': 'smtp.example.com', 'smtp_port': 587},
        }),
        encoding='utf-8'
    )
    return str(lines_path), str(settings_path)
