"""
End-to-end tests for DelayChecker runs.
"""

import os

import pytest

from core.delay_checker import DelayChecker
from core.errors import RetrievalFailure
from conftest import RecordingSender, fetcher_from


def make_checker(config_files, pages, sender, mode=None):
    lines_path, settings_path = config_files
    return DelayChecker(
        config_path=lines_path,
        settings_path=settings_path,
        fetcher=fetcher_from(pages),
        sender=sender,
        recipient='me@example.com',
        mode=mode,
    )


class TestDelayChecker:
    """End-to-end behaviour of one run."""

    def test_all_normal_sends_nothing(self, config_files, recording_sender):
        pages = {'京葉線': '平常運転 です', '日比谷線': '平常運転 です'}
        checker = make_checker(config_files, pages, recording_sender)

        result = checker.check_lines()
        summary = checker.run()

        assert [line.status for line in result.lines] == ['normal', 'normal']
        assert summary == 'All lines running normally'
        assert recording_sender.sent == []

    def test_delay_on_one_line_sends_once(self, config_files, recording_sender):
        pages = {
            '京葉線': '<div>京葉線 ... 強風の影響で、一部列車に遅れが出ています</div>',
            '日比谷線': '<p>平常運転</p>',
        }
        checker = make_checker(config_files, pages, recording_sender)

        summary = checker.run()

        assert summary == 'Delays detected: 京葉線'
        assert len(recording_sender.sent) == 1
        notification, recipient = recording_sender.sent[0]
        assert recipient == 'me@example.com'
        assert '京葉線' in notification.subject
        assert '日比谷線' not in notification.subject
        assert '強風の影響で、一部列車に遅れが出ています' in notification.text_body

    def test_delay_message_kept_on_status(self, config_files, recording_sender):
        pages = {'京葉線': '京葉線 ... 強風の影響で、一部列車に遅れが出ています', '日比谷線': '平常運転'}
        result = make_checker(config_files, pages, recording_sender).check_lines()

        keiyo = result.lines[0]
        assert keiyo.status == 'delayed'
        assert '強風の影響で、一部列車に遅れが出ています' in keiyo.message

    def test_suspension(self, config_files, recording_sender):
        pages = {'京葉線': '運転見合わせ', '日比谷線': '平常運転'}
        result = make_checker(config_files, pages, recording_sender).check_lines()

        assert result.lines[0].status == 'suspended'

    def test_retrieval_failure_isolated_and_not_notified(self, config_files, recording_sender):
        pages = {'京葉線': RetrievalFailure('HTTP 500'), '日比谷線': '平常運転'}
        checker = make_checker(config_files, pages, recording_sender)

        result = checker.check_lines()
        summary = checker.run()

        assert [line.status for line in result.lines] == ['unknown', 'normal']
        assert summary == 'All lines running normally'
        assert recording_sender.sent == []

    def test_dry_run_never_sends(self, config_files, recording_sender):
        pages = {'京葉線': '運休', '日比谷線': '運休'}
        summary = make_checker(config_files, pages, recording_sender).run(dry_run=True)

        assert summary == 'Delays detected: 京葉線, 日比谷線'
        assert recording_sender.sent == []

    def test_send_failure_does_not_crash_run(self, config_files):
        sender = RecordingSender(error=RuntimeError('smtp down'))
        pages = {'京葉線': '遅延', '日比谷線': '平常運転'}

        summary = make_checker(config_files, pages, sender).run()

        assert summary == 'Delays detected: 京葉線'
        assert len(sender.sent) == 1

    def test_check_selected_lines(self, config_files, recording_sender):
        pages = {'日比谷線': '平常運転'}
        result = make_checker(config_files, pages, recording_sender).check_lines(['hibiya'])

        assert [line.line for line in result.lines] == ['日比谷線']

    @pytest.mark.parametrize('mode,expect_normal_line', [('full', True), ('disrupted_only', False)])
    def test_mode_controls_body(self, config_files, recording_sender, mode, expect_normal_line):
        pages = {'京葉線': '遅延', '日比谷線': '平常運転'}
        make_checker(config_files, pages, recording_sender, mode=mode).run()

        notification, _ = recording_sender.sent[0]
        assert ('日比谷線' in notification.text_body) is expect_normal_line


class TestYahooSource:
    """Runs against the bundled Yahoo! 路線情報 configuration."""

    NO_INFO = '''
    <html><body>
      <div id="menu">遅延証明書 | 運行情報</div>
      <div class="trouble"><p>現在､事故･遅延に関する情報はありません</p></div>
    </body></html>
    '''
    DELAYED = '''
    <html><body>
      <div id="menu">遅延証明書 | 運行情報</div>
      <div class="trouble"><p>強風の影響で、一部列車に遅れが出ています。</p></div>
    </body></html>
    '''

    def make_checker(self, pages, sender):
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        return DelayChecker(
            config_path=os.path.join(base_dir, 'config', 'lines.yahoo.yaml'),
            settings_path=os.path.join(base_dir, 'config', 'settings.yaml'),
            fetcher=fetcher_from(pages),
            sender=sender,
            recipient='me@example.com',
        )

    def test_no_incident_notice_is_normal(self, recording_sender):
        pages = {'日比谷線': self.NO_INFO, '京葉線': self.NO_INFO}
        checker = self.make_checker(pages, recording_sender)

        result = checker.check_lines()

        assert [line.status for line in result.lines] == ['normal', 'normal']
        assert checker.run() == 'All lines running normally'
        assert recording_sender.sent == []

    def test_trouble_notice_is_delayed(self, recording_sender):
        pages = {'日比谷線': self.NO_INFO, '京葉線': self.DELAYED}

        summary = self.make_checker(pages, recording_sender).run()

        assert summary == 'Delays detected: 京葉線'
        notification, _ = recording_sender.sent[0]
        assert '強風の影響で、一部列車に遅れが出ています' in notification.text_body
