"""
Tests for text normalization.
"""

import pytest

from utils.text_normalizer import normalize_text


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_strips_markup_and_collapses_whitespace(self):
        html = '''
        <html>
            <body>
                <h1>京葉線</h1>
                <p>強風の影響で、
                   一部列車に遅れが出ています。</p>
            </body>
        </html>
        '''
        assert normalize_text(html) == '京葉線 強風の影響で、 一部列車に遅れが出ています。'

    def test_drops_script_and_style(self):
        html = '<style>.a{color:red}</style><script>var s = "遅延";</script><p>平常運転</p>'
        assert normalize_text(html) == '平常運転'

    def test_full_width_space_is_collapsed(self):
        assert normalize_text('日比谷線　　平常運転') == '日比谷線 平常運転'

    def test_plain_text_passes_through(self):
        assert normalize_text('平常運転') == '平常運転'

    @pytest.mark.parametrize('raw', ['', None, '   \n\t '])
    def test_empty_input(self, raw):
        assert normalize_text(raw) == ''

    def test_malformed_markup_does_not_raise(self):
        text = normalize_text('<div><p>運転見合わせ<span class="x>中です</div></p><<>')
        assert '運転見合わせ' in text
        assert '\n' not in text

    def test_is_deterministic(self):
        html = '<ul><li>遅延</li><li>運休</li></ul>'
        assert normalize_text(html) == normalize_text(html)


class TestNormalizeTextSelector:
    """Tests for restricting normalization to a status area."""

    PAGE = '''
    <html><body>
        <div class="nav">遅延証明書 運行情報トップ</div>
        <div class="trouble"><p>現在､事故･遅延に関する情報はありません</p></div>
    </body></html>
    '''

    def test_selector_limits_text(self):
        assert normalize_text(self.PAGE, '.trouble') == '現在､事故･遅延に関する情報はありません'

    def test_no_match_uses_whole_page(self):
        text = normalize_text(self.PAGE, '.missing')
        assert '遅延証明書' in text
        assert '情報はありません' in text

    def test_empty_match_uses_whole_page(self):
        html = '<div class="trouble">  </div><p>平常運転</p>'
        assert normalize_text(html, '.trouble') == '平常運転'

    def test_invalid_selector_uses_whole_page(self):
        text = normalize_text(self.PAGE, '.trouble[')
        assert '遅延証明書' in text
