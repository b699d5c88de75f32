"""页面冒烟测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from streamlit.testing.v1 import AppTest

PAGES_DIR = Path(__file__).parent.parent / "pages"


def _run(page: str) -> AppTest:
    at = AppTest.from_file(str(PAGES_DIR / page), default_timeout=30)
    at.run()
    assert not at.exception
    return at


class TestThemeToggle:
    @pytest.mark.parametrize("page", ["1_emi_calculator.py", "4_bmi_calculator.py"])
    def test_chart_pages_have_toggle(self, page):
        assert len(_run(page).sidebar.toggle) == 1

    @pytest.mark.parametrize("page", ["2_gst_calculator.py", "3_currency_converter.py"])
    def test_pages_without_charts_have_no_toggle(self, page):
        assert len(_run(page).sidebar.toggle) == 0
