"""
Unit tests for plant_extractor module
"""
from pathlib import Path
from unittest.mock import patch

import pytest

from src.sowplanner.exceptions import BlockedPageError
from src.sowplanner.scrapers.plant_extractor import PlantRecordExtractor, is_blocked_page

FIXTURES_DIR = Path(__file__).resolve().parents[2] / "fixtures"

INFO_TABS_HTML = """
<div class="tab-content">
    <div id="variety" data-tab-content class="active">
        <h3>Variety Info</h3>
        <p><b>Days to Maturity:</b> 65 days</p>
        <p><b>Family:</b> Apiaceae</p>
        <p><b>Type:</b> Danvers Type</p>
        <p><b>Native:</b> Africa, Eurasia</p>
        <p><b>Hardiness:</b> Frost-tolerant biennial grown as an annual</p>
        <p><b>Exposure:</b> Full sun</p>
        <p><b>Plant Dimensions:</b> Roots are 6"–7" long at their peak.</p>
        <p><b>Variety Info:</b> Orange roots, wide at the top, tapering to a point.</p>
        <p><b>Attributes:</b> Crack Resistant, Frost Tolerant</p>
    </div>
    <div id="sowing" data-tab-content>
        <h3>Sowing Info</h3>
        <p><b>When to Sow Outside:</b> RECOMMENDED. 2 to 4 weeks before your average last frost date</p>
        <p><b>When to Start Inside:</b> Not recommended; root disturbance stunts growth.</p>
        <p><b>Days to Emerge:</b> 10–25 days</p>
        <p><b>Seed Depth:</b> ¼"</p>
        <p><b>Seed Spacing:</b> 1"</p>
        <p><b>Row Spacing:</b> 6"</p>
        <p><b>Thinning:</b> When 1" tall, thin to 1 every 3"</p>
    </div>
</div>
"""


@pytest.fixture
def extractor():
    return PlantRecordExtractor()


@pytest.fixture
def seed_page_html():
    return (FIXTURES_DIR / "seed.html").read_text(encoding="utf-8")


class TestPlantRecordExtractor:
    """Tests for PlantRecordExtractor.extract"""

    def test_extract_info_tabs(self, extractor):
        """Test every labelled paragraph lands in its field"""
        record = extractor.extract(INFO_TABS_HTML, "http://example.com")

        assert record.url == "http://example.com"
        assert record.days_to_maturity == "65 days"
        assert record.family == "Apiaceae"
        assert record.plant_type == "Danvers Type"
        assert record.native == "Africa, Eurasia"
        assert record.hardiness == "Frost-tolerant biennial grown as an annual"
        assert record.exposure == "Full sun"
        assert record.plant_dimensions == 'Roots are 6"-7" long at their peak.'
        assert record.variety_info == "Orange roots, wide at the top, tapering to a point."
        assert record.attributes == "Crack Resistant, Frost Tolerant"
        assert record.when_to_sow_outside == "RECOMMENDED. 2 to 4 weeks before your average last frost date"
        assert record.when_to_start_inside == "Not recommended; root disturbance stunts growth."
        assert record.days_to_emerge == "10-25 days"
        assert record.seed_depth == '¼"'
        assert record.seed_spacing == '1"'
        assert record.row_spacing == '6"'
        assert record.thinning == 'When 1" tall, thin to 1 every 3"'

    def test_missing_widgets_stay_absent(self, extractor):
        """Test fields the page lacks are None rather than empty strings"""
        record = extractor.extract(INFO_TABS_HTML, "http://example.com")

        assert record.title is None
        assert record.description is None
        assert record.rating is None
        assert record.votes is None

    def test_extract_from_product_page(self, extractor, seed_page_html):
        """Test a full product page fixture"""
        record = extractor.extract(seed_page_html, "http://example.com")

        assert record.title == "Danvers 126 Carrot Seeds"
        assert record.description.startswith("Growers in Danvers, Massachusetts")
        assert record.description.endswith("due to its high fiber content.")
        assert record.plant_type == "Danvers Type"
        assert record.variety_info == (
            "Orange roots, wide at the top, tapering to a point. "
            "'Danvers 126' is a Danvers type carrot."
        )
        assert record.when_to_sow_outside == (
            "RECOMMENDED. 2 to 4 weeks before your average last frost date, and when soil "
            "temperature is at least 45°F, ideally 60°-85°F."
        )
        assert record.days_to_emerge == "10-25 days"
        assert record.seed_depth == '¼"'
        assert record.rating == 4.5
        assert record.votes == 32

    def test_unknown_labels_ignored(self, extractor, seed_page_html):
        """Test labels outside the table (e.g. Harvesting) are dropped"""
        record = extractor.extract(seed_page_html, "http://example.com")

        assert "Harvest when roots" not in record.to_json()

    def test_learn_more_stripped_only_from_type(self, extractor):
        html = """
        <div class="tab-content">
            <p><b>Type:</b> Cherry <a href="#">(Learn more)</a></p>
            <p><b>Family:</b> Solanaceae (Learn more)</p>
        </div>
        """
        record = extractor.extract(html, "u")

        assert record.plant_type == "Cherry"
        assert record.family == "Solanaceae (Learn more)"

    def test_label_match_is_case_sensitive(self, extractor):
        html = '<div class="tab-content"><p><b>family:</b> Apiaceae</p></div>'
        record = extractor.extract(html, "u")

        assert record.family is None

    def test_label_without_colon(self, extractor):
        html = '<div class="tab-content"><p><b>Exposure</b> Part shade</p></div>'
        record = extractor.extract(html, "u")

        assert record.exposure == "Part shade"

    def test_labels_outside_tab_content_ignored(self, extractor):
        html = '<div class="sidebar"><p><b>Family:</b> Apiaceae</p></div>'
        record = extractor.extract(html, "u")

        assert record.family is None

    def test_title_normalized(self, extractor):
        html = "<h1>Sweet Million – Cherry Tomato</h1>"
        record = extractor.extract(html, "u")

        assert record.title == "Sweet Million - Cherry Tomato"

    def test_title_keeps_surrounding_whitespace(self, extractor):
        html = "<h1>\n  Sweet Million – Cherry Tomato  \n</h1>"
        record = extractor.extract(html, "u")

        assert record.title == "\n  Sweet Million - Cherry Tomato  \n"

    def test_rating_requires_both_attributes(self, extractor):
        html = '<div class="loox-rating" data-rating="4.8"></div>'
        record = extractor.extract(html, "u")

        assert record.rating is None
        assert record.votes is None

    def test_unparseable_rating_values(self, extractor):
        """Test each rating attribute is parsed independently"""
        html = '<div class="loox-rating" data-rating="n/a" data-raters="17"></div>'
        record = extractor.extract(html, "u")

        assert record.rating is None
        assert record.votes == 17

    def test_negative_vote_count_ignored(self, extractor):
        html = '<div class="loox-rating" data-rating="4" data-raters="-3"></div>'
        record = extractor.extract(html, "u")

        assert record.rating == 4.0
        assert record.votes is None

    @pytest.mark.parametrize("signature", [
        "Attention Required! | Cloudflare",
        "Sorry, you have been blocked",
        "Please enable cookies.",
    ])
    def test_blocked_page_raises(self, extractor, signature):
        html = f"<html><head><title>{signature}</title></head><body><h1>Blocked</h1></body></html>"

        with pytest.raises(BlockedPageError) as exc_info:
            extractor.extract(html, "http://example.com/blocked")

        assert exc_info.value.url == "http://example.com/blocked"

    def test_blocked_check_precedes_parsing(self, extractor):
        """Test no document is built for a block page"""
        with patch("src.sowplanner.scrapers.plant_extractor.SeedPageDocument") as mock_document:
            with pytest.raises(BlockedPageError):
                extractor.extract("Sorry, you have been blocked", "u")

        mock_document.assert_not_called()


class TestIsBlockedPage:
    """Tests for is_blocked_page"""

    def test_product_page_not_blocked(self, seed_page_html):
        assert is_blocked_page(seed_page_html) is False

    def test_signature_anywhere(self):
        assert is_blocked_page("<p>Please enable cookies.</p>") is True
