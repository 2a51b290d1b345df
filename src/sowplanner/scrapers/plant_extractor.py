"""
Plant Record Extractor

Maps the labelled info paragraphs of a seed product page onto PlantRecord
fields.
"""
from typing import Dict

from src.sowplanner.exceptions import BlockedPageError
from src.sowplanner.models.plant import PlantRecord
from src.sowplanner.scrapers.seed_page import SeedPageDocument
from src.sowplanner.transformers.text_normalizer import normalize_text
from src.sowplanner.utils.logger import get_logger

logger = get_logger(__name__)

# Markers of the bot-protection interstitial served instead of the product
BLOCKED_PAGE_SIGNATURES = (
    "Attention Required! | Cloudflare",
    "Sorry, you have been blocked",
    "Please enable cookies.",
)

# Page label -> PlantRecord field
LABEL_FIELDS = {
    "Days to Maturity": "days_to_maturity",
    "Family": "family",
    "Type": "plant_type",
    "Native": "native",
    "Hardiness": "hardiness",
    "Exposure": "exposure",
    "Plant Dimensions": "plant_dimensions",
    "Variety Info": "variety_info",
    "Attributes": "attributes",
    "When to Sow Outside": "when_to_sow_outside",
    "When to Start Inside": "when_to_start_inside",
    "Days to Emerge": "days_to_emerge",
    "Seed Depth": "seed_depth",
    "Seed Spacing": "seed_spacing",
    "Row Spacing": "row_spacing",
    "Thinning": "thinning",
}

LEARN_MORE_SUFFIX = " (Learn more)"


def is_blocked_page(html: str) -> bool:
    """True if the markup is a block page rather than a product page."""
    return any(signature in html for signature in BLOCKED_PAGE_SIGNATURES)


class PlantRecordExtractor:
    """
    Builds PlantRecord instances from raw product page markup.
    """

    def extract(self, html: str, url: str) -> PlantRecord:
        """
        Extract a plant record from product page HTML.

        Args:
            html: Raw page markup
            url: Page URL, stored on the record

        Returns:
            PlantRecord with every field the page provided

        Raises:
            BlockedPageError: If the markup is a bot-protection page
        """
        if is_blocked_page(html):
            logger.warning("blocked_page_detected", url=url)
            raise BlockedPageError(url=url)

        document = SeedPageDocument(html)
        fields: Dict[str, object] = {"url": url}

        title = document.title()
        if title is not None:
            fields["title"] = normalize_text(title)

        description = document.description()
        if description is not None:
            fields["description"] = normalize_text(description)

        rating = document.rating()
        if rating is not None:
            fields["rating"], fields["votes"] = rating

        for label, paragraph_text in document.label_pairs():
            field_name = LABEL_FIELDS.get(label.rstrip(":"))
            if field_name is None:
                continue
            fields[field_name] = self._clean_value(field_name, label, paragraph_text)

        record = PlantRecord(**fields)
        logger.debug(
            "plant_record_extracted",
            url=url,
            fields_found=len(record.model_dump(exclude_none=True)) - 1,
        )
        return record

    @staticmethod
    def _clean_value(field_name: str, label: str, paragraph_text: str) -> str:
        value = normalize_text(paragraph_text.replace(label, "").strip())
        if field_name == "plant_type":
            value = value.replace(LEARN_MORE_SUFFIX, "")
        return value
