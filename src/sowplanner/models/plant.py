"""
Plant Data Models

Pydantic model for the attributes scraped from a seed product page.
"""
from typing import Optional

from pydantic import BaseModel, Field


class PlantRecord(BaseModel):
    """
    Scraped attributes for one seed variety.

    Every field except the source URL is optional; a field the page did not
    provide stays None and is left out of the stored JSON.

    Attributes:
        url: Product page the record was scraped from
        title: Product title
        description: Marketing description
        days_to_maturity: e.g. "65 days"
        family: Botanical family
        plant_type: Variety type with the "(Learn more)" link text removed
        native: Native range
        hardiness: Hardiness description
        exposure: Sun exposure
        plant_dimensions: Plant or fruit dimensions
        variety_info: Variety notes
        attributes: Comma separated vendor attributes
        when_to_sow_outside: Raw direct-sowing timing instruction
        when_to_start_inside: Raw indoor-start timing instruction
        days_to_emerge: Germination time
        seed_depth: Sowing depth
        seed_spacing: In-row spacing
        row_spacing: Between-row spacing
        thinning: Thinning instruction
        rating: Average review rating
        votes: Number of reviews behind the rating
    """

    url: str = Field(..., description="Source product URL")
    title: Optional[str] = Field(None, description="Product title")
    description: Optional[str] = Field(None, description="Product description")
    days_to_maturity: Optional[str] = Field(None, description="Days to maturity")
    family: Optional[str] = Field(None, description="Botanical family")
    plant_type: Optional[str] = Field(None, description="Variety type")
    native: Optional[str] = Field(None, description="Native range")
    hardiness: Optional[str] = Field(None, description="Hardiness")
    exposure: Optional[str] = Field(None, description="Sun exposure")
    plant_dimensions: Optional[str] = Field(None, description="Plant dimensions")
    variety_info: Optional[str] = Field(None, description="Variety info")
    attributes: Optional[str] = Field(None, description="Vendor attributes")

    # Sowing info
    when_to_sow_outside: Optional[str] = Field(None, description="When to sow outside")
    when_to_start_inside: Optional[str] = Field(None, description="When to start inside")
    days_to_emerge: Optional[str] = Field(None, description="Days to emerge")
    seed_depth: Optional[str] = Field(None, description="Seed depth")
    seed_spacing: Optional[str] = Field(None, description="Seed spacing")
    row_spacing: Optional[str] = Field(None, description="Row spacing")
    thinning: Optional[str] = Field(None, description="Thinning")

    # Rating info
    rating: Optional[float] = Field(None, description="Average rating")
    votes: Optional[int] = Field(None, description="Number of ratings", ge=0)

    def to_json(self) -> str:
        """Serialize for storage, omitting absent fields."""
        return self.model_dump_json(exclude_none=True, indent=2)

    @classmethod
    def from_json(cls, payload: str) -> "PlantRecord":
        """Parse a stored record. Raises pydantic.ValidationError on bad input."""
        return cls.model_validate_json(payload)
