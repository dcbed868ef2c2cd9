from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional


class SetImages(BaseModel):
    symbol: Optional[str] = None
    logo: Optional[str] = None


class Set(BaseModel):
    """Model representing a Pokemon TCG expansion set"""
    id: str = Field(..., description="Unique set identifier (e.g. 'xy1')")
    name: str = Field(..., description="Set name")
    series: str = Field(default="", description="Series the set belongs to")
    printed_total: Optional[int] = Field(None, alias="printedTotal", description="Card count printed on the cards")
    total: Optional[int] = Field(None, description="Card count including secret cards")
    legalities: Dict[str, str] = Field(default_factory=dict)
    ptcgo_code: Optional[str] = Field(None, alias="ptcgoCode")
    release_date: Optional[str] = Field(None, alias="releaseDate")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    images: Optional[SetImages] = None

    model_config = ConfigDict(populate_by_name=True)
