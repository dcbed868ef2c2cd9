from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any

from .card_set import Set


class Ability(BaseModel):
    name: str
    text: str = ""
    type: str = ""


class Attack(BaseModel):
    name: str
    cost: List[str] = Field(default_factory=list)
    converted_energy_cost: int = Field(0, alias="convertedEnergyCost")
    damage: str = ""
    text: str = ""

    model_config = ConfigDict(populate_by_name=True)


class WeaknessResistance(BaseModel):
    """Weakness or resistance entry, e.g. {'type': 'Fire', 'value': '×2'}"""
    type: str
    value: str


class CardImages(BaseModel):
    small: Optional[str] = None
    large: Optional[str] = None


class Card(BaseModel):
    """Model representing a Pokemon TCG card"""
    id: str = Field(..., description="Unique card identifier (e.g. 'xy1-1')")
    name: str = Field(..., description="Card name")
    supertype: str = Field(default="", description="Pokémon, Trainer or Energy")
    subtypes: List[str] = Field(default_factory=list)
    level: Optional[str] = None
    hp: Optional[str] = None
    types: List[str] = Field(default_factory=list)
    evolves_from: Optional[str] = Field(None, alias="evolvesFrom")
    evolves_to: List[str] = Field(default_factory=list, alias="evolvesTo")
    rules: List[str] = Field(default_factory=list)
    abilities: List[Ability] = Field(default_factory=list)
    attacks: List[Attack] = Field(default_factory=list)
    weaknesses: List[WeaknessResistance] = Field(default_factory=list)
    resistances: List[WeaknessResistance] = Field(default_factory=list)
    retreat_cost: List[str] = Field(default_factory=list, alias="retreatCost")
    converted_retreat_cost: Optional[int] = Field(None, alias="convertedRetreatCost")
    set: Optional[Set] = None
    number: str = Field(default="", description="Collector number within the set")
    artist: Optional[str] = None
    rarity: Optional[str] = None
    flavor_text: Optional[str] = Field(None, alias="flavorText")
    national_pokedex_numbers: List[int] = Field(default_factory=list, alias="nationalPokedexNumbers")
    legalities: Dict[str, str] = Field(default_factory=dict)
    regulation_mark: Optional[str] = Field(None, alias="regulationMark")
    images: Optional[CardImages] = None
    tcgplayer: Optional[Dict[str, Any]] = None  # Price data, passed through untouched
    cardmarket: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(populate_by_name=True)
