"""Colrvia contract models — questionnaire in, palette out.

Field names are snake_case in Python and camelCase on the wire (the
questionnaire keys the mobile client sends). Both spellings are accepted
on input; dumps use the camelCase aliases.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Brand = Literal["SherwinWilliams", "BenjaminMoore", "Behr"]
BrandPreference = Literal["SherwinWilliams", "BenjaminMoore", "Behr", "pickForMe"]
DaytimeBrightness = Literal["veryBright", "kindaBright", "dim"]
BulbColor = Literal["cozyYellow_2700K", "neutral_3000_3500K", "brightWhite_4000KPlus"]
BoldDarkerSpot = Literal["loveIt", "maybe", "noThanks"]
FloorLook = Literal[
    "yellowGoldWood",
    "orangeWood",
    "redBrownWood",
    "brownNeutral",
    "grayBrown",
    "tileOrStone",
    "other",
]
Metals = Literal["black", "silver", "goldWarm", "mixed", "none"]
OverallVibe = Literal["mostlySoftNeutrals", "neutralsPlusGentleColors", "confidentColorMoments"]
WarmCoolFeel = Literal["warmer", "cooler", "inBetween"]
ContrastLevel = Literal["verySoft", "medium", "crisp"]
PopColor = Literal["yes", "maybe", "no"]
Undertone = Literal["warm", "cool", "neutral", "green-gray", "blue-gray", "red-brown", "gold"]
UndertoneBias = Literal["warm", "cool", "neutral", "green-gray"]
SpecialNeed = Literal["kids", "pets", "steamyShowers", "greaseHeavyCooking", "rentalRules"]
Role = Literal["anchor", "secondary", "accent"]

LrvWindow = tuple[int, int]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === Questionnaire ===


class ExistingElements(_CamelModel):
    floor_look: FloorLook | None = None
    floor_look_other_note: str | None = None
    big_things_to_match: list[str] | None = None
    metals: Metals | None = None
    must_stay_same: str | None = None


class ColorComfort(_CamelModel):
    overall_vibe: OverallVibe | None = None
    warm_cool_feel: WarmCoolFeel | None = None
    contrast_level: ContrastLevel | None = None
    pop_color: PopColor | None = None


class Finishes(_CamelModel):
    walls_finish_priority: Literal["easierToWipeClean", "softerFlatterLook"] | None = None
    trim_doors_finish: Literal["aLittleShiny", "softerShine"] | None = None
    special_needs: list[SpecialNeed] | None = None


class Guardrails(_CamelModel):
    must_haves: list[str] | None = None
    hard_nos: list[str] | None = None


class Answers(_CamelModel):
    """One room questionnaire.

    Unknown keys are kept (forward compatibility) and are part of the
    seed hash, since the seed covers the whole submitted object.
    """

    model_config = ConfigDict(extra="allow")

    room_type: str
    usage: str = Field(min_length=1)
    mood_words: list[str] = Field(min_length=1, max_length=3)
    daytime_brightness: DaytimeBrightness
    bulb_color: BulbColor
    bold_darker_spot: BoldDarkerSpot
    brand_preference: BrandPreference
    colors_to_avoid: list[str] | None = None
    existing_elements: ExistingElements | None = None
    color_comfort: ColorComfort | None = None
    finishes: Finishes | None = None
    room_specific: dict | None = None
    guardrails: Guardrails | None = None
    photos: list[str] | None = None


# === Catalog ===


class PaintColor(BaseModel):
    """Catalog entry. Frozen: the engine reads colors, never edits them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    hex: str = Field(pattern=r"^#[0-9A-Fa-f]{6}$")
    lrv: float | None = Field(default=None, alias="LRV", ge=0, le=100)
    undertone: Undertone | None = None
    tags: tuple[str, ...] | None = None


# === Engine output ===


class Target(_CamelModel):
    model_config = ConfigDict(frozen=True)

    brand: Brand
    anchor_lrv: LrvWindow = Field(alias="anchorLRV")
    secondary_lrv: LrvWindow = Field(alias="secondaryLRV")
    accent_lrv: LrvWindow = Field(alias="accentLRV")
    undertone_bias: UndertoneBias | None = None
    contrast: ContrastLevel


class PaletteRoles(BaseModel):
    anchor: PaintColor  # walls
    secondary: PaintColor  # trim / cabinets / ceiling
    accent: PaintColor  # doors, island, built-ins


class PaletteOutput(BaseModel):
    brand: Brand
    roles: PaletteRoles
    rationale: dict[str, str]
    id: str | None = None
    seed: str
    rule_trace: list[str] = []


# === API Request/Response Models ===


class GeneratePaletteRequest(BaseModel):
    answers: Answers


class GeneratePaletteResponse(BaseModel):
    ok: Literal[True] = True
    palette: PaletteOutput


class PaletteJob(BaseModel):
    """What the caller stores per generated palette."""

    job_id: str
    uid: str
    created_at: datetime
    answers: Answers
    output: PaletteOutput


class ErrorResponse(BaseModel):
    error: str
    message: str
    retryable: bool
    detail: str | None = None
