"""Palette rules — questionnaire answers to a Target, plus candidate filters.

Pure functions over in-memory models. Every answer-to-constraint rule is a
lookup table below so each one can be read (and tested) on its own.
"""

from __future__ import annotations

from collections.abc import Iterable

from colrvia.models.contracts import (
    Answers,
    Brand,
    BulbColor,
    ContrastLevel,
    DaytimeBrightness,
    FloorLook,
    LrvWindow,
    PaintColor,
    Role,
    Target,
    UndertoneBias,
    WarmCoolFeel,
)
from colrvia.utils.seed import utf16_code_units

# Order matters: pickForMe indexes into this tuple.
BRANDS: tuple[Brand, ...] = ("SherwinWilliams", "BenjaminMoore", "Behr")

# Bright rooms can carry a lower LRV without feeling dim.
BASE_ANCHOR_LRV: dict[DaytimeBrightness, LrvWindow] = {
    "veryBright": (55, 75),
    "kindaBright": (63, 80),
    "dim": (70, 88),
}

# Warm bulbs read darker, so the wall runs lighter; cool bulbs the reverse.
BULB_LRV_SHIFT: dict[BulbColor, int] = {
    "cozyYellow_2700K": 2,
    "neutral_3000_3500K": 0,
    "brightWhite_4000KPlus": -2,
}

DEFAULT_CONTRAST: ContrastLevel = "medium"

CRISP_SECONDARY_LRV: LrvWindow = (85, 96)
MEDIUM_SECONDARY_LRV: LrvWindow = (80, 95)
VERY_SOFT_SECONDARY_GAP = 5
VERY_SOFT_SECONDARY_MAX = 95

BOLD_ACCENT_LRV: LrvWindow = (3, 18)
MODERATE_ACCENT_LRV: LrvWindow = (18, 35)

DEFAULT_WARM_COOL_FEEL: WarmCoolFeel = "inBetween"

WARM_COOL_BIAS: dict[WarmCoolFeel, UndertoneBias | None] = {
    "warmer": "warm",
    "cooler": "cool",
    "inBetween": None,
}

# Floors are a stronger cue than the stated feel; listed looks always win.
FLOOR_BIAS_OVERRIDE: dict[FloorLook, UndertoneBias] = {
    "yellowGoldWood": "warm",
    "redBrownWood": "warm",
    "grayBrown": "cool",
}

ROLE_TAGS: dict[Role, frozenset[str]] = {
    "anchor": frozenset({"wall"}),
    "secondary": frozenset({"trim", "cabinet"}),
    "accent": frozenset({"accent", "door", "island"}),
}

DEFAULT_UNDERTONE = "neutral"


def pick_brand_by_context(usage: str) -> Brand:
    """Stable brand choice for 'pickForMe' from the usage text.

    Sums one code per character: the leading UTF-16 unit, so an astral
    character counts its high surrogate only.
    """
    return BRANDS[sum(utf16_code_units(ch)[0] for ch in usage) % len(BRANDS)]


def _secondary_lrv(contrast: ContrastLevel, anchor_lrv: LrvWindow) -> LrvWindow:
    if contrast == "crisp":
        return CRISP_SECONDARY_LRV
    if contrast == "verySoft":
        return (anchor_lrv[1] - VERY_SOFT_SECONDARY_GAP, VERY_SOFT_SECONDARY_MAX)
    return MEDIUM_SECONDARY_LRV


def compute_target(answers: Answers) -> Target:
    """Translate answers into LRV windows, an undertone bias and a contrast level."""
    if answers.brand_preference == "pickForMe":
        brand = pick_brand_by_context(answers.usage)
    else:
        brand = answers.brand_preference

    lo, hi = BASE_ANCHOR_LRV[answers.daytime_brightness]
    shift = BULB_LRV_SHIFT[answers.bulb_color]
    anchor_lrv = (lo + shift, hi + shift)

    comfort = answers.color_comfort
    contrast = (comfort.contrast_level if comfort else None) or DEFAULT_CONTRAST
    secondary_lrv = _secondary_lrv(contrast, anchor_lrv)

    wants_bold = answers.bold_darker_spot == "loveIt" or (
        comfort is not None and comfort.overall_vibe == "confidentColorMoments"
    )
    accent_lrv = BOLD_ACCENT_LRV if wants_bold else MODERATE_ACCENT_LRV

    warm_cool = (comfort.warm_cool_feel if comfort else None) or DEFAULT_WARM_COOL_FEEL
    undertone_bias = WARM_COOL_BIAS[warm_cool]
    floor_look = answers.existing_elements.floor_look if answers.existing_elements else None
    if floor_look in FLOOR_BIAS_OVERRIDE:
        undertone_bias = FLOOR_BIAS_OVERRIDE[floor_look]

    return Target(
        brand=brand,
        anchor_lrv=anchor_lrv,
        secondary_lrv=secondary_lrv,
        accent_lrv=accent_lrv,
        undertone_bias=undertone_bias,
        contrast=contrast,
    )


# === Candidate filters ===


def fits_lrv(color: PaintColor, window: LrvWindow) -> bool:
    """Inclusive window check. Colors without an LRV always pass."""
    if color.lrv is None:
        return True
    lo, hi = window
    return lo <= color.lrv <= hi


def fits_undertone(color: PaintColor, bias: UndertoneBias | None) -> bool:
    if bias is None:
        return True
    undertone = color.undertone or DEFAULT_UNDERTONE
    # Green-gray reads close enough to warm to stay in a warm room.
    return undertone == bias or (bias == "warm" and color.undertone == "green-gray")


def avoid_color(color: PaintColor, avoid: Iterable[str] = ()) -> bool:
    """True if any avoid term appears in the color's name or undertone label."""
    label = f"{color.name} {color.undertone or ''}".lower()
    return any(term.lower() in label for term in avoid)


def avoid_terms(answers: Answers) -> list[str]:
    """Free-text avoid list followed by hard-no guardrails."""
    hard_nos = answers.guardrails.hard_nos if answers.guardrails else None
    return [*(answers.colors_to_avoid or []), *(hard_nos or [])]


def has_role_tag(color: PaintColor, role_tags: frozenset[str]) -> bool:
    """Untagged colors are eligible for every role."""
    if color.tags is None:
        return True
    return any(tag in role_tags for tag in color.tags)

