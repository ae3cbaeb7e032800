"""Palette generator — answers in, three-role palette out.

Composes the rules module and the seed selector:

1. Seed: FNV-1a fingerprint of the whole answers object, computed first.
2. Target: LRV windows, undertone bias and contrast derived from answers.
3. Pools: the brand catalog filtered per role (anchor / secondary / accent).
4. Selection: anchor by seed, secondary by highest LRV, accent by lowest
   LRV relative to the anchor. Only the anchor uses the seed; secondary
   and accent are rank-based.
5. Rationale and rule trace for the caller to show and audit.

No I/O besides the first (cached) catalog read, and no randomness: the same
answers against the same catalog always give the same palette, or the same
error.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from colrvia.engine.catalog import load_catalog
from colrvia.engine.rules import (
    ROLE_TAGS,
    avoid_color,
    avoid_terms,
    compute_target,
    fits_lrv,
    fits_undertone,
    has_role_tag,
)
from colrvia.models.contracts import (
    Answers,
    LrvWindow,
    PaintColor,
    PaletteOutput,
    PaletteRoles,
    Role,
    Target,
    UndertoneBias,
)
from colrvia.utils.seed import hash_seed, pick

logger = structlog.get_logger()

MIN_CATALOG_SIZE = 6

# Ranking stand-ins for colors without an LRV. Only used to order candidates.
SECONDARY_MISSING_LRV = 0
ACCENT_MISSING_LRV = 50


class PaletteGenerationError(Exception):
    """Base for palette preconditions that failed. Never transient."""


class CatalogTooSmallError(PaletteGenerationError):
    """The chosen brand's catalog can't offer enough variety."""

    def __init__(self, brand: str, size: int) -> None:
        super().__init__(f"Catalog for {brand} is too small")
        self.brand = brand
        self.size = size


class EmptyCandidatePoolError(PaletteGenerationError):
    """Constraints plus avoid-list eliminated every color for a role."""

    def __init__(self, role: Role) -> None:
        super().__init__(f"No {role} candidates match constraints")
        self.role = role


def _pool(
    catalog: Sequence[PaintColor],
    role: Role,
    window: LrvWindow,
    avoid: list[str],
    bias: UndertoneBias | None = None,
) -> list[PaintColor]:
    """Filter the catalog for one role, keeping catalog order.

    Only the anchor passes a bias; trim and accent colors are undertone-agnostic.
    """
    tags = ROLE_TAGS[role]
    return [
        c
        for c in catalog
        if has_role_tag(c, tags)
        and fits_lrv(c, window)
        and fits_undertone(c, bias)
        and not avoid_color(c, avoid)
    ]


def _brightest(pool: Sequence[PaintColor]) -> PaintColor:
    # max() keeps the first of equal keys, so catalog order breaks ties
    return max(pool, key=lambda c: c.lrv if c.lrv is not None else SECONDARY_MISSING_LRV)


def _darkest_below(pool: Sequence[PaintColor], anchor: PaintColor) -> PaintColor:
    anchor_lrv = anchor.lrv if anchor.lrv is not None else ACCENT_MISSING_LRV

    def distance(c: PaintColor) -> float:
        lrv = c.lrv if c.lrv is not None else ACCENT_MISSING_LRV
        return lrv - anchor_lrv

    return min(pool, key=distance)


def _window_text(window: LrvWindow) -> str:
    return f"{window[0]}-{window[1]}"


def build_rationale(answers: Answers, target: Target) -> dict[str, str]:
    """Plain-language reasons for lighting, mood and floors."""
    lo, hi = target.anchor_lrv
    floor_look = answers.existing_elements.floor_look if answers.existing_elements else None
    if floor_look:
        floors = f"Floors {floor_look} → undertone bias {target.undertone_bias or 'neutral'}."
    else:
        floors = "No strong floor undertone. "
    return {
        "lighting": f"Daylight {answers.daytime_brightness} → anchor LRV in {lo}–{hi}.",
        "mood": f"Mood {', '.join(answers.mood_words)}; contrast {target.contrast}.",
        "floors": floors,
    }


def build_rule_trace(target: Target) -> list[str]:
    """Every derived constraint, in a fixed order."""
    return [
        f"brand={target.brand}",
        f"anchorLRV={_window_text(target.anchor_lrv)}",
        f"secondaryLRV={_window_text(target.secondary_lrv)}",
        f"accentLRV={_window_text(target.accent_lrv)}",
        f"undertoneBias={target.undertone_bias or 'null'}",
        f"contrast={target.contrast}",
    ]


def generate_palette(
    answers: Answers,
    catalog: Mapping[str, Sequence[PaintColor]] | None = None,
) -> PaletteOutput:
    """Pick anchor, secondary and accent colors for one questionnaire.

    Args:
        answers: Validated questionnaire.
        catalog: Brand → colors. Defaults to the packaged catalog.

    Raises:
        CatalogTooSmallError: Brand has fewer than MIN_CATALOG_SIZE colors.
        EmptyCandidatePoolError: A role has no candidates left after filtering.
    """
    seed = hash_seed(answers)
    target = compute_target(answers)
    brand = target.brand

    if catalog is None:
        catalog = load_catalog()
    colors = catalog.get(brand, ())
    if len(colors) < MIN_CATALOG_SIZE:
        logger.warning("palette_catalog_too_small", brand=brand, size=len(colors))
        raise CatalogTooSmallError(brand, len(colors))

    avoid = avoid_terms(answers)
    anchors = _pool(colors, "anchor", target.anchor_lrv, avoid, bias=target.undertone_bias)
    seconds = _pool(colors, "secondary", target.secondary_lrv, avoid)
    accents = _pool(colors, "accent", target.accent_lrv, avoid)

    logger.debug(
        "palette_candidate_pools",
        seed=seed,
        brand=brand,
        anchor=len(anchors),
        secondary=len(seconds),
        accent=len(accents),
        avoid_terms=len(avoid),
    )

    for role, pool in (("anchor", anchors), ("secondary", seconds), ("accent", accents)):
        if not pool:
            logger.warning("palette_empty_pool", seed=seed, brand=brand, role=role)
            raise EmptyCandidatePoolError(role)

    anchor = pick(anchors, seed)
    secondary = _brightest(seconds)
    accent = _darkest_below(accents, anchor)

    logger.info(
        "palette_generated",
        seed=seed,
        brand=brand,
        anchor=anchor.name,
        secondary=secondary.name,
        accent=accent.name,
    )
    return PaletteOutput(
        brand=brand,
        roles=PaletteRoles(anchor=anchor, secondary=secondary, accent=accent),
        rationale=build_rationale(answers, target),
        seed=seed,
        rule_trace=build_rule_trace(target),
    )
