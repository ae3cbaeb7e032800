"""Tests for the Pydantic contract models.

Validates that the questionnaire and palette models:
- Accept valid data in camelCase (wire) and snake_case (Python) form
- Reject invalid enum values and mood-word counts
- Keep unknown questionnaire keys
- Serialize with the wire aliases
"""

import pytest
from pydantic import ValidationError

from colrvia.models.contracts import (
    Answers,
    ErrorResponse,
    GeneratePaletteRequest,
    PaintColor,
    PaletteOutput,
    PaletteRoles,
    Target,
)
from tests.factories import kitchen_answers


class TestAnswers:
    """Answers requires the seven core questions; every block after that is optional."""

    def test_minimal_camel_case(self):
        a = Answers.model_validate(kitchen_answers())
        assert a.room_type == "kitchen"
        assert a.daytime_brightness == "kindaBright"
        assert a.colors_to_avoid is None
        assert a.color_comfort is None

    def test_snake_case_accepted(self):
        a = Answers(
            room_type="bedroom",
            usage="Sleep",
            mood_words=["calm"],
            daytime_brightness="dim",
            bulb_color="cozyYellow_2700K",
            bold_darker_spot="noThanks",
            brand_preference="pickForMe",
        )
        assert a.mood_words == ["calm"]

    def test_full_questionnaire(self):
        a = Answers.model_validate(
            kitchen_answers(
                colorsToAvoid=["navy"],
                existingElements={
                    "floorLook": "redBrownWood",
                    "bigThingsToMatch": ["sofa"],
                    "metals": "goldWarm",
                    "mustStaySame": "backsplash",
                },
                colorComfort={
                    "overallVibe": "confidentColorMoments",
                    "warmCoolFeel": "warmer",
                    "contrastLevel": "crisp",
                    "popColor": "yes",
                },
                finishes={
                    "wallsFinishPriority": "easierToWipeClean",
                    "trimDoorsFinish": "aLittleShiny",
                    "specialNeeds": ["kids", "greaseHeavyCooking"],
                },
                roomSpecific={"island": True},
                guardrails={"mustHaves": ["green"], "hardNos": ["pink"]},
                photos=["https://example.com/kitchen.jpg"],
            )
        )
        assert a.existing_elements.floor_look == "redBrownWood"
        assert a.color_comfort.contrast_level == "crisp"
        assert a.finishes.special_needs == ["kids", "greaseHeavyCooking"]
        assert a.guardrails.hard_nos == ["pink"]

    def test_unknown_keys_kept(self):
        a = Answers.model_validate(kitchen_answers(ceilingHeight="tall"))
        assert a.model_dump(by_alias=True)["ceilingHeight"] == "tall"

    def test_dump_uses_wire_names(self):
        dumped = Answers.model_validate(kitchen_answers()).model_dump(
            by_alias=True, exclude_unset=True
        )
        assert dumped == kitchen_answers()

    @pytest.mark.parametrize(
        "field",
        [
            "roomType",
            "usage",
            "moodWords",
            "daytimeBrightness",
            "bulbColor",
            "boldDarkerSpot",
            "brandPreference",
        ],
    )
    def test_required_fields(self, field):
        raw = kitchen_answers()
        del raw[field]
        with pytest.raises(ValidationError):
            Answers.model_validate(raw)

    def test_empty_usage_rejected(self):
        with pytest.raises(ValidationError):
            Answers.model_validate(kitchen_answers(usage=""))

    def test_mood_words_one_to_three(self):
        with pytest.raises(ValidationError):
            Answers.model_validate(kitchen_answers(moodWords=[]))
        with pytest.raises(ValidationError):
            Answers.model_validate(kitchen_answers(moodWords=["a", "b", "c", "d"]))

    def test_unknown_enum_rejected(self):
        with pytest.raises(ValidationError):
            Answers.model_validate(kitchen_answers(bulbColor="candlelight"))
        with pytest.raises(ValidationError):
            Answers.model_validate(kitchen_answers(brandPreference="Valspar"))

    def test_nested_enum_rejected(self):
        with pytest.raises(ValidationError):
            Answers.model_validate(kitchen_answers(existingElements={"floorLook": "carpet"}))


class TestPaintColor:
    def test_lrv_alias(self):
        c = PaintColor.model_validate({"name": "Alabaster", "hex": "#EDEAE0", "LRV": 82})
        assert c.lrv == 82
        assert c.model_dump(by_alias=True)["LRV"] == 82

    def test_optional_metadata(self):
        c = PaintColor(name="Plain", hex="#000000")
        assert c.lrv is None
        assert c.undertone is None
        assert c.tags is None

    def test_bad_hex(self):
        with pytest.raises(ValidationError):
            PaintColor(name="Bad", hex="000000")

    def test_lrv_bounds(self):
        with pytest.raises(ValidationError):
            PaintColor(name="Bad", hex="#000000", LRV=101)

    def test_frozen(self):
        c = PaintColor(name="Plain", hex="#000000")
        with pytest.raises(ValidationError):
            c.name = "Changed"

    def test_hashable(self):
        c = PaintColor(name="Plain", hex="#000000", tags=["wall"])
        assert len({c, c}) == 1


class TestTarget:
    def test_aliases(self):
        t = Target(
            brand="Behr",
            anchor_lrv=(63, 80),
            secondary_lrv=(80, 95),
            accent_lrv=(18, 35),
            contrast="medium",
        )
        dumped = t.model_dump(by_alias=True)
        assert dumped["anchorLRV"] == (63, 80)
        assert dumped["undertoneBias"] is None


class TestPaletteOutput:
    def test_round_trip(self):
        c = PaintColor(name="Plain", hex="#000000", LRV=50)
        out = PaletteOutput(
            brand="Behr",
            roles=PaletteRoles(anchor=c, secondary=c, accent=c),
            rationale={"lighting": "ok"},
            seed="abc",
            rule_trace=["brand=Behr"],
        )
        assert PaletteOutput.model_validate(out.model_dump(by_alias=True)) == out


class TestRequestAndError:
    def test_request_wraps_answers(self):
        req = GeneratePaletteRequest.model_validate({"answers": kitchen_answers()})
        assert req.answers.usage == "Cook daily"

    def test_error_response_detail_optional(self):
        e = ErrorResponse(error="failed_precondition", message="nope", retryable=False)
        assert e.detail is None
