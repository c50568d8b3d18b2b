"""
Tests for entry models and form value coercion.

This module tests:
- parse_float prefix rules and NaN for non-numeric input
- Entry identifier aliases and normalization
- DraftEntry payloads, pre-filling and reset
"""

import math

import pytest
from pydantic import ValidationError

from tracker.models import DraftEntry, Entry, json_number, parse_float


class TestParseFloat:
    """Test browser-style float parsing."""

    @pytest.mark.parametrize("raw, expected", [
        ("2.5", 2.5),
        ("  12", 12.0),
        ("2.5g", 2.5),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("7.", 7.0),
        (4, 4.0),
        (1.25, 1.25),
    ])
    def test_numeric_prefix(self, raw, expected):
        """Test that the longest numeric prefix is parsed."""
        assert parse_float(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "g2.5", ".", "-", "２.５", "١٢", None, True])
    def test_non_numeric_is_nan(self, raw):
        """Test that input without an ASCII numeric prefix yields NaN."""
        assert math.isnan(parse_float(raw))

    def test_infinity(self):
        """Test parsing of signed Infinity."""
        assert parse_float("Infinity") == math.inf
        assert parse_float("-Infinity") == -math.inf


class TestJsonNumber:
    """Test conversion of floats for JSON bodies."""

    def test_regular_number_unchanged(self):
        """Test that finite numbers pass through unchanged."""
        assert json_number(2.5) == 2.5

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_becomes_null(self, value):
        """Test that NaN and infinities become null."""
        assert json_number(value) is None


class TestEntry:
    """Test the Entry model."""

    def test_accepts_underscore_id(self):
        """Test that the backend's "_id" field is accepted."""
        entry = Entry.model_validate({"_id": "65a1f0", "dish": "Salad", "fat": 2})
        assert entry.id == "65a1f0"
        assert entry.fat == 2.0

    def test_accepts_plain_id(self):
        """Test that a plain "id" field is accepted."""
        assert Entry.model_validate({"id": "x1"}).id == "x1"

    def test_integer_id_becomes_string(self):
        """Test that integer ids are normalized to strings."""
        assert Entry.model_validate({"id": 7}).id == "7"

    def test_extended_json_object_id(self):
        """Test that an extended JSON ObjectId is unwrapped."""
        assert Entry.model_validate({"_id": {"$oid": "abc"}}).id == "abc"

    def test_missing_id_rejected(self):
        """Test that an entry without an id is rejected."""
        with pytest.raises(ValidationError):
            Entry.model_validate({"dish": "Salad"})

    def test_calories_text_kept(self):
        """Test that calories stored as text are kept as text."""
        assert Entry.model_validate({"id": "1", "calories": "150"}).calories == "150"

    def test_null_fields(self):
        """Test that null fields are accepted."""
        entry = Entry.model_validate({"id": "1", "dish": None, "fat": None})
        assert entry.dish is None
        assert entry.fat is None

    def test_entries_are_immutable(self):
        """Test that entries cannot be modified after creation."""
        entry = Entry(id="1", dish="Salad")
        with pytest.raises(ValidationError):
            entry.dish = "Soup"


class TestDraftEntry:
    """Test the DraftEntry form model."""

    def test_payload_coerces_fat_only(self):
        """Test that to_payload coerces fat and leaves calories as entered."""
        draft = DraftEntry(dish="Salad", ingredients="lettuce,tomato", calories="150", fat="2.5")
        assert draft.to_payload() == {
            "ingredients": "lettuce,tomato",
            "dish": "Salad",
            "calories": "150",
            "fat": 2.5,
        }

    def test_payload_non_numeric_fat_is_null(self):
        """Test that non-numeric fat is sent as null."""
        assert DraftEntry(dish="Salad", fat="some").to_payload()["fat"] is None

    def test_payload_empty_fat_is_null(self):
        """Test that empty fat is sent as null."""
        assert DraftEntry(dish="Salad").to_payload()["fat"] is None

    def test_from_entry(self):
        """Test pre-filling a draft from an entry."""
        entry = Entry(id="1", dish="Toast", ingredients=None, calories=120.0, fat=3.5)
        draft = DraftEntry.from_entry(entry)
        assert draft == DraftEntry(dish="Toast", ingredients="", calories="120", fat="3.5")

    def test_reset(self):
        """Test that reset discards every typed value."""
        draft = DraftEntry(dish="Toast", ingredients="bread", calories="120", fat="3")
        assert not draft.is_empty()
        draft.reset()
        assert draft.is_empty()

    def test_payload_fullwidth_fat_is_null(self):
        """Test that fat typed with full-width digits is sent as null."""
        assert DraftEntry(dish="Salad", fat="２.５").to_payload()["fat"] is None
