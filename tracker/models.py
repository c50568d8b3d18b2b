"""
Entry models for the calorie tracker client.

This module defines the schemas shared by the API client, the synchronization
controller and the Streamlit UI.

# NOTE: Entry mirrors what the backend returns. The backend sends stored documents
    as they are, so the identifier arrives as "_id"; "id" is accepted as well and is
    normalized to a string so it can be interpolated into request paths.

Wire shape of an entry:
- id / _id: server-assigned identifier (string or integer)
- dish: free-form text
- ingredients: free-form text
- calories: number, or the raw text the backend stored
- fat: number (may be null)
"""

import math
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Leading numeric prefix accepted by parse_float (same rules as JavaScript's parseFloat)
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_float(value: Any) -> float:
    """
    Coerce form input to a float the way a browser's parseFloat does.

    Leading whitespace is skipped and the longest numeric prefix is used, so
    "2.5g" parses as 2.5. Input without a numeric prefix yields NaN instead of
    raising, which keeps a malformed value from blocking a submission.

    Args:
        value: Raw form value (string, number or None)

    Returns:
        Parsed float, or NaN when no number can be read.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)

    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def json_number(value: float) -> Optional[float]:
    """
    Make a float safe for a JSON body.

    NaN and infinities have no JSON representation and are sent as null.
    """
    if value is None or math.isnan(value) or math.isinf(value):
        return None
    return value


class Entry(BaseModel):
    """
    One persisted calorie/food record as returned by the backend.

    Instances are never mutated by the client; the local collection is replaced
    wholesale after every round trip.
    """
    id: str = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        description="Server-assigned identifier",
    )
    dish: Optional[str] = Field(None, description="Dish name")
    ingredients: Optional[str] = Field(None, description="Free-form ingredients text")
    calories: Optional[Union[float, str]] = Field(None, description="Calories (number or raw text)")
    fat: Optional[float] = Field(None, description="Fat in grams")

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Any:
        # Mongo extended JSON: {"$oid": "..."}
        if isinstance(value, dict) and "$oid" in value:
            value = value["$oid"]
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


def _form_text(value: Any) -> str:
    """Render a stored field as text for a form input."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass
class DraftEntry:
    """
    An unsaved, Entry-shaped value being edited in a form.

    Fields hold raw form input; conversion happens in to_payload().

    Attributes:
        dish: Dish name as typed
        ingredients: Ingredients text as typed
        calories: Calories as typed (sent unchanged)
        fat: Fat as typed (coerced with parse_float on submit)
    """
    dish: str = ""
    ingredients: str = ""
    calories: Union[str, float] = ""
    fat: Union[str, float] = ""

    def reset(self) -> None:
        """Discard everything typed so far."""
        self.dish = ""
        self.ingredients = ""
        self.calories = ""
        self.fat = ""

    def is_empty(self) -> bool:
        return not any(_form_text(v) for v in asdict(self).values())

    @classmethod
    def from_entry(cls, entry: Entry) -> "DraftEntry":
        """Create a draft pre-filled with an entry's current values."""
        return cls(
            dish=_form_text(entry.dish),
            ingredients=_form_text(entry.ingredients),
            calories=_form_text(entry.calories),
            fat=_form_text(entry.fat),
        )

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the JSON body for a create or full update request.

        Returns:
            Dictionary with ingredients, dish, calories and fat. Fat is always a
            number or null; calories are passed through as entered.
        """
        return {
            "ingredients": self.ingredients,
            "dish": self.dish,
            "calories": self.calories,
            "fat": json_number(parse_float(self.fat)),
        }
