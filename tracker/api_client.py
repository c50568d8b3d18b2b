"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the entries backend go through functions in this module.

Key principles:
- Centralized error handling for network issues
- A status of exactly 200 is success; anything else is a failure
- Consistent timeout from configuration, and no retries
- Never let exceptions bubble up to crash the Streamlit app

# NOTE: When adding new endpoints, follow this pattern:
    - Create a function that takes the parameters needed for the endpoint
    - Use requests.get/post/put/delete with the configured timeout
    - Return parsed data (or True) on success, None (or False) on error
    - Log the failure and pass a user-facing message to on_error if one was given
"""

import logging
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from tracker.config import BackendConfig
from tracker.models import Entry

logger = logging.getLogger(__name__)

ErrorReporter = Optional[Callable[[str], None]]

HTTP_OK = 200


def get_backend_url() -> str:
    """Get the backend API base URL from configuration."""
    return BackendConfig.get_backend_url()


def _path_id(value: Any) -> str:
    """Quote an identifier for use as a single path segment."""
    return quote(str(value), safe="")


def _report(on_error: ErrorReporter, message: str) -> None:
    logger.warning(message)
    if on_error is not None:
        on_error(message)


def _describe_request_error(action: str, exc: requests.exceptions.RequestException) -> str:
    """Turn a transport failure into a user-facing message."""
    if isinstance(exc, requests.exceptions.Timeout):
        return f"Could not {action}: the request timed out. The backend may be slow or unreachable."
    if isinstance(exc, requests.exceptions.ConnectionError):
        return f"Could not {action}: could not connect to the backend at {get_backend_url()}."
    return f"Could not {action}: {str(exc)}"


def _send(
    method: str,
    path: str,
    action: str,
    on_error: ErrorReporter = None,
    **kwargs: Any,
) -> Optional[requests.Response]:
    """
    Issue one request and apply the success rule.

    Args:
        method: HTTP method name
        path: Path relative to the backend URL, starting with "/"
        action: Short description used in error messages (e.g. "delete the entry")
        on_error: Optional callback receiving a user-facing failure message
        **kwargs: Extra arguments passed to requests (json, ...)

    Returns:
        The response when its status is 200, otherwise None.
    """
    url = f"{get_backend_url()}{path}"
    try:
        response = requests.request(
            method,
            url,
            timeout=BackendConfig.get_request_timeout(),
            **kwargs,
        )
    except requests.exceptions.RequestException as e:
        _report(on_error, _describe_request_error(action, e))
        return None

    if response.status_code != HTTP_OK:
        _report(
            on_error,
            f"Could not {action}: backend returned {response.status_code} - {response.text}",
        )
        return None

    logger.debug("%s %s -> %s", method, url, response.status_code)
    return response


def _parse_entries(response: requests.Response, action: str, on_error: ErrorReporter) -> Optional[List[Entry]]:
    try:
        data = response.json()
    except ValueError:
        _report(on_error, f"Could not {action}: backend sent a response that is not JSON.")
        return None

    # An empty collection may be serialized as null
    if data is None:
        return []
    if not isinstance(data, list):
        _report(on_error, f"Could not {action}: expected a list of entries.")
        return None

    try:
        return [Entry.model_validate(item) for item in data]
    except ValidationError as e:
        _report(on_error, f"Could not {action}: malformed entry in response ({e.error_count()} errors).")
        return None


def list_entries(on_error: ErrorReporter = None) -> Optional[List[Entry]]:
    """
    Fetch the full entry collection (GET /entries).

    Returns:
        List of entries in the order the backend returned them, or None on error.
    """
    action = "load entries"
    response = _send("GET", "/entries", action, on_error)
    if response is None:
        return None
    return _parse_entries(response, action, on_error)


def get_entry(entry_id: str, on_error: ErrorReporter = None) -> Optional[Entry]:
    """
    Fetch a single entry (GET /entry/{id}/).

    Args:
        entry_id: Identifier of the entry

    Returns:
        The entry, or None on error.
    """
    action = "load the entry"
    response = _send("GET", f"/entry/{_path_id(entry_id)}/", action, on_error)
    if response is None:
        return None

    try:
        data = response.json()
        if isinstance(data, dict) and "id" not in data and "_id" not in data:
            data = {**data, "id": entry_id}
        return Entry.model_validate(data)
    except (ValueError, ValidationError):
        _report(on_error, f"Could not {action}: malformed entry in response.")
        return None


def list_entries_by_ingredient(ingredient: str, on_error: ErrorReporter = None) -> Optional[List[Entry]]:
    """
    Fetch entries whose ingredients match the given text (GET /ingredient/{ingredient}).

    Args:
        ingredient: Ingredients text to look up

    Returns:
        List of matching entries, or None on error.
    """
    action = "look up entries by ingredient"
    response = _send("GET", f"/ingredient/{_path_id(ingredient)}", action, on_error)
    if response is None:
        return None
    return _parse_entries(response, action, on_error)


def create_entry(payload: Dict[str, Any], on_error: ErrorReporter = None) -> bool:
    """
    Create a new entry (POST /entry/create).

    Args:
        payload: Body with ingredients, dish, calories and fat

    Returns:
        True if the backend accepted the entry, False otherwise.
    """
    response = _send("POST", "/entry/create", "create the entry", on_error, json=payload)
    if response is None:
        return False
    logger.info("Created entry for dish %r", payload.get("dish"))
    return True


def update_entry(entry_id: str, payload: Dict[str, Any], on_error: ErrorReporter = None) -> bool:
    """
    Replace an entry (PUT /entry/update/{id}).

    Args:
        entry_id: Identifier of the entry to replace
        payload: Full entry-shaped body

    Returns:
        True on success, False otherwise.
    """
    response = _send(
        "PUT",
        f"/entry/update/{_path_id(entry_id)}",
        "update the entry",
        on_error,
        json=payload,
    )
    if response is None:
        return False
    logger.info("Updated entry %s", entry_id)
    return True


def update_ingredients(entry_id: str, ingredients: str, on_error: ErrorReporter = None) -> bool:
    """
    Replace only the ingredients of an entry (PUT /ingredient/update/{id}).

    Args:
        entry_id: Identifier of the entry
        ingredients: New ingredients text

    Returns:
        True on success, False otherwise.
    """
    response = _send(
        "PUT",
        f"/ingredient/update/{_path_id(entry_id)}",
        "update the ingredients",
        on_error,
        json={"ingredients": ingredients},
    )
    if response is None:
        return False
    logger.info("Updated ingredients of entry %s", entry_id)
    return True


def delete_entry(entry_id: str, on_error: ErrorReporter = None) -> bool:
    """
    Delete an entry (DELETE /entry/delete/{id}).

    Args:
        entry_id: Identifier of the entry

    Returns:
        True on success, False otherwise.
    """
    response = _send("DELETE", f"/entry/delete/{_path_id(entry_id)}", "delete the entry", on_error)
    if response is None:
        return False
    logger.info("Deleted entry %s", entry_id)
    return True
