"""
Entry synchronization state machine.

EntryListController owns the local copy of the entry collection, the refresh
flag and the modal-visibility flags. It never edits the collection in place:
every successful mutation marks the collection stale, and the next call to
sync() clears the flag and re-fetches the whole list.

Typical render pass (see streamlit_app/app.py):

    controller = EntryListController(state)
    controller.mount()   # first pass only: initial load
    controller.sync()    # stale -> clear flag -> load_all()
    for row in controller.row_views():
        ...

Failures are never retried. The local collection is left untouched and a
user-facing message is stored in UIState.last_error.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from tracker import api_client
from tracker.models import DraftEntry, Entry

logger = logging.getLogger(__name__)


@dataclass
class EditTarget:
    """Which entry, if any, an edit form is open for."""
    active: bool = False
    id: Optional[str] = None


@dataclass
class UIState:
    """
    Session-local UI state. Nothing here is persisted.

    Attributes:
        entries: Local copy of the collection, as last returned by the backend
        needs_refresh: True when entries may be stale and must be re-fetched
        mounted: True once the initial load has run for this session
        create_modal_open: Whether the create form is shown
        edit_entry_target: Target of the full-edit form
        edit_ingredients_target: Target of the ingredients-only form
        create_draft: Draft owned by the create flow
        edit_draft: Draft owned by the full-edit flow
        ingredients_text: Text typed into the ingredients-only form
        last_error: Message of the most recent failure, shown as a banner
        ingredient_query: Last ingredient looked up
        ingredient_matches: Result of the last ingredient lookup (None when cleared)
    """
    entries: List[Entry] = field(default_factory=list)
    needs_refresh: bool = False
    mounted: bool = False
    create_modal_open: bool = False
    edit_entry_target: EditTarget = field(default_factory=EditTarget)
    edit_ingredients_target: EditTarget = field(default_factory=EditTarget)
    create_draft: DraftEntry = field(default_factory=DraftEntry)
    edit_draft: DraftEntry = field(default_factory=DraftEntry)
    ingredients_text: str = ""
    last_error: Optional[str] = None
    ingredient_query: str = ""
    ingredient_matches: Optional[List[Entry]] = None


class EntryIntents(ABC):
    """User intents an entry row can raise."""

    @abstractmethod
    def request_delete(self, entry_id: str) -> None:
        pass

    @abstractmethod
    def request_edit_entry(self, entry_id: str) -> None:
        pass

    @abstractmethod
    def request_edit_ingredients(self, entry_id: str) -> None:
        pass


@dataclass(frozen=True)
class EntryRow:
    """
    View of one entry.

    Each action forwards exactly one intent with the entry's id. A row makes no
    HTTP calls and keeps no state beyond the entry it was built from.
    """
    entry: Entry
    intents: EntryIntents

    @property
    def entry_id(self) -> str:
        return self.entry.id

    def delete(self) -> None:
        self.intents.request_delete(self.entry.id)

    def edit_entry(self) -> None:
        self.intents.request_edit_entry(self.entry.id)

    def edit_ingredients(self) -> None:
        self.intents.request_edit_ingredients(self.entry.id)


class EntryListController(EntryIntents):
    """
    Single owner of the entry collection and of every request that changes it.

    Args:
        state: UIState to operate on. The Streamlit page keeps it in
            st.session_state so it survives reruns.
    """

    def __init__(self, state: UIState):
        self.state = state

    # Refresh cycle

    def mount(self) -> bool:
        """
        Run the initial load once per session.

        Returns:
            True if this call performed the initial load.
        """
        if self.state.mounted:
            return False
        self.state.mounted = True
        self.load_all()
        return True

    def sync(self) -> bool:
        """
        Re-fetch the collection if it was marked stale.

        The flag is cleared before the fetch starts, so one settled mutation
        causes exactly one load_all().

        Returns:
            True if a fetch was issued.
        """
        if not self.state.needs_refresh:
            return False
        self.state.needs_refresh = False
        logger.debug("Entries marked stale, reloading")
        self.load_all()
        return True

    def load_all(self) -> bool:
        """
        Replace the local collection with the backend's.

        Returns:
            True on success. On failure the current collection is kept as is.
        """
        entries = api_client.list_entries(on_error=self._report_error)
        if entries is None:
            return False
        self.state.entries = entries
        logger.debug("Loaded %d entries", len(entries))
        return True

    def _mark_stale(self) -> None:
        self.state.needs_refresh = True
        self.state.last_error = None

    def _report_error(self, message: str) -> None:
        self.state.last_error = message

    def dismiss_error(self) -> None:
        self.state.last_error = None

    # Mutations

    def create(self, draft: DraftEntry) -> bool:
        """
        Submit a new entry.

        Fat is coerced to a number; a non-numeric value is sent as null rather
        than blocking the submission. The entry is not inserted locally.

        Returns:
            True on success (create form closed, collection marked stale).
        """
        if not api_client.create_entry(draft.to_payload(), on_error=self._report_error):
            return False
        self.state.create_modal_open = False
        self.state.create_draft.reset()
        self._mark_stale()
        return True

    def update_entry(self, entry_id: str, draft: DraftEntry) -> bool:
        """
        Replace an entry with the draft's values.

        Returns:
            True on success (edit form closed, collection marked stale).
        """
        if not api_client.update_entry(entry_id, draft.to_payload(), on_error=self._report_error):
            return False
        if self.state.edit_entry_target.id == entry_id:
            self.state.edit_entry_target = EditTarget()
            self.state.edit_draft.reset()
        self._mark_stale()
        return True

    def update_ingredients_only(self, entry_id: str, new_ingredients_text: str) -> bool:
        """
        Replace only the ingredients of an entry.

        Returns:
            True on success (form closed, collection marked stale).
        """
        if not api_client.update_ingredients(entry_id, new_ingredients_text, on_error=self._report_error):
            return False
        if self.state.edit_ingredients_target.id == entry_id:
            self.state.edit_ingredients_target = EditTarget()
            self.state.ingredients_text = ""
        self._mark_stale()
        return True

    def delete_entry(self, entry_id: str) -> bool:
        """
        Delete an entry. Existence is not checked locally; the backend decides.

        Returns:
            True on success (collection marked stale).
        """
        if not api_client.delete_entry(entry_id, on_error=self._report_error):
            return False
        self._mark_stale()
        return True

    # Form submission from the open forms

    def submit_create(self) -> bool:
        return self.create(self.state.create_draft)

    def submit_edit_entry(self) -> bool:
        target = self.state.edit_entry_target
        if not target.active or target.id is None:
            return False
        return self.update_entry(target.id, self.state.edit_draft)

    def submit_edit_ingredients(self) -> bool:
        target = self.state.edit_ingredients_target
        if not target.active or target.id is None:
            return False
        return self.update_ingredients_only(target.id, self.state.ingredients_text)

    # Modal gating and row intents

    def open_create(self) -> None:
        self.state.create_draft.reset()
        self.state.create_modal_open = True

    def cancel_create(self) -> None:
        self.state.create_modal_open = False
        self.state.create_draft.reset()

    def request_edit_entry(self, entry_id: str) -> None:
        """
        Open the full-edit form for an entry.

        The edit draft starts from the backend's current copy of the entry,
        falling back to the local copy when that fetch fails.
        """
        entry = api_client.get_entry(entry_id)
        if entry is None:
            entry = self.find_local(entry_id)
        self.state.edit_draft = DraftEntry.from_entry(entry) if entry is not None else DraftEntry()
        self.state.edit_entry_target = EditTarget(active=True, id=entry_id)

    def cancel_edit_entry(self) -> None:
        self.state.edit_entry_target = EditTarget()
        self.state.edit_draft.reset()

    def request_edit_ingredients(self, entry_id: str) -> None:
        entry = self.find_local(entry_id)
        self.state.ingredients_text = (entry.ingredients or "") if entry is not None else ""
        self.state.edit_ingredients_target = EditTarget(active=True, id=entry_id)

    def cancel_edit_ingredients(self) -> None:
        self.state.edit_ingredients_target = EditTarget()
        self.state.ingredients_text = ""

    def request_delete(self, entry_id: str) -> None:
        self.delete_entry(entry_id)

    # Read helpers

    def find_local(self, entry_id: str) -> Optional[Entry]:
        for entry in self.state.entries:
            if entry.id == entry_id:
                return entry
        return None

    def row_views(self) -> List[EntryRow]:
        """One row per entry, in collection order, bound to this controller."""
        return [EntryRow(entry=entry, intents=self) for entry in self.state.entries]

    def find_by_ingredient(self, ingredient: str) -> bool:
        """
        Look up entries by ingredient without touching the main collection.

        Blank input clears the previous result without issuing a request.

        Returns:
            True if a lookup succeeded.
        """
        query = (ingredient or "").strip()
        self.state.ingredient_query = query
        if not query:
            self.state.ingredient_matches = None
            return False
        matches = api_client.list_entries_by_ingredient(query, on_error=self._report_error)
        if matches is None:
            return False
        self.state.ingredient_matches = matches
        return True

    def clear_lookup(self) -> None:
        self.state.ingredient_query = ""
        self.state.ingredient_matches = None
