"""
state.py — Application state and the transitions that change it.

The UI owns one AppState (in st.session_state) and only changes it through the
functions below, which keeps the add/filter/search flow testable without
Streamlit.

add_part() runs: idle -> fetching -> assembling -> appended -> idle.
Lookup failures are absorbed by fetch_part_data(), so the flow always
completes once it starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from src.inventory import ALL_CATEGORIES, InventoryStore
from src.parts import FetchResult, PartRecord, assemble_part, encode_image, fetch_part_data


@dataclass
class FormState:
    part_number: str = ""
    manual_name: str = ""
    manual_price: str = ""
    condition: str = "new"
    image: str | None = None

    def reset(self) -> None:
        self.part_number = ""
        self.manual_name = ""
        self.manual_price = ""
        self.condition = "new"
        self.image = None


@dataclass
class AppState:
    store: InventoryStore = field(default_factory=InventoryStore)
    form: FormState = field(default_factory=FormState)
    category: str = ALL_CATEGORIES
    search: str = ""
    loading: bool = False


def add_part(
    state: AppState,
    fetch: Callable[[str], FetchResult] = fetch_part_data,
) -> PartRecord | None:
    """
    Look up the part in the form, add it to the store and clear the form.

    Returns the new record, or None when there is nothing to do (empty part
    number, or another add still in progress).
    """
    part_number = state.form.part_number.strip()
    if not part_number or state.loading:
        return None

    state.loading = True
    try:
        fetched = fetch(part_number)
        record = assemble_part(
            fetched,
            manual_name=state.form.manual_name,
            manual_price=state.form.manual_price,
            condition=state.form.condition,
            image=state.form.image,
        )
        state.store.add(record)
        state.form.reset()
    finally:
        state.loading = False
    return record


def set_filter(state: AppState, category: str) -> None:
    if category not in state.store.filter_options():
        raise ValueError(f"Unknown category filter: {category!r}")
    state.category = category


def set_search(state: AppState, text: str) -> None:
    state.search = text or ""


def set_image(state: AppState, data: bytes | None, mime_type: str = "") -> None:
    """Attach an uploaded image to the form; None clears it."""
    state.form.image = encode_image(data, mime_type) if data else None


def visible_parts(state: AppState) -> list[PartRecord]:
    return state.store.filtered(state.category, state.search)
