"""
Parts Inventory — Catalog lookup & session inventory widget.

Run with:  streamlit run app.py
"""

import logging
from datetime import datetime

import streamlit as st

from src.config import load_config
from src.export import export_csv, export_markdown
from src.parts import CONDITIONS, fetch_part_data
from src.state import AppState, add_part, set_filter, set_image, set_search, visible_parts


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# ── Config ─────────────────────────────────────────────────

@st.cache_data
def cached_load_config():
    return load_config()


config = cached_load_config()


def _init_state() -> AppState:
    if "app" not in st.session_state:
        st.session_state.app = AppState()
    return st.session_state.app


# ── Part card renderer ────────────────────────────────────

def show_part_card(part):
    with st.container(border=True):
        c1, c2 = st.columns([3, 1])
        with c1:
            st.markdown(f"**Part # {part.part_number}**")
        with c2:
            st.markdown(f"<div style='text-align:right'>{part.price}</div>", unsafe_allow_html=True)
        st.markdown(part.name)
        st.caption(f"Condition: {part.condition} • Category: {part.category}")
        if part.image:
            st.image(part.image, caption="part", use_container_width=True)


# ── Page setup ─────────────────────────────────────────────

st.set_page_config(page_title=config.page_title, page_icon="P", layout="centered")

app = _init_state()

st.title(config.page_title)


# ── Add form ───────────────────────────────────────────────

with st.form("add_part", clear_on_submit=True):
    part_number = st.text_input("Part number", placeholder="Part number")
    manual_name = st.text_input("Part name (optional override)")
    condition = st.selectbox("Condition", options=list(CONDITIONS), format_func=str.capitalize)
    manual_price = st.text_input("Manual price (optional)")
    image_upload = st.file_uploader("Photo", type=config.image_types)
    submitted = st.form_submit_button("Add Part", disabled=app.loading, use_container_width=True)

if submitted:
    app.form.part_number = part_number
    app.form.manual_name = manual_name
    app.form.manual_price = manual_price
    app.form.condition = condition
    if image_upload is not None:
        set_image(app, image_upload.getvalue(), image_upload.type)
    else:
        set_image(app, None)

    with st.spinner("Adding…"):
        added = add_part(app, fetch=lambda pn: fetch_part_data(pn, config=config))
    if added:
        st.toast(f"Added {added.part_number}")


# ── Filter & search ────────────────────────────────────────

options = app.store.filter_options()
f1, f2 = st.columns([1, 3])
with f1:
    category = st.selectbox(
        "Filter",
        options=options,
        index=options.index(app.category) if app.category in options else 0,
        format_func=str.capitalize,
    )
    set_filter(app, category)
with f2:
    set_search(app, st.text_input("Search", placeholder="Search…"))

parts = visible_parts(app)

for part in parts:
    show_part_card(part)

if not parts:
    st.info("No parts yet.")


# ── Sidebar ────────────────────────────────────────────────

with st.sidebar:
    st.title("Inventory")
    st.metric("Parts", f"{len(app.store):,}")

    counts = app.store.category_counts()
    if counts:
        with st.expander("By Category", expanded=False):
            for cat, n in counts.items():
                st.caption(f"{cat}: {n:,}")

    if parts:
        st.divider()
        stamp = datetime.now().strftime("%Y%m%d")
        st.download_button(
            "Export CSV",
            data=export_csv(parts),
            file_name=f"parts_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
        st.download_button(
            "Export Markdown",
            data=export_markdown(parts, config.page_title),
            file_name=f"parts_{stamp}.md",
            mime="text/markdown",
            use_container_width=True,
        )
