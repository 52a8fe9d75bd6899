from src.inventory import FILTER_CATEGORIES, InventoryStore, filter_parts, to_dataframe
from src.parts import PartRecord


def _rec(id, pn, name, category="general", price="not available"):
    return PartRecord(id=id, part_number=pn, name=name, condition="new", category=category, price=price)


RECORDS = [
    _rec(3, "ABC-100", "Brake Pad Set", "brakes", "$45.00"),
    _rec(2, "77001", "Head Gasket", "engine"),
    _rec(1, "X9", "Widget", "general"),
]


def test_add_is_newest_first():
    store = InventoryStore()
    store.add(_rec(1, "A", "first"))
    store.add(_rec(2, "B", "second"))
    assert [r.part_number for r in store] == ["B", "A"]
    assert len(store) == 2


def test_filter_all_and_empty_search():
    assert filter_parts(RECORDS) == RECORDS


def test_filter_category():
    assert [r.id for r in filter_parts(RECORDS, "engine")] == [2]
    assert filter_parts(RECORDS, "suspension") == []


def test_search_part_number_and_name_case_insensitive():
    assert [r.id for r in filter_parts(RECORDS, search="abc")] == [3]
    assert [r.id for r in filter_parts(RECORDS, search="GASKET")] == [2]


def test_category_and_search_combined():
    assert filter_parts(RECORDS, "brakes", "gasket") == []


def test_filtered_view_is_repeatable():
    store = InventoryStore(RECORDS)
    assert store.filtered("all", "a") == store.filtered("all", "a")


def test_records_is_a_copy():
    store = InventoryStore(RECORDS)
    assert store.records == tuple(RECORDS)
    assert store.records is not store.records


def test_category_counts():
    store = InventoryStore(RECORDS + [_rec(0, "Z", "Oil Cap", "engine")])
    assert store.category_counts() == {"engine": 2, "brakes": 1, "general": 1}


def test_filter_options_include_breadcrumb_categories():
    store = InventoryStore(RECORDS + [_rec(0, "Z", "Thing", "accessories")])
    assert store.filter_options() == FILTER_CATEGORIES + ["accessories"]
    assert FILTER_CATEGORIES[:2] == ["all", "general"]


def test_to_dataframe():
    df = to_dataframe(RECORDS)
    assert list(df.columns) == ["part_number", "name", "condition", "category", "price"]
    assert df["part_number"].tolist() == ["ABC-100", "77001", "X9"]
    assert to_dataframe([]).empty
