from domain.taxonomy.builders import make_category, make_item, make_subcategory
from domain.taxonomy.dedupe import dedupe_categories, dedupe_items, unique_by_id


def test_first_occurrence_wins_and_order_is_kept() -> None:
    nodes = [make_item("A"), make_item("B"), make_item("a"), make_item("C")]

    kept = unique_by_id(nodes)

    assert [n.name for n in kept] == ["A", "B", "C"]


def test_dedupe_items_returns_tuple() -> None:
    assert dedupe_items([make_item("x"), make_item("X")]) == (make_item("x"),)


def test_dedupe_applies_at_every_level() -> None:
    sub = make_subcategory("Peças", [make_item("Eixos"), make_item("eixos"), make_item("Molas")])
    cats = [
        make_category("Britagem", [sub, make_subcategory("Pecas", [make_item("Outro")])]),
        make_category("britagem", [make_subcategory("Serviços")]),
        make_category("Moinhos"),
    ]

    out = dedupe_categories(cats)

    assert [c.name for c in out] == ["Britagem", "Moinhos"]
    assert [s.name for s in out[0].subcategories] == ["Peças"]
    assert [it.name for it in out[0].subcategories[0].items] == ["Eixos", "Molas"]


def test_dedupe_does_not_merge_dropped_duplicates() -> None:
    cats = [
        make_category("A", [make_subcategory("S", [make_item("x")])]),
        make_category("A", [make_subcategory("T", [make_item("y")])]),
    ]

    out = dedupe_categories(cats)

    assert len(out) == 1
    assert [s.id for s in out[0].subcategories] == ["s"]


def test_dedupe_empty() -> None:
    assert dedupe_categories([]) == []
