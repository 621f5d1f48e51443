from domain.taxonomy.builders import make_category, make_item, make_subcategory
from domain.taxonomy.merger import merge_categories, merge_items


def _cat(name, subs):
    return make_category(name, [make_subcategory(s, [make_item(i) for i in items]) for s, items in subs])


def test_merge_items_appends_only_new_ids() -> None:
    base = (make_item("Eixos"), make_item("Molas"))
    merged = merge_items(base, [make_item("eixos"), make_item("Polias")])
    assert [it.name for it in merged] == ["Eixos", "Molas", "Polias"]


def test_new_categories_are_appended_in_addition_order() -> None:
    base = [_cat("Britagem", []), _cat("Moinhos", [])]
    additions = [_cat("Pneus", []), _cat("Correias", [])]

    merged = merge_categories(base, additions)

    assert [c.name for c in merged] == ["Britagem", "Moinhos", "Pneus", "Correias"]


def test_existing_category_keeps_base_name_and_gains_children() -> None:
    base = [_cat("Britagem", [("Peças", ["Mandíbulas", "Eixos"])])]
    additions = [
        _cat("britagem", [("Pecas", ["Mandibulas", "Cones"]), ("Serviços", ["Troca de revestimentos"])]),
    ]

    merged = merge_categories(base, additions)

    assert len(merged) == 1
    cat = merged[0]
    assert cat.name == "Britagem"
    assert [s.name for s in cat.subcategories] == ["Peças", "Serviços"]
    assert [it.name for it in cat.subcategories[0].items] == ["Mandíbulas", "Eixos", "Cones"]


def test_merge_never_removes_base_nodes() -> None:
    base = [_cat("A", [("S", ["x", "y"])]), _cat("B", [])]
    merged = merge_categories(base, [_cat("A", [("T", ["z"])])])

    assert [c.id for c in merged] == ["a", "b"]
    assert [s.id for s in merged[0].subcategories] == ["s", "t"]
    assert [it.id for it in merged[0].subcategories[0].items] == ["x", "y"]


def test_merge_is_idempotent() -> None:
    base = [_cat("A", [("S", ["x"])])]
    extra = [_cat("A", [("S", ["y"]), ("T", ["z"])]), _cat("B", [("U", ["w"])])]

    once = merge_categories(base, extra)
    twice = merge_categories(once, extra)

    assert twice == once


def test_merge_leaves_inputs_untouched() -> None:
    base = [_cat("A", [("S", ["x"])])]
    extra = [_cat("A", [("S", ["y"])])]
    snapshot = [c.model_copy(deep=True) for c in base]

    merged = merge_categories(base, extra)

    assert base == snapshot
    assert merged is not base
    assert [it.id for it in merged[0].subcategories[0].items] == ["x", "y"]


def test_merge_with_empty_sides() -> None:
    base = [_cat("A", [])]
    assert merge_categories(base, []) == base
    assert merge_categories([], base) == base
    assert merge_categories([], []) == []
