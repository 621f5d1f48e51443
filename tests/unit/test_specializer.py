from domain.taxonomy.builders import make_category, make_item, make_subcategory
from domain.taxonomy.rules import (
    BELT_KEYWORD,
    SPECIALIZATION_RULES,
    SpecializationRule,
    SubcategoryRoute,
)
from domain.taxonomy.specializer import specialize_categories

TRANSPORTERS = ["Correia transportadora", "Correia em V", "Transportador helicoidal", "Alimentador vibratório"]
PARTS = ["Emendas de correia", "Roletes de carga", "Tambores"]


def _split_clone(name, subs=None):
    if subs is None:
        subs = [
            ("Transportadores", TRANSPORTERS),
            ("Peças", PARTS),
            ("Serviços", ["Vulcanização"]),
            ("Outros", ["Caixa para escrever"]),
        ]
    return make_category(name, [make_subcategory(s, [make_item(i) for i in items]) for s, items in subs])


def _shape(cat):
    return [(s.name, [it.name for it in s.items]) for s in cat.subcategories]


def test_belt_keyword() -> None:
    assert BELT_KEYWORD == "correia"


def test_correias_keeps_matching_items() -> None:
    (cat,) = specialize_categories([_split_clone("Correias")])

    assert _shape(cat) == [
        ("Correias", ["Correia transportadora", "Correia em V"]),
        ("Peças", ["Emendas de correia"]),
        ("Serviços", ["Vulcanização"]),
        ("Outros", ["Caixa para escrever"]),
    ]
    assert cat.subcategories[0].id == "correias"


def test_transportadores_keeps_non_matching_items() -> None:
    (cat,) = specialize_categories([_split_clone("Transportadores")])

    assert _shape(cat) == [
        ("Transportadores", ["Transportador helicoidal", "Alimentador vibratório"]),
        ("Peças", ["Roletes de carga", "Tambores"]),
        ("Serviços", ["Vulcanização"]),
        ("Outros", ["Caixa para escrever"]),
    ]


def test_partition_is_complete_and_disjoint() -> None:
    correias, transportadores = specialize_categories(
        [_split_clone("Correias"), _split_clone("Transportadores")]
    )

    def routed(cat, names):
        return {it.id for s in cat.subcategories if s.name in names for it in s.items}

    belts = routed(correias, {"Correias", "Peças"})
    others = routed(transportadores, {"Transportadores", "Peças"})
    everything = {make_item(n).id for n in TRANSPORTERS + PARTS}

    assert belts | others == everything
    assert not belts & others


def test_keyword_match_is_case_insensitive() -> None:
    clone = _split_clone("Correias", [("Transportadores", ["CORREIA Plana", "Rolete"])])

    (cat,) = specialize_categories([clone])

    assert _shape(cat) == [("Correias", ["CORREIA Plana"])]


def test_empty_filtered_subcategories_are_omitted() -> None:
    clone = _split_clone(
        "Transportadores",
        [("Transportadores", ["Transportador helicoidal"]), ("Peças", ["Raspadores de correia"])],
    )

    (cat,) = specialize_categories([clone])

    assert _shape(cat) == [("Transportadores", ["Transportador helicoidal"])]


def test_correias_placeholder_when_nothing_matches() -> None:
    clone = _split_clone("Correias", [("Transportadores", ["Transportador helicoidal"]), ("Peças", ["Tambores"])])

    (cat,) = specialize_categories([clone])

    assert _shape(cat) == [("Correias", [])]
    assert cat.subcategories[0].id == "correias"


def test_unlisted_subcategories_are_not_carried() -> None:
    clone = _split_clone("Transportadores", [("Transportadores", ["Rolete"]), ("Aluguel", ["Esteira móvel"])])

    (cat,) = specialize_categories([clone])

    assert [s.name for s in cat.subcategories] == ["Transportadores"]


def test_other_categories_pass_through_untouched() -> None:
    cat = _split_clone("Britagem")

    out = specialize_categories([cat])

    assert out == [cat]


def test_specialization_keeps_category_identity() -> None:
    (cat,) = specialize_categories([_split_clone("Correias")])
    assert (cat.name, cat.id) == ("Correias", "correias")


def test_custom_rule_merges_routes_into_one_target() -> None:
    rule = SpecializationRule(
        category="Cabos",
        keyword="Aço",
        routes=[
            SubcategoryRoute(source="Novos", target="Aço"),
            SubcategoryRoute(source="Usados", target="Aço"),
        ],
    )
    clone = make_category(
        "Cabos",
        [
            make_subcategory("Novos", [make_item("Cabo de aço 10mm"), make_item("Cabo de cobre")]),
            make_subcategory("Usados", [make_item("Cabo de aço 10mm"), make_item("Cabo de aço 20mm")]),
        ],
    )

    (cat,) = specialize_categories([clone], [rule])

    assert rule.keyword == "aço"
    assert _shape(cat) == [("Aço", ["Cabo de aço 10mm", "Cabo de aço 20mm"])]


def test_default_rules_target_the_split_halves() -> None:
    assert [r.category_id for r in SPECIALIZATION_RULES] == ["correias", "transportadores"]
