import logging

import pytest

from application.catalog import TaxonomyContext, category_names, find_unknown_categories
from domain.taxonomy import LOCAL_ADDITIONS, LOCAL_TAXONOMY, build_taxonomy
from infrastructure.config import RunConfig
from infrastructure.sources import MockSource

REMOTE_RECORDS = [
    {"nome": "Britagem", "subcategorias": [{"nome": "Britadores", "itens": ["Britador Cônico"]}]},
    {"nome": "Correias e Transportadores", "subcategorias": [{"nome": "Transportadores", "itens": ["Correia em V"]}]},
]


class _Errors(list):
    def __call__(self, exc: Exception) -> None:
        self.append(exc)


class TestLocalTree:
    def test_defaults_to_builtin_catalog(self) -> None:
        ctx = TaxonomyContext()

        assert ctx.categories == build_taxonomy(LOCAL_TAXONOMY, LOCAL_ADDITIONS)
        assert ctx.loading is False
        assert ctx.is_remote is False

    def test_local_tree_is_built_once(self) -> None:
        ctx = TaxonomyContext()

        first = ctx.local_tree
        second = ctx.local_tree

        assert first is second

    def test_categories_returns_a_new_list(self) -> None:
        ctx = TaxonomyContext()
        listing = ctx.categories
        listing.clear()

        assert ctx.categories

    def test_contexts_do_not_share_cache(self) -> None:
        assert TaxonomyContext().local_tree is not TaxonomyContext().local_tree

    def test_custom_records(self) -> None:
        ctx = TaxonomyContext(base_records=[{"name": "Foo Bar"}], addition_records=[])
        assert category_names(ctx.categories) == ["Foo Bar"]


class TestRefresh:
    def test_loading_until_refreshed(self) -> None:
        ctx = TaxonomyContext(source=MockSource(records=REMOTE_RECORDS))

        assert ctx.loading is True
        ctx.refresh()
        assert ctx.loading is False

    def test_remote_records_replace_base_and_keep_additions(self) -> None:
        ctx = TaxonomyContext(source=MockSource(records=REMOTE_RECORDS))

        tree = ctx.refresh()

        assert ctx.is_remote is True
        assert category_names(tree) == ["Britagem", "Correias", "Transportadores", "Rolamentos"]
        britagem = tree[0]
        assert [s.name for s in britagem.subcategories] == ["Britadores", "Pecas", "Serviços"]

    def test_remote_tree_is_composed_like_local(self) -> None:
        ctx = TaxonomyContext(source=MockSource(records=REMOTE_RECORDS), addition_records=[])

        tree = ctx.refresh()

        assert category_names(tree) == ["Britagem", "Correias", "Transportadores"]
        assert [(s.name, [it.name for it in s.items]) for s in tree[1].subcategories] == [
            ("Correias", ["Correia em V"])
        ]
        assert tree[2].subcategories == ()

    def test_failure_keeps_local_tree_and_notifies_observer(self) -> None:
        errors = _Errors()
        boom = ConnectionError("offline")
        ctx = TaxonomyContext(source=MockSource(error=boom), on_error=errors)
        local = ctx.categories

        tree = ctx.refresh()

        assert tree == local
        assert errors == [boom]
        assert ctx.loading is False
        assert ctx.is_remote is False

    def test_empty_collector_observer_is_not_replaced(self) -> None:
        errors = _Errors()
        ctx = TaxonomyContext(source=MockSource(error=RuntimeError("down")), on_error=errors)

        assert ctx.on_error is errors
        ctx.refresh()
        assert [str(e) for e in errors] == ["down"]

    def test_default_observer_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        ctx = TaxonomyContext(source=MockSource(error=ValueError("bad payload")))

        with caplog.at_level(logging.WARNING, logger="application.catalog"):
            ctx.refresh()

        assert "bad payload" in caplog.text
        assert "ValueError" in caplog.text

    def test_empty_remote_keeps_local_tree(self) -> None:
        errors = _Errors()
        ctx = TaxonomyContext(source=MockSource(records=[]), on_error=errors)

        assert ctx.refresh() == ctx.local_tree
        assert ctx.is_remote is False
        assert errors == []

    def test_unusable_remote_records_keep_local_tree(self) -> None:
        ctx = TaxonomyContext(source=MockSource(records=[{"foo": "bar"}]))

        assert ctx.refresh() == ctx.local_tree
        assert ctx.is_remote is False

    def test_refresh_is_one_shot(self) -> None:
        source = MockSource(error=TimeoutError("slow"))
        ctx = TaxonomyContext(source=source, on_error=_Errors())

        ctx.refresh()
        ctx.refresh()

        assert source.calls == 1

    def test_refresh_without_source_is_a_noop(self) -> None:
        ctx = TaxonomyContext()
        assert ctx.refresh() == ctx.local_tree
        assert ctx.loading is False

    def test_refresh_does_not_touch_local_cache(self) -> None:
        ctx = TaxonomyContext(source=MockSource(records=REMOTE_RECORDS))
        local = ctx.local_tree

        ctx.refresh()

        assert ctx.local_tree is local
        assert ctx.categories != local


class TestFromCfg:
    def test_local_config_has_no_source(self) -> None:
        ctx = TaxonomyContext.from_cfg(RunConfig())

        assert ctx.source is None
        assert ctx.loading is False

    def test_mock_flag_builds_mock_source(self) -> None:
        ctx = TaxonomyContext.from_cfg(RunConfig(), use_mock=True, mock_records=REMOTE_RECORDS)

        assert isinstance(ctx.source, MockSource)
        assert ctx.loading is True
        assert ctx.refresh()[0].name == "Britagem"

    def test_config_additions_override_builtin(self) -> None:
        cfg = RunConfig(additions=[{"nome": "Guindastes", "subcategorias": ["Móveis"]}])

        ctx = TaxonomyContext.from_cfg(cfg)

        assert category_names(ctx.categories)[-1] == "Guindastes"
        assert "Correias" not in category_names(ctx.categories)


class TestUnknownCategories:
    def test_reports_names_missing_from_tree(self) -> None:
        tree = TaxonomyContext().categories

        unknown = find_unknown_categories(
            ["Britagem", "Correias e Transportadores", "Linha Amarela / Fora de Estrada", "Pneus"],
            tree,
        )

        assert unknown == ["Correias e Transportadores", "Linha Amarela / Fora de Estrada"]

    def test_variants_blanks_and_repeats(self) -> None:
        tree = TaxonomyContext().categories

        unknown = find_unknown_categories(
            ["BRITAGEM", "perfuracao", "", None, "  ", "Guindastes", " guindastes "],
            tree,
        )

        assert unknown == ["Guindastes"]

    def test_empty_input(self) -> None:
        assert find_unknown_categories([], []) == []
