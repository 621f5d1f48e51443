import json
from pathlib import Path

import pytest

from application.constants import TABLE_COLUMNS
from application.serialize import export_taxonomy_table, flatten_taxonomy, write_taxonomy_json
from application.summary import summarize_taxonomy
from domain.taxonomy import LOCAL_ADDITIONS, LOCAL_TAXONOMY, TaxonomyRules, build_taxonomy
from domain.taxonomy.builders import make_category, make_item, make_subcategory
from infrastructure.config import ExportFormat
from infrastructure.io import read_table
from infrastructure.sources.file import records_from_table


@pytest.fixture
def tree():
    return [
        make_category(
            "Correias",
            [
                make_subcategory("Correias", [make_item("Correia em V"), make_item("Correia dentada")]),
                make_subcategory("Peças"),
            ],
        ),
        make_category("Guindastes"),
    ]


def test_flatten_one_row_per_item_and_empty_node(tree) -> None:
    rows = flatten_taxonomy(tree)

    assert [(r["category"], r["subcategory"], r["item"]) for r in rows] == [
        ("Correias", "Correias", "Correia em V"),
        ("Correias", "Correias", "Correia dentada"),
        ("Correias", "Peças", ""),
        ("Guindastes", "", ""),
    ]
    assert rows[0]["item_id"] == "correia-em-v"
    assert rows[2]["subcategory_id"] == "pecas"
    assert all(list(r) == TABLE_COLUMNS for r in rows)


def test_write_json_keeps_accents_and_nesting(tree, tmp_path: Path) -> None:
    path = write_taxonomy_json(tree, tmp_path / "out" / "taxonomy.json")

    text = path.read_text(encoding="utf-8")
    data = json.loads(text)

    assert "Peças" in text
    assert data[0]["subcategories"][0]["items"][1] == {"name": "Correia dentada", "id": "correia-dentada"}
    assert data[1] == {"name": "Guindastes", "id": "guindastes", "subcategories": []}


def test_csv_export_reads_back_as_file_source_table(tmp_path: Path) -> None:
    categories = build_taxonomy(LOCAL_TAXONOMY, LOCAL_ADDITIONS)

    path = export_taxonomy_table(categories, tmp_path, "taxonomy_flat", ExportFormat.CSV)
    df = read_table(path)

    assert path.name == "taxonomy_flat.csv"
    assert list(df.columns) == TABLE_COLUMNS
    assert len(df) == len(flatten_taxonomy(categories))
    # the table already holds the final tree, so rebuild it without composition rules
    plain = TaxonomyRules(split_table={}, specializations=[])
    assert build_taxonomy(records_from_table(df), [], plain) == categories


def test_summary_counts(tree) -> None:
    summary = summarize_taxonomy(tree)

    assert summary["categories"] == 2
    assert summary["subcategories"] == 2
    assert summary["items"] == 2
    assert summary["per_category"]["Guindastes"] == {"subcategories": 0, "items": 0}
