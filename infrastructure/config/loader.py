"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from domain.taxonomy.loader import parse_taxonomy_rules
from domain.taxonomy.rules import TaxonomyRules
from infrastructure.config.models import (
    ExportFormat,
    FileSourceConfig,
    HttpSourceConfig,
    RunConfig,
    SourceKind,
)
from infrastructure.constants import TAXONOMY_FILE


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_taxonomy_rules(path: Path) -> tuple[TaxonomyRules, list[dict] | None]:
    """
    Load rule overrides (and optional addition records) from a taxonomy YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    A missing file means "use the built-in tables".
    """
    if not path.exists():
        return TaxonomyRules(), None

    data = _load_yaml(path)
    additions = data.get("additions")
    if additions is not None and not isinstance(additions, list):
        raise ValueError(f"'additions' must be a list of records in {path}")
    return parse_taxonomy_rules(data), additions


def load_run_config(path: Path | None = None) -> RunConfig:
    """
    Load catalog.yaml and construct a fully-resolved RunConfig.

    Without a path (or with a missing optional file) the defaults apply: local
    source only, built-in rules.
    """
    run = _load_yaml(path) if path is not None else {}

    source = SourceKind(str(run.get("source", SourceKind.LOCAL.value)).strip().lower())
    use_only_local = bool(run.get("use_only_local", source is SourceKind.LOCAL))

    http_raw = run.get("http")
    file_raw = run.get("file")
    if http_raw is not None and not isinstance(http_raw, dict):
        raise ValueError("'http' must be a mapping")
    if file_raw is not None and not isinstance(file_raw, dict):
        raise ValueError("'file' must be a mapping")

    taxonomy_file = Path(run.get("taxonomy_file", str(TAXONOMY_FILE)))
    rules, additions = load_taxonomy_rules(taxonomy_file)

    return RunConfig(
        source=source,
        use_only_local=use_only_local,
        http=HttpSourceConfig(**http_raw) if http_raw else None,
        file=FileSourceConfig(**file_raw) if file_raw else None,
        taxonomy_file=taxonomy_file,
        rules=rules,
        additions=additions,
        output_dir=Path(run.get("output_dir", "outputs")),
        export_format=ExportFormat(str(run.get("export_format", ExportFormat.CSV.value)).lower()),
    )
