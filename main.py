"""
CLI entrypoint for the taxonomy builder.

This script performs the following steps:
- loads .env and configs/catalog.yaml (plus configs/taxonomy.yaml rule overrides)
- creates a per-run output folder under outputs/
- builds the local taxonomy (built-in base + additions)
- optionally refreshes it once from the configured remote source
- writes the nested JSON tree, the flattened table and a summary
- logs a human-readable summary of the catalog
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    TaxonomyContext,
    export_taxonomy_table,
    log_taxonomy_summary,
    summarize_taxonomy,
    write_taxonomy_json,
)
from application.constants import (
    CONFIG_SNAPSHOT_FILENAME,
    LOG_FILENAME,
    SUMMARY_FILENAME,
    TABLE_BASENAME,
    TAXONOMY_FILENAME,
)
from infrastructure.config import ExportFormat, load_run_config
from infrastructure.constants import RUN_FILE
from infrastructure.observability import configure_logging, get_log_context, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build the equipment taxonomy catalog")
    p.add_argument(
        "--config",
        type=str,
        default=str(RUN_FILE),
        help="Path to catalog.yaml (default: configs/catalog.yaml; built-in defaults if missing)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env, optional)",
    )
    p.add_argument(
        "--mock",
        action="store_true",
        help="Use the Mock source instead of contacting the configured remote.",
    )
    p.add_argument(
        "--refresh",
        action="store_true",
        help="Refresh from the configured remote source after building the local tree.",
    )
    p.add_argument(
        "--export",
        type=str,
        default=None,
        choices=[f.value for f in ExportFormat],
        help="Flattened table format (overrides export_format in catalog.yaml)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    cfg = load_run_config(config_path if config_path.exists() else None)
    export_format = ExportFormat(args.export) if args.export else cfg.export_format

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    source_label = "mock" if args.mock else cfg.source.value
    run_id = f"{ts}_{source_label}_remote{int(cfg.remote_enabled or args.mock)}"

    run_dir = cfg.output_dir / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id, source=source_label)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    (run_dir / CONFIG_SNAPSHOT_FILENAME).write_text(
        json.dumps(cfg.model_dump(mode="json"), ensure_ascii=False, indent=2, default=str),
        encoding="utf-8",
    )

    ctx = TaxonomyContext.from_cfg(cfg, use_mock=bool(args.mock))
    categories = ctx.categories

    if args.refresh:
        if ctx.source is None:
            logger.info("No remote source configured (use_only_local=%s); skipping refresh.", cfg.use_only_local)
        else:
            logger.info("Refreshing from %s...", ctx.source.description)
            categories = ctx.refresh()

    write_taxonomy_json(categories, run_dir / TAXONOMY_FILENAME)
    table_path = export_taxonomy_table(categories, run_dir, TABLE_BASENAME, export_format)

    summary = summarize_taxonomy(categories)
    summary["remote"] = ctx.is_remote
    summary["log_context"] = get_log_context()
    with (run_dir / SUMMARY_FILENAME).open("w", encoding="utf-8") as f:
        json.dump(summary, f, ensure_ascii=False, indent=2)

    log_taxonomy_summary(
        summary,
        source=ctx.source.description if ctx.is_remote and ctx.source is not None else "local",
        loading=ctx.loading,
    )
    logger.info("Flattened table: %s", table_path)
    logger.info("Detailed log: %s", log_path)


if __name__ == "__main__":
    main()
