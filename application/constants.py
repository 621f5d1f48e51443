"""Application-level constants."""

# Column names for the flattened taxonomy table
CATEGORY_COL = "category"
CATEGORY_ID_COL = "category_id"
SUBCATEGORY_COL = "subcategory"
SUBCATEGORY_ID_COL = "subcategory_id"
ITEM_COL = "item"
ITEM_ID_COL = "item_id"

TABLE_COLUMNS = [CATEGORY_COL, CATEGORY_ID_COL, SUBCATEGORY_COL, SUBCATEGORY_ID_COL, ITEM_COL, ITEM_ID_COL]

# Output filenames
TAXONOMY_FILENAME = "taxonomy.json"
TABLE_BASENAME = "taxonomy_flat"
SUMMARY_FILENAME = "summary.json"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"

# Per-run log
LOG_FILENAME = "run.log"
