from pathlib import Path

# Repo-root conventional directories/files (overrideable via catalog.yaml)
CONFIG_DIR = Path("configs")
RUN_FILE = CONFIG_DIR / "catalog.yaml"
TAXONOMY_FILE = CONFIG_DIR / "taxonomy.yaml"

# Firestore collection the taxonomy documents live in
DEFAULT_COLLECTION = "taxonomia"
