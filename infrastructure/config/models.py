"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.taxonomy.rules import TaxonomyRules
from infrastructure.constants import DEFAULT_COLLECTION, TAXONOMY_FILE


class SourceKind(str, Enum):
    """Where the taxonomy base records come from."""

    LOCAL = "local"
    HTTP = "http"
    FILE = "file"


class ExportFormat(str, Enum):
    """Table format for the flattened taxonomy export."""

    CSV = "csv"
    XLSX = "xlsx"


class HttpSourceConfig(BaseModel):
    """Remote collection fetched over HTTP (plain JSON API or Firestore REST)."""

    base_url: str
    collection: str = DEFAULT_COLLECTION
    timeout_s: float = 10.0
    token_env: str | None = Field(
        default=None,
        description="Name of the environment variable holding a bearer token (optional).",
    )


class FileSourceConfig(BaseModel):
    """Raw records stored in a YAML or JSON file."""

    path: Path


class RunConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from catalog.yaml
    - Validated and enriched by configuration loader
    - Consumed by the taxonomy context and the CLI
    """

    source: SourceKind = Field(default=SourceKind.LOCAL, description="Where to fetch the base records from.")
    use_only_local: bool = Field(
        default=True,
        description="If true, never contact the remote source and serve the built-in catalog.",
    )

    http: HttpSourceConfig | None = None
    file: FileSourceConfig | None = None

    # Rules (resolved by loader)
    taxonomy_file: Path = Field(default_factory=lambda: TAXONOMY_FILE)
    rules: TaxonomyRules = Field(default_factory=TaxonomyRules)
    additions: list[dict] | None = Field(
        default=None,
        description="Raw addition records overriding the built-in LOCAL_ADDITIONS.",
    )

    # Outputs
    output_dir: Path = Field(default_factory=lambda: Path("outputs"))
    export_format: ExportFormat = ExportFormat.CSV

    @property
    def remote_enabled(self) -> bool:
        return not self.use_only_local and self.source is not SourceKind.LOCAL

    @model_validator(mode="after")
    def _validate(self) -> "RunConfig":
        if self.source is SourceKind.HTTP and self.http is None:
            raise ValueError("source=http requires an 'http' block in catalog.yaml")
        if self.source is SourceKind.FILE and self.file is None:
            raise ValueError("source=file requires a 'file' block in catalog.yaml")
        if self.http is not None and not self.http.base_url.strip():
            raise ValueError("http.base_url must not be empty")
        return self
