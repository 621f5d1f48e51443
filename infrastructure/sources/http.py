"""HTTP source: fetch a taxonomy collection from a JSON endpoint.

Accepts three payload shapes:
- a JSON list of records
- ``{"documents": [record, ...]}``
- Firestore REST: ``{"documents": [{"name": ..., "fields": {...}}, ...]}``, paged
  through ``nextPageToken``
"""

import logging
import os
from typing import Any

import httpx

from infrastructure.config.models import RunConfig, SourceKind

from .base import TaxonomySource, ensure_record_list
from .firestore import decode_document, is_firestore_document
from .registry import register_source

logger = logging.getLogger(__name__)

# Upper bound on followed nextPageToken links per fetch
MAX_PAGES = 50


class HttpSource(TaxonomySource):
    """
    Remote collection over HTTP: GET {base_url}/{collection}

    - Follows Firestore page tokens; no retry
    - Optional bearer token read from the environment variable named in config
    """

    kind = SourceKind.HTTP

    def __init__(self, *, client: httpx.Client, collection: str) -> None:
        self.client = client
        self.collection = collection.strip("/")

    @classmethod
    def from_cfg(cls, cfg: RunConfig) -> "HttpSource":
        if cfg.http is None:
            raise ValueError("source=http but cfg.http is missing")

        headers = {"Accept": "application/json"}
        if cfg.http.token_env:
            token = os.getenv(cfg.http.token_env)
            if token:
                headers["Authorization"] = f"Bearer {token}"
            else:
                logger.warning("Token env var %s is not set; fetching without credentials", cfg.http.token_env)

        client = httpx.Client(
            base_url=cfg.http.base_url.rstrip("/"),
            timeout=cfg.http.timeout_s,
            headers=headers,
        )
        return cls(client=client, collection=cfg.http.collection)

    @property
    def description(self) -> str:
        return f"http:{str(self.client.base_url).rstrip('/')}/{self.collection}"

    def _get_page(self, page_token: str | None) -> Any:
        params = {"pageToken": page_token} if page_token else None
        resp = self.client.get(f"/{self.collection}", params=params)
        resp.raise_for_status()
        return resp.json()

    def _split_page(self, data: Any) -> tuple[list[Any], str | None]:
        """Return (documents, next page token) for one response body."""
        if isinstance(data, list):
            return data, None
        if not isinstance(data, dict):
            raise ValueError(f"Expected a list of documents from {self.description}, got {type(data).__name__}")

        token = data.get("nextPageToken") or None
        if "documents" not in data:
            # An empty Firestore collection answers with no "documents" key at all
            if set(data) - {"nextPageToken"}:
                raise ValueError(f"Unexpected payload from {self.description}: keys {sorted(data)}")
            return [], token

        documents = data["documents"]
        if not isinstance(documents, list):
            raise ValueError(f"Expected a list of documents from {self.description}, got {type(documents).__name__}")
        return documents, token

    def fetch_records(self) -> list[dict[str, Any]]:
        documents: list[Any] = []
        token: str | None = None
        for page in range(1, MAX_PAGES + 1):
            page_docs, token = self._split_page(self._get_page(token))
            documents.extend(page_docs)
            if token is None:
                break
        else:
            raise RuntimeError(f"{self.description} still paginating after {MAX_PAGES} pages")

        records = [decode_document(doc) if is_firestore_document(doc) else doc for doc in documents]
        records = ensure_record_list(records, self.description)
        logger.debug("Fetched %d records in %d page(s) from %s", len(records), page, self.description)
        return records


register_source(SourceKind.HTTP, HttpSource)
