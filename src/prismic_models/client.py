"""HTTP client for the headless content API."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from types import TracebackType
from typing import Any

import httpx
from pydantic import Field

from .config import ContentApiSettings
from .domain import Document, DomainModel, JsonMapping
from .exceptions import ConfigurationError, ContentApiError

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class SearchResponse(DomainModel):
    """One page of search results."""

    page: int = 1
    results_per_page: int = 0
    total_results_size: int = 0
    total_pages: int = 0
    next_page: str | None = None
    results: tuple[Document, ...] = Field(default_factory=tuple)

    @classmethod
    def from_api(cls, payload: JsonMapping) -> SearchResponse:
        results = tuple(Document.from_api(item) for item in payload.get("results") or ())
        return cls(
            page=int(payload.get("page") or 1),
            results_per_page=int(payload.get("results_per_page") or 0),
            total_results_size=int(payload.get("total_results_size") or 0),
            total_pages=int(payload.get("total_pages") or 0),
            next_page=payload.get("next_page"),
            results=results,
        )


class ContentApiClient:
    """Synchronous adapter over the content API's ref and search endpoints."""

    def __init__(
        self,
        api_url: str | None,
        *,
        access_token: str | None = None,
        timeout: float = 30.0,
        default_lang: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        if not api_url:
            msg = "PRISMIC_API_URL is not configured"
            raise ConfigurationError(msg)
        self._api_url = api_url.rstrip("/")
        self._access_token = access_token
        self._default_lang = default_lang
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._master_ref: str | None = None

    @classmethod
    def from_settings(
        cls,
        settings: ContentApiSettings,
        *,
        client: httpx.Client | None = None,
    ) -> ContentApiClient:
        return cls(
            settings.api_url,
            access_token=settings.access_token,
            timeout=settings.timeout,
            default_lang=settings.default_lang,
            client=client,
        )

    @property
    def api_url(self) -> str:
        return self._api_url

    def master_ref(self) -> str:
        """Return the master ref, fetched once per client."""

        if self._master_ref is None:
            payload = self._request("", {})
            for ref in payload.get("refs") or ():
                if ref.get("isMasterRef"):
                    self._master_ref = str(ref["ref"])
                    break
            else:
                msg = f"No master ref advertised by {self._api_url}"
                raise ContentApiError(msg)
        return self._master_ref

    def search(
        self,
        predicates: Sequence[str],
        *,
        page_size: int | None = None,
        lang: str | None = None,
        orderings: str | None = None,
    ) -> SearchResponse:
        params: dict[str, Any] = {"ref": self.master_ref()}
        if predicates:
            params["q"] = f"[{''.join(predicates)}]"
        if page_size is not None:
            params["pageSize"] = min(MAX_PAGE_SIZE, max(1, int(page_size)))
        resolved_lang = lang or self._default_lang
        if resolved_lang:
            params["lang"] = resolved_lang
        if orderings:
            params["orderings"] = orderings
        return SearchResponse.from_api(self._request("/documents/search", params))

    def get_by_ids(self, ids: Iterable[str]) -> tuple[Document, ...]:
        """Fetch documents by id, returned in the order requested."""

        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return ()
        by_id: dict[str | None, Document] = {}
        for start in range(0, len(wanted), MAX_PAGE_SIZE):
            chunk = wanted[start : start + MAX_PAGE_SIZE]
            ids_literal = json.dumps(chunk, separators=(",", ":"))
            response = self.search(
                [f"[in(document.id,{ids_literal})]"],
                page_size=len(chunk),
                lang="*",
            )
            by_id.update((doc.id, doc) for doc in response.results)
        return tuple(by_id[document_id] for document_id in wanted if document_id in by_id)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> ContentApiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _request(self, path: str, params: dict[str, Any]) -> Any:
        query = dict(params)
        if self._access_token:
            query["access_token"] = self._access_token
        url = f"{self._api_url}{path}"
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url, params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            msg = f"Content API request to {path or '/'} failed with status {status}"
            raise ContentApiError(msg, status_code=status) from exc
        except httpx.HTTPError as exc:
            msg = f"Content API request to {path or '/'} failed"
            raise ContentApiError(msg) from exc


_default_client: ContentApiClient | None = None


def configure(
    settings: ContentApiSettings | None = None,
    *,
    client: ContentApiClient | None = None,
) -> ContentApiClient:
    """Install the client used by query builders and document resolvers."""

    global _default_client
    resolved = client or ContentApiClient.from_settings(settings or ContentApiSettings.from_env())
    if _default_client is not None and _default_client is not resolved:
        _default_client.close()
    _default_client = resolved
    return resolved


def get_client() -> ContentApiClient:
    """Return the configured client, building one from the environment if needed."""

    if _default_client is None:
        return configure()
    return _default_client


def reset_client() -> None:
    global _default_client
    if _default_client is not None:
        _default_client.close()
    _default_client = None


__all__ = [
    "ContentApiClient",
    "SearchResponse",
    "configure",
    "get_client",
    "reset_client",
]
