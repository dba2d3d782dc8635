"""
/records API client: builds the paged query, fetches one page and summarizes it.
Never raises on request failure: a non-200 status yields [] and a failed request yields None.
"""
import logging
from typing import Any, Sequence

import httpx

from managed_records.config import settings
from managed_records.schemas.pagination import PAGE_ITEMS, PageWindow
from managed_records.schemas.records import (
    DISPOSITION_CLOSED,
    DISPOSITION_OPEN,
    PRIMARY_COLORS,
    OpenRecord,
    Record,
    RetrieveOptions,
    RetrieveResult,
)
from managed_records.services.http_client import current_http_client

RECORDS_PATH = "records"


def is_primary_color(color: str | None) -> bool:
    """True for red, blue and yellow."""
    return color in PRIMARY_COLORS


def build_records_url(
    base_url: str,
    page: int,
    colors: Sequence[str] = (),
    *,
    pad_single_color: bool = True,
) -> httpx.URL:
    """
    URL for one page: {base_url}/records?limit=11&offset=<n>&color=<c1>&color=<c2>...

    No colors means no color param (server returns all colors). With pad_single_color,
    a single color is sent as color=<c>&color= because the existing server only reads
    color as a list when the param is repeated.
    """
    window = PageWindow.for_page(page)
    params: list[tuple[str, str | int]] = [("limit", window.limit), ("offset", window.offset)]
    color_values = list(colors)
    if len(color_values) == 1 and pad_single_color:
        color_values.append("")
    params.extend(("color", c) for c in color_values)
    return httpx.URL(f"{base_url.rstrip('/')}/{RECORDS_PATH}", params=params)


def shape_records(records: Sequence[Record], page: int) -> RetrieveResult:
    """Summarize raw /records items for the requested page."""
    # limit is PAGE_ITEMS + 1, so a full extra item means there is a next page
    is_last_page = len(records) <= PAGE_ITEMS
    page_records = list(records[:PAGE_ITEMS])

    open_records = [
        OpenRecord.model_validate({**r.model_dump(), "isPrimary": is_primary_color(r.color)})
        for r in page_records
        if r.disposition == DISPOSITION_OPEN
    ]
    closed_primary_count = sum(
        1 for r in page_records if r.disposition == DISPOSITION_CLOSED and is_primary_color(r.color)
    )
    return RetrieveResult(
        previous_page=None if page == 1 else page - 1,
        next_page=None if is_last_page else page + 1,
        ids=[r.id for r in page_records],
        open=open_records,
        closed_primary_count=closed_primary_count,
    )


def _parse_records(response: httpx.Response) -> list[Record]:
    """Parse a 200 body as a JSON array of record objects. Raises ValueError on anything else."""
    data = response.json() if response.content else []
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [Record.model_validate(item) for item in data]


def _coerce_options(options: RetrieveOptions | dict[str, Any] | None) -> RetrieveOptions:
    if options is None:
        return RetrieveOptions()
    if isinstance(options, RetrieveOptions):
        return options
    return RetrieveOptions.model_validate(options)


class RecordsClient:
    """Client for GET {base_url}/records."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
        pad_single_color: bool | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.records_base_url).rstrip("/")
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.pad_single_color = (
            settings.records_pad_single_color if pad_single_color is None else pad_single_color
        )
        self.timeout = settings.records_request_timeout_seconds if timeout is None else timeout
        self._client = client

    async def _get(self, url: httpx.URL) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url)

    async def retrieve(
        self,
        options: RetrieveOptions | dict[str, Any] | None = None,
    ) -> RetrieveResult | list | None:
        """
        Fetch one page of records and summarize it.

        options: RetrieveOptions or dict with "page" (default 1) and "colors" (default: all colors).
        Returns RetrieveResult on success, [] when the endpoint answers with a status other
        than 200, None when the request fails or the body is not a list of records.
        """
        opts = _coerce_options(options)
        url = build_records_url(
            self.base_url,
            opts.page,
            opts.colors,
            pad_single_color=self.pad_single_color,
        )
        try:
            response = await self._get(url)
        except httpx.HTTPError as exc:
            self.logger.warning("Records GET %s failed: %s", url, exc)
            return None
        if response.status_code != 200:
            self.logger.warning(
                "Records GET %s -> status=%s statusText=%s",
                url,
                response.status_code,
                response.reason_phrase,
            )
            return []
        try:
            records = _parse_records(response)
        except ValueError as exc:
            self.logger.warning("Records GET %s returned an unusable body: %s", url, exc)
            return None
        self.logger.debug("Records GET %s -> %d items", url, len(records))
        return shape_records(records, opts.page)


async def retrieve(options: RetrieveOptions | dict[str, Any] | None = None) -> RetrieveResult | list | None:
    """Retrieve one page using settings and the shared HTTP client when it is initialized."""
    return await RecordsClient(client=current_http_client()).retrieve(options)
