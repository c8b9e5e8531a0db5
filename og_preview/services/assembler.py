from __future__ import annotations

from typing import Optional

import httpx

from ..models import MetadataRecord
from . import fetcher, og


def _is_html(content_type: Optional[str]) -> bool:
    return content_type is not None and "html" in content_type.lower()


def assemble(url: str, fetched: fetcher.FetchResult, extracted: Optional[MetadataRecord] = None) -> MetadataRecord:
    record = extracted if extracted is not None else MetadataRecord()
    record.status_code = fetched.status_code
    # Only a received response falls back to the requested URL.
    if fetched.ok and not record.link:
        record.link = url
    return record


async def collect(client: httpx.AsyncClient, url: str) -> MetadataRecord:
    fetched = await fetcher.fetch(client, url)
    extracted = None
    if fetched.ok and _is_html(fetched.content_type):
        extracted = og.extract_og(fetched.body)
    return assemble(url, fetched, extracted)
