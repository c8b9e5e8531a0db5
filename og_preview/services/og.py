from __future__ import annotations

from typing import Union

from bs4 import BeautifulSoup

from ..models import OG_PROPERTY_FIELDS, MetadataRecord


def extract_og(html: Union[bytes, str]) -> MetadataRecord:
    """Scan ``<meta property=...>`` tags in document order.

    Only the Open Graph properties listed in ``OG_PROPERTY_FIELDS`` are kept.
    A repeated property overwrites the earlier value, except ``og:url`` where
    the first non-empty value is kept. ``status_code`` is left at 0 and
    ``link`` is left empty when the page has no ``og:url``.
    """
    record = MetadataRecord()
    if not html:
        return record

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all("meta", attrs={"property": True}):
        field = OG_PROPERTY_FIELDS.get(tag.get("property"))
        if field is None:
            continue
        content = tag.get("content") or ""
        if field == "link":
            if not record.link:
                record.link = content
            continue
        setattr(record, field, content)
    return record
