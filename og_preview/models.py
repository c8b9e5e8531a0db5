from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass
class MetadataRecord:
    status_code: int = 0
    name: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    link: str = ""

    def to_dict(self) -> Dict[str, object]:
        # Key names and order are part of the wire format.
        return {
            "StatusCode": self.status_code,
            "Name": self.name,
            "Title": self.title,
            "Description": self.description,
            "Image": self.image,
            "Link": self.link,
        }


OG_PROPERTY_FIELDS: Dict[str, str] = {
    "og:site_name": "name",
    "og:title": "title",
    "og:description": "description",
    "og:image": "image",
    "og:url": "link",
}
