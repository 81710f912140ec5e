from dataclasses import dataclass
from datetime import datetime
from typing import Any

from docubot.utils.time import format_iso_utc, parse_iso_utc


@dataclass
class Document:
    id: str
    docTreeId: str
    header: str = ""
    body: str = ""
    footer: str = ""
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Document":
        return Document(
            id=d.get("id", ""),
            docTreeId=d.get("docTreeId", ""),
            header=d.get("header") or "",
            body=d.get("body") or "",
            footer=d.get("footer") or "",
            createdAt=parse_iso_utc(d.get("createdAt")),
            updatedAt=parse_iso_utc(d.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "docTreeId": self.docTreeId,
            "header": self.header,
            "body": self.body,
            "footer": self.footer,
        }
        if self.createdAt is not None:
            out["createdAt"] = format_iso_utc(self.createdAt)
        if self.updatedAt is not None:
            out["updatedAt"] = format_iso_utc(self.updatedAt)
        return out
