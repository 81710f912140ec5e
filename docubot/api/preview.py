"""
Preview endpoints: evaluate a document tree or render a document without
persisting anything server-side.
"""
from typing import TYPE_CHECKING, Any

from docubot.api.stream import DocumentStream
from docubot.data.models.document import Document
from docubot.data.models.responses import PreviewMessageResponse
from docubot.data.models.tree import DocumentTree

if TYPE_CHECKING:
    from docubot.api.client import ApiClient


class PreviewAPI:
    """Preview endpoints, served from the preview base URL."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def _url(self, path: str) -> str:
        return f"{self.client.config.preview_url}/api/v1/preview{path}"

    def send_message(self, message: str, variables: dict[str, Any], tree: DocumentTree) -> PreviewMessageResponse:
        """Run one turn against an unsaved tree (POST /api/v1/preview)."""
        self.client.require(self.client.version.supports_preview, "Preview messages")
        body = {"message": message, "docTree": tree.to_dict(), "variables": dict(variables or {})}
        return self.client.http.post_json(self._url(""), PreviewMessageResponse.from_dict, json=body)

    def get_document(self, variables: dict[str, Any], document: Document) -> DocumentStream:
        """Render a document template with variables (POST /api/v1/preview/doc).

        The returned stream is open; the caller must close it.
        """
        self.client.require(self.client.version.supports_preview, "Preview documents")
        body = {"document": document.to_dict(), "variables": dict(variables or {})}
        return self.client.http.post_stream(self._url("/doc"), json=body)
