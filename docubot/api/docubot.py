"""
Conversation endpoints: message exchange and the documents and variables a
conversation produces.
"""
from datetime import timedelta
from typing import TYPE_CHECKING
from urllib.parse import quote

from docubot.api.stream import DocumentStream
from docubot.data.models.responses import DocumentURLResponse, DocumentVariablesResponse, MessageResponse
from docubot.utils.time import duration_seconds

if TYPE_CHECKING:
    from docubot.api.client import ApiClient


class DocubotAPI:
    """Docubot endpoints."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def _url(self, path: str) -> str:
        return f"{self.client.config.base_url}/api/v1/docubot{path}"

    def _thread_url(self, thread: str, path: str) -> str:
        return self._url(f"/{quote(thread, safe='')}{path}")

    def send_message(self, message: str, thread: str, sender: str, tree_id: str | None = None) -> MessageResponse:
        """Send one conversational turn (POST /api/v1/docubot)."""
        body = {"message": message, "thread": thread, "sender": sender}
        if tree_id is not None:
            self.client.require(self.client.version.supports_trees, "Document tree ids")
            body["docTreeId"] = tree_id
        return self.client.http.post_json(self._url(""), MessageResponse.from_dict, json=body)

    def get_document(self, thread: str, user: str) -> DocumentStream:
        """Download the conversation's document (GET /api/v1/docubot/{thread}/doc/download).

        The returned stream is open; the caller must close it.
        """
        return self.client.http.get_stream(self._thread_url(thread, "/doc/download"), params={"user": user})

    def get_document_url(self, thread: str, user: str, expires: timedelta | int | float) -> DocumentURLResponse:
        """Fetch a time-limited download URL (GET /api/v1/docubot/{thread}/doc/url)."""
        params = {"user": user, "duration": str(duration_seconds(expires))}
        return self.client.http.get_json(
            self._thread_url(thread, "/doc/url"), DocumentURLResponse.from_dict, params=params
        )

    def get_variables(self, thread: str, user: str) -> DocumentVariablesResponse:
        """Fetch the variables collected so far (GET /api/v1/docubot/{thread}/variables)."""
        self.client.require(self.client.version.supports_variables, "Variable retrieval")
        return self.client.http.get_json(
            self._thread_url(thread, "/variables"), DocumentVariablesResponse.from_dict, params={"user": user}
        )
