"""
API Client module providing access to the Docubot service.
Holds the immutable configuration and orchestrates the conversation and
preview sub-APIs over one shared request handler.
"""
from datetime import timedelta
from typing import Any

import requests

from docubot.api.docubot import DocubotAPI
from docubot.api.handle_requests import RequestHandler
from docubot.api.preview import PreviewAPI
from docubot.api.stream import DocumentStream
from docubot.config import ClientConfig, load_config
from docubot.data.enums import ProtocolVersion
from docubot.data.models.document import Document
from docubot.data.models.responses import (
    DocumentURLResponse,
    DocumentVariablesResponse,
    MessageResponse,
    PreviewMessageResponse,
)
from docubot.data.models.tree import DocumentTree
from docubot.errors import DocubotVersionError


class ApiClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(
        self,
        base_url: str,
        key: str,
        secret: str,
        preview_url: str | None = None,
        version: ProtocolVersion | int | str = ProtocolVersion.V3,
        session: requests.Session | None = None,
        requests_per_second: int | None = None,
        timeout: float | None = None,
    ):
        self.config = ClientConfig(
            base_url=base_url,
            key=key,
            secret=secret,
            preview_url=preview_url,
            version=version,
            requests_per_second=requests_per_second,
        )
        self.http = RequestHandler(
            key, secret, session=session, requests_per_second=requests_per_second, timeout=timeout
        )
        self.docubot = DocubotAPI(self)
        self.preview = PreviewAPI(self)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs) -> "ApiClient":
        return cls(
            config.base_url,
            config.key,
            config.secret,
            preview_url=config.preview_url,
            version=config.version,
            requests_per_second=config.requests_per_second,
            **kwargs,
        )

    @classmethod
    def from_env(cls, dotenv_path: str | None = None, **kwargs) -> "ApiClient":
        return cls.from_config(load_config(dotenv_path), **kwargs)

    @property
    def version(self) -> ProtocolVersion:
        return self.config.version

    def require(self, supported: bool, operation: str) -> None:
        if not supported:
            raise DocubotVersionError(f"{operation} not supported by protocol {self.version.name}")

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ApiClient({self.config!r})"

    # Flat aliases for the operations, named after the service's own verbs.

    def send_message(self, message: str, thread: str, sender: str, tree_id: str | None = None) -> MessageResponse:
        return self.docubot.send_message(message, thread, sender, tree_id=tree_id)

    def send_preview_message(
        self, message: str, variables: dict[str, Any], tree: DocumentTree
    ) -> PreviewMessageResponse:
        return self.preview.send_message(message, variables, tree)

    def get_docubot_doc(self, thread: str, user: str) -> DocumentStream:
        return self.docubot.get_document(thread, user)

    def get_preview_doc(self, variables: dict[str, Any], document: Document) -> DocumentStream:
        return self.preview.get_document(variables, document)

    def get_docubot_doc_url(self, thread: str, user: str, expires: timedelta | int | float) -> DocumentURLResponse:
        return self.docubot.get_document_url(thread, user, expires)

    def get_variables(self, thread: str, user: str) -> DocumentVariablesResponse:
        return self.docubot.get_variables(thread, user)
