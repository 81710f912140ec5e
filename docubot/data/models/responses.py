"""
Response envelopes returned by the Docubot service.

Every envelope separates a typed `data` payload from a free-form `meta`
object. Decoding is lenient about missing keys (they take their zero value)
and strict about keys of the wrong type, which raise ValueError.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterator

from docubot.errors import UNKNOWN_ERROR_MESSAGE


def _expect(d: Mapping, key: str, kind: type | tuple[type, ...], default: Any) -> Any:
    value = d.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ValueError(f"Field {key!r} has unexpected type {type(value).__name__}")
    return value


def _object(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object for {what}, got {type(value).__name__}")
    return value


def _strings(d: Mapping, key: str) -> list[str]:
    values = _expect(d, key, list, [])
    if not all(isinstance(v, str) for v in values):
        raise ValueError(f"Field {key!r} must be a list of strings")
    return list(values)


class Meta(Mapping):
    """Read-only view over a response's `meta` object.

    The service adds keys over time, so nothing here is guaranteed to be
    present; the properties return None when a key is missing.
    """

    def __init__(self, raw: Mapping[str, Any] | None = None):
        self._raw = dict(raw or {})

    def __getitem__(self, key: str) -> Any:
        return self._raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f"Meta({self._raw!r})"

    def _str(self, key: str) -> str | None:
        value = self._raw.get(key)
        return value if isinstance(value, str) else None

    @property
    def thread_id(self) -> str | None:
        return self._str("threadId")

    @property
    def user_id(self) -> str | None:
        return self._str("userId")

    @property
    def document_name(self) -> str | None:
        return self._str("documentName")

    @property
    def messages(self) -> list[dict[str, Any]] | None:
        """Per-message metadata, aligned with data.messages when the service sends it."""
        value = self._raw.get("messages")
        return value if isinstance(value, list) else None


@dataclass
class MessageResponseData:
    messages: list[str] = field(default_factory=list)
    complete: bool = False
    hasDocument: bool = False

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "MessageResponseData":
        return MessageResponseData(
            messages=_strings(d, "messages"),
            complete=_expect(d, "complete", bool, False),
            hasDocument=_expect(d, "hasDocument", bool, False),
        )


@dataclass
class MessageResponse:
    data: MessageResponseData
    meta: Meta = field(default_factory=Meta)

    @staticmethod
    def from_dict(d: Any) -> "MessageResponse":
        d = _object(d, "response")
        return MessageResponse(
            data=MessageResponseData.from_dict(_object(d.get("data"), "data")),
            meta=Meta(_object(d.get("meta"), "meta")),
        )


@dataclass
class PreviewMessageResponseData(MessageResponseData):
    variables: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PreviewMessageResponseData":
        return PreviewMessageResponseData(
            messages=_strings(d, "messages"),
            complete=_expect(d, "complete", bool, False),
            hasDocument=_expect(d, "hasDocument", bool, False),
            variables=dict(_expect(d, "variables", dict, {})),
        )


@dataclass
class PreviewMessageResponse:
    data: PreviewMessageResponseData
    meta: Meta = field(default_factory=Meta)

    @staticmethod
    def from_dict(d: Any) -> "PreviewMessageResponse":
        d = _object(d, "response")
        return PreviewMessageResponse(
            data=PreviewMessageResponseData.from_dict(_object(d.get("data"), "data")),
            meta=Meta(_object(d.get("meta"), "meta")),
        )


@dataclass
class DocumentURLData:
    url: str = ""


@dataclass
class DocumentURLResponse:
    data: DocumentURLData
    meta: Meta = field(default_factory=Meta)

    @staticmethod
    def from_dict(d: Any) -> "DocumentURLResponse":
        d = _object(d, "response")
        data = _object(d.get("data"), "data")
        return DocumentURLResponse(
            data=DocumentURLData(url=_expect(data, "url", str, "")),
            meta=Meta(_object(d.get("meta"), "meta")),
        )

    @property
    def url(self) -> str:
        return self.data.url


@dataclass
class DocumentVariablesResponse:
    data: dict[str, Any] = field(default_factory=dict)
    meta: Meta = field(default_factory=Meta)

    @staticmethod
    def from_dict(d: Any) -> "DocumentVariablesResponse":
        d = _object(d, "response")
        return DocumentVariablesResponse(
            data=dict(_object(d.get("data"), "data")),
            meta=Meta(_object(d.get("meta"), "meta")),
        )


@dataclass
class MessageResponseError:
    errors: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Any) -> "MessageResponseError":
        """Best effort: anything unrecognisable yields an empty error list."""
        if not isinstance(d, dict) or not isinstance(d.get("errors"), list):
            return MessageResponseError()
        return MessageResponseError(errors=[e for e in d["errors"] if isinstance(e, str)])

    def first_error(self) -> str:
        return self.errors[0] if self.errors and self.errors[0] else UNKNOWN_ERROR_MESSAGE
