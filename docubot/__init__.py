"""Client library for the Docubot document-generation service."""

from docubot.api.client import ApiClient
from docubot.api.stream import DocumentStream
from docubot.config import ClientConfig, load_config
from docubot.data.enums import Comparator, EntityType, LogicalOperator, ProtocolVersion
from docubot.data.models import (
    Document,
    DocumentTree,
    DocumentURLResponse,
    DocumentVariablesResponse,
    MessageResponse,
    MessageResponseError,
    Meta,
    PreviewMessageResponse,
    QuestionCondition,
    QuestionNode,
    QuestionNodeMetaData,
)
from docubot.errors import (
    UNKNOWN_ERROR_MESSAGE,
    DocubotAPIError,
    DocubotConfigError,
    DocubotDecodeError,
    DocubotError,
    DocubotVersionError,
)

Client = ApiClient

__version__ = "0.3.0"

__all__ = [
    "ApiClient",
    "Client",
    "ClientConfig",
    "Comparator",
    "Document",
    "DocumentStream",
    "DocumentTree",
    "DocumentURLResponse",
    "DocumentVariablesResponse",
    "DocubotAPIError",
    "DocubotConfigError",
    "DocubotDecodeError",
    "DocubotError",
    "DocubotVersionError",
    "EntityType",
    "LogicalOperator",
    "MessageResponse",
    "MessageResponseError",
    "Meta",
    "PreviewMessageResponse",
    "ProtocolVersion",
    "QuestionCondition",
    "QuestionNode",
    "QuestionNodeMetaData",
    "UNKNOWN_ERROR_MESSAGE",
    "load_config",
]
