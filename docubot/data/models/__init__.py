from docubot.data.models.document import Document
from docubot.data.models.responses import (
    DocumentURLData,
    DocumentURLResponse,
    DocumentVariablesResponse,
    MessageResponse,
    MessageResponseData,
    MessageResponseError,
    Meta,
    PreviewMessageResponse,
    PreviewMessageResponseData,
)
from docubot.data.models.tree import DocumentTree, QuestionCondition, QuestionNode, QuestionNodeMetaData

__all__ = [
    "Document",
    "DocumentTree",
    "DocumentURLData",
    "DocumentURLResponse",
    "DocumentVariablesResponse",
    "MessageResponse",
    "MessageResponseData",
    "MessageResponseError",
    "Meta",
    "PreviewMessageResponse",
    "PreviewMessageResponseData",
    "QuestionCondition",
    "QuestionNode",
    "QuestionNodeMetaData",
]
