from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from docubot.data.enums import Comparator, EntityType, LogicalOperator, enum_or_raw, enum_value
from docubot.utils.time import format_iso_utc, parse_iso_utc


@dataclass(frozen=True)
class QuestionCondition:
    variableName: str
    comparator: Comparator | str
    value: Any

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "QuestionCondition":
        return QuestionCondition(
            variableName=d.get("variableName", ""),
            comparator=enum_or_raw(Comparator, d.get("comparator")),
            value=d.get("value"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "variableName": self.variableName,
            "comparator": enum_value(self.comparator),
            "value": self.value,
        }


@dataclass
class QuestionNodeMetaData:
    choices: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "QuestionNodeMetaData":
        choices = d.get("choices") or {}
        return QuestionNodeMetaData(choices={str(k): v for k, v in choices.items()})

    def to_dict(self) -> dict[str, Any]:
        return {"choices": dict(self.choices)}


@dataclass
class QuestionNode:
    variableName: str
    question: str
    logicalOperator: LogicalOperator | str | None = None
    conditions: list[QuestionCondition] = field(default_factory=list)
    entityType: EntityType | str | None = None
    children: list["QuestionNode"] = field(default_factory=list)
    metaData: QuestionNodeMetaData | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "QuestionNode":
        meta_dict = d.get("metaData")
        return QuestionNode(
            variableName=d.get("variableName", ""),
            question=d.get("question", ""),
            logicalOperator=enum_or_raw(LogicalOperator, d.get("logicalOperator")),
            conditions=[QuestionCondition.from_dict(c) for c in d.get("conditions") or [] if isinstance(c, dict)],
            entityType=enum_or_raw(EntityType, d.get("entityType")),
            children=[QuestionNode.from_dict(c) for c in d.get("children") or [] if isinstance(c, dict)],
            metaData=QuestionNodeMetaData.from_dict(meta_dict) if isinstance(meta_dict, dict) else None,
            createdAt=parse_iso_utc(d.get("createdAt")),
            updatedAt=parse_iso_utc(d.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "variableName": self.variableName,
            "question": self.question,
            "logicalOperator": enum_value(self.logicalOperator),
            "conditions": [c.to_dict() for c in self.conditions],
            "entityType": enum_value(self.entityType),
            "children": [c.to_dict() for c in self.children],
        }
        if self.metaData is not None:
            out["metaData"] = self.metaData.to_dict()
        if self.createdAt is not None:
            out["createdAt"] = format_iso_utc(self.createdAt)
        if self.updatedAt is not None:
            out["updatedAt"] = format_iso_utc(self.updatedAt)
        return out


@dataclass
class DocumentTree:
    """A named decision tree; the service walks it, the client only ships it."""

    id: str
    name: str
    rootNode: QuestionNode | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "DocumentTree":
        root = d.get("rootNode")
        return DocumentTree(
            id=d.get("id", ""),
            name=d.get("name", ""),
            rootNode=QuestionNode.from_dict(root) if isinstance(root, dict) else None,
            createdAt=parse_iso_utc(d.get("createdAt")),
            updatedAt=parse_iso_utc(d.get("updatedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.rootNode is not None:
            out["rootNode"] = self.rootNode.to_dict()
        if self.createdAt is not None:
            out["createdAt"] = format_iso_utc(self.createdAt)
        if self.updatedAt is not None:
            out["updatedAt"] = format_iso_utc(self.updatedAt)
        return out
