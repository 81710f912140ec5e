from datetime import datetime, timezone

import pytest

from docubot.data.enums import Comparator, EntityType, LogicalOperator
from docubot.data.models.document import Document
from docubot.data.models.responses import (
    DocumentURLResponse,
    MessageResponse,
    MessageResponseError,
    Meta,
    PreviewMessageResponse,
)
from docubot.data.models.tree import DocumentTree, QuestionCondition, QuestionNode
from docubot.errors import UNKNOWN_ERROR_MESSAGE

TREE = {
    "id": "tree-1",
    "name": "Lease",
    "createdAt": "2024-03-01T10:00:00Z",
    "updatedAt": "2024-03-02T11:30:00Z",
    "rootNode": {
        "variableName": "tenant",
        "question": "Tenant name?",
        "logicalOperator": "and",
        "conditions": [],
        "entityType": "text",
        "children": [
            {
                "variableName": "pets",
                "question": "Any pets?",
                "logicalOperator": "or",
                "conditions": [
                    {"variableName": "tenant", "comparator": "!=", "value": ""},
                    {"variableName": "rent", "comparator": ">", "value": 1000},
                ],
                "entityType": "multipleChoice",
                "children": [],
                "metaData": {"choices": {"yes": "Yes", "no": "No"}},
            }
        ],
    },
}


def test_tree_from_dict():
    tree = DocumentTree.from_dict(TREE)

    assert tree.name == "Lease"
    assert tree.createdAt == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
    child = tree.rootNode.children[0]
    assert child.logicalOperator is LogicalOperator.OR
    assert child.entityType is EntityType.MULTIPLE_CHOICE
    assert [c.comparator for c in child.conditions] == [Comparator.NE, Comparator.GT]
    assert child.conditions[1].value == 1000
    assert child.metaData.choices == {"yes": "Yes", "no": "No"}


def test_tree_round_trip_preserves_wire_shape():
    assert DocumentTree.from_dict(TREE).to_dict() == TREE


def test_unknown_enum_values_are_kept():
    node = QuestionNode.from_dict(
        {
            "variableName": "v",
            "question": "q",
            "logicalOperator": "xor",
            "entityType": "signature",
            "conditions": [{"variableName": "v", "comparator": "contains", "value": "x"}],
        }
    )

    assert node.logicalOperator == "xor"
    assert node.entityType == "signature"
    assert node.conditions[0].comparator == "contains"
    assert node.to_dict()["conditions"][0]["comparator"] == "contains"


def test_tree_without_root():
    tree = DocumentTree.from_dict({"id": "t", "name": "Empty"})
    assert tree.rootNode is None
    assert tree.to_dict() == {"id": "t", "name": "Empty"}


def test_condition_is_immutable():
    cond = QuestionCondition("age", Comparator.GTE, 18)
    with pytest.raises(AttributeError):
        cond.value = 21


def test_document_round_trip():
    raw = {
        "id": "doc-1",
        "docTreeId": "tree-1",
        "header": "<h1>Lease</h1>",
        "body": "<p>{{tenant}}</p>",
        "footer": "",
        "createdAt": "2024-03-01T10:00:00Z",
    }
    assert Document.from_dict(raw).to_dict() == raw


def test_message_response_fields():
    resp = MessageResponse.from_dict(
        {
            "data": {"messages": ["a", "b"], "complete": True, "hasDocument": True},
            "meta": {"threadId": "t", "userId": "u", "messages": [{"id": 1}, {"id": 2}], "extra": [1]},
        }
    )

    assert resp.data.messages == ["a", "b"]
    assert resp.data.complete and resp.data.hasDocument
    assert resp.meta.messages == [{"id": 1}, {"id": 2}]
    assert resp.meta["extra"] == [1]
    assert resp.meta.document_name is None


def test_message_response_defaults_for_missing_fields():
    resp = MessageResponse.from_dict({})
    assert resp.data.messages == []
    assert resp.data.complete is False
    assert resp.meta == {}


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "text",
        {"data": []},
        {"data": {"messages": [1, 2]}},
        {"data": {"complete": "yes"}},
        {"data": {}, "meta": "x"},
    ],
)
def test_message_response_rejects_wrong_types(payload):
    with pytest.raises(ValueError):
        MessageResponse.from_dict(payload)


def test_preview_response_variables():
    resp = PreviewMessageResponse.from_dict({"data": {"messages": ["m"], "variables": {"a": 1}}})
    assert resp.data.variables == {"a": 1}
    assert resp.data.hasDocument is False


def test_document_url_response():
    resp = DocumentURLResponse.from_dict({"data": {"url": "https://x"}, "meta": {"k": "v"}})
    assert resp.url == "https://x"
    assert dict(resp.meta) == {"k": "v"}


def test_meta_is_read_only_mapping():
    meta = Meta({"threadId": 5})
    assert meta.thread_id is None
    assert "threadId" in meta
    with pytest.raises(TypeError):
        meta["threadId"] = "t"


def test_error_payload():
    assert MessageResponseError.from_dict({"errors": ["bad thread"]}).first_error() == "bad thread"
    assert MessageResponseError.from_dict({"errors": []}).first_error() == UNKNOWN_ERROR_MESSAGE
    assert MessageResponseError.from_dict(None).first_error() == UNKNOWN_ERROR_MESSAGE
    assert MessageResponseError.from_dict({"errors": [3, "x"]}).errors == ["x"]


def test_tree_accepts_nanosecond_timestamps():
    tree = DocumentTree.from_dict({"id": "t", "name": "n", "createdAt": "2024-03-01T10:00:00.987654321Z"})
    assert tree.createdAt == datetime(2024, 3, 1, 10, 0, 0, 987654, tzinfo=timezone.utc)
