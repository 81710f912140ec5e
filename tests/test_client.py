import pytest
from requests.auth import HTTPBasicAuth

from docubot import Client
from docubot.api.client import ApiClient
from docubot.data.enums import ProtocolVersion

from tests.helpers import BASE_URL, PREVIEW_URL


def test_construction_holds_config(session):
    client = ApiClient(BASE_URL + "/", "key", "secret", session=session)

    assert client.config.base_url == BASE_URL
    assert client.config.key == "key"
    assert client.config.secret == "secret"
    assert client.config.preview_url == BASE_URL
    assert client.version is ProtocolVersion.V3
    assert client.http.auth == HTTPBasicAuth("key", "secret")


def test_preview_url_override(session):
    client = ApiClient(BASE_URL, "key", "secret", preview_url=PREVIEW_URL, session=session)
    assert client.config.preview_url == PREVIEW_URL
    assert client.config.base_url == BASE_URL


def test_instances_are_independent(session):
    a = ApiClient(BASE_URL, "a", "1", session=session)
    b = ApiClient(PREVIEW_URL, "b", "2", version=ProtocolVersion.V1, session=session)

    assert a.config != b.config
    assert a.version is ProtocolVersion.V3
    assert b.http.auth == HTTPBasicAuth("b", "2")


def test_client_alias():
    assert Client is ApiClient


def test_context_manager_closes_session(session):
    with ApiClient(BASE_URL, "key", "secret", session=session):
        pass
    session.close.assert_called_once()


def test_unknown_version_rejected(session):
    with pytest.raises(ValueError):
        ApiClient(BASE_URL, "key", "secret", version=7, session=session)


@pytest.mark.parametrize(
    "version, trees, variables, preview",
    [
        (ProtocolVersion.V1, False, False, False),
        (ProtocolVersion.V2, True, True, False),
        (ProtocolVersion.V3, True, True, True),
    ],
)
def test_protocol_capabilities(version, trees, variables, preview):
    assert version.supports_trees is trees
    assert version.supports_variables is variables
    assert version.supports_preview is preview
