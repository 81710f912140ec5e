import io
import json
from unittest.mock import MagicMock

import requests
import urllib3
from requests.structures import CaseInsensitiveDict

BASE_URL = "https://docubot.test"
PREVIEW_URL = "https://preview.docubot.test"


def make_response(status: int = 200, body=b"", headers: dict | None = None, url: str = BASE_URL) -> requests.Response:
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.encoding = "utf-8"
    resp.headers = CaseInsensitiveDict(headers or {})
    resp.raw = urllib3.HTTPResponse(
        body=io.BytesIO(body), status=status, headers=headers or {}, preload_content=False
    )
    resp.close = MagicMock(wraps=resp.close)
    return resp


def last_request(session) -> tuple[str, str, dict]:
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs
