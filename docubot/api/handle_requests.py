"""
HTTP request handler shared by every Docubot endpoint.
Attaches Basic auth and content type, classifies responses by status and
decodes bodies, releasing the connection on every path except a handed-off
document stream.
"""
import logging
from typing import Any, Callable, TypeVar

import requests
from pyrate_limiter import Duration, Limiter, MemoryListBucket, RequestRate
from requests.auth import HTTPBasicAuth
from requests_ratelimiter import LimiterSession

from docubot.api.stream import DocumentStream
from docubot.data.models.responses import MessageResponseError
from docubot.errors import DocubotAPIError, DocubotDecodeError

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestHandler:
    def __init__(
        self,
        key: str,
        secret: str,
        session: requests.Session | None = None,
        requests_per_second: int | None = None,
        timeout: float | None = None,
    ):
        self.auth = HTTPBasicAuth(key, secret)
        self.timeout = timeout
        self.session = session if session is not None else self._build_session(requests_per_second)

    @staticmethod
    def _build_session(requests_per_second: int | None) -> requests.Session:
        if not requests_per_second:
            return requests.Session()
        limiter = Limiter(
            RequestRate(int(requests_per_second), Duration.SECOND),
            bucket_class=MemoryListBucket,
        )
        return LimiterSession(limiter=limiter, per_host=False)

    def close(self) -> None:
        self.session.close()

    def send(
        self,
        method: str,
        url: str,
        params: dict | None = None,
        json: dict | None = None,
        stream: bool = False,
    ) -> requests.Response:
        """
        Issue one request and return the response if its status is 2xx.
        Error responses are closed and raised as DocubotAPIError; transport
        errors propagate untouched.
        """
        content_type = JSON_CONTENT_TYPE if json is not None else FORM_CONTENT_TYPE
        logging.debug(f"Docubot request: {method} {url} params={params}")
        resp = self.session.request(
            method,
            url,
            params=params,
            json=json,
            headers={"Content-Type": content_type},
            auth=self.auth,
            stream=stream,
            timeout=self.timeout,
        )
        logging.debug(f"Docubot response: {method} {url} -> {resp.status_code}")
        if resp.status_code < 200 or resp.status_code > 299:
            self._raise_for_error(resp)
        return resp

    def _raise_for_error(self, resp: requests.Response):
        try:
            try:
                payload = resp.json()
            except ValueError:
                payload = None
            error = MessageResponseError.from_dict(payload)
        finally:
            resp.close()
        err = DocubotAPIError(resp.status_code, error.first_error(), error.errors)
        logging.warning(f"Docubot error response {resp.status_code} from {resp.url}: {err.message}")
        raise err

    def _decode(self, resp: requests.Response, decoder: Callable[[Any], T]) -> T:
        try:
            payload = resp.json()
            return decoder(payload)
        except (ValueError, TypeError, AttributeError) as e:
            raise DocubotDecodeError(f"Failed to decode response from {resp.url}: {e}") from e
        finally:
            resp.close()

    def get_json(self, url: str, decoder: Callable[[Any], T], params: dict | None = None) -> T:
        """GET url and decode the JSON body with decoder."""
        return self._decode(self.send("GET", url, params=params), decoder)

    def post_json(self, url: str, decoder: Callable[[Any], T], json: dict) -> T:
        """POST a JSON body to url and decode the JSON response with decoder."""
        return self._decode(self.send("POST", url, json=json), decoder)

    def get_stream(self, url: str, params: dict | None = None) -> DocumentStream:
        return DocumentStream(self.send("GET", url, params=params, stream=True))

    def post_stream(self, url: str, json: dict) -> DocumentStream:
        return DocumentStream(self.send("POST", url, json=json, stream=True))
