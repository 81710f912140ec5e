import os
import re
from collections.abc import Iterator

import requests

_FILENAME_RE = re.compile(r'filename\*?=(?:UTF-8\'\')?"?([^";]+)"?', re.IGNORECASE)


class DocumentStream:
    """
    Open document body handed to the caller.

    The caller owns the underlying connection and must close it, either
    explicitly, by using the stream as a context manager, or via save().
    """

    def __init__(self, response: requests.Response):
        self._response = response
        self._closed = False

    def __enter__(self) -> "DocumentStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[bytes]:
        return self.iter_content()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def content_type(self) -> str | None:
        return self._response.headers.get("Content-Type")

    @property
    def filename(self) -> str | None:
        """File name from Content-Disposition, if the service sent one."""
        disposition = self._response.headers.get("Content-Disposition")
        if not disposition:
            return None
        match = _FILENAME_RE.search(disposition)
        return match.group(1).strip() if match else None

    def read(self, size: int = -1) -> bytes:
        if self._closed:
            raise ValueError("read from closed document stream")
        if size is None or size < 0:
            return self._response.raw.read(decode_content=True)
        return self._response.raw.read(size, decode_content=True)

    def iter_content(self, chunk_size: int = 64 * 1024) -> Iterator[bytes]:
        if self._closed:
            raise ValueError("read from closed document stream")
        return self._response.iter_content(chunk_size=chunk_size)

    def save(self, path: str | os.PathLike, chunk_size: int = 64 * 1024) -> int:
        """Write the whole body to path, close the stream, and return bytes written."""
        written = 0
        try:
            with open(path, "wb") as fh:
                for chunk in self.iter_content(chunk_size):
                    fh.write(chunk)
                    written += len(chunk)
        finally:
            self.close()
        return written

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._response.close()
