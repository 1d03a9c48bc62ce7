"""Small HTTP client that logs its traffic to a file."""

from __future__ import annotations

import json
import logging
import uuid
import warnings
from collections.abc import Mapping
from typing import Any

import requests

from skeleton.merger import to_jsonable

ALLOWED_METHODS = frozenset({"get", "post", "delete", "patch", "put", "options", "head"})
DEFAULT_TIMEOUT = 15
_LOG_LIMIT = 1024
_LOG_LIMIT_SUFFIX = "... (log first 1KB only)"


class RestClient:
    """One configurable HTTP call; requests and responses are logged to ``log_file``."""

    def __init__(
        self,
        log_file: str,
        url: str = "",
        method: str | None = None,
        timeout: int | None = None,
        headers: Mapping[str, str] | None = None,
        request: Any = None,
        debug: bool | None = None,
    ) -> None:
        self._handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        self._handler.setFormatter(
            logging.Formatter("%(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S")
        )
        self.log = logging.Logger(f"rest-client:{log_file}")
        self.log.setLevel(logging.INFO)
        self.log.addHandler(self._handler)

        self.url = url
        self._method = "GET"
        if method is not None:
            self.method = method
        self._timeout = DEFAULT_TIMEOUT
        if timeout is not None:
            self.timeout = timeout
        self.headers: dict[str, str] = {}
        for name, value in (headers or {}).items():
            self.add_header(name, value)
        self.request = request
        self.debug = debug

    @property
    def method(self) -> str:
        return self._method

    @method.setter
    def method(self, method: str) -> None:
        self._method = method if method.lower() in ALLOWED_METHODS else "get"

    @property
    def timeout(self) -> int:
        return self._timeout

    @timeout.setter
    def timeout(self, timeout: int) -> None:
        self._timeout = DEFAULT_TIMEOUT if timeout <= 1 else timeout

    def add_header(self, name: str, value: str) -> RestClient:
        """Set header ``name`` and return the client."""
        self.headers[name] = value
        return self

    def _encode_body(self) -> tuple[bytes, str]:
        """Return the body to send and the text to log for it."""
        request = self.request
        if isinstance(request, str):
            return request.encode("utf-8"), request
        if isinstance(request, (bytes, bytearray)):
            return bytes(request), ""
        read = getattr(request, "read", None)
        if callable(read):
            data = read()
            return (data.encode("utf-8") if isinstance(data, str) else bytes(data)), ""
        try:
            text = json.dumps(to_jsonable(request), separators=(",", ":"))
        except TypeError:
            return b"", ""
        return text.encode("utf-8"), text

    def execute(self) -> tuple[str, int]:
        """Send the request; return the body and the status (0 when no reply was had)."""
        request_id = str(uuid.uuid4())
        body, logged = self._encode_body()
        method = self.method or "GET"

        try:
            prepared = requests.Request(
                method.upper(),
                self.url,
                data=body,
                headers={**self.headers, "Connection": "close"},
            ).prepare()
        except (requests.RequestException, ValueError) as exc:
            self.log.info("Error creating request : %s", exc)
            return f"Error creating request : {exc}", 0

        debug = True if self.debug is None else self.debug
        if debug:
            if len(logged) > _LOG_LIMIT:
                logged = logged[:_LOG_LIMIT] + _LOG_LIMIT_SUFFIX
            self.log_struct(
                {"REQUESTID": request_id, "URL": self.url, "METHOD": method, "REQUEST": logged},
                "RESTCLIENT REQUEST LOG",
            )

        try:
            with requests.Session() as session, warnings.catch_warnings():
                warnings.simplefilter("ignore")
                response = session.send(prepared, timeout=self.timeout, verify=False)
        except requests.RequestException as exc:
            self.log.info("Call URL Failed : %s", exc)
            return f"Call URL Failed : {exc}", 0

        text = response.content.decode("utf-8", errors="replace")
        if debug:
            self.log_struct(
                {"REQUESTID": request_id, "RESPONSE": text}, "REST CLIENT RESPONSE LOG"
            )
        return text, response.status_code

    def log_struct(self, data: Any, message: str | None = None) -> str:
        """Log ``data`` as JSON, prefixed by ``message``; return the logged line."""
        prefix = f"{message} : " if message else ""
        line = prefix + json.dumps(to_jsonable(data), sort_keys=True, separators=(",", ":"))
        self.log.info(line)
        return line

    def close(self) -> None:
        """Release the log file."""
        self.log.removeHandler(self._handler)
        self._handler.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()