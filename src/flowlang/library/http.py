"""
The ``HTTP`` builtin module.
"""

from __future__ import annotations

import base64
import json
import logging
import urllib.parse
from typing import Any, Dict, Optional

from ..observability import redact_headers, redact_url
from ..runtime.cache import build_response_cache_key
from ..runtime.convert import to_flow
from ..runtime.objects import HTTP_ERROR, FlowDict, FlowNull, FlowObject, FlowString, FlowStruct
from .base import LibraryModule, method

logger = logging.getLogger("flowlang.http")

DEFAULT_HEADERS = {
    "User-Agent": "Flow",
    "X-Powered-By": "Reflow's Flow",
}
CACHEABLE_METHODS = {"GET"}


class HTTP(LibraryModule):
    module_name = "HTTP"
    doc_prefix = "http"

    @method(url="string", parameters="dict", headers="dict", basic_auth="dict")
    def get(self, url, parameters=None, headers=None, basic_auth=None):
        return self._send("GET", url, parameters=parameters, headers=headers, basic_auth=basic_auth)

    @method(url="string", data="dict", json_data="dict", headers="dict", basic_auth="dict")
    def post(self, url, data=None, json_data=None, headers=None, basic_auth=None):
        return self._send("POST", url, data=data, json_data=json_data, headers=headers, basic_auth=basic_auth)

    @method(url="string", data="dict", json_data="dict", headers="dict", basic_auth="dict")
    def put(self, url, data=None, json_data=None, headers=None, basic_auth=None):
        return self._send("PUT", url, data=data, json_data=json_data, headers=headers, basic_auth=basic_auth)

    @method(url="string", parameters="dict", headers="dict", basic_auth="dict")
    def delete(self, url, parameters=None, headers=None, basic_auth=None):
        return self._send("DELETE", url, parameters=parameters, headers=headers, basic_auth=basic_auth)

    @method(
        method="string",
        url="string",
        parameters="dict",
        data="dict",
        json_data="dict",
        headers="dict",
        basic_auth="dict",
    )
    def request(self, method, url, parameters=None, data=None, json_data=None, headers=None, basic_auth=None):
        self.expect(method, FlowString, "method", "string")
        return self._send(
            method.text.upper(),
            url,
            parameters=parameters,
            data=data,
            json_data=json_data,
            headers=headers,
            basic_auth=basic_auth,
        )

    def _optional_dict(self, value: Optional[FlowObject], parameter: str) -> Dict[str, Any]:
        if value is None or isinstance(value, FlowNull):
            return {}
        self.expect(value, FlowDict, parameter, "dict")
        return value.to_json()

    def _send(
        self,
        method_name: str,
        url: FlowObject,
        *,
        parameters: Optional[FlowObject] = None,
        data: Optional[FlowObject] = None,
        json_data: Optional[FlowObject] = None,
        headers: Optional[FlowObject] = None,
        basic_auth: Optional[FlowObject] = None,
    ) -> FlowStruct:
        self.expect(url, FlowString, "url", "string")
        target = url.text
        query = self._optional_dict(parameters, "parameters")
        if query:
            separator = "&" if urllib.parse.urlsplit(target).query else "?"
            target = f"{target}{separator}{urllib.parse.urlencode(query, doseq=True)}"

        request_headers = dict(DEFAULT_HEADERS)
        request_headers.update({str(key): str(value) for key, value in self._optional_dict(headers, "headers").items()})
        auth = self._optional_dict(basic_auth, "basic_auth")
        if auth:
            raw = f"{auth.get('username', '')}:{auth.get('password', '')}".encode("utf-8")
            request_headers["Authorization"] = "Basic " + base64.b64encode(raw).decode("utf-8")

        body: bytes | None = None
        json_payload = self._optional_dict(json_data, "json_data")
        form_payload = self._optional_dict(data, "data")
        if json_payload:
            body = json.dumps(json_payload).encode("utf-8")
            request_headers.setdefault("Content-Type", "application/json")
        elif form_payload:
            body = urllib.parse.urlencode(form_payload, doseq=True).encode("utf-8")
            request_headers.setdefault("Content-Type", "application/x-www-form-urlencoded")

        status, response_headers, text = self._perform(method_name, target, request_headers, body)
        return self._response(status, response_headers, text)

    def _perform(self, method_name: str, url: str, headers: Dict[str, str], body: bytes | None):
        interpreter = self.interpreter
        cache = interpreter.response_cache if method_name in CACHEABLE_METHODS else None
        cache_key = build_response_cache_key(method_name, url, headers, body) if cache is not None else None
        if cache is not None:
            cached = cache.get(cache_key)
            if cached is not None:
                logger.debug("HTTP %s %s served from cache", method_name, redact_url(url))
                return cached
        logger.info("HTTP %s %s headers=%s", method_name, redact_url(url), redact_headers(headers))
        try:
            result = interpreter.http_client(method_name, url, headers, body, interpreter.http_timeout)
        except (OSError, ValueError) as exc:
            # URLError, socket timeouts and malformed urls
            logger.warning("HTTP %s %s failed: %s", method_name, redact_url(url), exc)
            raise self.error(HTTP_ERROR, "runtime.http_failure", url=redact_url(url), reason=str(exc)) from exc
        if cache is not None and 200 <= result[0] < 300:
            cache.set(cache_key, result)
        return result

    def _response(self, status: int, headers: Dict[str, str], text: str) -> FlowStruct:
        try:
            payload = to_flow(json.loads(text), self.context) if text else FlowNull(self.context)
        except ValueError:
            payload = FlowNull(self.context)
        return FlowStruct(
            self.context,
            "HTTPResponse",
            {
                "status_code": to_flow(status, self.context),
                "content": FlowString(self.context, text),
                "json": payload,
                "headers": to_flow(dict(headers), self.context),
            },
        )
