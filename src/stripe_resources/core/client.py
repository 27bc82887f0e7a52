"""
HTTP transport for the Stripe API.

Each call performs exactly one request, decodes the JSON body, checks the
``object`` tag and parses the result into the requested model. There are no
retries; every failure is raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import requests

from .config import ClientConfig
from .encoding import Pairs, encode_params
from .errors import ParseError, TransportError, api_error_from_response
from .objects import StripeModel, check_object_tag
from .params import Params

__all__ = ["Client", "ParamsLike"]

ModelT = TypeVar("ModelT", bound=StripeModel)
ParamsLike = Union[Params, Mapping[str, Any], None]


def _encode(params: ParamsLike) -> Optional[Pairs]:
    if params is None:
        return None
    payload = params.to_payload() if isinstance(params, Params) else dict(params)
    return encode_params(payload) or None


def _error_body(response: requests.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {"error": {"message": response.text}}
    if not isinstance(body, dict):
        return {"error": {"message": str(body)}}
    return body


def _decode(response: requests.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(
            f"Failed to parse JSON from {url}: {response.text[:200]}"
        ) from exc


class Client:
    """
    Thin wrapper around a :class:`requests.Session` bound to one configuration.

    The session can be shared between clients; authentication and headers are
    sent per request so a supplied session is never modified.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def get(self, path: str, into: Type[ModelT]) -> ModelT:
        return self._request("GET", path, into)

    def get_query(self, path: str, params: ParamsLike, into: Type[ModelT]) -> ModelT:
        return self._request("GET", path, into, query=_encode(params))

    def post_form(self, path: str, params: ParamsLike, into: Type[ModelT]) -> ModelT:
        return self._request("POST", path, into, form=_encode(params))

    def delete(self, path: str, into: Type[ModelT]) -> ModelT:
        return self._request("DELETE", path, into)

    def delete_query(self, path: str, params: ParamsLike, into: Type[ModelT]) -> ModelT:
        return self._request("DELETE", path, into, query=_encode(params))

    def _request(
        self,
        method: str,
        path: str,
        into: Type[ModelT],
        *,
        query: Optional[Pairs] = None,
        form: Optional[Pairs] = None,
    ) -> ModelT:
        url = self.config.url(path)
        logging.info("Stripe %s %s", method, path)
        try:
            response = self.session.request(
                method,
                url,
                params=query,
                data=form,
                headers=self.config.headers(),
                auth=(self.config.api_key, ""),
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            logging.error("Stripe %s %s failed before a response: %s", method, path, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        request_id = response.headers.get("Request-Id")
        logging.debug(
            "Stripe %s %s answered %s (Request-Id: %s)",
            method,
            path,
            response.status_code,
            request_id or "N/A",
        )

        if response.status_code >= 400:
            error = api_error_from_response(
                response.status_code,
                _error_body(response),
                request_id=request_id,
            )
            logging.error("Stripe %s %s failed: %s", method, path, error)
            raise error

        payload = _decode(response, url)
        check_object_tag(into, payload)
        return into.parse(payload)
