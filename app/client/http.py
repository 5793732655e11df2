"""Shared HTTP client for the content API.

Every request goes through two hooks:

* the request hook adds ``Authorization: Bearer <token>`` when the session
  holds a token;
* the response handling classifies failures (see ``app.client.errors``),
  fires the matching notification or navigation, and re-raises the original
  ``httpx`` exception. Successful responses pass through untouched.
"""

import logging
from typing import Optional

import httpx

from app.core import config
from app.client import errors
from app.client.notify import Navigator, Notifier
from app.client.session import SessionContext

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "X-Requested-With": "XMLHttpRequest",
    "Accept": "application/json",
}

LOGIN_ROUTE = "login"


class ApiClient:

    def __init__(
        self,
        session: SessionContext,
        notifier: Optional[Notifier] = None,
        navigator: Optional[Navigator] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.notifier = notifier or Notifier()
        self.navigator = navigator or Navigator()
        self._handlers = {
            errors.NetworkUnreachable: self._on_network_error,
            errors.Unauthenticated: self._on_unauthenticated,
            errors.BadRequest: self._on_bad_request,
            errors.Forbidden: self._on_forbidden,
            errors.ValidationFailed: self._on_validation_failed,
            errors.ServerError: self._on_server_error,
            errors.NotFound: self._ignore,
            errors.Unclassified: self._ignore,
        }
        self._client = httpx.AsyncClient(
            base_url=base_url or config.BACKEND_URL,
            headers=DEFAULT_HEADERS,
            transport=transport,
            event_hooks={
                "request": [self._attach_token],
                "response": [self._check_response],
            },
        )

    async def _attach_token(self, request: httpx.Request):
        # credentials are never sent, only the bearer token
        request.headers.pop("Cookie", None)
        token = self.session.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _check_response(self, response: httpx.Response):
        if response.is_success:
            return
        await response.aread()
        self.handle_failure(errors.classify(response))
        response.raise_for_status()

    def handle_failure(self, failure: errors.ApiFailure):
        self._handlers[type(failure)](failure)

    def _on_network_error(self, failure):
        self.notifier.notify("Network Error", "Could not connect to the server.")

    def _on_unauthenticated(self, failure):
        self.navigator.push(LOGIN_ROUTE)
        self.notifier.notify("Unauthenticated", "You are not logged in")

    def _on_bad_request(self, failure):
        self.notifier.notify("", failure.message or "")

    def _on_forbidden(self, failure):
        self.notifier.notify("Forbidden", failure.message or "")

    def _on_validation_failed(self, failure):
        text = "\n".join(failure.messages())
        self.notifier.notify("Validation Error", text or errors.VALIDATION_FALLBACK)

    def _on_server_error(self, failure):
        self.notifier.notify("Server Error", failure.message or errors.SERVER_ERROR_FALLBACK)

    def _ignore(self, failure):
        pass

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.TransportError:
            self.handle_failure(errors.NetworkUnreachable())
            raise

    async def post(self, path, data=None, headers=None, files=None):
        if files:
            return await self.request("POST", path, data=data, files=files, headers=headers)
        return await self.request("POST", path, json=data, headers=headers)

    async def get(self, path, params=None):
        return await self.request("GET", path, params=params)

    async def patch(self, path, data=None, files=None):
        if files:
            return await self.request("PATCH", path, data=data, files=files)
        return await self.request("PATCH", path, json=data)

    async def destroy(self, path):
        return await self.request("DELETE", path)

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()


def create_client(
    session: SessionContext,
    notifier: Optional[Notifier] = None,
    navigator: Optional[Navigator] = None,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ApiClient:
    return ApiClient(
        session,
        notifier=notifier,
        navigator=navigator,
        base_url=base_url,
        transport=transport,
    )
