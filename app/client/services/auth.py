import logging

import httpx

from app.client.http import ApiClient
from app.client.services.common import expect

logger = logging.getLogger(__name__)

USER_FIELDS = ("id", "firstname", "lastname", "email")


def auth_payload(response: httpx.Response) -> dict:
    payload = response.json()
    if not isinstance(payload, dict) or not isinstance(payload.get("user"), dict):
        raise KeyError("user")
    return payload


def _remember(api: ApiClient, payload: dict):
    user = payload["user"]
    api.session.set_user({field: user.get(field) for field in USER_FIELDS})
    api.session.set_token(payload.get("token"))
    api.session.set_logged_in()
    return user


async def login(api: ApiClient, form: dict):
    """Sign in; on success the session holds the user and token."""
    result = await expect(api.post("api/login", form), 200, extract=auth_payload)
    if not result.ok:
        logger.error(f"Login error: {result.failure}")
        return None
    return _remember(api, result.value)


async def register(api: ApiClient, form: dict):
    """Create an account and sign in.

    Unlike the other calls, a failed request is re-raised so the caller can
    show field-level feedback.
    """
    try:
        response = await api.post("api/register", form)
    except httpx.HTTPError as exc:
        detail = exc.response.text if isinstance(exc, httpx.HTTPStatusError) else repr(exc)
        logger.error(f"Registration error: {detail}")
        raise

    if response.status_code != 201:
        return None
    user = _remember(api, auth_payload(response))
    api.navigator.push("/")
    return user


async def logout(api: ApiClient):
    result = await expect(api.post("api/logout", {}), 200, extract=lambda res: res)
    if not result.ok:
        logger.error(f"Logout error: {result.failure}")
        return None
    api.session.clear()
    api.navigator.push("/login")
    return result.value
