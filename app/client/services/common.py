import logging
from typing import Awaitable, Callable, Optional

import httpx

from app.client.result import ApiResult

logger = logging.getLogger(__name__)


async def expect(
    call: Awaitable[httpx.Response],
    status: int,
    extract: Optional[Callable[[httpx.Response], object]] = None,
) -> ApiResult:
    """Await `call` and accept only `status`; anything else becomes a failure."""
    try:
        response = await call
    except httpx.HTTPError as exc:
        logger.debug(f"Request failed: {exc!r}")
        return ApiResult.from_exception(exc)

    if response.status_code != status:
        return ApiResult.unexpected_status(response.status_code)
    try:
        value = extract(response) if extract else response.json()
    except (ValueError, KeyError, TypeError) as exc:
        logger.debug(f"Unreadable response body: {exc!r}")
        return ApiResult.malformed(response.status_code, exc)
    return ApiResult.success(value)


def split_form(form: Optional[dict]):
    """Separate file uploads from plain fields so the request can go out as multipart."""
    data, files = {}, {}
    for key, value in (form or {}).items():
        if isinstance(value, (bytes, tuple)) or hasattr(value, "read"):
            files[key] = value
        else:
            data[key] = value
    return data, files
