from typing import Optional

import httpx

from app.client.http import ApiClient
from app.client.services.common import expect, split_form

CONTENTS = "api/contents"


async def get_content(api: ApiClient, page_query: str = "", filters: Optional[dict] = None):
    # the page query and the filters travel together in one query string
    params = {**httpx.QueryParams(page_query.lstrip("?")), **(filters or {})}
    result = await expect(api.get(CONTENTS, params=params or None), 200)
    return result.value


async def show_content(api: ApiClient, id):
    result = await expect(api.get(f"{CONTENTS}/{id}"), 200)
    return result.value


async def store_content(api: ApiClient, form: dict):
    data, files = split_form(form)
    result = await expect(api.post(CONTENTS, data, files=files or None), 201)
    return result.value


async def update_content(api: ApiClient, form: dict, id):
    data, files = split_form(form)
    result = await expect(api.patch(f"{CONTENTS}/{id}", data, files=files or None), 200)
    return result.value


async def delete_content(api: ApiClient, id):
    result = await expect(api.destroy(f"{CONTENTS}/{id}"), 200, extract=lambda res: res)
    return result.value
