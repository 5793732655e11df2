import httpx

from app.client.services import contents

PAGE = {"data": [{"id": 1, "title": "One"}], "current_page": 1, "last_page": 1, "per_page": 15, "total": 1}


async def test_get_content_passes_page_query_and_filters(api, backend):
    backend.reply(200, PAGE)

    data = await contents.get_content(api, "?page=2", {"search": "one"})

    assert data == PAGE
    url = backend.last_request.url
    assert url.path == "/api/contents"
    assert url.params["page"] == "2"
    assert url.params["search"] == "one"


async def test_get_content_failure_returns_none(api, backend, notifier):
    backend.reply(500, {"message": "down"})

    assert await contents.get_content(api) is None
    assert notifier.last.title == "Server Error"


async def test_show_content(api, backend):
    backend.reply(200, {"id": 5, "title": "Five"})

    assert await contents.show_content(api, 5) == {"id": 5, "title": "Five"}
    assert backend.last_request.url.path == "/api/contents/5"


async def test_show_missing_content_returns_none(api, backend):
    backend.reply(404, {"message": "Content not found"})

    assert await contents.show_content(api, 5) is None


async def test_store_content_expects_created(api, backend):
    backend.reply(201, {"id": 9, "title": "New"})

    assert await contents.store_content(api, {"title": "New"}) == {"id": 9, "title": "New"}
    assert backend.last_request.method == "POST"


async def test_store_content_with_ok_instead_of_created_returns_none(api, backend):
    backend.reply(200, {"id": 9})

    assert await contents.store_content(api, {"title": "New"}) is None


async def test_store_content_sends_files_as_multipart(api, backend):
    backend.reply(201, {"id": 9, "image": "https://img"})

    await contents.store_content(api, {"title": "Pic", "image": ("pic.png", b"bytes", "image/png")})

    request = backend.last_request
    assert request.headers["content-type"].startswith("multipart/form-data")
    body = request.read()
    assert b'name="title"' in body
    assert b'filename="pic.png"' in body


async def test_update_content(api, backend):
    backend.reply(200, {"id": 3, "title": "Edited"})

    assert await contents.update_content(api, {"title": "Edited"}, 3) == {"id": 3, "title": "Edited"}
    assert backend.last_request.method == "PATCH"
    assert backend.last_request.url.path == "/api/contents/3"


async def test_update_content_validation_failure_returns_none(api, backend, notifier):
    backend.reply(422, {"errors": {"title": ["The title field is required."]}})

    assert await contents.update_content(api, {"title": ""}, 3) is None
    assert notifier.last.text == "The title field is required."


async def test_delete_content_returns_response(api, backend):
    backend.reply(200, {"message": "Content deleted successfully"})

    res = await contents.delete_content(api, 3)

    assert isinstance(res, httpx.Response)
    assert res.status_code == 200
    assert backend.last_request.method == "DELETE"


async def test_delete_content_network_failure_returns_none(api, backend):
    backend.drop_connection()

    assert await contents.delete_content(api, 3) is None


async def test_get_content_with_page_query_only(api, backend):
    backend.reply(200, PAGE)

    await contents.get_content(api, "?page=3&per_page=5")

    params = backend.last_request.url.params
    assert backend.last_request.url.path == "/api/contents"
    assert params["page"] == "3"
    assert params["per_page"] == "5"


async def test_get_content_with_empty_body_returns_none(api, backend):
    backend.reply(200)

    assert await contents.get_content(api) is None
