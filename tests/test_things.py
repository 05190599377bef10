"""Things client."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from mainflux_sdk.adapters.things import Things
from mainflux_sdk.core.domain.models import Credentials, PageMetadata, Thing
from mainflux_sdk.core.errors import SDKError

from .conftest import THINGS_URL, TOKEN, request_json

THING_ID = "bb7edb32-2eac-4aad-aebe-ed96fe073879"
THING_JSON = {
    "id": THING_ID,
    "name": "thermometer",
    "credentials": {"secret": "c02ff576-ccd5-40f6-ba5f-c85377aad529"},
    "tags": ["lab"],
    "status": "enabled",
}


@pytest.fixture
def things() -> Things:
    return Things(THINGS_URL)


@pytest.mark.asyncio
async def test_create(things: Things, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{THINGS_URL}/things").mock(return_value=httpx.Response(201, json=THING_JSON))

    thing = await things.create(Thing(name="thermometer"), TOKEN)

    assert request_json(route.calls.last.request) == {"name": "thermometer"}
    assert thing.id == THING_ID
    assert thing.credentials is not None and thing.credentials.secret is not None


@pytest.mark.asyncio
async def test_create_things_posts_a_list(things: Things, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{THINGS_URL}/things/bulk").mock(
        return_value=httpx.Response(200, json={"things": [THING_JSON, {**THING_JSON, "id": "t2"}]})
    )

    created = await things.create_things([Thing(name="a"), Thing(name="b")], TOKEN)

    assert request_json(route.calls.last.request) == [{"name": "a"}, {"name": "b"}]
    assert [t.id for t in created] == [THING_ID, "t2"]


@pytest.mark.asyncio
async def test_create_things_accepts_bare_list(things: Things, respx_mock: MockRouter) -> None:
    respx_mock.post(f"{THINGS_URL}/things/bulk").mock(return_value=httpx.Response(200, json=[THING_JSON]))

    created = await things.create_things([Thing(name="a")], TOKEN)

    assert created[0].name == "thermometer"


@pytest.mark.asyncio
async def test_things_and_thing(things: Things, respx_mock: MockRouter) -> None:
    listing = respx_mock.get(f"{THINGS_URL}/things").mock(
        return_value=httpx.Response(200, json={"total": 1, "offset": 0, "limit": 10, "things": [THING_JSON]})
    )
    respx_mock.get(f"{THINGS_URL}/things/{THING_ID}").mock(return_value=httpx.Response(200, json=THING_JSON))

    page = await things.things(PageMetadata(offset=0, limit=10), TOKEN)
    thing = await things.thing(THING_ID, TOKEN)

    assert dict(listing.calls.last.request.url.params) == {"offset": "0", "limit": "10"}
    assert page.things[0].id == THING_ID
    assert thing.tags == ["lab"]


@pytest.mark.asyncio
async def test_update_variants(things: Things, respx_mock: MockRouter) -> None:
    update = respx_mock.patch(f"{THINGS_URL}/things/{THING_ID}").mock(
        return_value=httpx.Response(200, json=THING_JSON)
    )
    secret = respx_mock.patch(f"{THINGS_URL}/things/{THING_ID}/secret").mock(
        return_value=httpx.Response(200, json=THING_JSON)
    )
    tags = respx_mock.patch(f"{THINGS_URL}/things/{THING_ID}/tags").mock(
        return_value=httpx.Response(200, json=THING_JSON)
    )

    await things.update(Thing(id=THING_ID, name="renamed"), TOKEN)
    await things.update_thing_secret(Thing(id=THING_ID, credentials=Credentials(secret="new_secret")), TOKEN)
    await things.update_thing_tags(Thing(id=THING_ID, tags=["t1", "t2"]), TOKEN)

    assert request_json(update.calls.last.request) == {"id": THING_ID, "name": "renamed"}
    assert request_json(secret.calls.last.request) == {"secret": "new_secret"}
    assert request_json(tags.calls.last.request) == {"tags": ["t1", "t2"]}


@pytest.mark.asyncio
async def test_enable_disable(things: Things, respx_mock: MockRouter) -> None:
    respx_mock.post(f"{THINGS_URL}/things/{THING_ID}/disable").mock(
        return_value=httpx.Response(200, json={**THING_JSON, "status": "disabled"})
    )
    respx_mock.post(f"{THINGS_URL}/things/{THING_ID}/enable").mock(
        return_value=httpx.Response(200, json=THING_JSON)
    )

    assert (await things.disable(Thing(id=THING_ID), TOKEN)).status == "disabled"
    assert (await things.enable(Thing(id=THING_ID), TOKEN)).status == "enabled"


@pytest.mark.asyncio
async def test_things_by_channel(things: Things, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{THINGS_URL}/channels/ch-1/things").mock(
        return_value=httpx.Response(200, json={"total": 1, "things": [THING_JSON]})
    )

    page = await things.things_by_channel("ch-1", PageMetadata(offset=0, limit=5), TOKEN)

    assert route.calls.last.request.url.params["limit"] == "5"
    assert page.total == 1


@pytest.mark.asyncio
async def test_things_permissions(things: Things, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{THINGS_URL}/things/{THING_ID}/permissions").mock(
        return_value=httpx.Response(200, json={"permissions": ["admin", "view"]})
    )

    thing = await things.things_permissions(THING_ID, TOKEN)

    assert thing.permissions == ["admin", "view"]


@pytest.mark.asyncio
async def test_identify_thing_uses_thing_key(things: Things, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{THINGS_URL}/identify").mock(
        return_value=httpx.Response(200, json={"id": THING_ID})
    )

    identity = await things.identify_thing("thing-key")

    assert route.calls.last.request.headers["Authorization"] == "Thing thing-key"
    assert identity.id == THING_ID


@pytest.mark.asyncio
async def test_share_and_unshare(things: Things, respx_mock: MockRouter) -> None:
    share = respx_mock.post(f"{THINGS_URL}/things/{THING_ID}/share").mock(return_value=httpx.Response(200))
    unshare = respx_mock.post(f"{THINGS_URL}/things/{THING_ID}/unshare").mock(
        return_value=httpx.Response(204)
    )

    shared = await things.share_thing(THING_ID, "editor", ["u1", "u2"], TOKEN)
    unshared = await things.unshare_thing(THING_ID, "editor", ["u1"], TOKEN)

    assert request_json(share.calls.last.request) == {"relation": "editor", "user_ids": ["u1", "u2"]}
    assert request_json(unshare.calls.last.request) == {"relation": "editor", "user_ids": ["u1"]}
    assert shared.message == "Thing shared successfully"
    assert unshared.status == 204


@pytest.mark.asyncio
async def test_list_thing_users(things: Things, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{THINGS_URL}/things/{THING_ID}/users").mock(
        return_value=httpx.Response(200, json={"total": 1, "users": [{"id": "u1", "name": "ann"}]})
    )

    page = await things.list_thing_users(THING_ID, PageMetadata(offset=0, limit=10), TOKEN)

    assert page.users[0].name == "ann"


@pytest.mark.asyncio
async def test_delete_thing(things: Things, respx_mock: MockRouter) -> None:
    respx_mock.delete(f"{THINGS_URL}/things/{THING_ID}").mock(return_value=httpx.Response(204))

    result = await things.delete_thing(THING_ID, TOKEN)

    assert (result.status, result.message) == (204, "Thing deleted successfully")


@pytest.mark.asyncio
async def test_unauthorized(things: Things, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{THINGS_URL}/things/{THING_ID}").mock(
        return_value=httpx.Response(401, json={"message": "missing or invalid credentials provided"})
    )

    with pytest.raises(SDKError) as exc_info:
        await things.thing(THING_ID, "expired")

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_secret_and_tags_updates_skip_missing_values(things: Things, respx_mock: MockRouter) -> None:
    secret = respx_mock.patch(f"{THINGS_URL}/things/{THING_ID}/secret").mock(
        return_value=httpx.Response(200, json=THING_JSON)
    )
    tags = respx_mock.patch(f"{THINGS_URL}/things/{THING_ID}/tags").mock(
        return_value=httpx.Response(200, json=THING_JSON)
    )

    await things.update_thing_secret(Thing(id=THING_ID), TOKEN)
    await things.update_thing_tags(Thing(id=THING_ID), TOKEN)

    assert request_json(secret.calls.last.request) == {}
    assert request_json(tags.calls.last.request) == {}
