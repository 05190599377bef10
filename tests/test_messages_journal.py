"""Messages and journal clients."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from mainflux_sdk.adapters.journal import Journal
from mainflux_sdk.adapters.messages import SENML_CONTENT_TYPE, Messages
from mainflux_sdk.core.domain.models import JournalsPageMetadata, MessagesPageMetadata, SenMLMessage
from mainflux_sdk.core.errors import SDKError

from .conftest import HTTP_ADAPTER_URL, JOURNALS_URL, READERS_URL, TOKEN, request_json

CHANNEL_ID = "ch-1"
SENML = '[{"bn":"some-base-name:","bt":1.276020076001e+09,"bu":"A","bver":5,"n":"voltage","u":"V","v":120.1}]'


@pytest.fixture
def messages() -> Messages:
    return Messages(HTTP_ADAPTER_URL, readers_url=READERS_URL)


@pytest.mark.asyncio
async def test_send_raw_senml(messages: Messages, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{HTTP_ADAPTER_URL}/channels/{CHANNEL_ID}/messages").mock(
        return_value=httpx.Response(202)
    )

    result = await messages.send(CHANNEL_ID, SENML, "thing-key")

    request = route.calls.last.request
    assert request.content == SENML.encode()
    assert request.headers["Content-Type"] == SENML_CONTENT_TYPE
    assert request.headers["Authorization"] == "Thing thing-key"
    assert (result.status, result.message) == (202, "Message sent successfully")


@pytest.mark.asyncio
async def test_send_records_on_subtopic(messages: Messages, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{HTTP_ADAPTER_URL}/channels/{CHANNEL_ID}/messages/floor/1").mock(
        return_value=httpx.Response(202)
    )

    await messages.send(
        CHANNEL_ID,
        [SenMLMessage(name="temp", unit="C", value=21.5), {"n": "hum", "v": 40}],
        "thing-key",
        subtopic="/floor/1/",
    )

    assert request_json(route.calls.last.request) == [
        {"name": "temp", "unit": "C", "value": 21.5},
        {"n": "hum", "v": 40},
    ]


@pytest.mark.asyncio
async def test_send_with_wrong_key(messages: Messages, respx_mock: MockRouter) -> None:
    respx_mock.post(f"{HTTP_ADAPTER_URL}/channels/{CHANNEL_ID}/messages").mock(
        return_value=httpx.Response(403, json={"message": "failed to perform authorization over the entity"})
    )

    with pytest.raises(SDKError) as exc_info:
        await messages.send(CHANNEL_ID, SENML, "bad-key")

    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_read_goes_to_readers(messages: Messages, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{READERS_URL}/channels/{CHANNEL_ID}/messages").mock(
        return_value=httpx.Response(
            200,
            json={
                "total": 1,
                "offset": 0,
                "limit": 10,
                "messages": [{"channel": CHANNEL_ID, "publisher": "t1", "name": "voltage", "value": 120.1}],
            },
        )
    )

    page = await messages.read(
        CHANNEL_ID, MessagesPageMetadata(offset=0, limit=10, from_=1.5, subtopic="floor"), TOKEN
    )

    request = route.calls.last.request
    assert dict(request.url.params) == {"offset": "0", "limit": "10", "from": "1.5", "subtopic": "floor"}
    assert request.headers["Authorization"] == f"Bearer {TOKEN}"
    assert page.messages[0].value == 120.1


@pytest.mark.asyncio
async def test_read_defaults_to_adapter_url(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{HTTP_ADAPTER_URL}/channels/{CHANNEL_ID}/messages").mock(
        return_value=httpx.Response(200, json={"total": 0, "messages": []})
    )

    page = await Messages(HTTP_ADAPTER_URL).read(CHANNEL_ID, MessagesPageMetadata(), TOKEN)

    assert route.called
    assert page.messages == []


@pytest.mark.asyncio
async def test_journal_is_domain_scoped(respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{JOURNALS_URL}/dom-1/journal/thing/t1").mock(
        return_value=httpx.Response(
            200,
            json={
                "total": 1,
                "journals": [
                    {
                        "operation": "thing.create",
                        "occurred_at": "2026-10-18T09:00:00Z",
                        "attributes": {"id": "t1"},
                    }
                ],
            },
        )
    )

    page = await Journal(JOURNALS_URL).journal(
        "thing",
        "t1",
        "dom-1",
        JournalsPageMetadata(offset=0, limit=10, from_=100, with_attributes=True, dir="desc"),
        TOKEN,
    )

    assert dict(route.calls.last.request.url.params) == {
        "offset": "0",
        "limit": "10",
        "from": "100",
        "with_attributes": "true",
        "dir": "desc",
    }
    assert page.journals[0].operation == "thing.create"
    assert page.journals[0].occurred_at is not None
