"""Tests for the DummyTransport test helper."""

import httpx
import pytest

from mondoconnect.common.transport import OutgoingRequest, Transport
from mondoconnect.testing import DummyResponse, DummyTransport, TestDataFactory

URL = httpx.URL("https://api.test.example.com/v1/apps")


class TestDummyTransport:
    def test_satisfies_protocol(self):
        assert isinstance(DummyTransport(), Transport)

    @pytest.mark.asyncio
    async def test_responses_in_order_then_default(self):
        transport = DummyTransport(
            DummyResponse(data={"n": 1}),
            DummyResponse(data={"n": 2}),
            default=DummyResponse(status=404),
        )
        request = OutgoingRequest(method="GET")

        assert (await transport.send(URL, request)).json() == {"n": 1}
        assert (await transport.send(URL, request)).json() == {"n": 2}
        assert (await transport.send(URL, request)).status_code == 404

    @pytest.mark.asyncio
    async def test_raw_content(self):
        transport = DummyTransport(DummyResponse(content="plain"))
        response = await transport.send(URL, OutgoingRequest(method="GET"))
        assert response.text == "plain"

    @pytest.mark.asyncio
    async def test_error_raised(self):
        transport = DummyTransport(DummyResponse(error=httpx.ReadTimeout("slow")))
        with pytest.raises(httpx.ReadTimeout):
            await transport.send(URL, OutgoingRequest(method="GET"))

    @pytest.mark.asyncio
    async def test_call_log(self):
        transport = DummyTransport()
        await transport.send(URL, OutgoingRequest(method="DELETE", body="{}"))

        assert transport.was_called()
        assert transport.was_called("DELETE")
        assert not transport.was_called("PUT")
        assert transport.call_count("DELETE") == 1
        assert transport.get_call_log()[0]["body"] == "{}"

        transport.clear_call_log()
        assert transport.call_count() == 0

    def test_clear_responses(self):
        transport = DummyTransport(DummyResponse(data={}))
        transport.clear_responses()
        assert transport.call_count() == 0


class TestTestDataFactory:
    def test_fresh_copies(self):
        first = TestDataFactory.valid_app()
        first["name"] = "changed"
        assert TestDataFactory.valid_app()["name"] == "Test App"

    def test_paginated(self):
        envelope = TestDataFactory.paginated({"a": 1}, next_token="n")
        assert envelope == {"items": [{"a": 1}], "pagination": {"nextToken": "n"}}
