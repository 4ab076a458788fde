"""Tests for configuration schema and resources."""

import json

import pytest
from pydantic import ValidationError as SchemaValidationError

from mondoconnect.configurations import (
    Configuration,
    ConfigurationIdentifiers,
    ConfigurationStatus,
    JoinType,
    UpsertConfigurationPayload,
    associate_configuration,
    build_configuration_item_url,
    build_configuration_listing_url,
    dissociate_configuration,
    list_configurations,
    parse_configuration_listing_response,
)
from mondoconnect.testing import DummyResponse


class TestConfigurationSchema:
    def test_valid(self, data):
        configuration = Configuration.model_validate(data.valid_configuration())
        assert configuration.status is ConfigurationStatus.ENABLED
        assert configuration.source.join is JoinType.ONE
        assert configuration.target.join is JoinType.MANY
        assert configuration.target.app.name == "Target App"

    def test_round_trip(self, data):
        payload = data.valid_configuration()
        assert Configuration.model_validate(payload).to_payload() == payload

    def test_defaults_applied_when_absent(self, data):
        payload = data.valid_configuration()
        del payload["status"]
        del payload["source"]["join"]
        configuration = Configuration.model_validate(payload)
        assert configuration.status is ConfigurationStatus.ENABLED
        assert configuration.source.join is JoinType.ONE

    def test_explicit_values_not_overridden(self, data):
        payload = data.valid_configuration()
        payload["status"] = "disabled"
        configuration = Configuration.model_validate(payload)
        assert configuration.status is ConfigurationStatus.DISABLED
        assert configuration.target.join is JoinType.MANY

    @pytest.mark.parametrize("field, value", [("status", "paused"), ("join", "several")])
    def test_invalid_enums(self, data, field, value):
        payload = data.valid_configuration()
        if field == "status":
            payload["status"] = value
        else:
            payload["source"]["join"] = value
        with pytest.raises(SchemaValidationError):
            Configuration.model_validate(payload)


class TestUpsertConfigurationPayload:
    def test_normalized(self, data):
        payload = UpsertConfigurationPayload.model_validate(
            data.valid_upsert_configuration_payload()
        )
        assert payload.to_payload() == {
            "status": "enabled",
            "source": {
                "app": {"handle": "source-app"},
                "object": {"handle": "source-object"},
                "join": "one",
            },
            "target": {
                "app": {"handle": "target-app"},
                "object": {"handle": "target-object"},
                "join": "many",
            },
        }

    def test_defaults(self):
        payload = UpsertConfigurationPayload.model_validate(
            {
                "source": {"app": "a", "object": "b"},
                "target": {"app": {"handle": "c"}, "object": {"handle": "d"}},
            }
        )
        wire = payload.to_payload()
        assert wire["status"] == "enabled"
        assert wire["source"]["join"] == "one"
        assert wire["target"]["join"] == "one"

    def test_identifiers(self, data):
        identifiers = ConfigurationIdentifiers.model_validate(
            data.valid_configuration_identifiers()
        )
        assert identifiers.to_payload() == {
            "source": {"app": {"handle": "source-app"}, "object": {"handle": "source-object"}},
            "target": {"app": {"handle": "target-app"}, "object": {"handle": "target-object"}},
        }


class TestConfigurationUrls:
    def test_listing_url(self, client):
        assert str(build_configuration_listing_url(client)) == (
            "https://api.test.example.com/v1/configurations"
        )

    def test_listing_url_with_app_filter(self, client):
        url = build_configuration_listing_url(client, {"app": "test-app"}, {"pageSize": "20"})
        assert list(url.params.multi_items()) == [
            ("pagination[pageSize]", "20"),
            ("filter[app]", "test-app"),
        ]

    def test_item_url(self, client):
        assert build_configuration_item_url(client).path == "/v1/configurations"


class TestConfigurationOperations:
    def test_parse_listing(self, data):
        collection = parse_configuration_listing_response(
            data.paginated(data.valid_configuration())
        )
        assert collection.items[0].source.app.handle == "source-app"

    @pytest.mark.asyncio
    async def test_list(self, client, transport, data):
        transport.set_response(DummyResponse(data=data.paginated(data.valid_configuration())))
        collection = await list_configurations(client, {"app": "source-app"})

        assert len(collection.items) == 1
        assert transport.last_call["url"].params.get("filter[app]") == "source-app"

    @pytest.mark.asyncio
    async def test_list_via_client(self, client, transport, data):
        transport.set_response(DummyResponse(data={"items": []}))
        collection = await client.configurations.list_items()
        assert collection.items == []
        assert transport.last_call["url"].params.multi_items() == []

    @pytest.mark.asyncio
    async def test_associate(self, client, transport, data):
        transport.set_response(DummyResponse(data=data.valid_configuration()))
        configuration = await associate_configuration(
            client, data.valid_upsert_configuration_payload()
        )

        assert configuration.target.join is JoinType.MANY
        call = transport.last_call
        assert call["method"] == "PUT"
        assert call["url"].path == "/v1/configurations"
        assert json.loads(call["body"])["source"]["app"] == {"handle": "source-app"}

    @pytest.mark.asyncio
    async def test_dissociate(self, client, transport, data):
        transport.set_response(DummyResponse(status=204))
        result = await dissociate_configuration(client, data.valid_configuration_identifiers())

        assert result is None
        call = transport.last_call
        assert call["method"] == "DELETE"
        assert json.loads(call["body"])["target"]["object"] == {"handle": "target-object"}

    @pytest.mark.asyncio
    async def test_associate_invalid_sends_nothing(self, client, transport):
        with pytest.raises(SchemaValidationError):
            await client.configurations.associate_item({"source": {"app": "a"}})
        assert transport.was_called() is False
