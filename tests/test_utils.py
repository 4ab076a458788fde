"""Tests for URL building, default headers, error normalization and schema parsing."""

import httpx
import pytest
from pydantic import ValidationError as SchemaValidationError

from mondoconnect.apps import App, InsertAppPayload
from mondoconnect.common.errors import UNKNOWN_ERROR_MESSAGE, HttpError, ValidationError
from mondoconnect.common.utils import (
    add_filters_to_url,
    add_pagination_to_url,
    build_url,
    default_mutation_request_headers,
    default_request_headers,
    json_body,
    parse_egress_schema,
    parse_ingress_schema,
    response_to_http_error,
    to_http_error,
)
from mondoconnect.schema import Pagination

BASE = httpx.URL("https://api.test.example.com/v1/apps")


# =============================================================================
# Headers
# =============================================================================


class TestDefaultHeaders:
    def test_read_headers(self):
        assert default_request_headers() == {"accept": "application/json"}

    def test_mutation_headers(self):
        assert default_mutation_request_headers() == {
            "accept": "application/json",
            "content-type": "application/json",
        }

    def test_fresh_dict_every_call(self):
        headers = default_request_headers()
        headers["x"] = "y"
        assert "x" not in default_request_headers()


# =============================================================================
# URL building
# =============================================================================


class TestAddPaginationToUrl:
    """Tests for pagination query parameters."""

    def test_none_leaves_url_untouched(self):
        assert add_pagination_to_url(BASE, None) == BASE

    def test_next_token_only(self):
        url = add_pagination_to_url(BASE, {"nextToken": "abc"})
        assert url.params.get("pagination[nextToken]") == "abc"
        assert "pagination[pageSize]" not in url.params

    def test_page_size_only(self):
        url = add_pagination_to_url(BASE, {"pageSize": 10})
        assert url.params.get("pagination[pageSize]") == "10"
        assert "pagination[nextToken]" not in url.params

    def test_null_values_are_omitted(self):
        """None is skipped, never sent as an empty or "null" value."""
        url = add_pagination_to_url(BASE, {"pageSize": None, "nextToken": None})
        assert url == BASE

    def test_pagination_model(self):
        url = add_pagination_to_url(BASE, Pagination(page_size="25", next_token="t1"))
        assert list(url.params.multi_items()) == [
            ("pagination[pageSize]", "25"),
            ("pagination[nextToken]", "t1"),
        ]

    def test_snake_case_mapping(self):
        url = add_pagination_to_url(BASE, {"page_size": 5})
        assert url.params.get("pagination[pageSize]") == "5"


class TestAddFiltersToUrl:
    def test_filters_added_in_order(self):
        url = add_filters_to_url(BASE, {"app": "test-app", "object": "test-object"})
        assert list(url.params.multi_items()) == [
            ("filter[app]", "test-app"),
            ("filter[object]", "test-object"),
        ]

    def test_none_values_skipped(self):
        url = add_filters_to_url(BASE, {"app": None, "object": "test-object"})
        assert list(url.params.multi_items()) == [("filter[object]", "test-object")]

    def test_empty_filters(self):
        assert add_filters_to_url(BASE, {}) == BASE
        assert add_filters_to_url(BASE, None) == BASE


class TestBuildUrl:
    def test_path_resolved_against_host(self):
        url = build_url("https://api.test.example.com", "/v1/apps/test-app")
        assert str(url) == "https://api.test.example.com/v1/apps/test-app"

    def test_absolute_path_replaces_base_path(self):
        url = build_url("https://api.test.example.com/ignored/", "/v1/apps")
        assert url.path == "/v1/apps"

    def test_pagination_then_filters(self):
        url = build_url(
            "https://api.test.example.com",
            "/v1/configurations",
            {"pageSize": 10, "nextToken": "abc"},
            {"app": "test-app"},
        )
        assert [key for key, _ in url.params.multi_items()] == [
            "pagination[pageSize]",
            "pagination[nextToken]",
            "filter[app]",
        ]


# =============================================================================
# Error normalization
# =============================================================================


class TestResponseToHttpError:
    """Tests for mapping failed responses to errors."""

    def test_unauthorized_with_body(self):
        response = httpx.Response(
            401, json={"error": "unauthorized", "error_description": "Invalid token"}
        )
        error = response_to_http_error(response)

        assert type(error) is HttpError
        assert error.status_code == 401
        assert error.type == "unauthorized"
        assert error.message == "Invalid token"
        assert error.is_authorization_error is True

    def test_forbidden_without_body_fields(self):
        error = response_to_http_error(httpx.Response(403, json={}))
        assert error.status_code == 403
        assert error.type == "authorization"
        assert error.message == "Unauthorized"
        assert error.is_authorization_error is True

    def test_validation_error_with_fields(self):
        fields = {"handle": "Invalid handle", "name": "Required"}
        response = httpx.Response(
            400,
            json={"error": "validation", "error_description": "Bad input", "fields": fields},
        )
        error = response_to_http_error(response)

        assert isinstance(error, ValidationError)
        assert error.fields == fields
        assert error.message == "Bad input"
        assert error.status_code == 400
        assert error.type == "validation"

    def test_generic_error(self):
        response = httpx.Response(
            404, json={"error": "not_found", "error_description": "App not found"}
        )
        error = response_to_http_error(response)

        assert type(error) is HttpError
        assert error.status_code == 404
        assert error.type == "not_found"
        assert error.message == "App not found"
        assert error.is_authorization_error is False

    def test_unparsable_body(self):
        """A non-JSON error body still yields an error with the status code."""
        error = response_to_http_error(httpx.Response(502, content=b"<html>Bad gateway</html>"))
        assert error.status_code == 502
        assert error.message == UNKNOWN_ERROR_MESSAGE
        assert error.type == "Unknown"

    @pytest.mark.parametrize("fields", [["a"], "handle", 42])
    def test_non_object_fields_ignored(self, fields):
        """A malformed fields value yields the generic error, not a crash."""
        response = httpx.Response(
            400, json={"error": "bad_request", "error_description": "Bad", "fields": fields}
        )
        error = response_to_http_error(response)

        assert type(error) is HttpError
        assert error.status_code == 400
        assert error.type == "bad_request"
        assert error.message == "Bad"


class TestToHttpError:
    def test_http_error_is_returned_unchanged(self):
        """Already-normalized errors are not wrapped again."""
        error = HttpError("x", status_code=409, type="conflict")
        assert to_http_error(error) is error
        assert to_http_error(to_http_error(error)) is error

    def test_validation_error_is_returned_unchanged(self):
        error = ValidationError("x", fields={"a": "b"})
        assert to_http_error(error) is error

    def test_exception_message_kept(self):
        error = to_http_error(RuntimeError("Network down"))
        assert type(error) is HttpError
        assert error.message == "Network down"
        assert error.status_code == 500

    def test_object_with_message(self):
        assert to_http_error({"message": "from mapping"}).message == "from mapping"

    @pytest.mark.parametrize("value", ["a thrown string", 42, None, {"other": 1}])
    def test_unknown_shapes_get_fallback_message(self, value):
        assert to_http_error(value).message == UNKNOWN_ERROR_MESSAGE


class TestJsonBody:
    def test_json(self):
        assert json_body(httpx.Response(200, json={"a": 1})) == {"a": 1}

    def test_empty_body(self):
        assert json_body(httpx.Response(204)) is None

    def test_not_json(self):
        assert json_body(httpx.Response(200, content=b"plain text")) is None


# =============================================================================
# Schema parsing
# =============================================================================


class TestSchemaParsing:
    def test_egress_valid(self, data):
        app = parse_egress_schema(App, data.valid_app())
        assert app.handle == "test-app"

    def test_egress_invalid_raises(self):
        with pytest.raises(SchemaValidationError):
            parse_egress_schema(App, {"handle": "Bad Handle"})

    def test_ingress_passes_instances_through(self, data):
        payload = InsertAppPayload.model_validate(data.valid_insert_app_payload())
        assert parse_ingress_schema(InsertAppPayload, payload) is payload

    def test_ingress_accepts_other_models(self, data):
        """A richer model is reduced to the target shape."""
        app = App.model_validate(data.valid_app())
        payload = parse_ingress_schema(InsertAppPayload, app)
        assert payload.to_payload() == {
            "handle": "test-app",
            "name": "Test App",
            "avatar": "https://example.com/avatar.png",
        }
