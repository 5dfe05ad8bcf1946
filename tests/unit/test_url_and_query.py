"""Unit tests for URL composition, pagination queries and parameter guards."""

import pytest

from rabbitmq_management_api.exceptions import ValidationError
from rabbitmq_management_api.utils.http import compose_url, quote_segment
from rabbitmq_management_api.utils.query import build_pagination_query
from rabbitmq_management_api.utils.validation import (
    validate_required,
    validate_required_all,
)


class TestComposeUrl:
    """URL composer behavior."""

    def test_prepends_missing_slash(self):
        assert compose_url("http://h", 5672, "api/x") == "http://h:5672/api/x"

    def test_leading_slash_is_idempotent(self):
        assert compose_url("http://h", 5672, "/api/x") == compose_url(
            "http://h", 5672, "api/x"
        )

    def test_does_not_collapse_slashes(self):
        assert compose_url("http://h", 80, "//api//x/") == "http://h:80//api//x/"

    def test_empty_path_becomes_root(self):
        assert compose_url("http://h", 80, "") == "http://h:80/"

    def test_malformed_host_is_not_rejected(self):
        assert compose_url("h", 1, "x") == "h:1/x"


class TestQuoteSegment:
    """Path segment escaping."""

    def test_default_vhost_is_escaped(self):
        assert quote_segment("/") == "%2F"

    def test_spaces_and_reserved_characters(self):
        assert quote_segment("my queue?#&") == "my%20queue%3F%23%26"

    def test_plain_name_unchanged(self):
        assert quote_segment("orders.v1-a_b~") == "orders.v1-a_b~"


class TestBuildPaginationQuery:
    """Pagination query builder."""

    def test_none_and_empty_give_empty_string(self):
        assert build_pagination_query() == ""
        assert build_pagination_query(None) == ""
        assert build_pagination_query({}) == ""

    def test_single_key(self):
        query = build_pagination_query({"page": 1})
        assert query.startswith("?page=1&")
        assert query.endswith("pagination=true")
        assert query == "?page=1&pagination=true"

    def test_keys_keep_mapping_order(self):
        query = build_pagination_query(
            {"name": "orders", "page": 3, "pageSize": 50, "use_regex": False}
        )
        assert query == "?name=orders&page=3&pageSize=50&use_regex=false&pagination=true"

    def test_values_are_encoded(self):
        query = build_pagination_query({"name": "^orders.*$ v&1", "use_regex": True})
        assert query == "?name=%5Eorders.%2A%24+v%261&use_regex=true&pagination=true"

    def test_unknown_key_fails_with_its_name(self):
        with pytest.raises(ValidationError) as exc_info:
            build_pagination_query({"bogus": 1})
        assert "bogus" in str(exc_info.value)
        assert exc_info.value.field == "bogus"

    def test_unknown_key_fails_even_with_valid_keys(self):
        with pytest.raises(ValidationError, match="sort"):
            build_pagination_query({"page": 1, "sort": "name"})


class TestValidateRequired:
    """Required parameter guards."""

    def test_empty_string_fails_with_name(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_required("", "vhost")
        assert "vhost" in str(exc_info.value)
        assert str(exc_info.value) == "missing vhost parameter"

    def test_none_fails(self):
        with pytest.raises(ValidationError):
            validate_required(None, "queue")

    def test_non_empty_passes(self):
        assert validate_required("x", "vhost") is None

    def test_all_reports_first_empty_in_order(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_required_all({"vhost": "/", "exchange": "", "queue": ""})
        assert exc_info.value.field == "exchange"

    def test_all_passes_when_complete(self):
        validate_required_all({"vhost": "/", "exchange": "amq.direct"})
