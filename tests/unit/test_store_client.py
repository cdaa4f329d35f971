"""
Unit tests for the store client transport and error mapping
"""

from unittest.mock import Mock

import pytest
import requests

from assets_manager.client import AssetsManagerClient
from assets_manager.exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    TransientError,
    ValidationError,
)


def _response(status_code, body):
    return Mock(status_code=status_code, json=Mock(return_value=body))


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def client(session, test_settings):
    return AssetsManagerClient(base_url="http://store.test/", token="abc", session=session, settings=test_settings)


class TestTransport:
    def test_bearer_header_and_url(self, client, session):
        session.request.return_value = _response(200, {"data": ["Salary"], "message": "Titles"})
        assert client.titles() == ["Salary"]
        method, url = session.request.call_args.args
        assert (method, url) == ("GET", "http://store.test/financial/titles")
        assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer abc"

    def test_missing_token_fails_before_sending(self, session, test_settings):
        client = AssetsManagerClient(base_url="http://store.test", session=session, settings=test_settings)
        with pytest.raises(AuthError):
            client.list()
        session.request.assert_not_called()

    @pytest.mark.parametrize(
        "status_code,error_class",
        [
            (400, ValidationError),
            (401, AuthError),
            (404, NotFoundError),
            (409, ConflictError),
            (500, TransientError),
            (503, TransientError),
        ],
    )
    def test_status_codes_map_to_taxonomy(self, client, session, status_code, error_class):
        session.request.return_value = _response(status_code, {"error": "boom", "field": "username"})
        with pytest.raises(error_class) as exc_info:
            client.get_profile()
        assert exc_info.value.message == "boom"
        assert exc_info.value.field == "username"

    def test_network_failure_is_transient(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransientError):
            client.list()

    def test_non_json_error_body(self, client, session):
        response = Mock(status_code=502)
        response.json.side_effect = ValueError("not json")
        session.request.return_value = response
        with pytest.raises(TransientError, match="502"):
            client.stats()


class TestClientSideValidation:
    def test_create_rejects_missing_category(self, client, session):
        with pytest.raises(ValidationError) as exc_info:
            client.create({"amount": 100})
        assert exc_info.value.field == "category"
        session.request.assert_not_called()

    def test_create_rejects_non_positive_amount(self, client, session):
        with pytest.raises(ValidationError) as exc_info:
            client.create({"category": "Stocks", "amount": 0})
        assert exc_info.value.field == "amount"

    def test_empty_profile_update(self, client, session):
        with pytest.raises(ValidationError):
            client.update_profile()
        session.request.assert_not_called()


class TestSessionHandling:
    def test_sign_out_clears_token_even_on_failure(self, client, session):
        session.request.side_effect = requests.Timeout("slow")
        with pytest.raises(TransientError):
            client.sign_out()
        assert client.token is None

    def test_delete_returns_flag(self, client, session):
        session.request.return_value = _response(200, {"data": {"id": "x", "deleted": False}})
        assert client.delete("x") is False


class TestDashboardFetch:
    def test_concurrent_fetch(self, client, session, make_entry):
        entry = make_entry(cash=100).model_dump(mode="json")

        def respond(method, url, **kwargs):
            if url.endswith("/financial/stats"):
                return _response(200, {"data": {"total_amount": 100, "total_entries": 1}})
            return _response(200, {"data": [entry]})

        session.request.side_effect = respond
        data = client.fetch_dashboard_data()
        assert data.stats.total_entries == 1
        assert [e.id for e in data.entries] == [entry["id"]]

    def test_either_failure_fails_the_fetch(self, client, session):
        def respond(method, url, **kwargs):
            if url.endswith("/financial/stats"):
                return _response(503, {"error": "down"})
            return _response(200, {"data": []})

        session.request.side_effect = respond
        with pytest.raises(TransientError):
            client.fetch_dashboard_data()
