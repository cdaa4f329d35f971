"""
Integration tests: store client against the in-process API and database
"""

import pytest
from fastapi.testclient import TestClient

from assets_manager.analytics.aggregation import build_dashboard_summary
from assets_manager.api.main import create_app
from assets_manager.config.settings import DatabaseConfig
from assets_manager.container import Container
from assets_manager.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from assets_manager.models.category import Category, Month
from assets_manager.models.entry import EntryCreate
from assets_manager.models.user import ProfileUpdate

TEST_PASSWORD = "Str0ng!Passw0rd"


@pytest.mark.integration
class TestAuthFlow:
    """Sign up, sign in, sign out"""

    def test_health(self, http):
        response = http.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_sign_up_returns_created(self, http):
        response = http.post(
            "/auth/signup",
            json={"email": "asha@example.com", "password": TEST_PASSWORD, "name": "Asha Rao", "username": "asha_rao"},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["user"]["email"] == "asha@example.com"
        assert "password_hash" not in data["user"]
        assert data["profile"]["username"] == "asha_rao"

    def test_weak_password_is_400_with_field(self, http):
        response = http.post(
            "/auth/signup",
            json={"email": "asha@example.com", "password": "weak", "name": "Asha Rao", "username": "asha_rao"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "ValidationError"
        assert body["field"] == "password"
        assert not body["error"].startswith("Value error")

    def test_duplicate_email_conflicts(self, register, make_client):
        register()
        with pytest.raises(ConflictError):
            make_client().sign_up("asha_rao@example.com", TEST_PASSWORD, "Someone Else", "someone")

    def test_wrong_password(self, register, make_client):
        register()
        with pytest.raises(AuthError, match="Invalid email or password"):
            make_client().sign_in("asha_rao@example.com", "Wr0ng!Password")

    def test_me(self, signed_in_client):
        data = signed_in_client.me()
        assert data["user"]["email"] == "asha_rao@example.com"
        assert data["profile"]["name"] == "Asha Rao"

    def test_sign_out_invalidates_token(self, signed_in_client, http):
        token = signed_in_client.token
        signed_in_client.sign_out()
        assert signed_in_client.token is None
        response = http.get("/financial/all", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_missing_and_garbage_tokens(self, http):
        assert http.get("/financial/all").status_code == 401
        response = http.get("/financial/all", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401
        assert response.json()["type"] == "AuthError"


@pytest.mark.integration
class TestFinancialEntries:
    """Particulars CRUD through the store client"""

    def test_create_then_fetch(self, signed_in_client):
        created = signed_in_client.create(
            EntryCreate(
                category="Mutual Fund",
                description="Index fund",
                amount=5000,
                investment=5000,
                current_value=5600,
                month="March",
                year=2024,
            )
        )
        fetched = signed_in_client.get(created.id)
        assert fetched.category == Category.MUTUAL_FUND
        assert fetched.investment == 5000
        assert fetched.current_value == 5600
        assert fetched.month == Month.MARCH
        assert fetched.year == 2024
        assert [e.id for e in signed_in_client.list()] == [created.id]

    def test_liquid_entry_normalized_by_store(self, http, signed_in_client):
        response = http.post(
            "/financial",
            json={"category": "Bank Account", "amount": 1000, "cash": 1000, "investment": 400},
            headers={"Authorization": f"Bearer {signed_in_client.token}"},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["investment"] == 0
        assert data["current_value"] == 1000

    def test_amount_only_entries_feed_dashboard_totals(self, http, signed_in_client):
        headers = {"Authorization": f"Bearer {signed_in_client.token}"}
        for body in (
            {"category": "Bank Account", "amount": 1000, "month": "March", "year": 2024},
            {"category": "Stocks", "amount": 500, "month": "March", "year": 2024},
        ):
            assert http.post("/financial", json=body, headers=headers).status_code == 201

        summary = build_dashboard_summary(signed_in_client.list())
        assert summary.latest.liquid == 1000
        assert summary.latest.invested == 500
        assert summary.latest.total == signed_in_client.stats().total_amount == 1500

    def test_category_switch_keeps_the_holding(self, signed_in_client):
        entry = signed_in_client.create({"category": "Bank Account", "amount": 1000, "cash": 1000})
        moved = signed_in_client.update(entry.id, {"category": "Stocks"})
        assert (moved.cash, moved.investment, moved.current_value) == (0, 1000, 1000)

    def test_invalid_payload_rejected_by_store(self, http, signed_in_client):
        response = http.post(
            "/financial",
            json={"category": "Lottery", "amount": 10},
            headers={"Authorization": f"Bearer {signed_in_client.token}"},
        )
        assert response.status_code == 400
        assert response.json()["field"] == "category"

    def test_update_and_delete(self, signed_in_client):
        entry = signed_in_client.create({"category": "Stocks", "amount": 1000, "investment": 1000})
        updated = signed_in_client.update(entry.id, {"investment": 1500, "current_value": 1800})
        assert updated.investment == 1500
        assert updated.amount == 1500
        assert signed_in_client.delete(entry.id) is True
        assert signed_in_client.delete(entry.id) is False
        with pytest.raises(NotFoundError):
            signed_in_client.get(entry.id)

    def test_entries_are_private(self, register):
        owner = register("owner_one")
        other = register("other_one")
        entry = owner.create({"category": "Gold", "amount": 100, "investment": 100})

        assert other.list() == []
        with pytest.raises(NotFoundError):
            other.get(entry.id)
        with pytest.raises(NotFoundError):
            other.update(entry.id, {"investment": 1})
        assert other.delete(entry.id) is False
        assert owner.get(entry.id).investment == 100

    def test_clear_all_is_idempotent(self, signed_in_client):
        signed_in_client.create({"category": "Gold", "amount": 100, "investment": 100})
        signed_in_client.create({"category": "Bank Account", "amount": 50, "cash": 50})
        assert signed_in_client.clear_all() == 2
        assert signed_in_client.clear_all() == 0
        assert signed_in_client.list() == []

    def test_stats_and_titles(self, signed_in_client):
        signed_in_client.create({"category": "Gold", "amount": 100, "investment": 100, "description": "Coins"})
        signed_in_client.create({"category": "Bank Account", "amount": 300, "cash": 300, "description": "Salary"})
        stats = signed_in_client.stats()
        assert stats.total_entries == 2
        assert stats.total_amount == 400
        assert stats.average_amount == 200
        assert stats.category_breakdown == {"Gold": 100, "Bank Account": 300}
        assert sorted(signed_in_client.titles()) == ["Coins", "Salary"]

    def test_client_side_validation_skips_network(self, signed_in_client):
        with pytest.raises(ValidationError) as exc_info:
            signed_in_client.create({"category": "Stocks", "amount": -1})
        assert exc_info.value.field == "amount"


@pytest.mark.integration
class TestProfile:
    """Profile updates and account deletion"""

    def test_update_profile(self, signed_in_client):
        profile = signed_in_client.update_profile(name="Asha R Rao")
        assert profile.name == "Asha R Rao"
        assert signed_in_client.get_profile().name == "Asha R Rao"

    def test_username_conflict_leaves_profile_unchanged(self, register):
        register("taken_name")
        client = register("asha_rao")
        with pytest.raises(ConflictError) as exc_info:
            client.update_profile(name="New Name", username="TAKEN_NAME")
        assert exc_info.value.field == "username"
        profile = client.get_profile()
        assert profile.username == "asha_rao"
        assert profile.name == "Asha Rao"

    def test_username_taken_between_check_and_write(self, register, container, monkeypatch):
        register("taken_name")
        client = register("asha_rao")
        user_id = client.me()["user"]["id"]
        service = container.get_profile_service()
        monkeypatch.setattr(service.profiles, "find_by_username", lambda username: None)

        with pytest.raises(ConflictError) as exc_info:
            service.update_profile(user_id, ProfileUpdate(username="taken_name"))
        assert exc_info.value.field == "username"
        assert client.get_profile().username == "asha_rao"

    def test_keeping_own_username_is_allowed(self, signed_in_client):
        assert signed_in_client.update_profile(username="Asha_Rao").username == "Asha_Rao"

    def test_delete_account(self, signed_in_client, make_client, container):
        signed_in_client.create({"category": "Gold", "amount": 100, "investment": 100})
        user_id = signed_in_client.me()["user"]["id"]
        signed_in_client.delete_account()
        assert signed_in_client.token is None
        assert container.get_entry_repository().find_for_user(user_id) == []
        assert container.get_profile_repository().find_by_user_id(user_id) is None
        with pytest.raises(AuthError):
            make_client().sign_in("asha_rao@example.com", TEST_PASSWORD)


@pytest.mark.integration
class TestInMemoryStore:
    """The API against a ":memory:" database"""

    def test_requests_share_one_database(self, test_settings):
        settings = test_settings.model_copy(update={"database": DatabaseConfig(path=":memory:")})
        container = Container()
        container.configure(settings)
        try:
            http = TestClient(create_app(settings=settings, container=container))
            response = http.post(
                "/auth/signup",
                json={"email": "mem@example.com", "password": TEST_PASSWORD, "name": "Mem User", "username": "mem_user"},
            )
            assert response.status_code == 201
            token = http.post(
                "/auth/signin", json={"email": "mem@example.com", "password": TEST_PASSWORD}
            ).json()["data"]["session"]["access_token"]
            headers = {"Authorization": f"Bearer {token}"}
            assert http.post("/financial", json={"category": "Gold", "amount": 10}, headers=headers).status_code == 201
            assert len(http.get("/financial/all", headers=headers).json()["data"]) == 1
        finally:
            container.cleanup()
