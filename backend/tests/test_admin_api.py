"""
HTTP tests for the admin endpoints.

Status codes and error bodies as seen by API clients.
"""

from admin_api.models import PassengerProfile
from shared.config.constants import UserType


BASE = "/api/admin"


class TestAirlineEndpoints:
    def test_list_and_get(self, client, seed_airline):
        response = client.get(f"{BASE}/airlines")
        assert response.status_code == 200
        assert [a["iata_code"] for a in response.json()] == ["AF"]

        response = client.get(f"{BASE}/airlines/af")
        assert response.status_code == 200
        assert response.json()["base_airport_name"] == "Charles de Gaulle"

    def test_unknown_airline_is_404(self, client):
        response = client.get(f"{BASE}/airlines/ZZ")
        assert response.status_code == 404
        assert response.json()["detail"] == "Active airline 'ZZ' not found."

    def test_invalid_code_is_400(self, client):
        response = client.get(f"{BASE}/airlines/AFR")
        assert response.status_code == 400

    def test_create(self, client, seed_airport):
        response = client.post(
            f"{BASE}/airlines",
            json={
                "iata_code": "lh",
                "name": "Lufthansa",
                "callsign": "LUFTHANSA",
                "operating_region": "Europe",
                "base_airport_id": "CDG",
            },
        )
        assert response.status_code == 201
        assert response.json()["iata_code"] == "LH"

    def test_create_with_overlong_callsign_is_400(self, client, seed_airport):
        response = client.post(
            f"{BASE}/airlines",
            json={
                "iata_code": "ZZ",
                "name": "Long Haul",
                "callsign": "C" * 80,
                "operating_region": "Europe",
                "base_airport_id": "CDG",
            },
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Callsign must be at most 50 characters."

    def test_delete_blocked_returns_blocking_kinds(self, client, seed_aircraft):
        response = client.delete(f"{BASE}/airlines/AF")

        assert response.status_code == 409
        body = response.json()
        assert body["blocking"] == ["active aircraft"]
        assert "Please resolve dependencies first." in body["detail"]

    def test_delete_then_reactivate(self, client, seed_airline):
        assert client.delete(f"{BASE}/airlines/AF").status_code == 204
        assert client.get(f"{BASE}/airlines/AF").status_code == 404
        assert client.delete(f"{BASE}/airlines/AF").status_code == 404

        assert client.post(f"{BASE}/airlines/AF/reactivate").status_code == 204
        assert client.post(f"{BASE}/airlines/AF/reactivate").status_code == 409

    def test_dependents_report(self, client, seed_aircraft):
        response = client.get(f"{BASE}/airlines/AF/dependents")

        assert response.status_code == 200
        assert response.json()["can_delete"] is False


class TestPaginationParams:
    def test_page_zero_is_400(self, client, seed_country):
        response = client.get(f"{BASE}/countries/page", params={"page": 0})
        assert response.status_code == 400

    def test_oversized_page_is_400(self, client, seed_country):
        response = client.get(f"{BASE}/countries/page", params={"page_size": 500})
        assert response.status_code == 400

    def test_page_metadata(self, client, seed_country):
        response = client.get(f"{BASE}/countries/page", params={"page": 1, "page_size": 5})

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"]["total"] == 1
        assert body["pagination"]["has_next"] is False


class TestPriceOfferLogEndpoints:
    def test_log_and_analytics(self, client, seed_fare, seed_context):
        for price in ("100.00", "150.00"):
            response = client.post(
                f"{BASE}/price-offer-logs",
                json={
                    "offer_price_quote": price,
                    "context_attributes_id": seed_context.attribute_id,
                    "fare_id": "YOW",
                    "timestamp": "2024-05-10T10:00:00Z",
                },
            )
            assert response.status_code == 201

        response = client.get(
            f"{BASE}/price-offer-logs/analytics/fare/yow",
            params={"start_date": "2024-05-01", "end_date": "2024-05-31"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["offer_count"] == 2
        assert body["average_price"] == "125.00"

    def test_analytics_without_data_is_404(self, client, seed_fare):
        response = client.get(
            f"{BASE}/price-offer-logs/analytics/fare/YOW",
            params={"start_date": "2024-05-01", "end_date": "2024-05-31"},
        )
        assert response.status_code == 404

    def test_missing_subject_is_400(self, client, seed_context):
        response = client.post(
            f"{BASE}/price-offer-logs",
            json={"offer_price_quote": "10.00", "context_attributes_id": seed_context.attribute_id},
        )
        assert response.status_code == 400


class TestUserEndpoints:
    def test_detail_is_tagged_by_kind(self, client, make_user, db_session):
        user = make_user(UserType.USER)
        db_session.add(PassengerProfile(app_user_id=user.user_id, kris_flyer_tier="SILVER"))
        db_session.commit()

        response = client.get(f"{BASE}/users/{user.user_id}")

        assert response.status_code == 200
        assert response.json()["kind"] == "passenger"
        assert response.json()["kris_flyer_tier"] == "SILVER"

    def test_super_admin_deactivation_is_400(self, client, make_user):
        admin = make_user(UserType.SUPER_ADMIN)

        response = client.delete(f"{BASE}/users/{admin.user_id}")

        assert response.status_code == 400
