"""End-to-end booking flow through the HTTP surface.

Covers the scenarios a guest goes through: loading the site, reading the
booking window, submitting a request and having it land in the log.
"""

from pathlib import Path

from fastapi.testclient import TestClient

from conftest import FixedClock, days_from_today, read_log_lines
from petstay.api.main import create_app
from petstay.config import PACKAGE_STATIC_ROOT, Settings


class TestBookingFlow:
    """Guest-facing scenarios."""

    def test_successful_json_booking(self, client: TestClient, log_path: Path) -> None:
        payload = {
            "owner-name": "A",
            "email": "a@b.com",
            "hamster-name": "Fluffy",
            "check-in": days_from_today(3),
            "check-out": days_from_today(5),
        }

        response = client.post("/api/reservations", json=payload)

        assert response.status_code == 201
        assert "submitted successfully" in response.json()["message"]
        lines = read_log_lines(log_path)
        assert len(lines) == 1
        assert lines[-1]["reservation"] == payload

    def test_same_day_check_out_is_rejected(
        self, client: TestClient, valid_payload: dict[str, str], log_path: Path
    ) -> None:
        payload = {**valid_payload, "check-out": valid_payload["check-in"]}

        response = client.post("/api/reservations", json=payload)

        assert response.status_code == 400
        assert "Check-out must be after check-in." in response.json()["errors"]
        assert read_log_lines(log_path) == []

    def test_log_grows_one_line_per_accepted_request(
        self, client: TestClient, valid_payload: dict[str, str], log_path: Path
    ) -> None:
        client.post("/api/reservations", json=valid_payload)
        client.post("/api/reservations", json={**valid_payload, "check-in": "bad"})
        client.post("/api/reservations", data={**valid_payload, "hamster-name": "Nibbles"})

        lines = read_log_lines(log_path)
        assert [line["reservation"]["hamster-name"] for line in lines] == ["Fluffy", "Nibbles"]

    def test_root_serves_index_html(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")


class TestBundledSite:
    """The packaged website works against the real static root."""

    def test_bundled_pages_are_served(self, log_path: Path) -> None:
        settings = Settings(static_root=PACKAGE_STATIC_ROOT, reservation_log=log_path)
        client = TestClient(create_app(settings, FixedClock()))

        index = client.get("/")
        script = client.get("/app.js")
        styles = client.get("/styles.css")

        assert index.status_code == 200
        assert 'id="reservation-form"' in index.text
        assert 'name="hamster-name"' in index.text
        assert script.headers["content-type"].startswith("application/javascript")
        assert "/api/reservations/policy" in script.text
        assert styles.headers["content-type"].startswith("text/css")

    def test_form_can_read_booking_window(self, log_path: Path) -> None:
        settings = Settings(static_root=PACKAGE_STATIC_ROOT, reservation_log=log_path)
        client = TestClient(create_app(settings, FixedClock()))

        assert client.get("/api/reservations/policy").json()["earliestCheckIn"] == (
            days_from_today(2)
        )
