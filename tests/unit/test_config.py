"""Unit tests for Settings and the system clock."""

import datetime as dt
from pathlib import Path

import pytest
from pydantic import ValidationError

from petstay.clock import SystemClock
from petstay.config import MAX_MIN_LEAD_DAYS, PACKAGE_STATIC_ROOT, Settings


class TestSettings:
    """Tests for environment-driven settings."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        for name in ("PORT", "PETSTAY_PORT", "PETSTAY_MIN_LEAD_DAYS", "PETSTAY_STATIC_ROOT"):
            monkeypatch.delenv(name, raising=False)
        # Keep a developer's .env out of the test
        monkeypatch.chdir(tmp_path)

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.port == 3000
        assert settings.min_lead_days == 2
        assert settings.max_body_bytes == 1_000_000
        assert settings.static_root == PACKAGE_STATIC_ROOT
        assert settings.content_types[".html"] == "text/html; charset=utf-8"

    def test_port_from_port_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")

        assert Settings().port == 8080

    def test_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("PETSTAY_PORT", "9000")
        monkeypatch.setenv("PETSTAY_MIN_LEAD_DAYS", "4")
        monkeypatch.setenv("PETSTAY_STATIC_ROOT", str(tmp_path))

        settings = Settings()

        assert settings.port == 9000
        assert settings.min_lead_days == 4
        assert settings.static_root == tmp_path

    @pytest.mark.parametrize("value", ["-1", "3651", "1000000000"])
    def test_min_lead_days_out_of_range_is_rejected(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("PETSTAY_MIN_LEAD_DAYS", value)

        with pytest.raises(ValidationError):
            Settings()

    def test_min_lead_days_upper_bound_is_usable(self) -> None:
        settings = Settings(min_lead_days=MAX_MIN_LEAD_DAYS)

        assert settings.min_lead_days == 3650

    def test_bundled_site_has_index(self) -> None:
        assert (PACKAGE_STATIC_ROOT / "index.html").is_file()


class TestSystemClock:
    """Tests for SystemClock."""

    def test_today_is_local_calendar_day(self) -> None:
        assert SystemClock().today() == dt.date.today()

    def test_now_is_timezone_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None
