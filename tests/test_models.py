from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import _parse_env_lines, load_settings, write_user_env_vars
from core.domain.models import Activity, ActivitiesPayload, CommandTimestamp, Credentials, Token
from core.errors import ConfigError
from tests._fakes import make_settings


def test_timestamp_has_millisecond_precision() -> None:
    now = datetime(2024, 1, 1, 9, 0, 0, 123456, tzinfo=timezone.utc)

    assert CommandTimestamp.capture(now).value == "2024-01-01T09:00:00.123"


def test_timestamp_pads_milliseconds() -> None:
    now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    assert CommandTimestamp.capture(now).value == "2024-01-01T12:00:00.000"


def test_timestamp_is_converted_to_utc() -> None:
    cest = timezone(timedelta(hours=2))
    now = datetime(2024, 6, 1, 11, 30, 15, 5000, tzinfo=cest)

    assert CommandTimestamp.capture(now).value == "2024-06-01T09:30:15.005"


def test_timestamp_rejects_other_formats() -> None:
    with pytest.raises(ValidationError):
        CommandTimestamp(value="2024-01-01T12:00:00Z")


def test_credentials_wire_body() -> None:
    credentials = Credentials(api_key="k", api_secret="s")

    assert credentials.to_sign_in_body() == {"apiKey": "k", "apiSecret": "s"}


def test_token_repr_hides_value() -> None:
    assert "secret-token" not in repr(Token(value="secret-token"))


def test_activities_payload_keeps_order_and_coerces_ids() -> None:
    payload = ActivitiesPayload.model_validate(
        {"activities": [{"id": 7, "name": "B", "color": "#000"}, {"id": "3", "name": "A"}]}
    )

    assert payload.activities == [Activity(id="7", name="B"), Activity(id="3", name="A")]


def test_activities_payload_requires_list() -> None:
    with pytest.raises(ValidationError):
        ActivitiesPayload.model_validate({"items": []})


def test_settings_credentials() -> None:
    credentials = make_settings(key="abc", secret="").credentials()

    # empty strings are passed through untouched
    assert credentials == Credentials(api_key="abc", api_secret="")


def test_settings_missing_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TIMEULAR_KEY", raising=False)
    monkeypatch.delenv("TIMEULAR_SECRET", raising=False)

    settings = make_settings(key=None)

    with pytest.raises(ConfigError, match="TIMEULAR_KEY"):
        settings.credentials()


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMEULAR_KEY", "env-key")
    monkeypatch.setenv("TIMEULAR_SECRET", "env-secret")
    monkeypatch.setenv("TIMEULAR_STRICT_STATUS", "true")

    settings = load_settings(_env_file=None)

    assert settings.credentials() == Credentials(api_key="env-key", api_secret="env-secret")
    assert settings.strict_status is True


def test_load_settings_reports_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMEULAR_HTTP_TIMEOUT_SECONDS", "-1")

    with pytest.raises(ConfigError):
        load_settings(_env_file=None)


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nTIMEULAR_LOG_LEVEL=DEBUG\nTIMEULAR_KEY='old'\n", encoding="utf-8")

    write_user_env_vars({"TIMEULAR_KEY": "new", "TIMEULAR_SECRET": "s"}, env_path=env_path)

    assert _parse_env_lines(env_path.read_text(encoding="utf-8")) == {
        "TIMEULAR_KEY": "new",
        "TIMEULAR_LOG_LEVEL": "DEBUG",
        "TIMEULAR_SECRET": "s",
    }
