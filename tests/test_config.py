from __future__ import annotations

import pytest
from pydantic import ValidationError

from sheet_dashboard.sheet import CATEGORY_NAMES, build_category_mappings
from sheet_dashboard.shared.config import Config
from sheet_dashboard.shared.enums import RefreshPolicy


def test_from_env_reads_dotenv_file(tmp_path, monkeypatch) -> None:
    for name in ("SHEET_ID", "SHEET_NAME", "REFRESH_POLICY", "CATEGORY_RANGE_OVERRIDES"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / "settings.env"
    env_file.write_text(
        "SHEET_ID=abc123\n"
        "SHEET_NAME=Budget\n"
        "REFRESH_POLICY=single_flight\n"
        'CATEGORY_RANGE_OVERRIDES={"Food": "C9"}\n'
    )

    config = Config.from_env(str(env_file))

    assert config.SHEET_ID == "abc123"
    assert config.SHEET_NAME == "Budget"
    assert config.REFRESH_POLICY is RefreshPolicy.SINGLE_FLIGHT
    assert config.CATEGORY_RANGE_OVERRIDES == {"Food": "C9"}
    assert config.REFRESH_INTERVAL_SECONDS == 300


def test_defaults() -> None:
    config = Config(SHEET_ID="abc123")
    assert config.SHEET_NAME == "Sheet1"
    assert config.DEFAULT_RANGE == "A2:B13"
    assert config.REFRESH_POLICY is RefreshPolicy.OVERLAP
    assert config.CATEGORY_RANGE_OVERRIDES == {}


def test_sheet_id_accepts_full_url() -> None:
    config = Config(SHEET_ID="https://docs.google.com/spreadsheets/d/abc123/edit#gid=0")
    assert config.SHEET_ID == "abc123"


def test_missing_sheet_id_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Config.model_validate({})


def test_bad_overrides_json_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Config(SHEET_ID="abc123", CATEGORY_RANGE_OVERRIDES="{not json")


def test_category_mappings_use_overrides() -> None:
    config = Config(SHEET_ID="abc123", CATEGORY_RANGE_OVERRIDES={"Food": "C9"})

    mappings = build_category_mappings(config)

    assert [m.category for m in mappings] == list(CATEGORY_NAMES)
    assert mappings[0].sheet_config.range == "B2"
    assert mappings[-1].sheet_config.range == "B13"
    food = next(m for m in mappings if m.category == "Food")
    assert food.sheet_config.range == "C9"
    assert all(m.sheet_config.spreadsheet_id == "abc123" for m in mappings)
