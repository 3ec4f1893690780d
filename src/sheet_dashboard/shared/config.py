import json
import os

from dotenv import load_dotenv
from gspread.utils import extract_id_from_url
from pydantic import BaseModel, field_validator

from .consts import DEFAULT_REFRESH_INTERVAL_SECONDS, DEFAULT_REQUEST_TIMEOUT
from .enums import RefreshPolicy


class Config(BaseModel):
    # Sheets
    SHEET_ID: str
    SHEET_NAME: str = "Sheet1"
    DEFAULT_RANGE: str = "A2:B13"

    # Category name -> range, replaces the built-in range for that category
    CATEGORY_RANGE_OVERRIDES: dict[str, str] = {}

    # Financial summary cells
    TOTAL_BUDGET_RANGE: str = "E2"
    TOTAL_INCOME_RANGE: str = "E3"
    INCOME_GROWTH_RANGE: str = "E4"

    # Refresh interval in second
    REFRESH_INTERVAL_SECONDS: int = DEFAULT_REFRESH_INTERVAL_SECONDS
    REFRESH_POLICY: RefreshPolicy = RefreshPolicy.OVERLAP

    # HTTP timeout in second
    REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    @field_validator("SHEET_ID")
    @classmethod
    def _sheet_id_from_url(cls, value: str) -> str:
        value = value.strip()
        if value.startswith("http"):
            return extract_id_from_url(value)
        return value

    @field_validator("CATEGORY_RANGE_OVERRIDES", mode="before")
    @classmethod
    def _overrides_from_json(cls, value):
        if isinstance(value, str):
            if not value.strip():
                return {}
            return json.loads(value)
        return value

    @staticmethod
    def from_env(dotenv_path: str = "settings.env") -> "Config":
        load_dotenv(dotenv_path)
        return Config.model_validate(os.environ)
