import yaml
from copy import deepcopy
from pathlib import Path
from typing import List, Optional, Literal, Dict, Any
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from .common.errors import ConfigError
from .core.catalog import ALLOWED_HTTP_STATUSES
from .core.registry import RESERVED_CODE

class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    logs_dir: Optional[str] = None

class RenderConfig(BaseModel):
    mode: Literal["short", "full"] = "short"
    source_lines: bool = False

class CodeEntry(BaseModel):
    code: int
    http_status: int = 500
    message: str
    reference: str = ""

    @field_validator("code")
    @classmethod
    def _code_not_reserved(cls, value: int) -> int:
        if value == RESERVED_CODE:
            raise ValueError(f"code `{RESERVED_CODE}` is reserved and cannot be registered.")
        return value

    @field_validator("http_status")
    @classmethod
    def _status_allowed(cls, value: int) -> int:
        if value not in ALLOWED_HTTP_STATUSES:
            allowed = ", ".join(str(status) for status in ALLOWED_HTTP_STATUSES)
            raise ValueError(f"http_status {value} not in `{allowed}`.")
        return value

class AppConfig(BaseModel):
    logging: LoggingConfig = LoggingConfig()
    render: RenderConfig = RenderConfig()
    codes: List[CodeEntry] = []

    @model_validator(mode="after")
    def _unique_codes(self):
        seen = set()
        for entry in self.codes:
            if entry.code in seen:
                raise ValueError(f"codes: {entry.code} is listed more than once.")
            seen.add(entry.code)
        return self


def _load_yaml_mapping(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Error parsing YAML config: {exc}", exc)

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file at {path} must contain a mapping at the top level.")
    return data


def _deep_merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: str) -> AppConfig:
    """
    Load YAML config, merge it over the packaged defaults, validate with Pydantic, and return a typed config object.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")

    default_config = _load_yaml_mapping(get_default_config_path())
    user_config = _load_yaml_mapping(path)
    merged_config = _deep_merge_dicts(default_config, user_config)

    try:
        return AppConfig(**merged_config)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}", e)

def get_default_config_path() -> Path:
    """Returns the absolute path to the packaged default config file."""
    return Path(__file__).parent / "defaults" / "default.yaml"
