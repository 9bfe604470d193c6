"""Read and write ~/.rpcgate/config.json.

The file uses camelCase keys; the pydantic schema uses snake_case.
"""

import json
import re
from pathlib import Path
from typing import Any, Callable

from rpcgate.config.schema import Config

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def get_data_dir() -> Path:
    """Per-user rpcgate directory, created on first use."""
    path = Path.home() / ".rpcgate"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_path() -> Path:
    return Path.home() / ".rpcgate" / "config.json"


def _read_json_object(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def load_config(config_path: Path | None = None) -> Config:
    """
    Load the config file, or defaults (plus RPCGATE_* env vars) when there is none.

    Raises:
        ValueError: the file exists but is not valid JSON or fails validation.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()
    try:
        return Config.model_validate(convert_keys(_read_json_object(path)))
    except (json.JSONDecodeError, ValueError) as e:
        raise ValueError(
            f"Failed to load config from {path}: {e}. "
            "Fix the file or remove it to regenerate defaults."
        ) from e


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Write `config` with camelCase keys and return the path written."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(convert_to_camel(config.model_dump()), indent=2), encoding="utf-8")
    return path


def camel_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _rename_keys(data: Any, rename: Callable[[str], str]) -> Any:
    if isinstance(data, dict):
        return {rename(k): _rename_keys(v, rename) for k, v in data.items()}
    if isinstance(data, list):
        return [_rename_keys(item, rename) for item in data]
    return data


def convert_keys(data: Any) -> Any:
    """camelCase file keys -> snake_case schema keys, recursively."""
    return _rename_keys(data, camel_to_snake)


def convert_to_camel(data: Any) -> Any:
    """snake_case schema keys -> camelCase file keys, recursively."""
    return _rename_keys(data, snake_to_camel)
