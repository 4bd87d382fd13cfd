"""Set or remove a configuration value by dot-path key."""

import json
from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from . import ConfigSetOutput
from .DavdropConfig import DavdropConfig

_SENTINEL = object()


def _parse_value(raw: str) -> Any:
    """Parse a value string as JSON, falling back to plain string."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return raw


def _deep_set(d: dict, keys: list[str], value: Any) -> None:
    """Set a nested dict value by key path."""
    for key in keys[:-1]:
        if key not in d or not isinstance(d[key], dict):
            d[key] = {}
        d = d[key]
    d[keys[-1]] = value


def _deep_delete(d: dict, keys: list[str]) -> bool:
    """Delete a nested dict value by key path. Returns True if deleted."""
    for key in keys[:-1]:
        if key not in d or not isinstance(d[key], dict):
            return False
        d = d[key]
    return d.pop(keys[-1], _SENTINEL) is not _SENTINEL


def cmd_set(key: str, value: str = "", delete: bool = False) -> StageResult:
    """Set, modify, or remove a configuration value by dot-path key.

    Removing a key restores its default on the next load.
    """

    def _fail(result_obj: StageResult, message: str, error: str, result_value: Any = None) -> None:
        result_obj.result = message
        result_obj.output = ConfigSetOutput(
            errors=[error],
            warnings=[],
            key=key,
            value=result_value,
            config_path=str(DavdropConfig.get_config_path()),
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = DavdropConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Failed to load config: {e}", str(e))
            return
        config_dict = config.to_dict()

        keys = key.split(".")
        if not all(keys):
            yield (1.0, "Complete")
            _fail(result_obj, f"Invalid key: {key}", f"Invalid key path: {key}")
            return

        if delete:
            yield (0.4, f"Removing {key}...")
            if not _deep_delete(config_dict, keys):
                yield (1.0, "Complete")
                _fail(result_obj, f"Key not found: {key}", f"Key not found: {key}")
                return
            action = "Removed"
            result_value = None
        else:
            if not value:
                yield (1.0, "Complete")
                _fail(result_obj, "No value provided (use --delete to remove a key)", "No value provided")
                return
            parsed = _parse_value(value)
            yield (0.4, f"Setting {key}...")
            _deep_set(config_dict, keys, parsed)
            action = "Set"
            result_value = parsed

        yield (0.6, "Validating configuration...")
        try:
            new_config = DavdropConfig(**config_dict)
        except Exception as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Validation failed: {e}", str(e), result_value)
            return

        yield (0.8, "Saving configuration...")
        new_config.save()

        yield (1.0, "Complete")
        shown = "********" if keys == ["remote", "password"] else json.dumps(result_value)
        result_obj.result = f"{action} {key}" + (f" = {shown}" if result_value is not None else "")
        result_obj.output = ConfigSetOutput(
            errors=[],
            warnings=new_config.upload.check() if keys[0] == "upload" else [],
            key=key,
            value=result_value,
            config_path=str(new_config.path),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Updating {key}...",
        progress_callback=do_work,
    )
