"""Typed accessors for raw YAML config values.

Every accessor takes the value and its dotted key, so a bad config names
the exact key that is wrong: ``search.max_workers must be an integer``.
"""

from __future__ import annotations

from typing import Any, Mapping


def _require(value: Any, kinds: tuple[type, ...], config_key: str, noun: str) -> Any:
    # YAML booleans are ints to isinstance().
    if not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds):
        raise TypeError(f"{config_key} must be {noun}")
    return value


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Look up a top-level section such as ``search`` or ``wiki``.

    Optional sections that are absent read as an empty mapping.

    Raises:
        ValueError: If a required section is absent.
        TypeError: If the section is present but not a mapping.
    """
    if key not in raw or raw[key] is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    return _require(raw[key], (Mapping,), key, "an object")


def expect_str(value: Any, config_key: str) -> str:
    return _require(value, (str,), config_key, "a string")


def expect_optional_str(value: Any, config_key: str) -> str | None:
    return None if value is None else expect_str(value, config_key)


def expect_bool(value: Any, config_key: str) -> bool:
    return _require(value, (bool,), config_key, "a boolean")


def expect_int(value: Any, config_key: str) -> int:
    return _require(value, (int,), config_key, "an integer")


def expect_float(value: Any, config_key: str) -> float:
    """Accept any YAML number and widen it to float."""
    return float(_require(value, (int, float), config_key, "a number"))


def expect_str_list(value: Any, config_key: str) -> list[str]:
    items = _require(value, (list,), config_key, "a list")
    return [expect_str(item, f"{config_key}[{idx}]") for idx, item in enumerate(items)]
