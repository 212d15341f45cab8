from pathlib import Path
from typing import Any

import yaml


def load_yaml_mapping(path: Path, *, section: str | None = None) -> dict[str, Any]:
    """Read a YAML mapping, narrowed to ``section`` when that top-level key exists.

    An empty file or an empty section yields ``{}``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"YAML file not found: {path}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level YAML in {path} must be a mapping, got {type(data).__name__}")
    if section is None or section not in data:
        return data

    block = data[section]
    if block is None:
        return {}
    if not isinstance(block, dict):
        raise TypeError(
            f"'{section}' block in {path} must be a mapping, got {type(block).__name__}")
    return block
