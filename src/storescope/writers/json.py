"""JSON writer for catalog export."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..entities import Collection, Entity, FieldInfo, KeyPattern, Store


def write_json(
    entities: Sequence[Entity],
    name: str,
    output_dir: str | Path,
) -> Path:
    """Write entities to {name}.json."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    data = [clean_record(entity.to_dict()) for entity in entities]

    json_path = output_dir / f"{name}.json"
    write_atomic(json_path, json.dumps(data, ensure_ascii=False, indent=2))
    return json_path


def clean_record(record: dict[str, Any]) -> dict[str, Any]:
    """Clean record for JSON output."""
    return {key: clean_value(value) for key, value in record.items()}


def clean_value(value: Any) -> Any:
    """Clean value for JSON (whole floats to int, non-JSON scalars to str)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {str(k): clean_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [clean_value(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def write_atomic(path: Path, content: str) -> None:
    """Write file atomically (temp + rename)."""
    temp_path = path.with_suffix(path.suffix + ".temp")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(content)
        temp_path.rename(path)
    except Exception:
        # Cleanup temp file on error
        temp_path.unlink(missing_ok=True)
        raise


def write_catalog(
    output_dir: str | Path,
    *,
    stores: Sequence[Store],
    key_patterns: Sequence[KeyPattern],
    collections: Sequence[Collection],
    fields: Sequence[FieldInfo],
) -> list[Path]:
    """Write every catalog table, return the written paths."""
    return [
        write_json(stores, "store", output_dir),
        write_json(key_patterns, "key_pattern", output_dir),
        write_json(collections, "collection", output_dir),
        write_json(fields, "field", output_dir),
    ]
