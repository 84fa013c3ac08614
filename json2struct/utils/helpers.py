"""Helper utility functions."""

import json
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import SampleLoadError
from ..naming.sanitizer import to_pascal_case


def safe_json_parse(data: Union[bytes, str]) -> Optional[Any]:
    """
    Safely parse JSON data.

    Unlike a plain json.loads, any top-level value is accepted; rejecting
    non-object roots is the inference engine's job.

    Args:
        data: Bytes or text to parse

    Returns:
        Parsed JSON value or None if parsing fails
    """
    try:
        if isinstance(data, bytes):
            return json.loads(data.decode('utf-8-sig'))
        elif isinstance(data, str):
            return json.loads(data)
        return None
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        return None


def load_sample(path: Path) -> Any:
    """
    Load a JSON sample document from disk.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON value

    Raises:
        SampleLoadError: If the file is missing, unreadable or not JSON
    """
    if not path.exists():
        raise SampleLoadError(f"Sample file not found: {path}")

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise SampleLoadError(f"Failed to read sample file {path}: {e}")

    if not raw.strip():
        raise SampleLoadError(f"Sample file is empty: {path}")

    # "null" is valid JSON, so parse failures are detected separately
    try:
        return json.loads(raw.decode('utf-8-sig'))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SampleLoadError(f"Invalid JSON in {path}: {e}")
    except RecursionError:
        raise SampleLoadError(f"JSON in {path} is nested too deeply to parse")


def root_name_from_path(path: Union[str, Path, None], default: str = "Root") -> str:
    """
    Derive a root record name from a file path.

    "/data/user_data.json" becomes "UserData"; an empty name falls back to
    the PascalCase form of the default.

    Args:
        path: File path or bare name
        default: Name used when nothing usable remains

    Returns:
        PascalCase name
    """
    if not path:
        return to_pascal_case(default)

    name = str(path).replace('\\', '/').split('/')[-1]
    name = name.split('.')[0]
    converted = to_pascal_case(name)
    return converted or to_pascal_case(default)


def escape_annotation(text: str) -> str:
    """
    Make annotation text safe to place on a single comment line.

    Args:
        text: Annotation text

    Returns:
        Escaped, trimmed text
    """
    return (
        text.replace("*/", "* /")
        .replace("//", "/ /")
        .replace("\n", " ")
        .replace("\r", " ")
        .strip()
    )
