"""
JSON helpers: dump/load objects and save JSON atomically.
"""

import json
from pathlib import Path
import tempfile
import shutil
import logging
from typing import Any, Type, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_json(obj: Any) -> str:
    """Return the JSON representation of an object."""
    return json.dumps(obj)


def from_json(cls: Type[T], text: str) -> T:
    """
    Create an instance of ``cls`` from its JSON representation.

    ``__init__`` is not called: the decoded keys become the instance's
    attributes, so methods of ``cls`` work on the loaded data.

    Raises:
        TypeError: If the JSON does not describe an object
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    obj = cls.__new__(cls)
    obj.__dict__.update(data)
    return obj


def save_json_atomic(obj: Any, dest: Union[str, Path]) -> None:
    """
    Atomically save an object as JSON to a destination file.

    Args:
        obj: The object to serialize to JSON
        dest: Destination file path as string or Path

    Raises:
        OSError: If file operations fail
        TypeError: If object is not JSON serializable
        ValueError: If object contains a circular reference
    """
    dest = Path(dest)
    tmp = None
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile("w", delete=False, dir=str(dest.parent), suffix=".tmp") as tf:
            tmp = tf.name
            json.dump(obj, tf, indent=2)
        shutil.move(tmp, str(dest))
        logger.info("Saved JSON to %s", dest)
    except Exception as e:
        if tmp is not None:
            Path(tmp).unlink(missing_ok=True)
        if isinstance(e, OSError):
            logger.error("Failed to save JSON to %s: %s", dest, e)
        raise
