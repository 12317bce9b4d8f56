"""Client-side durable key/value cache, shaped like browser localStorage.

Values are JSON strings with no schema version. Readers must tolerate
absent, unparsable or wrong-shape values, which all read as empty.

Writes replace a whole list or map. Two processes sharing one ``FileCache``
can therefore lose each other's updates (last writer wins).
"""
import json
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class LocalCache(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryCache:
    """In-process cache; one per simulated browser tab."""

    def __init__(self, items: Optional[dict[str, str]] = None):
        self._items = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class FileCache:
    """Cache persisted as one JSON object on disk, re-read on every access."""

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Local cache %s is unreadable, starting empty", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items), encoding="utf-8")


def _read_json(cache: LocalCache, key: str) -> Any:
    raw = cache.get_item(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Ignoring unparsable cache entry %r", key)
        return None


def read_list(cache: LocalCache, key: str) -> list[dict[str, Any]]:
    value = _read_json(cache, key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def write_list(cache: LocalCache, key: str, items: list[dict[str, Any]]) -> None:
    cache.set_item(key, json.dumps(items))


def read_map(cache: LocalCache, key: str) -> dict[str, Any]:
    value = _read_json(cache, key)
    return value if isinstance(value, dict) else {}


def write_map(cache: LocalCache, key: str, items: dict[str, Any]) -> None:
    cache.set_item(key, json.dumps(items))
