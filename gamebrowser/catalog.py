import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Union

from .models import Catalog, Category, Entry, LoadError
from .utils import normalize, category_key

logger = logging.getLogger(__name__)

# on-disk key (lowercased) -> Entry field
FIELDS = {
    "boxart": "box_art",
    "platform": "platform",
    "category": "category",
    "title": "title",
    "exec": "command",
}

def _entry_from_record(item, index: int) -> Entry:
    if not isinstance(item, dict):
        raise LoadError(f"Entry {index} is not an object.")
    values = {}
    for key, raw in item.items():
        attr = FIELDS.get(str(key).lower())
        if attr is None:
            continue
        if raw is None:
            raw = ""
        if not isinstance(raw, str):
            raise LoadError(f"Entry {index}: field {key!r} must be a string.")
        values[attr] = raw
    return Entry(**values)

def load_entries(path: Union[Path, str]) -> List[Entry]:
    """Read the games JSON file: a list of objects with BoxArt/Platform/Category/Title/Exec."""
    p = Path(path)
    try:
        data = json.loads(p.read_text("utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read game list {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {p}: {e}") from e
    if not isinstance(data, list):
        raise LoadError(f"Game list {p} must be a JSON array.")
    return [_entry_from_record(item, i) for i, item in enumerate(data)]

def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    return sorted(entries, key=lambda e: normalize(e.title))

def build_catalog(raw_entries: Iterable[Entry]) -> Catalog:
    """
    Sort by normalized title, then walk the sorted list once:
    - a new Category starts on the first entry and whenever the key changes
    - every entry takes the current category and the next launch id (0, 1, ...)
    The input entries are copied, not modified.
    """
    catalog = Catalog()
    current = None
    for launch_id, raw in enumerate(sort_entries(raw_entries)):
        key = category_key(raw.title)
        if current is None or key != current.name:
            current = Category(icon=key, name=key)
            catalog.categories.append(current)
        catalog.entries.append(replace(raw, category=current.name, launch_id=launch_id))
    return catalog

def load_catalog(path: Union[Path, str]) -> Catalog:
    catalog = build_catalog(load_entries(path))
    logger.info("Loaded %d games in %d categories from %s",
                len(catalog.entries), len(catalog.categories), path)
    return catalog
