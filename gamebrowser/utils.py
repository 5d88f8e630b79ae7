import os
from pathlib import Path
from typing import Optional
from PIL import Image

# Checked in order; only the first match is stripped.
ARTICLE_PREFIXES = ("the ", "a ", "an ")

def normalize(title: str) -> str:
    """Lowercase, trim and drop one leading article. Used for sorting and category keys."""
    s = (title or "").lower().strip()
    for prefix in ARTICLE_PREFIXES:
        if s.startswith(prefix):
            s = s[len(prefix):].strip()
            break
    return s

def category_key(title: str) -> str:
    s = normalize(title)
    if not s:
        return ""
    return s[0].upper()

def is_windows() -> bool:
    return os.name == "nt"

def is_remote(ref: str) -> bool:
    r = (ref or "").lower()
    return r.startswith("http://") or r.startswith("https://")

def resolve_box_art(ref: str, base_dir: Path, exts: set) -> Optional[Path]:
    """Local box art as an absolute path, or None when it is missing or not an image."""
    if not ref or is_remote(ref):
        return None
    p = Path(ref)
    if not p.is_absolute():
        p = base_dir / p
    if p.suffix.lower() not in exts or not p.is_file():
        return None
    try:
        with Image.open(p) as im:
            im.verify()
    except Exception:
        return None
    return p
