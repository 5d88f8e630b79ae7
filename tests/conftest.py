import itertools
import json
import sys
from pathlib import Path

import pytest

# Ensure project root import
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


GAMES = [
    {"BoxArt": "art/zelda.png", "Platform": "NES", "Category": "junk", "Title": "Zelda", "Exec": "/usr/bin/zelda --fullscreen"},
    {"BoxArt": "https://example.com/avengers.jpg", "Platform": "PC", "Title": "The Avengers", "Exec": "avengers.exe"},
    {"BoxArt": "", "Platform": "SNES", "Title": "an Odyssey", "Exec": "   "},
]


@pytest.fixture
def games_json(tmp_path):
    p = tmp_path / "games.json"
    p.write_text(json.dumps(GAMES), encoding="utf-8")
    return p


@pytest.fixture
def popen_calls(monkeypatch):
    """Replace subprocess.Popen with a recorder; returns the list of (args, kwargs)."""
    import gamebrowser.launch as L
    calls = []
    pids = itertools.count(1000)

    class _P:
        def __init__(self, *a, **kw):
            calls.append((a, kw))
            self.pid = next(pids)

    monkeypatch.setattr(L.subprocess, "Popen", _P)
    return calls
