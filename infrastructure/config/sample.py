"""Sample configuration generator."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List

from domain.entities import Target

SAMPLE_TARGETS: List[Target] = [
    Target(name="Google DNS", host="8.8.8.8", port=53, protocol="tcp", timeout=5),
    Target(name="Google", host="google.com", port=80, protocol="http", timeout=10),
    Target(name="GitHub", host="github.com", port=443, protocol="https", timeout=10),
    Target(name="Local SSH", host="localhost", port=22, protocol="tcp", timeout=3),
    Target(name="Local Web", host="localhost", port=8080, protocol="http", timeout=5),
]


def write_sample_config(path: str | Path) -> Path:
    """Write the sample server list to ``path`` and return it."""
    dest = Path(path)
    payload = {"servers": [t.to_dict() for t in SAMPLE_TARGETS]}
    dest.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return dest
