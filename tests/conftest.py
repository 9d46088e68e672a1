from __future__ import annotations

import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


def load_samples() -> list[dict]:
    with open(DATA_DIR / "wkt_samples.json", "r", encoding="utf-8") as fh:
        return json.load(fh)


@pytest.fixture(params=load_samples(), ids=lambda sample: sample["name"])
def sample(request) -> dict:
    return request.param
