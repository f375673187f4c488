import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def feed_payload() -> dict[str, Any]:
    return json.loads((FIXTURES / "projections_sample.json").read_text(encoding="utf-8"))
