from pathlib import Path

import pytest

SAMPLE_SCRIPT = """\
let x = 0
let limit = 10
while x <= limit {
    x + 1
    limit - 1
}
"""


@pytest.fixture  # type: ignore[misc]
def script_file(tmp_path: Path) -> Path:
    path = tmp_path / "script.sc"
    path.write_text(SAMPLE_SCRIPT, encoding="utf-8")
    return path
