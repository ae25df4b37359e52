from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path):
    """Create a project whose request tree holds the given files."""

    def _make(files: dict[str, str], order: str | None = None) -> Path:
        project = tmp_path / "project"
        requests_dir = project / ".httx" / "requests"
        requests_dir.mkdir(parents=True)
        for rel_path, content in files.items():
            path = requests_dir / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        if order is not None:
            (project / ".httx" / "order.json").write_text(order, encoding="utf-8")
        return project

    return _make
