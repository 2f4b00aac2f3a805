# File: tests/conftest.py
# Shared fixtures: sample USS/UXML assets written to a temporary Unity-like project.

import pytest
from pathlib import Path
from typing import Dict

from tests.samples import SAMPLE_USS, SAMPLE_UXML


@pytest.fixture
def unity_project(tmp_path: Path) -> Dict[str, Path]:
    """Writes MainMenuSS.uss and MainMenu.uxml under Assets/UI and returns their paths."""
    ui_dir = tmp_path / "Assets" / "UI"
    ui_dir.mkdir(parents=True)

    stylesheet = ui_dir / "MainMenuSS.uss"
    stylesheet.write_text(SAMPLE_USS, encoding="utf-8")

    markup = ui_dir / "MainMenu.uxml"
    markup.write_text(SAMPLE_UXML, encoding="utf-8")

    return {
        "root": tmp_path,
        "stylesheet": stylesheet,
        "markup": markup,
        "output_dir": tmp_path / "Assets" / "Generated",
    }
