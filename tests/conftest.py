# File: tests/conftest.py
# Contains pytest fixtures shared by the generator tests.

from pathlib import Path

import pytest

from uml_enum_generator.domain.models import Classifier, Property


# --- Constants ---
# Assumes conftest.py is in tests/ subdirectory relative to project root
FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MODEL_FILE = FIXTURES_DIR / "shop_model.yaml"


@pytest.fixture
def sample_model_file() -> Path:
    """Path of the sample model shipped with the tests."""
    return SAMPLE_MODEL_FILE


@pytest.fixture
def status_classifier() -> Classifier:
    """A two-literal enumeration classifier with one default value and one comment."""
    return Classifier(
        name="Status",
        properties=(
            Property(name="active"),
            Property(name="inactive", default_value="OFF", comments=("Disabled state",)),
        ),
        stereotypes=frozenset({"Enumeration"}),
    )


@pytest.fixture
def config_file(tmp_path: Path, sample_model_file: Path) -> Path:
    """A configuration file pointing at the sample model, writing below tmp_path."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"model_file: {sample_model_file}\n"
        f"output_dir: {tmp_path / 'out'}\n",
        encoding="utf-8",
    )
    return config_path
