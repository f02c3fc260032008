"""
Configuration Validators
========================
Validates .vueattrs/config.yaml loading and repository root detection.
"""
import pytest

from vueattrs.utils.config import get_catalog_config, get_output_config, load_config
from vueattrs.utils.repo import find_repo_root


def _write_config(root, text):
    config_dir = root / ".vueattrs"
    config_dir.mkdir(exist_ok=True)
    (config_dir / "config.yaml").write_text(text, encoding="utf-8")


@pytest.mark.config
def test_find_repo_root_walks_upward(tmp_path):
    (tmp_path / ".vueattrs").mkdir()
    nested = tmp_path / "src" / "components"
    nested.mkdir(parents=True)

    assert find_repo_root(nested) == tmp_path.resolve()


@pytest.mark.config
def test_find_repo_root_falls_back_to_start(tmp_path):
    start = tmp_path / "plain"
    start.mkdir()

    assert find_repo_root(start) == start.resolve()


@pytest.mark.config
def test_missing_config_is_empty(tmp_path):
    assert load_config(tmp_path) == {}


@pytest.mark.config
def test_unparsable_config_is_empty(tmp_path):
    _write_config(tmp_path, "catalog: [oops\n")

    assert load_config(tmp_path) == {}


@pytest.mark.config
def test_catalog_defaults(tmp_path):
    """
    Given: No config file
    When: Reading the catalog section
    Then: Defaults apply and the path is resolved against the project root
    """
    config = get_catalog_config(tmp_path)

    assert config == {
        "path": tmp_path / "components.yaml",
        "only_public": False,
        "xml_context": True,
    }


@pytest.mark.config
def test_catalog_overrides(tmp_path):
    _write_config(tmp_path, "catalog:\n  path: web/catalog.yaml\n  only_public: true\n")

    config = get_catalog_config(tmp_path)

    assert config["path"] == tmp_path / "web" / "catalog.yaml"
    assert config["only_public"] is True
    assert config["xml_context"] is True


@pytest.mark.config
@pytest.mark.parametrize("text,expected", [
    ("", "json"),
    ("output:\n  format: yaml\n", "yaml"),
    ("output:\n  format: xml\n", "json"),
    ("output: nonsense\n", "json"),
])
def test_output_format(tmp_path, text, expected):
    _write_config(tmp_path, text)

    assert get_output_config(tmp_path)["format"] == expected


@pytest.mark.config
@pytest.mark.parametrize("text", [
    "catalog:\n  path:\n",
    "catalog:\n  path: 42\n",
])
def test_unusable_catalog_path_falls_back(tmp_path, text):
    """
    Given: A config whose catalog path is empty or not a string
    When: Reading the catalog section
    Then: The default catalog path is used
    """
    _write_config(tmp_path, text)

    assert get_catalog_config(tmp_path)["path"] == tmp_path / "components.yaml"


@pytest.mark.config
def test_null_values_take_defaults(tmp_path):
    _write_config(tmp_path, "catalog:\n  only_public:\n  xml_context:\noutput:\n  format:\n")

    config = get_catalog_config(tmp_path)

    assert config["only_public"] is False
    assert config["xml_context"] is True
    assert get_output_config(tmp_path)["format"] == "json"
