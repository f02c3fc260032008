"""
vue-attrs Configuration Loader.

Loads configuration from .vueattrs/config.yaml.

Example config:
    catalog:
      path: frontend/components.yaml
      only_public: true
      xml_context: true
    output:
      format: yaml
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from vueattrs.utils.repo import CONFIG_DIR

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


def load_config(repo_root: Path) -> Dict[str, Any]:
    """
    Load .vueattrs/config.yaml configuration file.

    Args:
        repo_root: Repository root path

    Returns:
        Parsed configuration dict, or empty dict if file doesn't exist
        or cannot be parsed
    """
    config_path = repo_root / CONFIG_DIR / "config.yaml"

    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return {}

    return config if isinstance(config, dict) else {}


def _section(repo_root: Path, name: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
    config = load_config(repo_root)
    section = config.get(name) or {}
    if not isinstance(section, dict):
        logger.warning("Ignoring non-mapping '%s' section in config", name)
        section = {}

    for key, default_value in defaults.items():
        if section.get(key) is None:
            section[key] = default_value
    return section


def get_catalog_config(repo_root: Path) -> Dict[str, Any]:
    """
    Get catalog configuration with defaults applied.

    Returns:
        Dict with path (resolved against repo_root), only_public, xml_context
    """
    catalog_config = _section(repo_root, "catalog", {
        "path": "components.yaml",
        "only_public": False,
        "xml_context": True,
    })
    if not isinstance(catalog_config["path"], str):
        logger.warning("Ignoring non-string catalog path %r", catalog_config["path"])
        catalog_config["path"] = "components.yaml"
    catalog_config["path"] = repo_root / catalog_config["path"]
    return catalog_config


def get_output_config(repo_root: Path) -> Dict[str, Any]:
    """Get output configuration with defaults applied."""
    output_config = _section(repo_root, "output", {"format": "json"})
    if output_config["format"] not in OUTPUT_FORMATS:
        logger.warning("Unknown output format %r, using json", output_config["format"])
        output_config["format"] = "json"
    return output_config
