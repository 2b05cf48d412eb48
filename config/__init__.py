"""
Configuration loading utilities for the RPC client.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from core.constants import DEFAULT_NETWORKS_FILE


CONFIG_DIR = Path(__file__).parent


def load_yaml(filename: str, config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of file in config directory
        config_dir: Directory to look in (default: this package)

    Returns:
        Parsed YAML as dict
    """
    filepath = (config_dir or CONFIG_DIR) / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_networks(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load networks configuration (default: config/networks.yaml)."""
    if config_path is None:
        return load_yaml(DEFAULT_NETWORKS_FILE)
    return load_yaml(config_path.name, config_path.parent)


def get_network_config(network: str, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Get configuration for a specific network.

    Args:
        network: Network identifier (e.g., 'ethereum')
        config_path: Optional alternative networks file

    Returns:
        Network configuration dict
    """
    networks = load_networks(config_path)
    if network not in networks:
        raise KeyError(f"Unknown network: {network}")
    return networks[network]
