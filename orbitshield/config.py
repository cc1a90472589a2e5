import os

import yaml

from orbitshield import logger
from orbitshield.attributes.type_registry import TypeRegistry
from orbitshield.errors import ConfigError
from orbitshield.topology.node_container import SATELLITE_TYPE_NAME, NodeContainer

log = logger.get_logger(__name__)


def load_config(config_path: str) -> dict:
    """Loads the scenario configuration from a YAML file."""
    if not os.path.exists(config_path):
        raise ConfigError(f"Configuration file not found at {config_path}")
    with open(config_path, "r") as file:
        try:
            config = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ConfigError(f"Configuration file {config_path} is not valid YAML: {e}") from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a mapping")
    return config


def parse_attribute_override(override: str) -> tuple[str, str]:
    """
    Split a "Type::Attribute=value" command line override.
    :param override: The override string, e.g. "Satellite::Altitude=500000"
    :return: Tuple (attribute path, value string)
    :raises ConfigError: if the string is malformed.
    """
    path, separator, value = override.partition("=")
    path, value = path.strip(), value.strip()
    if not separator or not path or not value or "::" not in path:
        raise ConfigError(f"Malformed attribute override '{override}', expected Type::Attribute=value")
    return path, value


def apply_defaults(config: dict, overrides=()) -> None:
    """
    Apply the 'defaults' section and then the "Type::Attribute=value" overrides.
    Every entry is validated before any default changes.
    """
    defaults = config.get("defaults") or {}
    if not isinstance(defaults, dict):
        raise ConfigError("'defaults' must be a mapping of Type::Attribute to value")
    entries = []
    for path, value in defaults.items():
        if not isinstance(path, str):
            raise ConfigError(f"Default name {path!r} must be a Type::Attribute string")
        entries.append((path, value))
    entries.extend(parse_attribute_override(override) for override in overrides)
    TypeRegistry.set_defaults(entries)


def build_constellation(config: dict) -> NodeContainer:
    """
    Creates the satellites listed under 'constellation.satellites'.
    Each entry maps attribute names to values; missing attributes keep their default.
    """
    constellation_config = config.get("constellation") or {}
    if not isinstance(constellation_config, dict):
        raise ConfigError("'constellation' must be a mapping")
    satellites_config = constellation_config.get("satellites") or []
    if not isinstance(satellites_config, list):
        raise ConfigError("'constellation.satellites' must be a list")

    container = NodeContainer()
    for i, sat_config in enumerate(satellites_config):
        sat_config = sat_config or {}
        if not isinstance(sat_config, dict):
            raise ConfigError(f"Satellite entry {i} must be a mapping of attribute values")
        if not all(isinstance(name, str) for name in sat_config):
            raise ConfigError(f"Satellite entry {i} has a non-string attribute name")
        satellite = TypeRegistry.create_object(SATELLITE_TYPE_NAME, **sat_config)
        container.add(satellite)
    log.info(f"Built constellation with {len(container)} satellites")
    return container
