import argparse
import sys

from orbitshield import logger
from orbitshield.config import apply_defaults, build_constellation, load_config
from orbitshield.errors import OrbitShieldError

log = logger.get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build an OrbitShield satellite constellation.")
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to the scenario configuration file (default: config.yaml)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="TYPE::ATTRIBUTE=VALUE",
        help="Override an attribute default, e.g. --set Satellite::Altitude=550000",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(config: dict, overrides: list[str]):
    """Applies defaults and overrides, then builds and logs the constellation."""
    apply_defaults(config, overrides)

    container = build_constellation(config)
    for satellite in container.get_satellites():
        log.info(
            f"Satellite {satellite.id}: Altitude={satellite.get_altitude()}m, "
            f"Inclination={satellite.get_inclination()}°"
        )
    return container


def main(argv=None) -> int:
    """Main function to parse arguments and build the constellation."""
    args = parse_args(argv)
    logger.setup_logger(is_debug=args.debug)
    try:
        config = load_config(args.config)
        log_config = config.get("logging") or {}
        if log_config:
            logger.setup_logger(
                is_debug=args.debug or log_config.get("is_debug", False),
                file_name=log_config.get("file_name"),
            )
        run(config, args.overrides)
    except OrbitShieldError as e:
        log.error(f"Configuration error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
