# orbitshield_basic_example.py
# Creates a small constellation and logs its configuration.

import sys

from orbitshield import logger
from orbitshield.topology.node_container import NodeContainer
from orbitshield.topology.satellite.satellite import Satellite

log = logger.get_logger(__name__)

NUM_SATELLITES = 3
BASE_ALTITUDE_M = 400000.0
ALTITUDE_STEP_M = 50000.0
INCLINATION_DEG = 51.6  # ISS-like inclination


def run_example() -> NodeContainer:
    """
    Creates three satellites with increasing altitude and the same inclination.
    """
    log.info("Creating satellite constellation...")
    constellation = NodeContainer()

    for i in range(NUM_SATELLITES):
        satellite = Satellite()
        satellite.set_altitude(BASE_ALTITUDE_M + i * ALTITUDE_STEP_M)
        satellite.set_inclination(INCLINATION_DEG)
        constellation.add(satellite)

        log.info(
            f"Created Satellite {i}: Altitude={satellite.get_altitude()}m, "
            f"Inclination={satellite.get_inclination()}°"
        )

    log.info(f"Constellation created with {len(constellation)} satellites")
    return constellation


def main() -> int:
    logger.setup_logger(is_debug=False)
    run_example()
    return 0


if __name__ == "__main__":
    sys.exit(main())
