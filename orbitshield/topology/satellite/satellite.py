from typing import Optional

from astropy import units as astro_units

from orbitshield import logger
from orbitshield.attributes.checkers import DoubleChecker
from orbitshield.attributes.type_registry import TypeId, TypeRegistry, register_type
from orbitshield.topology.node import Node

log = logger.get_logger(__name__)

DEFAULT_ALTITUDE_M = 400000.0
DEFAULT_INCLINATION_DEG = 45.0

ALTITUDE_CHECKER = DoubleChecker(minimum=0.0, unit=astro_units.m)
INCLINATION_CHECKER = DoubleChecker(minimum=0.0, maximum=180.0, unit=astro_units.deg)


class SatelliteAttributes:

    def __init__(
        self,
        altitude: float = DEFAULT_ALTITUDE_M,
        inclination: float = DEFAULT_INCLINATION_DEG,
    ):
        """
        Orbital parameters of a satellite. Every assignment is range checked.
        :param altitude: Orbital altitude in meters, >= 0
        :param inclination: Orbital inclination in degrees, within [0, 180]
        """
        self._altitude = ALTITUDE_CHECKER.validate("altitude", altitude)
        self._inclination = INCLINATION_CHECKER.validate("inclination", inclination)

    @property
    def altitude(self) -> float:
        return self._altitude

    @altitude.setter
    def altitude(self, value):
        self._altitude = ALTITUDE_CHECKER.validate("altitude", value)

    @property
    def inclination(self) -> float:
        return self._inclination

    @inclination.setter
    def inclination(self, value):
        self._inclination = INCLINATION_CHECKER.validate("inclination", value)

    def __eq__(self, other):
        if not isinstance(other, SatelliteAttributes):
            return NotImplemented
        return self._altitude == other._altitude and self._inclination == other._inclination

    def __repr__(self):
        return f"SatelliteAttributes(altitude={self._altitude}, inclination={self._inclination})"


@register_type
class Satellite:
    """
    A satellite node of an orbital constellation.

    Identity comes from the composed Node; the orbital parameters live in a
    SatelliteAttributes value. Both parameters can also be read and written by
    name ("Altitude", "Inclination") through the TypeRegistry.
    """

    _type_id: Optional[TypeId] = None

    def __init__(self):
        self.node = Node()
        self.orbit = SatelliteAttributes()
        TypeRegistry.construct_self(self)
        log.debug(f"Satellite created: {self.orbit}")

    @classmethod
    def get_type_id(cls) -> TypeId:
        if cls._type_id is None:
            cls._type_id = (
                TypeId("orbitshield::Satellite")
                .set_parent("orbitshield::Node")
                .set_group_name("OrbitShield")
                .add_attribute(
                    "Altitude",
                    "Orbital altitude in meters",
                    DEFAULT_ALTITUDE_M,
                    setter="set_altitude",
                    getter="get_altitude",
                    checker=ALTITUDE_CHECKER,
                )
                .add_attribute(
                    "Inclination",
                    "Orbital inclination in degrees",
                    DEFAULT_INCLINATION_DEG,
                    setter="set_inclination",
                    getter="get_inclination",
                    checker=INCLINATION_CHECKER,
                )
            )
        return cls._type_id

    @property
    def id(self) -> Optional[int]:
        return self.node.id

    def set_altitude(self, altitude) -> None:
        """
        Set the orbital altitude.
        :param altitude: Altitude in meters (or an astropy length quantity)
        :raises OutOfDomainValueError: if the altitude is negative; the previous value is kept.
        """
        log.debug(f"Satellite {self.id}: set_altitude({altitude})")
        self.orbit.altitude = altitude

    def get_altitude(self) -> float:
        return self.orbit.altitude

    def set_inclination(self, inclination) -> None:
        """
        Set the orbital inclination.
        :param inclination: Inclination in degrees (or an astropy angle quantity)
        :raises OutOfDomainValueError: if outside [0, 180]; the previous value is kept.
        """
        log.debug(f"Satellite {self.id}: set_inclination({inclination})")
        self.orbit.inclination = inclination

    def get_inclination(self) -> float:
        return self.orbit.inclination

    altitude = property(get_altitude, set_altitude)
    inclination = property(get_inclination, set_inclination)

    def __repr__(self):
        return (
            f"Satellite(id={self.id}, altitude={self.get_altitude()}, "
            f"inclination={self.get_inclination()})"
        )
