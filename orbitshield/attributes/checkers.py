import math
import numbers
from typing import Optional

from astropy import units as astro_units

from orbitshield.errors import OutOfDomainValueError


class DoubleChecker:
    """
    Inclusive bounds check for floating-point attributes.

    Values may be plain numbers, numeric strings, or astropy quantities. A
    quantity is converted to ``unit`` before the bounds are checked, so
    ``550 * u.km`` satisfies an altitude checker declared in meters.
    """

    def __init__(
        self,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        unit: Optional[astro_units.UnitBase] = None,
    ):
        """
        :param minimum: Inclusive lower bound, or None for unbounded
        :param maximum: Inclusive upper bound, or None for unbounded
        :param unit: Unit the stored float is expressed in
        """
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"Checker minimum {minimum} is greater than maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit

    def describe(self) -> str:
        lower = "(-inf" if self.minimum is None else f"[{float(self.minimum)}"
        upper = "+inf)" if self.maximum is None else f"{float(self.maximum)}]"
        domain = f"{lower}, {upper}"
        if self.unit is not None:
            domain += f" {self.unit.to_string()}"
        return domain

    def check(self, value) -> bool:
        try:
            self.validate("value", value)
        except OutOfDomainValueError:
            return False
        return True

    def validate(self, name: str, value) -> float:
        """
        Convert ``value`` to a float in this checker's unit and check bounds.
        :param name: Attribute name, used in the error message
        :param value: Candidate value
        :return: The converted value
        :raises OutOfDomainValueError: if the value is not numeric, has an
            incompatible unit, is not finite, or lies outside the bounds.
        """
        converted = self._to_float(name, value)
        if not math.isfinite(converted):
            raise OutOfDomainValueError(name, value, self.describe())
        if self.minimum is not None and converted < self.minimum:
            raise OutOfDomainValueError(name, value, self.describe())
        if self.maximum is not None and converted > self.maximum:
            raise OutOfDomainValueError(name, value, self.describe())
        return converted

    def _to_float(self, name: str, value) -> float:
        if isinstance(value, bool):
            raise OutOfDomainValueError(name, value, self.describe())
        if isinstance(value, astro_units.Quantity):
            if not value.isscalar:
                raise OutOfDomainValueError(name, value, self.describe())
            try:
                if self.unit is None:
                    return float(value.to_value(astro_units.dimensionless_unscaled))
                return float(value.to_value(self.unit))
            except astro_units.UnitConversionError:
                raise OutOfDomainValueError(name, value, self.describe())
        if isinstance(value, numbers.Real):
            try:
                return float(value)
            except OverflowError:
                raise OutOfDomainValueError(name, value, self.describe())
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                raise OutOfDomainValueError(name, value, self.describe())
        raise OutOfDomainValueError(name, value, self.describe())
