"""Common errors declarations
"""


class OrbitShieldError(Exception):
    """Generic error"""

    pass


class OutOfDomainValueError(OrbitShieldError, ValueError):
    """Attribute value outside of its declared domain"""

    def __init__(self, attribute: str, value, domain: str = ""):
        self.attribute = attribute
        self.value = value
        self.domain = domain
        message = f"Invalid value {value!r} for attribute '{attribute}'"
        if domain:
            message += f" (expected {domain})"
        super().__init__(message)


class UnknownTypeError(OrbitShieldError, KeyError):
    """Type name not present in the registry"""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class UnknownAttributeError(OrbitShieldError, KeyError):
    """Attribute name not declared by the type"""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class ConfigError(OrbitShieldError):
    """Invalid or missing configuration"""

    pass
