from .satellite import Satellite, SatelliteAttributes

__all__ = ["Satellite", "SatelliteAttributes"]
