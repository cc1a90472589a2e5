import unittest

from orbitshield.attributes.checkers import DoubleChecker
from orbitshield.attributes.type_registry import TypeId, TypeRegistry
from orbitshield.errors import OutOfDomainValueError, UnknownAttributeError, UnknownTypeError
from orbitshield.topology.node import Node
from orbitshield.topology.satellite.satellite import Satellite


class MockBeacon:
    """Minimal configurable type used to exercise the registry."""

    _type_id = (
        TypeId("test::Beacon")
        .set_parent("orbitshield::Node")
        .set_group_name("Test")
        .add_attribute(
            "Power",
            "Transmit power in watts",
            10.0,
            setter="set_power",
            getter="get_power",
            checker=DoubleChecker(minimum=0.0, maximum=100.0),
        )
    )

    def __init__(self):
        self.node = Node()
        self.power = 10.0
        self.set_calls = 0
        TypeRegistry.construct_self(self)

    @classmethod
    def get_type_id(cls):
        return cls._type_id

    def set_power(self, power):
        self.set_calls += 1
        self.power = power

    def get_power(self):
        return self.power


class TestTypeRegistry(unittest.TestCase):
    """Test type registration, lookup and named attribute access."""

    def setUp(self):
        MockBeacon._type_id.add_constructor(MockBeacon)
        TypeRegistry.register(MockBeacon._type_id)
        TypeRegistry.reset_defaults()

    def tearDown(self):
        TypeRegistry.unregister("test::Beacon")
        TypeRegistry.reset_defaults()

    def test_builtin_types_registered(self):
        types = TypeRegistry.list_types()
        self.assertIn("orbitshield::Node", types)
        self.assertIn("orbitshield::Satellite", types)

    def test_node_type_metadata(self):
        type_id = TypeRegistry.lookup("orbitshield::Node")
        self.assertIs(type_id, Node.get_type_id())
        self.assertIs(type_id.constructor, Node)
        self.assertIsNone(type_id.parent)
        self.assertEqual(type_id.get_attribute_n(), 0)
        self.assertIsInstance(TypeRegistry.create_object("Node"), Node)

    def test_type_id_built_once(self):
        self.assertIs(Satellite.get_type_id(), Satellite.get_type_id())
        self.assertIs(Satellite.get_type_id().constructor, Satellite)

    def test_set_defaults_all_or_nothing(self):
        with self.assertRaises(OutOfDomainValueError):
            TypeRegistry.set_defaults(
                [("Satellite::Inclination", 60.0), ("Beacon::Power", 500.0)]
            )
        self.assertEqual(TypeRegistry.get_default("Satellite::Inclination"), 45.0)
        TypeRegistry.set_defaults([("Beacon::Power", 5.0), ("test::Beacon::Power", 7.0)])
        self.assertEqual(TypeRegistry.get_default("Beacon::Power"), 7.0)

    def test_satellite_type_metadata(self):
        type_id = TypeRegistry.lookup("orbitshield::Satellite")
        self.assertIs(type_id, Satellite.get_type_id())
        self.assertEqual(type_id.parent, "orbitshield::Node")
        self.assertEqual(type_id.group_name, "OrbitShield")
        self.assertEqual(type_id.get_attribute_n(), 2)

        altitude = type_id.lookup_attribute("Altitude")
        self.assertEqual(altitude.description, "Orbital altitude in meters")
        self.assertEqual(altitude.initial_value, 400000.0)
        self.assertEqual(altitude.checker.minimum, 0.0)
        self.assertIsNone(altitude.checker.maximum)

        inclination = type_id.lookup_attribute("Inclination")
        self.assertEqual(inclination.initial_value, 45.0)
        self.assertEqual(inclination.checker.minimum, 0.0)
        self.assertEqual(inclination.checker.maximum, 180.0)

    def test_lookup_by_short_name(self):
        self.assertIs(TypeRegistry.lookup("Satellite"), Satellite.get_type_id())
        self.assertIs(TypeRegistry.lookup("Beacon"), MockBeacon._type_id)

    def test_lookup_unknown_type(self):
        with self.assertRaises(UnknownTypeError) as ctx:
            TypeRegistry.lookup("Asteroid")
        self.assertIn("orbitshield::Satellite", str(ctx.exception))

    def test_duplicate_registration(self):
        with self.assertRaises(ValueError):
            TypeRegistry.register(TypeId("test::Beacon"))

    def test_duplicate_attribute_declaration(self):
        type_id = TypeId("test::Twice").add_attribute(
            "A", "first", 1.0, setter="s", getter="g", checker=DoubleChecker()
        )
        with self.assertRaises(ValueError):
            type_id.add_attribute("A", "second", 1.0, setter="s", getter="g", checker=DoubleChecker())

    def test_invalid_declared_default(self):
        with self.assertRaises(OutOfDomainValueError):
            TypeId("test::Bad").add_attribute(
                "A", "bad", -1.0, setter="s", getter="g", checker=DoubleChecker(minimum=0.0)
            )

    def test_create_object_with_attributes(self):
        beacon = TypeRegistry.create_object("Beacon", Power=42.0)
        self.assertIsInstance(beacon, MockBeacon)
        self.assertEqual(beacon.get_power(), 42.0)

    def test_create_satellite(self):
        satellite = TypeRegistry.create_object("orbitshield::Satellite", Altitude=500000.0)
        self.assertIsInstance(satellite, Satellite)
        self.assertEqual(satellite.get_altitude(), 500000.0)
        self.assertEqual(satellite.get_inclination(), 45.0)

    def test_create_object_rejects_invalid_value(self):
        with self.assertRaises(OutOfDomainValueError):
            TypeRegistry.create_object("Satellite", Inclination=-10.0)

    def test_unknown_attribute(self):
        beacon = MockBeacon()
        with self.assertRaises(UnknownAttributeError):
            TypeRegistry.set_attribute(beacon, "Frequency", 1.0)
        with self.assertRaises(UnknownAttributeError):
            TypeRegistry.get_attribute(beacon, "Frequency")

    def test_rejected_value_does_not_reach_setter(self):
        beacon = MockBeacon()
        calls = beacon.set_calls
        with self.assertRaises(OutOfDomainValueError):
            TypeRegistry.set_attribute(beacon, "Power", 101.0)
        self.assertEqual(beacon.set_calls, calls)
        self.assertEqual(beacon.get_power(), 10.0)

    def test_set_attribute_fail_safe(self):
        satellite = Satellite()
        self.assertTrue(TypeRegistry.set_attribute_fail_safe(satellite, "Altitude", 450000.0))
        with self.assertLogs("orbitshield", level="WARNING"):
            self.assertFalse(TypeRegistry.set_attribute_fail_safe(satellite, "Altitude", -1.0))
        self.assertFalse(TypeRegistry.set_attribute_fail_safe(satellite, "Mass", 100.0))
        self.assertEqual(satellite.get_altitude(), 450000.0)

    def test_set_default(self):
        TypeRegistry.set_default("orbitshield::Satellite::Inclination", 97.5)
        self.assertEqual(TypeRegistry.get_default("Satellite::Inclination"), 97.5)
        self.assertEqual(Satellite().get_inclination(), 97.5)
        TypeRegistry.set_default("Beacon::Power", 1.0)
        self.assertEqual(MockBeacon().get_power(), 1.0)

    def test_set_default_rejects_invalid_value(self):
        with self.assertRaises(OutOfDomainValueError):
            TypeRegistry.set_default("Satellite::Altitude", -100.0)
        self.assertEqual(TypeRegistry.get_default("Satellite::Altitude"), 400000.0)

    def test_set_default_malformed_path(self):
        with self.assertRaises(UnknownAttributeError):
            TypeRegistry.set_default("Altitude", 1.0)
        with self.assertRaises(UnknownAttributeError):
            TypeRegistry.set_default("Satellite::Mass", 1.0)
        with self.assertRaises(UnknownTypeError):
            TypeRegistry.set_default("Rocket::Altitude", 1.0)

    def test_reset_defaults(self):
        TypeRegistry.set_default("Satellite::Altitude", 600000.0)
        TypeRegistry.reset_defaults()
        self.assertEqual(Satellite().get_altitude(), 400000.0)

    def test_all_attributes_includes_parents(self):
        names = [info.name for info in TypeRegistry.all_attributes(Satellite.get_type_id())]
        self.assertEqual(names, ["Altitude", "Inclination"])


if __name__ == "__main__":
    unittest.main()
