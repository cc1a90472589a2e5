from typing import Any, Callable, Dict, List, Optional

from orbitshield import logger
from orbitshield.attributes.checkers import DoubleChecker
from orbitshield.errors import OutOfDomainValueError, UnknownAttributeError, UnknownTypeError

log = logger.get_logger(__name__)

NAMESPACE_SEPARATOR = "::"


class AttributeInfo:
    def __init__(
        self,
        name: str,
        description: str,
        initial_value: float,
        setter: str,
        getter: str,
        checker: DoubleChecker,
    ):
        """
        Metadata of one named attribute.
        :param name: Attribute name, e.g. "Altitude"
        :param description: Human readable description
        :param initial_value: Declared default value
        :param setter: Name of the validated setter method on the object
        :param getter: Name of the getter method on the object
        :param checker: Domain checker applied before the setter is called
        """
        self.name = name
        self.description = description
        self.initial_value = checker.validate(name, initial_value)
        self.default_value = self.initial_value
        self.setter = setter
        self.getter = getter
        self.checker = checker

    def __repr__(self):
        return (
            f"AttributeInfo(name={self.name!r}, default={self.default_value!r}, "
            f"domain={self.checker.describe()!r})"
        )


class TypeId:
    """
    Identification of a registered object type and its declared attributes.

    Built with chained calls, for example::

        TypeId("orbitshield::Satellite").set_parent("orbitshield::Node").add_attribute(...)
    """

    def __init__(self, name: str):
        self.name = name
        self.parent: Optional[str] = None
        self.group_name: Optional[str] = None
        self.constructor: Optional[Callable[[], Any]] = None
        self._attributes: List[AttributeInfo] = []

    def set_parent(self, parent: str) -> "TypeId":
        self.parent = parent
        return self

    def set_group_name(self, group_name: str) -> "TypeId":
        self.group_name = group_name
        return self

    def add_constructor(self, constructor: Callable[[], Any]) -> "TypeId":
        self.constructor = constructor
        return self

    def add_attribute(
        self,
        name: str,
        description: str,
        initial_value: float,
        setter: str,
        getter: str,
        checker: DoubleChecker,
    ) -> "TypeId":
        if any(info.name == name for info in self._attributes):
            raise ValueError(f"Attribute '{name}' already declared on {self.name}")
        self._attributes.append(
            AttributeInfo(name, description, initial_value, setter, getter, checker)
        )
        return self

    def get_short_name(self) -> str:
        return self.name.split(NAMESPACE_SEPARATOR)[-1]

    def get_attribute_n(self) -> int:
        return len(self._attributes)

    def get_attributes(self) -> List[AttributeInfo]:
        return list(self._attributes)

    def lookup_attribute(self, name: str) -> AttributeInfo:
        """
        Get an attribute declared directly on this type.
        :raises UnknownAttributeError: if the type does not declare it.
        """
        for info in self._attributes:
            if info.name == name:
                return info
        raise UnknownAttributeError(f"Type {self.name} has no attribute '{name}'")

    def __repr__(self):
        return f"TypeId({self.name!r})"


class TypeRegistry:
    """Registry of object types configurable by attribute name."""

    _types: Dict[str, TypeId] = {}

    @classmethod
    def register(cls, type_id: TypeId) -> None:
        """
        Register a type with the registry.
        :raises ValueError: if a type with the same name is already registered.
        """
        if type_id.name in cls._types:
            raise ValueError(f"Type '{type_id.name}' is already registered")
        if type_id.parent is not None and type_id.parent not in cls._types:
            log.warning(f"Registering {type_id.name} before its parent {type_id.parent}")
        cls._types[type_id.name] = type_id
        log.debug(
            f"Registered type {type_id.name} ({type_id.get_attribute_n()} attributes, "
            f"group={type_id.group_name})"
        )

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._types.pop(cls.lookup(name).name)

    @classmethod
    def lookup(cls, name: str) -> TypeId:
        """
        Find a type by its full name ("orbitshield::Satellite") or short name ("Satellite").
        :raises UnknownTypeError: if no such type is registered.
        """
        if name in cls._types:
            return cls._types[name]
        matches = [t for t in cls._types.values() if t.get_short_name() == name]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            candidates = ", ".join(sorted(t.name for t in matches))
            raise UnknownTypeError(f"Ambiguous type name '{name}', candidates: {candidates}")
        available = ", ".join(sorted(cls._types.keys()))
        raise UnknownTypeError(f"Unknown type '{name}'. Available types: {available}")

    @classmethod
    def list_types(cls) -> list[str]:
        """Return list of all registered type names."""
        return list(cls._types.keys())

    @classmethod
    def find_attribute(cls, type_id: TypeId, name: str) -> AttributeInfo:
        """
        Look up an attribute on a type or any of its registered parents.
        :raises UnknownAttributeError: if neither the type nor a parent declares it.
        """
        current: Optional[TypeId] = type_id
        while current is not None:
            try:
                return current.lookup_attribute(name)
            except UnknownAttributeError:
                current = cls._types.get(current.parent) if current.parent else None
        raise UnknownAttributeError(f"Type {type_id.name} has no attribute '{name}'")

    @classmethod
    def all_attributes(cls, type_id: TypeId) -> List[AttributeInfo]:
        """Attributes of a type, parents first."""
        chain = []
        current: Optional[TypeId] = type_id
        while current is not None:
            chain.append(current)
            current = cls._types.get(current.parent) if current.parent else None
        attributes = []
        for entry in reversed(chain):
            attributes.extend(entry.get_attributes())
        return attributes

    @classmethod
    def construct_self(cls, obj) -> None:
        """
        Apply the current attribute defaults of the object's type to a freshly
        built object. Types that are not registered keep their own defaults.
        """
        type_id = obj.get_type_id()
        if type_id.name not in cls._types:
            return
        for info in cls.all_attributes(type_id):
            getattr(obj, info.setter)(info.default_value)

    @classmethod
    def create_object(cls, name: str, **attributes):
        """
        Construct a registered type and set the given attributes by name.
        :param name: Type name
        :param attributes: Attribute values keyed by attribute name
        :return: The new object
        :raises UnknownTypeError: if the type is not registered
        :raises UnknownAttributeError: if an attribute is not declared
        :raises OutOfDomainValueError: if a value is outside the attribute domain
        """
        type_id = cls.lookup(name)
        if type_id.constructor is None:
            raise UnknownTypeError(f"Type '{type_id.name}' has no constructor")
        obj = type_id.constructor()
        for attribute_name, value in attributes.items():
            cls.set_attribute(obj, attribute_name, value)
        return obj

    @classmethod
    def set_attribute(cls, obj, name: str, value) -> None:
        """
        Set an attribute by name through the object's validated setter.
        The object is left unchanged when the value is rejected.
        """
        info = cls.find_attribute(obj.get_type_id(), name)
        converted = info.checker.validate(name, value)
        getattr(obj, info.setter)(converted)

    @classmethod
    def set_attribute_fail_safe(cls, obj, name: str, value) -> bool:
        """
        Same as set_attribute, but report failure through the return value.
        :return: True if the value was applied
        """
        try:
            cls.set_attribute(obj, name, value)
        except (OutOfDomainValueError, UnknownAttributeError) as e:
            log.warning(f"Attribute not set on {obj!r}: {e}")
            return False
        return True

    @classmethod
    def get_attribute(cls, obj, name: str):
        info = cls.find_attribute(obj.get_type_id(), name)
        return getattr(obj, info.getter)()

    @classmethod
    def _split_path(cls, path: str) -> tuple[TypeId, AttributeInfo]:
        type_name, separator, attribute_name = path.rpartition(NAMESPACE_SEPARATOR)
        if not separator or not type_name or not attribute_name:
            raise UnknownAttributeError(
                f"Attribute path '{path}' must look like 'Type{NAMESPACE_SEPARATOR}Attribute'"
            )
        type_id = cls.lookup(type_name)
        return type_id, cls.find_attribute(type_id, attribute_name)

    @classmethod
    def set_default(cls, path: str, value) -> None:
        """
        Change the default of an attribute for objects constructed afterwards.
        :param path: "orbitshield::Satellite::Altitude" or "Satellite::Altitude"
        :param value: New default, validated against the attribute domain
        """
        type_id, info = cls._split_path(path)
        info.default_value = info.checker.validate(info.name, value)
        log.info(f"Default of {type_id.name}::{info.name} set to {info.default_value}")

    @classmethod
    def set_defaults(cls, entries) -> None:
        """
        Change several defaults at once. Nothing changes unless every entry is valid;
        for repeated attributes the last entry wins.
        :param entries: Iterable of (attribute path, value) pairs
        """
        resolved = []
        for path, value in entries:
            type_id, info = cls._split_path(path)
            resolved.append((type_id, info, info.checker.validate(info.name, value)))
        for type_id, info, converted in resolved:
            info.default_value = converted
            log.info(f"Default of {type_id.name}::{info.name} set to {converted}")

    @classmethod
    def get_default(cls, path: str) -> float:
        return cls._split_path(path)[1].default_value

    @classmethod
    def reset_defaults(cls) -> None:
        """Restore the declared default of every registered attribute."""
        for type_id in cls._types.values():
            for info in type_id.get_attributes():
                info.default_value = info.initial_value


def register_type(cls):
    """
    Class decorator registering the class's TypeId.
    The class must provide a ``get_type_id`` classmethod.
    """
    type_id = cls.get_type_id()
    if type_id.constructor is None:
        type_id.add_constructor(cls)
    TypeRegistry.register(type_id)
    return cls
