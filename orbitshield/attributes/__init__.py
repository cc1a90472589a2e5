from .checkers import DoubleChecker
from .type_registry import AttributeInfo, TypeId, TypeRegistry, register_type

__all__ = ["AttributeInfo", "DoubleChecker", "TypeId", "TypeRegistry", "register_type"]
