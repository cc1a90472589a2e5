from typing import Optional

from orbitshield.attributes.type_registry import TypeId, register_type


@register_type
class Node:
    """
    Generic participant of the simulation.
    The id is assigned by the NodeContainer that owns the node.
    """

    _type_id: Optional[TypeId] = None

    def __init__(self):
        self.id: Optional[int] = None

    @classmethod
    def get_type_id(cls) -> TypeId:
        if cls._type_id is None:
            cls._type_id = TypeId("orbitshield::Node").set_group_name("Network")
        return cls._type_id

    def __repr__(self):
        return f"Node(id={self.id})"
