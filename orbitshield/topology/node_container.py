from typing import Iterator, Union

import networkx as nx

from orbitshield import logger
from orbitshield.attributes.type_registry import TypeRegistry
from orbitshield.topology.node import Node
from orbitshield.topology.satellite.satellite import Satellite

log = logger.get_logger(__name__)

SATELLITE_TYPE_NAME = "orbitshield::Satellite"


def _node_of(obj) -> Node:
    if isinstance(obj, Node):
        return obj
    node = getattr(obj, "node", None)
    if isinstance(node, Node):
        return node
    raise TypeError(f"{obj!r} is not a simulation node")


class NodeContainer:
    def __init__(self):
        """
        Collection of the simulation nodes. Nodes are kept in a NetworkX graph
        keyed by node id; ids are handed out sequentially starting at 0.
        """
        self.graph = nx.Graph()
        self._next_id = 0

    def add(self, obj: Union[Node, Satellite]) -> int:
        """
        Add a node and assign its id.
        :param obj: A Node, or an object composing one (e.g. a Satellite)
        :return: The assigned id
        :raises ValueError: if the node already belongs to a container.
        """
        node = _node_of(obj)
        if node.id is not None:
            raise ValueError(f"Node {node.id} already belongs to a container")
        node.id = self._next_id
        self._next_id += 1
        self.graph.add_node(node.id, node=obj)
        log.debug(f"Added {obj!r} to container")
        return node.id

    def create(self, n: int, type_name: str = SATELLITE_TYPE_NAME, **attributes) -> list:
        """
        Create n objects of a registered type and add them to the container.
        :param n: Number of objects
        :param type_name: Registered type name
        :param attributes: Attribute values applied to every created object
        :return: The created objects
        """
        if n < 0:
            raise ValueError("Number of nodes must be non-negative")
        created = []
        for _ in range(n):
            obj = TypeRegistry.create_object(type_name, **attributes)
            self.add(obj)
            created.append(obj)
        log.info(f"Created {n} {type_name} nodes")
        return created

    def get(self, id: int):
        """
        Get a node by its id.
        :raises KeyError: if no node with the given id is in the container.
        """
        if id not in self.graph:
            raise KeyError(f"Node with ID {id} not found in container.")
        return self.graph.nodes[id]["node"]

    def get_n(self) -> int:
        return self.graph.number_of_nodes()

    def get_satellites(self) -> list[Satellite]:
        return [node for node in self if isinstance(node, Satellite)]

    def __len__(self) -> int:
        return self.get_n()

    def __iter__(self) -> Iterator:
        for node_id in self.graph.nodes:
            yield self.graph.nodes[node_id]["node"]
