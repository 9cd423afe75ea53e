# graph_store/store.py
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Tuple
from types import MappingProxyType
import networkx as nx

Node = Hashable

class GraphStore:
    """Read-only directed adjacency relation built once from an edge list.

    Keys are the nodes that appear at least once as an edge source. A node
    that only ever appears as a target is not a key unless the store is built
    with ``include_sink_nodes=True``, in which case it is added with an empty
    neighbor sequence. Neighbor sequences keep duplicates and self-loops in
    input order.
    """

    def __init__(self, adjacency: Mapping[Node, Iterable[Node]]):
        self._adjacency: Mapping[Node, Tuple[Node, ...]] = MappingProxyType(
            {node: tuple(neighbors) for node, neighbors in adjacency.items()}
        )
        self._nodes: Tuple[Node, ...] = tuple(self._adjacency)
        self._edge_count = sum(len(neighbors) for neighbors in self._adjacency.values())

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Node, Node]],
                   include_sink_nodes: bool = False) -> 'GraphStore':
        """Build a store from ``(source, target)`` pairs."""
        adjacency: Dict[Node, List[Node]] = {}
        targets: List[Node] = []

        for source, target in edges:
            adjacency.setdefault(source, []).append(target)
            targets.append(target)

        if include_sink_nodes:
            for target in targets:
                adjacency.setdefault(target, [])

        return cls(adjacency)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Node, Iterable[Node]],
                     include_sink_nodes: bool = False) -> 'GraphStore':
        """Build a store from an existing node -> neighbors mapping."""
        adjacency = {node: list(neighbors) for node, neighbors in mapping.items()}

        if include_sink_nodes:
            for neighbors in list(adjacency.values()):
                for target in neighbors:
                    adjacency.setdefault(target, [])

        return cls(adjacency)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def neighbors(self, node: Node) -> Tuple[Node, ...]:
        """Out-neighbors of ``node``; empty for nodes that are not keys."""
        return self._adjacency.get(node, ())

    def out_degree(self, node: Node) -> int:
        return len(self.neighbors(node))

    def items(self):
        return self._adjacency.items()

    def to_networkx(self) -> nx.MultiDiGraph:
        """Copy the store into a networkx multigraph, keeping parallel edges."""
        G = nx.MultiDiGraph()
        G.add_nodes_from(self._nodes)
        for source, neighbors in self._adjacency.items():
            G.add_edges_from((source, target) for target in neighbors)
        return G

    def __contains__(self, node: Any) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, edges={self._edge_count})"
