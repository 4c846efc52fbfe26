"""Interference graph used for register allocation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LiveRange:
    """The span of addresses over which a value is live."""

    start_addr: int
    end_addr: int


@dataclass
class _GraphNode:
    color: int
    neighbours: list[int] = field(default_factory=list)
    visible: bool = True


class InterferenceGraph:
    """Undirected graph of virtual registers that may not share a colour."""

    def __init__(self, num_colors: int = 16, max_nodes: int = 128):
        if num_colors < 1:
            raise ValueError("at least one colour is needed")
        if max_nodes < 0:
            raise ValueError("max_nodes must not be negative")
        self.num_colors = num_colors
        self.max_nodes = max_nodes
        self.null_color = num_colors + 1
        self._nodes: list[_GraphNode] = []
        self._edges: set[tuple[int, int]] = set()

    def __len__(self) -> int:
        return len(self._nodes)

    def add_node(self, preset_color: int | None = None) -> int:
        """Add a node, optionally pre-coloured, and return its index."""
        if len(self._nodes) >= self.max_nodes:
            raise IndexError(f"graph is limited to {self.max_nodes} nodes")
        if preset_color is None:
            color = self.null_color
        elif 0 <= preset_color < self.num_colors:
            color = preset_color
        else:
            raise ValueError(f"colour {preset_color} is out of range")
        self._nodes.append(_GraphNode(color))
        return len(self._nodes) - 1

    def _node(self, index: int) -> _GraphNode:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"no node {index}")
        return self._nodes[index]

    def add_edge(self, first: int, second: int) -> None:
        """Record that two nodes interfere; repeated edges are ignored."""
        a, b = self._node(first), self._node(second)
        if first == second:
            raise ValueError("a node cannot interfere with itself")
        key = (min(first, second), max(first, second))
        if key in self._edges:
            return
        self._edges.add(key)
        a.neighbours.append(second)
        b.neighbours.append(first)

    def has_edge(self, first: int, second: int) -> bool:
        """Whether the two nodes interfere."""
        self._node(first)
        self._node(second)
        return (min(first, second), max(first, second)) in self._edges

    def neighbours(self, index: int) -> tuple[int, ...]:
        """Nodes interfering with ``index``, in the order edges were added."""
        return tuple(self._node(index).neighbours)

    def degree(self, index: int) -> int:
        """Number of nodes interfering with ``index``."""
        return len(self._node(index).neighbours)

    def is_k_colorable(self, index: int) -> bool:
        """Whether the node has fewer neighbours than there are colours."""
        return self.degree(index) < self.num_colors