"""
Network graph model for the road graph.
Wraps a NetworkX graph holding the nodes and edges built by the map parser.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple
import logging

import networkx as nx

from .node import Coord, Node, distance
from .edge import Edge

logger = logging.getLogger(__name__)


@dataclass
class NetworkStats:
    """Statistics about the network."""
    total_nodes: int = 0
    total_edges: int = 0
    total_length_m: float = 0.0
    degenerate_edges: int = 0  # Edges with fewer than two geometry points


class RoadNetwork:
    """
    Graph representation of a road network.
    Stores nodes and edges by id; edges reference nodes by id only.
    """

    def __init__(self):
        """Initialize empty network."""
        # Parallel roads between the same two nodes are kept apart by edge id
        self._graph = nx.MultiDiGraph()

        self._nodes: Dict[int, Node] = {}
        self._edges: Dict[int, Edge] = {}

    # ==================== Node Operations ====================

    def add_node(self, node: Node) -> None:
        """Add a node to the network, replacing any node with the same id."""
        if node.id in self._nodes:
            logger.warning("Replacing node %s", node.id)
        self._nodes[node.id] = node
        self._graph.add_node(node.id)
        logger.debug("Added node %s at (%s, %s)",
                     node.id, node.coord.lon, node.coord.lat)

    def get_node(self, node_id: int) -> Optional[Node]:
        """Get a node by ID."""
        return self._nodes.get(node_id)

    def get_nodes(self) -> Iterator[Node]:
        """Iterate over all nodes."""
        return iter(self._nodes.values())

    # ==================== Edge Operations ====================

    def add_edge(self, edge: Edge) -> None:
        """
        Add an edge to the network, replacing any edge with the same id.

        The source and target nodes do not need to be known yet.
        """
        previous = self._edges.get(edge.id)
        if previous is not None:
            logger.warning("Replacing edge %s (%s -> %s)",
                           edge.id, previous.source, previous.target)
            self._graph.remove_edge(previous.source, previous.target, key=previous.id)

        self._edges[edge.id] = edge
        self._graph.add_edge(edge.source, edge.target, key=edge.id)
        logger.debug("Added edge %s (%s -> %s, %d points)",
                     edge.id, edge.source, edge.target, len(edge.geometry))

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        """Get an edge by ID."""
        return self._edges.get(edge_id)

    def get_edges(self) -> Iterator[Edge]:
        """Iterate over all edges."""
        return iter(self._edges.values())

    def get_neighbors(self, node_id: int) -> List[int]:
        """Get the ids of nodes reachable over one edge."""
        if not self._graph.has_node(node_id):
            return []
        return list(self._graph.successors(node_id))

    def get_outgoing_edges(self, node_id: int) -> List[Edge]:
        """Get all edges starting at a node."""
        if not self._graph.has_node(node_id):
            return []
        return [self._edges[key]
                for _, _, key in self._graph.out_edges(node_id, keys=True)]

    # ==================== Statistics ====================

    def get_stats(self) -> NetworkStats:
        """Get network statistics."""
        stats = NetworkStats()
        stats.total_nodes = len(self._nodes)
        stats.total_edges = len(self._edges)
        stats.total_length_m = float(sum(float(e.length()) for e in self._edges.values()))
        stats.degenerate_edges = sum(1 for e in self._edges.values() if len(e.geometry) < 2)
        return stats

    # ==================== Bounds ====================

    def get_bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Get geographic bounds (min_lon, min_lat, max_lon, max_lat), None when empty."""
        if not self._nodes:
            return None
        lons = [float(n.coord.lon) for n in self._nodes.values()]
        lats = [float(n.coord.lat) for n in self._nodes.values()]
        return (min(lons), min(lats), max(lons), max(lats))

    # ==================== Queries ====================

    def find_nearest_node(self, coord: Coord) -> Optional[Node]:
        """Find the node closest to a coordinate."""
        min_dist = float('inf')
        nearest = None

        for node in self._nodes.values():
            dist = distance(coord, node.coord)
            if dist < min_dist:
                min_dist = dist
                nearest = node

        return nearest

    # ==================== Export ====================

    def to_records(self) -> List[Dict[str, Any]]:
        """One row per edge with its length in meters and WKT geometry."""
        return [
            {
                'id': e.id,
                'source': e.source,
                'target': e.target,
                'length': e.length(),
                'wkt': e.as_wkt(),
            }
            for e in self._edges.values()
        ]

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self._nodes)

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (f"RoadNetwork(nodes={stats.total_nodes}, "
                f"edges={stats.total_edges}, "
                f"length_m={stats.total_length_m:.1f})")
