"""
Single-source breadth-first search over the actor/movie graph.

Distances are counted in hops, so actors sit at even distances from the
reference actor and movies at odd ones.
"""

import time
import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from ..exceptions import ReferenceActorNotFoundException
from ..graph.builder import ActorMovieGraph

logger = logging.getLogger(__name__)


class ShortestPathTree:
    """
    BFS result: hop distance and predecessor id for every reached node.

    Nodes absent from the tree were never reached; their distance and
    predecessor are both None.
    """

    def __init__(self, root: int, distances: Dict[int, int], predecessors: Dict[int, int]):
        self.root = root
        self._distances = distances
        self._predecessors = predecessors

    def distance(self, node_id: int) -> Optional[int]:
        return self._distances.get(node_id)

    def predecessor(self, node_id: int) -> Optional[int]:
        return self._predecessors.get(node_id)

    def is_reached(self, node_id: int) -> bool:
        return node_id in self._distances

    @property
    def reached_count(self) -> int:
        return len(self._distances)

    def path_to(self, node_id: int) -> List[int]:
        """
        Ids from the root down to node_id, following predecessor links.

        An unreached node has no predecessor, so its path is just [node_id].
        """
        path = [node_id]
        current = self._predecessors.get(node_id)
        while current is not None:
            path.append(current)
            current = self._predecessors.get(current)
        path.reverse()
        return path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortestPathTree):
            return NotImplemented
        return (
            self.root == other.root
            and self._distances == other._distances
            and self._predecessors == other._predecessors
        )

    def __repr__(self) -> str:
        return f"ShortestPathTree(root={self.root}, reached={self.reached_count})"


def breadth_first_search(graph: ActorMovieGraph, reference_actor: str) -> ShortestPathTree:
    """
    Compute hop distances from the reference actor to every reachable node.

    Args:
        graph: The built actor/movie graph
        reference_actor: Exact name of the actor to measure from

    Returns:
        ShortestPathTree rooted at the reference actor

    Raises:
        ReferenceActorNotFoundException: If the reference actor is not in the graph
    """
    root = graph.actor_id(reference_actor)
    if root is None:
        raise ReferenceActorNotFoundException(reference_actor)

    logger.info(f"Calculating distances from {reference_actor}...")
    start_time = time.perf_counter()

    distances: Dict[int, int] = {root: 0}
    predecessors: Dict[int, int] = {}
    queue: Deque[int] = deque([root])

    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for neighbour in graph.neighbours(current):
            if neighbour not in distances:
                distances[neighbour] = next_distance
                predecessors[neighbour] = current
                queue.append(neighbour)

    search_time = time.perf_counter() - start_time
    logger.info(
        f"Search done in {search_time*1000:.1f}ms, "
        f"reached {len(distances)} of {graph.node_count} nodes"
    )

    return ShortestPathTree(root, distances, predecessors)
