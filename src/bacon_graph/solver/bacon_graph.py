"""
BaconGraph - Degrees of separation between actors and a reference actor.

Loads an actor/movie data file into a bipartite graph, runs one breadth-first
search from the reference actor, and answers distance and path queries against
the result. The graph is read-only once constructed.
"""

import time
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import DEFAULT_EXPECTED_ACTORS, DEFAULT_EXPECTED_MOVIES, DEFAULT_REFERENCE_ACTOR
from ..graph.builder import ActorMovieGraph, GraphBuilder
from ..graph.records import read_records
from ..models import DistanceResult, PathStep, Record
from .traversal import ShortestPathTree, breadth_first_search

logger = logging.getLogger(__name__)


def render_path(steps: Iterable[PathStep]) -> str:
    """Concatenate the rendered steps, e.g. <a>X<a><t>M1<t><a>Y<a>."""
    return "".join(step.render() for step in steps)


def _validate_actor_name(name: Optional[str]) -> None:
    if name is None or not name.strip():
        raise ValueError("Actor can't be null or empty")


class BaconGraph:
    """Actor/movie graph with distances to a reference actor precomputed."""

    def __init__(self, graph: ActorMovieGraph, reference_actor: str = DEFAULT_REFERENCE_ACTOR):
        """
        Run the search over an already built graph.

        Raises:
            ReferenceActorNotFoundException: If the reference actor is not in the graph
        """
        self.graph = graph
        self.reference_actor = reference_actor
        self.tree: ShortestPathTree = breadth_first_search(graph, reference_actor)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Record],
        reference_actor: str = DEFAULT_REFERENCE_ACTOR,
        expected_actors: int = DEFAULT_EXPECTED_ACTORS,
        expected_movies: int = DEFAULT_EXPECTED_MOVIES,
    ) -> "BaconGraph":
        builder = GraphBuilder(expected_actors, expected_movies)
        builder.add_records(records)
        return cls(builder.build(), reference_actor)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        reference_actor: str = DEFAULT_REFERENCE_ACTOR,
        expected_actors: int = DEFAULT_EXPECTED_ACTORS,
        expected_movies: int = DEFAULT_EXPECTED_MOVIES,
    ) -> "BaconGraph":
        """
        Build the graph from a data file and compute every actor's distance.

        Args:
            path: File with <a>-prefixed actor lines, each followed by the
                <t>-prefixed movies the actor appeared in
            reference_actor: Actor every distance is measured from
            expected_actors: Expected number of actors in the file
            expected_movies: Expected number of movies in the file

        Raises:
            ValueError: If path is empty or a hint is negative
            FileNotFoundError: If the file does not exist
            OSError: If the file can't be read
            ReferenceActorNotFoundException: If the reference actor is not in the file
        """
        total_start_time = time.perf_counter()
        builder = GraphBuilder(expected_actors, expected_movies)

        logger.info(f"Reading file {path}...")
        read_start_time = time.perf_counter()
        builder.add_records(read_records(path))
        graph = builder.build()
        read_time = time.perf_counter() - read_start_time

        logger.info(f"File read in {read_time*1000:.1f}ms")
        logger.info(f"Actors read: {graph.actor_count} (expected {expected_actors})")
        logger.info(f"Movies read: {graph.movie_count} (expected {expected_movies})")

        bacon_graph = cls(graph, reference_actor)

        total_time = time.perf_counter() - total_start_time
        logger.info(f"Total time {total_time*1000:.1f}ms")
        return bacon_graph

    @property
    def actor_count(self) -> int:
        return self.graph.actor_count

    @property
    def movie_count(self) -> int:
        return self.graph.movie_count

    def __contains__(self, actor: object) -> bool:
        return isinstance(actor, str) and self.graph.actor_id(actor) is not None

    def retraverse(self) -> ShortestPathTree:
        """Recompute the search. The graph is static, so the result is always the same."""
        self.tree = breadth_first_search(self.graph, self.reference_actor)
        return self.tree

    def lookup_distance(self, actor: str) -> DistanceResult:
        """
        Get the Bacon number of an actor.

        Two hops (actor -> movie -> actor) make up one degree of separation.

        Raises:
            ValueError: If the name is empty
        """
        _validate_actor_name(actor)
        actor_id = self.graph.actor_id(actor)
        if actor_id is None:
            return DistanceResult.not_found()

        distance = self.tree.distance(actor_id)
        if distance is None:
            return DistanceResult.unreachable()
        return DistanceResult.reached(distance // 2)

    def lookup_path(self, actor: str) -> Optional[List[PathStep]]:
        """
        Get the chain of actors and movies from the reference actor to an actor.

        Returns None if the actor is unknown. An unreachable actor yields a
        single-step path, so check lookup_distance before relying on it.

        Raises:
            ValueError: If the name is empty
        """
        _validate_actor_name(actor)
        actor_id = self.graph.actor_id(actor)
        if actor_id is None:
            return None

        return [
            PathStep(kind=self.graph.kind(node_id), name=self.graph.name(node_id))
            for node_id in self.tree.path_to(actor_id)
        ]

    def bacon_path(self, actor: str) -> Optional[str]:
        """Rendered form of lookup_path."""
        steps = self.lookup_path(actor)
        if steps is None:
            return None
        return render_path(steps)
