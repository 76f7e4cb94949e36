"""
GraphBuilder - Assembles the bipartite actor/movie graph from input records.

Nodes live in an arena indexed by integer id. An actor is connected to every
movie it appeared in, and the movie back to the actor.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..config import DEFAULT_EXPECTED_ACTORS, DEFAULT_EXPECTED_MOVIES
from ..models import Node, NodeKind, Record

logger = logging.getLogger(__name__)


class ActorMovieGraph:
    """Immutable bipartite graph of actors and movies."""

    def __init__(
        self,
        names: List[str],
        kinds: List[NodeKind],
        adjacency: List[Tuple[int, ...]],
        actor_index: Dict[str, int],
    ):
        self._names = names
        self._kinds = kinds
        self._adjacency = adjacency
        self._actor_index = actor_index
        self._movie_count = sum(1 for kind in kinds if kind is NodeKind.MOVIE)

    def actor_id(self, name: str) -> Optional[int]:
        """Id of the actor with this exact name, or None."""
        return self._actor_index.get(name)

    def name(self, node_id: int) -> str:
        return self._names[node_id]

    def kind(self, node_id: int) -> NodeKind:
        return self._kinds[node_id]

    def neighbours(self, node_id: int) -> Tuple[int, ...]:
        return self._adjacency[node_id]

    def node(self, node_id: int) -> Node:
        return Node(
            id=node_id,
            kind=self._kinds[node_id],
            name=self._names[node_id],
            neighbours=self._adjacency[node_id],
        )

    def actor_names(self) -> Iterator[str]:
        return iter(self._actor_index)

    @property
    def actor_count(self) -> int:
        return len(self._actor_index)

    @property
    def movie_count(self) -> int:
        return self._movie_count

    @property
    def node_count(self) -> int:
        return len(self._names)

    @property
    def edge_count(self) -> int:
        """Number of undirected actor-movie credits."""
        return sum(
            len(neighbours)
            for node_id, neighbours in enumerate(self._adjacency)
            if self._kinds[node_id] is NodeKind.ACTOR
        )


class GraphBuilder:
    """
    Collects actor and movie records into an ActorMovieGraph.

    A movie record is credited to the most recent actor record. Movie titles are
    shared across actors, so every actor credited with the same title ends up
    adjacent to the same movie node.

    Repeated actor names are merged: the first declaration creates the node and
    later declarations of the same name make it the current actor again, so its
    credits accumulate on one node.
    """

    def __init__(
        self,
        expected_actors: int = DEFAULT_EXPECTED_ACTORS,
        expected_movies: int = DEFAULT_EXPECTED_MOVIES,
    ):
        """
        Args:
            expected_actors: Expected number of actors in the input
            expected_movies: Expected number of movies in the input

        Raises:
            ValueError: If either hint is negative.
        """
        if expected_actors < 0 or expected_movies < 0:
            raise ValueError("Expected number of actors and movies can't be negative")

        self.expected_actors = expected_actors
        self.expected_movies = expected_movies

        self._names: List[str] = []
        self._kinds: List[NodeKind] = []
        self._adjacency: List[List[int]] = []
        self._actors: Dict[str, int] = {}
        self._movies: Dict[str, int] = {}
        self._credits: Set[Tuple[int, int]] = set()

        self._current_actor: Optional[int] = None
        self.skipped_records = 0
        self.duplicate_actors = 0

    @property
    def actor_count(self) -> int:
        return len(self._actors)

    @property
    def movie_count(self) -> int:
        return len(self._movies)

    def _new_node(self, name: str, kind: NodeKind) -> int:
        node_id = len(self._names)
        self._names.append(name)
        self._kinds.append(kind)
        self._adjacency.append([])
        return node_id

    def add_record(self, record: Record) -> None:
        """Apply one record to the graph under construction."""
        if record.kind is NodeKind.ACTOR:
            self._add_actor(record.text)
        else:
            self._add_credit(record.text)

    def add_records(self, records: Iterable[Record]) -> "GraphBuilder":
        for record in records:
            self.add_record(record)
        return self

    def _add_actor(self, name: str) -> None:
        actor_id = self._actors.get(name)
        if actor_id is None:
            actor_id = self._new_node(name, NodeKind.ACTOR)
            self._actors[name] = actor_id
        else:
            self.duplicate_actors += 1
            logger.debug(f"Actor '{name}' declared again, merging credits")
        self._current_actor = actor_id

    def _add_credit(self, title: str) -> None:
        if self._current_actor is None:
            self.skipped_records += 1
            logger.debug(f"Skipping movie '{title}' listed before any actor")
            return

        movie_id = self._movies.get(title)
        if movie_id is None:
            movie_id = self._new_node(title, NodeKind.MOVIE)
            self._movies[title] = movie_id

        credit = (self._current_actor, movie_id)
        if credit in self._credits:
            return
        self._credits.add(credit)
        self._adjacency[self._current_actor].append(movie_id)
        self._adjacency[movie_id].append(self._current_actor)

    def build(self) -> ActorMovieGraph:
        """Freeze the collected nodes into an immutable graph."""
        if self.actor_count > self.expected_actors:
            logger.debug(f"Read {self.actor_count} actors, more than the {self.expected_actors} expected")
        if self.movie_count > self.expected_movies:
            logger.debug(f"Read {self.movie_count} movies, more than the {self.expected_movies} expected")
        if self.skipped_records:
            logger.warning(f"Skipped {self.skipped_records} movie records without a preceding actor")

        return ActorMovieGraph(
            names=list(self._names),
            kinds=list(self._kinds),
            adjacency=[tuple(links) for links in self._adjacency],
            actor_index=dict(self._actors),
        )
