# Graph construction from actor/movie records

from .builder import ActorMovieGraph, GraphBuilder
from .records import iter_records, parse_line, read_records

__all__ = [
    "ActorMovieGraph",
    "GraphBuilder",
    "iter_records",
    "parse_line",
    "read_records",
]
