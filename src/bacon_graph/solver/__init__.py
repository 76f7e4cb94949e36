# Shortest-path search and queries over the actor/movie graph

from .traversal import ShortestPathTree, breadth_first_search
from .bacon_graph import BaconGraph, render_path

__all__ = [
    "ShortestPathTree",
    "breadth_first_search",
    "BaconGraph",
    "render_path",
]
