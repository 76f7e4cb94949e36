"""
Bacon Graph - Core Library

Computes every actor's degrees of separation from a reference actor over a
graph of actors and the movies they appeared in.
"""

from .models import DistanceResult, DistanceStatus, NodeKind, PathStep
from .solver import BaconGraph

__all__ = ['BaconGraph', 'DistanceResult', 'DistanceStatus', 'NodeKind', 'PathStep']
