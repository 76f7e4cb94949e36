"""
Pytest configuration and shared fixtures for bacon_graph testing.
"""

import pytest
import logging
from pathlib import Path
from typing import List

from bacon_graph.graph import GraphBuilder, ActorMovieGraph, iter_records
from bacon_graph.models import Record
from bacon_graph.solver import BaconGraph

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

REFERENCE_ACTOR = "Bacon, Kevin (I)"

@pytest.fixture
def sample_lines() -> List[str]:
    """A small data file: two costars, one actor two steps away, one disconnected actor."""
    return [
        "CREDITS LIST\n",
        "<a>Bacon, Kevin (I)\n",
        "<t>Footloose (1984)\n",
        "<t>Apollo 13 (1995)\n",
        "<a>Hanks, Tom\n",
        "<t>Apollo 13 (1995)\n",
        "<t>Big (1988)\n",
        "\n",
        "<a>Perkins, Elizabeth\n",
        "<t>Big (1988)\n",
        "<a>Singer, Lori\n",
        "<t>Footloose (1984)\n",
        "-- this line is noise\n",
        "<a>Loner, Lonny\n",
        "<t>Nobody Saw This (2001)\n",
    ]

@pytest.fixture
def sample_records(sample_lines: List[str]) -> List[Record]:
    return list(iter_records(sample_lines))

@pytest.fixture
def sample_graph(sample_records: List[Record]) -> ActorMovieGraph:
    return GraphBuilder().add_records(sample_records).build()

@pytest.fixture
def bacon_graph(sample_records: List[Record]) -> BaconGraph:
    """BaconGraph over the sample data, measured from Kevin Bacon."""
    return BaconGraph.from_records(sample_records, reference_actor=REFERENCE_ACTOR)

@pytest.fixture
def sample_data_file(tmp_path: Path, sample_lines: List[str]) -> Path:
    """The sample data written to disk."""
    data_file = tmp_path / "moviedata.txt"
    data_file.write_text("".join(sample_lines), encoding="utf-8")
    return data_file
