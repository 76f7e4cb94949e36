import logging
from typing import Callable, Optional

import typer
from pydantic import ValidationError

from bacon_graph.config import BaconConfig
from bacon_graph.exceptions import ReferenceActorNotFoundException
from bacon_graph.models import DistanceStatus
from bacon_graph.solver import BaconGraph


app = typer.Typer()

logger = logging.getLogger(__name__)


def describe_actor(graph: BaconGraph, name: str) -> str:
    """Answer for a single query, as shown in the shell."""
    result = graph.lookup_distance(name)
    if result.status is DistanceStatus.NOT_FOUND:
        return f'"{name}" not found'
    if result.status is DistanceStatus.UNREACHABLE:
        return f'"{name}" is not connected to {graph.reference_actor}.'
    return (
        f'"{name}" is {result.bacon_number} steps away from {graph.reference_actor}. The Path is:\n'
        f"{graph.bacon_path(name)}"
    )


def run_shell(graph: BaconGraph, read: Callable[[], str], write: Callable[[str], None]) -> None:
    """
    Read actor names and answer each one until an empty line or end of input.

    Args:
        graph: The loaded graph to query
        read: Returns the next input line, raising EOFError when input ends
        write: Outputs one block of text
    """
    prompt = (
        f'Input the name for the actor in the format "{graph.reference_actor}". '
        "Press enter without providing a name to quit"
    )
    while True:
        write(prompt)
        try:
            line = read()
        except EOFError:
            break
        if not line.strip():
            break
        write("")
        write(describe_actor(graph, line))
        write("")
    write("Goodbye")


@app.command()
def main(
    data_file: Optional[str] = typer.Argument(
        None,
        help="Actor/movie data file. Defaults to BACON_DATA_FILE or moviedata.txt.",
    ),
    reference_actor: Optional[str] = typer.Option(
        None,
        "--reference-actor",
        "-r",
        help="The actor every distance is measured from.",
    ),
    expected_actors: Optional[int] = typer.Option(
        None,
        "--expected-actors",
        help="Expected number of actors in the data file.",
    ),
    expected_movies: Optional[int] = typer.Option(
        None,
        "--expected-movies",
        help="Expected number of movies in the data file.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level for build progress (DEBUG, INFO, WARNING, ERROR).",
    ),
    plain_logs: bool = typer.Option(
        False,
        "--plain-logs",
        help="Log plain text instead of Rich's colored output.",
    ),
):
    """
    Load a movie data file and look up actors' degrees of separation interactively.
    """
    from bacon_graph.logging_config import setup_logging

    overrides = {
        "data_file": data_file,
        "reference_actor": reference_actor,
        "expected_actors": expected_actors,
        "expected_movies": expected_movies,
        "log_level": log_level,
    }
    try:
        config = BaconConfig.from_env()
        config = BaconConfig(
            **{**config.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
        )
    except (ValidationError, ValueError) as e:
        typer.echo(f"Invalid configuration. {e}")
        raise typer.Exit(code=2)

    setup_logging(level=config.log_level, use_rich=not plain_logs)

    try:
        graph = BaconGraph.from_file(
            config.data_file,
            reference_actor=config.reference_actor,
            expected_actors=config.expected_actors,
            expected_movies=config.expected_movies,
        )
    except FileNotFoundError as e:
        typer.echo(f"File was not found. {e}")
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"An IO-exception occurred. {e}")
        raise typer.Exit(code=1)
    except ReferenceActorNotFoundException as e:
        typer.echo(e.message)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Invalid configuration. {e}")
        raise typer.Exit(code=2)

    logger.info(f"Loaded {graph.actor_count} actors and {graph.movie_count} movies")
    run_shell(graph, input, typer.echo)


if __name__ == "__main__":
    app()
