import os
from pydantic import BaseModel, Field

DEFAULT_REFERENCE_ACTOR = "Bacon, Kevin (I)"
DEFAULT_EXPECTED_ACTORS = 3000
DEFAULT_EXPECTED_MOVIES = 1000


class BaconConfig(BaseModel):
    """Configuration for loading a movie data file and querying it."""

    # Input settings
    data_file: str = Field("moviedata.txt", description="Path to the actor/movie data file")
    reference_actor: str = Field(
        DEFAULT_REFERENCE_ACTOR,
        min_length=1,
        description="Actor every distance is measured from",
    )

    # Capacity hints, used only for progress reporting
    expected_actors: int = Field(DEFAULT_EXPECTED_ACTORS, ge=0, description="Expected number of actors in the file")
    expected_movies: int = Field(DEFAULT_EXPECTED_MOVIES, ge=0, description="Expected number of movies in the file")

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BaconConfig":
        """Create config from environment variables."""
        return cls(
            data_file=os.getenv("BACON_DATA_FILE", "moviedata.txt"),
            reference_actor=os.getenv("BACON_REFERENCE_ACTOR", DEFAULT_REFERENCE_ACTOR),
            expected_actors=int(os.getenv("BACON_EXPECTED_ACTORS", str(DEFAULT_EXPECTED_ACTORS))),
            expected_movies=int(os.getenv("BACON_EXPECTED_MOVIES", str(DEFAULT_EXPECTED_MOVIES))),
            log_level=os.getenv("BACON_LOG_LEVEL", "INFO"),
        )
