from typing import Optional, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---

class NodeKind(Enum):
    """The two sides of the actor/movie graph, valued by their line marker."""
    ACTOR = "<a>"
    MOVIE = "<t>"

    @property
    def marker(self) -> str:
        return self.value

class DistanceStatus(Enum):
    """Outcome of a distance lookup."""
    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"
    REACHED = "reached"

# --- Input Models ---

class Record(BaseModel):
    """A single recognized line of the input file, marker stripped."""
    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    text: str

# --- Graph Models ---

class Node(BaseModel):
    """Read-only view of one node of the graph."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Index of the node in the graph arena")
    kind: NodeKind
    name: str
    neighbours: Tuple[int, ...] = Field(default=(), description="Ids of adjacent nodes of the other kind")

# --- Query Models ---

class DistanceResult(BaseModel):
    """Result of looking up an actor's Bacon number."""
    model_config = ConfigDict(frozen=True)

    status: DistanceStatus
    bacon_number: Optional[int] = Field(None, ge=0, description="Set only when the actor was reached")

    @classmethod
    def not_found(cls) -> "DistanceResult":
        return cls(status=DistanceStatus.NOT_FOUND)

    @classmethod
    def unreachable(cls) -> "DistanceResult":
        return cls(status=DistanceStatus.UNREACHABLE)

    @classmethod
    def reached(cls, bacon_number: int) -> "DistanceResult":
        return cls(status=DistanceStatus.REACHED, bacon_number=bacon_number)

    @property
    def is_reached(self) -> bool:
        return self.status is DistanceStatus.REACHED

class PathStep(BaseModel):
    """One actor or movie on a path back to the reference actor."""
    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    name: str

    def render(self) -> str:
        """Wrap the name in its kind's marker, e.g. <t>Footloose (1984)<t>."""
        return f"{self.kind.marker}{self.name}{self.kind.marker}"
