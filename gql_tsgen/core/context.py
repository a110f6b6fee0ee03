"""Per-run generation settings."""

from dataclasses import dataclass, field
from enum import Enum

from .scalars import ScalarRegistry
from .shape_builder import CyclePolicy


class ErrorMode(Enum):
    """How generated functions report failures."""
    THROW = "throw"  # Rejections propagate to the caller
    TUPLE = "tuple"  # Functions resolve to [value, error]

    @classmethod
    def from_flag(cls, value: str | None) -> "ErrorMode":
        """Any non-empty flag value selects tuple mode."""
        return cls.TUPLE if value else cls.THROW


def unescape_header(raw: str) -> str:
    """Turn literal '\\n' sequences from the command line into newlines."""
    return raw.replace("\\n", "\n")


@dataclass(frozen=True)
class GenerationContext:
    """Settings shared by every renderer during one generation run."""
    client_name: str
    header: str
    error_mode: ErrorMode = ErrorMode.THROW
    max_depth: int | None = None
    on_cycle: CyclePolicy = CyclePolicy.TRUNCATE
    scalars: ScalarRegistry = field(default_factory=ScalarRegistry)
