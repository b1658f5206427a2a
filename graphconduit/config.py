"""Session configuration for the command line and interactive shell."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

_ENV_LOG_LEVEL = "GRAPHCONDUIT_LOG_LEVEL"
_ENV_OUTPUT = "GRAPHCONDUIT_OUTPUT"
_ENV_ISO_MAX = "GRAPHCONDUIT_ISO_MAX_VERTICES"

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SessionConfig:
    """
    Settings carried from one command to the next.

    The interactive shell never mutates a config: each successful ``load``
    produces a new one via :meth:`with_graph`, which is handed to the next
    prompt.

    Attributes:
        graph_path: Last graph file that loaded successfully.
        output_format: ``"text"`` or ``"json"``.
        include_weighted: Add the weighted path cost to path reports.
        isomorphism_max_vertices: Refuse isomorphism searches above this size.
        log_level: Level name applied to graphconduit loggers.
    """

    graph_path: Optional[str] = None
    output_format: str = "text"
    include_weighted: bool = False
    isomorphism_max_vertices: int = 9
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate SessionConfig invariants."""
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}."
            )
        if self.isomorphism_max_vertices < 1:
            raise ValueError(
                "isomorphism_max_vertices must be >= 1, "
                f"got {self.isomorphism_max_vertices}."
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}.")

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Build a config from GRAPHCONDUIT_* environment variables."""
        iso_max = os.getenv(_ENV_ISO_MAX)
        try:
            iso_limit = int(iso_max) if iso_max else 9
        except ValueError as e:
            raise ValueError(f"{_ENV_ISO_MAX} must be an integer, got {iso_max!r}.") from e

        return cls(
            output_format=os.getenv(_ENV_OUTPUT, "text").lower(),
            isomorphism_max_vertices=iso_limit,
            log_level=os.getenv(_ENV_LOG_LEVEL, "WARNING").upper(),
        )

    def with_graph(self, path: str) -> "SessionConfig":
        """Return a copy remembering ``path`` as the last loaded graph."""
        return replace(self, graph_path=path)

    def with_format(self, output_format: str) -> "SessionConfig":
        """Return a copy using a different output format."""
        return replace(self, output_format=output_format)
