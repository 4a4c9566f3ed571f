"""pgx-new configuration.

Typed settings shared by the CLI and the scaffolder.  Settings use Pydantic v2
models so they are validated at construction time, and can be seeded from
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global pgx-new configuration.

    Instances are typically created once by the CLI entry point (from the
    environment, then overridden by flags) and handed to the generator.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Directory in which the extension directory is created",
    )
    staged: bool = Field(
        default=False,
        description="Build in a temporary sibling directory and rename into place",
    )
    verbose: int = Field(default=0, ge=0, description="Output verbosity level")

    def destination(self, name: str) -> Path:
        """Return the project root the generator will create for *name*."""
        return self.output_dir / name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PGX_NEW_OUTPUT_DIR, PGX_NEW_STAGED, PGX_NEW_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PGX_NEW_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["PGX_NEW_OUTPUT_DIR"])
        if os.environ.get("PGX_NEW_STAGED"):
            kwargs["staged"] = os.environ["PGX_NEW_STAGED"].strip().lower() in _TRUTHY
        if os.environ.get("PGX_NEW_VERBOSE"):
            kwargs["verbose"] = int(os.environ["PGX_NEW_VERBOSE"])
        return cls(**kwargs)
