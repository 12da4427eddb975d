"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, graphwalk.toml only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    density: float = Field(default=30.0, ge=0.0, le=100.0)
    seed: int | None = None


class SearchConfig(BaseModel):
    """[search] section.

    ``max_steps`` bounds the Hamiltonian search; None means unbounded.
    """

    model_config = {"frozen": True}

    max_steps: int | None = Field(default=None, ge=1)


class BenchConfig(BaseModel):
    """[bench] section. Sizes run ``start, start+step, ..., <= stop``."""

    model_config = {"frozen": True}

    start: int = Field(default=5, ge=3)
    stop: int = 65
    step: int = Field(default=5, ge=1)
    density: float = Field(default=30.0, ge=0.0, le=100.0)
    seed: int | None = None
    max_steps: int | None = Field(default=2_000_000, ge=1)

    def sizes(self) -> list[int]:
        return list(range(self.start, self.stop + 1, self.step))


class DisplayConfig(BaseModel):
    """[display] section. Controls how vertex numbers are shown and read."""

    model_config = {"frozen": True}

    one_based: bool = True
