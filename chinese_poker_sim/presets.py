"""
Preset configurations for the split simulator.
Trade accuracy against run time without touching the solver itself.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from .engine.monte_carlo import DEFAULT_ITERATIONS
from .engine.ranking import TOP_SPLITS


@dataclass
class SolverConfig:
    """Configuration for a simulation run."""
    iterations: int = DEFAULT_ITERATIONS
    top_k: int = TOP_SPLITS          # Candidates passed to Monte Carlo
    workers: int = 1                 # >1 runs candidates in a process pool
    seed: Optional[int] = None       # None draws from the OS


@dataclass
class Preset:
    """A named solver configuration."""
    name: str
    description: str
    config: SolverConfig = field(default_factory=SolverConfig)


PRESETS = {
    "quick": Preset(
        name="Quick",
        description="Fewer candidates and trials for a fast rough answer",
        config=SolverConfig(iterations=500, top_k=20),
    ),

    "standard": Preset(
        name="Standard",
        description="Default settings of the simulation service",
        config=SolverConfig(),
    ),

    "precise": Preset(
        name="Precise",
        description="More trials per candidate for a tighter estimate",
        config=SolverConfig(iterations=20000),
    ),

    "parallel": Preset(
        name="Parallel",
        description="Standard settings spread over every CPU",
        config=SolverConfig(workers=os.cpu_count() or 1),
    ),
}


def get_preset(name: str) -> Optional[Preset]:
    """Get a preset by name."""
    return PRESETS.get(name.lower().replace(" ", "_"))


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())


def get_preset_info(name: str) -> Optional[dict]:
    """Get info about a preset."""
    preset = get_preset(name)
    if preset:
        return {
            "name": preset.name,
            "description": preset.description,
            "iterations": preset.config.iterations,
            "top_k": preset.config.top_k,
            "workers": preset.config.workers,
        }
    return None
