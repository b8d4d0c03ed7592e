# Settings for the search agents and their runs

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Seconds between two updates of each agent
HILL_CLIMB_INTERVAL = 0.15
ANNEALING_INTERVAL = 0.10

# Simulated annealing schedule
DEFAULT_TEMPERATURE = 100.0
COOLING_RATE = 0.99
# Below this temperature the annealer clamps to 0 and turns purely greedy
TEMPERATURE_EPSILON = 0.1

# Temperature slider bounds in the map view
MIN_SLIDER_TEMPERATURE = 1
MAX_SLIDER_TEMPERATURE = 200

# A trap mountain must be at least this far from the village anchor
TRAP_MIN_DISTANCE = 10.0

# Fallback spawn points keep this far from the map edge
SPAWN_MARGIN = 2


class TieBreakPolicy(Enum):
    """How the hill climber treats neighbours that tie with its current score."""

    STRICT_IMPROVEMENT_ONLY = "strict"
    PLATEAU_RANDOM_WALK = "plateau"


@dataclass(frozen=True)
class AgentConfig:
    tie_break: TieBreakPolicy = TieBreakPolicy.PLATEAU_RANDOM_WALK
    temperature: float = DEFAULT_TEMPERATURE
    cooling_rate: float = COOLING_RATE
    epsilon: float = TEMPERATURE_EPSILON

    def __post_init__(self) -> None:
        if not isinstance(self.tie_break, TieBreakPolicy):
            raise TypeError(f"tie_break must be a TieBreakPolicy, not {type(self.tie_break)}")
        if self.temperature < 0:
            raise ValueError("temperature must be >= 0")
        if not 0.0 < self.cooling_rate <= 1.0:
            raise ValueError("cooling_rate must be in (0.0, 1.0]")
        if self.epsilon < 0:
            raise ValueError("epsilon must be >= 0")
