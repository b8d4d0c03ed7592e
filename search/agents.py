from __future__ import annotations

"""
agents.py

Tick-driven local-search agents over a scored grid.

Both agents hold a read-only reference to the grid and only ever change their
own position and state. The grid needs ``in_bounds(x, y)`` and
``score(x, y)``; a ZoneGrid provides both.
"""

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from terrain.grid import DIRECTIONS, InvalidCoordinateError, ZoneGrid
from terrain.zones import Position

from .settings import AgentConfig, TieBreakPolicy

logger = logging.getLogger("zonesearch.Agents")
logger.addHandler(logging.NullHandler())


class AgentStatus(Enum):
    CLIMBING = "climbing"
    STUCK = "stuck"


@dataclass(frozen=True)
class AgentState:
    """Snapshot of an agent that the map view and CLI read."""

    kind: str
    position: Position
    status: AgentStatus
    score: int
    ticks: int
    temperature: Optional[float] = None

    @property
    def is_stuck(self) -> bool:
        return self.status is AgentStatus.STUCK


class SearchAgent:
    """Shared lifecycle for the search agents: position, status and tick counting."""

    kind: str = "agent"

    def __init__(
        self,
        x: int,
        y: int,
        grid: ZoneGrid,
        config: AgentConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if not grid.in_bounds(x, y):
            raise InvalidCoordinateError(f"cannot place {self.kind} agent at ({x}, {y}): outside the grid")
        self.x = x
        self.y = y
        self.grid = grid
        self.config = config or AgentConfig()
        self.rng = rng or random.Random()
        self.status = AgentStatus.CLIMBING
        self.ticks = 0
        self.moves = 0

    @classmethod
    def create(
        cls,
        x: int,
        y: int,
        grid: ZoneGrid,
        config: AgentConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> "SearchAgent":
        return cls(x, y, grid, config, rng=rng)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def is_stuck(self) -> bool:
        return self.status is AgentStatus.STUCK

    def current_score(self) -> int:
        return self.grid.score(self.x, self.y)

    def _move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.moves += 1

    def state(self) -> AgentState:
        return AgentState(
            kind=self.kind,
            position=self.position,
            status=self.status,
            score=self.current_score(),
            ticks=self.ticks,
        )

    def update(self) -> AgentState:
        """Advance the agent by one tick and return its new state."""
        if self.is_stuck:
            return self.state()
        self.ticks += 1
        self._step()
        return self.state()

    def _step(self) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, status={self.status.value}, ticks={self.ticks})"


class HillClimbAgent(SearchAgent):
    """
    Greedy ascent over the 4-neighbourhood.

    Under ``PLATEAU_RANDOM_WALK`` the agent moves to a uniformly chosen best
    neighbour as long as that neighbour is at least as good as its current
    cell, so it can wander across flat regions. Under
    ``STRICT_IMPROVEMENT_ONLY`` it moves only to a strictly better neighbour,
    taking the first one in direction order. Either way it becomes STUCK,
    permanently, once no acceptable neighbour is left.
    """

    kind = "hill_climb"

    @property
    def tie_break(self) -> TieBreakPolicy:
        return self.config.tie_break

    def _scored_neighbors(self) -> List[Tuple[int, Tuple[int, int]]]:
        scored = []
        for dx, dy in DIRECTIONS:
            nx, ny = self.x + dx, self.y + dy
            if self.grid.in_bounds(nx, ny):
                scored.append((self.grid.score(nx, ny), (nx, ny)))
        return scored

    def _become_stuck(self) -> None:
        self.status = AgentStatus.STUCK
        logger.debug("hill climber stuck at (%d, %d) after %d ticks", self.x, self.y, self.ticks)

    def _step(self) -> None:
        current = self.current_score()
        scored = self._scored_neighbors()
        if not scored:
            self._become_stuck()
            return
        best = max(score for score, _ in scored)

        if self.tie_break is TieBreakPolicy.STRICT_IMPROVEMENT_ONLY:
            if best <= current:
                self._become_stuck()
                return
            target = next(coord for score, coord in scored if score == best)
        else:
            if best < current:
                self._become_stuck()
                return
            target = self.rng.choice([coord for score, coord in scored if score == best])

        self._move_to(*target)


class AnnealingAgent(SearchAgent):
    """
    Simulated annealing with a geometric cooling schedule.

    Each tick proposes one random direction. Improvements are always taken;
    other proposals pass the Metropolis test ``exp(delta / T)`` while the
    temperature is above ``epsilon``. Temperature cools every tick and clamps
    to exactly 0 once it reaches ``epsilon``, after which only strict
    improvements are accepted. The agent never reports STUCK.
    """

    kind = "annealing"

    def __init__(
        self,
        x: int,
        y: int,
        grid: ZoneGrid,
        config: AgentConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(x, y, grid, config, rng=rng)
        self.temperature = float(self.config.temperature)
        self.cooling_rate = self.config.cooling_rate
        self.epsilon = self.config.epsilon
        self.rejected = 0

    @property
    def is_frozen(self) -> bool:
        return self.temperature == 0.0

    def _accepts(self, delta: int) -> bool:
        if delta > 0:
            return True
        if self.temperature <= self.epsilon:
            return False
        return self.rng.random() < math.exp(delta / self.temperature)

    def _cool(self) -> None:
        if self.temperature == 0.0:
            return
        self.temperature *= self.cooling_rate
        if self.temperature <= self.epsilon:
            self.temperature = 0.0
            logger.debug("annealer frozen at (%d, %d) after %d ticks", self.x, self.y, self.ticks)

    def _step(self) -> None:
        dx, dy = self.rng.choice(DIRECTIONS)
        nx, ny = self.x + dx, self.y + dy
        if self.grid.in_bounds(nx, ny):
            delta = self.grid.score(nx, ny) - self.current_score()
            if self._accepts(delta):
                self._move_to(nx, ny)
            else:
                self.rejected += 1
        self._cool()

    def state(self) -> AgentState:
        return AgentState(
            kind=self.kind,
            position=self.position,
            status=self.status,
            score=self.current_score(),
            ticks=self.ticks,
            temperature=self.temperature,
        )


__all__ = [
    "AgentState",
    "AgentStatus",
    "AnnealingAgent",
    "HillClimbAgent",
    "SearchAgent",
]
