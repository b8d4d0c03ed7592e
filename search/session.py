from __future__ import annotations

"""
session.py

Run controller for the two competing agents. The Session owns the current
layout, the agents, their spawn points and the per-agent tick timers that the
map view drives by calling ``advance`` every frame.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from terrain.layout import Layout, generate_layout
from terrain.settings import LayoutSettings
from terrain.zones import Position, zone_name

from . import settings
from .agents import AgentState, AnnealingAgent, HillClimbAgent, SearchAgent
from .settings import AgentConfig
from .start import StartPositionSelector

logger = logging.getLogger("zonesearch.Session")
logger.addHandler(logging.NullHandler())

HILL_CLIMB = HillClimbAgent.kind
ANNEALING = AnnealingAgent.kind


@dataclass
class Run:
    """An agent being ticked at a fixed cadence."""

    agent: SearchAgent
    interval: float
    next_due: float


class Session:
    """
    Holds everything one map view shows:
      - the current Layout (replaced wholesale on regenerate)
      - the hill climber and the annealer, with their spawn points
      - the active runs and a human-readable status line
    """

    def __init__(
        self,
        layout_settings: Optional[LayoutSettings] = None,
        *,
        rng: Optional[random.Random] = None,
        agent_config: Optional[AgentConfig] = None,
    ) -> None:
        self.layout_settings = layout_settings or LayoutSettings()
        self.rng = rng or random.Random(self.layout_settings.seed)
        self.agent_config = agent_config or AgentConfig()
        self.selector = StartPositionSelector(self.rng)

        self.layout: Layout
        self.hill_climber: Optional[HillClimbAgent] = None
        self.annealer: Optional[AnnealingAgent] = None
        self.hill_start = Position(0, 0)
        self.annealing_start = Position(1, 1)
        self._runs: Dict[str, Run] = {}
        self.status = ""

        self.regenerate()

    # ─────────────────────────────────────────────────────────────────────
    # == MAP ==

    def regenerate(self) -> Layout:
        """Halt both runs, then build and swap in a new layout with fresh spawn points."""
        self.stop_hill_climb()
        self.stop_annealing()

        layout = generate_layout(self.layout_settings, self.rng)
        self.layout = layout
        self.hill_climber = None
        self.annealer = None
        self.hill_start = self.selector.pick(True, layout)
        self.annealing_start = self.selector.pick(False, layout)

        self.status = "Map regenerated. Agents ready."
        logger.info("Map regenerated: %s", layout.summary())
        return layout

    def zone_name_at(self, position: Position) -> str:
        return zone_name(self.layout.grid.get(position.x, position.y))

    # ─────────────────────────────────────────────────────────────────────
    # == RUNS ==

    def _agent_rng(self) -> random.Random:
        """Fresh stream seeded from the session RNG, so one agent's draws never shift the other's."""
        return random.Random(self.rng.getrandbits(64))

    def is_running(self, kind: str) -> bool:
        return kind in self._runs

    def start_hill_climb(self, now: float = 0.0) -> HillClimbAgent:
        self.stop_hill_climb()
        self.hill_start = self.selector.pick(True, self.layout)
        agent = HillClimbAgent(
            self.hill_start.x, self.hill_start.y, self.layout.grid, self.agent_config, rng=self._agent_rng()
        )
        self.hill_climber = agent
        self._runs[HILL_CLIMB] = Run(agent, settings.HILL_CLIMB_INTERVAL, now + settings.HILL_CLIMB_INTERVAL)
        self.status = "Hill climbing started..."
        logger.info("Hill climber started at (%d, %d)", self.hill_start.x, self.hill_start.y)
        return agent

    def start_annealing(self, now: float = 0.0, temperature: Optional[float] = None) -> AnnealingAgent:
        self.stop_annealing()
        config = self.agent_config
        if temperature is not None:
            config = replace(config, temperature=float(temperature))
        self.annealing_start = self.selector.pick(False, self.layout)
        agent = AnnealingAgent(
            self.annealing_start.x, self.annealing_start.y, self.layout.grid, config, rng=self._agent_rng()
        )
        self.annealer = agent
        self._runs[ANNEALING] = Run(agent, settings.ANNEALING_INTERVAL, now + settings.ANNEALING_INTERVAL)
        self.status = "Simulated annealing started..."
        logger.info(
            "Annealer started at (%d, %d) with temperature %.1f",
            self.annealing_start.x,
            self.annealing_start.y,
            agent.temperature,
        )
        return agent

    def stop_hill_climb(self) -> None:
        self._runs.pop(HILL_CLIMB, None)

    def stop_annealing(self) -> None:
        self._runs.pop(ANNEALING, None)

    def tick(self, kind: str) -> Optional[AgentState]:
        """Update the running agent of ``kind`` once. Returns None if that run is not active."""
        run = self._runs.get(kind)
        if run is None:
            return None
        state = run.agent.update()
        if state.is_stuck:
            self._runs.pop(kind, None)
            self.status = "Hill climber stuck at a local maximum."
            logger.info(
                "Hill climber stuck at (%d, %d) after %d ticks",
                state.position.x,
                state.position.y,
                state.ticks,
            )
        return state

    def advance(self, now: float) -> List[AgentState]:
        """Tick every run whose next update is due at ``now``. Returns the new states."""
        states: List[AgentState] = []
        for kind, run in list(self._runs.items()):
            if now < run.next_due:
                continue
            run.next_due += run.interval
            # a stalled frame does not trigger a burst of catch-up ticks
            if run.next_due <= now:
                run.next_due = now + run.interval
            state = self.tick(kind)
            if state is not None:
                states.append(state)
        return states

    def snapshot(self) -> Dict[str, AgentState]:
        """Current state of every agent that exists, keyed by agent kind."""
        result: Dict[str, AgentState] = {}
        for agent in (self.hill_climber, self.annealer):
            if agent is not None:
                result[agent.kind] = agent.state()
        return result


__all__ = ["ANNEALING", "HILL_CLIMB", "Run", "Session"]
