"""Local-search agents and the run controller that ticks them."""

from .agents import AgentState, AgentStatus, AnnealingAgent, HillClimbAgent, SearchAgent
from .session import ANNEALING, HILL_CLIMB, Run, Session
from .settings import AgentConfig, TieBreakPolicy
from .start import StartPositionSelector

__all__ = [
    "ANNEALING",
    "AgentConfig",
    "AgentState",
    "AgentStatus",
    "AnnealingAgent",
    "HILL_CLIMB",
    "HillClimbAgent",
    "Run",
    "SearchAgent",
    "Session",
    "StartPositionSelector",
    "TieBreakPolicy",
]
