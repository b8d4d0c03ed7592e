import os
import random
import sys

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from search.session import ANNEALING, HILL_CLIMB, Session
from terrain.decorations import Decorations
from terrain.grid import ZoneGrid
from terrain.layout import Layout
from terrain.settings import LayoutSettings
from terrain.settlements import Settlements
from terrain.zones import Position, ZoneType


def make_session(monkeypatch, grid=None, start=Position(2, 2)):
    """Session on a hand-made layout whose spawn points are fixed."""
    session = Session(LayoutSettings(seed=11), rng=random.Random(11))
    grid = grid or ZoneGrid(5, 5)
    session.layout = Layout(
        grid=grid,
        mountain_clusters=(),
        settlements=Settlements(),
        village_anchor=None,
        decorations=Decorations(),
        settings=session.layout_settings,
    )
    monkeypatch.setattr(session.selector, "pick", lambda bias_trap, layout: start)
    return session


def test_new_session_is_idle():
    session = Session(LayoutSettings(seed=5))
    assert session.status == "Map regenerated. Agents ready."
    assert session.snapshot() == {}
    assert not session.is_running(HILL_CLIMB)
    assert not session.is_running(ANNEALING)
    assert session.layout.grid.in_bounds(*session.hill_start.as_tuple())
    assert session.layout.grid.in_bounds(*session.annealing_start.as_tuple())


def test_hill_climb_ticks_on_its_cadence(monkeypatch):
    session = make_session(monkeypatch)
    session.start_hill_climb(now=0.0)
    assert session.status == "Hill climbing started..."
    assert session.advance(0.1) == []
    assert len(session.advance(0.15)) == 1
    assert session.advance(0.2) == []
    assert len(session.advance(0.31)) == 1
    assert session.hill_climber.ticks == 2


def test_annealing_ticks_on_its_cadence(monkeypatch):
    session = make_session(monkeypatch)
    session.start_annealing(now=0.0)
    assert session.advance(0.05) == []
    (state,) = session.advance(0.1)
    assert state.kind == ANNEALING
    assert session.advance(0.15) == []
    assert len(session.advance(0.21)) == 1


def test_stalled_frame_does_not_burst(monkeypatch):
    session = make_session(monkeypatch)
    session.start_annealing(now=0.0)
    assert len(session.advance(5.0)) == 1
    assert session.advance(5.05) == []
    assert len(session.advance(5.11)) == 1


def test_both_agents_advance_independently(monkeypatch):
    session = make_session(monkeypatch)
    session.start_hill_climb(now=0.0)
    session.start_annealing(now=0.0)
    for step in range(1, 31):
        session.advance(step * 0.01 + 1e-9)
    assert session.hill_climber.ticks == 2
    assert session.annealer.ticks == 3


def test_agents_draw_from_separate_streams(monkeypatch):
    def annealer_path(hill_ticks):
        session = make_session(monkeypatch, ZoneGrid(9, 9), start=Position(4, 4))
        session.start_hill_climb()
        session.start_annealing()
        for _ in range(hill_ticks):
            session.tick(HILL_CLIMB)
        return [session.tick(ANNEALING).position for _ in range(40)]

    # the flat map keeps the hill climber drawing a random step every tick
    assert annealer_path(0) == annealer_path(25)


def test_stuck_climber_ends_its_run(monkeypatch):
    grid = ZoneGrid(5, 5)
    grid.set(2, 2, ZoneType.VILLAGE)
    session = make_session(monkeypatch, grid, start=Position(2, 1))
    session.start_hill_climb()
    assert session.tick(HILL_CLIMB).position == Position(2, 2)
    state = session.tick(HILL_CLIMB)
    assert state.is_stuck
    assert not session.is_running(HILL_CLIMB)
    assert session.status == "Hill climber stuck at a local maximum."
    assert session.tick(HILL_CLIMB) is None
    assert session.snapshot()[HILL_CLIMB] == state


def test_regenerate_halts_runs():
    session = Session(LayoutSettings(seed=8))
    old_layout = session.layout
    session.start_hill_climb()
    session.start_annealing()
    assert session.is_running(HILL_CLIMB) and session.is_running(ANNEALING)
    layout = session.regenerate()
    assert layout is session.layout and layout is not old_layout
    assert not session.is_running(HILL_CLIMB)
    assert not session.is_running(ANNEALING)
    assert session.hill_climber is None and session.annealer is None
    assert session.advance(100.0) == []
    assert session.status == "Map regenerated. Agents ready."


def test_restart_replaces_the_agent(monkeypatch):
    session = make_session(monkeypatch)
    first = session.start_annealing()
    second = session.start_annealing()
    assert first is not second
    assert session.annealer is second


def test_temperature_override(monkeypatch):
    session = make_session(monkeypatch)
    agent = session.start_annealing(temperature=42)
    assert agent.temperature == 42.0
    assert session.agent_config.temperature == 100.0
    assert session.status == "Simulated annealing started..."


def test_stop_leaves_last_state(monkeypatch):
    session = make_session(monkeypatch)
    session.start_annealing()
    session.tick(ANNEALING)
    session.stop_annealing()
    assert not session.is_running(ANNEALING)
    assert session.tick(ANNEALING) is None
    assert session.snapshot()[ANNEALING].ticks == 1


def test_snapshot_keys(monkeypatch):
    session = make_session(monkeypatch)
    session.start_hill_climb()
    session.start_annealing()
    states = session.snapshot()
    assert set(states) == {HILL_CLIMB, ANNEALING}
    assert states[HILL_CLIMB].temperature is None
    assert states[ANNEALING].temperature == pytest.approx(100.0)


def test_zone_name_at(monkeypatch):
    grid = ZoneGrid(5, 5)
    grid.set(1, 1, ZoneType.MOUNTAIN)
    session = make_session(monkeypatch, grid)
    assert session.zone_name_at(Position(1, 1)) == "Mountain"
    assert session.zone_name_at(Position(9, 9)) == "Out of bounds"
