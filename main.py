import argparse
import logging
from typing import List, Optional

from terrain.settings import LayoutSettings
from search.session import ANNEALING, HILL_CLIMB, Session
from search import settings


def run_headless(session: Session, ticks: int, temperature: float) -> None:
    """Run both agents for a fixed number of ticks and print where they ended up."""
    print(f"Layout: {session.layout.summary()}")
    session.start_hill_climb()
    session.start_annealing(temperature=temperature)
    print(f"Hill climber starts at {session.hill_start.as_tuple()} ({session.zone_name_at(session.hill_start)})")
    print(f"Annealer starts at {session.annealing_start.as_tuple()} ({session.zone_name_at(session.annealing_start)})")

    for _ in range(ticks):
        session.tick(HILL_CLIMB)
        session.tick(ANNEALING)

    for kind, state in session.snapshot().items():
        line = (
            f"{kind}: {state.position.as_tuple()} {session.zone_name_at(state.position)} "
            f"score={state.score} status={state.status.value} ticks={state.ticks}"
        )
        if state.temperature is not None:
            line += f" temperature={state.temperature:.2f}"
        print(line)
    print(session.status)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate a zoned map and race a hill climber against a simulated annealer."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for map generation and agents")
    parser.add_argument("--rows", type=int, default=30, help="Map height in cells")
    parser.add_argument("--cols", type=int, default=30, help="Map width in cells")
    parser.add_argument(
        "--temperature",
        type=float,
        default=settings.DEFAULT_TEMPERATURE,
        help="Starting temperature of the annealer",
    )
    parser.add_argument("--headless", action="store_true", help="Run without the map view")
    parser.add_argument("--ticks", type=int, default=1000, help="Ticks per agent in headless mode")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    session = Session(LayoutSettings(seed=args.seed, rows=args.rows, cols=args.cols))

    if args.headless:
        run_headless(session, args.ticks, args.temperature)
        return

    # imported here so headless runs work without a display
    from ui.map_view import MapView

    view = MapView(session, temperature=args.temperature)
    try:
        final = view.run()
    except KeyboardInterrupt:
        print("\nStopping...")
        return
    for kind, state in final.items():
        print(f"{kind} finished at {state.position.as_tuple()} ({state.status.value})")


if __name__ == "__main__":
    main()
