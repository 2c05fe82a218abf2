from __future__ import annotations

import time
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from ludo_sim import Tally


def print_summary(tally: Tally) -> None:
    print("Win tally:")
    for rank, (player, wins) in enumerate(tally.standings(), start=1):
        share = 100.0 * wins / tally.rounds if tally.rounds else 0.0
        print(f"  {rank:2d}. Player {player:<3d} {wins:5d} wins ({share:5.1f}%)")
    if tally.tied_rounds:
        print(f"Rounds with simultaneous winners: {tally.tied_rounds}")


def main() -> None:
    # the package reads the environment on import, so bad values surface here
    try:
        from ludo_sim import Simulator, configure_logging
        from ludo_sim.arguments import parse_simulation_args

        cfg = parse_simulation_args()
    except ValueError as exc:
        raise SystemExit(f"Configuration error: {exc}")

    configure_logging(cfg.LOG_LEVEL)

    strategies = ", ".join(
        f"P{p}={cfg.STRATEGIES.get(p, 'random')}" for p in range(1, cfg.NUM_PLAYERS + 1)
    )
    logger.info(f"Strategies: {strategies}")

    start_time = time.time()
    tally = Simulator.from_config(cfg).run()
    logger.info(f"Simulation time: {time.time() - start_time:.2f} seconds")

    print_summary(tally)


if __name__ == "__main__":
    main()
