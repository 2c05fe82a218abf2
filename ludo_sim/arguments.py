from __future__ import annotations

import argparse

from .config import Config, config, parse_strategy_map


def build_simulation_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate Ludo rounds and tally wins per player position"
    )
    parser.add_argument("--players", type=int, default=config.NUM_PLAYERS)
    parser.add_argument("--tokens", type=int, default=config.NUM_TOKENS)
    parser.add_argument("--rounds", type=int, default=config.NUM_ROUNDS)
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Optional RNG seed to make the simulation reproducible",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=config.WORKERS,
        help="Play rounds on this many threads (results do not depend on it)",
    )
    parser.add_argument(
        "--strategies",
        type=str,
        default=None,
        help=(
            "Comma-separated <player>=<strategy> overrides, e.g. '1=aggressive,4=random'. "
            "Unmapped players play 'random'."
        ),
    )
    parser.add_argument("--max-turns", type=int, default=config.MAX_TURNS)
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move and round result",
    )
    return parser


def parse_simulation_args(args: list[str] | None = None) -> Config:
    """Parse CLI arguments into a validated ``Config``.

    Raises ``ConfigurationError`` for non-positive counts or a malformed
    strategy mapping.
    """
    parser = build_simulation_parser()
    namespace = parser.parse_args(args=args)

    strategies = dict(config.STRATEGIES)
    strategies.update(parse_strategy_map(namespace.strategies))

    cfg = Config(
        NUM_PLAYERS=namespace.players,
        NUM_TOKENS=namespace.tokens,
        NUM_ROUNDS=namespace.rounds,
        SEED=namespace.seed,
        WORKERS=namespace.workers,
        MAX_TURNS=namespace.max_turns,
        LOG_LEVEL="DEBUG" if namespace.verbose else config.LOG_LEVEL,
        STRATEGIES=strategies,
    )
    return cfg
