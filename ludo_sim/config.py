import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()


def parse_strategy_map(raw: str | None) -> dict[int, str]:
    """Parse ``"2=aggressive,3=defensive"`` into ``{2: "aggressive", 3: "defensive"}``."""
    mapping: dict[int, str] = {}
    if not raw:
        return mapping
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        player, sep, name = chunk.partition("=")
        if not sep or not name.strip():
            raise ConfigurationError(
                f"Invalid strategy assignment '{chunk}', expected <player>=<strategy>"
            )
        try:
            number = int(player)
        except ValueError as e:
            raise ConfigurationError(f"Invalid player number in '{chunk}'") from e
        mapping[number] = name.strip().lower()
    return mapping


def _default_strategies() -> dict[int, str]:
    defaults = {2: "aggressive", 3: "defensive", 4: "balanced"}
    defaults.update(parse_strategy_map(os.getenv("STRATEGIES")))
    return defaults


@dataclass(slots=True)
class Config:
    NUM_PLAYERS: int = int(os.getenv("NUM_PLAYERS", 4))
    NUM_TOKENS: int = int(os.getenv("NUM_TOKENS", 4))
    NUM_ROUNDS: int = int(os.getenv("NUM_ROUNDS", 20))
    SEED: int | None = int(os.environ["SEED"]) if os.getenv("SEED") else None
    WORKERS: int = int(os.getenv("WORKERS", 1))
    # 0 disables the stalled-round guard
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 100_000))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # --- Rules ---
    CELLS_PER_PLAYER: int = 13
    HOME_STRETCH_LENGTH: int = 5
    DICE_FACES: int = 6
    EXIT_POCKET_ROLL: int = 6
    MAX_ROLLS_IN_POCKET: int = 3

    # player number -> strategy name, unmapped players play "random"
    STRATEGIES: dict[int, str] = field(default_factory=_default_strategies)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for name in ("NUM_PLAYERS", "NUM_TOKENS", "NUM_ROUNDS"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")
        if self.WORKERS < 1:
            raise ConfigurationError(f"WORKERS must be >= 1, got {self.WORKERS}")
        if self.MAX_TURNS < 0:
            raise ConfigurationError(f"MAX_TURNS must be >= 0, got {self.MAX_TURNS}")

        from .strategy.registry import STRATEGY_REGISTRY

        unknown = sorted(
            name for name in self.STRATEGIES.values() if name not in STRATEGY_REGISTRY
        )
        if unknown:
            raise ConfigurationError(f"Unknown strategies requested: {', '.join(unknown)}")


config = Config()
