"""
Agent configuration loader and validator.

This module handles loading and validating search agent parameters from
``key=value`` argument strings and from YAML/JSON files.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Characters that would break the name inside game records
RESERVED_NAME_CHARS = set("[]():; ")

VALID_ROLES = ("black", "white")

# Short keys used by argument strings
KEY_ALIASES = {
    "N": "iterations",
    "c": "exploration_weight",
}


class AgentConfig:
    """
    Search agent configuration.

    Attributes:
        name: Agent name used in logs and game records
        role: Side the agent plays, "black" or "white"
        iterations: Simulations per move decision (N)
        exploration_weight: Exploration coefficient of the score formula (c)
        seed: Optional random seed
        meta: Any other keys, kept verbatim
    """

    def __init__(self, config_dict: Dict[str, Any]):
        config_dict = {KEY_ALIASES.get(k, k): v for k, v in config_dict.items()}

        self.name = str(config_dict.get("name", "mcts"))
        self.role = str(config_dict.get("role", "black")).lower()
        self.iterations = _to_int(config_dict.get("iterations", 1000), "iterations")
        self.exploration_weight = _to_float(config_dict.get("exploration_weight", 0.5), "exploration_weight")

        seed = config_dict.get("seed")
        self.seed = None if seed is None else _to_int(seed, "seed")

        known = {"name", "role", "iterations", "exploration_weight", "seed"}
        self.meta = {k: v for k, v in config_dict.items() if k not in known}

        self.validate()

    def validate(self) -> None:
        """
        Raises:
            ValueError: If any field is out of range
        """
        if not self.name or RESERVED_NAME_CHARS & set(self.name):
            raise ValueError(f"invalid name: {self.name}")
        if self.role not in VALID_ROLES:
            raise ValueError(f"invalid role: {self.role}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")
        if not math.isfinite(self.exploration_weight):
            raise ValueError(f"exploration_weight must be finite, got {self.exploration_weight}")

    @classmethod
    def from_args(cls, args: str, defaults: Optional[Dict[str, Any]] = None) -> "AgentConfig":
        """
        Parse whitespace separated ``key=value`` pairs.

        Later pairs override earlier ones and ``defaults``. A token without
        ``=`` sets its key to an empty string.
        """
        config_dict: Dict[str, Any] = dict(defaults or {})
        for pair in args.split():
            key, _, value = pair.partition("=")
            config_dict[key] = value
        return cls(config_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "AgentConfig":
        """
        Load agent config from YAML or JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file format is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Agent config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f)
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        if not isinstance(config_dict, dict):
            raise ValueError("Config file must contain a dictionary/object")

        return cls(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        result = dict(self.meta)
        result.update({
            "name": self.name,
            "role": self.role,
            "iterations": self.iterations,
            "exploration_weight": self.exploration_weight,
            "seed": self.seed,
        })
        return result

    def log_config(self, logger: logging.Logger):
        """Log the agent configuration."""
        logger.info("=" * 60)
        logger.info("Agent Configuration")
        logger.info("=" * 60)
        logger.info(f"Name: {self.name}")
        logger.info(f"Role: {self.role}")
        logger.info(f"Iterations (N): {self.iterations}")
        logger.info(f"Exploration weight (c): {self.exploration_weight}")
        logger.info(f"Seed: {self.seed}")
        for key, value in sorted(self.meta.items()):
            logger.info(f"{key}: {value}")
        logger.info("=" * 60)


def load_agent_config(config_path: Optional[Path]) -> Optional[AgentConfig]:
    """
    Load agent config from file, or return None if not provided.
    """
    if config_path is None:
        return None

    try:
        return AgentConfig.from_file(config_path)
    except Exception as e:
        logger.error(f"Failed to load agent config from {config_path}: {e}")
        raise


def _to_int(value: Any, key: str) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None
    if not number.is_integer():
        raise ValueError(f"{key} must be a whole number, got {value!r}")
    return int(number)


def _to_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None
