"""
Agent registry for NoGo.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from agents.config import AgentConfig
from agents.gameplay_protocol import GameplayAgentProtocol
from agents.mcts_player import ROLE_TO_PLAYER, MCTSPlayer
from agents.random_player import RandomPlayer


@dataclass
class AgentSpec:
    agent_type: str
    role: str
    args: str = ""
    config_path: Optional[str] = None


def build_agent(agent_type: str, role: str, args: str = "", config_path: Optional[str] = None) -> GameplayAgentProtocol:
    """
    Build an agent for ``role``.

    ``args`` are ``key=value`` pairs; for the search player they are applied
    on top of the file at ``config_path`` when one is given.
    """
    agent_type = agent_type.lower()
    role = role.lower()
    if role not in ROLE_TO_PLAYER:
        raise ValueError(f"invalid role: {role}")

    if agent_type == "random":
        config = _seat_config(args, {"name": "random"}, role)
        return RandomPlayer(ROLE_TO_PLAYER[role], seed=config.seed, name=config.name)
    if agent_type == "mcts":
        defaults = {"name": "mcts"}
        if config_path is not None:
            defaults.update(AgentConfig.from_file(Path(config_path)).to_dict())
        return MCTSPlayer(_seat_config(args, defaults, role))
    raise ValueError(f"Unknown agent type: {agent_type}")


def build_from_spec(spec: AgentSpec) -> GameplayAgentProtocol:
    return build_agent(spec.agent_type, spec.role, spec.args, spec.config_path)


def _seat_config(args: str, defaults: dict, role: str) -> AgentConfig:
    """Parse ``args`` over ``defaults``; the seat decides the role."""
    config = AgentConfig.from_args(args, defaults={**defaults, "role": role})
    if config.role != role:
        raise ValueError(f"args ask for role={config.role} but the agent is seated as {role}")
    return config
