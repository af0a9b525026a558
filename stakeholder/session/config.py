"""
Session Configuration Module

Enumerations and the immutable configuration record of a session.
"""

import argparse
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Type, TypeVar

E = TypeVar("E", bound=Enum)


def _normalize(text: str) -> str:
    return text.strip().lower().replace("-", "").replace("_", "").replace(" ", "")


def parse_enum(enum_type: Type[E], text: str) -> E:
    """
    Parse an enum member by name, ignoring case, hyphens and underscores.

    Raises:
        ValueError: If text names no member
    """
    wanted = _normalize(text)
    for member in enum_type:
        if _normalize(member.name) == wanted:
            return member
    raise ValueError(f"Invalid {enum_type.__name__} value: {text!r}")


class DevelopmentType(Enum):
    """Type of development activity to simulate."""
    BACKEND = "backend"
    FRONTEND = "frontend"
    FULLSTACK = "fullstack"
    DATA_SCIENCE = "data_science"
    DEVOPS = "devops"
    BLOCKCHAIN = "blockchain"
    MACHINE_LEARNING = "machine_learning"
    SYSTEMS_PROGRAMMING = "systems_programming"
    GAME_DEVELOPMENT = "game_development"
    SECURITY = "security"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Data Science"."""
        return _LABELS.get(self) or self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, text: str) -> "DevelopmentType":
        return parse_enum(cls, text)

    def __str__(self) -> str:
        return self.value


_LABELS = {
    DevelopmentType.FULLSTACK: "Full-Stack",
    DevelopmentType.DEVOPS: "DevOps",
}


class JargonLevel(IntEnum):
    """Level of technical jargon in output."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    EXTREME = 4

    @classmethod
    def parse(cls, text: str) -> "JargonLevel":
        return parse_enum(cls, text)

    def __str__(self) -> str:
        return self.name.lower()


class Complexity(IntEnum):
    """How busy the output should appear."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    EXTREME = 4

    @property
    def activity_count(self) -> int:
        """Number of activities run per session round."""
        return int(self)

    @classmethod
    def parse(cls, text: str) -> "Complexity":
        return parse_enum(cls, text)

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class SessionConfig:
    """Settings shared by every activity of a session."""
    dev_type: DevelopmentType = DevelopmentType.BACKEND
    jargon_level: JargonLevel = JargonLevel.MEDIUM
    complexity: Complexity = Complexity.MEDIUM
    alerts_enabled: bool = False
    project_name: str = "distributed-cluster"
    minimal_output: bool = False
    team_activity: bool = False
    framework: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SessionConfig":
        """Build a configuration from parsed command-line arguments."""
        return cls(
            dev_type=args.dev_type,
            jargon_level=args.jargon,
            complexity=args.complexity,
            alerts_enabled=args.alerts,
            project_name=args.project,
            minimal_output=args.minimal,
            team_activity=args.team,
            framework=args.framework,
        )
