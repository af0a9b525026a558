"""
Session Module

Session configuration and the per-session context object. The main loop
lives in stakeholder.session.runner.
"""

from stakeholder.session.config import (
    Complexity,
    DevelopmentType,
    JargonLevel,
    SessionConfig,
    parse_enum,
)
from stakeholder.session.context import Session

__all__ = [
    'Complexity',
    'DevelopmentType',
    'JargonLevel',
    'SessionConfig',
    'parse_enum',
    'Session',
]
