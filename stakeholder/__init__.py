"""Stakeholder - Fake Development Activity Generator"""

# Expose key components at package level for convenience

# Exceptions (centralized)
from stakeholder.exceptions import StakeholderError, TemplateError, InvalidTemplateField

# Progress
from stakeholder.progress import (
    Color,
    ProgressBar,
    ProgressConfig,
    RichTerminal,
    Terminal,
    parse_template,
)

# Session
from stakeholder.session import (
    Complexity,
    DevelopmentType,
    JargonLevel,
    Session,
    SessionConfig,
)
from stakeholder.rng import Rng

# Logging
from stakeholder.logging import LoggingManager

__version__ = "0.1.0"
__all__ = [
    # Exceptions
    "StakeholderError",
    "TemplateError",
    "InvalidTemplateField",
    # Progress
    "Color",
    "ProgressBar",
    "ProgressConfig",
    "RichTerminal",
    "Terminal",
    "parse_template",
    # Session
    "Complexity",
    "DevelopmentType",
    "JargonLevel",
    "Session",
    "SessionConfig",
    "Rng",
    # Logging
    "LoggingManager",
]
