"""Random text tables for the simulated activities."""

from stakeholder.generators import (
    code_analyzer,
    data_processing,
    jargon,
    metrics,
    network_activity,
    system_monitoring,
)

__all__ = [
    "code_analyzer",
    "data_processing",
    "jargon",
    "metrics",
    "network_activity",
    "system_monitoring",
]
