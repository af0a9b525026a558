"""
System Monitoring Text

System events and resource recommendations.
"""

from stakeholder.rng import Rng

_EVENTS = [
    "Garbage collection cycle completed",
    "Log rotation triggered",
    "Swap usage spike absorbed",
    "Background index rebuild started",
    "Health check latency normalized",
    "Worker process recycled",
    "Certificate cache refreshed",
    "Disk write buffer flushed",
    "Thermal throttling cleared",
    "Scheduled backup snapshot taken",
]

_RECOMMENDATIONS = [
    "Consider raising the file descriptor limit",
    "Memory headroom is sufficient for the next release",
    "Network throughput is within expected bounds",
    "Schedule disk defragmentation during the maintenance window",
    "CPU utilization suggests room for one more worker",
]


def generate_system_event(rng: Rng) -> str:
    return rng.choice(_EVENTS)


def generate_system_recommendation(rng: Rng) -> str:
    return rng.choice(_RECOMMENDATIONS)
