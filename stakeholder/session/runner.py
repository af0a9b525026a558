"""
Session Runner

Main loop: boot, then rounds of randomly chosen activities with occasional
alerts and team notifications until the duration runs out.
"""

import logging
from typing import Callable, Optional, Sequence

from stakeholder import display
from stakeholder.activities import ACTIVITIES
from stakeholder.progress import Color
from stakeholder.session.context import Session

logger = logging.getLogger(__name__)

ALERT_PROBABILITY = 0.1
TEAM_PROBABILITY = 0.2


def run_session(
    session: Session,
    duration: float = 0,
    activities: Optional[Sequence[Callable[[Session], None]]] = None,
    max_rounds: Optional[int] = None,
) -> int:
    """
    Run a simulated development session.

    Args:
        session: Session to run
        duration: Seconds to run; 0 runs until interrupted
        activities: Activity pool (default: all activities)
        max_rounds: Optional cap on the number of rounds

    Returns:
        Number of completed rounds
    """
    config, rng = session.config, session.rng
    pool = list(activities or ACTIVITIES)
    started = session.clock()

    def time_is_up() -> bool:
        return duration > 0 and session.clock() - started >= duration

    logger.info(
        f"Session started: {config.dev_type.label}, complexity={config.complexity}, "
        f"duration={duration or 'unlimited'}"
    )
    display.show_boot_sequence(session)

    rounds = 0
    while not time_is_up() and (max_rounds is None or rounds < max_rounds):
        for activity in rng.shuffled(pool)[:config.complexity.activity_count]:
            logger.debug(f"Running activity {activity.__name__}")
            activity(session)
            rng.sleep_ms(100, 500)
            if time_is_up():
                break

        if config.alerts_enabled and rng.chance(ALERT_PROBABILITY):
            display.show_random_alert(session)

        if config.team_activity and rng.chance(TEAM_PROBABILITY):
            display.show_team_activity(session)

        rounds += 1

    session.terminal.clear()
    session.echo_colored("Session terminated.", Color.GREEN)
    logger.info(f"Session finished after {rounds} rounds")
    return rounds
