#!/usr/bin/env python3
"""
Stakeholder - Main Entry Point

Runs a simulated development session:
1. Boot sequence with a start-up progress bar
2. Rounds of randomly chosen activities until the duration runs out
"""

import sys
import logging
from typing import List, Optional

from stakeholder.cli.config import parse_arguments
from stakeholder.exceptions import StakeholderError
from stakeholder.logging import LoggingManager
from stakeholder.progress import RichTerminal
from stakeholder.rng import Rng
from stakeholder.session import Session, SessionConfig
from stakeholder.session.runner import run_session

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - parse config and run the session.

    Returns:
        Exit code: 0 for success, 2 for fatal errors, 130 on Ctrl+C
    """
    # Parse arguments and load configuration
    args = parse_arguments(argv)

    # Setup logging with progress-aware management
    logging_manager = LoggingManager.get_instance()
    logging_manager.setup(args.log_file, console_level=args.console_log_level)

    terminal = RichTerminal()

    try:
        config = SessionConfig.from_args(args)
        session = Session(
            config=config,
            terminal=terminal,
            rng=Rng(seed=args.seed),
            logging_manager=logging_manager,
        )

        terminal.clear()
        run_session(session, duration=args.duration)
        return 0

    except StakeholderError as e:
        logger.error(f"Session failed: {e}")
        logger.debug("Full error details:", exc_info=True)
        return 2

    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        logger.debug("Full error details:", exc_info=True)
        return 2

    except KeyboardInterrupt:
        terminal.write_line()
        logger.info("Session interrupted by user (Ctrl+C)")
        return 130  # Standard exit code for SIGINT

    except Exception as e:
        logger.error(f"Unexpected error occurred: {e}")
        logger.debug("Full error details:", exc_info=True)
        return 2

    finally:
        terminal.show_cursor(True)
        logging_manager.cleanup()


if __name__ == '__main__':
    sys.exit(main())
