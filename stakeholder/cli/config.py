"""
CLI Configuration Module

Handles command-line argument parsing and environment configuration.
"""

import os
import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from dotenv import load_dotenv

from stakeholder.session.config import Complexity, DevelopmentType, JargonLevel

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _env_value(name: str, parse: Callable[[str], T], default: T) -> T:
    """Read and convert an environment variable, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value '{raw}', using default {default}")
        return default


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(f"must not be negative, got {value}")
    return value


def _duration(text: str) -> int:
    try:
        return _non_negative_int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid duration {text!r}: {e}")


def _enum_option(parse: Callable[[str], T], choices: List[str]) -> Callable[[str], T]:
    def convert(text: str) -> T:
        try:
            return parse(text)
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"invalid choice: {text!r} (choose from {', '.join(choices)})"
            )
    return convert


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments and load environment configuration.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        argparse.Namespace: Parsed arguments with additional attributes:
            - console_log_level: int
            - log_file: Optional[Path]
    """
    # Load environment variables from .env file (if present)
    load_dotenv()

    env_dev_type = _env_value('STAKEHOLDER_DEV_TYPE', DevelopmentType.parse, DevelopmentType.BACKEND)
    env_jargon = _env_value('STAKEHOLDER_JARGON', JargonLevel.parse, JargonLevel.MEDIUM)
    env_complexity = _env_value('STAKEHOLDER_COMPLEXITY', Complexity.parse, Complexity.MEDIUM)
    env_duration = _env_value('STAKEHOLDER_DURATION', _non_negative_int, 0)
    env_seed = _env_value('STAKEHOLDER_SEED', int, None)
    env_project = os.getenv('STAKEHOLDER_PROJECT') or 'distributed-cluster'
    env_framework = os.getenv('STAKEHOLDER_FRAMEWORK', '')
    env_log_file = os.getenv('STAKEHOLDER_LOG_FILE')

    dev_type_names = [member.value for member in DevelopmentType]
    level_names = [member.name.lower() for member in JargonLevel]

    parser = argparse.ArgumentParser(
        prog='stakeholder',
        description='Generate convincing fake development activity in the terminal'
    )
    parser.add_argument(
        '-d', '--dev-type', '--dev_type',
        type=_enum_option(DevelopmentType.parse, dev_type_names),
        default=env_dev_type,
        metavar='TYPE',
        help=f'Type of development activity to simulate: {", ".join(dev_type_names)} '
             f'(default: {env_dev_type})'
    )
    parser.add_argument(
        '-j', '--jargon',
        type=_enum_option(JargonLevel.parse, level_names),
        default=env_jargon,
        metavar='LEVEL',
        help=f'Level of technical jargon: {", ".join(level_names)} (default: {env_jargon})'
    )
    parser.add_argument(
        '-c', '--complexity',
        type=_enum_option(Complexity.parse, level_names),
        default=env_complexity,
        metavar='LEVEL',
        help=f'How busy the output should appear: {", ".join(level_names)} (default: {env_complexity})'
    )
    parser.add_argument(
        '-T', '--duration',
        type=_duration,
        default=env_duration,
        help='Duration in seconds to run, 0 runs until interrupted '
             f'(default: {env_duration})'
    )
    parser.add_argument(
        '-a', '--alerts',
        action='store_true',
        help='Show critical system alerts'
    )
    parser.add_argument(
        '-p', '--project',
        type=str,
        default=env_project,
        help=f'Project name to simulate (default: {env_project})'
    )
    parser.add_argument(
        '-m', '--minimal',
        action='store_true',
        help='Use less colorful output'
    )
    parser.add_argument(
        '-t', '--team',
        action='store_true',
        help='Show team collaboration activity'
    )
    parser.add_argument(
        '-F', '--framework',
        type=str,
        default=env_framework,
        help='Framework to mention in the output'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=env_seed,
        help='Seed for reproducible output'
    )
    parser.add_argument(
        '--log-file',
        type=Path,
        default=Path(env_log_file) if env_log_file and env_log_file.strip() else None,
        help='Write a DEBUG log to this file'
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show session steps on the console'
    )
    verbosity.add_argument(
        '--debug',
        action='store_true',
        help='Show all technical details on the console'
    )

    args = parser.parse_args(argv)

    if args.debug:
        args.console_log_level = logging.DEBUG
    elif args.verbose:
        args.console_log_level = logging.INFO
    else:
        args.console_log_level = logging.WARNING

    return args
