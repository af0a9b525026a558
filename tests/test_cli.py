import logging
from pathlib import Path

import pytest

from stakeholder.cli import parse_arguments
from stakeholder.session import Complexity, DevelopmentType, JargonLevel, SessionConfig

ENV_NAMES = [
    "STAKEHOLDER_DEV_TYPE",
    "STAKEHOLDER_JARGON",
    "STAKEHOLDER_COMPLEXITY",
    "STAKEHOLDER_DURATION",
    "STAKEHOLDER_SEED",
    "STAKEHOLDER_PROJECT",
    "STAKEHOLDER_FRAMEWORK",
    "STAKEHOLDER_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    args = parse_arguments([])

    assert args.dev_type is DevelopmentType.BACKEND
    assert args.jargon is JargonLevel.MEDIUM
    assert args.complexity is Complexity.MEDIUM
    assert args.duration == 0
    assert args.project == "distributed-cluster"
    assert args.framework == ""
    assert args.seed is None
    assert args.log_file is None
    assert not args.alerts and not args.minimal and not args.team
    assert args.console_log_level == logging.WARNING


def test_all_flags():
    args = parse_arguments([
        "-d", "machine-learning",
        "-j", "extreme",
        "-c", "LOW",
        "-T", "30",
        "-a", "-m", "-t",
        "-p", "rocket",
        "-F", "Django",
        "--seed", "42",
        "--log-file", "out/session.log",
    ])

    assert args.dev_type is DevelopmentType.MACHINE_LEARNING
    assert args.jargon is JargonLevel.EXTREME
    assert args.complexity is Complexity.LOW
    assert args.duration == 30
    assert args.alerts and args.minimal and args.team
    assert args.project == "rocket"
    assert args.framework == "Django"
    assert args.seed == 42
    assert args.log_file == Path("out/session.log")


def test_session_config_from_args():
    args = parse_arguments(["-d", "frontend", "-j", "high", "-t", "-p", "web"])
    config = SessionConfig.from_args(args)

    assert config.dev_type is DevelopmentType.FRONTEND
    assert config.jargon_level is JargonLevel.HIGH
    assert config.team_activity
    assert not config.alerts_enabled
    assert config.project_name == "web"


@pytest.mark.parametrize("flags, level", [
    (["-v"], logging.INFO),
    (["--verbose"], logging.INFO),
    (["--debug"], logging.DEBUG),
])
def test_console_log_level(flags, level):
    assert parse_arguments(flags).console_log_level == level


def test_verbose_and_debug_are_exclusive():
    with pytest.raises(SystemExit):
        parse_arguments(["-v", "--debug"])


@pytest.mark.parametrize("flags", [
    ["-d", "quantum"],
    ["-j", "lots"],
    ["-T", "-5"],
    ["-T", "soon"],
    ["--seed", "abc"],
])
def test_invalid_values_exit(flags):
    with pytest.raises(SystemExit):
        parse_arguments(flags)


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv("STAKEHOLDER_DEV_TYPE", "devops")
    monkeypatch.setenv("STAKEHOLDER_COMPLEXITY", "extreme")
    monkeypatch.setenv("STAKEHOLDER_DURATION", "12")
    monkeypatch.setenv("STAKEHOLDER_SEED", "99")
    monkeypatch.setenv("STAKEHOLDER_PROJECT", "from-env")

    args = parse_arguments([])

    assert args.dev_type is DevelopmentType.DEVOPS
    assert args.complexity is Complexity.EXTREME
    assert args.duration == 12
    assert args.seed == 99
    assert args.project == "from-env"


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv("STAKEHOLDER_DEV_TYPE", "devops")
    args = parse_arguments(["-d", "security"])
    assert args.dev_type is DevelopmentType.SECURITY


def test_invalid_environment_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("STAKEHOLDER_JARGON", "unbelievable")
    monkeypatch.setenv("STAKEHOLDER_DURATION", "-1")

    with caplog.at_level(logging.WARNING):
        args = parse_arguments([])

    assert args.jargon is JargonLevel.MEDIUM
    assert args.duration == 0
    assert "STAKEHOLDER_JARGON" in caplog.text


def test_underscore_dev_type_option():
    args = parse_arguments(["--dev_type", "data_science"])
    assert args.dev_type is DevelopmentType.DATA_SCIENCE
