"""
Session Display Extras

Boot sequence, random alerts and team notifications.
"""

import logging
from typing import Dict, List

from stakeholder.progress import Color
from stakeholder.session.config import DevelopmentType
from stakeholder.session.context import Session

logger = logging.getLogger(__name__)

D = DevelopmentType

BOOT_TEMPLATE = "{spinner:.green} [{elapsed_precise}] [{bar:40.cyan/blue}] {pos}/{len} ({eta})"
BOOT_STEPS = 100

_BOOT_MESSAGES = {
    0: "Loading configuration files...",
    20: "Establishing secure connections...",
    40: "Initializing development modules...",
    60: "Syncing with repository...",
    80: "Analyzing code dependencies...",
}

ALERT_TYPES = ["SECURITY", "PERFORMANCE", "RESOURCE", "DEPLOYMENT", "COMPLIANCE"]

_ALERT_MESSAGES: Dict[str, Dict[DevelopmentType, str]] = {
    "SECURITY": {
        D.SECURITY: "Potential intrusion attempt detected on production server",
        D.BACKEND: "API authentication token expiration approaching",
        D.FRONTEND: "Cross-site scripting vulnerability detected in form input",
        D.BLOCKCHAIN: "Smart contract privilege escalation vulnerability detected",
    },
    "PERFORMANCE": {
        D.BACKEND: "API response time degradation detected in payment endpoint",
        D.FRONTEND: "Rendering performance issue detected in main dashboard",
        D.DATA_SCIENCE: "Data processing pipeline throughput reduced by 25%",
        D.MACHINE_LEARNING: "Model inference latency exceeding threshold",
    },
    "RESOURCE": {
        D.DEVOPS: "Kubernetes cluster resource allocation approaching limit",
        D.BACKEND: "Database connection pool nearing capacity",
        D.DATA_SCIENCE: "Data processing job memory usage exceeding allocation",
    },
    "DEPLOYMENT": {
        D.DEVOPS: "Canary deployment showing increased error rate",
        D.BACKEND: "Service deployment incomplete on 3 nodes",
        D.FRONTEND: "Asset optimization failed in production build",
    },
    "COMPLIANCE": {
        D.SECURITY: "Potential data handling policy violation detected",
        D.BACKEND: "API endpoint missing required audit logging",
        D.BLOCKCHAIN: "Smart contract failing regulatory compliance check",
    },
}

_ALERT_DEFAULTS = {
    "SECURITY": "Unusual login pattern detected in production environment",
    "PERFORMANCE": "Performance regression detected in latest deployment",
    "RESOURCE": "System resource utilization approaching threshold",
    "DEPLOYMENT": "CI/CD pipeline failure detected in release branch",
    "COMPLIANCE": "Code scan detected potential compliance issue",
}

_ALERT_RESPONSES = {
    "SECURITY": "Initiating security protocol and notifying security team",
    "PERFORMANCE": "Analyzing performance metrics and scaling resources",
    "RESOURCE": "Optimizing resource allocation and preparing scaling plan",
    "DEPLOYMENT": "Running deployment recovery procedure and notifying DevOps",
    "COMPLIANCE": "Documenting issue and preparing compliance report",
}

SEVERITY_COLORS = {
    "CRITICAL": Color.RED,
    "HIGH": Color.YELLOW,
    "MEDIUM": Color.CYAN,
}

TEAM_MEMBERS = ["Alice", "Bob", "Carlos", "Diana", "Eva", "Felix", "Grace", "Hector", "Irene", "Jack"]

_TEAM_ACTIVITIES: Dict[DevelopmentType, List[str]] = {
    D.BACKEND: [
        "pushed new API endpoint implementation",
        "requested code review on service layer refactoring",
        "merged database optimization pull request",
        "commented on your API authentication PR",
        "resolved 3 high-priority backend bugs",
    ],
    D.FRONTEND: [
        "updated UI component library",
        "pushed new responsive design implementation",
        "fixed cross-browser compatibility issue",
        "requested review on animation performance PR",
        "updated design system documentation",
    ],
    D.FULLSTACK: [
        "implemented end-to-end feature integration",
        "fixed client-server sync issue",
        "updated full-stack deployment pipeline",
        "refactored shared validation logic",
        "documented API integration patterns",
    ],
    D.DATA_SCIENCE: [
        "updated data transformation pipeline",
        "shared new analysis notebook",
        "optimized data aggregation queries",
        "updated visualization dashboard",
        "documented new data metrics",
    ],
    D.DEVOPS: [
        "updated Kubernetes configuration",
        "improved CI/CD pipeline performance",
        "added new monitoring alerts",
        "fixed auto-scaling configuration",
        "updated infrastructure documentation",
    ],
    D.BLOCKCHAIN: [
        "optimized smart contract gas usage",
        "implemented new transaction validation",
        "updated consensus algorithm implementation",
        "fixed wallet integration issue",
        "documented token economics model",
    ],
    D.MACHINE_LEARNING: [
        "shared improved model accuracy results",
        "optimized model training pipeline",
        "added new feature extraction method",
        "implemented model versioning system",
        "documented model evaluation metrics",
    ],
    D.SYSTEMS_PROGRAMMING: [
        "optimized memory allocation strategy",
        "reduced thread contention in core module",
        "implemented lock-free data structure",
        "fixed race condition in scheduler",
        "documented concurrency pattern usage",
    ],
    D.GAME_DEVELOPMENT: [
        "optimized rendering pipeline",
        "fixed physics collision detection issue",
        "implemented new particle effect system",
        "reduced loading time by 30%",
        "documented game engine architecture",
    ],
    D.SECURITY: [
        "implemented additional encryption layer",
        "fixed authentication bypass vulnerability",
        "updated security scanning rules",
        "implemented improved access control",
        "documented security compliance requirements",
    ],
}

TEAM_ACTIONS = [
    "Review requested on PR #342",
    "Mentioned you in a comment",
    "Assigned ticket DEV-867 to you",
    "Requested your input on design decision",
    "Shared documentation for your review",
]


def show_boot_sequence(session: Session) -> None:
    """Header lines and a 100-step start-up bar."""
    config = session.config

    session.echo()
    session.echo_colored("INITIALIZING DEVELOPMENT ENVIRONMENT", Color.CYAN)
    session.echo(f"Project: {config.project_name.upper()}", Color.YELLOW)
    session.echo(f"Environment: {config.dev_type.label} Development", Color.GREEN)
    if config.framework:
        session.echo(f"Framework: {config.framework}", Color.BLUE)
    session.echo()

    with session.progress_bar(BOOT_STEPS, BOOT_TEMPLATE) as bar:
        for i in range(BOOT_STEPS):
            bar.set_position(i)
            message = _BOOT_MESSAGES.get(i)
            if message:
                bar.write_line(f"  {message}")
            session.rng.sleep_ms(50, 100)
        bar.finish_and_clear()

    session.echo()
    session.echo_colored("✅ DEVELOPMENT ENVIRONMENT INITIALIZED", Color.GREEN)
    session.echo()
    session.pause(0.5)


def pick_severity(session: Session) -> str:
    rng = session.rng
    if rng.chance(0.25):
        return "CRITICAL"
    return "HIGH" if rng.chance(0.33) else "MEDIUM"


def show_random_alert(session: Session) -> None:
    config, rng = session.config, session.rng
    alert_type = rng.choice(ALERT_TYPES)
    severity = pick_severity(session)
    message = _ALERT_MESSAGES[alert_type].get(config.dev_type, _ALERT_DEFAULTS[alert_type])

    logger.debug(f"Showing {severity} {alert_type} alert")
    session.echo(f"🚨 {alert_type} ALERT [{severity}]: {message}", SEVERITY_COLORS[severity])
    session.echo(f"  ↳ AUTOMATED RESPONSE: {_ALERT_RESPONSES[alert_type]}")
    session.echo()
    session.pause(1.0)


def show_team_activity(session: Session) -> None:
    config, rng = session.config, session.rng
    member = rng.choice(TEAM_MEMBERS)
    activity = rng.choice(_TEAM_ACTIVITIES[config.dev_type])
    minutes_ago = rng.randint(1, 30)

    session.echo(f"👥 TEAM: {member} {activity} ({minutes_ago} minutes ago)", Color.CYAN)

    if rng.chance(0.5):
        session.echo(f"  ↳ ACTION NEEDED: {rng.choice(TEAM_ACTIONS)}")

    session.echo()
    session.pause(0.8)
