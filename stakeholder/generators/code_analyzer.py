"""
Code Analysis Text

File names, code issues and complexity metrics for the code analysis activity.
"""

from typing import Dict, List

from stakeholder.rng import Rng
from stakeholder.session.config import DevelopmentType

D = DevelopmentType

# (directories, base names, extensions)
_FILE_PARTS: Dict[DevelopmentType, tuple] = {
    D.BACKEND: (
        ["api", "services", "handlers", "repositories", "middleware"],
        ["user", "order", "payment", "auth", "session", "inventory"],
        [".go", ".py", ".java", ".rs"],
    ),
    D.FRONTEND: (
        ["components", "hooks", "pages", "store", "styles"],
        ["Header", "Dashboard", "LoginForm", "Sidebar", "Modal", "DataTable"],
        [".tsx", ".jsx", ".vue", ".ts"],
    ),
    D.FULLSTACK: (
        ["client", "server", "shared", "api", "routes"],
        ["session", "user", "checkout", "schema", "validation"],
        [".ts", ".tsx", ".py", ".js"],
    ),
    D.DATA_SCIENCE: (
        ["notebooks", "pipelines", "features", "etl"],
        ["clean_data", "feature_matrix", "aggregate", "cohort_analysis"],
        [".py", ".ipynb", ".sql", ".R"],
    ),
    D.DEVOPS: (
        ["terraform", "k8s", "ansible", "charts", ".github/workflows"],
        ["cluster", "ingress", "deployment", "monitoring", "vpc"],
        [".tf", ".yaml", ".yml", ".sh"],
    ),
    D.BLOCKCHAIN: (
        ["contracts", "scripts", "test", "lib"],
        ["Token", "Vault", "Governance", "Bridge", "Staking"],
        [".sol", ".rs", ".ts", ".vy"],
    ),
    D.MACHINE_LEARNING: (
        ["models", "training", "inference", "data", "eval"],
        ["transformer", "trainer", "tokenizer", "dataset", "metrics"],
        [".py", ".ipynb", ".yaml"],
    ),
    D.SYSTEMS_PROGRAMMING: (
        ["src", "kernel", "drivers", "alloc", "sync"],
        ["scheduler", "allocator", "ring_buffer", "mutex", "page_table"],
        [".rs", ".c", ".h", ".cpp", ".zig"],
    ),
    D.GAME_DEVELOPMENT: (
        ["Scripts", "Engine", "Physics", "Rendering", "AI"],
        ["PlayerController", "CollisionSystem", "ShaderCache", "PathFinder"],
        [".cs", ".cpp", ".h", ".gd", ".hlsl"],
    ),
    D.SECURITY: (
        ["auth", "crypto", "scanners", "policies", "audit"],
        ["token_validator", "cipher_suite", "rbac", "secrets", "firewall"],
        [".py", ".go", ".rs", ".yaml"],
    ),
}

_ISSUES: Dict[DevelopmentType, List[str]] = {
    D.BACKEND: [
        "N+1 query detected",
        "Missing request timeout",
        "Unbounded connection pool",
        "Blocking call in async handler",
        "Inconsistent error response format",
    ],
    D.FRONTEND: [
        "Unnecessary re-render",
        "Missing key prop in list",
        "Unused CSS selector",
        "Inaccessible form control",
        "Large bundle import",
    ],
    D.DATA_SCIENCE: [
        "Data leakage between folds",
        "Unseeded random sampling",
        "Chained indexing on DataFrame",
        "Implicit type coercion",
    ],
    D.DEVOPS: [
        "Hardcoded secret in manifest",
        "Missing resource limits",
        "Unpinned image tag",
        "Overly permissive IAM policy",
    ],
    D.BLOCKCHAIN: [
        "Reentrancy risk",
        "Unchecked external call",
        "Integer overflow risk",
        "Excessive gas in loop",
    ],
    D.MACHINE_LEARNING: [
        "Gradient explosion risk",
        "Missing eval mode switch",
        "Non-deterministic data loader",
        "Label imbalance not handled",
    ],
    D.SYSTEMS_PROGRAMMING: [
        "Potential use-after-free",
        "Lock held across await point",
        "Unaligned memory access",
        "Unchecked buffer length",
    ],
    D.GAME_DEVELOPMENT: [
        "Allocation in update loop",
        "Physics step not fixed",
        "Overdraw hotspot",
        "Unbatched draw calls",
    ],
    D.SECURITY: [
        "Weak hash algorithm",
        "Missing CSRF protection",
        "Timing-unsafe comparison",
        "Unvalidated redirect",
    ],
}

_DEFAULT_ISSUES = [
    "Cyclomatic complexity too high",
    "Duplicated code block",
    "Function exceeds recommended length",
    "Missing unit tests",
    "Deprecated API usage",
]

_COMPLEXITY_METRICS = [
    "Cyclomatic complexity",
    "Cognitive complexity",
    "Maintainability index",
    "Halstead volume",
    "Coupling factor",
]


def generate_filename(rng: Rng, dev_type: DevelopmentType) -> str:
    directories, names, extensions = _FILE_PARTS[dev_type]
    return f"{rng.choice(directories)}/{rng.choice(names)}{rng.choice(extensions)}"


def generate_code_issue(rng: Rng, dev_type: DevelopmentType) -> str:
    """Mostly dev-type specific issues, sometimes generic ones."""
    return rng.choice_between(_ISSUES.get(dev_type, _DEFAULT_ISSUES), 0.7, _DEFAULT_ISSUES)


def generate_complexity_metric(rng: Rng) -> str:
    return f"{rng.choice(_COMPLEXITY_METRICS)}: {rng.randint(1, 30)}"
