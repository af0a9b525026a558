"""
Network Activity Text

Endpoints, HTTP methods, status codes and request details.
"""

from typing import Dict, List

from stakeholder.rng import Rng
from stakeholder.session.config import DevelopmentType

D = DevelopmentType

_ENDPOINTS: Dict[DevelopmentType, List[str]] = {
    D.BACKEND: ["/api/v1/users", "/api/v1/orders", "/api/v1/payments/charge", "/api/v2/auth/token", "/internal/health"],
    D.FRONTEND: ["/static/js/main.chunk.js", "/api/session", "/graphql", "/assets/fonts/inter.woff2", "/api/feature-flags"],
    D.FULLSTACK: ["/api/sync", "/graphql", "/api/v1/cart", "/ws/notifications", "/api/v1/profile"],
    D.DATA_SCIENCE: ["/datasets/events/partitions", "/api/jobs/submit", "/warehouse/query", "/models/forecast"],
    D.DEVOPS: ["/metrics", "/api/v1/namespaces/prod/pods", "/healthz", "/v2/registry/manifests", "/api/deploy"],
    D.BLOCKCHAIN: ["/rpc", "/eth/v1/beacon/blocks", "/api/tx/broadcast", "/api/mempool", "/api/validators"],
    D.MACHINE_LEARNING: ["/v1/models/ranker:predict", "/api/experiments", "/api/checkpoints/upload", "/v1/embeddings"],
    D.SYSTEMS_PROGRAMMING: ["/debug/pprof/heap", "/stats/io", "/api/shm/segments", "/rpc/raft/append"],
    D.GAME_DEVELOPMENT: ["/matchmaking/queue", "/api/leaderboard", "/session/heartbeat", "/cdn/assets/level3.pak"],
    D.SECURITY: ["/oauth2/token", "/api/audit/events", "/.well-known/jwks.json", "/api/scan/results"],
}

_METHODS = ["GET", "POST", "PUT", "DELETE"]
_METHOD_WEIGHTS = [60, 25, 10, 5]

_STATUSES = [200, 201, 204, 301, 304, 400, 401, 404, 429, 500, 503]
_STATUS_WEIGHTS = [50, 10, 8, 3, 6, 4, 3, 5, 3, 2, 1]

_DETAILS = [
    "Cache-Control: max-age=3600",
    "Retried once after connection reset",
    "Payload compressed with gzip (68% reduction)",
    "TLS 1.3 session resumed",
    "Served from edge cache",
    "Rate limit remaining: 412",
    "Keep-alive connection reused",
    "Request traced with span id {span}",
]


def generate_endpoint(rng: Rng, dev_type: DevelopmentType) -> str:
    return rng.choice(_ENDPOINTS[dev_type])


def generate_method(rng: Rng) -> str:
    return rng.weighted_choice(_METHODS, _METHOD_WEIGHTS)


def generate_status(rng: Rng) -> int:
    return rng.weighted_choice(_STATUSES, _STATUS_WEIGHTS)


def generate_request_details(rng: Rng, dev_type: DevelopmentType) -> str:
    detail = rng.choice(_DETAILS)
    return detail.format(span=f"{rng.randint(0, 16 ** 8):08x}")
