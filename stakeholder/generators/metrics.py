"""
Performance Metrics Text

Metric names, units and optimization recommendations.
"""

from typing import Dict, List

from stakeholder.rng import Rng
from stakeholder.session.config import DevelopmentType

D = DevelopmentType

_METRICS: Dict[DevelopmentType, List[str]] = {
    D.BACKEND: ["Request throughput", "DB query latency", "Connection pool usage", "Cache hit latency"],
    D.FRONTEND: ["First contentful paint", "Layout shift score", "Script evaluation time", "Hydration time"],
    D.DATA_SCIENCE: ["Rows per second", "Join shuffle size", "Partition skew", "Aggregation time"],
    D.DEVOPS: ["Pod startup time", "Node CPU saturation", "Deploy rollout time", "Autoscaler lag"],
    D.BLOCKCHAIN: ["Block propagation time", "Gas per transaction", "Mempool depth", "Finality time"],
    D.MACHINE_LEARNING: ["Samples per second", "GPU memory usage", "Gradient norm", "Inference latency"],
    D.SYSTEMS_PROGRAMMING: ["Cache miss rate", "Context switches", "Allocation rate", "Syscall latency"],
    D.GAME_DEVELOPMENT: ["Frame time", "Draw calls", "Physics step time", "Texture memory"],
    D.SECURITY: ["Handshake time", "Encryption throughput", "Key rotation time", "Scan duration"],
}

_DEFAULT_METRICS = ["Throughput", "Latency", "Memory usage", "CPU time"]

_UNITS: Dict[DevelopmentType, List[str]] = {
    D.BACKEND: ["req/s", "ms", "connections"],
    D.FRONTEND: ["ms", "KB", "fps"],
    D.DATA_SCIENCE: ["rows/s", "MB", "s"],
    D.DEVOPS: ["s", "pods", "%"],
    D.BLOCKCHAIN: ["gwei", "tx/s", "ms"],
    D.MACHINE_LEARNING: ["samples/s", "GB", "ms"],
    D.SYSTEMS_PROGRAMMING: ["ns", "ops/s", "KB"],
    D.GAME_DEVELOPMENT: ["fps", "ms", "MB"],
    D.SECURITY: ["ms", "MB/s", "keys"],
}

_RECOMMENDATIONS: Dict[DevelopmentType, List[str]] = {
    D.BACKEND: [
        "Add a read replica for reporting queries",
        "Batch outbound webhook deliveries",
        "Introduce response caching for catalog endpoints",
    ],
    D.FRONTEND: [
        "Lazy-load below-the-fold components",
        "Split vendor bundle by route",
        "Memoize expensive selectors",
    ],
    D.DATA_SCIENCE: [
        "Repartition by join key before aggregation",
        "Switch intermediate storage to a columnar format",
        "Cache reused feature frames",
    ],
    D.DEVOPS: [
        "Raise HPA target utilization to 70%",
        "Pre-pull base images on new nodes",
        "Move build cache to a regional bucket",
    ],
    D.MACHINE_LEARNING: [
        "Enable mixed precision training",
        "Increase data loader workers",
        "Use gradient accumulation for larger effective batch",
    ],
    D.GAME_DEVELOPMENT: [
        "Batch static geometry",
        "Pool projectile objects",
        "Lower shadow cascade resolution on distant objects",
    ],
}

_DEFAULT_RECOMMENDATIONS = [
    "Profile the hot path and remove redundant work",
    "Introduce caching for repeated computations",
    "Parallelize independent processing steps",
]


def generate_performance_metric(rng: Rng, dev_type: DevelopmentType) -> str:
    return rng.choice(_METRICS.get(dev_type, _DEFAULT_METRICS))


def generate_metric_unit(rng: Rng, dev_type: DevelopmentType) -> str:
    return rng.choice(_UNITS.get(dev_type, ["ms", "ops/s", "MB"]))


def generate_optimization_recommendation(rng: Rng, dev_type: DevelopmentType) -> str:
    return rng.choice(_RECOMMENDATIONS.get(dev_type, _DEFAULT_RECOMMENDATIONS))
