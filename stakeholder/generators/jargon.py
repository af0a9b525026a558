"""
Technical Jargon

Buzzword sentences appended to activity summaries. Higher jargon levels draw
from denser vocabularies.
"""

from typing import Dict, List

from stakeholder.rng import Rng
from stakeholder.session.config import DevelopmentType, JargonLevel

_CODE = {
    JargonLevel.LOW: [
        "Code follows the style guide",
        "Functions are reasonably sized",
    ],
    JargonLevel.MEDIUM: [
        "Dependency graph shows healthy layering",
        "Abstractions are cohesive with low coupling",
        "Test coverage trends upward across modules",
    ],
    JargonLevel.HIGH: [
        "Hexagonal boundaries preserved across bounded contexts",
        "Monadic error propagation reduces control-flow entropy",
        "Idempotent command handlers verified via property-based tests",
    ],
    JargonLevel.EXTREME: [
        "Homoiconic AST rewriting yields zero-cost polymorphic dispatch",
        "Category-theoretic composition ensures referentially transparent side-effect isolation",
        "Affine type discipline eliminates aliasing across the effect lattice",
    ],
}

_PERFORMANCE = {
    JargonLevel.LOW: ["Response times look fine", "No obvious slowdowns"],
    JargonLevel.MEDIUM: [
        "Tail latency stays within the error budget",
        "Throughput scales linearly with worker count",
        "Hot paths benefit from warm caches",
    ],
    JargonLevel.HIGH: [
        "Amortized O(1) lookups confirmed under adversarial load",
        "Lock-free queues remove head-of-line blocking",
        "NUMA-aware allocation reduces cross-socket traffic",
    ],
    JargonLevel.EXTREME: [
        "Speculative vectorization saturates the SIMD lanes of the branch predictor",
        "Cache-oblivious recursion achieves asymptotically optimal memory hierarchy utilization",
        "Wait-free consensus amortizes coherence traffic across the interconnect fabric",
    ],
}

_DATA = {
    JargonLevel.LOW: ["Data looks consistent", "Records processed without errors"],
    JargonLevel.MEDIUM: [
        "Schema evolution handled without downtime",
        "Partition pruning keeps scans selective",
        "Late-arriving events reconciled in the next window",
    ],
    JargonLevel.HIGH: [
        "Exactly-once semantics preserved through transactional sinks",
        "Columnar predicate pushdown minimizes deserialization overhead",
        "Watermark propagation bounds out-of-order skew",
    ],
    JargonLevel.EXTREME: [
        "CRDT-based lineage converges under arbitrary partition topologies",
        "Bayesian cardinality sketches calibrate the cost-based optimizer in real time",
        "Lambda-kappa hybrid topology unifies bounded and unbounded semantics",
    ],
}

_NETWORK = {
    JargonLevel.LOW: ["Network is stable", "Requests complete normally"],
    JargonLevel.MEDIUM: [
        "Connection reuse keeps handshake overhead low",
        "Retries with jitter smooth transient failures",
        "Edge caching offloads origin traffic",
    ],
    JargonLevel.HIGH: [
        "HTTP/3 multiplexing removes transport-level head-of-line blocking",
        "Adaptive load shedding protects downstream saturation",
        "Consistent hashing limits rebalancing churn",
    ],
    JargonLevel.EXTREME: [
        "Zero-RTT resumption with eBPF steering bypasses kernel socket contention",
        "Gossip-based membership achieves epidemic convergence in logarithmic rounds",
        "Anycast BGP steering collapses tail latency across the service mesh",
    ],
}


def _pick(rng: Rng, table: Dict[JargonLevel, List[str]], dev_type: DevelopmentType, level: JargonLevel) -> str:
    sentence = rng.choice(table[level])
    if level >= JargonLevel.HIGH and rng.chance(0.3):
        return f"{sentence} ({dev_type.label})"
    return sentence


def generate_code_jargon(rng: Rng, dev_type: DevelopmentType, level: JargonLevel) -> str:
    return _pick(rng, _CODE, dev_type, level)


def generate_performance_jargon(rng: Rng, dev_type: DevelopmentType, level: JargonLevel) -> str:
    return _pick(rng, _PERFORMANCE, dev_type, level)


def generate_data_jargon(rng: Rng, dev_type: DevelopmentType, level: JargonLevel) -> str:
    return _pick(rng, _DATA, dev_type, level)


def generate_network_jargon(rng: Rng, dev_type: DevelopmentType, level: JargonLevel) -> str:
    return _pick(rng, _NETWORK, dev_type, level)
