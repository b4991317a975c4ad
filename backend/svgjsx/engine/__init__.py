"""svgjsx optimization engine."""

from svgjsx.engine.cache import LRUCache, OptimizationCache, generate_cache_key
from svgjsx.engine.optimizer import SvgOptimizer, compute_metrics, optimize_svg

__all__ = [
    "LRUCache",
    "OptimizationCache",
    "generate_cache_key",
    "SvgOptimizer",
    "compute_metrics",
    "optimize_svg",
]
