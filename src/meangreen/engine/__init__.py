"""Engine package: evaluation, greedy selection and Qt worker bridge.

``EngineWorker`` lives in :mod:`meangreen.engine.qt_bridge` and is not
re-exported here, which keeps ``meangreen.game`` free of an import cycle.
"""

from meangreen.engine.evaluation import material_balance, material_score, unit_counts
from meangreen.engine.greedy_search import GreedySearchEngine
from meangreen.engine.search import (
    DecisionNode,
    IEngine,
    IProfiler,
    SearchContext,
    SearchLimits,
    SearchResult,
)

DefaultEngine: type[IEngine] = GreedySearchEngine

__all__ = [
    "DecisionNode",
    "DefaultEngine",
    "GreedySearchEngine",
    "IEngine",
    "IProfiler",
    "SearchContext",
    "SearchLimits",
    "SearchResult",
    "material_balance",
    "material_score",
    "unit_counts",
]
