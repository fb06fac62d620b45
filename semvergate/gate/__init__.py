from .gate import CompatibilityGate, GateOutcome, GateResult
from .output import OutputAggregator
from .policy import Verdict, decide_verdict
from .resolver import VersionResolver

__all__ = [
    "CompatibilityGate",
    "GateOutcome",
    "GateResult",
    "OutputAggregator",
    "Verdict",
    "decide_verdict",
    "VersionResolver",
]
