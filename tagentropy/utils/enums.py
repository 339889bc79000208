from enum import Enum


class ResultStatus(Enum):
    MISSING = "missing"
    COMPUTED = "computed"
    DEGRADED = "degraded"


class AggregationPolicy(Enum):
    LENIENT = "lenient"
    STRICT = "strict"


class EntropyFormula(Enum):
    SCALAR = "scalar"
    SHANNON = "shannon"


class AccumulatorState(Enum):
    FRESH = "fresh"
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"
