"""
This is the metrics' module.

This module contains and expose the recommendation metrics.
Each metric is encapsulated in a specific package.

See the implementation of Tag Entropy for creating new per-user metrics.
"""

__version__ = '0.1.0'

from tagentropy.evaluation.metrics.base_metric import BaseMetric, BaseAccumulator
from tagentropy.evaluation.metrics.user_result import UserResult
from tagentropy.evaluation.metrics.diversity.tag_entropy import TagEntropy

_metric_dictionary = {
    "TagEntropy": TagEntropy,
}

_lower_dict = {k.lower(): v for k, v in _metric_dictionary.items()}


def parse_metrics(metrics):
    return [_lower_dict[m.lower()] for m in metrics if m.lower() in _lower_dict.keys()]

