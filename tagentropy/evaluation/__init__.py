"""
This is the evaluation module.

This module contains and expose the recommendation metrics.
It contains the evaluator object, which drives the per-user evaluation of a recommender
and collects the per-user and aggregate results.
"""

__version__ = '0.1.0'

from . import metrics
from .evaluator import Evaluator
from .eval_user import EvalUser
