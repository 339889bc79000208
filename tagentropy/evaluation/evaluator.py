"""
Evaluation of recommendation lists at one or more cutoffs.

The `evaluation` section of the configuration drives it:

.. code:: yaml

    evaluation:
      simple_metrics: [TagEntropy]
      cutoffs: [10, 20]
      aggregation: lenient
      entropy_formula: scalar
      paired_ttest: True
"""

__version__ = '0.1.0'

from time import time
from types import SimpleNamespace
import logging as pylog

import pandas as pd

from tagentropy.dataset.dataset import DataSet
from tagentropy.utils import logging
from tagentropy.utils.validation import EvaluationConfig, check_cutoffs
from . import metrics
from .eval_user import EvalUser

_user_column = "user"


class Evaluator(object):
    def __init__(self, data: DataSet, config: SimpleNamespace):
        """
        Class to manage the evaluation of recommendation lists
        :param data: dataset object
        :param config: experiment namespace, with the `evaluation` section
        """
        self.logger = logging.get_logger(self.__class__.__name__,
                                         pylog.CRITICAL if getattr(config, "config_test", False) else pylog.DEBUG)
        self._data = data
        self._evaluation = EvaluationConfig(**vars(getattr(config, "evaluation", SimpleNamespace())))
        self._top_k = getattr(config, "top_k", None)
        self._k = self._evaluation.cutoffs or [self._top_k if self._top_k is not None else 10]
        if self._top_k is not None:
            check_cutoffs(self._k, self._top_k)
        self._metrics = metrics.parse_metrics(self._evaluation.simple_metrics)
        if not self._metrics:
            self.logger.warning(f"No known metric in {self._evaluation.simple_metrics}")
        self._candidates = data.catalog.get_item_ids()

    @property
    def cutoffs(self):
        return list(self._k)

    def eval(self, recommender):
        """
        Evaluation of a recommender at every cutoff
        :param recommender: object exposing `name` and `get_recommendations`
        :return: {k: {"test_results": {column: value}, "user_results": DataFrame}}
        """
        result_dict = {}
        for k in self._k:
            test_results, user_results = self.eval_at_k(recommender, k)
            result_dict[k] = {"test_results": test_results,
                              "user_results": user_results}
        return result_dict

    def eval_at_k(self, recommender, k):
        rounding_factor = 5
        eval_start_time = time()

        metric_objects = [m(k, aggregation=self._evaluation.aggregation,
                            entropy_formula=self._evaluation.entropy_formula) for m in self._metrics]
        accumulators = [(m, m.make_accumulator(recommender.name, self._data)) for m in metric_objects]

        rows = []
        for user in self._data.users:
            test_user = EvalUser(user, recommender, self._data.get_user_train_items(user), self._candidates)
            row = {_user_column: user}
            for metric_object, accumulator in accumulators:
                row.update(accumulator.evaluate(test_user).as_row(metric_object.get_user_column_labels()[0]))
            rows.append(row)

        results = {}
        for _, accumulator in accumulators:
            results.update(accumulator.final_results())

        columns = [_user_column] + [c for m in metric_objects for c in m.get_user_column_labels()]
        user_results = pd.DataFrame(rows, columns=columns)

        str_results = {name: str(round(v, rounding_factor)) for name, v in results.items()}
        self.logger.info("")
        self.logger.info(f"{recommender.name} Evaluation results")
        self.logger.info(f"Cut-off: {k}")
        self.logger.info(f"Eval Time: {time() - eval_start_time}")
        self.logger.info(f"Results")
        for e in str_results.items():
            self.logger.info("\t".join(e))

        return results, user_results
