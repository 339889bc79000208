"""
This is the implementation of the Tag Entropy metric.
It proceeds from a user-wise computation, and average the values over the users.
"""

__version__ = '0.1.0'

import math
import threading
import typing as t

from tagentropy.evaluation.metrics.base_metric import BaseAccumulator, BaseMetric
from tagentropy.evaluation.metrics.user_result import UserResult
from tagentropy.utils import logging
from tagentropy.utils.enums import AccumulatorState, AggregationPolicy, EntropyFormula, ResultStatus

from .entropy import entropy
from .tag_vocabulary import TagVocabulary
from .tag_weights import build_tag_presence, build_tag_weights


class TagEntropy(BaseMetric):
    r"""
    Tag Entropy

    This class represents the implementation of the Tag Entropy recommendation metric.

    Each recommended item spreads one unit of mass evenly over its :math:`k_i` tags.
    The accumulated tag masses are divided by the catalog size :math:`|I|` and collapsed
    to their total :math:`p`:

    .. math::
        p = \frac{1}{|I|} \sum_{i \in L_u} \sum_{t \in tags(i)} \frac{1}{k_i}
        \qquad
        \mathrm {TagEntropy}=-p \log_2 p

    With `entropy_formula: shannon` tags are deduplicated within each item and
    :math:`p_t = c_t / \sum_{t'} c_{t'}`, where :math:`c_t` is the number of listed items carrying
    :math:`t`; the value is :math:`-\sum_t p_t \log_2 p_t` and the catalog size is not used.

    Users without a recommendation list get no value and are left out of the average.
    Users whose computation fails get 0; with the default `lenient` aggregation they still
    count in the average, with `strict` aggregation they are left out.

    To compute the metric, add it to the config file adopting the following pattern:

    .. code:: yaml

        simple_metrics: [TagEntropy]
        aggregation: lenient
        entropy_formula: scalar
    """

    def __init__(self, list_size: int, aggregation: AggregationPolicy = AggregationPolicy.LENIENT,
                 entropy_formula: EntropyFormula = EntropyFormula.SCALAR):
        """
        Constructor
        :param list_size: number of items to request for each user
        :param aggregation: how users with a failed computation enter the average
        :param entropy_formula: reduction of the tag weight vector
        """
        super().__init__(list_size, aggregation=aggregation, entropy_formula=entropy_formula)
        self._aggregation = AggregationPolicy(aggregation)
        self._entropy_formula = EntropyFormula(entropy_formula)

    @staticmethod
    def name():
        """
        Metric Name Getter
        :return: returns the public name of the metric
        """
        return "TagEntropy"

    def make_accumulator(self, algorithm, data) -> "TagEntropyAccumulator":
        """
        Make a metric accumulator for an algorithm and a data set
        :param algorithm: name of the algorithm being tested
        :param data: DataSet being tested with
        :return: a fresh accumulator, with its own tag vocabulary
        """
        return TagEntropyAccumulator(self._list_size, self.get_column_labels()[0], data.catalog,
                                     self._aggregation, self._entropy_formula, algorithm)


class TagEntropyAccumulator(BaseAccumulator):
    def __init__(self, list_size: int, column: str, catalog, aggregation: AggregationPolicy,
                 entropy_formula: EntropyFormula, algorithm: str = ""):
        self.logger = logging.get_logger(TagEntropy.name())
        self._list_size = list_size
        self._column = column
        self._catalog = catalog
        self._aggregation = aggregation
        self._entropy_formula = entropy_formula
        self._algorithm = algorithm
        self._vocabulary = TagVocabulary()

        self._total_entropy = 0.0
        self._user_count = 0
        self._degraded_count = 0
        self._state = AccumulatorState.FRESH
        self._lock = threading.Lock()

    @property
    def state(self) -> AccumulatorState:
        return self._state

    @property
    def vocabulary(self) -> TagVocabulary:
        return self._vocabulary

    @property
    def user_count(self) -> int:
        return self._user_count

    def evaluate(self, test_user) -> UserResult:
        """
        Evaluate a single test user's recommendations
        :param test_user: the user, able to provide its recommendation list
        :return: the per-user result
        """
        if self._state is AccumulatorState.FINALIZED:
            raise RuntimeError("Cannot evaluate users on a finalized accumulator")

        recommendations = test_user.get_recommendations(self._list_size)
        if not recommendations:
            self.logger.debug(f"No recommendations for user {test_user.user_id}")
            return UserResult.missing(test_user.user_id)

        try:
            build = build_tag_presence if self._entropy_formula is EntropyFormula.SHANNON else build_tag_weights
            vector = build(recommendations, self._catalog.get_item_tags, self._vocabulary)
            result = UserResult.computed(test_user.user_id,
                                         entropy(vector, self._catalog.num_items, self._entropy_formula))
        except Exception as ex:
            self.logger.error(f"{self._algorithm} - {self._column} failed for user {test_user.user_id}: {ex}",
                              exc_info=True)
            result = UserResult.degraded(test_user.user_id)

        self._record(result)
        return result

    def _record(self, result: UserResult):
        with self._lock:
            self._state = AccumulatorState.ACCUMULATING
            if result.status is ResultStatus.DEGRADED:
                self._degraded_count += 1
                if self._aggregation is AggregationPolicy.STRICT:
                    return
            self._total_entropy += result.value
            self._user_count += 1

    def merge(self, other: "TagEntropyAccumulator"):
        """
        Fold the running totals of a partial accumulator into this one
        :param other: accumulator of the same metric, filled on another thread
        """
        if self._state is AccumulatorState.FINALIZED:
            raise RuntimeError("Cannot merge into a finalized accumulator")
        with self._lock:
            self._total_entropy += other._total_entropy
            self._user_count += other._user_count
            self._degraded_count += other._degraded_count
            if self._user_count or self._degraded_count:
                self._state = AccumulatorState.ACCUMULATING

    def final_results(self) -> t.Dict[str, float]:
        """
        Get the final aggregate results
        :return: the average entropy, NaN when no user was evaluated
        """
        with self._lock:
            self._state = AccumulatorState.FINALIZED
            if self._degraded_count:
                self.logger.warning(f"{self._algorithm} - {self._column}: {self._degraded_count} users fell back "
                                    f"to 0 ({self._aggregation.value} aggregation)")
            if self._user_count == 0:
                self.logger.warning(f"{self._algorithm} - {self._column}: no user evaluated, the average is undefined")
                return {self._column: math.nan}
            return {self._column: self._total_entropy / self._user_count}
