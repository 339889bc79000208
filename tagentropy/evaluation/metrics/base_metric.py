"""
Base classes of the per-user metrics.

A metric is configured once with the recommendation list size. For every evaluated
(recommender, dataset) pair it creates an accumulator, which measures the users one at
a time and then folds their values into the global statistic.
"""

__version__ = '0.1.0'

import typing as t
from abc import ABC, abstractmethod

from tagentropy.evaluation.metrics.user_result import UserResult


class BaseAccumulator(ABC):

    @abstractmethod
    def evaluate(self, test_user) -> UserResult:
        """
        Evaluate a single test user's recommendations
        :param test_user: the user to measure
        :return: the per-user result
        """
        pass

    @abstractmethod
    def final_results(self) -> t.Dict[str, float]:
        """
        Aggregate the evaluated users
        :return: the values of the global columns
        """
        pass


class BaseMetric(ABC):

    def __init__(self, list_size: int, **params):
        """
        Constructor
        :param list_size: number of items to request for each user
        :param params: metric specific options
        """
        self._list_size = list_size
        self._params = params

    @abstractmethod
    def name(self):
        pass

    @property
    def list_size(self) -> int:
        return self._list_size

    def get_column_labels(self) -> t.List[str]:
        return [f"{self.name()}@{self._list_size}"]

    def get_user_column_labels(self) -> t.List[str]:
        # per-user and global share the fields, they only differ in aggregation
        return self.get_column_labels()

    @abstractmethod
    def make_accumulator(self, algorithm, data) -> BaseAccumulator:
        pass
