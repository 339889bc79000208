"""
Module description:
"""

__version__ = '0.1.0'

from scipy import stats
import typing as t
import numpy as np


class PairedTTest:
    @staticmethod
    def common_users(arr_0: t.Dict[t.Any, float], arr_1: t.Dict[t.Any, float]):
        return list(arr_0.keys() & arr_1.keys())

    @staticmethod
    def compare(arr_0: t.Dict[t.Any, float], arr_1: t.Dict[t.Any, float], users: t.List[t.Any]):
        list_0 = list(map(arr_0.get, users))
        list_1 = list(map(arr_1.get, users))
        if len(users) < 2 or not any(np.array(list_0) - np.array(list_1)):
            return np.nan
        return stats.ttest_rel(list_0, list_1)[1]


class WilcoxonTest:
    @staticmethod
    def common_users(arr_0: t.Dict[t.Any, float], arr_1: t.Dict[t.Any, float]):
        return list(arr_0.keys() & arr_1.keys())

    @staticmethod
    def compare(arr_0: t.Dict[t.Any, float], arr_1: t.Dict[t.Any, float], users: t.List[t.Any]):
        list_0 = list(map(arr_0.get, users))
        list_1 = list(map(arr_1.get, users))
        return stats.wilcoxon(list_0, list_1)[1] if any(np.array(list_0) - np.array(list_1)) else np.nan
