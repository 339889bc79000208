"""
Module description:

"""

__version__ = '0.1.0'

import os
from datetime import datetime
from enum import Enum

import pandas as pd

from tagentropy.evaluation.statistical_significance import PairedTTest, WilcoxonTest
from tagentropy.utils.write import save_tabular_df

_eval_results = "test_results"
_user_results = "user_results"
_user_column = "user"


class StatTest(Enum):
    PairedTTest = [PairedTTest, "paired_ttest"]
    WilcoxonTest = [WilcoxonTest, "wilcoxon_test"]


class ResultHandler:
    def __init__(self):
        self.oneshot_recommenders = {}
        self.ks = list()

    def add_oneshot_recommender(self, name, results):
        """
        Register the evaluation results of a recommender
        :param name: recommender name
        :param results: output of `Evaluator.eval`, in the form {k: {"test_results": ..., "user_results": ...}}
        """
        [self.ks.append(k) for k in results.keys() if k not in self.ks]
        self.oneshot_recommenders[name] = results

    def _timestamp(self):
        return datetime.now().strftime("%Y_%m_%d_%H_%M_%S")

    def best_results(self, k) -> pd.DataFrame:
        results = {name: result[k][_eval_results] for name, result in self.oneshot_recommenders.items()
                   if k in result}
        info = pd.DataFrame.from_dict(results, orient='index')
        info.insert(0, 'model', info.index)
        return info.reset_index(drop=True)

    def user_results(self, k) -> pd.DataFrame:
        frames = []
        for name, result in self.oneshot_recommenders.items():
            if k not in result:
                continue
            frame = result[k][_user_results].copy()
            frame.insert(1, 'model', name)
            frames.append(frame)
        return pd.concat(frames, ignore_index=True) if frames else pd.DataFrame()

    def save_best_results(self, output=''):
        paths = []
        for k in self.ks:
            paths.append(save_tabular_df(self.best_results(k), output,
                                         f'rec_cutoff_{k}_{self._timestamp()}.tsv'))
        return paths

    def save_best_results_as_triplets(self, output='../results/'):
        paths = []
        for k in self.ks:
            triplets = self.best_results(k).melt(id_vars="model", var_name="metric", value_name="value")
            paths.append(save_tabular_df(triplets, output, f'triplets_rec_cutoff_{k}_{self._timestamp()}.tsv'))
        return paths

    def save_user_results(self, output=''):
        paths = []
        for k in self.ks:
            paths.append(save_tabular_df(self.user_results(k), output,
                                         f'per_user_cutoff_{k}_{self._timestamp()}.tsv'))
        return paths

    def statistical_results(self, stat_test, k):
        results = []
        paired_list = []
        global_results = dict(self.oneshot_recommenders)
        for rec_0, rec_0_model in global_results.items():
            for rec_1, rec_1_model in global_results.items():
                if (rec_0 != rec_1) & ((rec_0, rec_1) not in paired_list):
                    paired_list.append((rec_0, rec_1))
                    paired_list.append((rec_1, rec_0))

                    user_0 = rec_0_model[k][_user_results].set_index(_user_column)
                    user_1 = rec_1_model[k][_user_results].set_index(_user_column)

                    for metric_name in user_0.columns:
                        # missing users have no value and take no part in the comparison
                        array_0 = user_0[metric_name].dropna().to_dict()
                        array_1 = user_1[metric_name].dropna().to_dict()

                        common_users = stat_test.value[0].common_users(array_0, array_1)

                        p_value = stat_test.value[0].compare(array_0, array_1, common_users)

                        results.append((rec_0, rec_1, metric_name, p_value))
                        results.append((rec_1, rec_0, metric_name, p_value))
        return results

    def save_best_statistical_results(self, stat_test, output='../results/'):
        for k in self.ks:
            results = self.statistical_results(stat_test, k)
            with open(os.path.abspath(os.sep.join([output,
                    f'stat_{stat_test.value[1]}_cutoff_{k}_{self._timestamp()}.tsv'])),
                    "w") as f:
                for tup in results:
                    f.write(f"{tup[0]}\t{tup[1]}\t{tup[2]}\t{tup[3]}\n")
