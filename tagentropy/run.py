"""
Module description:

"""

__version__ = '0.1.0'

import argparse
import importlib
from os import path

from tagentropy.dataset import DataSetLoader
from tagentropy.evaluation import Evaluator
from tagentropy.namespace.namespace_model_builder import NameSpaceBuilder
from tagentropy.result_handler.result_handler import ResultHandler, StatTest
from tagentropy.utils import logging as logging_project

here = path.abspath(path.dirname(__file__))


def run_evaluation(config_path: str = '', config_overrides=None):
    builder = NameSpaceBuilder(config_path, here, path.abspath(path.dirname(config_path)), config_overrides)
    base = builder.base
    logging_project.init(base.base_namespace.path_logger_config, base.base_namespace.path_log_folder)
    logger = logging_project.get_logger("__main__")

    if base.base_namespace.version != __version__:
        logger.warning(f'Your config file targets version {base.base_namespace.version} '
                       f'while this is version {__version__}. Results may slightly change.')

    logger.info("Start evaluation")
    res_handler = ResultHandler()
    dataloader = DataSetLoader(config_ns=base.base_namespace)
    data_test_list = dataloader.generate_dataobjects()
    for data_test in data_test_list:
        evaluator = Evaluator(data_test, base.base_namespace)
        for key, model_base in builder.models():
            recommender_class = getattr(importlib.import_module("tagentropy.recommender"), key)
            recommender = recommender_class.from_namespace(model_base)
            logger.info(f"Evaluation begun for {recommender.name}")
            results = evaluator.eval(recommender)
            res_handler.add_oneshot_recommender(recommender.name, results)
            logger.info(f"Evaluation ended for {recommender.name}")
            for k, result in results.items():
                logger.info(f"Results@{k}:\t{result['test_results']}")

    output = base.base_namespace.path_output_rec_performance
    res_handler.save_best_results(output=output)
    res_handler.save_user_results(output=output)
    if getattr(base.base_namespace, "print_results_as_triplets", False):
        res_handler.save_best_results_as_triplets(output=output)
    if getattr(base.base_namespace.evaluation, "paired_ttest", False):
        res_handler.save_best_statistical_results(stat_test=StatTest.PairedTTest, output=output)
    if getattr(base.base_namespace.evaluation, "wilcoxon_test", False):
        res_handler.save_best_statistical_results(stat_test=StatTest.WilcoxonTest, output=output)

    logger.info("End evaluation")
    return res_handler


def main():
    parser = argparse.ArgumentParser(description="Compute the tag entropy of stored recommendation lists.")
    parser.add_argument('--config', type=str, required=True, help="path to the experiment configuration")
    parser.add_argument('overrides', nargs='*', help="dotted overrides, e.g. experiment.top_k=20")
    args = parser.parse_args()
    run_evaluation(args.config, args.overrides)


if __name__ == '__main__':
    main()
