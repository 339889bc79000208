"""
Module description:

"""

__version__ = '0.1.0'

import copy
import os
import re
from os.path import isfile, join
from types import SimpleNamespace
from typing import Any, Dict, Optional

from tagentropy.utils.folder import manage_directories

regexp = re.compile(r'[\D][\w-]+\.[\w-]+')

_experiment = 'experiment'

_version = 'version'
_data_config = "data_config"
_side_information = "side_information"
_header = 'header'
_evaluation = "evaluation"
_dataset = 'dataset'
_performance = 'path_output_rec_performance'
_logger_config = 'path_logger_config'
_log_folder = 'path_log_folder'
_top_k = 'top_k'
_config_test = 'config_test'
_print_triplets = 'print_results_as_triplets'
_models = 'models'
_recommendation_folder = 'RecommendationFolder'
_proxy_recommender = 'ProxyRecommender'


class PathResolver:
    def __init__(self, base_folder_path_config: str):
        self.base_folder_path_config = base_folder_path_config

    def resolve(self, local_path: str, dataset_name: str = "") -> str:
        if os.path.isabs(local_path):
            return os.path.abspath(local_path)
        if local_path.startswith((".", "..")) or regexp.search(local_path):
            return os.path.abspath(os.sep.join([self.base_folder_path_config, local_path]))
        if dataset_name:
            return local_path.format(dataset_name)
        return local_path

    def resolve_safe(self, value: Any, dataset_name: str = "") -> Any:
        if isinstance(value, str):
            try:
                formatted = value.format(dataset_name)
            except (IndexError, KeyError, ValueError):
                formatted = value
            return self.resolve(formatted, dataset_name)
        if isinstance(value, list):
            return [self.resolve_safe(v, dataset_name) for v in value]
        if isinstance(value, dict):
            return {k: self.resolve_safe(v, dataset_name) for k, v in value.items()}
        return value


class ConfigContext:
    def __init__(self, config: Dict[str, Any], base_folder_path_package: str, base_folder_path_config: str):
        self.config = config
        self.experiment = config[_experiment]
        self.base_folder_path_package = base_folder_path_package
        self.base_folder_path_config = base_folder_path_config
        self.base_namespace = SimpleNamespace()
        self.used_keys = set()
        self.path_resolver = PathResolver(base_folder_path_config)

    def mark_used(self, *keys: str):
        self.used_keys.update(keys)

    def remaining_items(self) -> Dict[str, Any]:
        return {k: v for k, v in self.experiment.items() if k not in self.used_keys}


class NameSpaceModel:
    def __init__(self, config: Dict[str, Any], base_folder_path_package: str, base_folder_path_config: str):
        self.context = ConfigContext(config, base_folder_path_package, base_folder_path_config)

    @property
    def base_namespace(self) -> SimpleNamespace:
        return self.context.base_namespace

    def fill_base(self):
        processors = [
            self._prepare_output_paths,
            self._build_data_config,
            self._build_evaluation,
            self._resolve_logger_config,
            self._resolve_log_folder,
            self._set_misc_fields,
        ]

        for processor in processors:
            processor()

        # Attach any remaining experiment-level keys directly for flexibility
        for key, value in self.context.remaining_items().items():
            setattr(self.context.base_namespace, key, value)

    def fill_model(self):
        for key, model_config in self.context.experiment.get(_models, {}).items():
            yield from self._build_model_entry(key, model_config or {})

    def _prepare_output_paths(self) -> None:
        exp_cfg = self.context.experiment
        dataset_name = exp_cfg[_dataset]
        resolver = self.context.path_resolver
        default_results_performance = os.sep.join(["..", "results", "{0}", "performance"])

        def resolve_output_path(raw_value: Optional[str], default_value: str) -> str:
            candidate = raw_value if raw_value is not None else default_value
            resolved = resolver.resolve_safe(candidate, dataset_name)
            return os.path.abspath(resolved)

        exp_cfg[_performance] = resolve_output_path(exp_cfg.get(_performance), default_results_performance)
        exp_cfg[_version] = exp_cfg.get(_version, __version__)

        if not exp_cfg.get(_config_test, False):
            manage_directories(exp_cfg[_performance])
        self.context.mark_used(_performance, _version)

    def _build_data_config(self) -> None:
        exp_cfg = self.context.experiment
        data_cfg = dict(exp_cfg[_data_config])
        dataset_name = exp_cfg[_dataset]
        resolver = self.context.path_resolver

        side_information = data_cfg.get(_side_information, None)
        if isinstance(side_information, SimpleNamespace):
            side_information = vars(side_information)
        if side_information is None:
            raise Exception("Tag side information is missing. Please define data_config.side_information.tag_path.")
        if not isinstance(side_information, dict):
            raise Exception("Side information is not a dict. No other options are allowed.")

        data_cfg = {k: resolver.resolve_safe(v, dataset_name) for k, v in data_cfg.items() if k != _side_information}
        data_cfg[_side_information] = SimpleNamespace(
            **{k: resolver.resolve_safe(v, dataset_name) for k, v in side_information.items()}
        )

        exp_cfg[_data_config] = data_cfg
        self.context.base_namespace.data_config = SimpleNamespace(**data_cfg)
        self.context.mark_used(_data_config)

    def _build_evaluation(self) -> None:
        exp_cfg = self.context.experiment
        evaluation_cfg = dict(exp_cfg.get(_evaluation, {}) or {})

        evaluation_cfg["simple_metrics"] = evaluation_cfg.get("simple_metrics", ["TagEntropy"])
        evaluation_cfg["paired_ttest"] = evaluation_cfg.get("paired_ttest", False)
        evaluation_cfg["wilcoxon_test"] = evaluation_cfg.get("wilcoxon_test", False)

        exp_cfg[_evaluation] = evaluation_cfg
        self.context.base_namespace.evaluation = SimpleNamespace(**evaluation_cfg)
        self.context.mark_used(_evaluation)

    def _resolve_logger_config(self) -> None:
        exp_cfg = self.context.experiment
        resolver = self.context.path_resolver
        if not exp_cfg.get(_logger_config, False):
            path_logger_config = os.path.abspath(
                os.sep.join([self.context.base_folder_path_package, "config", "logger_config.yml"])
            )
        else:
            path_logger_config = resolver.resolve_safe(exp_cfg[_logger_config], exp_cfg[_dataset])

        self.context.base_namespace.path_logger_config = path_logger_config
        self.context.mark_used(_logger_config)

    def _resolve_log_folder(self) -> None:
        exp_cfg = self.context.experiment
        resolver = self.context.path_resolver
        if not exp_cfg.get(_log_folder, False):
            path_log_folder = os.path.abspath(os.sep.join([self.context.base_folder_path_package, "..", "log"]))
        else:
            path_log_folder = resolver.resolve_safe(exp_cfg[_log_folder], exp_cfg[_dataset])

        self.context.base_namespace.path_log_folder = path_log_folder
        self.context.mark_used(_log_folder)

    def _set_misc_fields(self) -> None:
        exp_cfg = self.context.experiment
        self.context.base_namespace.config_test = exp_cfg.get(_config_test, False)
        self.context.base_namespace.print_results_as_triplets = exp_cfg.get(_print_triplets, False)

        for key in [_performance, _dataset, _top_k, _version]:
            if exp_cfg.get(key) is not None:
                setattr(self.context.base_namespace, key, exp_cfg.get(key))

        self.context.mark_used(
            _config_test,
            _print_triplets,
            _performance,
            _dataset,
            _top_k,
            _version,
            _models,
        )

    def _build_model_entry(self, key: str, model_config: Dict[str, Any]):
        dataset_name = self.context.experiment[_dataset]
        resolver = self.context.path_resolver
        model_config = {k: resolver.resolve_safe(v, dataset_name) for k, v in model_config.items()}
        # recommendation files follow the interaction files unless the entry says otherwise
        model_config.setdefault(_header, dict(self.context.experiment.get(_data_config, {})).get(_header, False))
        model_name_space = SimpleNamespace(**model_config)

        if key == _recommendation_folder:
            folder_path = getattr(model_name_space, "folder", None)
            if not folder_path:
                raise Exception("RecommendationFolder meta-model must expose the folder field.")
            onlyfiles = sorted(f for f in os.listdir(folder_path) if isfile(join(folder_path, f)))
            for file_ in onlyfiles:
                local_model_name_space = copy.copy(model_name_space)
                local_model_name_space.path = os.path.join(folder_path, file_)
                yield _proxy_recommender, local_model_name_space
            return

        yield key, model_name_space
