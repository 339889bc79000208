"""
Module description:

"""

__version__ = '0.1.0'

from tagentropy.namespace.namespace_model import NameSpaceModel
from tagentropy.utils.read import load_config


class NameSpaceBuilder:

    def __init__(self, config_path, base_folder_path_package, base_folder_path_config, config_overrides=None,
                 config_data=None) -> None:
        """
        Load the experiment configuration and wrap it in a namespace model
        :param config_path: path of the YAML configuration
        :param base_folder_path_package: folder of the installed package, for the default logger config
        :param base_folder_path_config: folder relative paths of the configuration are resolved against
        :param config_overrides: dotted overrides, e.g. `experiment.top_k=20`
        :param config_data: already loaded configuration, used instead of reading `config_path`
        """
        config = config_data if config_data is not None else load_config(config_path, overrides=config_overrides)
        self._namespace = NameSpaceModel(config, base_folder_path_package, base_folder_path_config)

    @property
    def base(self) -> NameSpaceModel:
        namespace = self._namespace
        namespace.fill_base()
        return namespace

    def models(self):
        return self._namespace.fill_model()
