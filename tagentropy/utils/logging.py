import datetime
import logging
import logging.config as cfg
import os

import yaml
import re

from tagentropy.utils.folder import build_log_folder


class TimeFilter(logging.Filter):

    def filter(self, record: logging.LogRecord) -> bool:
        record.time_filter = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")
        return True


def init(path_config, folder_log, log_level=logging.WARNING):
    # Pull in Logging Config
    path = os.path.join(path_config)
    build_log_folder(folder_log)
    folder_log = os.path.abspath(os.sep.join([folder_log, "tagentropy.log"]))
    pattern = re.compile(r'.*?\${(\w+)}.*?')

    class _Loader(yaml.SafeLoader):
        pass

    _Loader.add_implicit_resolver('!CUSTOM', pattern, None)

    def constructor_env_variables(loader, node):
        """
        Replaces the ${...} placeholders of a node with the log file path
        :param yaml.Loader loader: the yaml loader
        :param node: the current node in the yaml
        :return: the parsed string
        """
        value = loader.construct_scalar(node)
        match = pattern.findall(value)
        if match:
            full_value = value
            for g in match:
                full_value = full_value.replace(
                    f'${{{g}}}', folder_log
                )
            return full_value
        return value

    _Loader.add_constructor('!CUSTOM', constructor_env_variables)

    with open(path, 'r') as stream:
        logging_config = yaml.load(stream, Loader=_Loader)

    # Load Logging configs
    cfg.dictConfig(logging_config)

    loggers = {name: logging.getLogger(name) for name in logging.root.manager.loggerDict}
    for _, log in loggers.items():
        log.setLevel(log_level)


def get_logger(name, log_level=logging.DEBUG):
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    return logger

