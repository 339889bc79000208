from types import SimpleNamespace

import pandas as pd

from tagentropy.dataset.dataset import DataSet
from tagentropy.dataset.tag_catalog import TagCatalog
from tagentropy.utils import logging
from tagentropy.utils.read import read_tabular
from tagentropy.utils.validation import DataLoadingConfig


class DataSetLoader:
    """The DataSetLoader class is responsible for loading the data needed to evaluate recommendation lists.

    It reads the training interactions (used to exclude already-seen items), the optional test
    interactions (whose users are the evaluated users) and the tag catalog.

    Args:
        config_ns (SimpleNamespace): Configuration namespace object defining data paths.

    To configure the data loading, include the appropriate
    settings in the configuration file using the pattern shown below.

    .. code:: yaml

      data_config:
        header: True|False
        train_path: this/is/the/path.tsv
        test_path: this/is/the/path.tsv
        side_information:
          tag_path: this/is/the/path.tsv
          item_path: this/is/the/path.tsv
    """

    def __init__(self, config_ns: SimpleNamespace):
        self.logger = logging.get_logger(self.__class__.__name__)
        self.config_ns = config_ns
        self.dataset_name = getattr(config_ns, "dataset", "")
        self.train_df = None
        self.test_df = None
        self.catalog = None

        self.set_params()

        if getattr(self.config_ns, "config_test", False):
            return

        self._load_ratings()
        self._load_side_information()

    def set_params(self):
        """Validate and set object parameters."""
        config = DataLoadingConfig(**vars(self.config_ns.data_config))

        self.train_path = config.train_path
        self.test_path = config.test_path
        self.header = config.header
        self.side_information = config.side_information

    def _load_ratings(self):
        """Load user-item interaction data."""
        self.train_df = self._read_from_tsv(self.train_path)
        self.logger.info(f"{self.train_path} - Loaded")

        if self.test_path is not None:
            self.test_df = self._read_from_tsv(self.test_path)
            self.logger.info(f"{self.test_path} - Loaded")

    def _load_side_information(self):
        """Load the tag catalog."""
        side = self.side_information
        self.catalog = TagCatalog.from_file(side.tag_path, side.item_path, header=side.header)
        self.logger.info(f"{side.tag_path} - Loaded tags for {self.catalog.num_items} items")

    def _read_from_tsv(self, file_path: str) -> pd.DataFrame:
        """Load a TSV interaction file.

        Only the user and item columns are kept; ratings and timestamps are not needed
        to decide which items a user has already seen.

        Args:
            file_path (str): Path to the TSV file containing interactions.

        Returns:
            pd.DataFrame: The loaded DataFrame.
        """
        return read_tabular(
            file_path,
            cols=['userId', 'itemId'],
            datatypes=['str', 'str'],
            sep='\t',
            header=self.header
        )

    def generate_dataobjects(self) -> list:
        data = DataSet(self.train_df, self.catalog, self.test_df, name=self.dataset_name)
        self.logger.info(f"Users to evaluate: {data.num_users}\tCatalog items: {data.num_items}")
        return [data]
