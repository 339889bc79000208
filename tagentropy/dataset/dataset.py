"""
Module description:

"""

__version__ = '0.1.0'

import typing as t

import pandas as pd

from tagentropy.dataset.tag_catalog import TagCatalog


class DataSet:
    """
    Evaluation data for a single dataset: training interactions, the users to
    evaluate and the tag catalog.
    """

    def __init__(self, train: pd.DataFrame, catalog: TagCatalog, test: t.Optional[pd.DataFrame] = None,
                 name: str = ""):
        self.name = name
        self.catalog = catalog
        self.train_dict = self.dataframe_to_dict(train)
        self.test_dict = self.dataframe_to_dict(test) if test is not None else None

        self.users = list(self.test_dict.keys()) if self.test_dict is not None else list(self.train_dict.keys())
        self.items = set(train["itemId"])
        if test is not None:
            self.items |= set(test["itemId"])

        # Interacted items belong to the catalog universe even without tags
        self.catalog.register_items(self.items)

    @staticmethod
    def dataframe_to_dict(data: pd.DataFrame) -> t.Dict[str, t.Set[str]]:
        ratings = {}
        for user, item in zip(data["userId"], data["itemId"]):
            ratings.setdefault(user, set()).add(item)
        return ratings

    def get_user_train_items(self, user) -> t.Set[str]:
        return self.train_dict.get(user, set())

    @property
    def num_users(self) -> int:
        return len(self.users)

    @property
    def num_items(self) -> int:
        return self.catalog.num_items
