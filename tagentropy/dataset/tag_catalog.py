"""
Module description:

"""

__version__ = '0.1.0'

import typing as t

from tagentropy.utils.read import read_tabular, read_item_list


class TagCatalog:
    """
    Item-tag catalog.

    Maps each item id to the ordered sequence of tags attached to it. Tags are kept
    as they appear in the source, duplicates and case included; normalization is up
    to the consumer. The catalog universe is the set of items with at least one tag
    plus every item registered explicitly, so tag-less items are still counted.
    """

    def __init__(self, item_tags: t.Dict[str, t.List[str]], items: t.Iterable[str] = ()):
        self._item_tags = {i: list(tags) for i, tags in item_tags.items()}
        self._items = set(self._item_tags.keys()) | set(items)

    def get_item_tags(self, item) -> t.List[str]:
        return list(self._item_tags.get(item, []))

    def get_item_ids(self) -> t.Set[str]:
        return set(self._items)

    @property
    def num_items(self) -> int:
        return len(self._items)

    def register_items(self, items: t.Iterable[str]):
        self._items.update(items)

    @classmethod
    def from_file(cls, tag_path: str, item_path: t.Optional[str] = None, header: bool = False) -> "TagCatalog":
        """
        Load the catalog from an item-tag file
        :param tag_path: path of the file with one `itemId<TAB>tag` row per tag occurrence
        :param item_path: optional path of a file listing the catalog items
        :param header: whether the files have a header row
        :return: the loaded catalog
        """
        data = read_tabular(tag_path, cols=["itemId", "tag"], datatypes=["str", "str"], header=header)
        map_ = {}
        for item, tag in zip(data["itemId"], data["tag"]):
            map_.setdefault(item, []).append(tag)
        items = read_item_list(item_path, header=header) if item_path else ()
        return cls(map_, items)
