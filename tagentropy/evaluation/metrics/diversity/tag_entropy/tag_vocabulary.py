"""
Run-scoped tag vocabulary and the sparse weight vectors indexed by its ids.
"""

__version__ = '0.1.0'

import threading
import typing as t


class WeightVector(object):
    """
    Sparse vector from tag id to a non-negative weight.

    Missing entries are implicitly 0, so the vector grows as new tag ids are set.
    """

    def __init__(self, entries: t.Optional[t.Dict[int, float]] = None):
        self._entries: t.Dict[int, float] = dict(entries) if entries else {}

    def add(self, key: int, value: float):
        """
        Set the entry if absent, otherwise accumulate into it
        :param key: tag id
        :param value: weight to add
        """
        self._entries[key] = self._entries.get(key, 0.0) + value

    def get(self, key: int) -> float:
        return self._entries.get(key, 0.0)

    def sum(self) -> float:
        return sum(self._entries.values())

    def scale(self, factor: float) -> "WeightVector":
        return WeightVector({k: v * factor for k, v in self._entries.items()})

    def normalize(self, normalizer: float) -> "WeightVector":
        return WeightVector({k: v / normalizer for k, v in self._entries.items()})

    def items(self):
        return self._entries.items()

    def values(self):
        return self._entries.values()

    def __getitem__(self, key: int) -> float:
        return self.get(key)

    def __contains__(self, key: int) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"WeightVector({self._entries})"


class TagVocabulary(object):
    """
    Bidirectional mapping between lower-cased tags and integer ids.

    Ids are assigned in order of first appearance and never change or get reused, so a
    vocabulary must live exactly as long as the evaluation run that shares it.
    Id assignment is serialized, so users can be evaluated from several threads.
    """

    def __init__(self):
        self._tag_ids: t.Dict[str, int] = {}
        self._tags: t.List[str] = []
        self._lock = threading.Lock()

    def get_or_create_id(self, tag: str) -> int:
        tag = tag.lower()
        with self._lock:
            tag_id = self._tag_ids.get(tag)
            if tag_id is None:
                tag_id = len(self._tags)
                self._tags.append(tag)
                self._tag_ids[tag] = tag_id
        return tag_id

    def get_id(self, tag: str) -> t.Optional[int]:
        return self._tag_ids.get(tag.lower())

    def get_tag(self, tag_id: int) -> str:
        return self._tags[tag_id]

    def new_weight_vector(self) -> WeightVector:
        return WeightVector()

    def __contains__(self, tag: str) -> bool:
        return tag.lower() in self._tag_ids

    def __len__(self) -> int:
        return len(self._tags)
