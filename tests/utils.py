import functools
import time
from pathlib import Path
from types import SimpleNamespace

test_path = Path(__file__).parent / 'data'
fixtures_path = test_path / 'fixtures'


def time_single_test(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            end = time.perf_counter()
            duration = end - start
            print(f"[{func.__name__}] executed in {duration:.4f} seconds")
    return wrapper


def create_namespace(config, attr=None):
    if attr:
        config = {attr: config}
    ns = _dict_to_namespace(config)
    return ns


def _dict_to_namespace(d):
    if isinstance(d, dict):
        return SimpleNamespace(**{k: _dict_to_namespace(v) for k, v in d.items()})
    elif isinstance(d, list):
        return [_dict_to_namespace(i) for i in d]
    else:
        return d


class FakeCatalog:
    def __init__(self, item_tags, num_items=None):
        self._item_tags = item_tags
        self._num_items = num_items if num_items is not None else len(item_tags)

    def get_item_tags(self, item):
        return list(self._item_tags.get(item, []))

    def get_item_ids(self):
        return set(self._item_tags.keys())

    @property
    def num_items(self):
        return self._num_items


class FakeUser:
    def __init__(self, user_id, recommendations):
        self.user_id = user_id
        self._recommendations = recommendations

    def get_recommendations(self, list_size):
        if self._recommendations is None:
            return None
        return self._recommendations[:list_size]
