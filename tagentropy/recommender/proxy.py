import ntpath
import typing as t
from types import SimpleNamespace

from tagentropy.utils.read import read_recommendations


class ProxyRecommender:
    def __init__(self, name: str = "", path: str = "", recommendations=None, header: bool = False):
        """
        Create a Proxy recommender to evaluate already generated recommendations.
        :param name: name of the recommender, defaults to the file name
        :param path: path to the recommendation file
        :param recommendations: already loaded recommendations in the form {user: [(item1,value1),...]}
        :param header: whether the recommendation file starts with a header row
        """
        self._path = path
        self._name = name if name else ntpath.basename(path).rsplit(".", 1)[0]
        if recommendations is None:
            recommendations = read_recommendations(path, header=header)
        self._recommendations = {u: sorted(recs, key=lambda x: x[1], reverse=True)
                                 for u, recs in recommendations.items()}

    @classmethod
    def from_namespace(cls, ns: SimpleNamespace) -> "ProxyRecommender":
        return cls(name=getattr(ns, "name", ""), path=ns.path, header=getattr(ns, "header", False))

    @property
    def name(self):
        return self._name

    @property
    def users(self):
        return list(self._recommendations.keys())

    def get_recommendations(self, user, list_size: int, candidates: t.Optional[t.Set] = None,
                            exclude: t.Optional[t.Set] = None) -> t.Optional[t.List[t.Tuple[t.Any, float]]]:
        """
        Top-n list for a single user
        :param user: user id
        :param list_size: maximum length of the returned list
        :param candidates: items that can be recommended, None means every item
        :param exclude: items that must not be recommended (e.g. training items)
        :return: the list in the form [(item1,value1),...], or None if no list exists for the user
        """
        user_recs = self._recommendations.get(user)
        if user_recs is None:
            return None
        exclude = exclude or set()
        recs = []
        for item, prediction in user_recs:
            if len(recs) >= list_size:
                break
            if item in exclude:
                continue
            if candidates is not None and item not in candidates:
                continue
            recs.append((item, prediction))
        return recs
