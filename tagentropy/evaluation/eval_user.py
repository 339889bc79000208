import typing as t


class EvalUser(object):
    """
    A user under evaluation, bound to the recommender being tested.

    Recommendations are requested from the whole item universe, leaving out the items
    the user already interacted with in training.
    """

    def __init__(self, user_id, recommender, train_items: t.Optional[t.Set] = None,
                 candidates: t.Optional[t.Set] = None):
        self.user_id = user_id
        self.recommender = recommender
        self.train_items = train_items if train_items is not None else set()
        self.candidates = candidates

    def get_recommendations(self, list_size: int):
        return self.recommender.get_recommendations(self.user_id, list_size,
                                                    candidates=self.candidates,
                                                    exclude=self.train_items)
