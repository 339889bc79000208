"""
Aggregation of the tags of a recommendation list into a single weight vector.
"""

__version__ = '0.1.0'

import typing as t

from .tag_vocabulary import TagVocabulary, WeightVector


def build_tag_weights(recommendations: t.Sequence[t.Tuple[t.Any, float]],
                      tag_lookup: t.Callable[[t.Any], t.Sequence[str]],
                      vocabulary: TagVocabulary) -> WeightVector:
    """
    Tag usage of a recommendation list.

    Every item carries one unit of mass, split evenly over its k tag occurrences: each
    occurrence adds 1/k to the entry of its tag. Repeated tags on the same item are not
    collapsed, and items without tags add nothing.

    :param recommendations: user recommendation list in the form [(item1,value1),...]
    :param tag_lookup: function returning the raw tags of an item
    :param vocabulary: run vocabulary used to resolve tag ids
    :return: the aggregated weight vector
    """
    vector = vocabulary.new_weight_vector()
    for item, _ in recommendations:
        tags = [tag.lower() for tag in tag_lookup(item)]
        if not tags:
            continue
        weight = 1 / len(tags)
        for tag in tags:
            vector.add(vocabulary.get_or_create_id(tag), weight)
    return vector


def build_tag_presence(recommendations: t.Sequence[t.Tuple[t.Any, float]],
                       tag_lookup: t.Callable[[t.Any], t.Sequence[str]],
                       vocabulary: TagVocabulary) -> WeightVector:
    """
    Number of listed items carrying each tag.

    Tags are lower-cased and collapsed within an item, and an item listed twice counts once.

    :param recommendations: user recommendation list in the form [(item1,value1),...]
    :param tag_lookup: function returning the raw tags of an item
    :param vocabulary: run vocabulary used to resolve tag ids
    :return: the per-tag counts
    """
    vector = vocabulary.new_weight_vector()
    for item in dict.fromkeys(item for item, _ in recommendations):
        for tag in dict.fromkeys(tag.lower() for tag in tag_lookup(item)):
            vector.add(vocabulary.get_or_create_id(tag), 1.0)
    return vector
