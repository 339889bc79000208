"""
Reduction of a tag weight vector to a single entropy value.
"""

__version__ = '0.1.0'

import math

from tagentropy.utils.enums import EntropyFormula

from .tag_vocabulary import WeightVector


def scalar_entropy(vector: WeightVector, normalizer: int) -> float:
    """
    Collapse the normalized vector to its total mass p and return -p * log2(p)
    :param vector: tag weight vector
    :param normalizer: catalog size
    :return: the entropy value, 0 when the vector has no mass
    """
    p = vector.normalize(normalizer).sum()
    if p == 0:
        return 0.0
    return 0.0 - p * math.log2(p)


def shannon_entropy(vector: WeightVector) -> float:
    """
    Shannon entropy of the tag distribution of a list.

    Each entry is divided by the total of the vector, so with the counts of `build_tag_presence`
    p_t = (listed items carrying t) / (sum of the unique tags of every listed item).
    :param vector: per-tag counts
    :return: the entropy value, 0 when the vector has no mass
    """
    total = vector.sum()
    if total == 0:
        return 0.0
    return float(sum(-p * math.log2(p) for p in vector.normalize(total).values() if p > 0))


def entropy(vector: WeightVector, normalizer: int, formula: EntropyFormula = EntropyFormula.SCALAR) -> float:
    if normalizer <= 0:
        raise ValueError(f"Entropy normalizer must be positive, got {normalizer}")
    if formula is EntropyFormula.SHANNON:
        return shannon_entropy(vector)
    return scalar_entropy(vector, normalizer)
