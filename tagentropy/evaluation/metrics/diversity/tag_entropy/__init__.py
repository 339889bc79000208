from .tag_entropy import TagEntropy, TagEntropyAccumulator
from .tag_vocabulary import TagVocabulary, WeightVector
from .tag_weights import build_tag_weights, build_tag_presence
from .entropy import entropy, scalar_entropy, shannon_entropy
