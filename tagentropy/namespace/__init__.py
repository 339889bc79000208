from .namespace_model import NameSpaceModel
from .namespace_model_builder import NameSpaceBuilder
