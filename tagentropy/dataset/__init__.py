from .loader_coordinator import DataSetLoader
from .dataset import DataSet
from .tag_catalog import TagCatalog
