from .result_handler import ResultHandler, StatTest
