"""
tagentropy: tag entropy diversity evaluation of top-n recommendation lists.
"""

__version__ = '0.1.0'
