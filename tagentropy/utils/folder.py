"""
Module description:

"""

__version__ = '0.1.0'

import os


def manage_directories(path_output_rec_performance):
    if os.path.exists(path_output_rec_performance):
        return
    os.makedirs(path_output_rec_performance)


def build_log_folder(path_log_folder):
    if not os.path.exists(os.path.abspath(path_log_folder)):
        os.makedirs(os.path.abspath(path_log_folder))


def create_folder(path, exist_ok=False):
    os.makedirs(os.path.abspath(path), exist_ok=exist_ok)
