"""
Module description:

"""

__version__ = '0.1.0'

import os
import pandas as pd

from tagentropy.utils.folder import create_folder


def save_tabular_df(
    df: pd.DataFrame,
    folder_path: str,
    filename: str,
    sep: str = "\t",
    header: bool = True
) -> str:
    """Save a DataFrame in tabular format to the specified path.

    Args:
        df (pd.Dataframe): Dataframe to save.
        folder_path (str): Destination folder.
        filename (str): Name of the destination file (e.g., 'per_user.tsv').
        sep (str): Separator to use, default is `\\t`.
        header (bool): Whether to write the column names.

    Returns:
        str: The absolute path of the written file.
    """
    # Create the folder if it does not exist
    create_folder(folder_path, exist_ok=True)

    # Build the full file path
    file_path = os.path.abspath(os.path.join(folder_path, filename))

    # Save as tabular data
    df.to_csv(
        file_path,
        sep=sep,
        index=False,
        header=header
    )
    return file_path
