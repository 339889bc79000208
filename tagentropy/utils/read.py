"""
Module description:

"""

__version__ = '0.1.0'

import csv
import os
import typing as t

import pandas as pd
from omegaconf import OmegaConf


def read_tabular(
    file_path: str,
    cols: t.List[str],
    datatypes: t.List[str],
    sep: str = "\t",
    header: bool = False
) -> pd.DataFrame:
    """Read a delimited file into a DataFrame with the given column names and types.

    Args:
        file_path (str): Path of the file to read.
        cols (List[str]): Column names, in file order.
        datatypes (List[str]): Pandas dtypes for each column.
        sep (str): Field separator, default is `\\t`.
        header (bool): Whether the first row is a header to skip.

    Returns:
        pd.DataFrame: The loaded DataFrame.

    Raises:
        FileNotFoundError: If `file_path` does not exist.
    """
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    df = pd.read_csv(
        file_path,
        sep=sep,
        header=0 if header else None,
        names=cols,
        usecols=range(len(cols)),
        dtype=dict(zip(cols, datatypes)),
        keep_default_na=False,
        na_values={c: [""] for c, d in zip(cols, datatypes) if d != "str"},
        quoting=csv.QUOTE_NONE
    )
    return df


def read_recommendations(path: str, header: bool = False) -> t.Dict[str, t.List[t.Tuple[str, float]]]:
    """Read a top-k recommendation file.

    Each row holds `userId`, `itemId` and the predicted score. Lists are returned
    sorted by decreasing score.

    Args:
        path (str): Path of the recommendation file.
        header (bool): Whether the file has a header row.

    Returns:
        Dict[str, List[Tuple[str, float]]]: Recommendations in the form {user: [(item, score), ...]}.
    """
    data = read_tabular(path, cols=["userId", "itemId", "prediction"],
                        datatypes=["str", "str", "float"], header=header)
    recs = {}
    for user, group in data.groupby("userId", sort=False):
        recs[user] = sorted(zip(group["itemId"], group["prediction"]), key=lambda x: x[1], reverse=True)
    return recs


def read_item_list(path: str, header: bool = False) -> t.List[str]:
    """Read the first column of a file as a list of item ids."""
    data = read_tabular(path, cols=["itemId"], datatypes=["str"], header=header)
    return data["itemId"].tolist()


def load_config(config_path: str, overrides: t.Optional[t.List[str]] = None) -> t.Dict[str, t.Any]:
    """Load a YAML experiment configuration.

    Any file name is accepted (`.yml` or `.yaml`). Overrides use the dotted form
    `experiment.evaluation.cutoffs=[5]`; values are parsed as YAML and replace the
    values of the file.

    Args:
        config_path (str): Path of the configuration file.
        overrides (Optional[List[str]]): Dotted overrides applied on top of the file.

    Returns:
        Dict[str, Any]: The resolved configuration as plain containers.

    Raises:
        FileNotFoundError: If `config_path` does not exist.
    """
    if not os.path.isfile(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    cfg = OmegaConf.load(config_path)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return OmegaConf.to_container(cfg, resolve=True)
