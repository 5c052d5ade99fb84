"""
Data import utilities for reading (x, y) datasets from delimited text files.
"""

import os

import numpy as np

from .dataset import Dataset
from .data_preprocessing import drop_missing


def _split(line, delimiter):
    parts = line.split(delimiter) if delimiter else line.split()
    return [p.strip().strip('"').strip("'") for p in parts]


def _is_number(token):
    try:
        float(token)
        return True
    except ValueError:
        return False


def scan_header(filepath, delimiter=None, comments='#'):
    """
    Find the column names and the number of lines before the data block.

    A non-comment line counts as data when at least one of its fields is
    numeric. The last non-numeric line before the data is taken as the
    header row.

    Returns
    -------
    names : list of str or None
        Header names, or None if the file has no header row
    skip : int
        Number of lines preceding the first data line
    """
    names = None
    skip = 0
    with open(filepath, 'r') as f:
        for line in f:
            stripped = line.strip()
            if not stripped or stripped.startswith(comments):
                skip += 1
                continue

            parts = _split(stripped, delimiter)
            if any(_is_number(p) for p in parts):
                break
            names = parts
            skip += 1

    return names, skip


def resolve_column(column, names):
    """
    Turn a column given by index or by header name into an index.

    Parameters
    ----------
    column : int or str
        Column index, or header name. Digit strings are treated as indices.
    names : list of str or None
        Header names from ``scan_header``

    Returns
    -------
    int
        Column index
    """
    if isinstance(column, (int, np.integer)):
        return int(column)
    if isinstance(column, str) and column.isdigit():
        return int(column)
    if not names:
        raise ValueError(f"Column '{column}' requested by name but the file has no header")
    if column not in names:
        raise ValueError(f"Column '{column}' not found. Available: {names}")
    return names.index(column)


def load_txt_file(filepath, x_column=0, y_column=1, delimiter=None, comments='#',
                  skip_header=None):
    """
    Load an (x, y) dataset from a delimited text file.

    Parameters
    ----------
    filepath : str
        Path to the file
    x_column, y_column : int or str, optional
        Columns to read, by index or header name. Default: first two columns
    delimiter : str or None, optional
        Delimiter between columns. If None, split on whitespace
    comments : str, optional
        Character indicating comment lines, default '#'
    skip_header : int or None, optional
        Number of lines to skip. If None, detected automatically

    Returns
    -------
    Dataset
        Loaded data; rows with missing values are dropped

    Raises
    ------
    ValueError
        If the file cannot be parsed or the columns are not present
    """
    try:
        names, auto_skip = scan_header(filepath, delimiter=delimiter, comments=comments)
        if skip_header is None:
            skip_header = auto_skip

        xi = resolve_column(x_column, names)
        yi = resolve_column(y_column, names)

        data = np.genfromtxt(filepath, delimiter=delimiter, comments=comments,
                             skip_header=skip_header, usecols=(xi, yi), dtype=float)
        data = np.atleast_2d(data)
        if data.size == 0:
            raise ValueError("no data rows found")

        x, y, _ = drop_missing(data[:, 0], data[:, 1])

    except Exception as e:
        raise ValueError(f"Error loading file '{filepath}': {e}") from e

    return Dataset(x, y, name=os.path.basename(filepath))


def auto_detect_delimiter(filepath, max_lines=10):
    """
    Automatically detect delimiter in text file.

    Parameters
    ----------
    filepath : str
        Path to file
    max_lines : int, optional
        Number of lines to check, default 10

    Returns
    -------
    str or None
        Detected delimiter (comma or tab), or None for whitespace
    """
    with open(filepath, 'r') as f:
        lines = []
        for i, line in enumerate(f):
            if i >= max_lines:
                break
            line = line.strip()
            if line and not line.startswith('#'):
                lines.append(line)

    if not lines:
        return None

    for delim in (',', '\t', ';'):
        # Consistent count on every line means a real column separator
        counts = [line.count(delim) for line in lines]
        if len(set(counts)) == 1 and counts[0] > 0:
            return delim

    return None


def load_data_file(filepath, x_column=0, y_column=1, delimiter=None):
    """
    Load data file with automatic delimiter detection.

    Parameters
    ----------
    filepath : str
        Path to data file
    x_column, y_column : int or str, optional
        Columns to read, by index or header name
    delimiter : str or None, optional
        Explicit delimiter; detected when None

    Returns
    -------
    Dataset
        Loaded data
    """
    if delimiter is None:
        delimiter = auto_detect_delimiter(filepath)

    return load_txt_file(filepath, x_column=x_column, y_column=y_column,
                         delimiter=delimiter)
