#! /usr/bin/env python3

import os
import sys

import numpy as np
import pandas
import matplotlib.pyplot as plt
from pandas.api.types import is_bool_dtype, is_numeric_dtype
from pandas.plotting import scatter_matrix

USAGE = "Usage: {} <path-to-csv>"


def load(path):
    return pandas.read_csv(path)


def as_numeric(df):
    """Copy of df with every column plottable.

    Text columns become the codes of their sorted distinct values;
    missing entries stay NaN.
    """
    out = df.copy()
    for col in out.columns:
        if is_bool_dtype(out[col]):
            out[col] = out[col].astype(int)
        elif not is_numeric_dtype(out[col]):
            codes = out[col].astype("category").cat.codes
            out[col] = codes.astype(float).replace(-1, np.nan)
    return out


def plot(df, title=None):
    frame = as_numeric(df)

    if len(frame.columns) == 1:
        col = frame.columns[0]
        ax = frame.plot(y=col, style="o", grid=True, title=title, legend=False)
        ax.set_ylabel(col)
        return ax

    axes = scatter_matrix(frame, diagonal="hist")
    for ax in axes.flat:
        ax.grid(True)
    if title:
        axes[0, 0].figure.suptitle(title)
    return axes


def main(argv=None):
    if argv is None:
        argv = sys.argv
    if len(argv) < 2:
        prog = os.path.basename(argv[0]) if argv else "csvis"
        sys.exit(USAGE.format(prog))

    path = argv[1]

    df = load(path)

    print(df)

    plot(df, title=path)

    plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
