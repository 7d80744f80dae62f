# ==================================================================================================
#                               Style tables
# ==================================================================================================
#
# Tabular views of composed styles, used by `themekit describe`.

from pathlib import Path

import pandas as pd

from themekit.themes.compose import provenance
from themekit.themes.style import Style

TABLE_COLUMNS: tuple[str, ...] = ("key", "value", "source")


def style_table(theme: Style, *overlays: Style) -> pd.DataFrame:
    """
    Return the composed style as a DataFrame, one row per key.

    DataFrame format example
    ------------------------
    | key              | value   | source          |
    |------------------|---------|-----------------|
    | axes.edgecolor   | #d9d9d9 | panel_border    |
    | font.size        | 14.0    | half_open       |

    Usage example
    -------------
        df = style_table(theme_half_open(), panel_border())
        df.loc[df["source"] == "panel_border", "key"].tolist()
    """
    rows = provenance(theme, *overlays)
    return pd.DataFrame(rows, columns=list(TABLE_COLUMNS))


def write_tsv(df: pd.DataFrame, out_path: Path) -> None:
    """Write `df` as a tab-separated file, creating parent directories."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, sep="\t", index=False)
