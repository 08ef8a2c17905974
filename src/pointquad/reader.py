"""
Delimited-text point loading backed by DuckDB.

DuckDB's CSV sniffer detects the delimiter, header row and column types,
so the same loader handles "x,y" files, tab separated exports and files
with extra columns.
"""

from pathlib import Path
from typing import List, Optional, Union

import duckdb

from .geometry import Point


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def read_csv_points(
    path: Union[str, Path],
    x_column: Optional[str] = None,
    y_column: Optional[str] = None,
    header: Optional[bool] = None,
) -> List[Point]:
    """
    Read points from a delimited text file.

    Args:
        path: File to read
        x_column: Name of the x coordinate column (default: first column)
        y_column: Name of the y coordinate column (default: second column)
        header: Whether the file has a header row. None lets DuckDB detect it.

    Returns:
        Points in file order. Rows with a missing, NaN or infinite
        coordinate are skipped.

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file has fewer than two columns or a named
            column is missing, or DuckDB cannot read the file as numbers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Could not find point file {path}")

    con = duckdb.connect(":memory:")
    try:
        rows = _query_points(con, path, x_column, y_column, header)
    except duckdb.Error as e:
        raise ValueError(f"Could not read points from {path}: {e}") from e
    finally:
        con.close()

    return [Point(px, py) for px, py in rows]


def _query_points(con, path, x_column, y_column, header):
    """Run the CSV scan and return (x, y) rows with finite coordinates."""
    options = {} if header is None else {"header": header}
    rel = con.read_csv(str(path), **options)
    columns = rel.columns

    if len(columns) < 2 and (x_column is None or y_column is None):
        raise ValueError(
            f"{path} has {len(columns)} column(s); need at least two for x and y"
        )

    x_name = x_column if x_column is not None else columns[0]
    y_name = y_column if y_column is not None else columns[1]
    for name in (x_name, y_name):
        if name not in columns:
            raise ValueError(f"Column {name!r} not found in {path}: {columns}")

    x, y = _quote(x_name), _quote(y_name)
    return rel.query(
        "point_rows",
        f"""
        SELECT px, py FROM (
            SELECT CAST({x} AS DOUBLE) AS px, CAST({y} AS DOUBLE) AS py
            FROM point_rows
        )
        WHERE px IS NOT NULL AND py IS NOT NULL
          AND isfinite(px) AND isfinite(py)
        """,
    ).fetchall()
