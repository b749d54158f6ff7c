"""CSV dialect for files opened in German Excel.

- ``;`` as delimiter (',' is the decimal separator)
- every field quoted, inner quotes doubled
- CRLF line ends
- UTF-8 byte-order mark so Excel detects the encoding
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

BOM = "\ufeff"


def write_csv(rows: Iterable[Sequence[object]]) -> str:
    """Render ``rows`` (header first) as a BOM-prefixed CSV string."""
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=";",
        quotechar='"',
        quoting=csv.QUOTE_ALL,
        lineterminator="\r\n",
    )
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    return BOM + buffer.getvalue()
