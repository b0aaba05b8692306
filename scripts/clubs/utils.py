from __future__ import annotations

from typing import Iterable, List, Optional


def split_fields(line: str, delimiter: str = ",") -> List[str]:
    """
    Split a flat-file line into trimmed fields.
    Trailing empty fields are dropped before trimming, so `Chess,Kim,` yields two fields.
    Embedded delimiters are not escaped, so a value containing one spills into the next field.
    """
    parts = line.rstrip("\r\n").split(delimiter)
    while parts and parts[-1] == "":
        parts.pop()
    return [part.strip() for part in parts]


def join_fields(values: Iterable[Optional[str]], delimiter: str = ",") -> str:
    return delimiter.join("" if value is None else str(value) for value in values)
