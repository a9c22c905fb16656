"""In-memory table bridging CSV text and JSON records."""

from __future__ import annotations

import copy
from typing import Any, List, Mapping, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

# A cell holds whatever the source produced: strings from CSV, any JSON
# value from JSON.
Cell = Any
Row = List[Cell]


class Table(BaseModel):
    """Column names, rows and cached cardinalities.

    ``column_count`` is not checked against the rows here. Irregular input
    is common, so mismatches are left for ``simplecsv.validation.find_errors``
    to report.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    column_names: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("column_names", "columnNames"),
    )
    rows: List[Row] = Field(default_factory=list)
    column_count: int = Field(
        default=0, validation_alias=AliasChoices("column_count", "columnCount")
    )

    @model_validator(mode="before")
    @classmethod
    def _default_column_count(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        count = data.get("column_count", data.get("columnCount"))
        if count is None:
            data = {k: v for k, v in data.items() if k != "columnCount"}
            names = data.get("column_names", data.get("columnNames"))
            rows = data.get("rows") or []
            if names:
                data["column_count"] = len(names)
            elif rows:
                data["column_count"] = len(rows[0])
            else:
                data["column_count"] = 0
        return data

    @field_validator("column_names", "rows", mode="before")
    @classmethod
    def _deep_copy(cls, value: Any) -> Any:
        return copy.deepcopy(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def row_count(self) -> int:
        return len(self.rows)

    @classmethod
    def from_obj(cls, obj: Union["Table", Mapping[str, Any]]) -> "Table":
        """Deep copy a Table, or any mapping with table-like keys.

        Mappings may use the older camelCase keys (``columnNames``,
        ``columnCount``). ``row_count``/``rowCount`` are ignored; the row
        count always comes from ``rows``.
        """
        if isinstance(obj, Table):
            data: Mapping[str, Any] = {
                "column_names": obj.column_names,
                "rows": obj.rows,
                "column_count": obj.column_count,
            }
        else:
            data = {
                k: v
                for k, v in obj.items()
                if k not in ("row_count", "rowCount") and v is not None
            }
        return cls.model_validate(data)


__all__ = ["Cell", "Row", "Table"]
