from __future__ import annotations

from numbers import Integral, Real
from typing import Any, ClassVar

from rich.box import SIMPLE_HEAVY
from rich.console import Console, ConsoleOptions, RenderResult
from rich.table import Table

import pandas as pd

from . import types as tt


class DataFrameMixin(object):
    """DataFrameMixin aggregates a pandas DataFrame and provides the same
    representation methods.

    """

    __slots__ = ()

    table_options: ClassVar[dict[str, Any]] = dict(
        show_lines=False, box=SIMPLE_HEAVY
    )
    max_rows: int = 10
    columns_options: None | dict[str, dict[str, Any]] = None

    def __init__(self, data: pd.DataFrame, *args: Any, **kwargs: Any) -> None:
        self.data: pd.DataFrame = data  # type: ignore

    def _repr_html_(self) -> str:
        return self.data._repr_html_()  # type: ignore

    def __len__(self) -> int:
        return self.data.shape[0]  # type: ignore

    def __getitem__(self, index: Any) -> Any:
        return self.data.iloc[index]

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        my_table = Table(**self.table_options)

        columns_options = self.columns_options
        if columns_options is None:
            columns_options = dict(
                (column, dict()) for column in self.data.columns
            )

        for column, opts in columns_options.items():
            my_table.add_column(column, **opts)

        data = self.data[: self.max_rows]

        for _, elt in data.iterrows():
            my_table.add_row(
                *list(
                    format(
                        elt.get(column, ""),
                        ".4g"
                        if isinstance(elt.get(column, ""), Real)
                        and not isinstance(elt.get(column, ""), Integral)
                        else "",
                    )
                    for column in columns_options
                )
            )

        yield my_table

        delta = self.data.shape[0] - self.max_rows
        if delta > 0:
            yield f"... ({delta} more entries)"


class PointMixin:
    latitude: tt.angle
    longitude: tt.angle

    @property
    def latlon(self) -> tuple[float, float]:
        """A tuple for latitude and longitude, in degrees, in this order."""
        return (self.latitude, self.longitude)
