"""
Pydantic schemas for the report chart pipeline.

This module defines the data structures for:
- Input query results (QueryResult)
- Persisted chart configuration (ChartConfig and its parts)
- Pipeline output consumed by renderers (ChartSpec, TableSpec)

Every model accepts and produces the camelCase payloads exchanged with the
reporting backend; Python code uses the snake_case attribute names.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Literal, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.shared_lib.core.settings import DEFAULT_CHART_TYPE


# ============================================================================
# CHART TYPES
# ============================================================================

ChartTypeLiteral = Literal["bar", "line", "pie", "table"]

# Chart types that go through classification and series building
PlotChartTypeLiteral = Literal["bar", "line", "pie"]


class _PayloadModel(BaseModel):
    """Base model for immutable camelCase payloads."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> Dict[str, Any]:
        """Dump the model using the camelCase wire names."""
        return self.model_dump(by_alias=True)


def _none_to_empty_dict(value: Any) -> Any:
    """Treat a missing/null mapping in a stored payload as empty."""
    return {} if value is None else value


# ============================================================================
# QUERY RESULT (input)
# ============================================================================


class QueryResult(_PayloadModel):
    """Tabular result of one report query, read-only once produced."""

    columns: List[str] = Field(default_factory=list, description="Ordered column names")

    rows: List[Dict[str, Any]] = Field(
        default_factory=list, description="Ordered rows, each a column -> value mapping"
    )

    executed_at: Optional[datetime] = Field(
        default=None, alias="executedAt", description="When the query ran"
    )

    execution_time_ms: float = Field(
        default=0, alias="executionTimeMs", description="Query execution time"
    )

    row_count: int = Field(default=0, alias="rowCount", description="Number of rows")

    @model_validator(mode="before")
    @classmethod
    def fill_derived_fields(cls, data: Any) -> Any:
        """Derive columns and rowCount when the backend omits them."""

        if not isinstance(data, dict):
            return data

        data = dict(data)
        rows = data.get("rows") or []

        if not data.get("columns") and rows and isinstance(rows[0], dict):
            data["columns"] = [str(key) for key in rows[0].keys()]

        if not data.get("rowCount") and not data.get("row_count"):
            data["rowCount"] = len(rows)

        if data.get("executionTimeMs") is None and data.get("execution_time_ms") is None:
            data["executionTimeMs"] = 0

        return data

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "QueryResult":
        """
        Build a QueryResult from a backend payload.

        Accepts the flat shape ``{columns, rows, rowCount, executionTimeMs}``
        and the cached-result envelope ``{executedAt, data: {...}, error}``.

        Raises:
            ValueError: If the envelope carries an execution error
            pydantic.ValidationError: If the payload is malformed
        """
        if payload.get("error"):
            raise ValueError(f"Query result carries an error: {payload['error']}")

        data = payload.get("data")
        if isinstance(data, dict):
            merged = dict(data)
            if payload.get("executedAt") and not merged.get("executedAt"):
                merged["executedAt"] = payload["executedAt"]
            return cls.model_validate(merged)

        return cls.model_validate(payload)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        executed_at: Optional[datetime] = None,
        execution_time_ms: float = 0,
    ) -> "QueryResult":
        """Build a QueryResult from a DataFrame, mapping NaN/NaT to None."""

        clean = df.astype(object).where(pd.notna(df), None)
        clean.columns = [str(column) for column in clean.columns]
        return cls(
            columns=list(clean.columns),
            rows=clean.to_dict(orient="records"),
            executed_at=executed_at,
            execution_time_ms=execution_time_ms,
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows as a DataFrame in column order."""
        return pd.DataFrame(list(self.rows), columns=list(self.columns))


# ============================================================================
# CHART CONFIGURATION (persisted by an external store)
# ============================================================================


class AxisLabels(_PayloadModel):
    """Axis titles chosen by the user."""

    x: str = Field(default="", description="Category axis label")
    y: str = Field(default="", description="Value axis label")

    @field_validator("x", "y", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> str:
        """Missing labels become empty strings."""
        if value is None:
            return ""
        return str(value)


class DisplayOptions(_PayloadModel):
    """Presentation toggles; ``use_separate_scale`` is derived, never user-set."""

    show_values_on_bars: bool = Field(default=False, alias="showValuesOnBars")

    rotate_category_labels: bool = Field(default=False, alias="rotateCategoryLabels")

    use_separate_scale: bool = Field(default=False, alias="useSeparateScale")


class ChartConfig(_PayloadModel):
    """Saved chart configuration of one report."""

    selected_fields: Dict[str, bool] = Field(
        default_factory=dict,
        alias="selectedFields",
        description="Column -> selected flag, insertion order is display order",
    )

    chart_type: ChartTypeLiteral = Field(default=DEFAULT_CHART_TYPE, alias="chartType")

    axis_labels: AxisLabels = Field(default_factory=AxisLabels, alias="axisLabels")

    display_options: DisplayOptions = Field(
        default_factory=DisplayOptions, alias="displayOptions"
    )

    series_formats: Dict[str, str] = Field(
        default_factory=dict,
        alias="seriesFormats",
        description='Field -> "<type>[:<decimals>]"',
    )

    series_display_names: Dict[str, str] = Field(
        default_factory=dict, alias="seriesDisplayNames"
    )

    @field_validator(
        "selected_fields",
        "axis_labels",
        "display_options",
        "series_formats",
        "series_display_names",
        mode="before",
    )
    @classmethod
    def null_mapping_to_empty(cls, value: Any) -> Any:
        """Stored configs may carry null for sections never edited."""
        return _none_to_empty_dict(value)

    @field_validator("chart_type", mode="before")
    @classmethod
    def default_chart_type(cls, value: Any) -> Any:
        """A null/empty stored chart type falls back to the default type."""
        return value or DEFAULT_CHART_TYPE

    @classmethod
    def initial_for_columns(cls, columns: Iterable[str]) -> "ChartConfig":
        """
        Default configuration for a report without a saved config.

        Every column is selected, the chart is a bar chart and values are shown
        on the bars.
        """
        return cls(
            selected_fields={str(column): True for column in columns},
            chart_type="bar",
            display_options=DisplayOptions(
                show_values_on_bars=True, rotate_category_labels=False
            ),
        )

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> "ChartConfig":
        """Parse a stored chart config; missing keys take their defaults."""
        return cls.model_validate(payload or {})

    def selected_field_names(self) -> List[str]:
        """Selected columns in display order."""
        return [field for field, selected in self.selected_fields.items() if selected]

    def with_updates(self, **changes: Any) -> "ChartConfig":
        """Return a new config with *changes* applied (snake_case field names)."""
        payload = self.model_dump()
        payload.update(changes)
        return type(self).model_validate(payload)

    def to_payload(self) -> Dict[str, Any]:
        """Complete document for a full-replace write to the config store."""
        payload = super().to_payload()
        payload["displayOptions"].pop("useSeparateScale", None)
        return payload


# ============================================================================
# PIPELINE OUTPUT (consumed by renderers)
# ============================================================================


class SeriesSpec(_PayloadModel):
    """One named numeric series aligned to the chart categories."""

    name: str = Field(..., description="Display name (override or raw field)")

    original_name: str = Field(
        ..., alias="originalName", description="Raw field name, used for format lookup"
    )

    data: List[float] = Field(default_factory=list)


class ChartSpec(_PayloadModel):
    """Renderer-ready description of a bar, line or pie chart."""

    type: PlotChartTypeLiteral

    categories: List[str] = Field(default_factory=list)

    series: List[SeriesSpec] = Field(default_factory=list)

    x_label: str = Field(default="", alias="xLabel")

    y_label: str = Field(default="", alias="yLabel")

    series_formats: Dict[str, str] = Field(
        default_factory=dict,
        alias="seriesFormats",
        description="Series display name -> format string",
    )

    display_options: DisplayOptions = Field(
        default_factory=DisplayOptions, alias="displayOptions"
    )

    @model_validator(mode="after")
    def validate_alignment(self) -> "ChartSpec":
        """Every series must carry exactly one value per category."""

        expected = len(self.categories)
        for series in self.series:
            if len(series.data) != expected:
                raise ValueError(
                    f"Series '{series.name}' has {len(series.data)} values, "
                    f"expected {expected} (one per category)"
                )
        return self

    def format_for(self, series: SeriesSpec) -> Optional[str]:
        """Format string configured for *series*, if any."""
        return self.series_formats.get(series.name)


class TableSpec(_PayloadModel):
    """Table output: selected columns plus the unmodified rows."""

    type: Literal["table"] = "table"

    columns: List[str] = Field(default_factory=list)

    rows: List[Dict[str, Any]] = Field(default_factory=list)


RenderableSpec = Union[ChartSpec, TableSpec]


__all__ = [
    "ChartTypeLiteral",
    "PlotChartTypeLiteral",
    "QueryResult",
    "AxisLabels",
    "DisplayOptions",
    "ChartConfig",
    "SeriesSpec",
    "ChartSpec",
    "TableSpec",
    "RenderableSpec",
]
