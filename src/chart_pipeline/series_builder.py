"""
SeriesBuilder - aligned category labels and numeric series.
"""

from datetime import date, datetime, time
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from src.chart_pipeline.field_resolver import FieldValueResolver, coerce_numeric, is_missing
from src.shared_lib.models.schema import SeriesSpec
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


def stringify_category(value: Any) -> str:
    """
    Render a category cell as a label.

    Missing values give "", integral floats drop the ".0" (so 2015.0 from a
    pandas column reads "2015"), bools read "true"/"false" and temporal
    values use ISO-8601.
    """
    if is_missing(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


class SeriesBuilder:
    """
    Builds categories and one series per value field.

    Guarantees: series order equals ``value_fields`` order and every series
    has exactly one value per category. Cells that are not numeric plot as 0.

    Example:
        >>> builder = SeriesBuilder()
        >>> categories, series = builder.build(
        ...     rows=[{"region": "East", "sales": "100"}],
        ...     category_field="region",
        ...     value_fields=["sales"],
        ... )
        >>> categories, series[0].data
        (['East'], [100.0])
    """

    def __init__(self, resolver: Optional[FieldValueResolver] = None):
        self.resolver = resolver or FieldValueResolver()

    def build_categories(
        self, rows: Sequence[Mapping[str, Any]], category_field: str
    ) -> List[str]:
        return [
            stringify_category(self.resolver.resolve(row, category_field))
            for row in rows
        ]

    def build_data(self, rows: Sequence[Mapping[str, Any]], value_field: str) -> List[float]:
        data: List[float] = []
        unparseable = 0
        for row in rows:
            number = coerce_numeric(self.resolver.resolve(row, value_field))
            if number is None:
                # Unparseable cells plot as zero
                unparseable += 1
                number = 0.0
            data.append(number)

        if unparseable:
            logger.debug(
                f"Field '{value_field}': {unparseable} of {len(data)} values "
                f"are not numeric and were plotted as 0"
            )
        return data

    def build(
        self,
        rows: Sequence[Mapping[str, Any]],
        category_field: str,
        value_fields: Sequence[str],
        display_names: Optional[Dict[str, str]] = None,
    ) -> Tuple[List[str], List[SeriesSpec]]:
        """
        Build aligned categories and series.

        Args:
            rows: Query result rows
            category_field: Field used for the category labels
            value_fields: Fields plotted as series, in order
            display_names: Optional field -> display name overrides

        Returns:
            Tuple (categories, series)
        """
        display_names = display_names or {}
        categories = self.build_categories(rows, category_field)

        series = [
            SeriesSpec(
                name=display_names.get(value_field) or value_field,
                original_name=value_field,
                data=self.build_data(rows, value_field),
            )
            for value_field in value_fields
        ]

        logger.debug(
            f"Built {len(series)} series over {len(categories)} categories "
            f"(category field '{category_field}')"
        )
        return categories, series
