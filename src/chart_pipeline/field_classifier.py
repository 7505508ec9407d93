"""
Field role classification: one category field plus ordered value fields.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

from src.chart_pipeline.field_resolver import FieldValueResolver, coerce_numeric, is_missing
from src.shared_lib.core.settings import CLASSIFIER_SAMPLE_SIZE
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldRoles:
    """Outcome of classification; ``value_fields`` may be empty."""

    category_field: Optional[str]
    value_fields: List[str] = field(default_factory=list)


class FieldRoleClassifier:
    """
    Splits the selected fields into a category field and value fields.

    Each field is sampled on its first ``sample_size`` non-null values and is
    numeric when any sample is a number or parses as one. The first
    non-numeric field anchors the category axis; every other selected field,
    numeric or not, becomes a value field in selection order.

    When every field looks numeric, or there are no rows to sample, the first
    selected field is used as the category (its numbers double as labels).
    """

    def __init__(
        self,
        resolver: Optional[FieldValueResolver] = None,
        sample_size: int = CLASSIFIER_SAMPLE_SIZE,
    ):
        self.resolver = resolver or FieldValueResolver()
        self.sample_size = max(1, sample_size)

    def sample_values(self, rows: Sequence[Mapping[str, Any]], field_name: str) -> List[Any]:
        """First ``sample_size`` non-null resolved values of *field_name*."""
        samples: List[Any] = []
        for row in rows:
            value = self.resolver.resolve(row, field_name)
            if is_missing(value):
                continue
            samples.append(value)
            if len(samples) >= self.sample_size:
                break
        return samples

    def is_numeric_field(self, rows: Sequence[Mapping[str, Any]], field_name: str) -> bool:
        return any(
            coerce_numeric(sample) is not None
            for sample in self.sample_values(rows, field_name)
        )

    def classify(
        self, selected_fields: Sequence[str], rows: Sequence[Mapping[str, Any]]
    ) -> FieldRoles:
        """
        Classify *selected_fields* against *rows*.

        Args:
            selected_fields: Selected column names in display order
            rows: Query result rows

        Returns:
            FieldRoles; ``category_field`` is None only when nothing is selected
        """
        selected = list(selected_fields)
        if not selected:
            return FieldRoles(category_field=None)

        if not rows:
            logger.debug("No rows to sample, using first selected field as category")
            return FieldRoles(category_field=selected[0], value_fields=selected[1:])

        category_field: Optional[str] = None
        value_fields: List[str] = []

        for field_name in selected:
            if category_field is None and not self.is_numeric_field(rows, field_name):
                category_field = field_name
            else:
                value_fields.append(field_name)

        if category_field is None:
            logger.debug(
                f"All selected fields look numeric, using '{selected[0]}' as category"
            )
            return FieldRoles(category_field=selected[0], value_fields=selected[1:])

        logger.debug(f"Category field: '{category_field}', value fields: {value_fields}")
        return FieldRoles(category_field=category_field, value_fields=value_fields)
