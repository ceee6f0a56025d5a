"""
CSV export of prioritized projects.

Headers are the canonical camelCase field names. Evidence links are flattened
to a "; "-joined list of URIs; any value containing a comma, quote or newline
is quoted by the csv module.
"""

import csv
import io
from typing import Any, Dict, List

from .models.schemas import Project

EXPORT_COLUMNS = [
    field.alias or name for name, field in Project.model_fields.items()
]


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "; ".join(
            item.get("uri", "") if isinstance(item, dict) else str(item) for item in value
        )
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def project_to_row(project: Project) -> Dict[str, str]:
    """Flatten a project into a column -> text row"""
    data = project.model_dump(by_alias=True, mode="json")
    return {column: _format_value(data.get(column)) for column in EXPORT_COLUMNS}


def export_projects_csv(projects: List[Project]) -> str:
    """Serialize projects to CSV text (header row first, \\n line endings)"""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=EXPORT_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for project in projects:
        writer.writerow(project_to_row(project))
    return buffer.getvalue()
