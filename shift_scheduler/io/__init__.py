"""Record conversion at the boundary with the storage layer."""

from .records import (
    document_to_record,
    employee_from_record,
    employees_from_records,
    result_to_record,
    template_from_record,
    templates_from_records,
)

__all__ = [
    "document_to_record",
    "employee_from_record",
    "employees_from_records",
    "result_to_record",
    "template_from_record",
    "templates_from_records",
]
