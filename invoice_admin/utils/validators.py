"""Form validation utilities."""
from typing import Any, Mapping

from pydantic import ValidationError

from ..schemas.actions import ValidationResult
from ..schemas.invoice import InvoiceForm

# Model field name -> form field name
_FORM_FIELD_NAMES = {
    name: field.alias or name for name, field in InvoiceForm.model_fields.items()
}


def flatten_field_errors(error: ValidationError) -> dict[str, list[str]]:
    """
    Group validation error messages by form field.

    Args:
        error: Pydantic validation error

    Returns:
        Mapping of form field name to its messages, in the order raised
    """
    field_errors: dict[str, list[str]] = {}
    for item in error.errors():
        if not item["loc"]:
            continue
        name = str(item["loc"][0])
        name = _FORM_FIELD_NAMES.get(name, name)
        field_errors.setdefault(name, []).append(item["msg"])
    return field_errors


def validate_invoice_form(form_data: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a submitted invoice form.

    Args:
        form_data: Raw form fields (string values)

    Returns:
        ValidationResult with the coerced fields, or the per-field errors
    """
    try:
        data = InvoiceForm.model_validate(dict(form_data))
    except ValidationError as e:
        return ValidationResult(success=False, field_errors=flatten_field_errors(e))

    return ValidationResult(success=True, data=data)
