from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..common.validators import field_errors
from ..core.constants import ADDRESS_MIN_LENGTH, FULL_NAME_MIN_LENGTH
from ..core.enums import Department
from ..core.exceptions import ValidationError


class EmployeeForm(BaseModel):
    """Fields accepted when creating an employee."""

    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(min_length=FULL_NAME_MIN_LENGTH)
    address: str = Field(min_length=ADDRESS_MIN_LENGTH)
    department: Department


def parse_employee_form(*, full_name, address, department) -> EmployeeForm:
    try:
        return EmployeeForm(full_name=full_name, address=address, department=department)
    except PydanticValidationError as e:
        raise ValidationError("Invalid form data. Please check the fields and try again.", field_errors(e))
