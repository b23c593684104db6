"""
Typed field updates for `EmployeeStore.update`.

Each updatable attribute has its own variant carrying a strictly typed value,
so an unknown field can not be expressed and a value of the wrong shape is
rejected when the variant is built. Range rules run in `apply`, against the
same checks used on create.

    store.update(1001, SalaryUpdate(value=82_000))
    store.update(1001, "salary", 82_000)  # resolved through field_update()
"""

from __future__ import annotations

from typing import AbstractSet, Any, ClassVar, Dict, Tuple, Type

from pydantic import BaseModel, ValidationError

from employee_store.domain import validation
from employee_store.domain.errors import InvalidFieldError, InvalidValueError
from employee_store.domain.models import Employee


class FieldUpdate(BaseModel):
    """Base class for one-attribute updates."""

    attribute: ClassVar[str]
    aliases: ClassVar[Tuple[str, ...]] = ()

    model_config = {"frozen": True, "strict": True}

    def checked_value(self, valid_departments: AbstractSet[str]) -> Any:  # pragma: no cover - interface only
        raise NotImplementedError

    def apply(self, employee: Employee, valid_departments: AbstractSet[str]) -> Employee:
        """Return a copy of `employee` with the new value, or raise without side effects."""
        value = self.checked_value(valid_departments)
        return employee.model_copy(update={self.attribute: value})


class NameUpdate(FieldUpdate):
    attribute: ClassVar[str] = "name"
    value: str

    def checked_value(self, valid_departments: AbstractSet[str]) -> str:
        return validation.check_name(self.value)


class DepartmentUpdate(FieldUpdate):
    attribute: ClassVar[str] = "department"
    value: str

    def checked_value(self, valid_departments: AbstractSet[str]) -> str:
        return validation.check_department(self.value, valid_departments)


class SalaryUpdate(FieldUpdate):
    attribute: ClassVar[str] = "salary"
    value: float

    def checked_value(self, valid_departments: AbstractSet[str]) -> float:
        return validation.check_salary(self.value)


class PerformanceRatingUpdate(FieldUpdate):
    attribute: ClassVar[str] = "performance_rating"
    aliases: ClassVar[Tuple[str, ...]] = ("rating",)
    value: float

    def checked_value(self, valid_departments: AbstractSet[str]) -> float:
        return validation.check_rating(self.value)


class YearsOfExperienceUpdate(FieldUpdate):
    attribute: ClassVar[str] = "years_of_experience"
    aliases: ClassVar[Tuple[str, ...]] = ("experience",)
    value: int

    def checked_value(self, valid_departments: AbstractSet[str]) -> int:
        return validation.check_experience(self.value)


class ActiveUpdate(FieldUpdate):
    attribute: ClassVar[str] = "active"
    aliases: ClassVar[Tuple[str, ...]] = ("is_active",)
    value: bool

    def checked_value(self, valid_departments: AbstractSet[str]) -> bool:
        return validation.check_active(self.value)


UPDATE_TYPES: Tuple[Type[FieldUpdate], ...] = (
    NameUpdate,
    DepartmentUpdate,
    SalaryUpdate,
    PerformanceRatingUpdate,
    YearsOfExperienceUpdate,
    ActiveUpdate,
)


def _normalize(name: str) -> str:
    # "performanceRating", "performance_rating" and "PERFORMANCE-RATING" are one field
    return "".join(ch for ch in name.lower() if ch.isalnum())


def _registry() -> Dict[str, Type[FieldUpdate]]:
    registry: Dict[str, Type[FieldUpdate]] = {}
    for update_type in UPDATE_TYPES:
        for name in (update_type.attribute, *update_type.aliases):
            registry[_normalize(name)] = update_type
    return registry


_REGISTRY = _registry()


def updatable_fields() -> Tuple[str, ...]:
    return tuple(update_type.attribute for update_type in UPDATE_TYPES)


def field_update(field: str, value: Any) -> FieldUpdate:
    """
    Build the update variant for a field name.

    Raises
    ------
    InvalidFieldError
        If `field` names no updatable attribute (the id is never updatable).
    InvalidValueError
        If `value` has the wrong type for the field.
    """
    if not isinstance(field, str):
        raise InvalidFieldError(field, updatable_fields())
    update_type = _REGISTRY.get(_normalize(field))
    if update_type is None:
        raise InvalidFieldError(field, updatable_fields())
    try:
        return update_type(value=value)
    except ValidationError as exc:
        raise InvalidValueError(
            update_type.attribute,
            f"Wrong type for {update_type.attribute}: got {type(value).__name__}",
        ) from exc


__all__ = [
    "FieldUpdate",
    "NameUpdate",
    "DepartmentUpdate",
    "SalaryUpdate",
    "PerformanceRatingUpdate",
    "YearsOfExperienceUpdate",
    "ActiveUpdate",
    "UPDATE_TYPES",
    "field_update",
    "updatable_fields",
]
