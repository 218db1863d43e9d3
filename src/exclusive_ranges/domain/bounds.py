"""
Bound — Описание одной границы интервала

Модель границы (included / excluded / unbounded) и обобщённая проверка
принадлежности значения интервалу, заданному парой границ.

Immutable Pydantic модель.
"""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator


T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class BoundKind(str, Enum):
    """Тип границы интервала"""

    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


# =============================================================================
# BOUND MODEL
# =============================================================================


class Bound(BaseModel, Generic[T]):
    """
    Граница интервала.

    Для INCLUDED/EXCLUDED хранит значение границы, для UNBOUNDED значение
    отсутствует (None).

    Immutable модель (frozen=True).
    """

    kind: BoundKind = Field(..., description="Тип границы")
    value: Optional[T] = Field(default=None, description="Значение границы")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def validate_unbounded_value(self) -> "Bound[T]":
        """UNBOUNDED граница не может нести значение."""
        if self.kind == BoundKind.UNBOUNDED and self.value is not None:
            raise ValueError(f"unbounded bound cannot carry a value: {self.value!r}")
        return self

    @classmethod
    def included(cls, value: Any) -> "Bound":
        return cls(kind=BoundKind.INCLUDED, value=value)

    @classmethod
    def excluded(cls, value: Any) -> "Bound":
        return cls(kind=BoundKind.EXCLUDED, value=value)

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(kind=BoundKind.UNBOUNDED)

    def admits_above(self, value: Any) -> bool:
        """
        Проверка значения относительно нижней границы.

        Args:
            value: Проверяемое значение

        Returns:
            True если value лежит не ниже границы (строго выше для EXCLUDED)
        """
        if self.kind == BoundKind.EXCLUDED:
            return self.value < value
        if self.kind == BoundKind.INCLUDED:
            return self.value <= value
        return True

    def admits_below(self, value: Any) -> bool:
        """
        Проверка значения относительно верхней границы.

        Args:
            value: Проверяемое значение

        Returns:
            True если value лежит не выше границы (строго ниже для EXCLUDED)
        """
        if self.kind == BoundKind.EXCLUDED:
            return value < self.value
        if self.kind == BoundKind.INCLUDED:
            return value <= self.value
        return True


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def bounds_contain(start_bound: Bound, end_bound: Bound, value: Any) -> bool:
    """
    Принадлежность значения интервалу, заданному парой границ.

    Для перевёрнутых границ (end <= start) результат всегда False.

    Args:
        start_bound: Нижняя граница
        end_bound: Верхняя граница
        value: Проверяемое значение

    Returns:
        True если значение лежит внутри обеих границ
    """
    return start_bound.admits_above(value) and end_bound.admits_below(value)
