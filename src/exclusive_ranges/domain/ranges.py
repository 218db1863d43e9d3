"""
Ranges — Интервалы с исключённой нижней границей

Три независимых value-типа:
- LowerExclusiveRange              (start, +inf)
- LowerExclusiveUpperExclusiveRange (start, end)
- LowerExclusiveUpperInclusiveRange (start, end]

Generic по типу элемента T; от T требуются только == и < / <=.
Порядок границ при создании НЕ проверяется: end <= start задаёт пустой
интервал, contains() для него всегда False.

Поля публичные и изменяемые (модели не frozen), поэтому экземпляры
не хешируются.
"""

from typing import Any, Generic, Tuple, TypeVar

from pydantic import BaseModel, Field, model_validator

from exclusive_ranges.domain.bounds import Bound


T = TypeVar("T")


# =============================================================================
# BASE
# =============================================================================


class _ExclusiveRangeModel(BaseModel):
    """
    Общая реализация для всех трёх типов.

    Равенство (BaseModel.__eq__) и порядок структурные: сравниваются поля
    в порядке объявления, только между экземплярами одного типа.
    """

    model_config = {"extra": "forbid", "arbitrary_types_allowed": True}

    @model_validator(mode="before")
    @classmethod
    def accept_sequence_form(cls, data: Any) -> Any:
        """
        Десериализация из последовательности: [start] или [start, end].
        """
        if isinstance(data, (list, tuple)):
            names = list(cls.model_fields)
            if len(data) != len(names):
                raise ValueError(
                    f"invalid length {len(data)}, expected {len(names)} "
                    f"element(s) ({', '.join(names)})"
                )
            return dict(zip(names, data))
        return data

    def _field_values(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def _same_type(self, other: Any) -> bool:
        if not isinstance(other, BaseModel):
            return False
        self_type = self.__pydantic_generic_metadata__["origin"] or type(self)
        other_type = other.__pydantic_generic_metadata__["origin"] or type(other)
        return self_type is other_type

    def __lt__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self._field_values() < other._field_values()

    def __le__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self._field_values() <= other._field_values()

    def __gt__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self._field_values() > other._field_values()

    def __ge__(self, other: Any) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self._field_values() >= other._field_values()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)


# =============================================================================
# RANGE MODELS
# =============================================================================


class LowerExclusiveRange(_ExclusiveRangeModel, Generic[T]):
    """
    Интервал, ограниченный только снизу, граница исключена.

    Содержит все значения x > start.
    """

    start: T = Field(..., description="Нижняя граница (исключена)")

    def contains(self, value: T) -> bool:
        """
        Проверка принадлежности значения интервалу.

        Args:
            value: Проверяемое значение

        Returns:
            True если value > start (сам start не входит)
        """
        return self.start < value

    def start_bound(self) -> Bound:
        return Bound.excluded(self.start)

    def end_bound(self) -> Bound:
        return Bound.unbounded()

    def __str__(self) -> str:
        return f"({self.start}..)"


class LowerExclusiveUpperExclusiveRange(_ExclusiveRangeModel, Generic[T]):
    """
    Интервал, ограниченный снизу и сверху, обе границы исключены.

    Содержит все значения start < x < end. Пуст, если end <= start.
    """

    start: T = Field(..., description="Нижняя граница (исключена)")
    end: T = Field(..., description="Верхняя граница (исключена)")

    def contains(self, value: T) -> bool:
        """
        Проверка принадлежности значения интервалу.

        Args:
            value: Проверяемое значение

        Returns:
            True если start < value < end
        """
        return self.start < value and value < self.end

    def start_bound(self) -> Bound:
        return Bound.excluded(self.start)

    def end_bound(self) -> Bound:
        return Bound.excluded(self.end)

    def __str__(self) -> str:
        return f"({self.start}..{self.end})"


class LowerExclusiveUpperInclusiveRange(_ExclusiveRangeModel, Generic[T]):
    """
    Интервал с исключённой нижней и включённой верхней границей.

    Содержит все значения start < x <= end. Пуст, если end <= start.
    """

    start: T = Field(..., description="Нижняя граница (исключена)")
    end: T = Field(..., description="Верхняя граница (включена)")

    def contains(self, value: T) -> bool:
        # end <= start: ни одно значение не проходит обе проверки
        return self.start < value and value <= self.end

    def start_bound(self) -> Bound:
        return Bound.excluded(self.start)

    def end_bound(self) -> Bound:
        return Bound.included(self.end)

    def __str__(self) -> str:
        return f"({self.start}..={self.end})"
