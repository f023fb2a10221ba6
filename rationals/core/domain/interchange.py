"""
Interchange Payloads — объектные формы interchange-представления

Immutable Pydantic модели для JSON-объектов, которыми движок
обменивается с внешними системами. Полная совместимость с
JSON Schema (rationals/core/contracts/schema/rational_number.json).

Скалярные формы (целое, float, строка) моделей не требуют и
разбираются напрямую в codec.interchange.
"""

from typing import Literal

from pydantic import BaseModel, Field, StrictInt


# =============================================================================
# FRACTION
# =============================================================================


class FractionPayload(BaseModel):
    """
    Дробь numerator/denominator.

    Каноническая форма экспорта: {"numerator": n, "denominator": d}.
    Знаменатель 1 допустим (так экспортируются целые).
    """

    numerator: StrictInt = Field(..., description="Числитель со знаком значения")
    denominator: StrictInt = Field(..., ge=1, description="Знаменатель (>= 1)")

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# MIXED
# =============================================================================


class MixedPayload(BaseModel):
    """Сумма целого и дроби строго между нулём и единицей."""

    integer: StrictInt = Field(..., description="Целая часть")
    fraction_numerator: StrictInt = Field(
        ..., ge=1, description="Числитель дробной части (> 0)"
    )
    fraction_denominator: StrictInt = Field(
        ..., ge=2, description="Знаменатель дробной части (> числителя)"
    )

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# INFINITY
# =============================================================================


class InfinityPayload(BaseModel):
    """Бесконечность со знаком: {"infinity": "+inf"} или {"infinity": "-inf"}."""

    infinity: Literal["+inf", "-inf"] = Field(..., description="Токен бесконечности")

    model_config = {"frozen": True, "extra": "forbid"}
