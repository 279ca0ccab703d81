"""
LayoutOptions — Модель параметров раскладки текста

Immutable Pydantic модель, объединяющая параметры Reflow Engine.
Некорректные параметры (отрицательные ширины и длины) непредставимы:
они отклоняются при создании модели, а не во время раскладки.

Порядок применения (apply_layout):
    dedent → word_wrap(width) → indent(indent) → truncate(max_length, ellipsis)
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from textcore.algorithms.reflow import (
    DEFAULT_ELLIPSIS,
    dedent,
    indent,
    truncate,
    word_wrap,
)

logger = logging.getLogger(__name__)


# =============================================================================
# MODELS
# =============================================================================


class LayoutOptions(BaseModel):
    """
    Параметры раскладки текстового блока.
    """

    dedent: bool = Field(
        default=False, description="Снять общий отступ перед переносом"
    )
    width: int = Field(
        default=0, ge=0, description="Ширина переноса (0 — без переноса)"
    )
    indent: int = Field(default=0, ge=0, description="Отступ каждой строки (пробелы)")
    max_length: Optional[int] = Field(
        default=None, ge=0, description="Бюджет длины результата (None — без обрезки)"
    )
    ellipsis: str = Field(
        default=DEFAULT_ELLIPSIS, description="Маркер обрезки при max_length"
    )

    model_config = {"frozen": True}


# =============================================================================
# APPLY
# =============================================================================


def apply_layout(text: str, options: LayoutOptions) -> str:
    """
    Раскладка текста согласно LayoutOptions.

    Args:
        text: Исходный текст
        options: Параметры раскладки

    Returns:
        Текст после dedent / word_wrap / indent / truncate

    Examples:
        >>> apply_layout("  Hello World", LayoutOptions(dedent=True, width=8, indent=2))
        '  Hello\\n  World'
    """
    result = text

    if options.dedent:
        result = dedent(result)

    result = word_wrap(result, options.width)
    result = indent(result, options.indent)

    if options.max_length is not None:
        result = truncate(result, options.max_length, options.ellipsis)

    logger.debug(
        "Layout applied",
        extra={"input_length": len(text), "output_length": len(result)},
    )

    return result
