"""
Comparator Configuration — конфигурация natural compare

Immutable Pydantic модель {case_sensitive, collator}. Невалидная
конфигурация отклоняется при создании, а не при первом сравнении.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from natorder.collation.collator import TextCollator
from natorder.core.natural_compare import compare_natural


class ComparatorConfig(BaseModel):
    """
    Конфигурация natural compare.

    Immutable модель (frozen=True): один экземпляр безопасно разделяется
    между потоками и компараторами.

    При заданном collator флаг case_sensitive не используется:
    правила регистра определяет collator.
    """

    case_sensitive: bool = Field(
        default=True, description="Учитывать регистр при сравнении без collator"
    )
    collator: Optional[Any] = Field(
        default=None, description="TextCollator для текстовых subword'ов (None → code point)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("collator")
    @classmethod
    def validate_collator(cls, v: Any) -> Any:
        """Collator обязан реализовать протокол TextCollator."""
        if v is not None and not isinstance(v, TextCollator):
            raise ValueError(
                f"collator must implement TextCollator.compare(a, b), got {type(v).__name__}"
            )
        return v

    @property
    def uses_collator(self) -> bool:
        return self.collator is not None

    def compare(self, s: str, t: str) -> int:
        """
        Natural compare с этой конфигурацией.

        Returns:
            < 0, 0 или > 0
        """
        return compare_natural(s, t, self.case_sensitive, self.collator)
