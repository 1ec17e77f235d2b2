from dataclasses import dataclass, field
from enum import Enum


class Quantity(Enum):
    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @classmethod
    def from_suffix(cls, key: str) -> "Quantity | None":
        lowered = key.lower()
        for quantity in cls:
            if len(key) > len(quantity.value) and lowered.endswith(quantity.value):
                return quantity
        return None

    @property
    def case_label(self) -> str | None:
        """Literal matched against ``count.toString()``; ``other`` is the default branch."""
        return _CASE_LABELS.get(self)

    @classmethod
    def from_case_label(cls, text: str) -> "Quantity":
        for quantity, label in _CASE_LABELS.items():
            if label == text:
                return quantity
        raise ValueError(f"This value {text} is not valid.")


_CASE_LABELS = {
    Quantity.ZERO: "0",
    Quantity.ONE: "1",
    Quantity.TWO: "2",
    Quantity.FEW: "few",
    Quantity.MANY: "many",
}


@dataclass
class LocaleBundle:
    locale: str
    entries: dict[str, str] = field(default_factory=dict)


@dataclass
class PluralFamily:
    base_id: str
    values: dict[Quantity, str] = field(default_factory=dict)

    @property
    def present_quantities(self) -> set[Quantity]:
        return set(self.values)

    @property
    def method_name(self) -> str:
        # items_one / items_other -> items
        if self.base_id.endswith("_"):
            return self.base_id[:-1]
        return self.base_id

    @property
    def is_valid(self) -> bool:
        return Quantity.OTHER in self.values


@dataclass
class ClassifiedKeySet:
    plain: list[str] = field(default_factory=list)
    parametrized: list[str] = field(default_factory=list)
    plurals: list[PluralFamily] = field(default_factory=list)

    def sorted(self) -> "ClassifiedKeySet":
        return ClassifiedKeySet(
            sorted(self.plain),
            sorted(self.parametrized),
            sorted(self.plurals, key=lambda family: family.base_id),
        )

    def member_names(self) -> set[str]:
        names = set(self.plain) | set(self.parametrized)
        names.update(family.method_name for family in self.plurals)
        return names
