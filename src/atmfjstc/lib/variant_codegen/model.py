from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass(frozen=True)
class VariantSlot:
    """
    One position in a variant list. A slot has a primary identifier and, optionally, a number of aliases that share
    its index and height but get their own label/key.
    """
    primary: str
    aliases: Tuple[str, ...] = ()

    def identifiers(self) -> Tuple[str, ...]:
        return (self.primary, *self.aliases)


@dataclass(frozen=True)
class VariantList:
    slots: Tuple[VariantSlot, ...] = ()

    @staticmethod
    def of(*identifiers: str) -> 'VariantList':
        """Convenience function for building an alias-free list"""
        return VariantList(tuple(VariantSlot(identifier) for identifier in identifiers))

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self):
        return iter(self.slots)

    def primaries(self) -> Tuple[str, ...]:
        return tuple(slot.primary for slot in self.slots)

    def identifiers(self) -> Tuple[str, ...]:
        """All identifiers in declaration order, each primary followed by its aliases"""
        return tuple(identifier for slot in self.slots for identifier in slot.identifiers())

    def concat(self, other: 'VariantList') -> 'VariantList':
        return VariantList(self.slots + other.slots)


@dataclass(frozen=True)
class SectionSpec:
    name: str
    single: bool = False
    "Whether the section must contain exactly one slot"


@dataclass(frozen=True)
class Section:
    name: str
    variants: VariantList


@dataclass(frozen=True)
class SectionedDeclaration:
    sections: Tuple[Section, ...]

    def __getitem__(self, name: str) -> VariantList:
        section = self.get(name)
        if section is None:
            raise KeyError(name)

        return section

    def get(self, name: str) -> Optional[VariantList]:
        for section in self.sections:
            if section.name == name:
                return section.variants

        return None

    def identifiers(self) -> Tuple[str, ...]:
        return tuple(identifier for section in self.sections for identifier in section.variants.identifiers())


@dataclass(frozen=True)
class EnumDeclaration:
    name: str
    variants: VariantList

    def __len__(self) -> int:
        return len(self.variants)
