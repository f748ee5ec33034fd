"""Visibility classification of a declaration's modifier set."""

from enum import Enum

from clean_code_conventions.domain.declarations import ModifierKind, ModifierSet


class Visibility(Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    INTERNAL = "internal"
    PROTECTED = "protected"


# Checked in this order when a declaration combines several, e.g. `protected internal`.
_ACCESS_MODIFIERS: tuple[tuple[ModifierKind, Visibility], ...] = (
    (ModifierKind.PUBLIC, Visibility.PUBLIC),
    (ModifierKind.INTERNAL, Visibility.INTERNAL),
    (ModifierKind.PROTECTED, Visibility.PROTECTED),
)


class VisibilityClassifier:
    """Derives the effective visibility of a declaration from its modifiers."""

    @staticmethod
    def classify(modifiers: ModifierSet) -> Visibility:
        """
        Return the effective visibility.

        An explicit `private` wins. Declarations without any access modifier are
        private as well, so unmarked members are checked exactly like `private` ones.
        """
        if ModifierKind.PRIVATE in modifiers:
            return Visibility.PRIVATE
        for kind, visibility in _ACCESS_MODIFIERS:
            if kind in modifiers:
                return visibility
        return Visibility.PRIVATE

    @staticmethod
    def is_private(modifiers: ModifierSet) -> bool:
        return VisibilityClassifier.classify(modifiers) is Visibility.PRIVATE
