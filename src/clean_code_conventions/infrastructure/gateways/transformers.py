"""Declaration transformers for code fixes."""

from clean_code_conventions.domain.declarations import Declaration, ModifierKind


class DeclarationTransformer:
    """
    Base transformer over a single declaration.

    Subclasses override leave_Declaration(original_node, updated_node) and return
    the replacement. Transformers never mutate their input; declarations are frozen.
    """

    def transform(self, declaration: Declaration) -> Declaration:
        return self.leave_Declaration(declaration, declaration)

    def leave_Declaration(self, original_node: Declaration, updated_node: Declaration) -> Declaration:
        return updated_node


class RemoveModifierTransformer(DeclarationTransformer):
    """
    Transformer to drop a modifier keyword from a declaration.

    Every occurrence of the modifier goes, each together with the whitespace that
    followed it. Leading trivia, the other modifiers and the name stay untouched.
    Choosing which declaration to transform is up to the caller.
    """

    def __init__(self, context: dict) -> None:
        self.modifier: ModifierKind = context["modifier"]

    def leave_Declaration(self, original_node: Declaration, updated_node: Declaration) -> Declaration:
        modifiers = updated_node.modifiers
        if self.modifier not in modifiers:
            return updated_node
        return updated_node.with_modifiers(modifiers.without(self.modifier))


def remove_modifier(declaration: Declaration, modifier: ModifierKind) -> Declaration:
    """Return `declaration` without `modifier`. Declarations lacking it come back unchanged."""
    return RemoveModifierTransformer({"modifier": modifier}).transform(declaration)
