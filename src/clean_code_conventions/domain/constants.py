"""
Rule catalogue constants: codes, symbols, categories and message templates.
"""

from clean_code_conventions.domain.registry_types import RuleRegistryEntry

TOOL_NAME: str = "clean-code-conventions"
RULE_PREFIX: str = "conventions."

# Stable rule identifiers
NO_PRIVATE_MODIFIER: str = "NoPrivateModifier"
PRIVATE_CAMEL_CASE: str = "PrivateCamelCase"
PUBLIC_PASCAL_CASE: str = "PublicPascalCase"
NO_UNDERSCORE: str = "NoUnderscore"

CATEGORY_DESIGN: str = "Design"
CATEGORY_NAMING: str = "Naming"

SEVERITY_WARNING: str = "warning"
SEVERITY_ERROR: str = "error"
SEVERITY_INFO: str = "info"
SEVERITIES: frozenset[str] = frozenset({SEVERITY_INFO, SEVERITY_WARNING, SEVERITY_ERROR})

CAMEL_CASE_PATTERN: str = r"^[a-z][a-zA-Z0-9]*$"
PASCAL_CASE_PATTERN: str = r"^[A-Z][a-zA-Z0-9]*$"

REMOVE_PRIVATE_TITLE: str = "Remove 'private' modifier"
REMOVE_PRIVATE_EQUIVALENCE_KEY: str = "RemovePrivateModifier"

# Built-in catalogue; rule_registry.yaml entries take precedence.
DEFAULT_RULES: dict[str, RuleRegistryEntry] = {
    "CC0001": {
        "symbol": NO_PRIVATE_MODIFIER,
        "display_name": "Use of 'private' is not allowed",
        "message_template": "The access modifier 'private' should not be used",
        "category": CATEGORY_DESIGN,
        "severity": SEVERITY_WARNING,
        "fixable": True,
        "manual_instructions": "Delete the 'private' keyword; members are private by default.",
    },
    "CC0002": {
        "symbol": PRIVATE_CAMEL_CASE,
        "display_name": "Private members must be camelCase",
        "message_template": "The private member '{0}' should be written in camelCase",
        "category": CATEGORY_NAMING,
        "severity": SEVERITY_WARNING,
        "fixable": False,
        "manual_instructions": "Rename the member so it starts with a lowercase letter "
        "followed only by letters and digits.",
    },
    "CC0003": {
        "symbol": PUBLIC_PASCAL_CASE,
        "display_name": "Non-private members must be PascalCase",
        "message_template": "The member '{0}' should be written in PascalCase",
        "category": CATEGORY_NAMING,
        "severity": SEVERITY_WARNING,
        "fixable": False,
        "manual_instructions": "Rename the member so it starts with an uppercase letter "
        "followed only by letters and digits.",
    },
    "CC0004": {
        "symbol": NO_UNDERSCORE,
        "display_name": "Underscores in names are not allowed",
        "message_template": "The name '{0}' contains an underscore and should be renamed",
        "category": CATEGORY_NAMING,
        "severity": SEVERITY_WARNING,
        "fixable": False,
        "manual_instructions": "Remove the underscore and join the words with casing instead.",
    },
}
