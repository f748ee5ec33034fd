from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    symbol: str
    display_name: str
    message_template: str
    category: str
    severity: str
    fixable: bool
    manual_instructions: str
    rule_id: str
