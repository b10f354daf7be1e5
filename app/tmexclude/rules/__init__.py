"""Classification rules and skip paths.

This module provides the rule models, the rule file loader with its
first-run bootstrap, and the default rule text.
"""

from tmexclude.rules.defaults import DEFAULT_RULES_TEXT
from tmexclude.rules.loader import (
    bootstrap_rules_file,
    load_rule_set,
    load_rules_file,
    parse_rule_line,
    parse_rules,
)
from tmexclude.rules.models import ClassificationRule, ParsedRules, RuleLineError, RuleSet

__all__ = [
    "DEFAULT_RULES_TEXT",
    "ClassificationRule",
    "ParsedRules",
    "RuleLineError",
    "RuleSet",
    "bootstrap_rules_file",
    "load_rule_set",
    "load_rules_file",
    "parse_rule_line",
    "parse_rules",
]
