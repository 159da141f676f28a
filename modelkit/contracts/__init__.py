"""
Data contracts shared across modelkit.
"""

from modelkit.contracts.rules import ValidationRuleConfig, ModelRulesConfig, RulesDocument

__all__ = ['ValidationRuleConfig', 'ModelRulesConfig', 'RulesDocument']
