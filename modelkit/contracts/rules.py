"""
Schemas for declarative validation rule files.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class ValidationRuleConfig(BaseModel):
    """One validator declaration."""

    attribute: str = Field(..., description="Attribute the rule applies to")
    validator: str = Field(..., description="Registered validator kind (presence, range, ...)")
    options: Dict[str, Any] = Field(default_factory=dict, description="Validator options")
    condition: Optional[str] = Field(
        None,
        alias="if",
        description="Name of a zero-argument model method gating the rule"
    )

    model_config = {"populate_by_name": True, "extra": "forbid"}

    def build_options(self) -> Dict[str, Any]:
        """Options with the condition merged in."""
        options = dict(self.options)
        if self.condition and 'if' not in options:
            options['if'] = self.condition
        return options


class ModelRulesConfig(BaseModel):
    """Declarations for one model class."""

    accessible: List[str] = Field(default_factory=list, description="Mass-assignable attributes")
    validations: List[ValidationRuleConfig] = Field(default_factory=list)

    @field_validator('accessible')
    @classmethod
    def _unique_names(cls, names: List[str]) -> List[str]:
        return list(dict.fromkeys(names))


class RulesDocument(BaseModel):
    """Top-level rule file."""

    models: Dict[str, ModelRulesConfig] = Field(default_factory=dict)
