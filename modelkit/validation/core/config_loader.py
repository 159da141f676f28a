"""
Validation configuration loader.

Loads validation declarations for model classes from YAML files.

Format:
    models:
      product:
        accessible: [name, price]
        validations:
          - attribute: name
            validator: presence
          - attribute: price
            validator: range
            options: {min: 0}
            if: is_listed
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from modelkit.contracts.rules import ModelRulesConfig, RulesDocument
from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.exceptions import ValidationConfigError
from modelkit.validation.core.registry import build_validator
from modelkit.utils.logger import setup_logger

logger = setup_logger(__name__)


class ValidationConfigLoader:
    """
    Loads validation declarations from a YAML file.

    Supports:
    - Accessible attribute lists per model
    - Validator declarations per model
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize config loader.

        Args:
            config_path: Path to the rules YAML file
        """
        self.config_path = Path(config_path)
        self._config: Optional[RulesDocument] = None

    def load(self) -> RulesDocument:
        """
        Load configuration from YAML file.

        Returns:
            Parsed rules document (empty if the file does not exist)

        Raises:
            ValidationConfigError: If the YAML or its structure is invalid
        """
        if not self.config_path.exists():
            logger.warning(
                f"Validation config file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = RulesDocument()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse validation config: {e}")
            raise ValidationConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        try:
            self._config = RulesDocument.model_validate(raw)
        except ValidationError as e:
            logger.error(f"Invalid validation config structure: {e}")
            raise ValidationConfigError(f"Invalid rules in {self.config_path}: {e}") from e

        logger.info(f"Loaded validation config from: {self.config_path}")
        return self._config

    def reload(self) -> RulesDocument:
        """Reload configuration from file."""
        self._config = None
        return self.load()

    @property
    def config(self) -> RulesDocument:
        if self._config is None:
            self.load()
        return self._config

    def get_model_rules(self, model_name: str) -> ModelRulesConfig:
        """
        Get declarations for one model.

        Args:
            model_name: Key under ``models``

        Returns:
            Model rules (empty if the model is not configured)
        """
        return self.config.models.get(model_name, ModelRulesConfig())

    def build_validators(self, model_name: str) -> List[BaseValidator]:
        """
        Instantiate the validators configured for a model.

        Raises:
            UnknownValidatorError: If a rule names an unregistered validator
        """
        return [
            build_validator(rule.validator, rule.attribute, rule.build_options())
            for rule in self.get_model_rules(model_name).validations
        ]

    def apply(self, model_cls: Any, model_name: Optional[str] = None) -> List[BaseValidator]:
        """
        Declare configured rules on a model class.

        Args:
            model_cls: Model subclass to declare on
            model_name: Key under ``models``; defaults to the lowercased class name

        Returns:
            The validators that were added
        """
        model_name = model_name or model_cls.__name__.lower()
        rules = self.get_model_rules(model_name)

        model_cls.attr_accessible(*rules.accessible)
        validators = self.build_validators(model_name)
        for validator in validators:
            model_cls.add_validation(validator)

        logger.info(
            f"Applied {len(validators)} validation rules from '{model_name}' to {model_cls.__name__}"
        )
        return validators


def load_validation_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Convenience function to load validation configuration as a plain dict.

    Args:
        config_path: Path to config file

    Returns:
        Configuration dictionary
    """
    loader = ValidationConfigLoader(config_path)
    return loader.load().model_dump(by_alias=True)
