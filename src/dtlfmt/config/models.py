"""Configuration section models for ``dtlfmt.toml``.

Every field has a default, so a config file only lists what it overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from dtlfmt.domain.model import Clause
from dtlfmt.domain.operators import is_logical_operator


class ClauseTemplate(BaseModel):
    """Property/operator/value used to seed new clauses."""

    model_config = {"frozen": True}

    property: str = "property"
    operator: str = "equals"
    value: str = "value"

    def to_clause(self) -> Clause:
        return Clause(property=self.property, operator=self.operator, value=self.value)


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    strict: bool = False


class EditorConfig(BaseModel):
    """[editor] section."""

    model_config = {"frozen": True}

    scratch_clause: ClauseTemplate = Field(default_factory=ClauseTemplate)
    new_rule_clause: ClauseTemplate = Field(
        default_factory=lambda: ClauseTemplate(property="newproperty", value="newvalue")
    )
    new_clause: ClauseTemplate = Field(default_factory=ClauseTemplate)
    default_clause_operator: str = "AND"
    default_rule_operator: str = "OR"

    @field_validator("default_clause_operator", "default_rule_operator")
    @classmethod
    def _logical_operator(cls, value: str) -> str:
        if not is_logical_operator(value):
            msg = f"expected AND or OR, got {value!r}"
            raise ValueError(msg)
        return value.upper()
