"""Validation Engine - Checks catalog consistency.

The Validation Engine ensures:
- Exported catalogs match the catalog JSON schema
- Descriptors are documented and declare consistent parameters
- Registries honor the zen and name/category invariants
"""

from typing import Any
from enum import Enum
from dataclasses import dataclass, field

import jsonschema

from faker_dispatch.descriptors.base import Descriptor, OutputType, ParamType
from faker_dispatch.registry.ingestion import ZEN
from faker_dispatch.registry.registry import Registry


class ValidationSeverity(str, Enum):
    """Severity levels for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    message: str
    path: str = ""
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "path": self.path,
            "context": self.context,
        }


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    validated_count: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    def add_issue(
        self,
        severity: ValidationSeverity,
        message: str,
        path: str = "",
        **context: Any,
    ) -> None:
        self.issues.append(
            ValidationIssue(
                severity=severity,
                message=message,
                path=path,
                context=context,
            )
        )
        if severity == ValidationSeverity.ERROR:
            self.valid = False

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            valid=self.valid and other.valid,
            issues=self.issues + other.issues,
            validated_count=self.validated_count + other.validated_count,
            metadata={**self.metadata, **other.metadata},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "validated_count": self.validated_count,
            "issues": [i.to_dict() for i in self.issues],
            "metadata": self.metadata,
        }


PARAMETER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["field", "type"],
    "properties": {
        "field": {"type": "string", "minLength": 1},
        "display": {"type": "string"},
        "type": {"enum": [t.value for t in ParamType]},
        "default": {"type": "string"},
        "optional": {"type": "boolean"},
        "options": {"type": "array", "items": {"type": "string"}},
        "description": {"type": "string"},
    },
}

CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "propertyNames": {"pattern": "^[a-z][A-Za-z0-9]*$"},
    "additionalProperties": {
        "type": "object",
        "required": ["name", "category", "output", "params"],
        "properties": {
            "name": {"type": "string", "minLength": 1},
            "display": {"type": "string"},
            "category": {"type": "string", "minLength": 1, "not": {"const": ZEN}},
            "description": {"type": "string"},
            "example": {"type": "string"},
            "output": {"enum": [t.value for t in OutputType]},
            "params": {"type": "array", "items": PARAMETER_SCHEMA},
        },
    },
}


class ValidationEngine:
    """Engine for validating descriptors, registries, and exported catalogs.

    Enforces:
    - Catalog schema correctness
    - Parameter consistency
    - Registry invariants
    """

    def validate_descriptor(self, descriptor: Descriptor) -> ValidationResult:
        """Validate a single descriptor.

        Checks:
        - Name and category are present
        - Description is present
        - No duplicate parameter fields
        - Defaults are among the declared options
        - Mandatory parameters do not follow optional ones
        """
        result = ValidationResult(valid=True, validated_count=1)

        if not descriptor.name:
            result.add_issue(ValidationSeverity.ERROR, "Function must have a name", path="name")

        if not descriptor.category:
            result.add_issue(
                ValidationSeverity.ERROR,
                "Function must have a category",
                path=f"{descriptor.name}.category",
            )

        if not descriptor.description:
            result.add_issue(
                ValidationSeverity.WARNING,
                "Function has no description",
                path=f"{descriptor.name}.description",
            )

        fields = set()
        seen_optional = False
        for i, param in enumerate(descriptor.params):
            path = f"{descriptor.name}.params[{i}]"

            if param.field in fields:
                result.add_issue(
                    ValidationSeverity.ERROR,
                    f"Duplicate parameter field: {param.field}",
                    path=f"{path}.field",
                )
            fields.add(param.field)

            if param.default and param.options and not param.type.is_array:
                if param.default not in param.options:
                    result.add_issue(
                        ValidationSeverity.ERROR,
                        f"Default {param.default!r} is not one of the options",
                        path=f"{path}.default",
                        options=list(param.options),
                    )

            if param.required and seen_optional:
                result.add_issue(
                    ValidationSeverity.WARNING,
                    f"Mandatory parameter {param.field!r} follows an optional one",
                    path=path,
                )
            if not param.required:
                seen_optional = True

        return result

    def validate_registry(self, registry: Registry) -> ValidationResult:
        """Validate registry invariants.

        Checks:
        - The zen category exists and holds exactly the by_name contents
        - Every category entry is the by_name entry of the same name
        - Every descriptor is listed under its own category
        """
        result = ValidationResult(valid=True)
        result.metadata["categories"] = len(registry.by_category)

        zen = registry.by_category.get(ZEN)
        if zen is None:
            result.add_issue(ValidationSeverity.ERROR, "Registry has no zen category", path=ZEN)
        elif set(zen) != set(registry.by_name):
            result.add_issue(
                ValidationSeverity.ERROR,
                "Zen category does not match the function list",
                path=ZEN,
                missing=sorted(set(registry.by_name) - set(zen)),
                extra=sorted(set(zen) - set(registry.by_name)),
            )

        for category, functions in registry.by_category.items():
            for name, descriptor in functions.items():
                if registry.by_name.get(name) is not descriptor:
                    result.add_issue(
                        ValidationSeverity.ERROR,
                        f"Category entry {category}.{name} is not the published function",
                        path=f"{category}.{name}",
                    )

        for name, descriptor in registry.by_name.items():
            functions = registry.by_category.get(descriptor.category, {})
            if functions.get(name) is not descriptor:
                result.add_issue(
                    ValidationSeverity.ERROR,
                    f"Function {name} is missing from category {descriptor.category}",
                    path=name,
                )
            result = result.merge(self.validate_descriptor(descriptor))

        return result

    def validate_catalog(
        self,
        catalog: dict[str, Any],
        schema: dict[str, Any] | None = None,
    ) -> ValidationResult:
        """Validate an exported catalog against the catalog JSON schema.

        Args:
            catalog: Exported catalog, as produced by export_catalog
            schema: Schema to validate against, defaults to CATALOG_SCHEMA

        Returns:
            Validation result
        """
        result = ValidationResult(valid=True, validated_count=len(catalog))
        schema = schema or CATALOG_SCHEMA
        validator_class = jsonschema.validators.validator_for(schema)

        try:
            validator_class.check_schema(schema)
        except jsonschema.SchemaError as e:
            result.add_issue(ValidationSeverity.ERROR, f"Invalid schema: {e.message}", path="schema")
            return result

        validator = validator_class(schema)
        for error in sorted(validator.iter_errors(catalog), key=lambda e: [str(p) for p in e.absolute_path]):
            result.add_issue(
                ValidationSeverity.ERROR,
                f"Schema validation failed: {error.message}",
                path=".".join(str(p) for p in error.absolute_path),
                schema_path=list(error.schema_path),
            )

        for name, entry in catalog.items():
            if isinstance(entry, dict) and entry.get("name") != name:
                result.add_issue(
                    ValidationSeverity.ERROR,
                    f"Catalog key {name!r} does not match entry name {entry.get('name')!r}",
                    path=name,
                )

        return result
