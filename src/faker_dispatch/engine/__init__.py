"""Engine module - Runtime & Tooling layer.

Contains:
- Faker Engine: Seeded generator instance bound to the registry
- Binder: Maps positional call-site values onto declared parameters
- Catalog Export: Serializes the registry for documentation and typings
- Validation Engine: Checks catalog and registry consistency
"""

from faker_dispatch.engine.binder import bind_params
from faker_dispatch.engine.catalog_export import catalog_json, export_catalog, signature
from faker_dispatch.engine.faker_engine import FakerEngine
from faker_dispatch.engine.validation_engine import ValidationEngine, ValidationResult

__all__ = [
    "FakerEngine",
    "ValidationEngine",
    "ValidationResult",
    "bind_params",
    "catalog_json",
    "export_catalog",
    "signature",
]
