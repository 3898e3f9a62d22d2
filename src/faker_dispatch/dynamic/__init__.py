"""Dynamic dispatch layer - what a script host sees.

Contains:
- DynamicObject: get/has/keys/set/delete interface and the UNDEFINED sentinel
- FakerObject / CategoryObject: resolve "call", categories and functions
- Faker / CategoryProxy: the same objects through Python attribute access
"""

from faker_dispatch.dynamic.base import UNDEFINED, DynamicObject
from faker_dispatch.dynamic.objects import CategoryObject, FakerObject
from faker_dispatch.dynamic.proxy import CategoryProxy, Faker

__all__ = [
    "UNDEFINED",
    "CategoryObject",
    "CategoryProxy",
    "DynamicObject",
    "Faker",
    "FakerObject",
]
