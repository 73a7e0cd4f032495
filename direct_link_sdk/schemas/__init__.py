from .base import BaseSchema, PatchSchema, ResourceSchema

__all__ = [
    "BaseSchema",
    "PatchSchema",
    "ResourceSchema",
]
