from .property_mapper_registry import PropertyMapperRegistry

__all__ = ["PropertyMapperRegistry"]
