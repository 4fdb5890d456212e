from .property_mapper_module import PropertyMapperModule

__all__ = ["PropertyMapperModule"]
