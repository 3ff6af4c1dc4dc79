"""restaurant-core: value objects and entities that replace raw primitives."""

__version__ = "0.1.0"
