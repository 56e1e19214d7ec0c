from .router import TodoRouter

__all__ = ["TodoRouter"]
