from .api_stack import ApiStack
from .data_stack import DataStack

__all__ = [
    "DataStack",
    "ApiStack",
]
