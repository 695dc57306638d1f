from .controller import ERROR_MESSAGES, QueryController
from .factory import create_controller

__all__ = ["ERROR_MESSAGES", "QueryController", "create_controller"]
