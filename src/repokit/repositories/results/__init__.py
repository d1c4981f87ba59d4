from .base_result import BaseResult, strip_nulls

__all__ = ["BaseResult", "strip_nulls"]
