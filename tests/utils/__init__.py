from .comparison import compare_qtables

__all__ = ["compare_qtables"]
