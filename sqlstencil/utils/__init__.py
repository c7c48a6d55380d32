from sqlstencil.utils import logging, structures, text

__all__ = ("logging", "structures", "text")
