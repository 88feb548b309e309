"""Workflow plumbing shared by every bounded context."""

from .aggregation import join
from .dispositions import Disposition, Redirect, Render
from .request_context import RequestContext

__all__ = [
    "Disposition",
    "Redirect",
    "Render",
    "RequestContext",
    "join",
]
