"""
Workflow dispositions.

Every workflow entry point resolves to exactly one of: a ``Render``
instruction, a ``Redirect`` instruction, or a raised error that the HTTP
layer's exception handlers turn into a response.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Render:
    """Render ``view`` with ``payload``."""

    view: str
    payload: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Redirect:
    """Redirect the client to ``location``."""

    location: str


Disposition = Render | Redirect
