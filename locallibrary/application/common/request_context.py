"""Request context passed by value into workflow entry points."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from locallibrary.application.common.validation import FormValue


@dataclass(frozen=True)
class RequestContext:
    """
    The parts of an inbound request a workflow may read.

    Attributes:
        path_params: Path parameters, e.g. ``{"book_id": "..."}``
        form: Submitted form fields; repeated fields arrive as lists
    """

    path_params: Mapping[str, str] = field(default_factory=dict)
    form: Mapping[str, FormValue] = field(default_factory=dict)

    def path_param(self, name: str) -> str:
        """Get a required path parameter."""
        try:
            return self.path_params[name]
        except KeyError:
            raise ValueError(f"Missing path parameter '{name}'") from None
