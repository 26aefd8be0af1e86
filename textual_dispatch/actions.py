"""Action model and the sentinel initialization action."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

# Reducers never match this type; dispatching it only runs the default branch.
INIT = "@@INIT"


class Action(BaseModel):
    """
    A tagged description of an intended state transition.

    ``type`` is the discriminator reducers match on. Any other keyword becomes
    a payload field:

        ```python
        Action(type="todos/add", text="buy milk").text  # "buy milk"
        ```

    An action without a ``type``, or with a type that is not a string, is
    still valid. Its type is the empty string, which no reducer recognizes,
    so it falls through to the identity branch.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type(cls, value: Any) -> str:
        if not isinstance(value, str):
            return ""
        return value

    @property
    def payload(self) -> dict[str, Any]:
        """Get the payload fields (everything except ``type``)."""
        return dict(self.model_extra or {})

    @classmethod
    def coerce(cls, action: Action | Mapping[str, Any]) -> Action:
        """Accept an Action or a plain mapping with a ``type`` key."""
        if isinstance(action, Action):
            return action
        return cls.model_validate(dict(action))


def init(init_type: str = INIT) -> Action:
    """Build the sentinel initialization action."""
    return Action(type=init_type)
