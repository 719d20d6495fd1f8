"""
Base model classes.
"""

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """
    Base for values handed to callers.

    Frozen: once a pipeline stage has produced one, nobody edits it.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )
