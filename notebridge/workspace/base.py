"""
Shared base for workspace document models.

The remote APIs speak camelCase JSON; models expose snake_case attributes and
accept either spelling. Unknown keys are ignored and every field has a
default, so partial payloads load fine.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..exceptions import InvalidDocumentError
from config.logging_config import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound="WorkspaceModel")


class WorkspaceModel(BaseModel):
    """Base model for API payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_api(self) -> dict:
        """Dump back to camelCase JSON, leaving out unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)


def load_model(model_cls: Type[ModelT], payload: Any) -> ModelT:
    """
    Return `payload` as an instance of `model_cls`.

    Model instances pass through; anything else is validated.

    Raises:
        InvalidDocumentError: payload types do not fit the model
    """
    if isinstance(payload, model_cls):
        return payload
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        logger.warning("Rejected %s payload: %s", model_cls.__name__, details)
        raise InvalidDocumentError(model_cls.__name__, details) from exc
