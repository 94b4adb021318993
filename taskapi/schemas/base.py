"""Shared base for transfer structures.

Python attributes stay snake_case; JSON uses camelCase (``userId``,
``createdAt``). Request bodies accept either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def supplied_fields(self) -> dict:
        """Return fields the client sent with a non-null value.

        Fields left out of the payload and fields sent as ``null`` both mean
        "leave unchanged" for partial updates.
        """
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
