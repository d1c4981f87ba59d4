"""Base Result projection.

A Result is a read-only snapshot of one entity record with everything the
consumer should not see stripped away. Each entity declares its Result
subclass with the exposed fields; construction copies those fields and
nothing else.
"""

import json
from collections.abc import Mapping
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from sqlalchemy.engine import Row

R = TypeVar("R", bound="BaseResult")


def strip_nulls(value: Any) -> Any:
    """Remove None from mappings and sequences at any depth."""
    if isinstance(value, Mapping):
        return {key: strip_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [strip_nulls(item) for item in value if item is not None]
    return value


class BaseResult(BaseModel):
    """
    Base class for per-entity projections.

    Subclasses declare the whitelisted fields as annotations:

        class OrderResult(BaseResult):
            id: int
            total: float
            note: Optional[str] = None

    Nested projections (or lists of them) are built from related records the
    same way.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    @classmethod
    def from_record(cls: Type[R], record: Any) -> R:
        """Build a projection from a mapped object, a Row or a mapping."""
        if isinstance(record, Row):
            record = record._mapping
        if isinstance(record, Mapping):
            return cls.model_validate(dict(record))
        return cls.model_validate(record)

    def serialize(self, omit_nulls: bool = True) -> dict[str, Any]:
        """
        Dump the declared fields.

        Args:
            omit_nulls: Drop None values at every nesting level. When False
                every declared field is emitted, nulls included.
        """
        data = self.model_dump()
        if omit_nulls:
            return strip_nulls(data)
        return data

    def to_json(self, omit_nulls: bool = True) -> str:
        data = self.model_dump(mode="json")
        if omit_nulls:
            data = strip_nulls(data)
        return json.dumps({"result": data})
