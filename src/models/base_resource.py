from pydantic import BaseModel, ConfigDict


class ResourceBase(BaseModel):
    """
    Base class for every WorkloadEndpoint record shape.

    Records are immutable values: once validated they are never mutated, and
    a conversion always produces a new instance. Field names are snake_case
    in Python and use the wire names of their API generation as aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    def to_document(self) -> dict:
        """Dump the record with wire names, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
