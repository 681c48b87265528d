"""Base Pydantic schemas with strict validation."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """Base model that forbids extra fields.

    Settings and result models inherit from this class so the contract
    between the engine and its callers is enforced in both directions.

    When to use BaseModel instead:
        - Models parsing external data that may have extra fields (candles
          coming from a market-data payload)
    """

    model_config = ConfigDict(extra="forbid")


class CamelModel(StrictBaseModel):
    """Strict model serialised with camelCase aliases.

    Fields are declared in snake_case and may be populated by either name;
    ``model_dump(by_alias=True)`` produces the camelCase shape that
    downstream consumers of the levels result expect.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)
