"""RestrictionEntry - configured rule schema.

Validated form of one `{object?, property?, message?}` option.
Unknown fields are rejected so config typos fail loudly.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RestrictionEntry(BaseModel):
    """One restricted object, property, or object.property pair.

    At least one of `object` / `property` must be given.

    Examples:
        - {object: "foo", property: "bar"}   -> foo.bar is restricted
        - {object: "foo"}                    -> any property of foo
        - {property: "__defineGetter__"}     -> that property on any object
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    object_name: str | None = Field(
        None,
        alias="object",
        description="Object identifier name: 'foo'",
    )
    property_name: str | None = Field(
        None,
        alias="property",
        description="Static property name: 'bar'",
    )
    message: str | None = Field(
        None,
        description="Free text appended to the diagnostic",
    )

    @field_validator("object_name", "property_name", "message", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        # Omit the key instead of writing null
        if value is None:
            raise ValueError("must be a string")
        return value

    @model_validator(mode="after")
    def _require_object_or_property(self) -> "RestrictionEntry":
        if self.object_name is None and self.property_name is None:
            raise ValueError("at least one of 'object' or 'property' is required")
        return self

    def describe(self) -> str:
        """Human readable pattern, e.g. 'foo.bar', 'foo.*', '*.bar'."""
        obj = "*" if self.object_name is None else self.object_name
        prop = "*" if self.property_name is None else self.property_name
        return f"{obj}.{prop}"
