"""
RecordShop Album Model
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class Album(BaseModel):
    """A record album in the catalogue.

    Input is permissive: any field that is missing, or whose value is not
    of the field's JSON type, takes its zero value. Values are never
    coerced across types (a string price or a boolean price reads as 0.0),
    though integer prices are read as floats. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)

    id: str = ""
    title: str = ""
    artist: str = ""
    price: float = 0.0

    @field_validator("id", "title", "artist", "price", mode="wrap")
    @classmethod
    def _zero_on_mismatch(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].default


SEED_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)
