"""Base models and structures shared by several Fortnox resources."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal

from fortnoxpy.scalars import Intish, Stringish


class FortnoxModel(BaseModel):
    """Base model for Fortnox resources.

    Fields are snake_case in Python and PascalCase on the wire. Fields whose
    wire name does not follow that rule declare an explicit alias.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null leaves the field at its default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class FortnoxPayload(FortnoxModel):
    """Base model for request bodies. Fields left as None are not sent."""

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MetaInformation(FortnoxModel):
    """Pagination data returned next to list responses."""

    current_page: int = Field(0, alias="@CurrentPage")
    total_pages: int = Field(0, alias="@TotalPages")
    total_resources: int = Field(0, alias="@TotalResources")


class ErrorInformation(FortnoxModel):
    """Body of the ``ErrorInformation`` error envelope.

    The live API spells the keys either capitalised or lowercase.
    """

    error: Intish = Field(0, validation_alias=AliasChoices("Error", "error"))
    message: Stringish = Field("", validation_alias=AliasChoices("Message", "message"))
    code: Intish = Field(0, validation_alias=AliasChoices("Code", "code"))


class ErrorResponse(FortnoxModel):
    error_information: ErrorInformation = Field(
        validation_alias=AliasChoices("ErrorInformation", "errorInformation"),
        serialization_alias="ErrorInformation",
    )


class EmailInformation(FortnoxModel):
    email_address_bcc: str = Field("", alias="EmailAddressBCC")
    email_address_cc: str = Field("", alias="EmailAddressCC")
    email_address_from: str = ""
    email_address_to: str = ""
    email_body: str = ""
    email_subject: str = ""


class EmailInformationPayload(FortnoxPayload):
    email_address_bcc: str | None = Field(None, alias="EmailAddressBCC")
    email_address_cc: str | None = Field(None, alias="EmailAddressCC")
    email_address_from: str | None = None
    email_address_to: str | None = None
    email_body: str | None = None
    email_subject: str | None = None
