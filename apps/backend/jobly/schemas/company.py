"""Company response schema used to enrich job details."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CompanyResponse(BaseModel):
    """Descriptive attributes of the company owning a job."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None
