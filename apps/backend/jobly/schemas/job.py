"""Job-related Pydantic schemas.

Field names are snake_case in Python and camelCase on the wire
(``companyHandle``, ``minSalary``, ...). Request schemas forbid unknown
keys, which keeps update payload keys inside the known column set.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .company import CompanyResponse

CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class JobCreate(BaseModel):
    """Schema for creating a new job."""

    model_config = ConfigDict(**CAMEL_CONFIG, extra="forbid")

    title: str = Field(..., min_length=1)
    company_handle: str = Field(..., min_length=1, max_length=25)
    salary: int | None = Field(None, ge=0)
    equity: Decimal | None = Field(None, ge=0, le=1)


class JobUpdate(BaseModel):
    """Schema for updating a job (all fields optional, handle is fixed)."""

    model_config = ConfigDict(**CAMEL_CONFIG, extra="forbid")

    title: str | None = Field(None, min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: Decimal | None = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: str | None) -> str:
        # title is NOT NULL; salary and equity may be cleared
        if value is None:
            raise ValueError("title may not be null")
        return value


class JobSearch(BaseModel):
    """Optional filters for the job list endpoint."""

    # Query keys are accepted under their camelCase names only
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    title: str | None = None
    min_salary: int | None = Field(None, ge=0)
    has_equity: bool = False


class JobBase(BaseModel):
    model_config = CAMEL_CONFIG

    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class JobResponse(JobBase):
    """Job as stored, with its company handle."""

    company_handle: str


class JobSummary(JobResponse):
    """Job with its company's display name."""

    company_name: str | None = None


class JobDetail(JobBase):
    """Job with its owning company nested."""

    company: CompanyResponse


class JobCreateResponse(BaseModel):
    job: JobSummary


class JobListResponse(BaseModel):
    jobs: list[JobSummary]


class JobDetailResponse(BaseModel):
    job: JobDetail


class JobUpdateResponse(BaseModel):
    job: JobResponse


class JobDeleteResponse(BaseModel):
    deleted: int
