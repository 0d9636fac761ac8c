from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import List, Optional, Union
from app.utils.spreadsheet import cell_to_text


class RegistrationRequest(BaseModel):
    identifier: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("identifier", "sapId")
    )
    # legacy form fields, accepted and ignored
    name: Optional[str] = None
    department: Optional[str] = None
    mobile: Optional[str] = None

    @field_validator("identifier", mode="before")
    @classmethod
    def stringify_identifier(cls, value):
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return cell_to_text(value)
        return value


class RegistrationSuccess(BaseModel):
    success: bool = True
    tableNo: Union[str, int]
    name: str
    department: str
    message: str


class RegistrationFailure(BaseModel):
    success: bool = False
    message: str


class AttendeeOut(BaseModel):
    name: str
    department: str
    identifier: str
    assignment: Union[str, int]

    class Config:
        from_attributes = True


class AttendeesOut(BaseModel):
    total: int
    attendees: List[AttendeeOut]


class ReloadOut(BaseModel):
    success: bool
    message: str
    count: Optional[int] = None
