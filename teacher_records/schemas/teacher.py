"""Teacher schemas for API request/response models."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Teacher(BaseModel):
    """Teacher record.

    Documents the create and update responses. Those return the stored
    document itself, so key order follows the client and unrecognized
    fields come back unchanged.

    Attributes:
        id: Server-assigned id (decimal string of epoch milliseconds).
        full_name: Full name of the teacher.
        age: Age in years.
        date_of_birth: Date of birth as supplied.
        number_of_classes: Number of classes taught.
    """

    id: Optional[str] = None
    full_name: str = Field(..., alias="fullName")
    age: Union[int, float]
    date_of_birth: str = Field(..., alias="dateOfBirth")
    number_of_classes: Union[int, float] = Field(..., alias="numberOfClasses")

    model_config = ConfigDict(extra="allow")


class AverageClassesResponse(BaseModel):
    """Response schema for the average number of classes."""

    average_classes: Union[int, float] = Field(..., alias="averageClasses")
