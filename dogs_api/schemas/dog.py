"""
Dog response schemas.

Request bodies are deliberately untyped mappings: they are checked by
`dogs_api.services.validation` so that error messages keep their own format.
"""
from pydantic import BaseModel, ConfigDict


class DogOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    breed: str
    age: int


class DogCreatedResponse(BaseModel):
    message: str
    dog: DogOut
