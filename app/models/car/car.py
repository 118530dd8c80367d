from pydantic import BaseModel
from typing import Optional


class Car(BaseModel):
    id: int
    make: str
    model: str
    # None stands for a value that did not parse as a number
    year: Optional[int] = None
    price: Optional[int] = None
    imageUrl: Optional[str] = None


class AddCar(BaseModel):
    make: str
    model: str
    year: str
    price: str
