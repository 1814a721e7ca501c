from pydantic import BaseModel


class CountryOut(BaseModel):
    country: str
    detected: bool
