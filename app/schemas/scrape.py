from pydantic import BaseModel, ConfigDict


class ScrapeRequest(BaseModel):
    website: str | None = None


class ScrapeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    phone: str = ""  # "; "-joined, E.164-ish
    email: str = ""  # "; "-joined, lower-cased
    error: str = ""


class CountryPhoneRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str  # e.g. "+49"
    min_digits: int  # national digits, code excluded
    max_digits: int
    country: str
