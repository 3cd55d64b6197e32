from pydantic import BaseModel, field_validator


class SignIn(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        return value.strip()


class SignedIn(BaseModel):
    username: str
