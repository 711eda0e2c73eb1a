from pydantic import BaseModel, EmailStr, Field


class CredentialsDTO(BaseModel):
    email: EmailStr = Field(..., examples=["driver@example.com"])
    password: str = Field(..., examples=["hunter22"])


class AuthSessionDTO(BaseModel):
    token: str
    uid: str
    email: str


class UserDTO(BaseModel):
    uid: str
    email: str
