from pydantic import BaseModel, EmailStr, Field

class RegisterIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class TokenOut(BaseModel):
    token: str
