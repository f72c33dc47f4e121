from pydantic import BaseModel, Field, SecretStr


class AdminLoginRequest(BaseModel):
    # Plain str: a malformed address fails like any other bad credential
    email: str = Field(..., min_length=1, max_length=255)
    password: SecretStr = Field(..., min_length=1)

    class Config:
        json_schema_extra = {'example': {'email': 'admin@example.com', 'password': 'P@ssw0rd'}}


class AdminProfileResponse(BaseModel):
    id: int
    email: str
    name: str
    role: str


class AdminLoginResponse(BaseModel):
    token: str
    admin: AdminProfileResponse


class AdminVerifyResponse(BaseModel):
    admin: AdminProfileResponse
