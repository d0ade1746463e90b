# login models: contract-number login form
# mirrors the login screen fields

from typing import Optional
from pydantic import BaseModel, Field


class UserLogin(BaseModel):
    contract_number: Optional[str] = Field(None, alias="contractNumber", description="e.g. RE-71904/24")
    password: Optional[str] = Field(None, description="local check only, min 6 chars")

    model_config = {"populate_by_name": True}


class LoginResponse(BaseModel):
    logged_in: bool = Field(True, alias="loggedIn")
    contract_number: str = Field(..., alias="contractNumber")
    load_error: Optional[str] = Field(None, alias="loadError")

    model_config = {"populate_by_name": True}
