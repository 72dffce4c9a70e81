"""Request bodies for the authentication routes, plus a re-export of the
stored ``User`` model.

Every field is optional so missing values reach the handlers, which report
them in a fixed order.
"""

from typing import Optional

from pydantic import BaseModel

from database.models import User  # noqa: F401

__all__ = ["SignInBody", "SignUpBody", "User"]


class SignInBody(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SignUpBody(SignInBody):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
