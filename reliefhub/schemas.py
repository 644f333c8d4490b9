"""
Record types validated at the API boundary.

Create bodies name the fields each collection needs and keep any extra
posted fields (``extra="allow"``), which are stored with the document.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(extra="allow")


# --------------------------
# Users & auth
# --------------------------
class RegisterIn(BaseModel):
    name: str
    email: str
    password: str
    role: str


class LoginIn(BaseModel):
    email: str
    password: str


class RoleUpdate(BaseModel):
    role: str


# --------------------------
# Supplies & applications
# --------------------------
class SupplyIn(Record):
    email: str
    title: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[Any] = None
    description: Optional[str] = None
    isApplied: bool = False
    isApproved: bool = False


class SupplyStatusUpdate(BaseModel):
    isApplied: bool


class ApplicationIn(Record):
    email: str
    supplyId: Optional[str] = None
    name: Optional[str] = None
    isApproved: bool = False


class ApprovalUpdate(BaseModel):
    isApproved: bool


# --------------------------
# Campaigns, donations, payments
# --------------------------
class CampaignIn(Record):
    email: str
    title: str
    description: Optional[str] = None
    goalAmount: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    collectedAmount: float = Field(0, ge=0, allow_inf_nan=False)


class Contribution(BaseModel):
    # type-checked by the handler so "x" and -5 answer the same 400
    newAmount: Any = None


class DonationIn(Record):
    email: str
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    name: Optional[str] = None
    campaignId: Optional[str] = None


class PaymentIntentIn(BaseModel):
    price: Any = None


# --------------------------
# Ancillary content
# --------------------------
class TestimonialIn(Record):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class ReviewIn(Record):
    name: Optional[str] = None
    email: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None


class NewsIn(Record):
    title: str
    content: Optional[str] = None
    author: Optional[str] = None


class VolunteerIn(Record):
    email: str
    name: str
    phone: Optional[str] = None
    skills: List[str] = []
