"""
User Domain Model - Customer profile as returned by the API.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Any, Optional

from revolut_customer.domain.wire import from_millis, to_millis


@dataclass
class Address:
    """
    Postal address of a user or card.

    Domain rules:
    - country is an ISO 3166 alpha-2 code (e.g. "FR")
    - street_line_2 is optional
    """
    city: str
    country: str
    postcode: str
    region: str
    street_line_1: str
    street_line_2: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API's JSON layout."""
        data = {
            "city": self.city,
            "country": self.country,
            "postcode": self.postcode,
            "region": self.region,
            "streetLine1": self.street_line_1,
        }
        if self.street_line_2 is not None:
            data["streetLine2"] = self.street_line_2
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        """Deserialize from the API's JSON layout."""
        return cls(
            city=data["city"],
            country=data["country"],
            postcode=data["postcode"],
            region=data["region"],
            street_line_1=data["streetLine1"],
            street_line_2=data.get("streetLine2"),
        )


def parse_birth_date(value: Any) -> date:
    """
    Parse a birth date sent as [year, month, day].

    Raises:
        ValueError: If value is not a list of three integers forming a date
    """
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"expected an array of 3 integers, got {value!r}")
    year, month, day = (int(part) for part in value)
    return date(year, month, day)


@dataclass
class User:
    """
    User entity - the signed-in customer.

    Domain rules:
    - id is a UUID string, used as the Basic auth username
    - created_date is UTC
    """
    id: str
    created_date: datetime
    address: Address
    birth_date: date
    first_name: str
    last_name: str
    phone: str
    email: str
    email_verified: bool
    state: str
    referral_code: str
    kyc: str
    terms_version: str
    under_review: bool
    risk_assessed: bool
    locale: str
    sof_state: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API's JSON layout."""
        return {
            "id": self.id,
            "createdDate": to_millis(self.created_date),
            "address": self.address.to_dict(),
            "birthDate": [self.birth_date.year, self.birth_date.month, self.birth_date.day],
            "firstName": self.first_name,
            "lastName": self.last_name,
            "phone": self.phone,
            "email": self.email,
            "emailVerified": self.email_verified,
            "state": self.state,
            "referralCode": self.referral_code,
            "kyc": self.kyc,
            "termsVersion": self.terms_version,
            "underReview": self.under_review,
            "riskAssessed": self.risk_assessed,
            "locale": self.locale,
            "sof": {"state": self.sof_state} if self.sof_state is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Deserialize from the API's JSON layout."""
        sof = data.get("sof") or {}
        return cls(
            id=data["id"],
            created_date=from_millis(data["createdDate"]),
            address=Address.from_dict(data["address"]),
            birth_date=parse_birth_date(data["birthDate"]),
            first_name=data["firstName"],
            last_name=data["lastName"],
            phone=data["phone"],
            email=data["email"],
            email_verified=data["emailVerified"],
            state=data["state"],
            referral_code=data["referralCode"],
            kyc=data["kyc"],
            terms_version=data["termsVersion"],
            under_review=data["underReview"],
            risk_assessed=data["riskAssessed"],
            locale=data["locale"],
            sof_state=sof.get("state"),
        )
