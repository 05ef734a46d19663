"""
Credential directory — the fixed list of shop accounts.

Stands in for an authentication backend: plain-text passwords, no
hashing, no network call. Immutable at runtime.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from shopdesk.session import Role

CredentialRole = Literal["Admin", "Staff"]

ROLE_MAP: dict[str, Role] = {
    "Admin": Role.ADMIN,
    "Staff": Role.STAFF,
}


@dataclass(frozen=True)
class CredentialRecord:
    role: CredentialRole
    email: str
    password: str
    id: str

    @property
    def session_role(self) -> Role:
        return ROLE_MAP[self.role]


CREDENTIAL_DIRECTORY: tuple[CredentialRecord, ...] = (
    CredentialRecord(role="Admin", email="d62809238@gmail.com", password="admin12345", id="1"),
    CredentialRecord(role="Staff", email="staff1@gmail.com", password="staff001", id="101"),
    CredentialRecord(role="Staff", email="staff2@gmail.com", password="staff211", id="102"),
    CredentialRecord(role="Staff", email="staff3@gmail.com", password="staff131", id="103"),
    CredentialRecord(role="Staff", email="staff4@gmail.com", password="staff491", id="104"),
    CredentialRecord(role="Staff", email="staff5@gmail.com", password="staff890", id="105"),
    CredentialRecord(role="Staff", email="staff6@gmail.com", password="staff006", id="106"),
    CredentialRecord(role="Staff", email="staff7@gmail.com", password="staff567", id="107"),
    CredentialRecord(role="Staff", email="staff8@gmail.com", password="staff458", id="108"),
    CredentialRecord(role="Staff", email="staff9@gmail.com", password="staff089", id="109"),
    CredentialRecord(role="Staff", email="staff10@gmail.com", password="staff909", id="110"),
)


def find_credential(
    email: str,
    password: str,
    directory: tuple[CredentialRecord, ...] = CREDENTIAL_DIRECTORY,
) -> Optional[CredentialRecord]:
    """Linear scan, exact case-sensitive match on both fields. First match wins."""
    for record in directory:
        if record.email == email and record.password == password:
            return record
    return None


def first_of_role(
    role: CredentialRole,
    directory: tuple[CredentialRecord, ...] = CREDENTIAL_DIRECTORY,
) -> Optional[CredentialRecord]:
    for record in directory:
        if record.role == role:
            return record
    return None
