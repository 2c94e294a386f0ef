"""One-time demo bootstrap, run at startup when seeding is enabled.

Sign-in never provisions accounts; a missing demo account is only created here.
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional

from ..common.datetime_utils import now_utc, to_iso
from ..core.enums import Role
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..identity.provider import AuthProvider, AuthProviderError, ProviderUser
from .model import UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    dict(
        first_name="John",
        last_name="Doe",
        email="john.doe@company.com",
        phone="(555) 123-4567",
        position="Software Engineer",
        department="Engineering",
        salary=75000,
        start_date="2023-01-15",
        address="123 Main St, Anytown, USA",
        emergency_contact="Jane Doe",
        emergency_phone="(555) 987-6543",
    ),
    dict(
        first_name="Sarah",
        last_name="Johnson",
        email="sarah.johnson@company.com",
        phone="(555) 234-5678",
        position="Marketing Manager",
        department="Marketing",
        salary=65000,
        start_date="2023-02-01",
        address="456 Oak Ave, Somewhere, USA",
        emergency_contact="Mike Johnson",
        emergency_phone="(555) 876-5432",
    ),
    dict(
        first_name="Michael",
        last_name="Chen",
        email="michael.chen@company.com",
        phone="(555) 345-6789",
        position="HR Specialist",
        department="HR",
        salary=58000,
        start_date="2023-03-10",
        address="789 Pine St, Elsewhere, USA",
        emergency_contact="Lisa Chen",
        emergency_phone="(555) 765-4321",
    ),
]


class DemoAccountSeeder:
    def __init__(
        self,
        provider: AuthProvider,
        users: UserRepository,
        employees: EmployeeRepository,
        *,
        email: str,
        password: str,
    ):
        self._provider = provider
        self._users = users
        self._employees = employees
        self._email = email
        self._password = password

    def _find_existing(self) -> Optional[ProviderUser]:
        target = self._email.lower()
        return next((u for u in self._provider.list_users() if u.email.lower() == target), None)

    def ensure_demo_account(self) -> Optional[UserProfile]:
        """Create the demo admin (and sample employees) if ``user:demo`` is absent.

        Returns the demo profile, or None if the account could not be set up.
        """

        existing_profile = self._users.get_demo()
        if existing_profile:
            return existing_profile

        logger.info("Creating demo user %s", self._email)
        created = True
        try:
            account = self._provider.create_user(
                email=self._email,
                password=self._password,
                metadata={"firstName": "Admin", "lastName": "User", "role": Role.ADMIN.value},
            )
        except AuthProviderError as e:
            logger.warning("Error creating demo user: %s", e)
            account = self._find_existing()
            created = False
            if account is None:
                return None
            logger.info("Demo user already exists in the provider, creating profile")

        profile = UserProfile(
            user_id=account.user_id,
            email=account.email,
            first_name="Admin",
            last_name="User",
            role=Role.ADMIN,
            created_at=to_iso(now_utc()),
            is_active=True,
        )
        self._users.save(profile)
        self._users.save_demo(profile)

        if created:
            self._seed_employees(created_by=account.user_id)
        return profile

    def _seed_employees(self, *, created_by: str) -> None:
        now = to_iso(now_utc())
        for data in DEMO_EMPLOYEES:
            self._employees.save(
                Employee(
                    employee_id=str(uuid.uuid4()),
                    status="active",
                    created_at=now,
                    updated_at=now,
                    created_by=created_by,
                    **data,
                )
            )
        logger.info("Demo employees created (%d)", len(DEMO_EMPLOYEES))
