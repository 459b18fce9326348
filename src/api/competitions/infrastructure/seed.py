"""Demo directory contents.

Provisions three schools, their admins and one student each, a platform
admin, and five sample competitions covering every visibility. Used for
local development and for exercising the access rules end to end.
"""

from __future__ import annotations

from datetime import date

from competitions.domain.aggregates import Competition, Principal, Tenant
from competitions.domain.value_objects import Role, Visibility
from competitions.infrastructure.directory_store import InMemoryDirectoryStore

PLATFORM_ADMIN_EMAIL = "admin@succeed.com"


async def seed_demo_directory(store: InMemoryDirectoryStore) -> None:
    """Populate an empty store with the demo directory.

    Raises:
        ValueError: If any demo tenant or principal is already present
    """
    springfield = Tenant.create(
        name="Springfield High School", subdomain="springfield"
    )
    riverdale = Tenant.create(name="Riverdale Academy", subdomain="riverdale")
    westview = Tenant.create(name="Westview High", subdomain="westview")
    for tenant in (springfield, riverdale, westview):
        await store.tenants.add(tenant)

    # (email, role, tenant, first name, last name)
    people = [
        ("admin@springfield.edu", Role.SCHOOL_ADMIN, springfield, "John", "Smith"),
        ("admin@riverdale.edu", Role.SCHOOL_ADMIN, riverdale, "Jane", "Doe"),
        ("admin@westview.edu", Role.SCHOOL_ADMIN, westview, "Robert", "Johnson"),
        (PLATFORM_ADMIN_EMAIL, Role.PLATFORM_ADMIN, None, "Admin", "User"),
        ("student@springfield.edu", Role.STUDENT, springfield, "Lisa", "Simpson"),
        ("student@riverdale.edu", Role.STUDENT, riverdale, "Betty", "Cooper"),
        ("student@westview.edu", Role.STUDENT, westview, "Sam", "Rivera"),
    ]
    for email, role, tenant, first_name, last_name in people:
        await store.principals.add(
            Principal.create(
                email=email,
                role=role,
                tenant_id=tenant.id if tenant else None,
                first_name=first_name,
                last_name=last_name,
            )
        )

    competitions = [
        Competition.create(
            title="Math Challenge 2025",
            description="Annual mathematics competition testing problem-solving skills.",
            start_date=date(2025, 6, 1),
            end_date=date(2025, 6, 10),
            owner_tenant_id=springfield.id,
            visibility=Visibility.PRIVATE,
        ),
        Competition.create(
            title="National Science Fair",
            description="Showcase your scientific discoveries and innovations.",
            start_date=date(2025, 7, 15),
            end_date=date(2025, 7, 20),
            owner_tenant_id=springfield.id,
            visibility=Visibility.PUBLIC,
        ),
        Competition.create(
            title="Coding Competition",
            description="Test your programming skills in this timed challenge.",
            start_date=date(2025, 6, 15),
            end_date=date(2025, 6, 20),
            owner_tenant_id=riverdale.id,
            visibility=Visibility.RESTRICTED,
            accessible_tenant_ids=[springfield.id, westview.id],
        ),
        Competition.create(
            title="Literary Essay Contest",
            description=(
                "Submit your best essay on this year's theme: "
                '"The Future of Learning".'
            ),
            start_date=date(2025, 8, 1),
            end_date=date(2025, 8, 30),
            owner_tenant_id=riverdale.id,
            visibility=Visibility.PRIVATE,
        ),
        Competition.create(
            title="Environmental Project Challenge",
            description="Develop solutions for local environmental issues.",
            start_date=date(2025, 9, 1),
            end_date=date(2025, 10, 1),
            owner_tenant_id=westview.id,
            visibility=Visibility.PUBLIC,
        ),
    ]
    for competition in competitions:
        await store.competitions.save(competition)
