"""
Portfolio Database Seeder

Creates the tables and, on an empty database, inserts:
- An admin account (BOOTSTRAP_ADMIN_USERNAME / BOOTSTRAP_ADMIN_PASSWORD)
- A resume with careers, activities and education
- Two companies with experiences
- A handful of posts
"""

import sys
sys.path.insert(0, ".")

from portfolio.core.config import settings
from portfolio.core.security import get_password_hash
from portfolio.db.base import Base
from portfolio.db.session import SessionLocal, engine
from portfolio.models import Company, Experience, Post, Resume, User
from portfolio.services.auth_service import ADMIN_ROLE


def seed_database():
    """Seed the database with sample portfolio content."""

    # Create all tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if already seeded
        if db.query(Resume).first() is not None:
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        # 1. Admin account
        if settings.BOOTSTRAP_ADMIN_PASSWORD and db.query(User).first() is None:
            db.add(User(
                username=settings.BOOTSTRAP_ADMIN_USERNAME,
                password=get_password_hash(settings.BOOTSTRAP_ADMIN_PASSWORD),
                role=ADMIN_ROLE,
                enabled=True,
            ))

        # 2. Resume
        db.add(Resume(
            member_code="owner",
            name="Jane Doe",
            gender="Female",
            email="jane.doe@example.com",
            phone="010-0000-0000",
            address="Seoul, Korea",
            summary="Backend developer who enjoys small, well-tested services.",
            skills="Python, FastAPI; SQLAlchemy\nPostgreSQL, Docker",
            experiences=(
                "Acme Corp | 2022.03 - Present | Platform Team | Senior Engineer\n"
                "Globex | 2019.01 - 2022.02 | Payments | Engineer"
            ),
            activities="Open source maintainer\nLocal Python meetup organiser",
            education="B.S. Computer Science, Example University",
        ))

        # 3. Companies and experiences
        acme = Company(
            company_code="acme",
            name="Acme Corp",
            industry="SaaS",
            department="Platform Team",
            position="Senior Engineer",
        )
        globex = Company(
            company_code="globex",
            name="Globex",
            industry="Fintech",
            department="Payments",
            position="Engineer",
        )
        db.add_all([acme, globex])
        db.flush()  # Get IDs

        db.add_all([
            Experience(
                experience_code="acme-billing",
                name="Billing platform rewrite",
                company=acme,
                period="2022.03 - Present",
                role="Tech lead",
                tech_stack="Python, FastAPI; PostgreSQL\nRedis",
                keywords="billing, migration",
                details="- Split the monolith billing module into services\n"
                        "• Cut invoice generation time by 60%",
            ),
            Experience(
                experience_code="globex-gateway",
                name="Payment gateway integration",
                company=globex,
                period="2019.01 - 2022.02",
                role="Backend engineer",
                tech_stack="Java, Spring",
                keywords="payments; PCI",
                details="* Integrated three card processors\n* Built reconciliation jobs",
            ),
        ])

        # 4. Posts
        for idx in range(1, 6):
            db.add(Post(
                title=f"Sample post {idx}",
                category="dev" if idx % 2 else "life",
                keywords="sample",
                summary=f"Summary of sample post {idx}",
                content=f"Content of sample post {idx}",
            ))

        # Commit all changes
        db.commit()

        print("✅ Database seeded successfully!")
        print("\n📋 Created:")
        print("   - Resume: owner (Jane Doe)")
        print("   - Companies: acme, globex (2 experiences)")
        print("   - Posts: 5")
        if settings.BOOTSTRAP_ADMIN_PASSWORD:
            print(f"   - Admin: {settings.BOOTSTRAP_ADMIN_USERNAME}")

    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
