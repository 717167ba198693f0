"""
Shared fixtures: an in-memory SQLite database wired into the app.
"""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio.db.base import Base
from portfolio.db.session import get_db
from portfolio.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret!"


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    def login(self) -> dict:
        """Create the admin, log in, and return the Authorization header."""
        self.client.get(
            "/api/auth/admin/join",
            params={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        )
        response = self.client.post(
            "/api/auth/login",
            json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        )
        payload = response.json()
        self.assertTrue(payload["success"], payload)
        return {"Authorization": payload["data"]}
