import unittest
from unittest.mock import patch

import seed_db
from portfolio.core.config import settings
from portfolio.models import Company, Experience, Post, Resume, User
from portfolio.services.auth_service import ADMIN_ROLE

from tests.base import ApiTestCase


class SeedTests(ApiTestCase):
    def seed(self):
        with patch.object(seed_db, "engine", self.engine), \
                patch.object(seed_db, "SessionLocal", self.SessionLocal), \
                patch.object(settings, "BOOTSTRAP_ADMIN_USERNAME", "seeded"), \
                patch.object(settings, "BOOTSTRAP_ADMIN_PASSWORD", "seed-pw"):
            seed_db.seed_database()

    def test_seeds_sample_content(self):
        self.seed()

        db = self.SessionLocal()
        self.assertEqual(db.query(Resume).count(), 1)
        self.assertEqual(db.query(Company).count(), 2)
        self.assertEqual(db.query(Experience).count(), 2)
        self.assertEqual(db.query(Post).count(), 5)
        db.close()

    def test_seeded_admin_matches_joined_admin(self):
        self.seed()

        db = self.SessionLocal()
        user = db.query(User).filter(User.username == "seeded").one()
        self.assertEqual(user.role, ADMIN_ROLE)
        self.assertTrue(user.enabled)
        db.close()

        response = self.client.post(
            "/api/auth/login", json={"username": "seeded", "password": "seed-pw"}
        )
        self.assertTrue(response.json()["success"])

    def test_second_run_is_a_no_op(self):
        self.seed()
        self.seed()

        db = self.SessionLocal()
        self.assertEqual(db.query(Post).count(), 5)
        self.assertEqual(db.query(User).count(), 1)
        db.close()


if __name__ == "__main__":
    unittest.main()
