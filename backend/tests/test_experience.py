import unittest

from portfolio.models import Company, Experience

from tests.base import ApiTestCase


def experience_body(**overrides) -> dict:
    body = {
        "experienceCode": "acme-billing",
        "name": "Billing rewrite",
        "companyCode": "acme",
        "companyName": "Acme Corp",
        "companyIndustry": "SaaS",
        "companyDepartment": "Platform",
        "companyPosition": "Senior",
        "companySalary": 1000,
        "period": "2022.03 - Present",
        "role": "Tech lead",
        "techStack": "Java, Spring; Kotlin\nGo",
        "keywords": "billing; migration",
        "details": "- Split the monolith\n• Cut latency",
    }
    body.update(overrides)
    return body


class ExperienceApiTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.login()

    def save(self, **overrides):
        return self.client.post(
            "/api/experience", json=experience_body(**overrides), headers=self.headers
        ).json()

    def test_save_then_fetch_by_company_round_trips(self):
        saved = self.save()
        self.assertTrue(saved["success"], saved)

        payload = self.client.get("/api/experience", params={"company": "acme"}).json()
        self.assertTrue(payload["success"])

        form = payload["data"]["metadata"]["experiences"][0]
        for key, value in experience_body().items():
            self.assertEqual(form[key], value, key)

        item = payload["data"]["metadata"]["timeline"][0]
        self.assertEqual(item["techStacks"], ["Java", "Spring", "Kotlin", "Go"])
        self.assertEqual(item["details"], ["Split the monolith", "Cut latency"])
        self.assertIn("Billing rewrite", payload["data"]["content"])

    def test_save_returns_section_for_that_company(self):
        self.save()
        saved = self.save(
            experienceCode="globex-gw", companyCode="globex", companyName="Globex"
        )
        timeline = saved["data"]["metadata"]["timeline"]
        self.assertEqual([t["experienceCode"] for t in timeline], ["globex-gw"])

    def test_get_all_is_ordered_by_id(self):
        self.save(experienceCode="b-first")
        self.save(experienceCode="a-second", companyCode="globex", companyName="Globex")

        payload = self.client.get("/api/experience").json()
        codes = [t["experienceCode"] for t in payload["data"]["metadata"]["timeline"]]
        self.assertEqual(codes, ["b-first", "a-second"])

    def test_empty_result_is_failure_envelope(self):
        payload = self.client.get("/api/experience").json()
        self.assertFalse(payload["success"])
        self.assertEqual(payload["message"], "Experience not found")

        self.save()
        payload = self.client.get("/api/experience", params={"company": "nobody"}).json()
        self.assertFalse(payload["success"])

    def test_required_codes(self):
        payload = self.save(experienceCode="")
        self.assertFalse(payload["success"])
        self.assertEqual(payload["message"], "experienceCode is required")

        payload = self.save(companyCode=None)
        self.assertFalse(payload["success"])
        self.assertEqual(payload["message"], "companyCode is required")

    def test_new_company_requires_name(self):
        payload = self.save(companyName="  ")
        self.assertFalse(payload["success"])
        self.assertEqual(payload["message"], "companyName is required for new company")

        db = self.SessionLocal()
        self.assertEqual(db.query(Company).count(), 0)
        self.assertEqual(db.query(Experience).count(), 0)
        db.close()

    def test_existing_company_keeps_unsent_fields(self):
        self.save()
        self.save(
            experienceCode="acme-2",
            companyName=None,
            companyIndustry=None,
            companySalary=None,
            companyPosition="Principal",
        )

        db = self.SessionLocal()
        company = db.query(Company).filter(Company.company_code == "acme").one()
        self.assertEqual(company.name, "Acme Corp")
        self.assertEqual(company.industry, "SaaS")
        self.assertEqual(company.salary, 1000)
        self.assertEqual(company.position, "Principal")
        db.close()

    def test_upsert_repoints_experience_to_new_company(self):
        self.save()
        self.save(companyCode="globex", companyName="Globex")

        db = self.SessionLocal()
        experiences = db.query(Experience).all()
        self.assertEqual(len(experiences), 1)
        self.assertEqual(experiences[0].company.company_code, "globex")
        db.close()

        payload = self.client.get("/api/experience", params={"company": "acme"}).json()
        self.assertFalse(payload["success"])

    def test_delete_is_idempotent(self):
        self.save()
        for _ in range(2):
            response = self.client.delete(
                "/api/experience",
                params={"experienceCode": "acme-billing"},
                headers=self.headers,
            )
            self.assertTrue(response.json()["success"])
            self.assertEqual(response.json()["data"], "deleted")

        self.assertFalse(self.client.get("/api/experience").json()["success"])

    def test_delete_requires_code(self):
        response = self.client.delete("/api/experience", headers=self.headers)
        payload = response.json()
        self.assertFalse(payload["success"])
        self.assertEqual(payload["message"], "experienceCode is required")


if __name__ == "__main__":
    unittest.main()
