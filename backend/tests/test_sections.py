import unittest
from unittest.mock import patch

from portfolio.core.config import settings
from portfolio.core.text import has_text
from portfolio.models import Company, Experience, Resume
from portfolio.services.sections import (
    is_current_period,
    parse_career,
    render_experiences,
    render_resume,
    split_details,
    split_tags,
)


def make_resume(**overrides) -> Resume:
    fields = dict(
        member_code="owner",
        name="Jane Doe",
        gender="Female",
        email="jane@example.com",
        phone="010-1234-5678",
        address="Seoul",
        summary="Backend developer",
        skills="Python, FastAPI",
        experiences=(
            "Acme | 2022.03 - 현재 | Platform | Senior\n"
            "Globex | 2019 - 2021 | Payments | Engineer"
        ),
        activities="Meetup organiser\n\n  Speaker  ",
        education="B.S. Computer Science",
    )
    fields.update(overrides)
    return Resume(**fields)


def make_experience(code="acme-1", **overrides) -> Experience:
    company = Company(
        company_code="acme",
        name="Acme",
        department="Platform",
        position="Senior",
        industry="SaaS",
    )
    fields = dict(
        experience_code=code,
        name="Billing rewrite",
        company=company,
        period="2022 - Present",
        role="Lead",
        tech_stack="Java, Spring; Kotlin\nGo",
        keywords="billing",
        details="- first\n• second",
    )
    fields.update(overrides)
    return Experience(**fields)


class SplitTests(unittest.TestCase):
    def test_split_tags_on_comma_semicolon_newline(self):
        self.assertEqual(
            split_tags("Java, Spring; Kotlin\nGo"),
            ["Java", "Spring", "Kotlin", "Go"],
        )

    def test_split_tags_drops_blanks(self):
        self.assertEqual(split_tags(" a,, ;\n b ,"), ["a", "b"])
        self.assertEqual(split_tags("   "), [])
        self.assertEqual(split_tags(None), [])

    def test_split_details_strips_leading_bullets(self):
        raw = "- first\n• second\r\n  * third\n\n· fourth\n▪◆ fifth\nplain - dash"
        self.assertEqual(
            split_details(raw),
            ["first", "second", "third", "fourth", "fifth", "plain - dash"],
        )

    def test_split_details_drops_bullet_only_lines(self):
        self.assertEqual(split_details("-\n•\nkept"), ["kept"])

    def test_parse_career_pads_missing_parts(self):
        self.assertEqual(
            parse_career("Acme | 2020"),
            {"company": "Acme", "period": "2020", "department": "", "position": ""},
        )

    def test_current_period_markers(self):
        self.assertTrue(is_current_period("2022.03 - 현재"))
        self.assertTrue(is_current_period("2022 - Present"))
        self.assertFalse(is_current_period("2019 - 2021"))

    def test_has_text_treats_whitespace_as_blank(self):
        self.assertFalse(has_text(None))
        self.assertFalse(has_text(" \t\n"))
        self.assertTrue(has_text(" x "))


class RenderResumeTests(unittest.TestCase):
    def test_sections_and_metadata(self):
        section = render_resume(make_resume())

        self.assertIn("Resume", section.header)
        self.assertIn("Jane Doe", section.content)
        self.assertIn("Female / Seoul", section.content)
        self.assertIn("jane@example.com", section.content)
        self.assertIn("Career", section.content)
        self.assertIn("Activities", section.content)
        self.assertIn("Education", section.content)
        self.assertIn("Speaker", section.content)
        self.assertEqual(section.metadata.form.member_code, "owner")
        self.assertEqual(section.metadata.form.experiences, make_resume().experiences)

    def test_current_badge_only_for_ongoing_career(self):
        section = render_resume(make_resume())
        self.assertEqual(section.content.count("h-1.5 w-1.5 rounded-full"), 1)
        self.assertIn("Current</span>", section.content)

        section = render_resume(make_resume(experiences="Globex | 2019 - 2021"))
        self.assertNotIn("h-1.5 w-1.5 rounded-full", section.content)
        self.assertNotIn("Current</span>", section.content)

    def test_values_are_escaped(self):
        section = render_resume(make_resume(name="<script>alert(1)</script>"))
        self.assertNotIn("<script>", section.content)
        self.assertIn("&lt;script&gt;", section.content)

    def test_blank_lists_are_omitted(self):
        section = render_resume(make_resume(activities="  ", education=None, experiences=None))
        self.assertNotIn("Activities", section.content)
        self.assertNotIn("Education", section.content)
        self.assertNotIn("Career", section.content)

    def test_footer_links_github_when_configured(self):
        with patch.object(settings, "PROFILE_GITHUB_URL", "https://github.com/janedoe"):
            section = render_resume(make_resume())
        self.assertIn("https://github.com/janedoe", section.footer)

        self.assertEqual(render_resume(make_resume(member_code="")).footer, "")


class RenderExperienceTests(unittest.TestCase):
    def test_timeline_items_are_split(self):
        section = render_experiences([make_experience()])

        item = section.metadata.timeline[0]
        self.assertEqual(item.tech_stacks, ["Java", "Spring", "Kotlin", "Go"])
        self.assertEqual(item.keywords, ["billing"])
        self.assertEqual(item.details, ["first", "second"])
        self.assertEqual(item.company_name, "Acme")
        self.assertEqual(item.title, "Billing rewrite")

    def test_form_echo_carries_company_fields(self):
        section = render_experiences([make_experience()])

        form = section.metadata.experiences[0]
        self.assertEqual(form.experience_code, "acme-1")
        self.assertEqual(form.company_code, "acme")
        self.assertEqual(form.company_department, "Platform")
        self.assertEqual(form.tech_stack, "Java, Spring; Kotlin\nGo")

    def test_one_card_per_experience(self):
        section = render_experiences(
            [make_experience("a"), make_experience("b", tech_stack=None, details=None)]
        )
        self.assertEqual(section.content.count("<article"), 2)
        self.assertIn("2 experience(s)", section.footer)
        self.assertEqual(section.metadata.timeline[1].tech_stacks, [])
        # four tech chips + one keyword chip from the first card, one keyword chip from the second
        self.assertEqual(section.content.count("rounded-full px-3 py-1 text-xs"), 6)


if __name__ == "__main__":
    unittest.main()
