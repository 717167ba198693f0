"""
Section Renderer.

Turns persisted resume/experience rows into the {header, content, footer}
HTML triple consumed by the frontend, plus the structured metadata the
editor uses to re-populate its forms. Pure functions: no session access.
"""

import html
import re
from typing import Iterable, Optional

from portfolio.core.config import settings
from portfolio.core.text import has_text
from portfolio.models import Experience, Resume
from portfolio.schemas import (
    ExperienceDisplayItem,
    ExperienceRequest,
    ExperienceSectionMetadata,
    ResumeRequest,
    ResumeSectionMetadata,
    SectionResponse,
)

# ============== Parsing ==============

TAG_SEPARATORS = re.compile(r"[,;\n]")
LINE_BREAKS = re.compile(r"\r\n|[\n\r\u000b\u000c\u0085\u2028\u2029]")

# Leading bullet glyphs (and mojibake of U+2022) stripped from detail lines
BULLET_PREFIX = re.compile(
    r"^[\-\u00e2\u20ac\u00a2*\u2022\u2023\u25e6\u2219\u2043\u00b7\u25aa\u25c6\s]+"
)

# Period text marking a job that is still ongoing
CURRENT_MARKERS = ("현재", "present", "current")

CHIP_COLORS = (
    "bg-blue-100 text-blue-800",
    "bg-emerald-100 text-emerald-800",
    "bg-rose-100 text-rose-800",
    "bg-amber-100 text-amber-900",
    "bg-violet-100 text-violet-800",
)


def escape(value: Optional[str]) -> str:
    if value is None:
        return ""
    return html.escape(value, quote=True)


def split_tags(raw: Optional[str]) -> list[str]:
    """Split a comma/semicolon/newline separated list, dropping blanks."""
    if not has_text(raw):
        return []
    return [token.strip() for token in TAG_SEPARATORS.split(raw) if has_text(token)]


def normalize_bullet(line: Optional[str]) -> str:
    if line is None:
        return ""
    trimmed = line.strip()
    if not trimmed:
        return ""
    return BULLET_PREFIX.sub("", trimmed, count=1).strip()


def split_details(raw: Optional[str]) -> list[str]:
    """Split free text into lines with any leading bullet characters removed."""
    if not has_text(raw):
        return []
    lines = (normalize_bullet(line) for line in LINE_BREAKS.split(raw))
    return [line for line in lines if line]


def split_lines(raw: Optional[str]) -> list[str]:
    if not has_text(raw):
        return []
    return [line.strip() for line in raw.split("\n") if has_text(line)]


def join_slash(*values: Optional[str]) -> str:
    return " / ".join(v for v in values if has_text(v))


def is_current_period(period: str) -> bool:
    lowered = period.lower()
    return any(marker in lowered for marker in CURRENT_MARKERS)


def parse_career(line: str) -> dict[str, str]:
    """Parse "company | period | department | position"; missing parts are blank."""
    parts = [part.strip() for part in line.split("|")]
    parts += [""] * (4 - len(parts))
    return {
        "company": parts[0],
        "period": parts[1],
        "department": parts[2],
        "position": parts[3],
    }


# ============== HTML fragments ==============

HEADER_TEMPLATE = (
    "<div class='pt-2 pb-3 px-8'>"
    "  <h2 class='text-2xl font-bold tracking-tight'>{title}</h2>"
    "</div>"
)

CONTACT_LINE = (
    "<div class='flex items-center gap-2 text-[15px] text-neutral-800'>"
    "  <span class='shrink-0 text-neutral-500'>{label}</span>"
    "  <span>{value}</span>"
    "</div>"
)

SECTION_TEMPLATE = (
    "<section class='mb-8'>"
    "  <h3 class='text-lg font-semibold tracking-tight mb-3 border-b border-neutral-200 pb-1'>{title}</h3>"
    "{body}"
    "</section>"
)


def chip_list(tags: Iterable[str]) -> str:
    """Render tags as rounded chips, cycling through the palette."""
    chips = []
    for idx, tag in enumerate(tags):
        color = CHIP_COLORS[idx % len(CHIP_COLORS)]
        chips.append(
            "<span class='inline-flex items-center rounded-full px-3 py-1 text-xs "
            f"font-medium border border-white/60 {color}'>{escape(tag)}</span>"
        )
    return "".join(chips)


def badge(text: str) -> str:
    """Ghost badge for department/position."""
    return (
        "<span class='inline-flex items-center rounded-full border px-3 py-1 "
        "text-[13px] font-medium whitespace-nowrap leading-tight "
        f"border-neutral-300/70 bg-white/70 text-neutral-800'>{escape(text)}</span>"
    )


def live_badge(text: str) -> str:
    return (
        "<span class='inline-flex items-center gap-1.5 rounded-full border "
        "border-emerald-200 bg-emerald-50 px-3 py-1 text-[13px] font-medium "
        "text-emerald-700 whitespace-nowrap leading-tight'>"
        "<span class='h-1.5 w-1.5 rounded-full bg-emerald-500'></span>"
        f"{escape(text)}</span>"
    )


def card_list(title: str, raw: Optional[str], anchor: str) -> str:
    """Bulleted cards, one per non-blank line. Empty string when nothing to show."""
    items = split_lines(raw)
    if not items:
        return ""

    cards = "".join(
        f"<div id='{anchor}' class='rounded-lg border border-neutral-200 px-4 py-3 "
        "shadow-[0_1px_6px_rgba(0,0,0,0.04)]'>"
        f"<p class='text-[15px] leading-relaxed text-neutral-900'>{escape(item)}</p>"
        "</div>"
        for item in items
    )
    return SECTION_TEMPLATE.format(
        title=escape(title), body=f"<div class='space-y-3'>{cards}</div>"
    )


def career_list(title: str, raw: Optional[str]) -> str:
    lines = split_lines(raw)
    if not lines:
        return ""

    cards = []
    for line in lines:
        career = parse_career(line)
        badges = ""
        if has_text(career["department"]):
            badges += badge(career["department"])
        if has_text(career["position"]):
            badges += badge(career["position"])
        if is_current_period(career["period"]):
            badges += live_badge("Current")

        cards.append(
            "<article class='rounded-2xl border border-neutral-200/70 bg-white/90 px-4 py-3 "
            "sm:px-5 sm:py-4 shadow-[0_1px_8px_rgba(0,0,0,0.04)]'>"
            "<div class='grid grid-cols-[1fr_auto] items-baseline gap-3'>"
            "<h4 class='text-[18px] sm:text-lg font-semibold tracking-tight text-neutral-900 "
            f"break-words'>{escape(career['company'])}</h4>"
            f"<span class='text-[12px] tracking-wide text-neutral-500'>{escape(career['period'])}</span>"
            "</div>"
            f"<div class='mt-2 flex flex-wrap items-center gap-2'>{badges}</div>"
            "</article>"
        )

    return SECTION_TEMPLATE.format(
        title=escape(title), body=f"<div class='space-y-4'>{''.join(cards)}</div>"
    )


# ============== Resume ==============


def resume_form(resume: Resume) -> ResumeRequest:
    return ResumeRequest(
        member_code=resume.member_code,
        name=resume.name,
        gender=resume.gender,
        email=resume.email,
        phone=resume.phone,
        address=resume.address,
        summary=resume.summary,
        skills=resume.skills,
        experiences=resume.experiences,
        activities=resume.activities,
        education=resume.education,
    )


def _resume_profile(resume: Resume) -> str:
    contacts = "".join(
        CONTACT_LINE.format(label=label, value=escape(value))
        for label, value in (("Email", resume.email), ("Phone", resume.phone))
        if has_text(value)
    )
    summary = (
        f"<p class='text-[15px] leading-relaxed text-neutral-800'>{escape(resume.summary)}</p>"
        if has_text(resume.summary)
        else ""
    )
    skills = split_tags(resume.skills)
    skill_chips = (
        f"<div class='flex flex-wrap gap-2'>{chip_list(skills)}</div>" if skills else ""
    )

    return (
        "<section class='mb-8'>"
        "<div class='flex flex-col gap-2'>"
        f"<h1 class='text-3xl font-bold tracking-tight'>{escape(resume.name)}</h1>"
        "<div class='flex flex-wrap gap-x-3 gap-y-1 text-[15px] text-neutral-700'>"
        f"{escape(join_slash(resume.gender, resume.address))}"
        "</div>"
        f"{contacts}{summary}{skill_chips}"
        "</div>"
        "</section>"
    )


def _resume_footer(resume: Resume) -> str:
    if not has_text(resume.member_code):
        return ""
    link = ""
    if has_text(settings.PROFILE_GITHUB_URL):
        url = escape(settings.PROFILE_GITHUB_URL)
        label = escape(settings.PROFILE_GITHUB_URL.split("://", 1)[-1])
        link = (
            f"- GitHub: <a target='_blank' href='{url}' "
            f"style='text-decoration:none;cursor:pointer;'>[{label}]</a>"
        )
    return (
        "<div class='px-8 pb-4 pt-3 border-t border-neutral-200/80 text-sm text-neutral-500'>"
        f"{link}"
        "</div>"
    )


def render_resume(resume: Resume) -> SectionResponse:
    """Build the resume section: profile, career, activities and education."""
    content = (
        "<div class='px-8 pb-8'>"
        + _resume_profile(resume)
        + career_list("Career", resume.experiences)
        + card_list("Activities", resume.activities, "activities")
        + card_list("Education", resume.education, "education")
        + "</div>"
    )
    return SectionResponse(
        header=HEADER_TEMPLATE.format(title="Resume"),
        content=content,
        footer=_resume_footer(resume),
        metadata=ResumeSectionMetadata(form=resume_form(resume)),
    )


# ============== Experience ==============


def experience_form(experience: Experience) -> ExperienceRequest:
    form = ExperienceRequest(
        experience_code=experience.experience_code,
        name=experience.name,
        period=experience.period,
        role=experience.role,
        tech_stack=experience.tech_stack,
        keywords=experience.keywords,
        details=experience.details,
    )
    company = experience.company
    if company is not None:
        form.company_code = company.company_code
        form.company_name = company.name
        form.company_address = company.address
        form.company_phone = company.phone
        form.company_industry = company.industry
        form.company_department = company.department
        form.company_position = company.position
        form.company_salary = company.salary
    return form


def experience_display(experience: Experience) -> ExperienceDisplayItem:
    item = ExperienceDisplayItem(
        experience_code=experience.experience_code,
        title=experience.name,
        period=experience.period,
        role=experience.role,
        tech_stacks=split_tags(experience.tech_stack),
        keywords=split_tags(experience.keywords),
        details=split_details(experience.details),
    )
    company = experience.company
    if company is not None:
        item.company_name = company.name
        item.company_department = company.department
        item.company_position = company.position
        item.company_industry = company.industry
    return item


def _experience_card(item: ExperienceDisplayItem) -> str:
    subtitle = join_slash(item.company_name, item.company_department, item.company_position)
    role = (
        f"<p class='mt-1 text-[14px] text-neutral-700'>{escape(item.role)}</p>"
        if has_text(item.role)
        else ""
    )
    tech = (
        f"<div class='mt-3 flex flex-wrap gap-2'>{chip_list(item.tech_stacks)}</div>"
        if item.tech_stacks
        else ""
    )
    keywords = (
        f"<div class='mt-2 flex flex-wrap gap-2'>{chip_list(item.keywords)}</div>"
        if item.keywords
        else ""
    )
    details = ""
    if item.details:
        bullets = "".join(
            f"<li class='text-[14px] leading-relaxed text-neutral-800'>{escape(d)}</li>"
            for d in item.details
        )
        details = f"<ul class='mt-3 list-disc space-y-1 pl-5'>{bullets}</ul>"

    return (
        f"<article id='{escape(item.experience_code)}' class='rounded-2xl border "
        "border-neutral-200/70 bg-white/90 px-4 py-3 sm:px-5 sm:py-4 "
        "shadow-[0_1px_8px_rgba(0,0,0,0.04)]'>"
        "<div class='grid grid-cols-[1fr_auto] items-baseline gap-3'>"
        f"<h4 class='text-[18px] font-semibold tracking-tight text-neutral-900'>{escape(item.title)}</h4>"
        f"<span class='text-[12px] tracking-wide text-neutral-500'>{escape(item.period)}</span>"
        "</div>"
        f"<p class='text-[14px] text-neutral-500'>{escape(subtitle)}</p>"
        f"{role}{tech}{keywords}{details}"
        "</article>"
    )


def render_experiences(experiences: list[Experience]) -> SectionResponse:
    """Build the experience timeline section for rows already ordered by id."""
    timeline = [experience_display(e) for e in experiences]
    forms = [experience_form(e) for e in experiences]

    cards = "".join(_experience_card(item) for item in timeline)
    content = f"<div class='px-8 pb-8'><div class='space-y-4'>{cards}</div></div>"
    footer = (
        "<div class='px-8 pb-4 pt-3 border-t border-neutral-200/80 text-sm text-neutral-500'>"
        f"{len(timeline)} experience(s)"
        "</div>"
    )

    return SectionResponse(
        header=HEADER_TEMPLATE.format(title="Experience"),
        content=content,
        footer=footer,
        metadata=ExperienceSectionMetadata(experiences=forms, timeline=timeline),
    )
