"""Quick check: factor-table analysis with a trusted-employer lookup.

A lighter alternative to the ensemble. Each category awards points toward a
fixed maximum; the percentage of points earned decides the verdict, with a
more lenient cut-off when the posting names a well-known employer.
"""

import logging
import re

import numpy as np

from models.schemas.quick_check import Factor, FactorCategory, QuickCheckResult
from services.pipeline.orchestrator import make_rng
from services.vocabulary import COMMON_WORD_COMPANIES, TRUSTED_COMPANIES

logger = logging.getLogger(__name__)

_TRUSTED_PATTERNS: list[tuple[str, re.Pattern]] = [
    (
        name,
        re.compile(
            r"\b" + re.escape(name) + r"\b",
            0 if name in COMMON_WORD_COMPANIES else re.IGNORECASE,
        ),
    )
    for name in TRUSTED_COMPANIES
]

_COMPANY_WORDS = re.compile(r"company|organization|firm|corp|inc|ltd|llc", re.IGNORECASE)
_SPECIFIC_REQUIREMENTS = [
    re.compile(r"\d+\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE),
    re.compile(r"bachelor|master|degree|certification", re.IGNORECASE),
    re.compile(r"python|java|javascript|react|angular|node|sql|aws|azure", re.IGNORECASE),
]
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_CONTACT_WORDS = re.compile(r"contact|reach out|apply|email|phone", re.IGNORECASE)
_SALARY = re.compile(r"salary|compensation|pay|wage|\$\d+|₹\d+|€\d+|£\d+", re.IGNORECASE)
_BENEFITS = re.compile(r"benefits|insurance|401k|pto|vacation|health|dental", re.IGNORECASE)
_URGENT = re.compile(r"urgent|immediate|asap|right away|start immediately", re.IGNORECASE)
_TOO_GOOD = re.compile(
    r"easy money|no experience|work from home|make money fast|guaranteed", re.IGNORECASE,
)

MAX_SCORE = 25 + 15 + 12 + 10 + 13 + 15


def find_trusted_company(text: str) -> str | None:
    """First trusted employer named in ``text``.

    Whole-word and case-insensitive, except names in ``COMMON_WORD_COMPANIES``
    which must keep their capitalisation.
    """
    for name, pattern in _TRUSTED_PATTERNS:
        if pattern.search(text):
            return name
    return None


def _company_factor(company: str | None, text: str) -> Factor:
    if company:
        return Factor(
            factor="Trusted Company",
            status="good",
            description=f"Posted by {company}, a well-established and reputable company",
            weight=25,
        )
    if _COMPANY_WORDS.search(text):
        return Factor(
            factor="Company Information",
            status="warning",
            description="Company mentioned but not in our trusted companies database",
            weight=5,
        )
    return Factor(
        factor="Company Information",
        status="bad",
        description="No clear company information provided",
        weight=0,
    )


def _description_factors(text: str) -> list[Factor]:
    word_count = len(text.split())
    if 150 <= word_count <= 800:
        length = Factor(
            factor="Description Length",
            status="good",
            description=f"Appropriate length ({word_count} words)",
            weight=15,
        )
    else:
        length = Factor(
            factor="Description Length",
            status="warning",
            description=f"{'Short' if word_count < 150 else 'Long'} description ({word_count} words)",
            weight=8,
        )

    if any(p.search(text) for p in _SPECIFIC_REQUIREMENTS):
        requirements = Factor(
            factor="Specific Requirements",
            status="good",
            description="Clear technical requirements and qualifications specified",
            weight=12,
        )
    else:
        requirements = Factor(
            factor="Specific Requirements",
            status="bad",
            description="Vague or missing technical requirements",
            weight=0,
        )
    return [length, requirements]


def _contact_factor(has_direct_contact: bool, text: str) -> Factor:
    if has_direct_contact:
        return Factor(
            factor="Direct Contact Information",
            status="good",
            description="Email or phone number provided",
            weight=10,
        )
    if _CONTACT_WORDS.search(text):
        return Factor(
            factor="Contact Information",
            status="warning",
            description="General contact instructions but no direct contact details",
            weight=5,
        )
    return Factor(
        factor="Contact Information",
        status="bad",
        description="No contact information provided",
        weight=0,
    )


def _compensation_factors(has_salary: bool, has_benefits: bool) -> list[Factor]:
    salary = (
        Factor(factor="Salary Information", status="good",
               description="Salary or compensation details mentioned", weight=8)
        if has_salary else
        Factor(factor="Salary Information", status="warning",
               description="No salary information provided", weight=2)
    )
    benefits = (
        Factor(factor="Benefits Package", status="good",
               description="Benefits and perks mentioned", weight=5)
        if has_benefits else
        Factor(factor="Benefits Package", status="warning",
               description="No benefits information provided", weight=1)
    )
    return [salary, benefits]


def _red_flag_factors(urgent: bool, too_good: bool) -> list[Factor]:
    tone = (
        Factor(factor="Urgent Language", status="bad",
               description="Contains urgent or pressure language", weight=0)
        if urgent else
        Factor(factor="Professional Tone", status="good",
               description="No excessive urgency or pressure language", weight=8)
    )
    claims = (
        Factor(factor="Unrealistic Claims", status="bad",
               description="Contains too-good-to-be-true language", weight=0)
        if too_good else
        Factor(factor="Realistic Expectations", status="good",
               description="No unrealistic promises or claims", weight=7)
    )
    return [tone, claims]


def _summary(company: str | None, pct: int) -> str:
    if company:
        if pct >= 70:
            return (f"This appears to be a legitimate job posting from {company}, a trusted "
                    f"company. The posting meets most quality standards.")
        if pct >= 40:
            return (f"This job posting is from {company}, a reputable company, but has some "
                    f"areas that could be improved for clarity.")
        return (f"While this is posted by {company}, a trusted company, the job description "
                f"lacks important details and may need verification.")
    if pct >= 75:
        return ("This appears to be a legitimate job posting with comprehensive details and "
                "professional presentation.")
    if pct >= 60:
        return ("This job posting shows mixed signals. While it has some good elements, there "
                "are areas of concern that warrant caution.")
    return ("This job posting shows several red flags and characteristics commonly associated "
            "with ghost jobs or low-quality postings.")


def quick_check(text: str, rng: np.random.Generator | None = None) -> QuickCheckResult:
    """Run the factor-table check on one posting."""
    if rng is None:
        rng = make_rng()

    company = find_trusted_company(text)
    has_direct_contact = bool(_EMAIL.search(text) or _PHONE.search(text))
    has_salary = bool(_SALARY.search(text))
    urgent = bool(_URGENT.search(text))

    factors = [
        FactorCategory(category="Company Verification", items=[_company_factor(company, text)]),
        FactorCategory(category="Job Description Quality", items=_description_factors(text)),
        FactorCategory(category="Contact & Application",
                       items=[_contact_factor(has_direct_contact, text)]),
        FactorCategory(category="Compensation & Benefits",
                       items=_compensation_factors(has_salary, bool(_BENEFITS.search(text)))),
        FactorCategory(category="Red Flags Assessment",
                       items=_red_flag_factors(urgent, bool(_TOO_GOOD.search(text)))),
    ]

    total = sum(item.weight for category in factors for item in category.items)
    pct = round(total / MAX_SCORE * 100)
    confidence = max(60.0, min(95.0, pct + float(rng.uniform()) * 10))
    is_ghost = pct < (40 if company else 60)

    recs: list[str] = []
    if company:
        recs.append(f"Verified company: {company} is a well-established, reputable organization")
    else:
        recs.append("Research the company thoroughly - check their website, LinkedIn, and recent news")
    if not has_salary:
        recs.append("Ask about salary range during initial conversations")
    if not has_direct_contact:
        recs.append("Request direct contact information from the hiring manager")
    if urgent:
        recs.append("Be cautious of jobs with excessive urgency - legitimate roles usually "
                    "have proper hiring timelines")
    recs.append("Prepare specific questions about day-to-day responsibilities and team structure")
    recs.append("Tailor your application to address the specific requirements mentioned")

    logger.info("Quick check: score=%d%% trusted=%s ghost=%s", pct, company, is_ghost)

    return QuickCheckResult(
        is_ghost_job=is_ghost,
        confidence=round(confidence),
        score_percentage=pct,
        trusted_company=company,
        factors=factors,
        summary=_summary(company, pct),
        recommendations=recs,
    )
