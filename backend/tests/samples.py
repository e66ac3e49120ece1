"""Sample postings shared across test modules."""

LEGIT_POSTING = """Senior Python Developer at Acme Analytics

About us: Acme Analytics is a data company whose mission is to help hospitals plan staffing. Visit our website at acme-analytics.com.

Responsibilities:
- Develop and maintain Python services and a SQL database layer.
- Collaborate with the data team and communicate design decisions.
- Implement API integrations and evaluate new frameworks.

Requirements and qualifications:
- 5 years of experience with Python and Docker.
- Degree in Computer Science or equivalent education.
- Proficient in SQL and familiar with AWS.
- Knowledge of Kubernetes is a plus.

Compensation: $120,000 - $140,000 per year. Benefits include health insurance, 401k matching, dental, vision and 20 days PTO.

To apply, submit your resume and cover letter through our online application or email jobs@acme-analytics.com. Our recruiter will reply within one week. The interview process has three stages and the planned start date is March 1."""

GHOST_POSTING = (
    "URGENT!!! Immediate start, make easy money from home. No experience needed, "
    "unlimited earning potential. Act now, this exclusive offer is for a limited time only. "
    "Apply now and start today! Contact fastcashjobs@gmail.com"
)

PATHOLOGICAL_INPUTS = [
    "",
    "   ",
    "\n\n\t",
    "!!!???...",
    "a.",
    "$",
    "flexible-dynamic-innovative-basic",
    "great excellent amazing fantastic wonderful outstanding",
    "x" * 5000,
    "word " * 400,
]
