"""Closed vocabularies used by feature extraction, scoring and the quick check.

All lists are lower-case phrases matched as substrings of the lower-cased
posting unless the consumer says otherwise. Bump VOCABULARY_VERSION whenever
a list changes, since every downstream score shifts with it.
"""

VOCABULARY_VERSION = "1.1.0"

# ---------------------------------------------------------------------------
# Text features
# ---------------------------------------------------------------------------
GHOST_KEYWORDS: frozenset[str] = frozenset({
    "unlimited earning", "no experience required", "work from home", "easy money",
    "immediate start", "urgent", "asap", "competitive salary", "great opportunity",
    "flexible schedule", "part-time", "full-time", "make money fast", "quick cash",
})

LEGITIMATE_KEYWORDS: frozenset[str] = frozenset({
    "responsibilities", "requirements", "qualifications", "experience", "skills",
    "education", "degree", "certification", "team", "manager", "department",
    "benefits", "health insurance", "401k", "pto", "vacation", "growth",
})

VAGUE_TERMS: frozenset[str] = frozenset({
    "various", "multiple", "different", "several", "many", "some", "other",
    "general", "basic", "simple", "easy", "flexible", "dynamic", "innovative",
})

URGENT_TERMS: frozenset[str] = frozenset({
    "urgent", "immediate", "asap", "right away", "quickly", "fast", "soon",
    "now hiring", "immediate start", "start today", "apply now", "easy money",
})

TECHNICAL_TERMS: frozenset[str] = frozenset({
    "python", "javascript", "react", "angular", "node", "sql", "aws", "docker",
    "kubernetes", "git", "api", "database", "framework", "algorithm", "machine learning",
})

BUZZWORDS: frozenset[str] = frozenset({
    "synergy", "paradigm", "disruptive", "innovative", "cutting-edge", "dynamic",
    "fast-paced", "rockstar", "ninja", "guru", "unicorn", "game-changer",
})

SPECIFIC_PHRASES: frozenset[str] = frozenset({
    "years of experience", "degree in", "certification", "proficient in",
    "experience with", "knowledge of", "skilled in", "familiar with",
})

POSITIVE_WORDS: frozenset[str] = frozenset({
    "great", "excellent", "amazing", "fantastic", "wonderful", "outstanding",
})

NEGATIVE_WORDS: frozenset[str] = frozenset({
    "difficult", "challenging", "hard", "tough", "demanding",
})

# ---------------------------------------------------------------------------
# Meta and behavioral features
# ---------------------------------------------------------------------------
REQUIREMENT_PHRASES: frozenset[str] = frozenset({
    "requirements", "qualifications", "must have", "required",
    "experience", "skills", "education", "degree",
})

NAMED_BENEFITS: frozenset[str] = frozenset({
    "health insurance", "401k", "dental", "vision", "pto", "vacation",
    "sick leave", "retirement", "stock options", "bonus",
})

PROCESS_PHRASES: frozenset[str] = frozenset({
    "apply", "application", "resume", "cv", "cover letter",
    "submit", "send", "email", "online application",
})

MONTH_NAMES: frozenset[str] = frozenset({
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
})

# ---------------------------------------------------------------------------
# Linguistic features
# ---------------------------------------------------------------------------
PROFESSIONAL_WORDS: frozenset[str] = frozenset({
    "responsible", "manage", "develop", "implement", "coordinate",
    "analyze", "evaluate", "collaborate", "communicate", "leadership",
})

CASUAL_WORDS: frozenset[str] = frozenset({
    "awesome", "cool", "fun", "chill", "laid-back", "casual",
})

EMOTIONAL_WORDS: frozenset[str] = frozenset({
    "excited", "passionate", "love", "hate", "amazing", "terrible",
    "fantastic", "awful", "incredible", "devastating",
})

PRESSURE_PHRASES: frozenset[str] = frozenset({
    "limited time", "act now", "don't miss", "exclusive", "special offer",
    "once in a lifetime", "urgent", "immediate", "hurry",
})

# ---------------------------------------------------------------------------
# Raw-text scorers: phrase -> points
# ---------------------------------------------------------------------------
CONTEXTUAL_POSITIVE: dict[str, int] = {
    "responsibilities": 20,
    "qualifications": 20,
    "experience": 15,
    "team": 10,
    "company": 10,
    "benefits": 15,
}
CONTEXTUAL_SALARY_POINTS = 10  # "salary" or "$"

CONTEXTUAL_NEGATIVE: dict[str, int] = {
    "urgent": 15,
    "immediate": 15,
    "easy money": 20,
    "no experience": 10,
}

# Whole-token matches, not substrings
EMBEDDING_LEGITIMATE_TOKENS: frozenset[str] = frozenset({
    "experience", "skills", "team", "company", "benefits",
})
EMBEDDING_GHOST_TOKENS: frozenset[str] = frozenset({
    "urgent", "immediate", "easy", "unlimited",
})

# ---------------------------------------------------------------------------
# Quick check: well-established employers, matched on word boundaries
# ---------------------------------------------------------------------------
TRUSTED_COMPANIES: tuple[str, ...] = (
    # Indian IT
    "TCS", "Tata Consultancy Services", "Infosys", "Wipro", "HCL Technologies", "HCL Tech",
    "Tech Mahindra", "Cognizant", "Mindtree", "LTI", "L&T Infotech", "Mphasis", "Hexaware",
    "Persistent Systems",
    # Global tech
    "Google", "Microsoft", "Apple", "Amazon", "Meta", "Facebook", "Netflix", "Tesla", "Uber",
    "Airbnb", "Salesforce", "Oracle", "SAP", "Adobe", "Intel", "NVIDIA", "AMD", "Qualcomm",
    "Cisco", "VMware", "ServiceNow", "Snowflake", "Palantir", "Databricks", "Stripe", "Square",
    "PayPal", "eBay",
    # Consulting and professional services
    "McKinsey", "BCG", "Boston Consulting Group", "Bain", "Deloitte", "PwC", "EY", "KPMG",
    "Accenture", "IBM", "Capgemini", "Atos", "DXC Technology", "NTT Data", "Fujitsu",
    # Financial services
    "JPMorgan Chase", "Goldman Sachs", "Morgan Stanley", "Bank of America", "Wells Fargo",
    "Citigroup", "American Express", "Visa", "Mastercard", "BlackRock", "Fidelity",
    "Charles Schwab",
    # Retail
    "Walmart", "Target", "Home Depot", "Costco", "Best Buy", "Shopify", "Etsy", "Wayfair",
    # Healthcare
    "Johnson & Johnson", "Pfizer", "Merck", "Abbott", "Medtronic", "UnitedHealth", "Anthem",
    # Automotive
    "Ford", "General Motors", "Toyota", "Honda", "BMW", "Mercedes-Benz", "Volkswagen", "Nissan",
    # Aerospace and defense
    "Boeing", "Lockheed Martin", "Raytheon", "Northrop Grumman", "General Dynamics",
    # Media
    "Disney", "Warner Bros", "Sony", "Universal", "Paramount", "Fox", "CBS", "NBC",
    # Telecom
    "Verizon", "AT&T", "T-Mobile", "Sprint", "Comcast", "Charter Communications",
    # Energy
    "ExxonMobil", "Chevron", "Shell", "BP", "ConocoPhillips", "General Electric", "Siemens",
    # Indian conglomerates
    "Reliance", "Tata Group", "Aditya Birla Group", "Mahindra Group", "Bajaj Group", "Godrej",
    "ITC", "Larsen & Toubro", "HDFC", "ICICI", "SBI", "Axis Bank",
    # Established startups
    "Spotify", "Slack", "Zoom", "Dropbox", "Box", "Atlassian", "Twilio", "MongoDB", "Elastic",
    "Okta", "CrowdStrike", "Zscaler", "Palo Alto Networks", "Fortinet",
    "Flipkart", "Paytm", "Zomato", "Swiggy", "Ola", "Byju's", "Unacademy", "PhonePe",
    "Razorpay", "Freshworks", "Zoho", "InMobi", "Mu Sigma", "Fractal Analytics",
)

# Employer names that are also ordinary words; these only match as capitalised.
COMMON_WORD_COMPANIES: frozenset[str] = frozenset({
    "Apple", "Box", "Elastic", "Fidelity", "Fox", "Meta", "Reliance", "Shell",
    "Slack", "Sprint", "Square", "Target", "Universal", "Visa", "Zoom",
})


def count_hits(text: str, vocabulary: frozenset[str]) -> int:
    """Number of vocabulary phrases occurring anywhere in ``text`` (already lower-cased)."""
    return sum(1 for phrase in vocabulary if phrase in text)
