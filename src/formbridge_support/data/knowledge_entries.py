"""
Curated knowledge base for the Ontario Works application assistant.

Load order matters: search ties are broken by position in ``ALL_ENTRIES``.
"""

from typing import List

from formbridge_support.models.knowledge import Category, KnowledgeEntry

TERMINOLOGY: List[KnowledgeEntry] = [
    KnowledgeEntry(
        id="term-benefit-unit",
        category=Category.TERMINOLOGY,
        title="Benefit Unit",
        content=(
            "A benefit unit is the group of people who receive Ontario Works together. "
            "It usually includes you, your spouse or common-law partner, and any dependent "
            "children under 18 who live with you. Roommates are NOT part of your benefit "
            "unit unless you are in a romantic relationship."
        ),
        keywords=("benefit unit", "household", "family", "dependents", "who is included"),
        related_entries=("term-common-law", "term-dependent"),
        page_context=("/form", "/form/household"),
    ),
    KnowledgeEntry(
        id="term-common-law",
        category=Category.TERMINOLOGY,
        title="Common-Law Partner",
        content=(
            "In Ontario Works, you are considered common-law after living together with a "
            "romantic partner for only 3 MONTHS. This is different from federal rules "
            "(1 year) or family law (3 years). If you live with a partner, you are likely "
            "considered common-law for OW purposes."
        ),
        keywords=("common-law", "partner", "spouse", "living together", "cohabitation", "3 months"),
        related_entries=("term-benefit-unit",),
        page_context=("/form", "/form/household"),
    ),
    KnowledgeEntry(
        id="term-asset-limit",
        category=Category.TERMINOLOGY,
        title="Asset Limits",
        content=(
            "Asset limits are the maximum value of things you own that still allow you to "
            "qualify. Single people: $10,000. Couples/families: $15,000. Exempt assets "
            "(not counted): your home, one vehicle, RDSP savings, prepaid funerals, and "
            "tools for work."
        ),
        keywords=("assets", "savings", "limit", "money", "bank account", "property", "exempt"),
        related_entries=("faq-eligibility",),
        page_context=("/form", "/form/assets"),
    ),
    KnowledgeEntry(
        id="term-gross-income",
        category=Category.TERMINOLOGY,
        title="Gross Income",
        content=(
            "Gross income means your total earnings BEFORE any deductions like taxes, EI, "
            "or CPP are taken out. Look at your pay stub - the larger number at the top is "
            "your gross pay. Net income (the smaller number) is what you actually receive."
        ),
        keywords=("gross", "income", "earnings", "before tax", "pay stub", "salary"),
        related_entries=("term-earnings-exemption",),
        page_context=("/form", "/form/income"),
    ),
    KnowledgeEntry(
        id="term-earnings-exemption",
        category=Category.TERMINOLOGY,
        title="Earnings Exemption",
        content=(
            "If you work while on Ontario Works, not all your income is counted against "
            "your benefits. The first $200 per month is completely exempt (you keep it "
            "all). After that, 50% of your remaining earnings are exempt. This encourages "
            "working while receiving assistance."
        ),
        keywords=("exemption", "earnings", "work", "employment", "200 dollars", "50 percent"),
        related_entries=("faq-work-while-receiving", "term-gross-income"),
        page_context=("/form", "/form/income"),
    ),
    KnowledgeEntry(
        id="term-sin",
        category=Category.TERMINOLOGY,
        title="Social Insurance Number (SIN)",
        content=(
            "Your SIN is a 9-digit number used by the government for taxes and benefits. "
            "Keep it private! SINs starting with 9 are for temporary residents. If you "
            "don't have a SIN, you can still apply for Ontario Works, but you should apply "
            "for one as soon as possible."
        ),
        keywords=("sin", "social insurance number", "9 digit", "identification"),
        related_entries=("rule-sin",),
        page_context=("/form", "/form/personal"),
    ),
    KnowledgeEntry(
        id="term-refugee-claimant",
        category=Category.TERMINOLOGY,
        title="Refugee Claimant",
        content=(
            "A refugee claimant is someone who has come to Canada and asked for protection "
            "because they fear persecution in their home country. Refugee claimants ARE "
            "eligible for Ontario Works while their claim is being processed. You'll need "
            "your refugee claim documents."
        ),
        keywords=("refugee", "claimant", "asylum", "protection", "persecution"),
        related_entries=("faq-eligibility", "faq-documents"),
        page_context=("/form", "/form/eligibility"),
    ),
    KnowledgeEntry(
        id="term-dependent",
        category=Category.TERMINOLOGY,
        title="Dependent Child",
        content=(
            "A dependent child is someone under 18 who lives with you and relies on you for "
            "financial support. This includes biological children, stepchildren, adopted "
            "children, and children you have legal custody of. Children 18+ are usually not "
            "dependents unless they're in school full-time."
        ),
        keywords=("dependent", "child", "children", "kids", "minor", "custody"),
        related_entries=("term-benefit-unit",),
        page_context=("/form", "/form/household"),
    ),
    KnowledgeEntry(
        id="term-caseworker",
        category=Category.TERMINOLOGY,
        title="Caseworker",
        content=(
            "A caseworker is the Ontario Works staff member assigned to your file. They "
            "review your application, meet with you to confirm your details, explain what "
            "documents are still needed, and help you build an employment plan."
        ),
        keywords=("caseworker", "case worker", "worker", "interview", "staff"),
        related_entries=("faq-how-long", "faq-documents"),
        page_context=("/form", "/"),
    ),
]

FAQS: List[KnowledgeEntry] = [
    KnowledgeEntry(
        id="faq-eligibility",
        category=Category.FAQ,
        title="Am I eligible for Ontario Works?",
        content=(
            "You may be eligible if: 1) You live in Ontario, 2) You're a Canadian citizen, "
            "permanent resident, or refugee claimant, 3) You're 18+ (or 16-17 with special "
            "circumstances), 4) You're in financial need, and 5) Your assets are below the "
            "limit ($10,000 single, $15,000 family). Apply even if you're unsure - a "
            "caseworker will help determine your eligibility."
        ),
        keywords=("eligible", "eligibility", "qualify", "requirements", "can i apply", "who can apply"),
        related_entries=("term-asset-limit", "term-refugee-claimant"),
        page_context=("/form", "/form/eligibility", "/"),
    ),
    KnowledgeEntry(
        id="faq-how-long",
        category=Category.FAQ,
        title="How long does the application take?",
        content=(
            "The online application typically takes 20-30 minutes to complete. After "
            "submitting, you'll have an interview with a caseworker within 4 business days. "
            "If approved, benefits usually start within 1-2 weeks of your application date."
        ),
        keywords=("how long", "time", "duration", "wait", "process"),
        related_entries=("term-caseworker", "guide-save-progress"),
        page_context=("/form", "/"),
    ),
    KnowledgeEntry(
        id="faq-documents",
        category=Category.FAQ,
        title="What documents do I need?",
        content=(
            "Have ready: 1) ID (health card, driver's license, passport), 2) Proof of "
            "address (utility bill, lease), 3) SIN card or number, 4) Income proof (pay "
            "stubs, EI statements), 5) Bank statements (last 3 months), 6) Rent receipt or "
            "mortgage statement. Don't have everything? Apply anyway - your caseworker can "
            "tell you exactly what's needed."
        ),
        keywords=("documents", "papers", "required", "bring", "proof"),
        related_entries=("term-sin", "term-caseworker"),
        page_context=("/form", "/"),
    ),
    KnowledgeEntry(
        id="faq-work-while-receiving",
        category=Category.FAQ,
        title="Can I work while receiving Ontario Works?",
        content=(
            "Yes! Ontario Works encourages employment. The first $200 you earn each month "
            "doesn't affect your benefits at all. After that, only 50% of additional "
            "earnings are deducted. Example: If you earn $500/month, only $150 would reduce "
            "your benefits ($500 - $200 = $300 x 50% = $150)."
        ),
        keywords=("work", "job", "employment", "earn", "part-time"),
        related_entries=("term-earnings-exemption", "term-gross-income"),
        page_context=("/form", "/form/income"),
    ),
    KnowledgeEntry(
        id="faq-denied",
        category=Category.FAQ,
        title="What if I'm denied?",
        content=(
            "If your application is denied, you have the right to appeal. You'll receive a "
            "letter explaining why. Common reasons: assets too high, missing documents, or "
            "not meeting residency requirements. You can request an internal review first, "
            "then appeal to the Social Benefits Tribunal if needed."
        ),
        keywords=("denied", "rejected", "appeal", "refused", "not approved"),
        related_entries=("faq-eligibility", "faq-documents"),
        page_context=("/form", "/"),
    ),
]

GUIDES: List[KnowledgeEntry] = [
    KnowledgeEntry(
        id="guide-form-overview",
        category=Category.GUIDE,
        title="Form Overview",
        content=(
            "The Ontario Works application has several sections: Eligibility, Household "
            "Information, Income, Assets, and Contact Information. You can save your "
            "progress at any time and return later. Click the \"Help\" button next to any "
            "question if you need assistance."
        ),
        keywords=("form", "sections", "overview", "how to", "navigate"),
        related_entries=("guide-save-progress", "guide-get-help"),
        page_context=("/form",),
    ),
    KnowledgeEntry(
        id="guide-save-progress",
        category=Category.GUIDE,
        title="Saving Your Progress",
        content=(
            "Your answers are automatically saved as you go. You can also click \"Save & "
            "Continue Later\" to get a session code. Use this code to return to your "
            "application from any device. Your data is saved securely for 30 days."
        ),
        keywords=("save", "progress", "session", "continue", "later", "code"),
        page_context=("/form",),
    ),
    KnowledgeEntry(
        id="guide-get-help",
        category=Category.GUIDE,
        title="Getting Help",
        content=(
            "Every question has a help button (?) that opens this chat assistant. You can "
            "ask me to explain the question in simpler terms, give you examples, or help "
            "you figure out your answer. Highlight any text on the form to get a plain "
            "language explanation."
        ),
        keywords=("help", "assistant", "chat", "explain", "example", "highlight"),
        page_context=("/form",),
    ),
]

PAGE_CONTEXTS: List[KnowledgeEntry] = [
    KnowledgeEntry(
        id="page-home",
        category=Category.PAGE_CONTEXT,
        title="Home",
        content="Welcome page for the Ontario Works application assistant.",
        related_entries=("faq-eligibility", "faq-how-long", "faq-documents"),
        page_context=("/",),
    ),
    KnowledgeEntry(
        id="page-form",
        category=Category.PAGE_CONTEXT,
        title="Application Form",
        content="Ontario Works online application form.",
        related_entries=("guide-form-overview", "guide-save-progress", "guide-get-help", "faq-eligibility"),
        page_context=("/form",),
    ),
    KnowledgeEntry(
        id="page-form-eligibility",
        category=Category.PAGE_CONTEXT,
        title="Eligibility Section",
        content="Confirm your eligibility for Ontario Works: residency status, age and financial need.",
        related_entries=("faq-eligibility", "term-refugee-claimant"),
        page_context=("/form/eligibility",),
    ),
    KnowledgeEntry(
        id="page-form-household",
        category=Category.PAGE_CONTEXT,
        title="Household Section",
        content="Tell us about who lives with you: marital status, dependents and other adults.",
        related_entries=("term-benefit-unit", "term-common-law", "term-dependent"),
        page_context=("/form/household",),
    ),
    KnowledgeEntry(
        id="page-form-income",
        category=Category.PAGE_CONTEXT,
        title="Income Section",
        content="Tell us about your income from all sources, including employment earnings.",
        related_entries=("term-gross-income", "term-earnings-exemption", "faq-work-while-receiving"),
        page_context=("/form/income",),
    ),
    KnowledgeEntry(
        id="page-form-assets",
        category=Category.PAGE_CONTEXT,
        title="Assets Section",
        content="Tell us about your savings, vehicles and property.",
        related_entries=("term-asset-limit",),
        page_context=("/form/assets",),
    ),
]

VALIDATION_RULES: List[KnowledgeEntry] = [
    KnowledgeEntry(
        id="rule-postal-code",
        category=Category.VALIDATION_RULE,
        title="Postal Code Rules",
        content=(
            "Must be a valid Canadian postal code (e.g., M5V 1A1): letters and numbers "
            "alternate as A1A 1A1. It must also be an Ontario postal code, which starts "
            "with K, L, M, N, or P."
        ),
        keywords=("postal code", "postal", "zip", "address"),
        page_context=("/form/personal",),
    ),
    KnowledgeEntry(
        id="rule-sin",
        category=Category.VALIDATION_RULE,
        title="Social Insurance Number Rules",
        content=(
            "Must be exactly 9 digits; enter numbers only, no dashes or spaces needed. It "
            "must pass the built-in check digit test. SINs starting with 9 indicate "
            "temporary resident status; this is informational only, not an error."
        ),
        keywords=("sin", "social insurance number", "9 digits", "invalid sin"),
        related_entries=("term-sin",),
        page_context=("/form/personal",),
    ),
    KnowledgeEntry(
        id="rule-monthly-earnings",
        category=Category.VALIDATION_RULE,
        title="Monthly Earnings Rules",
        content=(
            "Must be a positive number: enter your gross (before tax) monthly income. If "
            "you said you're employed, this should be greater than 0."
        ),
        keywords=("monthly earnings", "earnings amount", "income amount"),
        related_entries=("term-gross-income",),
        page_context=("/form/income",),
    ),
    KnowledgeEntry(
        id="rule-dependents",
        category=Category.VALIDATION_RULE,
        title="Number of Dependents Rules",
        content=(
            "Must be 0 or greater: enter the number of dependent children under 18 living "
            "with you. More than 10 dependents will require additional documentation."
        ),
        keywords=("number of dependents", "how many dependents"),
        related_entries=("term-dependent",),
        page_context=("/form/household",),
    ),
]

ALL_ENTRIES: List[KnowledgeEntry] = [
    *TERMINOLOGY,
    *FAQS,
    *GUIDES,
    *PAGE_CONTEXTS,
    *VALIDATION_RULES,
]
