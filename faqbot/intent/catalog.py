"""Hand-authored intent catalog for the Stimulus site.

The catalog should remain small and deterministic. Entry order matters: on equal scores the
earlier intent wins. "services" and "contact" both list `support`, so that word alone is a tie.
"""

from __future__ import annotations

from dataclasses import dataclass

from faqbot.intent.schema import IntentTable, intent_table_from_obj

CONSULTING = "consulting"
RECRUITMENT = "recruitment"
SERVICES = "services"
FALLBACK = "fallback"
SERVICES_FOLLOWUP = "services_followup"

SERVICES_QUESTION = "Are you interested in Consulting or Recruitment?"
SERVICES_SHORT_QUESTION = "Consulting or Recruitment?"


@dataclass(frozen=True)
class SiteLinks:
    """Absolute URLs embedded in replies."""

    home: str
    services: str
    consulting: str
    recruitment: str
    register: str
    contact: str
    about: str
    email: str

    @classmethod
    def from_base_url(cls, base_url: str, *, email: str) -> SiteLinks:
        base = base_url.rstrip("/")
        return cls(
            home=f"{base}/",
            services=f"{base}/services",
            consulting=f"{base}/services#consulting",
            recruitment=f"{base}/services#recruitment",
            register=f"{base}/register",
            contact=f"{base}/contact",
            about=f"{base}/about",
            email=email,
        )


@dataclass(frozen=True)
class SuggestedTopic:
    """A clickable starter prompt for the chat widget."""

    label: str
    message: str


SUGGESTED_TOPICS: tuple[SuggestedTopic, ...] = (
    SuggestedTopic(label="Services", message="What services do you offer?"),
    SuggestedTopic(label="Consulting", message="Tell me about consulting"),
    SuggestedTopic(label="Recruitment", message="Can you help us hire?"),
    SuggestedTopic(label="Register", message="How do I register?"),
    SuggestedTopic(label="Contact", message="How can I contact you?"),
    SuggestedTopic(label="About", message="Who are you?"),
)


def _link(url: str, label: str) -> str:
    return f'<a href="{url}" target="_blank">{label}</a>'


def build_intent_table(links: SiteLinks) -> IntentTable:
    """Build and validate the intent table for the given site links.

    Raises:
        IntentTableError: If the catalog violates a table invariant.
    """

    return intent_table_from_obj(
        {
            "intents": [
                {
                    "id": "register",
                    "keywords": ["register", "signup", "enroll", "join"],
                    "synonyms": ["sign", "apply"],
                    "replies": [
                        f"You can register here: {_link(links.register, links.register)}.",
                        "To get started, visit "
                        f"{_link(links.register, 'the registration page')} and submit the form.",
                    ],
                },
                {
                    "id": SERVICES,
                    "keywords": ["services", "offer", "offers", "solutions", "support", "help"],
                    "synonyms": ["service", "do", "provide"],
                    "replies": [
                        "We offer Business Consulting, Recruitment, and Advisory. "
                        f"Details: {_link(links.services, 'Services')}.",
                        "Our core services: Consulting, Recruitment, and Advisory — "
                        f"see {_link(links.services, 'Services')}.",
                    ],
                    "followup": SERVICES_QUESTION,
                },
                {
                    "id": CONSULTING,
                    "keywords": ["consulting", "consult"],
                    "synonyms": ["strategy", "gtm", "operations"],
                    "replies": [
                        "Consulting covers strategy, GTM, and operations. "
                        f"Learn more: {_link(links.consulting, 'Consulting')}.",
                    ],
                },
                {
                    "id": RECRUITMENT,
                    "keywords": ["recruitment", "recruiting", "hire", "hiring", "talent"],
                    "replies": [
                        "Recruitment spans sourcing to selection. "
                        f"See details: {_link(links.recruitment, 'Recruitment')}.",
                    ],
                },
                {
                    "id": "contact",
                    "keywords": ["contact", "email", "reach", "support", "helpdesk"],
                    "replies": [
                        f"Reach us at <strong>{links.email}</strong> or via "
                        f"{_link(links.contact, 'Contact')}.",
                    ],
                },
                {
                    "id": "about",
                    "keywords": ["about", "company", "who", "what"],
                    "replies": [
                        "Stimulus is a consulting firm (founded 2025) helping businesses grow "
                        f"smarter. More: {_link(links.about, 'About')}.",
                    ],
                },
                {
                    "id": "home",
                    "keywords": ["home", "homepage", "start"],
                    "replies": [
                        f"Explore the homepage: {_link(links.home, links.home)}.",
                    ],
                },
            ]
        }
    )


def suggested_actions_html(links: SiteLinks) -> str:
    """Static next-step links appended to the fallback reply."""

    return " · ".join(
        (
            _link(links.services, "Services"),
            _link(links.register, "Register"),
            _link(links.contact, "Contact"),
        )
    )
