"""
Message enhancer.
Rewrites an informal contact message so it reads more professionally.

The rewrite is a fixed pipeline of small text steps (see STEPS); each one
takes a string and returns a new string, so they can be tested one by one.
"""
import re

LEAD_IN = "I'm reaching out regarding a design project. "
CLOSING = "I look forward to hearing from you."

_GREETING_RE   = re.compile(r"^(hi|hello|hey|good|greetings)", re.IGNORECASE)
_UNFINISHED_RE = re.compile(r"([^.!?\s])(\s*)\Z")
_BULLET_RE     = re.compile(r"[-•]\s+")
_CLOSING_RE    = re.compile(r"thanks|regards|appreciate|looking forward", re.IGNORECASE)

# Applied in this order over the evolving text
PHRASES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\bi want\b",      re.IGNORECASE), "I'm interested in"),
    (re.compile(r"\bcan you\b",     re.IGNORECASE), "Would you be able to"),
    (re.compile(r"\byou should\b",  re.IGNORECASE), "I'd appreciate if you could"),
    (re.compile(r"\breally good\b", re.IGNORECASE), "exceptional"),
    (re.compile(r"\bnice\b",        re.IGNORECASE), "professional"),
    (re.compile(r"\bcool\b",        re.IGNORECASE), "impressive"),
    (re.compile(r"\bsoon\b",        re.IGNORECASE), "at your earliest convenience"),
]


def add_lead_in(text: str) -> str:
    if _GREETING_RE.match(text):
        return text
    return LEAD_IN + text


def add_terminal_punctuation(text: str) -> str:
    """Put a period after the last non-whitespace character unless it is . ! or ?"""
    return _UNFINISHED_RE.sub(r"\1.\2", text, count=1)


def normalize_bullets(text: str) -> str:
    return _BULLET_RE.sub("• ", text)


def formalize_phrases(text: str) -> str:
    for pattern, replacement in PHRASES:
        text = pattern.sub(replacement, text)
    return text


def add_closing(text: str) -> str:
    if _CLOSING_RE.search(text):
        return text
    return f"{text}\n\n{CLOSING}"


STEPS = [
    add_lead_in,
    add_terminal_punctuation,
    normalize_bullets,
    formalize_phrases,
    add_closing,
]


def enhance(text: str) -> str:
    """Return a more professional version of *text*.

    Empty or whitespace-only input is returned unchanged.
    """
    if not text.strip():
        return text
    for step in STEPS:
        text = step(text)
    return text
