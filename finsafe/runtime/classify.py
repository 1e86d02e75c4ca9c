# finsafe/runtime/classify.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List

DEFAULT_SAFETY_TIPS: tuple[str, ...] = (
    "Verify the sender's identity through official channels",
    "Look for spelling and grammar errors which are common in scams",
    "Check if the offer seems too good to be true (it probably is)",
    "Contact the organization directly using contact info from their official website",
    "Never share OTP, PIN, or password with anyone",
)

_EXPLANATION_LABEL_RE = re.compile(r"^explanation\s*:?\s*", re.I)
_NUMBERED_RE = re.compile(r"^[0-9]+\.\s*")
_BULLETS = ("-", "•", "*")

_RISK_TERMS = ("scam", "fraud", "suspicious", "dangerous", "malicious")
_CERTAINTY_TERMS = ("likely", "probably", "high risk")


class Section(Enum):
    NONE = "none"
    EXPLANATION = "explanation"
    SAFETY_TIPS = "safety_tips"


@dataclass(frozen=True)
class Verdict:
    label: str
    badge: str
    text: str


POSSIBLY_SAFE = Verdict("Possibly Safe", "safe", "This message appears to be safe")
SUSPICIOUS = Verdict(
    "Suspicious", "warning",
    "⚠️ This message contains suspicious elements - proceed with caution",
)
LIKELY_SCAM = Verdict(
    "Likely Scam", "danger",
    "⚠️ DANGER! This message shows strong signs of being a financial scam",
)


@dataclass
class ParsedResult:
    explanation: str = ""
    safety_tips: List[str] = field(default_factory=list)


def _tip_from_line(line: str) -> str | None:
    if line.startswith(_BULLETS):
        return line[1:].strip()
    if _NUMBERED_RE.match(line):
        return _NUMBERED_RE.sub("", line).strip()
    return None


def parse_reply(text: str) -> ParsedResult:
    """Split a free-form model reply into an explanation paragraph and a tips list.

    Lines are scanned once, in order. An "Explanation" line opens the
    explanation section (its remainder seeds the paragraph), a "Safety tips"
    line opens the tips section. Inside the tips section only bulleted or
    numbered lines count. An empty tips list is replaced by DEFAULT_SAFETY_TIPS.
    """
    section = Section.NONE
    explanation = ""
    tips: List[str] = []

    for raw in (text or "").split("\n"):
        line = raw.strip()
        lowered = line.lower()

        if lowered.startswith("explanation"):
            section = Section.EXPLANATION
            explanation = _EXPLANATION_LABEL_RE.sub("", line)
        elif lowered.startswith("safety tips"):
            section = Section.SAFETY_TIPS
        elif not line:
            continue
        elif section is Section.EXPLANATION:
            explanation += " " + line
        elif section is Section.SAFETY_TIPS:
            tip = _tip_from_line(line)
            if tip is not None:
                tips.append(tip)

    return ParsedResult(
        explanation=explanation.strip(),
        safety_tips=tips or list(DEFAULT_SAFETY_TIPS),
    )


def infer_verdict(text: str) -> Verdict:
    """Keyword verdict shared by the scam-check and scam-alert paths."""
    lowered = (text or "").lower()
    if any(term in lowered for term in _RISK_TERMS):
        if any(term in lowered for term in _CERTAINTY_TERMS):
            return LIKELY_SCAM
        return SUSPICIOUS
    return POSSIBLY_SAFE
