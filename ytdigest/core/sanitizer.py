"""
Module for stripping conversational preambles from generated summaries.

Rules are plain data: an ordered list of (name, compiled pattern) pairs, each
anchored at the start of the text (or at each line start for the multi-line
rules) and applied exactly once, in order. Extending the locale coverage
means adding rules, not code.
"""

import re
from typing import List, Pattern, Tuple

SanitizeRule = Tuple[str, Pattern]

# Lines starting with one of these are structured markup and are left alone
STRUCTURED_MARKERS = "#*\\-•🎯🎙️"

_I = re.IGNORECASE
_IM = re.IGNORECASE | re.MULTILINE


def _rule(name: str, pattern: str, flags: int = _I) -> SanitizeRule:
    return name, re.compile(pattern, flags)


SANITIZE_RULES: List[SanitizeRule] = [
    # English
    _rule("en_lead_in_comma",
          r"^(Okay|Here'?s?( is)?|Let me|I will|I'll|I can|I would|I am going to|Allow me to|Sure|Of course|Certainly|Alright)[\s\S]*?,\s*"),
    _rule("en_lead_in_keyword",
          r"^(Here'?s?( is)?|I'?ll?|Let me|I will|I can|I would|I am going to|Allow me to|Sure|Of course|Certainly)[\s\S]*?(summary|translate|breakdown|analysis).*?:\s*"),
    _rule("en_based_on", r"^(Based on|According to).*?,\s*"),
    _rule("en_understand", r"^I understand.*?[.!]\s*"),
    _rule("en_opener", r"^(Now|First|Let's)\b,?\s*"),
    _rule("en_announcement", r"^(Here are|The following is|This is|Below is).*?:\s*"),
    _rule("en_offer", r"^(I'll provide|Let me break|I'll break|I'll help|I've structured).*?:\s*"),
    _rule("en_as_requested", r"^(As requested|Following your|In response to).*?:\s*"),
    # German
    _rule("de_lead_in_comma",
          r"^(Okay|Hier( ist)?|Lass mich|Ich werde|Ich kann|Ich würde|Ich möchte|Erlauben Sie mir|Sicher|Natürlich|Gewiss|In Ordnung)[\s\S]*?,\s*"),
    _rule("de_lead_in_keyword",
          r"^(Hier( ist)?|Ich werde|Lass mich|Ich kann|Ich würde|Ich möchte)[\s\S]*?(Zusammenfassung|Übersetzung|Analyse).*?:\s*"),
    _rule("de_based_on", r"^(Basierend auf|Laut|Gemäß).*?,\s*"),
    _rule("de_understand", r"^Ich verstehe.*?[.!]\s*"),
    _rule("de_opener", r"^(Jetzt|Zunächst|Lass uns)\b,?\s*"),
    _rule("de_announcement", r"^(Hier sind|Folgendes|Dies ist|Im Folgenden).*?:\s*"),
    _rule("de_offer", r"^(Ich werde|Lass mich|Ich helfe|Ich habe strukturiert).*?:\s*"),
    _rule("de_as_requested", r"^(Wie gewünscht|Entsprechend Ihrer|Als Antwort auf).*?:\s*"),
    # Any line
    _rule("line_label", rf"^[^:\n{STRUCTURED_MARKERS}]+:\s*", _IM),
    _rule("line_number", rf"^(?![{STRUCTURED_MARKERS}])[ \t\d]+\.\s*", _IM),
]


def apply_rules(text: str, rules: List[SanitizeRule]) -> str:
    """Apply each rule once, in order, and trim the result."""
    for _name, pattern in rules:
        text = pattern.sub("", text)
    return text.strip()


def sanitize_output(text: str) -> str:
    """
    Remove provider preambles and leading labels from generated text.

    This is a best-effort heuristic; some residual preamble text may remain.
    """
    if not text:
        return ""
    return apply_rules(text, SANITIZE_RULES)
