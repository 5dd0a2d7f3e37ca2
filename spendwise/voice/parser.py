"""Mini README: Keyword-based transcript parser.

Structure:
    * CATEGORY_KEYWORDS - ordered keyword rules, first match wins.
    * TranscriptParse - parsed candidate plus which rule fired.
    * parse_transcript - builds the candidate draft from raw text.

Amounts are read from the first rupee-prefixed number (``₹250``). Missing
amounts fall back to zero; the ledger engine decides what to do with them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Tuple

from ..finance.ledger import TransactionDraft, TransactionType
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

AMOUNT_PATTERN = re.compile(r"₹\s?(\d+(?:\.\d+)?)")

INCOME_KEYWORDS: Tuple[str, ...] = ("income", "earn")
INCOME_CATEGORY = "Salary"
FALLBACK_CATEGORY = "Other"

CATEGORY_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("food", "lunch"), "Food"),
    (("transport", "uber"), "Transportation"),
    (("shopping", "clothes"), "Shopping"),
    (("saving",), "Savings"),
)


class TranscriptError(ValueError):
    """Raised when a transcript has nothing to parse."""


@dataclass(frozen=True, slots=True)
class TranscriptParse:
    transcript: str
    draft: TransactionDraft
    matched_keyword: Optional[str]
    amount_found: bool

    def as_dict(self) -> Dict[str, object]:
        return {
            "transcript": self.transcript,
            "amount": self.draft.amount,
            "category": self.draft.category,
            "description": self.draft.description,
            "occurred_on": self.draft.occurred_on.isoformat(),
            "transaction_type": self.draft.transaction_type.value,
            "matched_keyword": self.matched_keyword,
            "amount_found": self.amount_found,
        }


def _first_keyword(text: str, keywords: Tuple[str, ...]) -> Optional[str]:
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def parse_transcript(text: str, *, now: Optional[datetime] = None) -> TranscriptParse:
    """Parse a spoken sentence such as "Spent ₹250 on lunch" into a draft."""

    if not text or not text.strip():
        raise TranscriptError("Transcript is empty.")

    lowered = text.lower()
    match = AMOUNT_PATTERN.search(text)
    amount = float(match.group(1)) if match else 0.0
    if not math.isfinite(amount):
        raise TranscriptError(f"Spoken amount is too large: {match.group(1)[:20]}...")

    transaction_type = TransactionType.EXPENSE
    category = FALLBACK_CATEGORY
    matched = _first_keyword(lowered, INCOME_KEYWORDS)
    if matched:
        transaction_type = TransactionType.INCOME
        category = INCOME_CATEGORY
    else:
        for keywords, label in CATEGORY_KEYWORDS:
            matched = _first_keyword(lowered, keywords)
            if matched:
                category = label
                break

    draft = TransactionDraft(
        amount=amount,
        category=category,
        description=text,
        occurred_on=now or datetime.now(),
        transaction_type=transaction_type,
    )
    LOGGER.debug(
        "Parsed transcript into %s %.2f in %s (keyword=%s)",
        transaction_type.value,
        amount,
        category,
        matched,
    )
    return TranscriptParse(
        transcript=text,
        draft=draft,
        matched_keyword=matched,
        amount_found=match is not None,
    )
