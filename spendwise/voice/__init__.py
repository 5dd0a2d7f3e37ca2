"""Mini README: Voice-driven transaction entry.

Turns a speech transcript into a candidate ``TransactionDraft`` that callers
show for confirmation and then pass unchanged to
``LedgerEngine.add_transaction``. No speech recognition happens here; the
transcript arrives as text from whatever client captured the audio.
"""

from .parser import TranscriptError, TranscriptParse, parse_transcript

__all__ = ["TranscriptError", "TranscriptParse", "parse_transcript"]
