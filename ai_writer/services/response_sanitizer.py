"""Cleanup of conversational filler around generated markdown."""

from typing import Iterable, Optional, Sequence, Tuple

DEFAULT_BLOCKLIST: Tuple[str, ...] = (
    "here's",
    "here is",
    "based on your",
    "ready for you",
    "please find",
    "i've created",
    "i have created",
    "draft",
    "customize",
    "specific details",
    "hope this helps",
    "let me know",
    "feel free to",
)

DEFAULT_MARKERS: Tuple[str, ...] = ("#", "-", "*", "1.", ">")


class ResponseSanitizer:
    """Strip meta commentary ("Here's your draft...") from model output.

    Lines containing a blocklisted phrase are dropped whole, case-insensitively.
    Anything before the first markdown structural line is then treated as
    leftover preamble and removed as well.
    """

    def __init__(
        self,
        blocklist: Optional[Iterable[str]] = None,
        markers: Optional[Sequence[str]] = None,
    ):
        phrases = DEFAULT_BLOCKLIST if blocklist is None else blocklist
        self.blocklist = tuple(phrase.lower() for phrase in phrases)
        self.markers = tuple(DEFAULT_MARKERS if markers is None else markers)

    def is_filler(self, line: str) -> bool:
        lowered = line.lower()
        return any(phrase in lowered for phrase in self.blocklist)

    def is_structural(self, line: str) -> bool:
        return line.startswith(self.markers)

    def sanitize(self, raw_text: str) -> str:
        lines = [line for line in raw_text.split("\n") if not self.is_filler(line)]

        for index, line in enumerate(lines):
            if self.is_structural(line):
                lines = lines[index:]
                break

        return "\n".join(lines).strip()


_default_sanitizer = ResponseSanitizer()


def sanitize(raw_text: str) -> str:
    """Sanitize text with the default blocklist and markers."""
    return _default_sanitizer.sanitize(raw_text)
