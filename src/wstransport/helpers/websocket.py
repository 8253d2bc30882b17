"""WebSocket sub-protocol token rules."""

from dataclasses import dataclass
from typing import Optional, Tuple

# Separators from the HTTP token grammar, plus space and horizontal tab
HTTP_SEPARATORS = '()<>@,;:\\"/[]?={} \t'
PROTOCOL_SEPARATORS: Tuple[str, ...] = (",",)


@dataclass(frozen=True)
class SubProtocolValidator:
    """
    Classifies characters of a sub-protocol token.

    A valid token is printable ASCII (0x21-0x7E) without any character from
    ``invalid_chars``. A value that splits on any of ``separators`` names more
    than one sub-protocol.
    """

    separators: Tuple[str, ...] = PROTOCOL_SEPARATORS
    invalid_chars: str = HTTP_SEPARATORS
    min_code_point: int = 0x21
    max_code_point: int = 0x7E

    def split(self, value: str) -> list:
        parts = [value]
        for separator in self.separators:
            parts = [piece for part in parts for piece in part.split(separator)]
        return parts

    def contains_multiple(self, value: str) -> bool:
        """Return True if value splits into more than one sub-protocol."""
        return len(self.split(value)) > 1

    def find_invalid_char(self, value: str) -> Optional[str]:
        """
        Find the first character not allowed in a sub-protocol token.

        Args:
            value: Candidate sub-protocol

        Returns:
            The offending character, ``[<code point>]`` for non-printable
            characters, or None if every character is allowed
        """
        for char in value:
            code = ord(char)
            if code < self.min_code_point or code > self.max_code_point:
                return f"[{code}]"
            if char in self.invalid_chars:
                return char
        return None


DEFAULT_SUBPROTOCOL_VALIDATOR = SubProtocolValidator()
