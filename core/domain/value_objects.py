"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
from abc import ABC
from dataclasses import dataclass

IV_LENGTH = 16
AUTH_TAG_LENGTH = 16
LOOKUP_TAG_LENGTH = 64
ENVELOPE_SEPARATOR = ":"

_HEX_SEGMENT = re.compile(r"(?:[0-9a-f]{2})*")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


def _decode_hex_segment(segment: str, name: str) -> bytes:
    if not _HEX_SEGMENT.fullmatch(segment):
        raise ValueError(f"Envelope {name} is not lowercase hex")
    return bytes.fromhex(segment)


@dataclass(frozen=True, eq=False)
class LicenseKeyEnvelope(ValueObject):
    """
    Encrypted license key as stored at rest.

    Text form is ``<iv_hex>:<ciphertext_hex>:<tag_hex>`` in lowercase hex.
    """

    iv: bytes
    ciphertext: bytes
    tag: bytes

    def __post_init__(self):
        """Validate field widths."""
        if len(self.iv) != IV_LENGTH:
            raise ValueError(f"Envelope IV must be {IV_LENGTH} bytes")
        if len(self.tag) != AUTH_TAG_LENGTH:
            raise ValueError(f"Envelope tag must be {AUTH_TAG_LENGTH} bytes")

    @classmethod
    def decode(cls, text: str) -> "LicenseKeyEnvelope":
        """
        Parse the stored text form of an envelope.

        Args:
            text: Envelope string

        Returns:
            LicenseKeyEnvelope instance

        Raises:
            ValueError: If the text is not a well-formed envelope
        """
        if not isinstance(text, str):
            raise ValueError("Envelope must be a string")
        segments = text.split(ENVELOPE_SEPARATOR)
        if len(segments) != 3:
            raise ValueError("Envelope must have exactly three segments")
        iv_hex, ciphertext_hex, tag_hex = segments
        return cls(
            iv=_decode_hex_segment(iv_hex, "IV"),
            ciphertext=_decode_hex_segment(ciphertext_hex, "ciphertext"),
            tag=_decode_hex_segment(tag_hex, "tag"),
        )

    def encode(self) -> str:
        """Return the stored text form of the envelope."""
        return ENVELOPE_SEPARATOR.join(
            (self.iv.hex(), self.ciphertext.hex(), self.tag.hex())
        )

    def __str__(self) -> str:
        """Return envelope as string."""
        return self.encode()


@dataclass(frozen=True, eq=False)
class LookupTag(ValueObject):
    """Lookup tag value object (HMAC-SHA256 hex digest)."""

    value: str

    def __post_init__(self):
        """Validate tag format."""
        if (
            not isinstance(self.value, str)
            or len(self.value) != LOOKUP_TAG_LENGTH
            or not _HEX_SEGMENT.fullmatch(self.value)
        ):
            raise ValueError("Invalid lookup tag")

    def __str__(self) -> str:
        """Return tag as string."""
        return self.value
