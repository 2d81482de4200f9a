from dataclasses import dataclass

from .errors import ErrorKind, SectorError

MAX_PACKED = 0xFFFFFF


@dataclass(frozen=True)
class Colour:
    """An RGB colour with 8 bit channels."""

    r: int
    g: int
    b: int

    @classmethod
    def from_packed(cls, value: int) -> 'Colour':
        """Decode an integer packed as 0xRRGGBB."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def parse(cls, token: str) -> 'Colour':
        """
        Parse a literal colour value.

        Args:
            token: Decimal integer between 0 and 16777215

        Raises:
            SectorError: INVALID_COLOUR_DEFINITION if the token is not a packed colour
        """
        token = token.strip()
        if not (token.isascii() and token.isdigit()):
            raise SectorError(ErrorKind.INVALID_COLOUR_DEFINITION, token)
        value = int(token)
        if value > MAX_PACKED:
            raise SectorError(ErrorKind.INVALID_COLOUR_DEFINITION, token)
        return cls.from_packed(value)

    def to_packed(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
