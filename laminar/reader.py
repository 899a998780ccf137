"""Reading the headers and payload of a received packet."""

from __future__ import annotations

import io

from .enums import LaminarError
from .headers import AckedPacketHeader, ArrangingHeader, FragmentHeader, StandardHeader
from .protocol import STANDARD_HEADER_SIZE

__all__ = ["CouldNotReadHeader", "PacketReader"]


class CouldNotReadHeader(LaminarError):
    """The buffer is too short to hold the named header."""

    def __init__(self, header: str) -> None:
        super().__init__(f"could not read {header} header")
        self.header = header


class PacketReader:
    """Reads headers and payload from a received buffer.

    Each header reader knows where its header lives; reading the fragment
    header and the payload continues from wherever the last read stopped.
    """

    def __init__(self, buffer: bytes) -> None:
        self._buffer = bytes(buffer)
        self._cursor = io.BytesIO(self._buffer)

    def read_standard_header(self) -> StandardHeader:
        """Read the standard header at the start of the buffer."""
        self._cursor.seek(0)
        if not self.can_read(StandardHeader.SIZE):
            raise CouldNotReadHeader("standard")
        return StandardHeader.read(self._cursor)

    def read_arranging_header(self, start_offset: int) -> ArrangingHeader:
        """Read the arranging header that starts at ``start_offset``."""
        self._cursor.seek(start_offset)
        if not self.can_read(ArrangingHeader.SIZE):
            raise CouldNotReadHeader("arranging")
        return ArrangingHeader.read(self._cursor)

    def read_acknowledge_header(self) -> AckedPacketHeader:
        """Read the acknowledgment header that follows the standard header."""
        self._cursor.seek(STANDARD_HEADER_SIZE)
        if not self.can_read(AckedPacketHeader.SIZE):
            raise CouldNotReadHeader("acknowledgment")
        return AckedPacketHeader.read(self._cursor)

    def read_fragment(self) -> tuple[FragmentHeader, AckedPacketHeader | None]:
        """Read a fragment header from the current position.

        Only the first fragment carries an acknowledgment header, which is
        read straight after it; for other fragments the second item is None.
        """
        if not self.can_read(FragmentHeader.SIZE):
            raise CouldNotReadHeader("fragment")
        fragment_header = FragmentHeader.read(self._cursor)
        acked_header = (
            AckedPacketHeader.read(self._cursor)
            if fragment_header.fragment_id == 0
            else None
        )
        return fragment_header, acked_header

    def read_payload(self) -> bytes:
        """Return every byte from the current position to the end."""
        return self._buffer[self._cursor.tell():]

    def can_read(self, length: int) -> bool:
        """Return whether ``length`` more bytes remain after the current position."""
        return len(self._buffer) - self._cursor.tell() >= length