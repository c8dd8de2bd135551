import pytest

from lamina.constants import STANDARD_HEADER_SIZE
from lamina.enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from lamina.outgoing import OutgoingPacket, OutgoingPacketBuilder
from lamina.protocol_version import version_crc16

PAYLOAD = b"test"


def test_creation_fragment_header():
    outgoing = OutgoingPacketBuilder(PAYLOAD).with_fragment_header(0, 0, 0).build()
    assert outgoing.contents() == bytes([0, 0, 0, 0]) + PAYLOAD


def test_creation_arranging_header():
    outgoing = OutgoingPacketBuilder(PAYLOAD).with_sequencing_header(1, 2).build()
    assert outgoing.contents() == bytes([0, 1, 2]) + PAYLOAD


def test_creation_acknowledgment_header():
    outgoing = OutgoingPacketBuilder(PAYLOAD).with_acknowledgment_header(1, 2, 3).build()
    assert outgoing.contents() == bytes([0, 1, 0, 2, 0, 0, 0, 3]) + PAYLOAD


def test_creation_default_header():
    outgoing = (
        OutgoingPacketBuilder(PAYLOAD)
        .with_default_header(
            PacketType.PACKET,
            DeliveryGuarantee.RELIABLE,
            OrderingGuarantee.sequenced(None),
        )
        .build()
    )
    contents = outgoing.contents()
    assert contents[2:] == bytes([0, 1, 1]) + PAYLOAD
    assert int.from_bytes(contents[:2], "big") == version_crc16()
    assert len(contents) == STANDARD_HEADER_SIZE + len(PAYLOAD)


def test_sequencing_default_stream():
    outgoing = OutgoingPacketBuilder(PAYLOAD).with_sequencing_header(1, None).build()
    assert outgoing.header == bytes([0, 1, 255])


def test_ordering_header_stream_and_default():
    explicit = OutgoingPacketBuilder(PAYLOAD).with_ordering_header(3, 7).build()
    default = OutgoingPacketBuilder(PAYLOAD).with_ordering_header(3).build()
    assert explicit.header == bytes([0, 3, 7])
    assert default.header == bytes([0, 3, 255])


def test_headers_appended_in_call_order():
    outgoing = (
        OutgoingPacketBuilder(PAYLOAD)
        .with_acknowledgment_header(1, 2, 3)
        .with_ordering_header(4, 5)
        .build()
    )
    assert outgoing.header == bytes([0, 1, 0, 2, 0, 0, 0, 3, 0, 4, 5])
    assert outgoing.payload == PAYLOAD


def test_no_headers_gives_bare_payload():
    assert OutgoingPacketBuilder(PAYLOAD).build().contents() == PAYLOAD


def test_contents_concatenates_header_and_payload():
    assert OutgoingPacket(b"\x01\x02", b"xy").contents() == b"\x01\x02xy"


def test_out_of_range_header_rejected():
    with pytest.raises(ValueError):
        OutgoingPacketBuilder(PAYLOAD).with_fragment_header(0, 256, 1)