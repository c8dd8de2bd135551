import pytest

from lamina.enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from lamina.errors import HeaderReadError
from lamina.headers import AckedPacketHeader, StandardHeader
from lamina.packet_reader import PacketReader


def test_can_read_bytes():
    buffer = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    reader = PacketReader(buffer)
    assert reader.can_read(len(buffer)) is True
    assert reader.can_read(len(buffer) + 1) is False


def _assert_reliable_ordered(header):
    assert header.protocol_version == 1
    assert header.packet_type is PacketType.PACKET
    assert header.delivery is DeliveryGuarantee.RELIABLE
    assert header.ordering == OrderingGuarantee.ordered(None)


def test_read_standard_header():
    reader = PacketReader(bytes([0, 1, 0, 1, 2]))
    _assert_reliable_ordered(reader.read_standard_header())


def test_read_acknowledgment_header():
    reader = PacketReader(bytes([0, 1, 0, 1, 2] + [0, 1, 0, 2, 0, 0, 0, 3]))
    acked = reader.read_acknowledge_header()
    assert acked.sequence == 1
    assert acked.ack_seq == 2
    assert acked.ack_field == 3


def test_read_fragment_header():
    data = bytes([0, 1, 0, 1, 2] + [0, 1, 0, 3] + [0, 1, 0, 2, 0, 0, 0, 3])
    reader = PacketReader(data)
    standard = reader.read_standard_header()
    fragment, acked = reader.read_fragment()

    _assert_reliable_ordered(standard)
    assert acked is not None
    assert acked.sequence == 1
    assert acked.ack_seq == 2
    assert acked.ack_field == 3
    assert fragment.sequence == 1
    assert fragment.fragment_id == 0
    assert fragment.fragment_count == 3


def test_read_fragment_without_ack_for_later_fragments():
    data = bytes([0, 1, 0, 1, 2] + [0, 1, 2, 3] + [9, 9])
    reader = PacketReader(data)
    reader.read_standard_header()
    fragment, acked = reader.read_fragment()
    assert fragment.fragment_id == 2
    assert acked is None
    assert reader.read_payload() == bytes([9, 9])


def test_read_fragment_too_short():
    reader = PacketReader(bytes([0, 1, 0, 1, 2, 0, 1]))
    reader.read_standard_header()
    with pytest.raises(HeaderReadError):
        reader.read_fragment()


def test_read_unreliable_sequenced_header():
    reader = PacketReader(bytes([0, 1, 0, 1, 2] + [0, 1, 2]))
    arranging = reader.read_arranging_header(StandardHeader.SIZE)
    assert arranging.arranging_id == 1
    assert arranging.stream_id == 2


def test_read_reliable_ordered_header():
    data = bytes([0, 1, 0, 1, 2] + [0, 1, 0, 2, 0, 0, 0, 3] + [0, 1, 2])
    reader = PacketReader(data)
    standard = reader.read_standard_header()
    acked = reader.read_acknowledge_header()
    arranging = reader.read_arranging_header(
        StandardHeader.SIZE + AckedPacketHeader.SIZE
    )

    _assert_reliable_ordered(standard)
    assert acked.sequence == 1
    assert acked.ack_seq == 2
    assert acked.ack_field == 3
    assert arranging.arranging_id == 1
    assert arranging.stream_id == 2


def test_read_reliable_unordered_header():
    data = bytes([0, 1, 0, 1, 2] + [0, 1, 0, 2, 0, 0, 0, 3])
    reader = PacketReader(data)
    standard = reader.read_standard_header()
    acked = reader.read_acknowledge_header()

    _assert_reliable_ordered(standard)
    assert acked.sequence == 1
    assert acked.ack_seq == 2
    assert acked.ack_field == 3


def test_expect_read_error():
    reader = PacketReader(bytes([0, 1, 0, 1]))
    with pytest.raises(HeaderReadError):
        reader.read_standard_header()


def test_acknowledge_header_too_short():
    reader = PacketReader(bytes([0, 1, 0, 1, 2, 0, 1]))
    with pytest.raises(HeaderReadError):
        reader.read_acknowledge_header()


def test_arranging_header_too_short():
    reader = PacketReader(bytes([0, 1, 0, 1, 2, 0]))
    with pytest.raises(HeaderReadError):
        reader.read_arranging_header(StandardHeader.SIZE)


def test_read_payload_after_standard_header():
    reader = PacketReader(bytes([0, 1, 0, 1, 2]) + b"test")
    reader.read_standard_header()
    assert reader.read_payload() == b"test"


def test_payload_round_trip_with_written_headers():
    header = StandardHeader.create(
        DeliveryGuarantee.RELIABLE, OrderingGuarantee.none(), PacketType.PACKET
    )
    acked = AckedPacketHeader(7, 6, 5)
    reader = PacketReader(header.encode() + acked.encode() + b"payload")
    assert reader.read_standard_header() == header
    assert reader.read_acknowledge_header() == acked
    assert reader.read_payload() == b"payload"