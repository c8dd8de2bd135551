# lamina

Building blocks for a lightweight, message-based protocol on top of UDP. It
offers configurable delivery (unreliable or reliable) and arrangement (none,
sequenced or ordered) guarantees. Every packet header carries a CRC16
(CRC-16/X-25) of the protocol version string, so a reader can tell whether a
packet was written with the current protocol.

The package needs nothing beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `lamina.constants`: header sizes, default stream ids, fragment defaults,
  `DEFAULT_MTU` and `PROTOCOL_VERSION`.
- `lamina.protocol_version`: `crc16_x25(data)`, `version_crc16()` (the CRC16
  of `PROTOCOL_VERSION`) and `is_valid_version(crc16)`.
- `lamina.enums`: `DeliveryGuarantee`, `PacketType` and `OrderingGuarantee`.
  Each has a `from_code` class method that decodes its one-byte wire value.
  `OrderingGuarantee` is built with `none()`, `sequenced(stream_id)` or
  `ordered(stream_id)`, and `code()` gives its wire value.
- `lamina.packet`: `Packet`, the user-facing packet. Its constructors
  `unreliable`, `unreliable_sequenced`, `reliable_unordered`,
  `reliable_ordered` and `reliable_sequenced` choose the guarantees.
  `PacketInfo` is an unaddressed description of an outgoing packet, made with
  `user_packet` or `heartbeat_packet`.
- `lamina.headers`: `StandardHeader`, `AckedPacketHeader`, `ArrangingHeader`
  and `FragmentHeader`. Each one `encode()`s to big-endian bytes and has a
  `read(stream)` class method that reads it back from a binary stream.
  `StandardHeader.create(...)` stamps the current protocol version.
- `lamina.outgoing`: `OutgoingPacketBuilder`, a fluent builder that appends
  headers in call order in front of a payload. `build()` returns an
  `OutgoingPacket`, and its `contents()` method gives the header bytes
  followed by the payload.
- `lamina.packet_reader`: `PacketReader`, which reads the standard,
  acknowledgment, arranging and fragment headers and the payload from
  received bytes.
- `lamina.sequence_buffer`: `SequenceBuffer`, a fixed-size store indexed by
  16-bit sequence numbers. It handles wrap-around, refuses entries that are
  too old and evicts entries that fall behind. `sequence_greater_than` and
  `sequence_less_than` compare sequence numbers across the wrap.
  `CongestionData` and `ReassemblyData` are plain records for send times and
  fragment reassembly state.
- `lamina.network_emulator`: `NetworkEmulator` and `EmulatedSocket`, an
  in-memory, non-blocking datagram network for tests. Binding an address
  twice raises `OSError` (`EADDRINUSE`), and receiving from an empty inbox
  raises `BlockingIOError`.
- `lamina.link_conditioner`: `LinkConditioner`, seeded with 0 so its runs can
  be repeated. When it is set as an `EmulatedSocket`'s `conditioner`, it drops
  outgoing packets at the rate `packet_loss`. Its `latency` field is stored
  but not applied.
- `lamina.throughput`: `ThroughputMonitoring`, which counts ticks per time
  window (in seconds, with a replaceable clock) and reports the average, last
  and total throughput.
- `lamina.events`: the socket events `PacketReceived`, `Connected` and
  `TimedOut`.

## Example

```python
from lamina.enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from lamina.outgoing import OutgoingPacketBuilder
from lamina.packet_reader import PacketReader

data = (
    OutgoingPacketBuilder(b"hello")
    .with_default_header(
        PacketType.PACKET,
        DeliveryGuarantee.RELIABLE,
        OrderingGuarantee.ordered(None),
    )
    .with_acknowledgment_header(1, 0, 0)
    .with_ordering_header(0, None)
    .build()
    .contents()
)

reader = PacketReader(data)
header = reader.read_standard_header()
assert header.is_current_protocol()
ack = reader.read_acknowledge_header()
arranging = reader.read_arranging_header(5 + 8)
assert reader.read_payload() == b"hello"
```

Reading truncated data raises `lamina.errors.HeaderReadError`. Reading an
unknown packet type or guarantee code raises `lamina.errors.DecodingError`.
Both are subclasses of `lamina.errors.ProtocolError`.

## What this package does not do

lamina provides the packet format and the data structures around it. It does
not provide a working socket. It has no real UDP socket wrapper, no
connection manager or per-peer connection state, no acknowledgment tracking
or resending of dropped packets, no fragmentation or reassembly logic, no
ordering or sequencing streams that arrange received packets, no heartbeats
or idle timeouts, and no configuration object. Something that sends and
receives real traffic has to be built on top of these pieces.