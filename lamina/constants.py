"""Wire-format sizes, default streams and protocol identification."""

FRAGMENT_HEADER_SIZE = 4
"""Size in bytes of the fragment header."""

ACKED_PACKET_HEADER = 8
"""Size in bytes of the acknowledgment header."""

ARRANGING_PACKET_HEADER = 3
"""Size in bytes of the arranging (ordering/sequencing) header."""

STANDARD_HEADER_SIZE = 5
"""Size in bytes of the standard header carried by every packet."""

DEFAULT_ORDERING_STREAM = 255
"""Ordering stream used when none is specified."""

DEFAULT_SEQUENCING_STREAM = 255
"""Sequencing stream used when none is specified."""

MAX_FRAGMENTS_DEFAULT = 16
"""Default maximum number of fragments a packet may be split into."""

FRAGMENT_SIZE_DEFAULT = 1024
"""Default maximum size of a single fragment."""

DEFAULT_MTU = 1452
"""Maximum transmission unit of the payload.

Ethernet MTU (1500) minus IPv6 header (40), UDP header (8) and packet
header (8). There may be less room than this in practice because the IPv6
header size varies.
"""

PROTOCOL_VERSION = "laminar-0.1.0"
"""Current protocol version, hashed into every packet header."""