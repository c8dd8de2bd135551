"""Packet headers, guarantees, sequence buffers and an in-memory test network for a UDP protocol."""

__version__ = "0.1.0"