"""A minimal TCP responder that answers each request with an HTTP payload.

Frames are Ethernet II carrying IPv4 and TCP. Every reply is built from
the frame it answers: addresses and ports are swapped and the
acknowledgement number is the request's sequence number plus one.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Callable

ETH_HEADER = struct.Struct("!6s6sH")
IPV4_HEADER = struct.Struct("!BBHHHBBH4s4s")
TCP_HEADER = struct.Struct("!HHIIBBHHH")

ETH_TYPE_IPV4 = 0x0800
IPV4_TYPE_TCP = 6
TTL = 255
WINDOW = 14480

_U32 = 0xFFFFFFFF
_IP_CHECKSUM_AT = 10
_TCP_CHECKSUM_AT = 16


class TcpFlags(enum.IntFlag):
    """Control bits of a TCP header."""

    FIN = 0x01
    SYN = 0x02
    RST = 0x04
    PSH = 0x08
    ACK = 0x10
    URG = 0x20


def _ones_complement_sum(data: bytes) -> int:
    if len(data) % 2:
        data += b"\0"
    total = sum(struct.unpack(f"!{len(data) // 2}H", data))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return total


def ipv4_checksum(header: bytes) -> int:
    """Return the Internet checksum of an IPv4 header.

    The checksum field should be zero; a header that already carries its
    checksum gives 0.
    """
    return ~_ones_complement_sum(bytes(header)) & 0xFFFF


def _ip_header_len(packet: bytes) -> int:
    if len(packet) < IPV4_HEADER.size:
        raise ValueError("packet too short for an IPv4 header")
    ihl = (packet[0] & 0xF) * 4
    if ihl < IPV4_HEADER.size or ihl > len(packet):
        raise ValueError(f"bad IPv4 header length {ihl}")
    return ihl


def _check_address(value: bytes, size: int, what: str) -> bytes:
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(value)}")
    return value


def tcp_checksum(ip_packet: bytes, my_ip: bytes) -> int:
    """Return the TCP checksum of the segment inside an IPv4 packet.

    ``my_ip`` is the sending address used in the pseudo-header; the
    destination is taken from the packet. A segment that already carries
    its checksum gives 0.
    """
    packet = bytes(ip_packet)
    source = _check_address(my_ip, 4, "IP address")
    ihl = _ip_header_len(packet)
    total = struct.unpack_from("!H", packet, 2)[0]
    if total < ihl or total > len(packet):
        raise ValueError(f"bad IPv4 total length {total}")
    segment = packet[ihl:total]
    pseudo = source + packet[16:20] + struct.pack("!BBH", 0, IPV4_TYPE_TCP, len(segment))
    return ~_ones_complement_sum(pseudo + segment) & 0xFFFF


@dataclass(frozen=True)
class _Request:
    src_mac: bytes
    src_ip: bytes
    src_port: int
    dst_port: int
    seq: int
    flags: int
    payload: bytes


def _parse_request(frame: bytes) -> _Request:
    frame = bytes(frame)
    if len(frame) < ETH_HEADER.size + IPV4_HEADER.size:
        raise ValueError("frame too short for Ethernet and IPv4 headers")
    _, src_mac, _ = ETH_HEADER.unpack_from(frame)
    ip = frame[ETH_HEADER.size:]
    ihl = _ip_header_len(ip)
    if len(ip) < ihl + TCP_HEADER.size:
        raise ValueError("frame too short for a TCP header")
    src_ip = ip[12:16]
    total = struct.unpack_from("!H", ip, 2)[0]
    end = total if ihl + TCP_HEADER.size <= total <= len(ip) else len(ip)
    src_port, dst_port, seq, _, offset, flags, _, _, _ = TCP_HEADER.unpack_from(ip, ihl)
    data_start = ihl + max((offset >> 4) * 4, TCP_HEADER.size)
    return _Request(src_mac, src_ip, src_port, dst_port, seq, flags, ip[data_start:end])


def build_packet(
    request: bytes,
    mac: bytes,
    ip: bytes,
    seq: int,
    flags: int,
    payload: bytes = b"",
    ident: int = 0,
) -> bytes:
    """Build the Ethernet frame that answers ``request``."""
    mac = _check_address(mac, 6, "MAC address")
    ip = _check_address(ip, 4, "IP address")
    payload = bytes(payload)
    req = _parse_request(request)

    ip_header = bytearray(IPV4_HEADER.pack(
        0x45, 0, IPV4_HEADER.size + TCP_HEADER.size + len(payload),
        ident & 0xFFFF, 0, TTL, IPV4_TYPE_TCP, 0, ip, req.src_ip,
    ))
    struct.pack_into("!H", ip_header, _IP_CHECKSUM_AT, ipv4_checksum(ip_header))

    tcp_header = bytearray(TCP_HEADER.pack(
        req.dst_port, req.src_port, seq & _U32, (req.seq + 1) & _U32,
        5 << 4, int(flags) & 0xFF, WINDOW, 0, 0,
    ))
    checksum = tcp_checksum(bytes(ip_header) + bytes(tcp_header) + payload, ip)
    struct.pack_into("!H", tcp_header, _TCP_CHECKSUM_AT, checksum)

    eth = ETH_HEADER.pack(req.src_mac, mac, ETH_TYPE_IPV4)
    return eth + bytes(ip_header) + bytes(tcp_header) + payload


class TcpResponder:
    """Answers connection requests and serves ``respond(request_payload)``.

    After :meth:`fin` the next bare acknowledgement is answered with FIN.
    """

    def __init__(
        self,
        mac: bytes,
        ip: bytes,
        respond: Callable[[bytes], bytes],
        seq: int = 0,
        ident: int = 0,
    ) -> None:
        self.mac = _check_address(mac, 6, "MAC address")
        self.ip = _check_address(ip, 4, "IP address")
        self.respond = respond
        self.seq = seq & _U32
        self.ident = ident & 0xFFFF
        self.fin_pending = False

    def _reply(self, request: bytes, flags: int, payload: bytes = b"") -> bytes:
        frame = build_packet(request, self.mac, self.ip, self.seq, flags, payload, self.ident)
        self.ident = (self.ident + 1) & 0xFFFF
        return frame

    def handle(self, frame: bytes) -> list[bytes]:
        """Return the frames to send in answer to ``frame``."""
        req = _parse_request(frame)
        replies: list[bytes] = []
        if req.flags & TcpFlags.SYN:
            replies.append(self._reply(frame, TcpFlags.ACK | TcpFlags.SYN))
            self.seq = (self.seq + 1) & _U32
        elif req.flags == TcpFlags.PSH | TcpFlags.ACK:
            replies.append(self._reply(frame, TcpFlags.ACK))
            body = bytes(self.respond(req.payload))
            replies.append(self._reply(frame, TcpFlags.ACK | TcpFlags.PSH, body))
            self.seq = (self.seq + 1) & _U32
        elif req.flags == TcpFlags.ACK and self.fin_pending:
            replies.append(self._reply(frame, TcpFlags.FIN))
            self.fin_pending = False
        return replies

    def fin(self) -> None:
        """Close the connection at the next acknowledgement."""
        self.fin_pending = True