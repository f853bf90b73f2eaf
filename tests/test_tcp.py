import struct

import pytest

from xv6kit.tcp import (
    TcpFlags,
    TcpResponder,
    build_packet,
    ipv4_checksum,
    tcp_checksum,
)

CLIENT_MAC = bytes.fromhex("020000000001")
SERVER_MAC = bytes.fromhex("020000000002")
CLIENT_IP = bytes([10, 0, 0, 1])
SERVER_IP = bytes([10, 0, 0, 2])


def make_request(flags, seq=1000, payload=b"", sport=40000, dport=80):
    tcp = struct.pack("!HHIIBBHHH", sport, dport, seq, 0, 5 << 4, int(flags), 1024, 0, 0)
    ip = struct.pack(
        "!BBHHHBBH4s4s", 0x45, 0, 40 + len(payload), 1, 0, 64, 6, 0, CLIENT_IP, SERVER_IP
    )
    return SERVER_MAC + CLIENT_MAC + b"\x08\x00" + ip + tcp + payload


def fields(frame):
    dst_mac, src_mac, eth_type = struct.unpack_from("!6s6sH", frame)
    ip = struct.unpack_from("!BBHHHBBH4s4s", frame, 14)
    tcp = struct.unpack_from("!HHIIBBHHH", frame, 34)
    return {
        "dst_mac": dst_mac,
        "src_mac": src_mac,
        "eth_type": eth_type,
        "total_len": ip[2],
        "ident": ip[3],
        "ttl": ip[5],
        "proto": ip[6],
        "src_ip": ip[8],
        "dst_ip": ip[9],
        "sport": tcp[0],
        "dport": tcp[1],
        "seq": tcp[2],
        "ack": tcp[3],
        "flags": tcp[5],
        "window": tcp[6],
        "payload": frame[54:],
    }


def test_ipv4_checksum_of_known_header():
    header = bytes.fromhex("450000730000400040110000c0a80001c0a800c7")
    assert ipv4_checksum(header) == 0xB861


def test_ipv4_checksum_of_built_header_verifies():
    frame = build_packet(make_request(TcpFlags.SYN), SERVER_MAC, SERVER_IP, 0, TcpFlags.ACK)
    assert ipv4_checksum(frame[14:34]) == 0


def test_tcp_checksum_of_built_segment_verifies():
    frame = build_packet(
        make_request(TcpFlags.SYN), SERVER_MAC, SERVER_IP, 7, TcpFlags.ACK, b"hello"
    )
    assert tcp_checksum(frame[14:], SERVER_IP) == 0


def test_build_packet_swaps_addresses_and_ports():
    frame = build_packet(
        make_request(TcpFlags.SYN, sport=40000, dport=80),
        SERVER_MAC, SERVER_IP, 5, TcpFlags.SYN | TcpFlags.ACK, ident=42,
    )
    f = fields(frame)
    assert f["dst_mac"] == CLIENT_MAC
    assert f["src_mac"] == SERVER_MAC
    assert f["eth_type"] == 0x0800
    assert f["src_ip"] == SERVER_IP
    assert f["dst_ip"] == CLIENT_IP
    assert f["sport"] == 80
    assert f["dport"] == 40000
    assert f["proto"] == 6
    assert f["ttl"] == 255
    assert f["window"] == 14480
    assert f["ident"] == 42
    assert f["seq"] == 5
    assert f["flags"] == TcpFlags.SYN | TcpFlags.ACK


def test_build_packet_acknowledges_next_sequence_number():
    frame = build_packet(make_request(TcpFlags.SYN, seq=1000), SERVER_MAC, SERVER_IP, 0, TcpFlags.ACK)
    assert fields(frame)["ack"] == 1001


def test_build_packet_ack_wraps_around():
    frame = build_packet(
        make_request(TcpFlags.SYN, seq=0xFFFFFFFF), SERVER_MAC, SERVER_IP, 0, TcpFlags.ACK
    )
    assert fields(frame)["ack"] == 0


def test_build_packet_carries_payload_and_length():
    frame = build_packet(
        make_request(TcpFlags.SYN), SERVER_MAC, SERVER_IP, 0, TcpFlags.PSH, b"body bytes"
    )
    f = fields(frame)
    assert f["payload"] == b"body bytes"
    assert f["total_len"] == len(frame) - 14


def test_build_packet_rejects_bad_mac():
    with pytest.raises(ValueError):
        build_packet(make_request(TcpFlags.SYN), b"\x01\x02", SERVER_IP, 0, TcpFlags.ACK)


def test_short_frame_is_rejected():
    responder = TcpResponder(SERVER_MAC, SERVER_IP, lambda req: b"")
    with pytest.raises(ValueError):
        responder.handle(b"\x00" * 20)


def test_syn_is_answered_and_advances_sequence():
    responder = TcpResponder(SERVER_MAC, SERVER_IP, lambda req: b"")
    first = responder.handle(make_request(TcpFlags.SYN))
    second = responder.handle(make_request(TcpFlags.SYN))
    assert len(first) == 1 and len(second) == 1
    assert fields(first[0])["flags"] == TcpFlags.SYN | TcpFlags.ACK
    assert fields(first[0])["seq"] == 0
    assert fields(second[0])["seq"] == 1


def test_push_is_acknowledged_then_answered():
    seen = []

    def respond(request):
        seen.append(request)
        return b"HTTP/1.0 200 OK\r\n\r\n"

    responder = TcpResponder(SERVER_MAC, SERVER_IP, respond)
    replies = responder.handle(make_request(TcpFlags.PSH | TcpFlags.ACK, payload=b"GET / HTTP/1.0"))
    assert seen == [b"GET / HTTP/1.0"]
    assert [fields(r)["flags"] for r in replies] == [
        TcpFlags.ACK,
        TcpFlags.ACK | TcpFlags.PSH,
    ]
    assert fields(replies[0])["payload"] == b""
    assert fields(replies[1])["payload"] == b"HTTP/1.0 200 OK\r\n\r\n"
    assert tcp_checksum(replies[1][14:], SERVER_IP) == 0
    assert responder.seq == 1


def test_ack_sends_fin_only_when_requested():
    responder = TcpResponder(SERVER_MAC, SERVER_IP, lambda req: b"")
    assert responder.handle(make_request(TcpFlags.ACK)) == []
    responder.fin()
    replies = responder.handle(make_request(TcpFlags.ACK))
    assert [fields(r)["flags"] for r in replies] == [TcpFlags.FIN]
    assert responder.handle(make_request(TcpFlags.ACK)) == []


def test_other_flags_are_ignored():
    responder = TcpResponder(SERVER_MAC, SERVER_IP, lambda req: b"")
    assert responder.handle(make_request(TcpFlags.RST)) == []


def test_ip_identifier_increments_per_frame():
    responder = TcpResponder(SERVER_MAC, SERVER_IP, lambda req: b"x", ident=10)
    replies = responder.handle(make_request(TcpFlags.PSH | TcpFlags.ACK))
    idents = [fields(r)["ident"] for r in replies]
    assert idents[1] == idents[0] + 1
    assert responder.ident == idents[1] + 1