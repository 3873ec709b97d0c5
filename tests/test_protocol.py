import pytest

from sigtalk.protocol import BitDecoder, decode, encode


def test_encode_single_character_msb_first():
    assert list(encode("A")) == [0, 1, 0, 0, 0, 0, 0, 1] + [0] * 8


def test_encode_length_includes_terminator():
    message = "hello world"
    bits = list(encode(message))
    assert len(bits) == 8 * (len(message) + 1)
    assert bits[-8:] == [0] * 8
    assert set(bits) <= {0, 1}


def test_encode_empty_message_is_only_terminator():
    assert list(encode("")) == [0] * 8


def test_encode_str_and_bytes_agree():
    text = "caf\u00e9"
    assert list(encode(text)) == list(encode(text.encode("utf-8")))


@pytest.mark.parametrize("message", ["hi", "Hello, world!", "", "\u00e9t\u00e9 \u2603"])
def test_round_trip(message):
    assert decode(encode(message)) == message.encode("utf-8") + b"\n"


def test_embedded_zero_byte_becomes_newline():
    assert decode(encode(b"a\x00b")) == b"a\nb\n"


def test_decode_drops_incomplete_trailing_bits():
    bits = list(encode("ok")) + [1, 0, 1]
    assert decode(bits) == b"ok\n"


def test_feed_returns_none_until_byte_complete():
    decoder = BitDecoder()
    bits = list(encode("Z"))[:8]
    results = [decoder.feed(100, bit) for bit in bits]
    assert results[:7] == [None] * 7
    assert results[7] == ord("Z")


def test_feed_returns_zero_for_terminator():
    decoder = BitDecoder()
    results = [decoder.feed(5, bit) for bit in encode("")]
    assert results[-1] == 0


def test_sender_change_discards_partial_byte():
    decoder = BitDecoder()
    for bit in [1, 1, 1]:
        assert decoder.feed(1, bit) is None
    results = [decoder.feed(2, bit) for bit in list(encode("x"))[:8]]
    assert results[-1] == ord("x")


def test_reset_discards_partial_byte():
    decoder = BitDecoder()
    for bit in [1, 0, 1, 1]:
        decoder.feed(7, bit)
    decoder.reset()
    results = [decoder.feed(7, bit) for bit in list(encode("q"))[:8]]
    assert results[-1] == ord("q")


def test_interleaved_senders_restart():
    decoder = BitDecoder()
    bits = list(encode("m"))[:8]
    for bit in bits[:4]:
        decoder.feed(1, bit)
    for bit in bits[:4]:
        decoder.feed(2, bit)
    # back to sender 1: state was reset by sender 2, so a full byte is needed
    results = [decoder.feed(1, bit) for bit in bits]
    assert results[:7] == [None] * 7
    assert results[7] == ord("m")


def test_feed_accepts_booleans():
    decoder = BitDecoder()
    bits = [bool(b) for b in list(encode("k"))[:8]]
    assert [decoder.feed(3, b) for b in bits][-1] == ord("k")


@pytest.mark.parametrize("bad", [2, -1, "1"])
def test_feed_rejects_non_bits(bad):
    with pytest.raises(ValueError):
        BitDecoder().feed(1, bad)