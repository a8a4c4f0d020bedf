"""Constants of the MD5 digest and the padding rule used to finish a message."""

INIT_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Per-round rotation amounts, four per round.
SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

# Additive constants, one per step, in step order.
T = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

# Order in which the sixteen message words are consumed in each round.
WORD_ORDER = (
    tuple(range(16)),
    tuple((1 + 5 * i) % 16 for i in range(16)),
    tuple((5 + 3 * i) % 16 for i in range(16)),
    tuple((7 * i) % 16 for i in range(16)),
)

BLOCK_SIZE = 64
_LENGTH_FIELD = 8
_MASK64 = (1 << 64) - 1


def padding(message_length):
    """Return the bytes that finish a message of ``message_length`` bytes.

    The trailer is 0x80, zeros up to 56 mod 64, then the message length in
    bits as a 64-bit little-endian number.
    """
    if message_length < 0:
        raise ValueError("message length must not be negative")
    index = message_length % BLOCK_SIZE
    pad_len = 56 - index if index < 56 else 120 - index
    bits = (message_length * 8) & _MASK64
    return b"\x80" + bytes(pad_len - 1) + bits.to_bytes(_LENGTH_FIELD, "little")