"""Bech32 encoding and account / validator address parsing."""

from __future__ import annotations

ACC_PREFIX = "cosmos"
VAL_PREFIX = "cosmosvaloper"
MAX_ADDRESS_LENGTH = 255

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {char: index for index, char in enumerate(_CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_LENGTH = 1023
_CHECKSUM_LENGTH = 6


class AddressError(ValueError):
    """Raised for malformed bech32 strings and invalid addresses."""


def _polymod(values: list[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: bytes | list[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    accumulator = 0
    bits = 0
    result = []
    max_value = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise AddressError("invalid data range")
        accumulator = (accumulator << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((accumulator >> bits) & max_value)
    if pad:
        if bits:
            result.append((accumulator << (to_bits - bits)) & max_value)
    elif bits >= from_bits or ((accumulator << (to_bits - bits)) & max_value):
        raise AddressError("invalid padding in bech32 data")
    return result


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise AddressError("empty bech32 human-readable part")
    if any(not 33 <= ord(c) <= 126 for c in hrp):
        raise AddressError("invalid character in bech32 human-readable part")


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode 8-bit ``data`` as a bech32 string with human-readable part ``hrp``."""
    hrp = hrp.lower()
    _check_hrp(hrp)
    values = _convert_bits(bytes(data), 8, 5, True)
    polymod = _polymod(_hrp_expand(hrp) + values + [0] * _CHECKSUM_LENGTH) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(_CHECKSUM_LENGTH)]
    return hrp + "1" + "".join(_CHARSET[v] for v in values + checksum)


def bech32_decode(text: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and 8-bit data."""
    if len(text) > _MAX_LENGTH:
        raise AddressError(f"bech32 string too long: {len(text)}")
    if text.lower() != text and text.upper() != text:
        raise AddressError("bech32 string has mixed case")
    text = text.lower()
    separator = text.rfind("1")
    if separator < 1 or separator + _CHECKSUM_LENGTH + 1 > len(text):
        raise AddressError("invalid bech32 separator position")
    hrp = text[:separator]
    _check_hrp(hrp)
    try:
        values = [_CHARSET_INDEX[c] for c in text[separator + 1:]]
    except KeyError as exc:
        raise AddressError(f"invalid bech32 character {exc.args[0]!r}") from None
    if _polymod(_hrp_expand(hrp) + values) != 1:
        raise AddressError("invalid bech32 checksum")
    return hrp, bytes(_convert_bits(values[:-_CHECKSUM_LENGTH], 5, 8, False))


def _verify_address_format(address: bytes) -> None:
    if not address:
        raise AddressError("addresses cannot be empty")
    if len(address) > MAX_ADDRESS_LENGTH:
        raise AddressError(
            f"address max length is {MAX_ADDRESS_LENGTH}, got {len(address)}"
        )


def _address_from_bech32(text: str, prefix: str) -> bytes:
    if not text.strip():
        raise AddressError("empty address string is not allowed")
    hrp, data = bech32_decode(text)
    if hrp != prefix:
        raise AddressError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    _verify_address_format(data)
    return data


def acc_address_from_bech32(text: str) -> bytes:
    """Parse an account address string into its raw bytes."""
    return _address_from_bech32(text, ACC_PREFIX)


def val_address_from_bech32(text: str) -> bytes:
    """Parse a validator operator address string into its raw bytes."""
    return _address_from_bech32(text, VAL_PREFIX)


def acc_address_to_bech32(address: bytes) -> str:
    """Render raw account address bytes as a bech32 string."""
    return bech32_encode(ACC_PREFIX, address) if address else ""


def val_address_to_bech32(address: bytes) -> str:
    """Render raw validator address bytes as a bech32 string."""
    return bech32_encode(VAL_PREFIX, address) if address else ""


def acc_and_val_addresses_from_strings(acc_address: str, val_address: str) -> tuple[bytes, bytes]:
    """Parse an account and a validator address, raising on the first invalid one."""
    return acc_address_from_bech32(acc_address), val_address_from_bech32(val_address)