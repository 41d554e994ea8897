"""Protocol-buffer wire encoding of genomes and individuals."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from pathlib import Path

from .genome import Genome, Individual, LinkGene, LinkID, NeuronGene

_VARINT = 0
_FIXED64 = 1
_LENGTH = 2
_FIXED32 = 5


def _encode_varint(value: int) -> bytes:
    value &= (1 << 64) - 1
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _key(field_number: int, wire_type: int) -> bytes:
    return _encode_varint((field_number << 3) | wire_type)


def _int32_field(field_number: int, value: int) -> bytes:
    return _key(field_number, _VARINT) + _encode_varint(value) if value else b""


def _bool_field(field_number: int, value: bool) -> bytes:
    return _key(field_number, _VARINT) + b"\x01" if value else b""


def _float_field(field_number: int, value: float) -> bytes:
    return _key(field_number, _FIXED32) + struct.pack("<f", value) if value else b""


def _message_field(field_number: int, payload: bytes) -> bytes:
    return _key(field_number, _LENGTH) + _encode_varint(len(payload)) + payload


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    for shift in range(0, 70, 7):
        if pos >= len(data):
            raise ValueError("truncated varint")
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result & ((1 << 64) - 1), pos
    raise ValueError("varint too long")


def _fields(data: bytes) -> Iterator[tuple[int, int, int | bytes]]:
    pos = 0
    while pos < len(data):
        key, pos = _read_varint(data, pos)
        field_number, wire_type = key >> 3, key & 7
        if field_number == 0:
            raise ValueError("invalid field number 0")
        if wire_type == _VARINT:
            value, pos = _read_varint(data, pos)
        elif wire_type in (_FIXED64, _FIXED32, _LENGTH):
            if wire_type == _LENGTH:
                size, pos = _read_varint(data, pos)
            else:
                size = 8 if wire_type == _FIXED64 else 4
            if pos + size > len(data):
                raise ValueError("truncated field")
            value = data[pos : pos + size]
            pos += size
        else:
            raise ValueError(f"unsupported wire type {wire_type}")
        yield field_number, wire_type, value


def _expect(wire_type: int, expected: int, field_number: int) -> None:
    if wire_type != expected:
        raise ValueError(f"field {field_number} has wire type {wire_type}, expected {expected}")


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_float(value: bytes) -> float:
    return struct.unpack("<f", value)[0]


def _encode_neuron(neuron: NeuronGene) -> bytes:
    return _int32_field(1, neuron.id) + _float_field(2, neuron.bias)


def _decode_neuron(data: bytes) -> NeuronGene:
    neuron = NeuronGene(0, 0.0)
    for number, wire, value in _fields(data):
        if number == 1:
            _expect(wire, _VARINT, number)
            neuron.id = _as_int32(value)
        elif number == 2:
            _expect(wire, _FIXED32, number)
            neuron.bias = _as_float(value)
    return neuron


def _encode_link_id(link_id: LinkID) -> bytes:
    return _int32_field(1, link_id.in_id) + _int32_field(2, link_id.out_id)


def _decode_link_id(data: bytes) -> LinkID:
    in_id = out_id = 0
    for number, wire, value in _fields(data):
        if number in (1, 2):
            _expect(wire, _VARINT, number)
            if number == 1:
                in_id = _as_int32(value)
            else:
                out_id = _as_int32(value)
    return LinkID(in_id, out_id)


def _encode_link(link: LinkGene) -> bytes:
    return (
        _message_field(1, _encode_link_id(link.id))
        + _float_field(2, link.weight)
        + _bool_field(3, link.is_enabled)
    )


def _decode_link(data: bytes) -> LinkGene:
    link_id: LinkID | None = None
    weight = 0.0
    enabled = False
    for number, wire, value in _fields(data):
        if number == 1:
            _expect(wire, _LENGTH, number)
            link_id = _decode_link_id(value)
        elif number == 2:
            _expect(wire, _FIXED32, number)
            weight = _as_float(value)
        elif number == 3:
            _expect(wire, _VARINT, number)
            enabled = value != 0
    if link_id is None:
        raise ValueError("link gene without an id")
    return LinkGene(link_id, weight, enabled)


def encode_genome(genome: Genome) -> bytes:
    """Serialise a genome to protobuf wire bytes."""
    parts = [
        _int32_field(1, genome.id),
        _int32_field(2, genome.num_inputs),
        _int32_field(3, genome.num_outputs),
    ]
    parts.extend(_message_field(4, _encode_neuron(n)) for n in genome.neurons)
    parts.extend(_message_field(5, _encode_link(l)) for l in genome.links)
    return b"".join(parts)


def decode_genome(data: bytes) -> Genome:
    """Parse a genome from protobuf wire bytes; raises ValueError on bad data."""
    genome = Genome(0, 0, 0)
    for number, wire, value in _fields(bytes(data)):
        if number in (1, 2, 3):
            _expect(wire, _VARINT, number)
            if number == 1:
                genome.id = _as_int32(value)
            elif number == 2:
                genome.num_inputs = _as_int32(value)
            else:
                genome.num_outputs = _as_int32(value)
        elif number == 4:
            _expect(wire, _LENGTH, number)
            genome.neurons.append(_decode_neuron(value))
        elif number == 5:
            _expect(wire, _LENGTH, number)
            genome.links.append(_decode_link(value))
    return genome


def encode_individual(individual: Individual) -> bytes:
    """Serialise an individual (genome and fitness) to protobuf wire bytes."""
    return _message_field(1, encode_genome(individual.genome)) + _float_field(
        2, individual.fitness
    )


def decode_individual(data: bytes) -> Individual:
    """Parse an individual from protobuf wire bytes; raises ValueError on bad data."""
    genome: Genome | None = None
    fitness = 0.0
    for number, wire, value in _fields(bytes(data)):
        if number == 1:
            _expect(wire, _LENGTH, number)
            genome = decode_genome(value)
        elif number == 2:
            _expect(wire, _FIXED32, number)
            fitness = _as_float(value)
    if genome is None:
        raise ValueError("individual without a genome")
    return Individual(genome, fitness)


def save_genome(genome: Genome, path: str | Path) -> None:
    Path(path).write_bytes(encode_genome(genome))
    print(f"Genome saved to {path}")


def load_genome(path: str | Path) -> Genome:
    genome = decode_genome(Path(path).read_bytes())
    print(f"Genome loaded from {path}")
    return genome


def save_individual(individual: Individual, path: str | Path) -> None:
    Path(path).write_bytes(encode_individual(individual))
    print(f"Individual saved to {path}")


def load_individual(path: str | Path) -> Individual:
    individual = decode_individual(Path(path).read_bytes())
    print(f"Individual loaded from {path}")
    return individual