import numpy as np
import pytest

from crcforge.bits import ShiftDir
from crcforge.engine.modules.direct import Config, DirectCrcEngine, create
from tests.conftest import CHECK_INPUT


def test_crc16_left_known_vector():
    engine = DirectCrcEngine(0x1021, width=16, direction="left")
    assert engine.compute(CHECK_INPUT, len(CHECK_INPUT), 0x0000) == 0x31C3


def test_crc16_right_known_vector():
    engine = DirectCrcEngine(0x1021, width=16, direction="right")
    assert engine.compute(CHECK_INPUT) == 0x2189


def test_crc32_known_vector_with_external_final_xor():
    engine = DirectCrcEngine(0x04C11DB7, width=32, direction=ShiftDir.RIGHT)
    crc = engine.compute(CHECK_INPUT, seed=0xFFFFFFFF)
    assert crc ^ 0xFFFFFFFF == 0xCBF43926


def test_crc8_single_zero_byte():
    engine = DirectCrcEngine(0x07, width=8, direction="left")
    crc = engine.compute(b"\x00", 1, 0x00)
    assert crc == 0x00
    assert crc ^ 0x55 == 0x55


def test_empty_input_returns_seed():
    engine = DirectCrcEngine(0x1021, width=16, direction="left")
    assert engine.compute(b"") == 0
    assert engine.compute(b"", seed=0xBEEF) == 0xBEEF
    assert engine.compute(b"abc", 0, 0x1234) == 0x1234


def test_length_limits_processed_bytes():
    engine = DirectCrcEngine(0x1021, width=16, direction="left")
    assert engine.compute(CHECK_INPUT + b"trailing junk", len(CHECK_INPUT)) == 0x31C3


def test_length_out_of_bounds_rejected():
    engine = DirectCrcEngine(0x1021, width=16, direction="left")
    with pytest.raises(ValueError):
        engine.compute(b"abc", 4)
    with pytest.raises(ValueError):
        engine.compute(b"abc", -1)
    with pytest.raises(TypeError):
        engine.compute(b"abc", 1.5)


def test_seed_out_of_range_rejected():
    engine = DirectCrcEngine(0x07, width=8, direction="left")
    with pytest.raises(ValueError):
        engine.compute(b"abc", seed=0x100)
    with pytest.raises(TypeError):
        engine.compute(b"abc", seed="0")


def test_accepts_bytes_like_inputs():
    engine = DirectCrcEngine(0x1021, width=16, direction="left")
    expected = engine.compute(CHECK_INPUT)
    assert engine.compute(bytearray(CHECK_INPUT)) == expected
    assert engine.compute(memoryview(CHECK_INPUT)) == expected
    assert engine.compute(np.frombuffer(CHECK_INPUT, dtype=np.uint8)) == expected


def test_rejects_non_bytes_inputs():
    engine = DirectCrcEngine(0x1021, width=16, direction="left")
    with pytest.raises(TypeError):
        engine.compute("123456789")
    with pytest.raises(TypeError):
        engine.compute([1, 2, 3])
    with pytest.raises(TypeError):
        engine.compute(np.zeros(4, dtype=np.uint16))


def test_engine_state_unchanged_between_calls():
    engine = DirectCrcEngine(0x8005, width=16, direction="right")
    first = engine.compute(CHECK_INPUT)
    engine.compute(b"something else entirely", seed=0xFFFF)
    assert engine.compute(CHECK_INPUT) == first


def test_properties():
    engine = DirectCrcEngine(0x1021, width=16, direction="right")
    assert engine.width == 16
    assert engine.direction is ShiftDir.RIGHT
    assert engine.polynomial == 0x1021
    assert engine.stored_polynomial == 0x8408
    assert engine.mask == 1
    assert engine.pack == 0
    assert repr(engine) == "DirectCrcEngine(0x1021, width=16, direction='right')"


def test_create_from_config():
    engine = create(Config(width=32, direction="left", polynomial=0x04C11DB7))
    assert isinstance(engine, DirectCrcEngine)
    assert engine.mask == 0x80000000
    assert engine.pack == 24


def test_create_rejects_non_config():
    with pytest.raises(TypeError):
        create({"width": 16})
