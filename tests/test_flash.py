import pytest

from flashkv.flash import (
    DB_SIZE,
    DB_START,
    FLASH_BASE,
    PAGE_SIZE,
    FlashError,
    FlashMemory,
)


def test_default_region():
    flash = FlashMemory()
    assert flash.start == DB_START
    assert flash.size == DB_SIZE
    assert DB_SIZE == 0x1000


def test_new_flash_is_erased():
    flash = FlashMemory()
    assert flash.read(DB_START, DB_SIZE) == b"\xff" * DB_SIZE


def test_write_read_round_trip():
    flash = FlashMemory()
    data = bytes(range(16))
    flash.write(DB_START + 8, data)
    assert flash.read(DB_START + 8, 16) == data
    assert flash.read(DB_START, 8) == b"\xff" * 8


def test_misaligned_address_rejected():
    flash = FlashMemory()
    with pytest.raises(FlashError):
        flash.write(DB_START + 4, b"\0" * 8)


def test_misaligned_length_rejected():
    flash = FlashMemory()
    with pytest.raises(FlashError):
        flash.write(DB_START, b"\0" * 7)


def test_write_outside_region_rejected():
    flash = FlashMemory()
    with pytest.raises(FlashError):
        flash.write(DB_START + DB_SIZE, b"\0" * 8)


def test_read_outside_region_rejected():
    flash = FlashMemory()
    with pytest.raises(FlashError):
        flash.read(DB_START - 8, 8)


def test_programming_only_clears_bits():
    flash = FlashMemory()
    flash.write(DB_START, b"\x0f" * 8)
    flash.write(DB_START, b"\xf0" * 8)
    assert flash.read(DB_START, 8) == b"\x00" * 8


def test_erase_page_restores_only_that_page():
    flash = FlashMemory()
    flash.write(DB_START, b"\0" * 8)
    flash.write(DB_START + PAGE_SIZE, b"\0" * 8)
    flash.erase_page(DB_START + PAGE_SIZE + 100)
    assert flash.read(DB_START + PAGE_SIZE, 8) == b"\xff" * 8
    assert flash.read(DB_START, 8) == b"\0" * 8


def test_erase_below_flash_base():
    flash = FlashMemory()
    with pytest.raises(FlashError, match="below flash base"):
        flash.erase_page(FLASH_BASE - 1)


def test_erase_outside_region():
    flash = FlashMemory()
    with pytest.raises(FlashError):
        flash.erase_page(FLASH_BASE)


def test_region_below_flash_base_rejected():
    with pytest.raises(FlashError):
        FlashMemory(FLASH_BASE - PAGE_SIZE, PAGE_SIZE)