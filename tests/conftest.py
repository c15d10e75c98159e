import importlib.util
import struct
from pathlib import Path

import pytest


def build_header(elf_class=2, encoding=1, version=1, osabi=0, abiversion=0,
                 e_type=2, e_machine=0x3e, e_version=1, e_entry=0x401040,
                 e_phoff=64, e_shoff=0x3698, e_flags=0, e_ehsize=None,
                 e_phentsize=56, e_phnum=13, e_shentsize=64, e_shnum=31, e_shstrndx=30):
    '''Build the raw bytes of an ELF header the way a linker would write it.'''
    prefix = '>' if encoding == 2 else '<'
    word = 'I' if elf_class == 1 else 'Q'
    if e_ehsize is None:
        e_ehsize = 52 if elf_class == 1 else 64

    ident = b'\x7fELF' + bytes([elf_class, encoding, version, osabi, abiversion]) + b'\x00' * 7

    return ident + struct.pack(
        prefix + 'HHI' + word * 3 + 'I' + 'H' * 6,
        e_type, e_machine, e_version,
        e_entry, e_phoff, e_shoff,
        e_flags,
        e_ehsize, e_phentsize, e_phnum, e_shentsize, e_shnum, e_shstrndx,
    )


@pytest.fixture
def header_builder():
    return build_header


@pytest.fixture
def elf64_le():
    return build_header()


@pytest.fixture
def elf32_be():
    return build_header(
        elf_class=1, encoding=2, e_machine=8, e_entry=0x400130,
        e_phoff=52, e_shoff=0x1f2c, e_flags=0x70001007,
        e_phentsize=32, e_phnum=9, e_shentsize=40, e_shnum=30, e_shstrndx=29,
    )


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def readelf(test_root_dir):
    '''The script is not part of the package, load it from its path.'''
    path = test_root_dir / '..' / 'scripts' / 'readelf.py'
    spec = importlib.util.spec_from_file_location('readelf', path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    return module
