'''
# Elf format

Executable and Linkage Format is a file format vastly used in the *nix world.

Here only the header at the start of the file is handled: the identification
block, whose EI_CLASS and EI_DATA indicate how to read everything else, and
the fields that follow it.

Reference to <http://www.sco.com/developers/gabi/latest/ch4.eheader.html>.
'''
import logging
from typing import Tuple

from . import fields as elf_fields
from ... import fields
from ...core import Chunk, ChunkField
from ...properties import Dependency
from ...streams import Stream
from .enum import (
    ELFMAG,
    EI_NIDENT,
    ElfClass,
    ElfEncoding,
    ElfAbi,
    ElfType,
    ElfMachine,
)


logger = logging.getLogger(__name__)


class ElfIdent(Chunk):
    EI_MAG        = fields.MagicField(ELFMAG)
    EI_CLASS      = elf_fields.ElfEnumField('B', ElfClass)  # determines the architecture
    EI_DATA       = elf_fields.ElfEnumField('B', ElfEncoding)  # determines the endianess of the binary data
    EI_VERSION    = fields.StructField('B')  # always 1
    EI_OSABI      = elf_fields.ElfEnumField('B', ElfAbi)
    EI_ABIVERSION = fields.StructField('B')
    EI_PAD        = fields.PaddingField(EI_NIDENT, consumed=Dependency('.size'))


ELF_CLASS = Dependency('.e_ident.EI_CLASS')
ELF_DATA = Dependency('.e_ident.EI_DATA')


class ElfHeader(Chunk):
    e_ident     = ChunkField(ElfIdent)
    e_type      = elf_fields.ElfEnumField('H', ElfType, encoding=ELF_DATA)
    e_machine   = elf_fields.ElfEnumField('H', ElfMachine, encoding=ELF_DATA)
    e_version   = elf_fields.Elf_Word(encoding=ELF_DATA)  # a word, so the header is 52 or 64 bytes long
    e_entry     = elf_fields.Elf_Addr(elf_class=ELF_CLASS, encoding=ELF_DATA)
    e_phoff     = elf_fields.Elf_Off(elf_class=ELF_CLASS, encoding=ELF_DATA)
    e_shoff     = elf_fields.Elf_Off(elf_class=ELF_CLASS, encoding=ELF_DATA)
    e_flags     = elf_fields.Elf_Flags(encoding=ELF_DATA)
    e_ehsize    = elf_fields.Elf_Half(encoding=ELF_DATA)
    e_phentsize = elf_fields.Elf_Half(encoding=ELF_DATA)
    e_phnum     = elf_fields.Elf_Half(encoding=ELF_DATA)
    e_shentsize = elf_fields.Elf_Half(encoding=ELF_DATA)
    e_shnum     = elf_fields.Elf_Half(encoding=ELF_DATA)
    e_shstrndx  = elf_fields.Elf_Half(encoding=ELF_DATA)

    def __str__(self):
        ident = self.e_ident
        return f'''ELF Header:
  Magic:                             {ident.EI_MAG.hex()}
  Class:                             {ident.EI_CLASS.name}
  Data:                              {ident.EI_DATA.name}
  Version:                           {ident.EI_VERSION}
  OS/ABI:                            {ident.EI_OSABI.name}
  ABI Version:                       {ident.EI_ABIVERSION}
  Type:                              {self.e_type.name}
  Machine:                           {self.e_machine.name}
  Version:                           {self.e_version:#x}
  Entry point address:               {self.e_entry}
  Start of program headers:          {int(self.e_phoff)} (bytes into file)
  Start of section headers:          {int(self.e_shoff)} (bytes into file)
  Flags:                             {self.e_flags}
  Size of this header:               {self.e_ehsize} (bytes)
  Size of program headers:           {self.e_phentsize} (bytes)
  Number of program headers:         {self.e_phnum}
  Size of section headers:           {self.e_shentsize} (bytes)
  Number of section headers:         {self.e_shnum}
  Section header string table index: {self.e_shstrndx}'''


def decode_header(data: bytes) -> Tuple[ElfHeader, bytes]:
    '''Unpack the ELF header at the start of data (bytes, bytearray or
    memoryview), returning it together with the bytes that follow it.

    It raises IncompleteException if data ends before the header does,
    an UnpackException if the header is malformed and ValueError if data
    is not a buffer.'''
    with Stream(data) as stream:
        header = ElfHeader.unpack(stream)
        logger.debug('unpacked header of %d bytes' % header.size)

        return header, stream.read_all()
