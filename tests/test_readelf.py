def test_usage(readelf, capsys):
    assert readelf.main(['readelf.py']) == 1

    assert 'usage: readelf.py <elf file>' in capsys.readouterr().out


def test_dump_header(readelf, capsys, tmp_path, elf64_le):
    path = tmp_path / 'a.out'
    path.write_bytes(elf64_le + b'\x00' * 0x100)

    assert readelf.main(['readelf.py', str(path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith('ELF Header:')
    assert 'EM_X86_64' in out
    assert 'ET_EXEC' in out


def test_dump_error(readelf, capsys, tmp_path, header_builder):
    path = tmp_path / 'a.out'
    path.write_bytes(header_builder(e_machine=0xffff))

    assert readelf.main(['readelf.py', str(path)]) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.splitlines() == [
        f'error: {path}',
        '  in e_machine',
        '  unknown Machine code 0xffff',
    ]


def test_dump_incomplete(readelf, capsys, tmp_path, elf64_le):
    path = tmp_path / 'a.out'
    path.write_bytes(elf64_le[:19])

    assert readelf.main(['readelf.py', str(path)]) == 1

    err = capsys.readouterr().err
    assert '  in e_machine' in err
    assert 'file too short' in err


def test_missing_file(readelf, capsys, tmp_path):
    assert readelf.main(['readelf.py', str(tmp_path / 'missing')]) == 1

    assert 'failed to read' in capsys.readouterr().err
