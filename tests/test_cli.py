import pytest

from exestruct.attributes import Attribute
from exestruct.cli import main, parse_params, find_file, Operations, OperationsError
from exestruct.core import Identification, Metadata, SimpleHandler
from exestruct.enum import Confidence
from exestruct.fields import u8, stringz
from exestruct.registry import Registry


class Tiny(SimpleHandler):
    '''The name of the data file is inside the executable'''
    attributes = [
        Attribute('lives', u8(), offset=4, min=1, max=5, desc='Initial lives'),
        Attribute('filename.data', stringz(9)),
    ]

    def metadata(self):
        return Metadata('exe-tiny', 'Tiny', params={'level': 'Level to start from'})

    def identify(self, content):
        return self.identify_by_signature(content, 0, b'TINY')

    def supps(self, name, content):
        filename = self.extract({'main': content})['filename.data'].value
        return {'data': filename.lower()}


class Maybe(Tiny):

    def __init__(self, id):
        super().__init__()
        self._id = id

    def metadata(self):
        return Metadata(self._id, self._id.title())

    def identify(self, content):
        return Identification(Confidence.AMBIGUOUS, 'it could be')


class Plain(Tiny):
    '''Same layout as Tiny but without data file'''

    def metadata(self):
        return Metadata('exe-plain', 'Plain')

    def supps(self, name, content):
        return None


class Named(Tiny):
    '''The data file is named after the executable'''

    def metadata(self):
        return Metadata('exe-named', 'Named')

    def supps(self, name, content):
        return {'data': name.rsplit('.', 1)[0] + '.dat'}


EXE = b'TINY' + b'\x03' + b'DATA.BIN\x00' + b'\x00' * 2


@pytest.fixture
def registry():
    return Registry([Tiny()])


@pytest.fixture
def exe(tmp_path):
    path = tmp_path / 'GAME.EXE'
    path.write_bytes(EXE)
    (tmp_path / 'DATA.BIN').write_bytes(b'data')

    return path


def run(registry, *args):
    return main(['exestruct.py'] + [str(_) for _ in args], registry=registry)


def test_help(registry, capsys):
    assert run(registry) == 0
    assert run(registry, '--help') == 0

    out, _ = capsys.readouterr()
    assert out.startswith('Use: exestruct.py --formats')


def test_formats(registry, capsys):
    assert run(registry, '--formats') == 0

    out, _ = capsys.readouterr()
    assert out == 'exe-tiny: Tiny\n  * level: Level to start from\n'


def test_unknown_command(registry, capsys):
    assert run(registry, 'explode') == 1

    _, err = capsys.readouterr()
    assert 'Unknown command: explode' in err


def test_parse_params():
    definition = Operations.names['open']

    assert parse_params(definition, ['-f', 'exe-tiny', 'a.exe', 'list']) == (
        {'format': 'exe-tiny', 'target': 'a.exe'}, ['list'])
    assert parse_params(definition, ['a.exe', '-f', 'exe-tiny']) == (
        {'format': 'exe-tiny', 'target': 'a.exe'}, [])
    assert parse_params(Operations.names['list'], ['ls']) == ({}, ['ls'])

    with pytest.raises(OperationsError):
        parse_params(definition, ['-f'])


def test_find_file(exe):
    directory = exe.parent

    assert find_file(str(directory / 'DATA.BIN')) == str(directory / 'DATA.BIN')
    assert find_file(str(directory / 'data.bin')).lower() == str(directory / 'data.bin').lower()
    assert find_file(str(directory / 'missing.bin')) is None


def test_identify(registry, exe, capsys):
    assert run(registry, 'identify', exe) == 0

    out, _ = capsys.readouterr()
    assert '1 format handler(s) matched' in out
    assert '>> Trying handler for exe-tiny (Tiny)' in out
    assert 'contains 2 attributes' in out


def test_identify_missing_supp(registry, exe, capsys):
    (exe.parent / 'DATA.BIN').unlink()

    assert run(registry, 'identify', exe) == 0

    out, _ = capsys.readouterr()
    assert 'Skipping format' in out


def test_identify_unknown(registry, tmp_path, capsys):
    path = tmp_path / 'OTHER.EXE'
    path.write_bytes(b'\x00' * 16)

    assert run(registry, 'identify', path) == 0

    out, _ = capsys.readouterr()
    assert '0 format handler(s) matched' in out


def test_open_list(registry, exe, capsys):
    for command in ('list', 'ls', 'dir'):
        assert run(registry, 'open', exe, command) == 0

        out, _ = capsys.readouterr()
        assert out.splitlines() == [
            'filename.data: "DATA.BIN"',
            'lives: "3"  // Initial lives',
        ]


def test_set_show(registry, exe, capsys):
    assert run(registry, 'open', exe, 'set', '-a', 'lives', '0x4', 'show', 'lives') == 0

    out, _ = capsys.readouterr()
    assert out == '4\n'


def test_set_out_of_range(registry, exe, caplog):
    assert run(registry, 'open', exe, 'set', '-a', 'lives', '9') == 0

    assert 'outside the expected range' in caplog.text


def test_save(registry, exe, tmp_path):
    out = tmp_path / 'out'
    out.mkdir()

    assert run(
        registry,
        'open', exe,
        'set', '-a', 'lives', '2',
        'set', '-a', 'filename.data', 'LEVEL.BN',
        'save', out / 'GAME.EXE',
    ) == 0

    saved = (out / 'GAME.EXE').read_bytes()

    assert saved[4] == 2
    assert saved[5:14] == b'LEVEL.BN\x00'
    # the data file follows the new name
    assert (out / 'level.bn').read_bytes() == b'data'
    # the opened file is untouched
    assert exe.read_bytes() == EXE


def test_save_supps(registry, exe, tmp_path):
    out = tmp_path / 'out'
    out.mkdir()

    assert run(registry, 'open', exe, 'save', out / 'COPY.EXE') == 0

    assert (out / 'COPY.EXE').read_bytes() == EXE
    assert (out / 'data.bin').read_bytes() == b'data'


@pytest.mark.parametrize('args', [
    ('open',),
    ('open', 'nonexistent.exe'),
    ('open', '-f', 'exe-unknown', '{exe}'),
    ('list',),
    ('save', 'out.exe'),
    ('show', 'lives'),
    ('identify',),
    ('open', '{exe}', 'set', '-a', 'unknown', '1'),
    ('open', '{exe}', 'set', '-a', 'lives', 'many'),
    ('open', '{exe}', 'set', '-a', 'lives'),
    ('open', '{exe}', 'save'),
])
def test_operations_errors(registry, exe, capsys, args):
    args = [_.format(exe=exe) for _ in args]

    assert run(registry, *args) == 2

    _, err = capsys.readouterr()
    assert err


def test_open_missing_supp(registry, exe, capsys):
    (exe.parent / 'DATA.BIN').unlink()

    assert run(registry, 'open', exe) == 2

    _, err = capsys.readouterr()
    assert 'unable to open supplementary file' in err


def test_open_ambiguous(exe, capsys):
    registry = Registry([Maybe('first'), Maybe('second')])

    assert run(registry, 'open', exe, 'list') == 2

    _, err = capsys.readouterr()
    assert ' * first (First)' in err
    assert ' * second (Second)' in err
    assert '-f option' in err

    assert run(registry, 'open', '-f', 'second', exe, 'list') == 0



def test_save_unloaded_supp(exe, tmp_path, capsys):
    """Saving with a format needing a file that was never opened is a user error
    and nothing is written."""
    registry = Registry([Plain(), Tiny()])
    out = tmp_path / 'out'
    out.mkdir()

    assert run(registry, 'open', '-f', 'exe-plain', exe, 'save', '-f', 'exe-tiny', out / 'GAME.EXE') == 2

    _, err = capsys.readouterr()
    assert 'supplementary file "data" was not loaded' in err
    assert list(out.iterdir()) == []


def test_supps_keep_user_case(tmp_path):
    """The part of the name coming from the user keeps its case, the
    extension added by the handler is lowercase."""
    registry = Registry([Named()])
    exe = tmp_path / 'MyGame.EXE'
    exe.write_bytes(EXE)
    (tmp_path / 'MyGame.dat').write_bytes(b'data')
    out = tmp_path / 'out'
    out.mkdir()

    assert Named().supps('MyGame.EXE', EXE) == {'data': 'MyGame.dat'}

    assert run(registry, 'open', exe, 'save', out / 'NewGame.EXE') == 0

    assert sorted(_.name for _ in out.iterdir()) == ['NewGame.EXE', 'NewGame.dat']
    assert (out / 'NewGame.dat').read_bytes() == b'data'


def test_default_formats(tmp_path):
    from exestruct.executables.ddave import SIGNATURE, SIGNATURE_OFFSET

    data = bytearray(0x27000)
    data[SIGNATURE_OFFSET:SIGNATURE_OFFSET + len(SIGNATURE)] = SIGNATURE
    path = tmp_path / 'DAVE.EXE'
    path.write_bytes(bytes(data))

    assert main([
        'exestruct.py',
        'open', str(path),
        'set', '-a', 'default.hsc.1.score', '500',
        'save', str(tmp_path / 'PATCHED.EXE'),
    ]) == 0

    patched = (tmp_path / 'PATCHED.EXE').read_bytes()
    assert patched[0x25F54:0x25F59] == b'\x00\x00\x05\x00\x00'
