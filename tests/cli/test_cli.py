# type: ignore
from click.testing import CliRunner

import pollock.compile.pollockasm as pollockasm
import pollock.tools.pollockdis as pollockdis

import unit_utils
from fixtures import hello_source  # noqa: F401


def run_asm(*args):
    return CliRunner().invoke(pollockasm.assemble, [str(a) for a in args])


def test_assemble_default_output(hello_source):  # noqa: F811
    result = run_asm('-s', '-f', hello_source, '-c', 5)
    assert result.exit_code == pollockasm.EXIT_OK
    assert hello_source.with_suffix('.png').exists()


def test_assemble_explicit_output(hello_source, tmp_path):  # noqa: F811
    output = tmp_path / 'out' / 'image.png'
    result = run_asm('-s', '-f', hello_source, '-o', output)
    assert result.exit_code == pollockasm.EXIT_OK
    assert output.exists()


def test_dry_run_writes_nothing(hello_source):  # noqa: F811
    result = run_asm('-s', '-d', '-f', hello_source)
    assert result.exit_code == pollockasm.EXIT_OK
    assert not hello_source.with_suffix('.png').exists()


def test_byte_array(hello_source):  # noqa: F811
    result = run_asm('-s', '-d', '-b', '-f', hello_source)
    assert result.exit_code == pollockasm.EXIT_OK
    assert 'Line: 1 R: 72 G: 204 B: 188' in result.output
    assert 'Line: 3 R: 10 G: 204 B: 192' in result.output


def test_wrong_extension(tmp_path):
    source = tmp_path / 'hello.asm'
    source.write_text('add\n')
    result = run_asm('-f', source)
    assert result.exit_code == 2
    assert '.plk' in result.output


def test_cell_size_bounds(hello_source):  # noqa: F811
    assert run_asm('-f', hello_source, '-c', 1).exit_code == 2
    assert run_asm('-f', hello_source, '-c', 51).exit_code == 2
    assert run_asm('-s', '-d', '-f', hello_source, '-c', 50).exit_code == pollockasm.EXIT_OK


def test_missing_file():
    assert run_asm().exit_code == 2


def test_multiple_labels_abort(tmp_path):
    source = tmp_path / 'multilabel.plk'
    source.write_text(unit_utils.load_file('testdata/multilabel.plk'))
    result = run_asm('-f', source)
    assert result.exit_code == pollockasm.EXIT_SYNTAX_ERROR
    assert not source.with_suffix('.png').exists()


def test_unwritable_output(hello_source, tmp_path):  # noqa: F811
    result = run_asm('-s', '-f', hello_source, '-o', tmp_path)
    assert result.exit_code == pollockasm.EXIT_WRITE_ERROR


def test_disassemble(hello_source):  # noqa: F811
    assert run_asm('-s', '-f', hello_source).exit_code == pollockasm.EXIT_OK

    image = hello_source.with_suffix('.png')
    result = CliRunner().invoke(pollockdis.disassemble, [str(image)])
    assert result.exit_code == pollockdis.EXIT_OK
    assert 'version 1.0, cell size 10, 3 lines' in result.output
    assert 'push72; outc; nop' in result.output
    assert 'push10; outc; halt' in result.output


def test_disassemble_not_an_image(hello_source):  # noqa: F811
    result = CliRunner().invoke(pollockdis.disassemble, [str(hello_source)])
    assert result.exit_code == pollockdis.EXIT_FORMAT_ERROR


def test_output_parent_is_a_file(hello_source, tmp_path):  # noqa: F811
    parent = tmp_path / 'plain'
    parent.write_text('not a directory')
    result = run_asm('-s', '-f', hello_source, '-o', parent / 'out.png')
    assert result.exit_code == pollockasm.EXIT_WRITE_ERROR


def test_non_utf8_source(tmp_path):
    source = tmp_path / 'latin.plk'
    source.write_bytes(b'add # caf\xe9\n')
    result = run_asm('-s', '-d', '-b', '-f', source)
    assert result.exit_code == pollockasm.EXIT_OK
    assert 'Line: 1 R: 128 G: 188 B: 188' in result.output


def test_program_too_long(hello_source, monkeypatch):  # noqa: F811
    import pollock.image.encoder as encoder

    monkeypatch.setattr(encoder, 'MAX_PROGRAM_LENGTH', 2)
    result = run_asm('-s', '-f', hello_source)
    assert result.exit_code == pollockasm.EXIT_WRITE_ERROR
    assert not hello_source.with_suffix('.png').exists()
