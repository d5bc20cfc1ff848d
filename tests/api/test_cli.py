"""Tests for the yamlindex command line interface."""

import pytest

from yamlindex.cli import EXIT_ERROR, EXIT_NOT_FOUND, EXIT_OK, build_parser, main


DOCUMENT = """\
name: demo
items:
  - first
  - second
nested:
  key: 'value'
text: |
  two
  lines
"""


@pytest.fixture
def document(tmp_path):
    path = tmp_path / 'doc.yaml'
    path.write_text(DOCUMENT, encoding='utf-8')
    return str(path)


def run(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


class TestCommands:

    def test_type(self, capsys, document):
        """type prints the root node type."""
        assert run(capsys, '-f', document, 'type') == (EXIT_OK, "mapping\n", "")

    def test_get(self, capsys, document):
        """get prints the YAML of a top-level value."""
        status, out, _err = run(capsys, '-f', document, 'get', 'nested')
        assert status == EXIT_OK
        assert out == "key: 'value'\n"

    def test_get_text(self, capsys, document):
        """get-text prints a scalar without quoting."""
        status, out, _err = run(capsys, '-f', document, 'get-text', 'name')
        assert (status, out) == (EXIT_OK, "demo\n")

    def test_get_text_block(self, capsys, document):
        """A scalar ending in a line break is printed as is."""
        status, out, _err = run(capsys, '-f', document, 'get-text', 'text')
        assert (status, out) == (EXIT_OK, "two\nlines\n")

    def test_get_missing(self, capsys, document):
        """A missing key prints nothing and exits 1."""
        assert run(capsys, '-f', document, 'get', 'nope') == (EXIT_NOT_FOUND, "", "")

    def test_path(self, capsys, document):
        """path accepts keys and positions."""
        status, out, _err = run(capsys, '-f', document, 'path-text', 'items', '-1')
        assert (status, out) == (EXIT_OK, "second\n")
        status, out, _err = run(capsys, '-f', document, 'path', 'nested', 'key')
        assert (status, out) == (EXIT_OK, "'value'\n")

    def test_keys(self, capsys, document):
        """keys prints one key per line."""
        status, out, _err = run(capsys, '-f', document, 'keys')
        assert (status, out) == (EXIT_OK, "name\nitems\nnested\ntext\n")

    def test_elements_of_mapping(self, capsys, document):
        """elements prints key TAB value, one entry per line."""
        status, out, _err = run(capsys, '-f', document, 'elements')
        lines = out.splitlines()
        assert status == EXIT_OK
        assert lines[0] == "name\tdemo"
        assert lines[2] == "nested\tkey: 'value'"
        assert len(lines) == 4

    def test_length_and_element(self, capsys, tmp_path):
        """length and element work on a sequence root."""
        path = tmp_path / 'list.yaml'
        path.write_text("- a\n- [b, c]\n", encoding='utf-8')
        assert run(capsys, '-f', str(path), 'length') == (EXIT_OK, "2\n", "")
        assert run(capsys, '-f', str(path), 'element', '1') == (EXIT_OK, "[b, c]\n", "")
        assert run(capsys, '-f', str(path), 'element-text', '0') == (EXIT_OK, "a\n", "")
        assert run(capsys, '-f', str(path), 'element', '5') == (EXIT_NOT_FOUND, "", "")


class TestFailures:

    def test_syntax_error(self, capsys, tmp_path):
        """Ill-formed input exits 2 with a message on stderr."""
        path = tmp_path / 'bad.yaml'
        path.write_text("a: [1, 2", encoding='utf-8')
        status, out, err = run(capsys, '-f', str(path), 'type')
        assert status == EXIT_ERROR
        assert out == ""
        assert err.startswith("yamlindex: ")

    def test_length_of_mapping(self, capsys, document):
        """length of a mapping is an error."""
        status, _out, err = run(capsys, '-f', document, 'length')
        assert status == EXIT_ERROR
        assert 'mapping' in err

    def test_missing_file(self, capsys, tmp_path):
        """An unreadable file exits 2."""
        status, _out, err = run(capsys, '-f', str(tmp_path / 'absent.yaml'), 'type')
        assert status == EXIT_ERROR
        assert err.startswith("yamlindex: ")

    def test_no_command(self):
        """A command is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
