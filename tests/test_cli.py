import io
import unittest

from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path
from tempfile import TemporaryDirectory

from atmfjstc.lib.variant_codegen.cli.errors import DescriptiveError, fail, descriptive_errors, short_format_exception
from atmfjstc.lib.variant_codegen.cli.main import main, build_parser, config_from_args
from atmfjstc.lib.variant_codegen.errors import MissingKeywordError


class CliTest(unittest.TestCase):
    def setUp(self):
        self._tmp = TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, content: str) -> str:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')

        return str(path)

    def test_output_to_stdout(self):
        source = self._write('mesh.txt', 'INDEXES, 2')
        stdout = io.StringIO()

        with redirect_stdout(stdout):
            main(['mesh-indexes', source])

        self.assertIn('MAX_MESH_TRIANGLES = 2', stdout.getvalue())

    def test_output_to_file(self):
        source = self._write('direction.txt', 'enum Direction { North, South }')
        output = str(self.root / 'direction.py')

        with redirect_stdout(io.StringIO()):
            main(['--output', output, 'enum', source])

        namespace = {}
        exec(Path(output).read_text(encoding='utf-8'), namespace)

        self.assertEqual(namespace['Direction'].SIZE, 2)

    def test_colors_full(self):
        source = self._write('colors.txt', 'clear: C, extensions: E, grid: G, entities: N, ui: U')
        output = str(self.root / 'colors.py')

        with redirect_stdout(io.StringIO()):
            main(['--output', output, 'colors', '--full', '--texture-height-range-end', '10', source])

        namespace = {}
        exec(Path(output).read_text(encoding='utf-8'), namespace)

        self.assertEqual(namespace['Color'].clip_height(), 12.0)

    def test_assets_with_root(self):
        self._write('embedded_assets/font.ttf', '')
        stdout = io.StringIO()

        with redirect_stdout(stdout):
            main(['--root', str(self.root), 'assets'])

        self.assertIn('embedded_asset(app, "font.ttf")', stdout.getvalue())

    def test_generation_error_is_descriptive(self):
        source = self._write('nothing.txt', 'nothing to see here')
        stderr = io.StringIO()

        with redirect_stderr(stderr), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                main(['enum', source])

        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Keyword 'enum' not found", stderr.getvalue())
        self.assertNotIn('Traceback', stderr.getvalue())

    def test_missing_input_file(self):
        stderr = io.StringIO()

        with redirect_stderr(stderr), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(['enum', str(self.root / 'missing.txt')])

        self.assertIn('does not exist', stderr.getvalue())

    def test_config_from_args(self):
        args = build_parser().parse_args(['--width', '60', 'subtool', '--docs-dir', 'docs/binds'])
        config = config_from_args(args)

        self.assertEqual(config.width, 60)
        self.assertEqual(config.indent, 4)
        self.assertEqual(config.subtool_docs_dir, 'docs/binds')


class DescriptiveErrorsTest(unittest.TestCase):
    def test_fail(self):
        with self.assertRaises(DescriptiveError) as cm:
            fail("""
                Something went wrong
            """)

        self.assertEqual(str(cm.exception), 'Something went wrong')

    def test_conversion(self):
        with self.assertRaises(DescriptiveError) as cm:
            with descriptive_errors(MissingKeywordError):
                raise MissingKeywordError('ui')

        self.assertEqual(str(cm.exception), "Keyword 'ui' not found before the end of input")

    def test_other_errors_pass_through(self):
        with self.assertRaises(KeyError):
            with descriptive_errors(MissingKeywordError):
                raise KeyError('x')

    def test_short_format(self):
        self.assertEqual(short_format_exception(ValueError('bad')), 'ValueError: bad')
