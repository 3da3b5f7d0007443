import logging
import unittest

from typer.testing import CliRunner

from nostrcodec.cli import app

NPUB = "npub1mg2nzunrsk9df94zr3uudhzltnu6lzq2muax09xmhu5gxxrvnkqsvpjg3p"
NSEC = "nsec1je9jj72avgwd4nc9lk20kgeqdjy8gtd3lfgtxnt4ghe6ygsasyjq7kh6c4"
PUBLIC_HEX = "da15317263858ad496a21c79c6dc5f5cf9af880adf3a6794dbbf2883186c9d81"


class TestCli(unittest.TestCase):
    def test_keygen(self):
        runner = CliRunner()
        result = runner.invoke(app, ['keygen'])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("nsec1", result.output)
        self.assertIn("npub1", result.output)

    def test_convert(self):
        runner = CliRunner()
        result = runner.invoke(app, ['convert', NPUB])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(PUBLIC_HEX, result.output)

    def test_convert_nsec(self):
        runner = CliRunner()
        result = runner.invoke(app, ['convert', NSEC])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(NPUB, result.output)

    def test_convert_invalid(self):
        runner = CliRunner()
        result = runner.invoke(app, ['convert', NPUB[:-1] + "q"])
        self.assertEqual(result.exit_code, 1)

    def test_encode(self):
        runner = CliRunner()
        result = runner.invoke(app, ['encode', 'npub', PUBLIC_HEX])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), NPUB)

    def test_encode_too_long(self):
        runner = CliRunner()
        result = runner.invoke(app, ['encode', 'npub', "00" * 60])
        self.assertEqual(result.exit_code, 1)
        result = runner.invoke(
            app, ['encode', 'npub', "00" * 60, '--max-length', '0']
        )
        self.assertEqual(result.exit_code, 0)

    def test_decode(self):
        runner = CliRunner()
        result = runner.invoke(app, ['decode', NPUB])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(PUBLIC_HEX[:16], result.output)

    def test_decode_invalid(self):
        runner = CliRunner()
        result = runner.invoke(app, ['decode', 'pzry9x0s0muk'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

    def test_decode_strict(self):
        runner = CliRunner()
        mixed = NPUB[:5] + NPUB[5:].upper()
        result = runner.invoke(app, ['decode', mixed])
        self.assertEqual(result.exit_code, 0)
        result = runner.invoke(app, ['decode', '--strict', mixed])
        self.assertEqual(result.exit_code, 1)

    def test_single_log_handler(self):
        runner = CliRunner()
        runner.invoke(app, ['keygen'])
        runner.invoke(app, ['--verbose', '4', 'keygen'])
        log = logging.getLogger("nostrcodec")
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.DEBUG)
