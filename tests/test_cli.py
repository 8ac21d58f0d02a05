"""
Tests for the command-line interface.
"""

import io
import os
import unittest
from contextlib import redirect_stdout
from datetime import datetime, timezone
from pathlib import Path
from tempfile import TemporaryDirectory
from types import SimpleNamespace
from unittest.mock import MagicMock, patch
from uuid import UUID

from smartschool_client import cli
from smartschool_client.errors import INVALID_CREDENTIALS, AuthError

FILE_ID = UUID("0b6f1a52-4c3e-4a63-9a53-2d0f3b0e8f11")
ARGS = ["--url", "https://myschool.smartschool.be", "--user", "jdoe", "--password", "pw"]


def _fake_file(name="verslag.docx"):
    return SimpleNamespace(
        id=FILE_ID,
        name=name,
        date_changed=datetime(2019, 6, 2, 8, 30, tzinfo=timezone.utc),
        current_revision=SimpleNamespace(file_name=name, file_size=4),
    )


class TestCli(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.session.__enter__.return_value = self.session

    @patch("smartschool_client.cli.mydoc.get_recent_files")
    @patch("smartschool_client.cli.login")
    def test_recent(self, mock_login, mock_recent):
        mock_login.return_value = self.session
        mock_recent.return_value = [_fake_file()]
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(ARGS + ["recent"])
        self.assertEqual(code, 0)
        self.assertIn("verslag.docx", out.getvalue())
        self.assertEqual(mock_login.call_args[0], ("https://myschool.smartschool.be", "jdoe", "pw"))
        mock_recent.assert_called_once_with(self.session)

    @patch("smartschool_client.cli.mydoc.get_recent_files", return_value=[])
    @patch("smartschool_client.cli.login")
    def test_recent_empty(self, mock_login, _mock_recent):
        mock_login.return_value = self.session
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(ARGS + ["recent"])
        self.assertIn("No recently modified files", out.getvalue())

    @patch("smartschool_client.cli.login")
    def test_login_failure_exit_code(self, mock_login):
        mock_login.side_effect = AuthError(INVALID_CREDENTIALS, "bad password")
        self.assertEqual(cli.main(ARGS + ["recent"]), 1)

    def test_missing_url(self):
        with patch.object(cli, "DEFAULT_URL", ""):
            self.assertEqual(cli.main(["--user", "jdoe", "--password", "pw", "recent"]), 2)

    @patch("smartschool_client.cli.mydoc.download_file", return_value=b"data")
    @patch("smartschool_client.cli.login")
    def test_download_to_path(self, mock_login, mock_download):
        mock_login.return_value = self.session
        with TemporaryDirectory() as tmp:
            target = Path(tmp) / "out.bin"
            code = cli.main(ARGS + ["download", str(FILE_ID), "-o", str(target)])
            self.assertEqual(code, 0)
            self.assertEqual(target.read_bytes(), b"data")
        mock_download.assert_called_once_with(self.session, FILE_ID)

    @patch("smartschool_client.cli.mydoc.download_file", return_value=b"data")
    @patch("smartschool_client.cli.mydoc.get_file_revisions")
    @patch("smartschool_client.cli.login")
    def test_download_named_after_newest_revision(self, mock_login, mock_revisions, _mock_download):
        mock_login.return_value = self.session
        mock_revisions.return_value = [
            SimpleNamespace(date=datetime(2019, 6, 1, tzinfo=timezone.utc), file_name="v1.docx"),
            SimpleNamespace(date=datetime(2019, 6, 2, tzinfo=timezone.utc), file_name="v2.docx"),
        ]
        cwd = Path.cwd()
        with TemporaryDirectory() as tmp:
            try:
                os.chdir(tmp)
                code = cli.main(ARGS + ["download", str(FILE_ID)])
                self.assertEqual(code, 0)
                self.assertEqual((Path(tmp) / "v2.docx").read_bytes(), b"data")
            finally:
                os.chdir(cwd)

    @patch("smartschool_client.cli.mydoc.download_file")
    @patch("smartschool_client.cli.mydoc.get_file_revisions", return_value=[])
    @patch("smartschool_client.cli.login")
    def test_download_without_revisions(self, mock_login, _mock_revisions, mock_download):
        mock_login.return_value = self.session
        self.assertEqual(cli.main(ARGS + ["download", str(FILE_ID)]), 1)
        mock_download.assert_not_called()

    @patch("smartschool_client.cli.mydoc.download_file", return_value=b"data")
    @patch("smartschool_client.cli.mydoc.get_folder_contents")
    @patch("smartschool_client.cli.login")
    def test_download_folder(self, mock_login, mock_contents, _mock_download):
        mock_login.return_value = self.session
        mock_contents.return_value = ([_fake_file("a.txt"), _fake_file("b.txt")], [])
        with TemporaryDirectory() as tmp:
            code = cli.main(ARGS + ["download-folder", "favourites", "-o", tmp])
            self.assertEqual(code, 0)
            self.assertEqual(sorted(p.name for p in Path(tmp).iterdir()), ["a.txt", "b.txt"])
        mock_contents.assert_called_once_with(self.session, "favourites")


if __name__ == "__main__":
    unittest.main()
