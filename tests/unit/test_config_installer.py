# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from swissqr.config import installer


class TestConfigInstaller(unittest.TestCase):
    def test_user_config_dir_precedence(self) -> None:
        with mock.patch.dict(
            os.environ,
            {installer.XDG_CONFIG_ENV: "/tmp/xdg"},
            clear=False,
        ):
            with mock.patch.object(installer.sys, "platform", "linux"):
                self.assertEqual(installer._user_config_dir(), Path("/tmp/xdg/swissqr"))

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "darwin"):
                with mock.patch.object(installer.Path, "home", return_value=Path("/Users/example")):
                    self.assertEqual(
                        installer._user_config_dir(),
                        Path("/Users/example/.config/swissqr"),
                    )

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "linux"):
                with mock.patch.object(
                    installer, "user_config_dir", return_value="/home/example/.config/swissqr"
                ):
                    self.assertEqual(
                        installer._user_config_dir(),
                        Path("/home/example/.config/swissqr"),
                    )

    def test_init_user_config_copies_defaults_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with mock.patch.dict(os.environ, {installer.XDG_CONFIG_ENV: tmpdir}, clear=False):
                path = installer.init_user_config()
                self.assertEqual(path, Path(tmpdir) / "swissqr" / "config.toml")
                self.assertEqual(
                    path.read_text(encoding="utf-8"),
                    installer.DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"),
                )
                path.write_text('[bill]\nlanguage = "fr"\n', encoding="utf-8")
                self.assertEqual(installer.init_user_config(), path)
                self.assertIn('"fr"', path.read_text(encoding="utf-8"))

    def test_init_user_config_reports_os_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with mock.patch.dict(os.environ, {installer.XDG_CONFIG_ENV: tmpdir}, clear=False):
                with mock.patch.object(installer, "_copy_if_missing", side_effect=OSError("boom")):
                    with self.assertRaises(OSError) as ctx:
                        installer.init_user_config()
        self.assertIn("unable to create config dir", str(ctx.exception))

    def test_resolve_config_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with mock.patch.dict(os.environ, {installer.XDG_CONFIG_ENV: tmpdir}, clear=False):
                self.assertEqual(installer.resolve_config_path(), installer.DEFAULT_CONFIG_PATH)
                self.assertEqual(
                    installer.resolve_config_path("/tmp/explicit.toml"),
                    Path("/tmp/explicit.toml"),
                )
                user_path = installer.init_user_config()
                self.assertEqual(installer.resolve_config_path(), user_path)


if __name__ == "__main__":
    unittest.main()
