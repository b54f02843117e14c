"""Tests for the token manifest and asset export."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from blogstyle.site.export import export_assets
from blogstyle.site.manifest import compute_sha256, create_manifest, write_manifest
from blogstyle.site.styles import CSS


class TestComputeSha256(unittest.TestCase):
    def test_hash_string(self) -> None:
        result = compute_sha256("hello world")
        self.assertEqual(
            result,
            "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9",
        )

    def test_bytes_and_str_agree(self) -> None:
        self.assertEqual(compute_sha256("abc"), compute_sha256(b"abc"))


class TestCreateManifest(unittest.TestCase):
    def test_contents(self) -> None:
        manifest = create_manifest(CSS)
        self.assertEqual(manifest.stylesheet_sha256, compute_sha256(CSS))
        self.assertEqual([s.step for s in manifest.steps], [-2, -1, 0, 1, 2, 3, 4])
        self.assertEqual(manifest.steps[2].font_size, 1.0)
        self.assertEqual(manifest.steps[4].font_size_css, "1.2656rem")
        self.assertEqual(manifest.weights["bold"], 700)
        self.assertEqual(manifest.z_index["header"], 200)
        self.assertIn("mono", manifest.families)
        self.assertEqual(set(manifest.themes), {"light", "dark"})

    def test_write_manifest_is_byte_stable(self) -> None:
        manifest = create_manifest(CSS)
        with tempfile.TemporaryDirectory() as td:
            out = Path(td)
            b1 = write_manifest(manifest, out).read_bytes()
            b2 = write_manifest(manifest, out).read_bytes()
            self.assertEqual(b1, b2)
            self.assertTrue(b1.endswith(b"\n"))
            payload = json.loads(b1)
            self.assertEqual(payload["scale"]["ratio"], 1.125)
            self.assertEqual(payload["schema_version"], 1)


class TestExportAssets(unittest.TestCase):
    def test_writes_stylesheet_and_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "assets"
            result = export_assets(out)

            self.assertEqual(result.stylesheet, out / "style.css")
            self.assertTrue(result.stylesheet.exists())
            self.assertTrue(result.manifest.exists())
            self.assertEqual(result.warnings, [])

            css = result.stylesheet.read_text(encoding="utf-8")
            self.assertEqual(css, CSS)
            payload = json.loads(result.manifest.read_text(encoding="utf-8"))
            self.assertEqual(payload["stylesheet_sha256"], compute_sha256(css))

    def test_minified_export_warns_about_stale_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td)
            export_assets(out, mode="light")
            result = export_assets(out, mode="light", minified=True)

            self.assertEqual(result.stylesheet.name, "style.min.css")
            self.assertNotIn("/*", result.stylesheet.read_text(encoding="utf-8"))
            self.assertEqual(len(result.warnings), 1)
            self.assertIn("style.css", result.warnings[0])


if __name__ == "__main__":
    unittest.main()
