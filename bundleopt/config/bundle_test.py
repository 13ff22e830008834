"""
bundle_test provides tests for JSON/YAML build config loading.
"""
from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from bundleopt.config.bundle import BundleConfig, SplitDimensionDirective
from bundleopt.config.dimension import OptimizationDimension
from bundleopt.config.tristate import Tristate
from bundleopt.version import CURRENT_VERSION, Version


class BundleConfigLoadTest(unittest.TestCase):
    """
    BundleConfigLoadTest provides tests for BundleConfig.from_path.
    """

    def _write(self, tmp: str, name: str, text: str) -> Path:
        path = Path(tmp) / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_yaml(self) -> None:
        """
        test loading a YAML build config with aliases and bare names.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                tmp,
                "c.yml",
                "\n".join(
                    [
                        "version: 0.6.0",
                        "split_dimensions:",
                        "  - value: abi",
                        "    negate: true",
                        "  - texture",
                        "uncompress_native_libraries: false",
                    ]
                ),
            )
            c = BundleConfig.from_path(path)
            self.assertEqual(c.version, Version.of("0.6.0"))
            self.assertEqual(
                c.split_dimensions,
                (
                    SplitDimensionDirective(value=OptimizationDimension.ABI, negate=True),
                    SplitDimensionDirective(
                        value=OptimizationDimension.TEXTURE_COMPRESSION_FORMAT
                    ),
                ),
            )
            self.assertIs(c.uncompress_native_libraries, Tristate.DISABLED)

    def test_load_json(self) -> None:
        """
        test loading a JSON build config.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                tmp,
                "c.json",
                json.dumps(
                    {
                        "version": "0.2.0",
                        "split_dimensions": [{"value": "LANGUAGE"}],
                        "uncompress_native_libraries": True,
                    }
                ),
            )
            c = BundleConfig.from_path(path)
            self.assertEqual(c.version, Version.of("0.2.0"))
            self.assertFalse(c.split_dimensions[0].negate)
            self.assertIs(c.uncompress_native_libraries, Tristate.ENABLED)

    def test_defaults_when_omitted(self) -> None:
        """
        test that omitted fields fall back to the current version and UNSET.
        """
        c = BundleConfig.from_payload({})
        self.assertEqual(c.version, CURRENT_VERSION)
        self.assertEqual(c.split_dimensions, ())
        self.assertIs(c.uncompress_native_libraries, Tristate.UNSET)

    def test_null_flag_is_unset(self) -> None:
        """
        test that an explicit null keeps the flag unset.
        """
        c = BundleConfig.from_payload({"uncompress_native_libraries": None})
        self.assertIs(c.uncompress_native_libraries, Tristate.UNSET)

    def test_flag_from_bool_strings(self) -> None:
        """
        test that quoted true/false strings map to explicit values.
        """
        c = BundleConfig.from_payload({"uncompress_native_libraries": "true"})
        self.assertIs(c.uncompress_native_libraries, Tristate.ENABLED)
        c = BundleConfig.from_payload({"uncompress_native_libraries": " False "})
        self.assertIs(c.uncompress_native_libraries, Tristate.DISABLED)

    def test_rejects_unknown_flag_string(self) -> None:
        """
        test rejecting a flag string that is neither a bool nor a variant name.
        """
        with self.assertRaises(ValidationError):
            BundleConfig.from_payload({"uncompress_native_libraries": "maybe"})

    def test_flag_by_name(self) -> None:
        """
        test that the flag accepts its variant names.
        """
        c = BundleConfig.from_payload({"uncompress_native_libraries": "Enabled"})
        self.assertIs(c.uncompress_native_libraries, Tristate.ENABLED)

    def test_rejects_unknown_dimension(self) -> None:
        """
        test rejecting an unknown split dimension.
        """
        with self.assertRaises(ValidationError):
            BundleConfig.from_payload({"split_dimensions": ["orientation"]})

    def test_rejects_bad_version(self) -> None:
        """
        test rejecting a malformed version.
        """
        with self.assertRaises(ValidationError):
            BundleConfig.from_payload({"version": "0.6"})

    def test_rejects_unknown_keys(self) -> None:
        """
        test rejecting misspelled keys.
        """
        with self.assertRaises(ValidationError):
            BundleConfig.from_payload({"split_dimension": []})

    def test_rejects_empty_file(self) -> None:
        """
        test rejecting an empty YAML file.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "c.yaml", "")
            with self.assertRaises(ValueError) as ctx:
                BundleConfig.from_path(path)
            self.assertIn("empty", str(ctx.exception))

    def test_rejects_non_mapping(self) -> None:
        """
        test rejecting a payload that is not a mapping.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "c.yml", "- abi\n- language\n")
            with self.assertRaises(ValueError):
                BundleConfig.from_path(path)

    def test_rejects_unsupported_suffix(self) -> None:
        """
        test rejecting unsupported file formats.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "c.toml", "version = '0.6.0'")
            with self.assertRaises(ValueError) as ctx:
                BundleConfig.from_path(path)
            self.assertIn("Unsupported format", str(ctx.exception))


class BundleConfigBuilderTest(unittest.TestCase):
    """
    BundleConfigBuilderTest covers the copy-on-write builder helpers.
    """

    def test_builders_return_new_configs(self) -> None:
        """
        test that builder helpers leave the original untouched.
        """
        base = BundleConfig()
        changed = (
            base.with_version("0.2.0")
            .add_split_dimension(OptimizationDimension.ABI, negate=True)
            .with_uncompress_native_libraries(True)
        )
        self.assertEqual(base.split_dimensions, ())
        self.assertIs(base.uncompress_native_libraries, Tristate.UNSET)
        self.assertEqual(changed.version, Version.of("0.2.0"))
        self.assertTrue(changed.split_dimensions[0].negate)
        self.assertIs(changed.uncompress_native_libraries, Tristate.ENABLED)

    def test_clear_optimizations(self) -> None:
        """
        test that clear_optimizations drops directives and the flag, not the version.
        """
        c = (
            BundleConfig()
            .with_version("0.2.0")
            .add_split_dimension(OptimizationDimension.LANGUAGE)
            .with_uncompress_native_libraries(False)
            .clear_optimizations()
        )
        self.assertEqual(c.split_dimensions, ())
        self.assertIs(c.uncompress_native_libraries, Tristate.UNSET)
        self.assertEqual(c.version, Version.of("0.2.0"))

    def test_frozen(self) -> None:
        """
        test that configs cannot be mutated in place.
        """
        c = BundleConfig()
        with self.assertRaises(ValidationError):
            c.version = Version.of("0.2.0")  # type: ignore[misc]

    def test_serializes_version_as_string(self) -> None:
        """
        test that model_dump renders the version as text.
        """
        dumped = BundleConfig().with_version("0.2.0").model_dump()
        self.assertEqual(dumped["version"], "0.2.0")


if __name__ == "__main__":
    unittest.main()
