import tempfile
import unittest
from pathlib import Path
from unittest import mock

from plates.countries import DEFAULT_CONFIG_DIR, CountryRegistry
from plates.country import Country


class CountryRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, content: str) -> None:
        (self.config_dir / name).write_text(content, encoding="utf-8")

    def test_bundled_configs_resolve_switzerland(self) -> None:
        registry = CountryRegistry(DEFAULT_CONFIG_DIR)
        for indicator in ["CH", "ch", "SUI", "Schweiz", " suisse ", "Switzerland"]:
            with self.subTest(indicator=indicator):
                self.assertIs(registry.resolve(indicator), Country.SWITZERLAND)
        self.assertEqual(registry.available(), [{"code": "CH", "name": "Switzerland"}])

    def test_empty_indicator_is_unspecified(self) -> None:
        registry = CountryRegistry(DEFAULT_CONFIG_DIR)
        self.assertIs(registry.resolve(None), Country.UNSPECIFIED)
        self.assertIs(registry.resolve("   "), Country.UNSPECIFIED)

    def test_unknown_indicator_is_unspecified_and_logged(self) -> None:
        registry = CountryRegistry(DEFAULT_CONFIG_DIR)
        with mock.patch("plates.countries.registry.logger") as mock_logger:
            self.assertIs(registry.resolve("Atlantis"), Country.UNSPECIFIED)
        mock_logger.warning.assert_called_once()

    def test_code_defaults_to_file_name(self) -> None:
        self._write("ch.yaml", "name: Schweiz\naliases: [Helvetia]\n")
        registry = CountryRegistry(self.config_dir)
        self.assertIs(registry.resolve("helvetia"), Country.SWITZERLAND)
        info = registry.get(Country.SWITZERLAND)
        self.assertIsNotNone(info)
        self.assertEqual(info.name, "Schweiz")  # type: ignore[union-attr]

    def test_unsupported_country_is_skipped(self) -> None:
        self._write("de.yaml", "name: Germany\ncode: DE\naliases: [D]\n")
        with mock.patch("plates.countries.registry.logger") as mock_logger:
            registry = CountryRegistry(self.config_dir)
        mock_logger.warning.assert_called_once()
        self.assertEqual(registry.available(), [])

    def test_broken_file_does_not_stop_loading(self) -> None:
        self._write("a_broken.yaml", "name: [unclosed\n")
        self._write("b_list.yaml", "- CH\n")
        self._write("ch.yaml", "name: Switzerland\ncode: CH\n")
        with mock.patch("plates.countries.registry.logger") as mock_logger:
            registry = CountryRegistry(self.config_dir)
        self.assertEqual(mock_logger.error.call_count, 2)
        self.assertIs(registry.resolve("switzerland"), Country.SWITZERLAND)

    def test_single_alias_string_is_not_split_into_characters(self) -> None:
        self._write("ch.yaml", "name: Switzerland\ncode: CH\naliases: SUI\n")
        registry = CountryRegistry(self.config_dir)
        self.assertIs(registry.resolve("SUI"), Country.SWITZERLAND)
        with mock.patch("plates.countries.registry.logger"):
            self.assertIs(registry.resolve("S"), Country.UNSPECIFIED)

    def test_non_list_aliases_skip_only_that_file(self) -> None:
        self._write("ch.yaml", "name: Switzerland\ncode: CH\naliases: 5\n")
        with mock.patch("plates.countries.registry.logger") as mock_logger:
            registry = CountryRegistry(self.config_dir)
        mock_logger.error.assert_called_once()
        self.assertEqual(registry.available(), [])

    def test_non_list_aliases_do_not_stop_other_files(self) -> None:
        self._write("a_ch.yaml", "name: Helvetia\ncode: CH\naliases: 5\n")
        self._write("ch.yaml", "name: Switzerland\ncode: CH\naliases: [SUI]\n")
        with mock.patch("plates.countries.registry.logger"):
            registry = CountryRegistry(self.config_dir)
        self.assertIs(registry.resolve("SUI"), Country.SWITZERLAND)

    def test_missing_directory_gives_empty_registry(self) -> None:
        registry = CountryRegistry(self.config_dir / "missing")
        self.assertEqual(registry.available(), [])
        self.assertIs(registry.resolve("CH"), Country.UNSPECIFIED)


if __name__ == "__main__":
    unittest.main()
