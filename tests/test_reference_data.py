import json
import tempfile
import unittest
from pathlib import Path

from quiz_match.core.matching import CandidateMatcher
from quiz_match.reference_data import (
    CountryRecord,
    ReferenceDataError,
    capital_candidates,
    country_candidates,
    load_countries,
    parse_countries,
)


class TestBundledCountries(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.records = load_countries()

    def test_loads_unique_codes(self):
        codes = [record.code for record in self.records]
        self.assertEqual(len(codes), len(set(codes)))
        self.assertIn("FR", codes)
        self.assertIn("CI", codes)

    def test_covers_sovereign_states(self):
        self.assertEqual(len(self.records), 195)
        codes = {record.code for record in self.records}
        self.assertTrue({"JP", "NZ", "ZW", "VA", "PS", "TV", "KP"} <= codes)
        self.assertTrue(all(record.capital for record in self.records))

    def test_country_aliases_match(self):
        matcher = CandidateMatcher(country_candidates(self.records))
        self.assertEqual(matcher.match("ivory coast").identifier, "CI")
        self.assertEqual(matcher.match("usa").identifier, "US")
        self.assertEqual(matcher.match("Deutschland").identifier, "DE")
        self.assertEqual(matcher.match("uk").identifier, "GB")

    def test_exact_alias_beats_partial_name(self):
        matcher = CandidateMatcher(country_candidates(self.records))
        result = matcher.match("congo")
        self.assertEqual(result.identifier, "CG")
        self.assertEqual(result.score, 1.0)

    def test_capitals_match_without_accents(self):
        matcher = CandidateMatcher(capital_candidates(self.records))
        result = matcher.match("Brasilia")
        self.assertEqual(result.identifier, "BR")
        self.assertEqual(result.score, 1.0)


class TestLoadCountriesFromFile(unittest.TestCase):
    def _write(self, tmp: Path, name: str, text: str) -> Path:
        path = tmp / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_yaml_records_are_cleaned(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(
                Path(tmpdir),
                "countries.yaml",
                "- name: ' France '\n"
                "  code: fr\n"
                "  accepted_names: ['france', '  ', '']\n"
                "  capital: Paris\n"
                "- name: Atlantis\n"
                "  code: XA\n"
                "  capital: '  '\n",
            )
            records = load_countries(path)
        self.assertEqual(records[0].name, "France")
        self.assertEqual(records[0].code, "FR")
        self.assertEqual(records[0].accepted_names, ["france"])
        self.assertIsNone(records[1].capital)
        self.assertEqual([c.identifier for c in capital_candidates(records)], ["FR"])

    def test_json_records(self):
        data = [{"name": "Chad", "code": "TD"}]
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(Path(tmpdir), "countries.json", json.dumps(data))
            records = load_countries(path)
        candidates = country_candidates(records)
        self.assertEqual(candidates[0].canonical_name, "Chad")
        self.assertEqual(candidates[0].aliases, ())

    def test_unsupported_suffix(self):
        with self.assertRaises(ReferenceDataError):
            load_countries(Path("countries.txt"))

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(Path(tmpdir), "countries.json", "[{")
            with self.assertRaises(ReferenceDataError):
                load_countries(path)

    def test_invalid_utf8(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "countries.json"
            path.write_bytes(b'[{"name": "Fr\xffnce", "code": "FR"}]')
            with self.assertRaises(ReferenceDataError):
                load_countries(path)

    def test_directory_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "countries.json"
            path.mkdir()
            with self.assertRaises(ReferenceDataError):
                load_countries(path)

    def test_missing_file_propagates(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(FileNotFoundError):
                load_countries(Path(tmpdir) / "countries.json")

    def test_empty_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(Path(tmpdir), "countries.yml", "")
            with self.assertRaises(ReferenceDataError):
                load_countries(path)

    def test_extra_aliases(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write(
                Path(tmpdir),
                "countries.json",
                json.dumps([{"name": "United Kingdom", "code": "GB", "accepted_names": ["uk"]}]),
            )
            with self.assertLogs("quiz_match.reference_data", level="WARNING") as logs:
                records = load_countries(path, extra_aliases={"gb": ["britain", " "], "zz": ["nowhere"]})
        self.assertEqual(records[0].accepted_names, ["uk", "britain"])
        self.assertTrue(any("ZZ" in line for line in logs.output))


class TestParseCountries(unittest.TestCase):
    def test_scalar_alias_is_one_name(self):
        records = parse_countries([{"name": "United States", "code": "US", "accepted_names": "usa"}])
        self.assertEqual(records[0].accepted_names, ["usa"])
        matcher = CandidateMatcher(country_candidates(records))
        self.assertIsNone(matcher.match("s"))
        self.assertEqual(matcher.match("USA").identifier, "US")

    def test_scalar_alias_in_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "countries.yaml"
            path.write_text(
                "- name: Peru\n  code: PE\n  capital: Lima\n  accepted_capitals: lima\n",
                encoding="utf-8",
            )
            records = load_countries(path)
        self.assertEqual(records[0].accepted_capitals, ["lima"])

    def test_duplicate_codes_rejected(self):
        raw = [{"name": "France", "code": "FR"}, {"name": "Francia", "code": "fr"}]
        with self.assertRaises(ReferenceDataError):
            parse_countries(raw)

    def test_missing_name_rejected(self):
        with self.assertRaises(ReferenceDataError):
            parse_countries([{"code": "FR"}])

    def test_blank_name_rejected(self):
        with self.assertRaises(ReferenceDataError):
            parse_countries([{"name": "  ", "code": "FR"}])

    def test_not_a_list_rejected(self):
        with self.assertRaises(ReferenceDataError):
            parse_countries({"name": "France", "code": "FR"})

    def test_record_model(self):
        record = CountryRecord(name="Peru", code="pe", accepted_capitals=["lima"], capital="Lima")
        self.assertEqual(record.code, "PE")
        self.assertEqual(capital_candidates([record])[0].aliases, ("lima",))


if __name__ == "__main__":
    unittest.main()
