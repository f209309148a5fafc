"""Tests for the airline catalog."""

from pathlib import Path

import pytest

from aerolens.aviation.airlines import Airline, AirlineDirectory, country_flag
from aerolens.aviation.callsign import CallsignType
from aerolens.core.errors import DuplicateKeyError, ReferenceDataError


class TestAirline:
    """Test Airline dataclass."""

    def test_short_name(self):
        """Test the first word of the name is used for display."""
        airline = Airline("UAL", "United Airlines", "UA", "US")

        assert airline.short_name == "United"

    def test_immutable(self):
        """Test airlines cannot be modified."""
        airline = Airline("UAL", "United Airlines", "UA", "US")

        with pytest.raises(AttributeError):
            airline.name = "Other"  # type: ignore[misc]


class TestAirlineDirectoryConstruction:
    """Test building and loading the catalog."""

    def test_duplicate_iata_rejected(self):
        """Test two airlines may not share an IATA designator."""
        with pytest.raises(DuplicateKeyError) as exc_info:
            AirlineDirectory(
                [
                    Airline("AZA", "ITA Airways", "AZ", "IT"),
                    Airline("ITY", "ITA Airways", "AZ", "IT"),
                ]
            )

        assert exc_info.value.key == "AZ"
        assert exc_info.value.existing == "AZA"
        assert exc_info.value.duplicate == "ITY"
        assert isinstance(exc_info.value, ReferenceDataError)

    def test_duplicate_icao_rejected(self):
        """Test two airlines may not share an ICAO designator."""
        with pytest.raises(DuplicateKeyError):
            AirlineDirectory(
                [
                    Airline("UAL", "United Airlines", "UA", "US"),
                    Airline("UAL", "United Express", "", "US"),
                ]
            )

    def test_flight_designators_default_to_catalog(self):
        """Test the catalog's IATA codes are used when no table is given."""
        directory = AirlineDirectory([Airline("UAL", "United Airlines", "UA", "US"), Airline("ZZZ", "Zed", "", "NO")])

        assert dict(directory.iata_to_icao) == {"UA": "UAL"}
        assert directory.is_flight_designator("ZZZ") is True

    def test_flight_designators_override_catalog(self):
        """Test an explicit table replaces the catalog's IATA codes."""
        directory = AirlineDirectory(
            [Airline("AZA", "ITA Airways", "AZ", "IT"), Airline("ITA", "ITA Airways", "", "IT")],
            [("AZ", "ITA")],
        )

        assert directory.resolve_iata("AZ") == "ITA"
        assert directory.is_flight_designator("ITA") is True
        assert directory.is_flight_designator("AZA") is False

    @pytest.mark.parametrize(
        ("designators", "key"),
        [([("AZ", "ITA"), ("AZ", "AZA")], "AZ"), ([("AZ", "ITA"), ("IT", "ITA")], "ITA")],
    )
    def test_duplicate_flight_designator_rejected(self, designators, key):
        """Test the flight designator table must be one-to-one."""
        with pytest.raises(DuplicateKeyError) as exc_info:
            AirlineDirectory([Airline("ITA", "ITA Airways", "", "IT")], designators)

        assert exc_info.value.key == key

    def test_load_flight_designators(self, tmp_path: Path):
        """Test the flight_designators section is read and bad items skipped."""
        path = tmp_path / "airlines.yaml"
        path.write_text(
            "airlines:\n"
            "  - {icao: AZA, iata: AZ, name: ITA Airways, country: IT}\n"
            "  - {icao: ITA, iata: '', name: ITA Airways, country: IT}\n"
            "flight_designators:\n"
            "  - {iata: az, icao: ita}\n"
            "  - {iata: TOO, icao: XXX}\n"
            "  - {iata: LA}\n",
            encoding="utf-8",
        )

        directory = AirlineDirectory.load_from_yaml(path)

        assert dict(directory.iata_to_icao) == {"AZ": "ITA"}
        assert directory.get("AZA").iata_code == "AZ"

    def test_flight_designators_not_a_list(self, tmp_path: Path):
        """Test a malformed flight_designators section raises ReferenceDataError."""
        path = tmp_path / "airlines.yaml"
        path.write_text(
            "airlines:\n  - {icao: UAL, iata: UA, name: United Airlines, country: US}\nflight_designators: UA\n",
            encoding="utf-8",
        )

        with pytest.raises(ReferenceDataError, match="flight_designators"):
            AirlineDirectory.load_from_yaml(path)

    def test_load_from_yaml(self, sample_data_dir: Path):
        """Test loading airlines from YAML."""
        directory = AirlineDirectory.load_from_yaml(sample_data_dir / "airlines.yaml")

        assert len(directory) == 4
        assert directory.get("ZZZ").country_code == "NO"
        assert directory.resolve_iata("5X") == "UPS"

    def test_invalid_entries_skipped(self, tmp_path: Path):
        """Test entries without a valid designator or name are skipped."""
        path = tmp_path / "airlines.yaml"
        path.write_text(
            "airlines:\n"
            "  - {icao: UAL, iata: UA, name: United Airlines, country: US}\n"
            "  - {icao: TOOLONG, iata: XX, name: Broken, country: US}\n"
            "  - {iata: YY, name: No Designator, country: US}\n"
            "  - {icao: DAL, iata: DL, country: US}\n"
            "  - just a string\n",
            encoding="utf-8",
        )

        directory = AirlineDirectory.load_from_yaml(path)

        assert [airline.icao_code for airline in directory] == ["UAL"]

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file raises ReferenceDataError."""
        with pytest.raises(ReferenceDataError):
            AirlineDirectory.load_from_yaml(tmp_path / "missing.yaml")

    def test_missing_airlines_list(self, tmp_path: Path):
        """Test a file without an airlines list raises ReferenceDataError."""
        path = tmp_path / "airlines.yaml"
        path.write_text("carriers: []\n", encoding="utf-8")

        with pytest.raises(ReferenceDataError):
            AirlineDirectory.load_from_yaml(path)

    def test_tables_are_read_only(self, airlines: AirlineDirectory):
        """Test the IATA table cannot be modified."""
        with pytest.raises(TypeError):
            airlines.iata_to_icao["XX"] = "XXX"  # type: ignore[index]


FLIGHT_DESIGNATORS = [
    ("AA", "AAL"), ("UA", "UAL"), ("DL", "DAL"), ("WN", "SWA"), ("B6", "JBU"), ("AS", "ASA"),
    ("NK", "NKS"), ("F9", "FFT"), ("HA", "HAL"), ("AC", "ACA"), ("WS", "WJA"), ("AM", "AMX"),
    ("BA", "BAW"), ("AF", "AFR"), ("LH", "DLH"), ("KL", "KLM"), ("U2", "EZY"), ("FR", "RYR"),
    ("VS", "VIR"), ("SK", "SAS"), ("AY", "FIN"), ("AZ", "ITA"), ("IB", "IBE"), ("TP", "TAP"),
    ("LX", "SWR"), ("OS", "AUA"), ("SN", "BEL"), ("TK", "THY"), ("LY", "ELY"), ("W6", "WZZ"),
    ("DY", "NOR"), ("EI", "EIN"), ("EK", "UAE"), ("QR", "QTR"), ("EY", "ETD"), ("GF", "GFA"),
    ("SV", "SVA"), ("FZ", "FDB"), ("SQ", "SIA"), ("CX", "CPA"), ("NH", "ANA"), ("JL", "JAL"),
    ("QF", "QFA"), ("NZ", "ANZ"), ("MU", "CES"), ("CA", "CCA"), ("CZ", "CSN"), ("BR", "EVA"),
    ("CI", "CAL"), ("KE", "KAL"), ("OZ", "AAR"), ("TG", "THA"), ("MH", "MAS"), ("GA", "GIA"),
    ("VN", "HVN"), ("AK", "AXM"), ("PR", "PAL"), ("JQ", "JST"), ("AV", "AVA"), ("LA", "TAM"),
    ("G3", "GLO"), ("AD", "AZU"), ("AR", "ARG"), ("CM", "CMP"), ("FX", "FDX"), ("5X", "UPS"),
]


class TestBundledCatalog:
    """Test the bundled airline catalog."""

    def test_flight_designator_table(self, airlines: AirlineDirectory):
        """Test the flight designator table holds exactly the known carriers."""
        assert dict(airlines.iata_to_icao) == dict(FLIGHT_DESIGNATORS)

    @pytest.mark.parametrize(("iata", "icao"), FLIGHT_DESIGNATORS)
    def test_every_flight_designator(self, airlines: AirlineDirectory, iata, icao):
        """Test each IATA designator translates to the ICAO prefix flights use."""
        assert airlines.resolve_iata(iata) == icao
        assert airlines.resolve_iata(iata.lower()) == icao
        assert airlines.is_flight_designator(icao) is True
        assert icao in airlines

    @pytest.mark.parametrize(
        ("iata", "icao"),
        [("UA", "UAL"), ("ba", "BAW"), ("B6", "JBU"), ("U2", "EZY"), ("5X", "UPS"), ("G3", "GLO")],
    )
    def test_resolve_iata(self, airlines: AirlineDirectory, iata, icao):
        """Test IATA to ICAO translation, including digit-bearing codes."""
        assert airlines.resolve_iata(iata) == icao

    def test_flight_designators_differ_from_catalog(self, airlines: AirlineDirectory):
        """Test carriers whose flights use another designator than their catalog entry."""
        assert airlines.resolve_iata("AZ") == "ITA"
        assert airlines.get("AZA").iata_code == "AZ"
        assert airlines.resolve_iata("LA") == "TAM"
        assert airlines.get("LAN").iata_code == "LA"

    @pytest.mark.parametrize("iata", ["AI", "VY", "VB", "Y4", "5Y", "RU", "CV", "JJ", "XX"])
    def test_catalog_only_iata_not_translated(self, airlines: AirlineDirectory, iata):
        """Test catalog airlines outside the designator table do not translate."""
        assert airlines.resolve_iata(iata) is None

    def test_catalog_only_icao_not_flight_designator(self, airlines: AirlineDirectory):
        """Test catalog ICAO codes outside the table do not start flight numbers."""
        assert "AZA" in airlines
        assert airlines.is_flight_designator("AZA") is False
        assert airlines.is_flight_designator("ita") is True

    @pytest.mark.parametrize(
        ("icao", "name"),
        [("ITA", "ITA Airways"), ("VNA", "Vietnam Airlines"), ("HVN", "Vietnam Airlines"), ("CAL", "China Airlines")],
    )
    def test_both_designator_sets_in_catalog(self, airlines: AirlineDirectory, icao, name):
        """Test callsign prefixes from either designator set are known airlines."""
        assert airlines.get(icao).name == name
        assert airlines.extract_airline_code(f"{icao}123") == icao

    def test_catalog_iata_is_unique(self, airlines: AirlineDirectory):
        """Test no two catalog airlines share an IATA designator."""
        codes = [airline.iata_code for airline in airlines if airline.iata_code]

        assert len(codes) == len(set(codes))
        assert len(airlines) == 76

    def test_resolve_unknown_iata(self, airlines: AirlineDirectory):
        """Test unknown IATA designators resolve to None."""
        assert airlines.resolve_iata("XX") is None


class TestCallsignLookups:
    """Test airline lookups from callsigns."""

    @pytest.mark.parametrize(
        ("callsign", "expected"),
        [("UAL123", "UAL"), ("  dlh400 ", "DLH"), ("BAW12A", "BAW"), ("UPS2901", "UPS")],
    )
    def test_extract_airline_code(self, airlines: AirlineDirectory, callsign, expected):
        """Test the leading designator is returned for known airlines."""
        assert airlines.extract_airline_code(callsign) == expected

    @pytest.mark.parametrize("callsign", ["N12345", "XYZ999", "UA123", "", None])
    def test_extract_airline_code_unknown(self, airlines: AirlineDirectory, callsign):
        """Test unknown prefixes and empty input return None."""
        assert airlines.extract_airline_code(callsign) is None

    def test_get_airline_from_callsign(self, airlines: AirlineDirectory):
        """Test the operating airline is returned."""
        airline = airlines.get_airline_from_callsign("BAW286")

        assert airline is not None
        assert airline.name == "British Airways"
        assert airlines.get_airline_from_callsign("N172SP") is None

    @pytest.mark.parametrize(
        ("callsign", "expected"),
        [
            ("UAL123", "United 123"),
            ("KLM1234", "KLM 1234"),
            (" baw12a ", "British 12A"),
            ("N172SP", "N172SP"),
            ("  G-EUPT ", "G-EUPT"),
            ("DLH", "DLH"),
            (None, "Unknown"),
            ("", "Unknown"),
        ],
    )
    def test_format_flight_display(self, airlines: AirlineDirectory, callsign, expected):
        """Test display labels for airline and private callsigns."""
        assert airlines.format_flight_display(callsign) == expected

    @pytest.mark.parametrize(
        ("callsign", "expected"),
        [
            ("UAL123", CallsignType.AIRLINE),
            ("N12345", CallsignType.REGISTRATION),
            ("D-EABC", CallsignType.REGISTRATION),
            ("XYZ999", CallsignType.UNKNOWN),
            (None, CallsignType.UNKNOWN),
        ],
    )
    def test_classify_callsign(self, airlines: AirlineDirectory, callsign, expected):
        """Test callsign classification."""
        assert airlines.classify_callsign(callsign) is expected

    @pytest.mark.parametrize("callsign", ["N12345", "G-EUPT", "D-EABC", "F-GKXA", "XYZ999", "", None])
    def test_private_flights(self, airlines: AirlineDirectory, callsign):
        """Test tail numbers, unknown prefixes and empty input count as private."""
        assert airlines.is_private_flight(callsign) is True

    @pytest.mark.parametrize("callsign", ["UAL123", "nks456", "FDX1", "QTR8"])
    def test_airline_flights(self, airlines: AirlineDirectory, callsign):
        """Test known airline prefixes are commercial."""
        assert airlines.is_private_flight(callsign) is False


class TestAirlineSearch:
    """Test substring search over the catalog."""

    def test_exact_designator_first(self, airlines: AirlineDirectory):
        """Test an exact IATA designator outranks name matches."""
        results = airlines.search("ba")

        assert results[0].icao_code == "BAW"

    def test_name_prefix(self, airlines: AirlineDirectory):
        """Test name prefix matches."""
        assert [a.icao_code for a in airlines.search("emirates")] == ["UAE"]

    def test_limit(self, airlines: AirlineDirectory):
        """Test the result count is capped."""
        assert len(airlines.search("air", limit=3)) == 3

    def test_short_query(self, airlines: AirlineDirectory):
        """Test single-character queries return nothing."""
        assert airlines.search("a") == []
        assert airlines.search("") == []


class TestCountryFlag:
    """Test flag emoji helper."""

    def test_valid_code(self):
        """Test a two-letter code becomes regional indicator symbols."""
        assert country_flag("US") == "\U0001F1FA\U0001F1F8"
        assert country_flag("fr") == "\U0001F1EB\U0001F1F7"

    @pytest.mark.parametrize("code", ["", None, "USA", "1A", "É1"])
    def test_invalid_code(self, code):
        """Test malformed codes give an empty string."""
        assert country_flag(code) == ""
