import pytest
from pydantic import ValidationError

from runesets.catalog import ASCII, CYRILLIC
from runesets.models import SampleRecord, SampleRequest, generate_samples
from runesets.sampler import Sampler


class TestSampleRequest:
    def test_defaults(self) -> None:
        request = SampleRequest(charset="ascii")
        assert request.length == 16
        assert request.count == 1
        assert request.seed is None
        assert request.literal is False
        assert request.resolved_charset() == ASCII

    def test_catalog_name_resolves(self) -> None:
        request = SampleRequest(charset="Cyrillic")
        assert request.resolved_charset() == CYRILLIC

    def test_literal_charset(self) -> None:
        request = SampleRequest(charset="AB", literal=True)
        assert request.resolved_charset() == "AB"

    def test_literal_may_shadow_catalog_name(self) -> None:
        request = SampleRequest(charset="runes", literal=True)
        assert request.resolved_charset() == "runes"

    def test_unknown_charset_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown charset"):
            SampleRequest(charset="klingon")

    def test_empty_literal_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            SampleRequest(charset="", literal=True)

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SampleRequest(charset="ascii", length=-1)

    def test_zero_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SampleRequest(charset="ascii", count=0)

    @pytest.mark.parametrize("field", ["length", "count"])
    def test_bool_ints_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError, match="bool is not allowed"):
            SampleRequest.model_validate({"charset": "ascii", field: True})


class TestGenerateSamples:
    def test_count_and_length(self) -> None:
        request = SampleRequest(charset="tibetan", length=7, count=4, seed=1)
        records = generate_samples(request)
        assert len(records) == 4
        assert [r.index for r in records] == [0, 1, 2, 3]
        for record in records:
            assert isinstance(record, SampleRecord)
            assert len(record.text) == 7
            assert record.code_points == [ord(ch) for ch in record.text]
            assert record.charset == "tibetan"
            assert record.seed == 1

    def test_seed_is_reproducible(self) -> None:
        request = SampleRequest(charset="unicode", length=12, count=3, seed=8)
        first = [r.text for r in generate_samples(request)]
        second = [r.text for r in generate_samples(request)]
        assert first == second

    def test_explicit_sampler_wins(self) -> None:
        request = SampleRequest(charset="AB", literal=True, length=10, seed=1)
        expected = Sampler(seed=77).random_string(10, "AB")
        records = generate_samples(request, sampler=Sampler(seed=77))
        assert records[0].text == expected

    def test_zero_length_records(self) -> None:
        request = SampleRequest(charset="ascii", length=0, count=2)
        records = generate_samples(request)
        assert [r.text for r in records] == ["", ""]
        assert all(r.code_points == [] for r in records)

    def test_records_dump_to_json_types(self) -> None:
        request = SampleRequest(charset="emoji", length=3, seed=2)
        dumped = generate_samples(request)[0].model_dump()
        assert set(dumped) == {
            "charset",
            "length",
            "seed",
            "index",
            "text",
            "code_points",
        }
        assert all(isinstance(cp, int) for cp in dumped["code_points"])
