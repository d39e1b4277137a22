"""End-to-end tests for the report assembler."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from report_extractor.assembler import (
    ReportExtractor,
    check_cardinality,
    ensure_within_limit,
    extract_report,
)
from report_extractor.core.config import ExtractionConfig, ExtractorSettings
from report_extractor.exceptions import InputTooLarge, SchemaViolation, VariantNotFound
from report_extractor.models import (
    EXTRACTOR_VERSION,
    ActionItem,
    LabeledEntry,
    NumberedEntry,
    Polarity,
    RawDocument,
    ReportRecord,
    compute_fingerprint,
)
from report_extractor.variants import ReportVariant, VariantRegistry, default_registry


class TestK12:
    def test_full_record(self, extractor: ReportExtractor, raw_k12: RawDocument) -> None:
        record = extractor.extract(raw_k12)
        assert record.variant == "k12"
        assert record.case_info.student_name == "Maya Lopez"
        assert record.overview.startswith("Maya Lopez is a curious")
        assert [d.title for d in record.documents_reviewed] == [
            "Psychoeducational Evaluation",
            "IEP Progress Report",
        ]
        assert [s.title for s in record.strategies] == ["Visual Supports", "Chunked Tasks"]
        assert [s.title for s in record.strengths] == ["Peer Helper", "Visual Memory"]
        assert [c.title for c in record.challenges] == ["Working Memory", "Reading Fluency"]
        assert record.barriers == ()
        assert record.structure_found is True

    def test_peer_helper_entry(self, extractor: ReportExtractor, k12_report: str) -> None:
        record = extractor.extract(k12_report)
        assert record.strengths[0] == LabeledEntry(
            title="Peer Helper",
            observations=("Reminds classmates",),
            actions=(
                ActionItem(Polarity.DO, "Give leadership roles"),
                ActionItem(Polarity.DONT, "Ignore her desire to lead"),
            ),
        )

    def test_version_and_fingerprint(self, extractor: ReportExtractor, raw_k12: RawDocument) -> None:
        record = extractor.extract(raw_k12)
        assert record.extractor_version == EXTRACTOR_VERSION
        assert record.fingerprint == compute_fingerprint(raw_k12.text)

    def test_deterministic(self, extractor: ReportExtractor, k12_report: str) -> None:
        assert extractor.extract(k12_report) == extractor.extract(k12_report)

    def test_concurrent_calls(self, extractor: ReportExtractor, k12_report: str) -> None:
        expected = extractor.extract(k12_report)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(extractor.extract, [k12_report] * 8))
        assert all(r == expected for r in results)

    def test_validated_findings_fallback(self, extractor: ReportExtractor, validated_findings_report: str) -> None:
        record = extractor.extract(validated_findings_report)
        assert [s.title for s in record.strengths] == ["Strong Visual Memory"]
        assert [c.title for c in record.challenges] == ["Difficulty with Decoding"]
        assert [s.title for s in record.strategies] == ["Strong Visual Memory", "Difficulty with Decoding"]
        assert record.case_info.student_name == "Sam Rivera"


class TestTutoring:
    def test_strict_counts_pass(self, extractor: ReportExtractor, tutoring_report: str) -> None:
        record = extractor.extract(tutoring_report, "tutoring")
        assert len(record.strengths) == 3
        assert len(record.challenges) == 4
        curiosity = record.strengths[0]
        assert curiosity.observations == ("Asks why", "evidence: teacher notes")
        assert curiosity.dos == (ActionItem(Polarity.DO, "Invite questions"),)
        assert curiosity.donts == (ActionItem(Polarity.DONT, "Rush past questions"),)

    def test_two_strengths_raise(self, extractor: ReportExtractor, tutoring_report_two_strengths: str) -> None:
        with pytest.raises(SchemaViolation) as exc_info:
            extractor.extract(tutoring_report_two_strengths, "tutoring")
        err = exc_info.value
        assert (err.field, err.expected, err.actual) == ("strengths", 3, 2)

    def test_same_document_is_fine_for_k12(self, extractor: ReportExtractor, tutoring_report_two_strengths: str) -> None:
        record = extractor.extract(tutoring_report_two_strengths, "k12")
        assert len(record.strengths) == 2

    def test_enforcement_can_be_disabled(self, tutoring_report_two_strengths: str) -> None:
        extractor = ReportExtractor(enforce_cardinality=False)
        record = extractor.extract(tutoring_report_two_strengths, "tutoring")
        assert len(record.strengths) == 2


class TestPostSecondary:
    def test_record(self, extractor: ReportExtractor, post_secondary_report: str) -> None:
        record = extractor.extract(post_secondary_report, "post_secondary")
        assert record.case_info.student_name == "Jordan Lee"
        assert [d.title for d in record.documents_reviewed] == [
            "Neuropsychological Evaluation",
            "High School 504 Plan",
        ]
        assert record.barriers[0] == NumberedEntry(
            ordinal=1,
            title="Reading Fluency",
            description="Struggles with decoding",
            evidence="WJ-IV [12th percentile]",
        )
        assert record.barriers[1].evidence == "Conners-3 [T-score 72]"
        assert [a.title for a in record.accommodations] == [
            "Extended Time",
            "Note-Taking Support",
            "Screen Reader",
        ]
        assert [s.id for s in record.accommodation_subsections] == ["3.1", "3.2", "3.3", "3.4"]
        assert record.strengths == ()


class TestDegradedInput:
    def test_no_headers(self, extractor: ReportExtractor, no_header_report: str) -> None:
        record = extractor.extract(no_header_report)
        assert record.structure_found is False
        assert [s.title for s in record.sections] == ["body"]
        assert record.case_info.student_name == "Student"
        assert record.case_info.grade == "Grade Not Specified"
        assert record.documents_reviewed == ()
        assert record.strategies == ()
        assert record.strengths == ()
        assert record.challenges == ()

    def test_empty_document(self, extractor: ReportExtractor) -> None:
        record = extractor.extract("")
        assert record.strengths == ()
        assert record.overview == ""

    def test_no_headers_still_violates_strict_schema(
        self, extractor: ReportExtractor, no_header_report: str
    ) -> None:
        with pytest.raises(SchemaViolation, match="strengths must contain exactly 3 entries, found 0"):
            extractor.extract(no_header_report, "tutoring")


class TestExtractorConfiguration:
    def test_unknown_variant(self, extractor: ReportExtractor) -> None:
        with pytest.raises(VariantNotFound):
            extractor.extract("text", "unknown")

    def test_unknown_default_variant_fails_fast(self) -> None:
        with pytest.raises(VariantNotFound):
            ReportExtractor(default_variant="unknown")

    def test_default_variant(self, tutoring_report: str) -> None:
        extractor = ReportExtractor(default_variant="tutoring")
        assert extractor.extract(tutoring_report).variant == "tutoring"

    def test_from_settings(self) -> None:
        settings = ExtractorSettings(
            extraction=ExtractionConfig(default_variant="post_secondary", enforce_cardinality=False)
        )
        extractor = ReportExtractor.from_settings(settings)
        assert extractor.extract("").variant == "post_secondary"
        assert extractor.version == EXTRACTOR_VERSION

    def test_custom_registry(self) -> None:
        registry = VariantRegistry()
        registry.register(ReportVariant(name="k12"))
        record = ReportExtractor(registry).extract("## Strengths\n**Humor:** Jokes\n")
        assert record.strengths == ()

    def test_extract_report_helper(self, k12_report: str) -> None:
        assert isinstance(extract_report(k12_report), ReportRecord)


class TestHelpers:
    def test_check_cardinality(self) -> None:
        tutoring = default_registry().get("tutoring")
        record = ReportRecord(variant="tutoring")
        with pytest.raises(SchemaViolation) as exc_info:
            check_cardinality(record, tutoring)
        assert exc_info.value.field == "strengths"

    def test_ensure_within_limit(self) -> None:
        ensure_within_limit("short", 10)
        with pytest.raises(InputTooLarge) as exc_info:
            ensure_within_limit(RawDocument("x" * 11), 10)
        assert (exc_info.value.size, exc_info.value.limit) == (11, 10)
