"""Shared fixtures for report-extractor tests."""

from __future__ import annotations

import pytest

from report_extractor.assembler import ReportExtractor
from report_extractor.models import RawDocument

K12_REPORT = """\
# Teacher Guide

**Student:** Maya Lopez **Grade:** 5th Grade
**School:** Lincoln Elementary
**School Year:** 2024-2025

## Student Overview

Maya Lopez is a curious fifth grader who loves drawing.

## Documents Reviewed

1. **Psychoeducational Evaluation** - Dr. Ana Smith, September 2024, Identified dyslexia
2. **IEP Progress Report** - Ms. Carter, 2024, Steady progress in math

## Key Support Strategies

| Strategy | What to Do |
|---|---|
| **Visual Supports** | ✔ Pair directions with pictures |
| **Chunked Tasks** | ✔ Break work into steps<br>✘ Assign long packets |

## Strengths

| Strength | What You See | What to Do |
|---|---|---|
| **Peer Helper** | Reminds classmates | ✔ Give leadership roles |
| | | ✘ Ignore her desire to lead |
| **Visual Memory** | Recalls diagrams | ✔ Use graphic organizers |

## Challenges

**Working Memory:** Loses track of multi-step directions.
Often asks for repeats.
✔ Chunk directions
✘ Repeat the whole list louder

**Reading Fluency:** Reads slowly.
"""

_TUTORING_HEADER = """\
**Student:** Leo Park **Grade:** 7

## Student Overview

Leo Park is a thoughtful seventh grader.

"""

_TUTORING_STRENGTHS = """\
## Strengths

| Strength | What you see | ✔️ What to do | ✖️ What not to do |
|---|---|---|---|
| **Curiosity** | Asks why<br/><sub>**evidence:** teacher notes</sub> | ✔️ Invite questions | ✖️ Rush past questions |
| **Humor** | Jokes to ease tension | ✔️ Use light humor | ✖️ Shut down jokes |
"""

_THIRD_STRENGTH = "| **Persistence** | Retries hard problems | ✔️ Praise effort | ✖️ Give answers early |\n"

_TUTORING_CHALLENGES = """
## Challenges

| Challenge | What you see | ✔️ What to do | ✖️ What not to do |
|---|---|---|---|
| **Focus** | Drifts after 10 minutes | ✔️ Short work blocks | ✖️ Long lectures |
| **Spelling** | Phonetic spelling | ✔️ Word banks | ✖️ Mark every error |
| **Planning** | Starts without a plan | ✔️ Model a checklist | ✖️ Assign open tasks |
| **Math Facts** | Counts on fingers | ✔️ Daily fact games | ✖️ Timed drills |
"""

TUTORING_REPORT = _TUTORING_HEADER + _TUTORING_STRENGTHS + _THIRD_STRENGTH + _TUTORING_CHALLENGES
TUTORING_REPORT_TWO_STRENGTHS = _TUTORING_HEADER + _TUTORING_STRENGTHS + _TUTORING_CHALLENGES

POST_SECONDARY_REPORT = """\
# Accommodation Report

**Student Name:** Jordan Lee
**Grade:** Freshman

### Section 1: Documents Reviewed

- **Neuropsychological Evaluation** - Dr. Kim, March 2023, ADHD combined presentation
- **High School 504 Plan** - Extended time on tests

### Section 2: Functional Impact

**2.1. Reading Fluency** - Struggles with decoding (WJ-IV [12th percentile])

**2.2. Sustained Attention**
- **Functional Impact:** Loses focus after 15 minutes (Conners-3) [T-score 72]

### Section 3: Accommodations

### 3.1 Academic Accommodations
1. **Extended Time:** 1.5x time on exams
   in a reduced-distraction room.
2. **Note-Taking Support:** Access to lecture slides

### 3.3 Auxiliary Aids & Services
1. **Screen Reader:** Text-to-speech software
"""

VALIDATED_FINDINGS_REPORT = """\
**Student:** Sam Rivera **Grade:** 3

## Student Overview

Sam is a cheerful third grader.

### Validated Findings

#### 1. Strong Visual Memory
**Evidence:** WISC-V VSI 118
**Observable Behaviors:** Recalls diagrams after one viewing
**Primary Support Strategy:** Use graphic organizers
**Implementation Caution:** Avoid text-only handouts

#### 2. Difficulty with Decoding
**Evidence:** WJ-IV Letter-Word 82
**Teacher-Friendly Description:** Struggles to sound out new words
**Primary Support Strategy:** Provide decodable texts
**Secondary Support Strategy:** Pre-teach vocabulary
"""

NO_HEADER_REPORT = """\
Some notes about a learner.
They enjoy math and building things.
"""


@pytest.fixture
def k12_report() -> str:
    return K12_REPORT


@pytest.fixture
def tutoring_report() -> str:
    return TUTORING_REPORT


@pytest.fixture
def tutoring_report_two_strengths() -> str:
    return TUTORING_REPORT_TWO_STRENGTHS


@pytest.fixture
def post_secondary_report() -> str:
    return POST_SECONDARY_REPORT


@pytest.fixture
def validated_findings_report() -> str:
    return VALIDATED_FINDINGS_REPORT


@pytest.fixture
def no_header_report() -> str:
    return NO_HEADER_REPORT


@pytest.fixture
def raw_k12() -> RawDocument:
    return RawDocument(text=K12_REPORT, identity="report-k12")


@pytest.fixture
def extractor() -> ReportExtractor:
    """Extractor over the built-in variants."""
    return ReportExtractor()
