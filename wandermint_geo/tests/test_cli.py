"""
Tests for the developer CLI output.
"""

from __future__ import annotations

from wandermint_geo.__main__ import _print_cli_result
from wandermint_geo.models import Candidate, CandidateSource


def test_suggestions_then_typed_row(capsys):
    _print_cli_result("Chicag", [
        Candidate(title="Chicago", subtitle="Illinois, United States", source=CandidateSource.CURATED),
    ])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-2] == "1. Chicago, Illinois, United States  [curated]"
    assert lines[-1] == '2. Use "Chicag"  [typed]'


def test_typed_row_when_nothing_found(capsys):
    _print_cli_result("Xyzzyx", [])
    out = capsys.readouterr().out
    assert "(no suggestions)" in out
    assert '1. Use "Xyzzyx"  [typed]' in out


def test_no_typed_row_for_empty_query(capsys):
    _print_cli_result("", [])
    assert "Use" not in capsys.readouterr().out
