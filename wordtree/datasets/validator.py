"""
Non-raising diagnostics for a pair of word-list files.

`load` aborts on the first malformed line; this module instead scans both
files completely and reports what it found, so a CLI can print a one-line
summary and record file hashes in its run manifest.

Typical use:
    rep = validate_wordlists("answers.txt", "guesses-other.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Set, Tuple

from wordtree.datasets.lexicon import WORD_LENGTH, WORD_RE, normalize


@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int = 0           # valid (non-blank, well-formed) lines
    unique_count: int = 0    # distinct valid words
    invalid_lines: List[int] = field(default_factory=list)  # 1-based line numbers
    sha256: str = ""


@dataclass
class ValidationReport:
    answers: FileReport
    extra_guesses: FileReport
    guess_count: int          # size of sorted(dedupe(answers + extras))
    overlap: int              # words present in both files
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path) -> Tuple[FileReport, Set[str]]:
    if not path.exists():
        return FileReport(str(path), exists=False), set()

    words: List[str] = []
    invalid: List[int] = []
    with path.open("r", encoding="utf-8") as f:
        for n, raw in enumerate(f, 1):
            if not raw.strip():
                continue
            w = normalize(raw)
            if WORD_RE.match(w):
                words.append(w)
            else:
                invalid.append(n)

    uniq = set(words)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        unique_count=len(uniq),
        invalid_lines=invalid,
        sha256=_sha256_file(path),
    )
    return rep, uniq


def validate_wordlists(answers_path: str, extra_guesses_path: str) -> Dict:
    """
    Scan the answers and extra-guesses files.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    True when both files exist, answers is non-empty and no line is
    malformed, i.e. exactly when `load` would succeed.
    """
    ans_rep, ans = _scan(Path(answers_path))
    ext_rep, ext = _scan(Path(extra_guesses_path))

    issues: List[str] = []
    for label, rep in (("answers", ans_rep), ("extra guesses", ext_rep)):
        if not rep.exists:
            issues.append(f"{label} file not found: {rep.path}")
            continue
        if rep.invalid_lines:
            shown = ", ".join(str(n) for n in rep.invalid_lines[:5])
            issues.append(f"{label} has {len(rep.invalid_lines)} invalid line(s) "
                          f"(not {WORD_LENGTH} letters a-z), e.g. line {shown}")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains {rep.count - rep.unique_count} duplicate line(s)")
    if ans_rep.exists and ans_rep.count == 0:
        issues.append("answers file contains 0 valid words")

    # duplicates are merged by `load`, so they are reported but do not fail
    passed = (
        ans_rep.exists
        and ext_rep.exists
        and ans_rep.count > 0
        and not ans_rep.invalid_lines
        and not ext_rep.invalid_lines
    )

    rep = ValidationReport(
        answers=ans_rep,
        extra_guesses=ext_rep,
        guess_count=len(ans | ext),
        overlap=len(ans & ext),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-line summary for console output.

    Example:
        answers=2315 (uniq=2315, sha=abc123...) | extra=10657 (uniq=10657, sha=def456...) | guesses=12972 | OK
    """
    a = report["answers"]
    b = report["extra_guesses"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| extra={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| guesses={report['guess_count']} | {status}"
    )
