# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_about.py — project metadata.
"""

import re
from pathlib import Path

import __about__

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _project_field(name: str) -> str:
    match = re.search(rf'^{name}\s*=\s*"([^"]+)"', PYPROJECT.read_text(encoding="utf-8"), re.MULTILINE)
    assert match is not None, f"{name} missing from pyproject.toml"
    return match.group(1)


def test_metadata_summary():
    summary = __about__.metadata_summary()
    assert summary["title"] == "Tinct"
    assert summary["license"] == "LGPL-3.0-or-later"
    assert re.fullmatch(r"\d+\.\d+\.\d+", summary["version"])


def test_version_matches_pyproject():
    assert _project_field("version") == __about__.__version__
    assert _project_field("name") == __about__.__title__
