"""Report target entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from postman_suite_runner.run_configuration import DEFAULT_REPORT_TITLE


@dataclass(frozen=True)
class HtmlExtraOptions:  # pylint: disable=too-many-instance-attributes
    """Fixed presentation options handed to the htmlextra reporter."""

    template: str = "default"
    show_only_fails: bool = False
    no_syntax_highlighting: bool = False
    test_paging: bool = True
    browser_title: str = DEFAULT_REPORT_TITLE
    title: str = DEFAULT_REPORT_TITLE
    title_size: int = 1
    omit_headers: bool = False


@dataclass(frozen=True)
class ReportTarget:
    """Export path per file-producing reporter for one run."""

    exports: Mapping[str, Path] = field(default_factory=dict)
    htmlextra: HtmlExtraOptions | None = None

    def export_for(self, reporter: str) -> Path | None:
        return self.exports.get(reporter)
