import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table

from .errors import ReportError
from .types import CheckResult

REPORT_PREFIX = "update-report"


def report_filename(generated_at: datetime, suffix: str = ".md") -> str:
    return f"{REPORT_PREFIX}-{generated_at.date().isoformat()}{suffix}"


@dataclass
class UpdateReport:
    generated_at: datetime
    results: List[CheckResult]
    docs_subdir: str = "zoho-docs/api-reference"
    summary: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_results(
        cls,
        results: List[CheckResult],
        docs_subdir: str = "zoho-docs/api-reference",
        generated_at: datetime | None = None,
    ) -> "UpdateReport":
        summary = {
            "total": len(results),
            "up_to_date": sum(1 for r in results if r.is_up_to_date),
            "needs_update": sum(1 for r in results if r.needs_update),
            "errors": sum(1 for r in results if r.is_failure),
        }
        return cls(
            generated_at=generated_at or datetime.now(),
            results=list(results),
            docs_subdir=docs_subdir,
            summary=summary,
        )

    @property
    def needs_update(self) -> List[CheckResult]:
        return [r for r in self.results if r.needs_update]

    @property
    def up_to_date(self) -> List[CheckResult]:
        return [r for r in self.results if r.is_up_to_date]

    @property
    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if r.is_failure]

    def render_markdown(self) -> str:
        """Render the report. Only the "Generated" line depends on the clock."""
        s = self.summary
        lines = [
            "# Zoho Documentation Update Report",
            "",
            f"**Generated**: {self.generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"**Products Checked**: {s['total']}",
            "",
            "---",
            "",
            "## Summary",
            "",
            f"- ✅ **Up to Date**: {s['up_to_date']}",
            f"- ⚠️  **Needs Update**: {s['needs_update']}",
            f"- ❌ **Errors/Inaccessible**: {s['errors']}",
            "",
            "---",
            "",
        ]

        stale = self.needs_update
        if stale:
            lines += ["## Documentation Needing Updates", ""]
            for item in stale:
                lines += [f"### {item.product}", "", f"**Reason**: {item.reason_detail}", ""]
                lines += [f"**Remote URL**: {item.url}", ""]
                if item.remote and item.remote.version:
                    lines += [f"**Remote Version**: v{item.remote.version}", ""]
                if item.local and item.local.version:
                    lines += [f"**Local Version**: v{item.local.version}", ""]
                lines += [
                    f"**Local File**: `{self.docs_subdir}/{item.product}/README.md`",
                    "",
                    "**Action**: Update documentation to reflect current API version and features",
                    "",
                    "---",
                    "",
                ]

        current = self.up_to_date
        if current:
            lines += ["## Up to Date Documentation", ""]
            for item in current:
                entry = f"- ✅ **{item.product}**:"
                if item.local and item.local.version:
                    entry += f" v{item.local.version}"
                if item.local and item.local.last_updated:
                    entry += f" ({item.local.last_updated})"
                lines.append(entry)
            lines.append("")

        failures = self.failures
        if failures:
            lines += ["## Errors & Inaccessible", ""]
            for item in failures:
                lines.append(f"- ❌ **{item.product}**: {item.failure_detail}")
                lines.append(f"  - URL: {item.url}")
            lines.append("")

        lines += ["---", "", "## Next Steps", ""]
        if stale:
            lines += [
                "1. Review the products marked as needing updates",
                "2. For each product, visit the remote documentation URL",
                "3. Update the local markdown files with new information",
                '4. Update version numbers and "**Last Updated**" dates',
                "5. Re-run the check to verify updates: `zoho-docs check "
                + " ".join(item.product for item in stale)
                + "`",
                "",
            ]
        else:
            lines += [
                "All documentation appears to be up to date! 🎉",
                "",
                "Consider running this check quarterly or when Zoho announces API updates.",
                "",
            ]

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "summary": self.summary,
            "results": [
                dict(asdict(r), reason=r.reason, reason_detail=r.reason_detail)
                for r in self.results
            ],
        }

    def save(self, output_dir: Path) -> Path:
        """Write the markdown report to ``output_dir`` and return its path."""
        path = Path(output_dir) / report_filename(self.generated_at)
        self._write(path, self.render_markdown())
        return path

    def save_json(self, output_dir: Path) -> Path:
        """Write the report data as JSON next to the markdown report."""
        path = Path(output_dir) / report_filename(self.generated_at, ".json")
        self._write(path, json.dumps(self.to_dict(), indent=2, ensure_ascii=False))
        return path

    @staticmethod
    def _write(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ReportError(str(path), e) from e

    def print_summary(self, console: Console):
        """Print summary table to console."""
        s = self.summary

        table = Table(title="Update Summary")
        table.add_column("Status", style="cyan")
        table.add_column("Count", style="magenta", justify="right")

        table.add_row("[green]✅ Up to Date[/green]", str(s["up_to_date"]))
        table.add_row("[yellow]⚠️  Needs Update[/yellow]", str(s["needs_update"]))
        table.add_row("[red]❌ Errors[/red]", str(s["errors"]))

        console.print()
        console.print(table)

        stale = self.needs_update
        if stale:
            console.print("\n[yellow]Products needing updates:[/yellow]")
            for item in stale:
                console.print(f"  • {item.product}: {item.reason_detail}")
            console.print()
