# nvimgen Health Check Analyzer
# Turn pasted :checkhealth output into categorized issues with suggestions

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_TOOL_RE = re.compile(r"`([^`]+)`")
_CATEGORY_RE = re.compile(r".*health#|##")
_BULLET_RE = re.compile(r"^-(?:\s+|$)")


class IssueType(str, Enum):
    """Severity of a health check line."""

    ERROR = "error"
    WARNING = "warning"
    OK = "ok"


@dataclass
class HealthIssue:
    """One reported line from :checkhealth."""

    type: IssueType
    category: str
    message: str
    suggestion: Optional[str] = None


def _strip_marker(line: str, *markers: str) -> str:
    for marker in markers:
        if marker in line:
            line = line.replace(marker, "", 1)
            break
    # checkhealth prefixes each report line with a single "- " bullet
    return _BULLET_RE.sub("", line.strip(), count=1).strip()


def _error_suggestion(text: str) -> Optional[str]:
    lowered = text.lower()
    if "executable not found" in lowered or "not installed" in lowered:
        match = _TOOL_RE.search(text)
        tool = match.group(1) if match else "tool"
        return f"Install {tool} using your package manager or download from the official website."
    if "provider" in lowered:
        if "python" in lowered:
            return "Install the pynvim package: pip install pynvim"
        if "ruby" in lowered:
            return "Install the neovim gem: gem install neovim"
        if "node" in lowered:
            return "Install the neovim npm package: npm install -g neovim"
    if "clipboard" in lowered:
        return "Install a clipboard tool like xclip (Linux) or pbcopy (macOS)"
    return None


def _warning_suggestion(text: str) -> Optional[str]:
    lowered = text.lower()
    if "version" in lowered:
        return "Consider updating to the latest version for better compatibility."
    if "config" in lowered:
        return "Review your configuration file for any deprecated or incorrect settings."
    return None


def parse_health_check(output: str) -> list[HealthIssue]:
    """
    Parse :checkhealth output.

    Lines containing "health#" or "##" start a new category. Within a
    category, ERROR/✗ lines become errors, WARNING/⚠ lines warnings and
    OK/✓ lines successes; everything else is ignored.

    Args:
        output: Raw text pasted from Neovim.

    Returns:
        Issues in the order they appear.
    """
    issues: list[HealthIssue] = []
    category = "General"

    for raw in output.splitlines():
        line = raw.strip()
        if not line:
            continue

        if "health#" in line or "##" in line:
            category = _CATEGORY_RE.sub("", line).strip() or "General"
            continue

        if "ERROR" in line or "✗" in line:
            text = _strip_marker(line, "ERROR:", "ERROR", "✗")
            issues.append(HealthIssue(IssueType.ERROR, category, text, _error_suggestion(text)))
        elif "WARNING" in line or "⚠" in line:
            text = _strip_marker(line, "WARNING:", "WARNING", "⚠")
            issues.append(HealthIssue(IssueType.WARNING, category, text, _warning_suggestion(text)))
        elif "OK" in line or "✓" in line:
            text = _strip_marker(line, "OK:", "OK", "✓")
            if text:
                issues.append(HealthIssue(IssueType.OK, category, text))

    return issues


def summarize_issues(issues: list[HealthIssue]) -> dict[IssueType, int]:
    """Count issues per type. Every type is present in the result."""
    counts = {issue_type: 0 for issue_type in IssueType}
    for issue in issues:
        counts[issue.type] += 1
    return counts
