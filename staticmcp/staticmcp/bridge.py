"""Bridge compatibility checker.

Reads a generated bundle the way a bridge does: every resource URI and
tool call is resolved to a file through staticmcp.encoding, then the file
is opened and its envelope inspected.

Two failures are kept apart:
- FILE_NOT_FOUND: nothing at the computed path, i.e. the writer and the
  resolver disagree on the encoding
- MALFORMED_FILE: a file exists but its content is not a valid envelope
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from staticmcp.constants import MANIFEST_FILE, RESOURCES_DIR, TOOLS_DIR, ToolName
from staticmcp.encoding import resource_path, tool_path
from staticmcp.errors import ErrorCode
from staticmcp.manifest import REQUIRED_FIELDS
from staticmcp.utils.path_utils import bundle_file

logger = logging.getLogger(__name__)

STATUS_OK = "OK"
DEFAULT_THRESHOLD = 80.0


@dataclass
class CheckResult:
    """Outcome of resolving one request against the bundle."""

    target: str
    path: str
    status: str = STATUS_OK
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def to_dict(self) -> Dict[str, str]:
        result = {"target": self.target, "path": self.path, "status": self.status}
        if self.message:
            result["message"] = self.message
        return result


@dataclass
class SectionReport:
    """Results of one group of checks."""

    name: str
    results: List[CheckResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    threshold: float = DEFAULT_THRESHOLD

    @property
    def compatibility_rate(self) -> float:
        if not self.results:
            return 100.0
        return sum(1 for r in self.results if r.ok) / len(self.results) * 100

    @property
    def passed(self) -> bool:
        return not self.errors and self.compatibility_rate >= self.threshold

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "compatibility_rate": round(self.compatibility_rate, 1),
            "errors": self.errors,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass
class BridgeReport:
    bundle_dir: str
    sections: List[SectionReport] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(section.passed for section in self.sections)

    def to_dict(self) -> Dict[str, Any]:
        passed = sum(1 for section in self.sections if section.passed)
        return {
            "status": "success" if self.passed else "error",
            "bundle_dir": self.bundle_dir,
            "passed": passed,
            "total": len(self.sections),
            "sections": [section.to_dict() for section in self.sections],
        }


def read_json(file_path: Path) -> Tuple[Optional[Any], str, str]:
    """Load a bundle file. Returns (data, status, message)."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        return None, ErrorCode.FILE_NOT_FOUND.value, "file not found"
    except UnicodeDecodeError as e:
        return None, ErrorCode.MALFORMED_FILE.value, f"not UTF-8: {e}"

    try:
        return json.loads(text), STATUS_OK, ""
    except ValueError as e:
        return None, ErrorCode.MALFORMED_FILE.value, f"invalid JSON: {e}"


def _first_item(data: Any, key: str) -> Optional[Dict[str, Any]]:
    if not isinstance(data, dict):
        return None
    items = data.get(key)
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None
    return items[0]


def check_resource_envelope(data: Any) -> Optional[str]:
    """Problem with a resource file's content, or None when valid."""
    first = _first_item(data, "contents")
    if first is None:
        return "missing contents array"
    if not first.get("uri") or not first.get("mimeType") or not isinstance(first.get("text"), str):
        return "missing required fields"
    return None


def check_tool_envelope(data: Any) -> Optional[str]:
    """Problem with a tool response file's content, or None when valid."""
    first = _first_item(data, "content")
    if first is None:
        return "missing content array"
    if not first.get("type") or not isinstance(first.get("text"), str):
        return "invalid content structure"
    return None


class BridgeChecker:
    """Verify that a bundle resolves the way a bridge reads it."""

    def __init__(self, bundle_dir: Union[str, Path], threshold: float = DEFAULT_THRESHOLD):
        self.bundle_dir = Path(bundle_dir)
        self.threshold = threshold
        self._manifest: Optional[Dict[str, Any]] = None

    def run(self) -> BridgeReport:
        """Run all checks. Bundle defects are reported, never raised."""
        logger.info(f"Checking bridge compatibility of {self.bundle_dir}")
        report = BridgeReport(bundle_dir=str(self.bundle_dir))
        report.sections.append(self.check_structure())
        report.sections.append(self.check_manifest())
        report.sections.append(self.check_resources())
        report.sections.append(self.check_tools())

        for section in report.sections:
            if not section.passed:
                logger.warning(
                    f"{section.name}: {section.compatibility_rate:.1f}% compatible, "
                    f"errors: {section.errors}"
                )
        return report

    def _section(self, name: str) -> SectionReport:
        return SectionReport(name=name, threshold=self.threshold)

    def _load_manifest(self) -> Tuple[Optional[Dict[str, Any]], str]:
        if self._manifest is not None:
            return self._manifest, ""
        data, status, message = read_json(self.bundle_dir / MANIFEST_FILE)
        if status != STATUS_OK:
            return None, f"{MANIFEST_FILE}: {message}"
        if not isinstance(data, dict):
            return None, f"{MANIFEST_FILE}: not a JSON object"
        self._manifest = data
        return data, ""

    def check_structure(self) -> SectionReport:
        section = self._section("structure")
        for name, want_dir in ((MANIFEST_FILE, False), (RESOURCES_DIR, True), (TOOLS_DIR, True)):
            path = self.bundle_dir / name
            valid = path.is_dir() if want_dir else path.is_file()
            if not valid:
                kind = "directory" if want_dir else "file"
                section.errors.append(f"{name} missing or not a {kind}")
        return section

    def check_manifest(self) -> SectionReport:
        section = self._section("manifest")
        manifest, error = self._load_manifest()
        if manifest is None:
            section.errors.append(error)
            return section

        missing = [name for name in REQUIRED_FIELDS if not manifest.get(name)]
        if missing:
            section.errors.append(
                f"{ErrorCode.MISSING_FIELDS.value}: {', '.join(missing)}"
            )
            return section

        server_info = manifest["serverInfo"]
        if not isinstance(server_info, dict) or not server_info.get("name") or not server_info.get("version"):
            section.errors.append("serverInfo must have name and version")
        return section

    def _capability(self, manifest: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        capabilities = manifest.get("capabilities")
        if not isinstance(capabilities, dict):
            return []
        items = capabilities.get(key) or []
        return [item for item in items if isinstance(item, dict)]

    def _check_file(self, target: str, relative_path: str, validate) -> CheckResult:
        data, status, message = read_json(bundle_file(self.bundle_dir, relative_path))
        if status == STATUS_OK:
            problem = validate(data)
            if problem:
                status, message = ErrorCode.MALFORMED_FILE.value, problem
        result = CheckResult(target=target, path=relative_path, status=status, message=message)
        logger.debug(f"{target} -> {relative_path}: {status}")
        return result

    def check_resources(self) -> SectionReport:
        section = self._section("resources")
        manifest, error = self._load_manifest()
        if manifest is None:
            section.errors.append(error)
            return section

        for resource in self._capability(manifest, "resources"):
            uri = resource.get("uri")
            if not isinstance(uri, str) or not uri:
                section.errors.append(f"resource without uri: {resource}")
                continue
            section.results.append(
                self._check_file(uri, resource_path(uri), check_resource_envelope)
            )
        return section

    def sample_calls(self, manifest: Dict[str, Any]) -> List[Tuple[str, Dict[str, Any]]]:
        """Calls a bridge must be able to answer for this manifest."""
        advertised = {tool.get("name") for tool in self._capability(manifest, "tools")}
        calls: List[Tuple[str, Dict[str, Any]]] = []
        if ToolName.LIST_DOCS in advertised:
            calls.append((ToolName.LIST_DOCS, {}))
            calls.append((ToolName.LIST_DOCS, {"type": "docs"}))
        if ToolName.GET_DOC in advertised:
            for resource in self._capability(manifest, "resources"):
                if isinstance(resource.get("uri"), str):
                    calls.append((ToolName.GET_DOC, {"uri": resource["uri"]}))
        return calls

    def check_tools(self) -> SectionReport:
        section = self._section("tools")
        manifest, error = self._load_manifest()
        if manifest is None:
            section.errors.append(error)
            return section

        for name, arguments in self.sample_calls(manifest):
            target = f"{name}({json.dumps(arguments)})"
            section.results.append(
                self._check_file(target, tool_path(name, arguments), check_tool_envelope)
            )
        return section
