"""Detects calls to PHP functions that execute code or shell commands."""

import logging
from typing import Optional

from analyzers_core.analyzers.file_analyzer import FileAnalyzer
from analyzers_core.config import Settings
from analyzers_core.models.enums import Category, Severity
from analyzers_core.models.issue import Issue
from analyzers_core.models.metadata import AnalyzerMetadata
from analyzers_core.parsers.php_parser import PhpParser
from analyzers_core.parsers.queries import find_function_calls
from analyzers_core.results.analysis_result import AnalysisResult

logger = logging.getLogger(__name__)

DANGEROUS_FUNCTIONS = {
    "eval": "Evaluates arbitrary PHP code",
    "exec": "Executes an external program",
    "system": "Executes an external program and displays the output",
    "passthru": "Executes an external program and passes raw output through",
    "shell_exec": "Executes a command via the shell",
    "assert": "Can evaluate string assertions as code",
    "create_function": "Creates a function from a code string",
    "unserialize": "Can instantiate arbitrary objects from untrusted input",
    "popen": "Opens a pipe to a shell process",
    "proc_open": "Executes a command with open file pointers",
}


class DangerousFunctionAnalyzer(FileAnalyzer):
    """Flags every literal call to a function in ``DANGEROUS_FUNCTIONS``."""

    def __init__(self, settings: Optional[Settings] = None, parser: Optional[PhpParser] = None):
        super().__init__(settings)
        self.parser = parser or PhpParser()

    def metadata(self) -> AnalyzerMetadata:
        return AnalyzerMetadata(
            id="dangerous-functions",
            name="Dangerous Functions",
            description="Detects calls to functions that execute code or shell commands",
            category=Category.SECURITY,
            severity=Severity.HIGH,
            tags=["security", "injection", "rce"],
        )

    def run_analysis(self) -> AnalysisResult:
        issues: list[Issue] = []
        files = self.php_files()

        for file_path in files:
            tree = self.parser.parse_file(file_path)
            calls = []
            for function_name in DANGEROUS_FUNCTIONS:
                calls.extend(find_function_calls(tree, function_name))

            for call in sorted(calls, key=lambda node: (node.start_line, node.start_column)):
                issues.append(
                    self.create_issue_with_snippet(
                        message=f"Dangerous function {call.name}() called",
                        file_path=file_path,
                        line=call.start_line,
                        severity=Severity.HIGH,
                        recommendation=(
                            f"Avoid {call.name}(). {DANGEROUS_FUNCTIONS[call.name]}; "
                            "never pass user input to it"
                        ),
                        column=call.start_column,
                        metadata={"function": call.name},
                    )
                )

        logger.debug(f"Scanned {len(files)} files for dangerous function calls")
        message = f"Found {len(issues)} dangerous function call(s)" if issues else "No dangerous function calls found"
        return self.result_by_severity(message, issues)
