# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Result reporting for the command line interface."""

from pathlib import Path
from typing import Any, Dict, List, Optional

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


class CheckResult:
    """Verdict for one checked file: a boolean or an error message."""

    def __init__(self, file_path: Path, target_id: str):
        """Initialize check result.

        Args:
            file_path: Path to the schema or instance file that was checked
            target_id: Identifier of the schema it was checked against
        """
        self.file_path = file_path
        self.target_id = target_id
        self.verdict: Optional[bool] = None
        self.error: Optional[str] = None

    def set_verdict(self, verdict: bool):
        self.verdict = verdict

    def set_error(self, error: Exception):
        self.error = f"{type(error).__name__}: {error}"

    @property
    def exit_code(self) -> int:
        if self.error is not None:
            return EXIT_ERROR
        if not self.verdict:
            return EXIT_INVALID
        return EXIT_OK

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'file': str(self.file_path), 'id': self.target_id, 'valid': self.verdict}
        if self.error is not None:
            result['error'] = self.error
        return result


def overall_exit_code(results: List[CheckResult]) -> int:
    """Errors win over invalid verdicts, which win over success."""
    return max((r.exit_code for r in results), default=EXIT_OK)


def format_human(results: List[CheckResult]) -> str:
    lines = []
    for result in results:
        if result.error is not None:
            lines.append(f"{result.file_path}: ERROR: {result.error}")
        elif result.verdict:
            lines.append(f"{result.file_path}: valid ({result.target_id})")
        else:
            lines.append(f"{result.file_path}: INVALID ({result.target_id})")
    return "\n".join(lines)


def format_json(results: List[CheckResult]) -> Dict[str, Any]:
    return {
        'files': len(results),
        'valid': sum(1 for r in results if r.error is None and r.verdict),
        'invalid': sum(1 for r in results if r.error is None and not r.verdict),
        'errors': sum(1 for r in results if r.error is not None),
        'results': [r.to_dict() for r in results],
    }
