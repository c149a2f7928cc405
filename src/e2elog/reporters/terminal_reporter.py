from e2elog.core.endpoint import Endpoint
from e2elog.core.summary import Summary

INDENT = "    "


class TerminalReporter:
    def __init__(self, summary: Summary) -> None:
        self.summary = summary

    def render(self) -> str:
        covered = [x for x in self.summary.endpoints if x.touched]
        uncovered = [x for x in self.summary.endpoints if not x.touched]
        lines = ["", "Covered operations/responses:"]
        lines.extend(self._describe(covered))
        lines.extend(["", "Uncovered operations/responses:"])
        lines.extend(self._describe(uncovered))
        lines.extend(
            [
                "",
                f"Coverage: {self.summary.total_matched}/{self.summary.total} "
                f"({self.summary.coverage * 100:.1f}%)",
                "",
            ]
        )
        return "\n".join(lines)

    def create(self) -> None:
        print(self.render())

    def _describe(self, endpoints: list[Endpoint]) -> list[str]:
        if not endpoints:
            return [f"{INDENT}None"]
        return [
            f"{INDENT}{x.method} {x.path} returns {x.status_code} ({x.operation_id})"
            for x in sorted(endpoints, key=lambda x: (x.path, x.method, x.status_code))
        ]
