import json
from enum import Enum

from e2elog.core.summary import Summary


class OutputMode(str, Enum):
    full = "full"
    stats = "stats"
    coverage = "coverage"


class JsonReporter:
    """Serializes a summary the way downstream tooling consumes it.

    ``full`` is the summary with every endpoint, ``stats`` drops the endpoint
    list and ``coverage`` is the bare ratio.
    """

    def __init__(self, summary: Summary, mode: OutputMode = OutputMode.full) -> None:
        self.summary = summary
        self.mode = mode

    def render(self) -> str:
        if self.mode is OutputMode.coverage:
            return str(self.summary.coverage)
        if self.mode is OutputMode.stats:
            return json.dumps(self.summary.stats().to_dict())
        return json.dumps(self.summary.to_dict())

    def create(self) -> None:
        print(self.render())
