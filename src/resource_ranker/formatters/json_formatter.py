"""JSON formatter for Resource Ranker."""

import json
from dataclasses import asdict

from .base import BaseFormatter
from ..models import RankingReport


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: RankingReport) -> None:
        print(self.format(report))

    def format(self, report: RankingReport) -> str:
        data = asdict(report)
        data["contrast"] = [
            {**entry, "black_ratio": round(entry["black_ratio"], 4),
             "white_ratio": round(entry["white_ratio"], 4)}
            for entry in data["contrast"]
        ]
        return json.dumps(data, indent=2)
