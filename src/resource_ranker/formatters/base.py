"""Base formatter interface for Resource Ranker output rendering."""

from abc import ABC, abstractmethod

from ..models import RankingReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: RankingReport) -> None:
        """Render the report to stdout."""

    @abstractmethod
    def format(self, report: RankingReport) -> str:
        """Return formatted string representation of the report."""
