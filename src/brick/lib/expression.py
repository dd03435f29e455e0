from abc import ABC, abstractmethod


class Expression(ABC):
    @abstractmethod
    def produce_content(self) -> str:
        """Return the text substituted for a placeholder referencing this value."""
        pass
