from abc import ABC, abstractmethod


class ICoder(ABC):
    """
    Metadata attached to an error code: what the caller of an API gets to
    see when an error with that code reaches the boundary.
    """

    @property
    @abstractmethod
    def code(self) -> int:
        pass

    @property
    @abstractmethod
    def http_status(self) -> int:
        pass

    @property
    @abstractmethod
    def display_text(self) -> str:
        pass

    @property
    @abstractmethod
    def reference(self) -> str:
        pass

    def __str__(self) -> str:
        return self.display_text
