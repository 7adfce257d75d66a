"""Port: Content fetcher — retrieve one file from one repository."""

from abc import ABC, abstractmethod


class ContentFetcherPort(ABC):
    """Contract for fetching raw file content from a hosted repository."""

    @abstractmethod
    def fetch(self, repository: str, file_path: str) -> str:
        """Return the text of *file_path* in *repository*.

        Args:
            repository: Identifier in ``owner/name`` form.
            file_path: Path of the file inside the repository.

        Raises:
            ContentNotFoundError: The file is absent on every branch tried.
            ContentFetchError: Any other fetch-side failure.
        """
        ...
