from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .FileByteSource import FileByteSource


class Random:
    """Access to the system's secure random byte source."""

    @staticmethod
    def get_source() -> FileByteSource:
        """Open the random source named by RANDOM_SOURCE (default /dev/urandom).

        Returns:
            FileByteSource: An open byte source, to be closed by the caller
        """
        path = EnvironmentManager.get_string(EnvironmentVariables.RANDOM_SOURCE)
        return FileByteSource.open(path)
