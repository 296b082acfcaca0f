from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for the pipeline and its adapters"""

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        """Log at error level with the active exception's traceback"""
        pass
