from abc import ABCMeta, abstractmethod

from strings_server.errors import EmptyInputError


class StringService(metaclass=ABCMeta):
    """Operations on strings.

    Classes that implement this ABC are exposed over HTTP by the endpoint and transport layers.
    """

    @abstractmethod
    def uppercase(self, s: str) -> str:
        """Converts a string to upper case.

        Args:
            s: The string to convert
        Returns:
            The upper cased string.
        Raises:
            EmptyInputError: The string was empty.
        """
        ...


class BasicStringService(StringService):
    def uppercase(self, s: str) -> str:
        if s == "":
            raise EmptyInputError()
        return s.upper()
