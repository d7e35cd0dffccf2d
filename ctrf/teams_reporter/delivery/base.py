"""Abstract base class for notification senders."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping


class NotificationSender(ABC):
    """Abstract base for chat notification channels."""

    @abstractmethod
    async def send(self, payload: Mapping[str, object]) -> None:
        """Deliver a single notification payload.

        Args:
            payload: JSON-serializable message document

        Raises:
            RuntimeError: If the channel rejects the message

        """

    async def send_all(self, payloads: Iterable[Mapping[str, object]]) -> int:
        """Deliver payloads one after another.

        Args:
            payloads: Message documents to deliver, in order

        Returns:
            Number of payloads delivered

        Raises:
            RuntimeError: If the channel rejects a message; later payloads
                are not sent

        """
        sent = 0
        for payload in payloads:
            await self.send(payload)
            sent += 1
        return sent
