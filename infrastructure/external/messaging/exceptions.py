class MessagingError(Exception):
    """Base class for event publishing failures."""


class SerializationError(MessagingError):
    """Payload could not be encoded to (or decoded from) bytes."""


class PublishError(MessagingError):
    """The broker rejected the record or no delivery report arrived in time."""
