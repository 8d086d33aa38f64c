"""addrctl — text-command address book with confirm/undo and durable state."""

__version__ = "0.1.0"
