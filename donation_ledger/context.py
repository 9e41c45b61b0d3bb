from abc import ABC, abstractmethod
from contextlib import contextmanager
import logging

from .amount import Amount, ZERO
from .types import Transfer


class ExecutionContext(ABC):
    """What the host supplies to each contract call."""

    @abstractmethod
    def current_caller_id(self):
        pass

    @abstractmethod
    def attached_payment(self):
        pass

    @abstractmethod
    def request_transfer(self, to, amount):
        pass

    def emit_diagnostic(self, message):
        logging.info(message)


class LocalContext(ExecutionContext):
    """Runs contract calls in-process.

    Transfers are recorded in `transfers` rather than settled.
    """

    def __init__(self, caller_id="", attached=ZERO):
        self.caller_id = caller_id
        self.attached = Amount(attached)
        self.transfers = []
        self.diagnostics = []

    def current_caller_id(self):
        return self.caller_id

    def attached_payment(self):
        return self.attached

    def request_transfer(self, to, amount):
        transfer = Transfer(to, Amount(amount))
        logging.debug(f"Transfer requested: {transfer}")
        self.transfers.append(transfer)

    def emit_diagnostic(self, message):
        self.diagnostics.append(message)
        super().emit_diagnostic(message)

    @contextmanager
    def call(self, caller_id, attached=ZERO):
        """Set the caller and attached deposit for the duration of one call."""

        previous = self.caller_id, self.attached
        self.caller_id, self.attached = caller_id, Amount(attached)
        try:
            yield self
        finally:
            self.caller_id, self.attached = previous
