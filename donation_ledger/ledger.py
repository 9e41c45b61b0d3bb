import heapq
from itertools import islice

from .amount import Amount, ZERO
from .errors import InvalidArgument
from .settings import TOP_DONOR_COUNT
from .types import Donation


class DonorLedger:
    """Cumulative donation per account, enumerated in first-insertion order."""

    def __init__(self, entries=()):
        self._donations = {}
        for account_id, amount in entries:
            self.set(account_id, amount)

    def __len__(self):
        return len(self._donations)

    def __contains__(self, account_id):
        return account_id in self._donations

    def __iter__(self):
        return iter(self._donations)

    def get(self, account_id, default=None):
        return self._donations.get(account_id, default)

    def set(self, account_id, amount):
        # Updating an existing key keeps its original position.
        self._donations[account_id] = Amount(amount)

    def keys(self, start=0, limit=None):
        if start < 0 or (limit is not None and limit < 0):
            raise InvalidArgument(
                f"start and limit must not be negative (got {start}, {limit})"
            )
        stop = None if limit is None else start + limit
        return list(islice(self._donations, start, stop))

    def items(self):
        return list(self._donations.items())

    def clear(self):
        self._donations.clear()

    def total(self):
        """Sum every entry; the traversal counterpart of the campaign's running total."""
        return sum(self._donations.values(), ZERO)


def top_donors(ledger, count=TOP_DONOR_COUNT):
    """Return the `count` largest donations, largest first.

    Uses a bounded min-heap. Equal amounts rank by insertion order, earlier
    donors first, so each heap key is (amount, -position).
    """

    if count <= 0:
        return []

    heap = []
    for position, (account_id, amount) in enumerate(ledger.items()):
        entry = (amount, -position, account_id)
        if len(heap) < count:
            heapq.heappush(heap, entry)
        elif entry > heap[0]:
            heapq.heapreplace(heap, entry)

    return [
        Donation(account_id, str(amount))
        for amount, _, account_id in sorted(heap, reverse=True)
    ]
