"""Property-based tests for the donation ledger.

Random donation sequences must keep the running total equal to a full
traversal of the ledger, and the bounded-heap ranking must agree with a
plain stable sort.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from donation_ledger.context import LocalContext
from donation_ledger.contract import DonationContract
from donation_ledger.errors import InsufficientForStorage
from donation_ledger.settings import STORAGE_COST
from donation_ledger.types import Donation


donations_strategy = st.lists(
    st.tuples(
        st.sampled_from(["a", "b", "c", "d", "e", "f", "g"]),
        st.integers(min_value=1, max_value=3 * STORAGE_COST),
    ),
    max_size=40,
)


def run_donations(donations, reset_at=None):
    context = LocalContext(caller_id="owner")
    contract = DonationContract(context)
    contract.initialize("b.testnet", "B", "d")

    for index, (donor, amount) in enumerate(donations):
        if index == reset_at:
            contract.reset()
        with context.call(donor, amount):
            try:
                contract.donate()
            except InsufficientForStorage:
                assert amount <= STORAGE_COST

    return contract, context


@settings(max_examples=200)
@given(donations_strategy, st.one_of(st.none(), st.integers(min_value=0, max_value=40)))
def test_running_total_matches_traversal(donations, reset_at):
    contract, context = run_donations(donations, reset_at)
    ledger = contract.state.ledger

    assert ledger.total() == contract.state.total_donated
    assert sum(amount for _, amount in ledger.items()) == int(contract.get_total_donated())
    assert all(amount > STORAGE_COST for _, amount in ledger.items())
    assert len(set(ledger.keys())) == len(ledger)


@given(donations_strategy)
def test_transfers_only_withhold_storage_once_per_donor(donations):
    contract, context = run_donations(donations)

    forwarded = sum(transfer.amount for transfer in context.transfers)
    withheld = STORAGE_COST * contract.number_of_donors()
    assert forwarded == contract.state.total_donated - withheld
    assert len(context.transfers) == len(context.diagnostics)


@given(donations_strategy)
def test_top_five_matches_stable_sort(donations):
    contract, _ = run_donations(donations)

    # sorted() is stable, so ties keep insertion order.
    ranked = sorted(contract.state.ledger.items(), key=lambda item: -item[1])[:5]

    assert contract.get_top_five_donors() == [
        Donation(account_id, str(amount)) for account_id, amount in ranked
    ]


@given(
    st.integers(min_value=0, max_value=12),
    st.integers(min_value=0, max_value=15),
    st.integers(min_value=0, max_value=15),
)
def test_pagination_length(donor_count, from_index, limit):
    donations = [(f"donor{index}", STORAGE_COST + 1) for index in range(donor_count)]
    contract, _ = run_donations(donations)

    page = contract.get_donations(from_index=from_index, limit=limit)
    assert len(page) == min(limit, max(0, donor_count - from_index))
    assert [donation.account_id for donation in page] == [
        f"donor{index}" for index in range(from_index, from_index + len(page))
    ]
