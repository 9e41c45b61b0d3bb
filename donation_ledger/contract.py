import logging

from .amount import Amount, ZERO
from .common import format_donation
from .errors import (
    AlreadyInitialized,
    InsufficientForStorage,
    InvalidAmount,
    NotInitialized,
    Unauthorized,
)
from .ledger import DonorLedger, top_donors
from .settings import DEFAULT_PAGE_LIMIT, STORAGE_COST, TOP_DONOR_COUNT
from .types import Donation, Statistics


class CampaignState:
    """Everything the contract persists between calls."""

    def __init__(
        self,
        beneficiary="",
        beneficiary_name="",
        description="",
        controller="",
        ledger=None,
        total_donated=ZERO,
        initialized=False,
    ):
        self.beneficiary = beneficiary
        self.beneficiary_name = beneficiary_name
        self.description = description
        self.controller = controller
        self.ledger = ledger if ledger is not None else DonorLedger()
        self.total_donated = Amount(total_donated)
        self.initialized = initialized

    def __repr__(self):
        return (
            f"CampaignState(beneficiary={self.beneficiary!r}, "
            f"donors={len(self.ledger)}, total_donated={self.total_donated})"
        )


class DonationContract:
    """Accepts donations, forwards them to the beneficiary and keeps the tally.

    Caller identity and attached deposits come from `context`; every
    mutating call validates first and only then touches `state`, so a
    failed call leaves the state exactly as it was.
    """

    def __init__(self, context, state=None):
        self.context = context
        self.state = state if state is not None else CampaignState()

    # ============ Mutating calls ============

    def initialize(self, beneficiary, beneficiary_name, description):
        if self.state.initialized:
            raise AlreadyInitialized()

        controller = self.context.current_caller_id()
        if not controller:
            raise Unauthorized("A named account must initialize the contract")
        logging.debug(f"Initializing for {beneficiary=}, controlled by {controller}")
        self.state = CampaignState(
            beneficiary=beneficiary,
            beneficiary_name=beneficiary_name,
            description=description,
            controller=controller,
            initialized=True,
        )

    def donate(self):
        return self.record_donation(
            self.context.current_caller_id(), self.context.attached_payment()
        )

    def record_donation(self, donor, attached):
        self._require_initialized()
        attached = Amount(attached)
        if attached == 0:
            raise InvalidAmount("Attach a deposit to donate")

        donated_so_far = self.state.ledger.get(donor, ZERO)
        to_transfer = attached

        if donated_so_far == 0:
            # First donation from this account: it pays for its own ledger entry.
            if attached <= STORAGE_COST:
                raise InsufficientForStorage(
                    f"Attach more than {STORAGE_COST} yoctoNEAR"
                )
            to_transfer = attached - STORAGE_COST

        donated_so_far = donated_so_far + attached
        self.state.ledger.set(donor, donated_so_far)
        self.state.total_donated = self.state.total_donated + attached

        self._diagnostic(
            format_donation(Donation(donor, str(attached)), str(donated_so_far))
        )
        self.context.request_transfer(self.state.beneficiary, to_transfer)

        return str(donated_so_far)

    def change_beneficiary(self, beneficiary, beneficiary_name, description):
        self._require_controller()
        logging.debug(f"Beneficiary changing from {self.state.beneficiary} to {beneficiary}")
        self.state.beneficiary = beneficiary
        self.state.beneficiary_name = beneficiary_name
        self.state.description = description

    def reset(self):
        self._require_controller()
        logging.debug(f"Resetting {len(self.state.ledger)} donors")
        self.state.ledger.clear()
        self.state.total_donated = ZERO

    # ============ Views ============

    def get_beneficiary(self):
        return self.state.beneficiary

    def beneficiary_name(self):
        return self.state.beneficiary_name

    def get_description(self):
        return self.state.description

    def number_of_donors(self):
        return len(self.state.ledger)

    def get_donation_for_account(self, account_id):
        total_amount = self.state.ledger.get(account_id, ZERO)
        return Donation(account_id, str(total_amount))

    def get_donations(self, from_index=0, limit=DEFAULT_PAGE_LIMIT):
        return [
            self.get_donation_for_account(account_id)
            for account_id in self.state.ledger.keys(start=from_index, limit=limit)
        ]

    def get_total_donated(self):
        return str(self.state.total_donated)

    def get_top_five_donors(self):
        return top_donors(self.state.ledger, TOP_DONOR_COUNT)

    def get_donation_statistics(self):
        total_donors = len(self.state.ledger)
        total_donated = self.state.total_donated
        if total_donors:
            average = total_donated // total_donors
        else:
            average = ZERO
        return Statistics(total_donors, str(total_donated), str(average))

    # ============ Helpers ============

    def _require_initialized(self):
        if not self.state.initialized:
            raise NotInitialized()

    def _require_controller(self):
        self._require_initialized()
        caller = self.context.current_caller_id()
        if caller != self.state.controller:
            raise Unauthorized(
                f"Only {self.state.controller} may do this, not {caller}"
            )

    def _diagnostic(self, message):
        try:
            self.context.emit_diagnostic(message)
        except Exception as ex:
            logging.debug(f"Couldn't emit diagnostic due to {ex}")
