import base64
import json
import logging

import requests

from .amount import format_near
from .settings import DEFAULT_PAGE_LIMIT, DEFAULT_RPC_URL, LATEST_DONATION_COUNT
from .types import Donation, Statistics


def query_rpc(url, method, params):
    payload = {"jsonrpc": "2.0", "id": "donation_ledger", "method": method, "params": params}
    response = requests.post(url, json=payload)

    if not 200 <= response.status_code < 300:
        raise RuntimeError(f"{response.status_code} from RPC server")

    result = response.json()
    if "error" in result:
        raise RuntimeError(f"RPC error: {result['error']}")

    return result["result"]


class ViewClient:
    """Read-only calls against a deployed donation contract."""

    def __init__(self, contract_id, url=DEFAULT_RPC_URL):
        self.contract_id = contract_id
        self.url = url

    def view(self, method, **args):
        logging.debug(f"Calling view method {method} on {self.contract_id} with {args}")
        encoded_args = base64.b64encode(json.dumps(args).encode()).decode()
        result = query_rpc(
            self.url,
            "query",
            {
                "request_type": "call_function",
                "finality": "optimistic",
                "account_id": self.contract_id,
                "method_name": method,
                "args_base64": encoded_args,
            },
        )
        if "error" in result:
            raise RuntimeError(f"{method} failed: {result['error']}")

        return json.loads(bytes(result["result"]).decode())

    def get_beneficiary(self):
        return self.view("get_beneficiary")

    def beneficiary_name(self):
        return self.view("beneficiary_name")

    def get_description(self):
        return self.view("get_description")

    def number_of_donors(self):
        return self.view("number_of_donors")

    def get_total_donated(self):
        return self.view("get_total_donated")

    def get_donation_for_account(self, account_id):
        raw = self.view("get_donation_for_account", account_id=account_id)
        return Donation(raw["account_id"], raw["total_amount"])

    def get_donations(self, from_index=0, limit=DEFAULT_PAGE_LIMIT):
        raw_donations = self.view("get_donations", from_index=from_index, limit=limit)
        return [Donation(raw["account_id"], raw["total_amount"]) for raw in raw_donations]

    def get_top_five_donors(self):
        raw_donations = self.view("get_top_five_donors")
        return [Donation(raw["account_id"], raw["total_amount"]) for raw in raw_donations]

    def get_donation_statistics(self):
        raw = self.view("get_donation_statistics")
        return Statistics(
            raw["total_donors"], raw["total_donated"], raw["average_donation"]
        )

    def latest_donations(self, count=LATEST_DONATION_COUNT):
        """The last `count` donors to join, newest first, with amounts in NEAR."""

        number_of_donors = self.number_of_donors()
        start = max(0, number_of_donors - count)
        donations = self.get_donations(from_index=start, limit=count)
        return [
            Donation(donation.account_id, format_near(donation.total_amount))
            for donation in reversed(donations)
        ]

    def top_donors(self):
        return [
            Donation(donation.account_id, format_near(donation.total_amount))
            for donation in self.get_top_five_donors()
        ]
