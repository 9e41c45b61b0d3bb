import argparse
import logging
import sys

import requests

from .amount import Amount, format_near, parse_near
from .common import format_donor
from .context import LocalContext
from .contract import DonationContract
from .errors import ContractError
from .rpc import ViewClient
from .settings import DEFAULT_PAGE_LIMIT, DEFAULT_RPC_URL, DEFAULT_STATE_FILE
from .storage import SettingsStore


MUTATING_COMMANDS = {"init", "donate", "change-beneficiary", "reset"}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="donation-ledger",
        description="Record donations and forward them to a beneficiary.",
    )
    parser.add_argument(
        "--state", default=DEFAULT_STATE_FILE, help="INI file holding the ledger"
    )
    parser.add_argument("--caller", default="", help="account making the call")
    commands = parser.add_subparsers(dest="command", required=True)

    for name in ["init", "change-beneficiary"]:
        command = commands.add_parser(name)
        command.add_argument("beneficiary")
        command.add_argument("beneficiary_name")
        command.add_argument("description")

    donate = commands.add_parser("donate")
    donate.add_argument("amount", help="amount in NEAR")
    donate.add_argument(
        "--yocto", action="store_true", help="amount is given in yoctoNEAR"
    )

    commands.add_parser("reset")
    commands.add_parser("beneficiary")
    commands.add_parser("donors")
    commands.add_parser("total")
    commands.add_parser("top")
    commands.add_parser("stats")

    donation = commands.add_parser("donation")
    donation.add_argument("account_id")

    donations = commands.add_parser("donations")
    donations.add_argument("--from-index", type=int, default=0)
    donations.add_argument("--limit", type=int, default=DEFAULT_PAGE_LIMIT)

    remote = commands.add_parser("remote", help="query a deployed contract")
    remote.add_argument("contract_id")
    remote.add_argument("view", choices=["summary", "latest", "top"])
    remote.add_argument("--url", default=DEFAULT_RPC_URL)

    return parser


def run_local(args):
    store = SettingsStore(args.state)
    context = LocalContext(caller_id=args.caller)
    contract = DonationContract(context, store.load())
    command = args.command

    if command == "init":
        contract.initialize(args.beneficiary, args.beneficiary_name, args.description)
    elif command == "change-beneficiary":
        contract.change_beneficiary(
            args.beneficiary, args.beneficiary_name, args.description
        )
    elif command == "donate":
        attached = Amount(args.amount) if args.yocto else parse_near(args.amount)
        with context.call(args.caller, attached):
            total = contract.donate()
        print(f"You have donated {format_near(total)} NEAR in total")
    elif command == "reset":
        contract.reset()
    elif command == "beneficiary":
        print(f"{contract.beneficiary_name()} ({contract.get_beneficiary()})")
        print(contract.get_description())
    elif command == "donors":
        print(contract.number_of_donors())
    elif command == "donation":
        print(format_donor(contract.get_donation_for_account(args.account_id)))
    elif command == "donations":
        for donation in contract.get_donations(args.from_index, args.limit):
            print(format_donor(donation))
    elif command == "total":
        print(f"{format_near(contract.get_total_donated())} NEAR")
    elif command == "top":
        for donation in contract.get_top_five_donors():
            print(format_donor(donation))
    elif command == "stats":
        statistics = contract.get_donation_statistics()
        print(f"Donors: {statistics.total_donors}")
        print(f"Total donated: {format_near(statistics.total_donated)} NEAR")
        print(f"Average donation: {format_near(statistics.average_donation)} NEAR")

    for transfer in context.transfers:
        print(
            f"Transfer of {format_near(transfer.amount)} NEAR "
            f"to {transfer.receiver_id} requested"
        )

    if command in MUTATING_COMMANDS:
        store.save(contract.state)


def run_remote(args):
    client = ViewClient(args.contract_id, url=args.url)
    if args.view == "summary":
        print(f"{client.beneficiary_name()} ({client.get_beneficiary()})")
        print(client.get_description())
        print(f"{client.number_of_donors()} donors")
        print(f"{format_near(client.get_total_donated())} NEAR raised")
    elif args.view == "latest":
        for donation in client.latest_donations():
            print(f"{donation.account_id}: {donation.total_amount} NEAR")
    elif args.view == "top":
        for donation in client.top_donors():
            print(f"{donation.account_id}: {donation.total_amount} NEAR")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] == "debug":
        logging.basicConfig(level=logging.DEBUG)
        argv = argv[1:]

    args = build_parser().parse_args(argv)
    logging.debug(f"Running {args.command}")

    try:
        if args.command == "remote":
            run_remote(args)
        else:
            run_local(args)
    except (ContractError, RuntimeError, requests.exceptions.RequestException) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    return 0
