from .amount import format_near


def format_donation(donation, total=None):
    message = f"Thank you {donation.account_id} for donating {donation.total_amount}!"
    if total is not None:
        message += f" You donated a total of {total}"

    return message


def format_donor(donation, frac_digits=5):
    if donation.total_amount is None:
        amount = "an unknown amount"
    elif int(donation.total_amount):
        amount = f"{format_near(donation.total_amount, frac_digits)} NEAR"
    else:
        amount = "nothing"

    return f"{donation.account_id} donated {amount}"
