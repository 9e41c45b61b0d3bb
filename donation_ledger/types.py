from collections import namedtuple


Donation = namedtuple("Donation", ["account_id", "total_amount"])
Statistics = namedtuple(
    "Statistics", ["total_donors", "total_donated", "average_donation"]
)
Transfer = namedtuple("Transfer", ["receiver_id", "amount"])

