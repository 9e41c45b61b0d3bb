YOCTO_PER_NEAR = 10**24
NEAR_NOMINATION_EXP = 24

# Minimum first deposit: covers the storage of one new ledger entry (0.001 NEAR).
STORAGE_COST = 10**21

DONATIONS_MAP_KEY = "map-uid-1"
DEFAULT_PAGE_LIMIT = 50
TOP_DONOR_COUNT = 5
LATEST_DONATION_COUNT = 10

DEFAULT_RPC_URL = "https://rpc.testnet.near.org"
DEFAULT_STATE_FILE = "donation_ledger.ini"
