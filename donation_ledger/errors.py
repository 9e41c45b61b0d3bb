class ContractError(Exception):
    """Base class for failures that abort a contract call without changing state."""


class NotInitialized(ContractError):
    def __init__(self, message="Contract must be initialized first"):
        super().__init__(message)


class AlreadyInitialized(ContractError):
    def __init__(self, message="Contract has already been initialized"):
        super().__init__(message)


class InsufficientForStorage(ContractError):
    pass


class Unauthorized(ContractError):
    pass


class InvalidAmount(ContractError):
    pass


class InvalidArgument(ContractError):
    pass
