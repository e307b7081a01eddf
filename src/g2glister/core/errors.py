"""Exceptions raised by the listing pipeline."""


class G2GListerError(Exception):
    """Base class for application errors."""


class NoReadableContentError(G2GListerError):
    """Raised when none of an account's files yielded any text."""

    def __init__(self, account_path: str) -> None:
        self.account_path = account_path
        super().__init__(f"Could not read any files for this account: {account_path}")


class AccountNotFoundError(G2GListerError):
    """Raised when an account id is not in the registry."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")
