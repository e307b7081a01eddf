"""In-memory registry of account folders and their lifecycle status."""

import logging
from pathlib import PurePath
from typing import Callable, Optional

from g2glister.core.errors import AccountNotFoundError
from g2glister.core.models import (
    Account,
    AccountFolder,
    AccountStatus,
    AutofillOutcome,
    ListingForm,
    LoadAccountsResult,
)
from g2glister.parser.sources import list_account_files, list_account_folders

logger = logging.getLogger(__name__)

FolderLister = Callable[[str], list[AccountFolder]]
FileLister = Callable[[str], list[str]]

# (account_path, file_names) -> listing
AutofillFunc = Callable[[str, list[str]], ListingForm]


class AccountRegistry:
    """Holds the accounts discovered in the selected base folder."""

    def __init__(
        self,
        lister: FolderLister = list_account_folders,
        file_lister: FileLister = list_account_files,
        last_selected_path: str = "",
    ) -> None:
        self._lister = lister
        self._file_lister = file_lister
        self._accounts: list[Account] = []
        self._next_id = 1
        self.base_path = ""
        self.last_selected_path = last_selected_path

    def load_folders(self, base_path: str) -> LoadAccountsResult:
        """
        Replace the registry contents with the account folders of base_path.

        Never raises; listing failures are reported in the result.
        """
        self.last_selected_path = base_path

        try:
            folders = self._lister(base_path)
        except Exception as e:
            logger.error(f"Failed to load account folders from {base_path}: {e}")
            return LoadAccountsResult(success=False, message=f"Error: {e}")

        self.base_path = base_path
        self._accounts = []
        for folder in folders:
            self._accounts.append(Account(id=self._next_id, name=folder.name, path=folder.path))
            self._next_id += 1

        message = f'Loaded {len(self._accounts)} accounts from folder "{self.base_folder_name}"'
        logger.info(message)
        return LoadAccountsResult(success=True, message=message, accounts=self.get_accounts())

    def _require(self, account_id: int) -> Account:
        account = self.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def get_account_files(self, account_id: int) -> list[str]:
        """
        Get the file names of an account, listing the folder on first use.

        Raises:
            AccountNotFoundError: If the id is unknown
        """
        account = self._require(account_id)
        if account.files is None:
            account.files = self._file_lister(account.path)
        return list(account.files)

    def get_accounts(self) -> list[Account]:
        return list(self._accounts)

    def get_account(self, account_id: int) -> Optional[Account]:
        for account in self._accounts:
            if account.id == account_id:
                return account
        return None

    def update_status(self, account_id: int, status: AccountStatus) -> bool:
        """Set an account's status. Returns False if the id is unknown."""
        account = self.get_account(account_id)
        if account is None:
            return False
        account.status = status
        return True

    def remove_account(self, account_id: int) -> bool:
        account = self.get_account(account_id)
        if account is None:
            return False
        self._accounts.remove(account)
        return True

    def clear(self) -> None:
        """Forget all accounts and the base folder."""
        self._accounts = []
        self.base_path = ""
        self._next_id = 1

    def clear_last_path(self) -> None:
        self.last_selected_path = ""

    @property
    def base_folder_name(self) -> str:
        if not self.base_path:
            return ""
        # Accept both separators regardless of platform
        return PurePath(self.base_path.replace("\\", "/")).name or self.base_path

    @property
    def count(self) -> int:
        return len(self._accounts)

    def autofill_account(self, account_id: int, autofill: AutofillFunc) -> AutofillOutcome:
        """
        Generate the listing of one account, tracking its status.

        Failures are captured in the outcome and mark the account as errored.
        """
        account = self._require(account_id)
        account.status = AccountStatus.PROCESSING

        try:
            files = self.get_account_files(account_id)
            listing = autofill(account.path, files)
        except Exception as e:
            logger.error(f"Autofill failed for {account.name}: {e}")
            account.status = AccountStatus.ERROR
            return AutofillOutcome(account.id, account.name, account.status, error=str(e))

        account.status = AccountStatus.LISTED
        return AutofillOutcome(account.id, account.name, account.status, listing=listing)

    def autofill_all(self, autofill: AutofillFunc) -> list[AutofillOutcome]:
        """Autofill every account in order; one failure never stops the rest."""
        outcomes = [self.autofill_account(account.id, autofill) for account in self.get_accounts()]
        failed = sum(1 for outcome in outcomes if not outcome.ok)
        logger.info(f"Batch autofill done: {len(outcomes) - failed} listed, {failed} failed")
        return outcomes
