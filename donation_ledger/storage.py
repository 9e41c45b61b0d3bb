import logging

from PyQt5.QtCore import QSettings

from .contract import CampaignState
from .ledger import DonorLedger
from .settings import DONATIONS_MAP_KEY


class SettingsStore:
    """Keeps a `CampaignState` in an INI file through `QSettings`.

    Amounts are written as decimal strings so that values wider than 64 bits
    survive. The donor map is a settings array under a fixed key, which
    preserves insertion order between runs.
    """

    def __init__(self, path):
        self.path = str(path)
        self.settings = QSettings(self.path, QSettings.IniFormat)

    def load(self):
        logging.debug(f"Loading campaign state from {self.path}")
        self.settings.sync()
        settings = self.settings

        entries = []
        size = settings.beginReadArray(DONATIONS_MAP_KEY)
        for index in range(size):
            settings.setArrayIndex(index)
            entries.append(
                (
                    str(settings.value("account_id", "")),
                    str(settings.value("total_amount", "0")),
                )
            )
        settings.endArray()

        return CampaignState(
            beneficiary=str(settings.value("campaign/beneficiary", "")),
            beneficiary_name=str(settings.value("campaign/beneficiary_name", "")),
            description=str(settings.value("campaign/description", "")),
            controller=str(settings.value("campaign/controller", "")),
            ledger=DonorLedger(entries),
            total_donated=str(settings.value("campaign/total_donated", "0")),
            initialized=str(settings.value("campaign/initialized", "0")) == "1",
        )

    def save(self, state):
        logging.debug(f"Saving {state} to {self.path}")
        settings = self.settings

        settings.setValue("campaign/beneficiary", state.beneficiary)
        settings.setValue("campaign/beneficiary_name", state.beneficiary_name)
        settings.setValue("campaign/description", state.description)
        settings.setValue("campaign/controller", state.controller)
        settings.setValue("campaign/total_donated", str(state.total_donated))
        settings.setValue("campaign/initialized", "1" if state.initialized else "0")

        settings.remove(DONATIONS_MAP_KEY)
        settings.beginWriteArray(DONATIONS_MAP_KEY, len(state.ledger))
        for index, (account_id, amount) in enumerate(state.ledger.items()):
            settings.setArrayIndex(index)
            settings.setValue("account_id", account_id)
            settings.setValue("total_amount", str(amount))
        settings.endArray()

        settings.sync()
        if settings.status() != QSettings.NoError:
            raise RuntimeError(
                f"Couldn't write campaign state to {self.path}; got status {settings.status()}"
            )
