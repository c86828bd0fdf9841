from enum import Enum

class TxStatus(Enum):
    SUCCESS = ("success", "✅")
    SKIPPED = ("skipped", "⏭")
    FAILED = ("failed", "❌")

    @property
    def label(self):
        return self.value[0]

    @property
    def emoji(self):
        return self.value[1]
