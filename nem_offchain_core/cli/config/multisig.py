from dataclasses import dataclass


@dataclass
class MultisigConfig:
    """Configuration of the multisig account transactions are issued for."""

    account_public_key: str

    @classmethod
    def from_dict(cls, data: dict) -> "MultisigConfig":
        if "account_public_key" not in data:
            raise ValueError("Multisig configuration requires account_public_key")
        return cls(account_public_key=data["account_public_key"])
