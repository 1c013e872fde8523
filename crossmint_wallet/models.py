"""Result and record models for Crossmint wallet operations."""

from typing import Any, Literal

from pydantic import BaseModel, Field

LINKED_USER_PREFIXES = ("email:", "id:")
API_KEY_PREFIX = "sk_"
MPC_WALLET_TYPE = "solana-mpc-wallet"


class WalletRecord(BaseModel):
    """A wallet as represented by the remote service.

    Unknown fields are kept so a record can be dumped back unchanged.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    wallet_id: Any = Field(default=None, alias="walletId")
    address: Any = None


class WalletResult(BaseModel):
    """Successful create or get operation."""

    model_config = {"frozen": True, "populate_by_name": True}

    status: Literal["success"] = "success"
    wallet_id: Any = Field(default=None, alias="walletId")
    address: Any = None

    @property
    def is_success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase result shape."""
        return self.model_dump(by_alias=True)


class WalletListResult(BaseModel):
    """Successful list operation.

    ``wallets`` holds the service's entries verbatim and in order,
    whatever their shape.
    """

    model_config = {"frozen": True}

    status: Literal["success"] = "success"
    wallets: list[Any] = Field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return True

    @property
    def records(self) -> list[WalletRecord]:
        """Object entries parsed as WalletRecord models; other entries are skipped."""
        return [
            WalletRecord.model_validate(wallet)
            for wallet in self.wallets
            if isinstance(wallet, dict)
        ]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


class WalletError(BaseModel):
    """Failed operation.

    Invariants:
        - message is always set
        - code is the failure's own code or the operation fallback
    """

    model_config = {"frozen": True}

    status: Literal["error"] = "error"
    message: str
    code: str
    status_code: int | None = Field(
        default=None,
        description="HTTP status when the service rejected the request",
        exclude=True,
    )

    @property
    def is_success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


WalletOperationResult = WalletResult | WalletListResult | WalletError
