"""Escrow contract facade.

Call methods:
  - getOwnerFund, getBeneficiariesList, getBeneficiaryFund
Send methods:
  - collateral, collateralRedeem, withdraw, payment, paymentSingleBeneficiary,
    paymentWithdraw, paymentTransfer, paymentRefund
"""

from __future__ import annotations

from typing import Any

from dataswap_sync.contracts._base import ContractFacade, as_str_list, decoded_result
from dataswap_sync.messages.decoder import no_correlation
from dataswap_sync.models.enums import EscrowType
from dataswap_sync.models.escrow import Fund
from dataswap_sync.models.transaction import TransactionOptions
from dataswap_sync.result import Result

_SEND_METHODS = (
    "collateral",
    "collateralRedeem",
    "withdraw",
    "payment",
    "paymentSingleBeneficiary",
    "paymentWithdraw",
    "paymentTransfer",
    "paymentRefund",
)


def _decode_fund(data: Any, *_args: Any, **_kwargs: Any) -> Fund:
    return Fund.model_validate(data)


class EscrowContract(ContractFacade):
    """Escrow accounts: collateral, payments and their withdrawals.

    Every operation addresses one account by ``(type, owner, id)`` where
    ``id`` is the business id (dataset or matching) the funds belong to.
    """

    CONTRACT_NAME = "Escrow"
    CALL_METHODS = ("getOwnerFund", "getBeneficiariesList", "getBeneficiaryFund")
    SEND_METHODS = _SEND_METHODS
    # Escrow ids are typed by EscrowType, not by a fixed dataset/matching
    # parameter, so no correlation fields are lifted.
    CORRELATIONS = {name: no_correlation for name in _SEND_METHODS}

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    @decoded_result(_decode_fund)
    async def get_owner_fund(self, type: EscrowType, owner: str, id: int) -> Result[Any]:  # noqa: A002
        """Balances of the owner's escrow account."""
        return await self._invoke("getOwnerFund", int(type), owner, id)

    @decoded_result(as_str_list)
    async def get_beneficiaries_list(self, type: EscrowType, owner: str, id: int) -> Result[Any]:  # noqa: A002
        return await self._invoke("getBeneficiariesList", int(type), owner, id)

    @decoded_result(_decode_fund)
    async def get_beneficiary_fund(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        beneficiary: str,
    ) -> Result[Any]:
        """Balances credited to *beneficiary* from the owner's payment account."""
        return await self._invoke("getBeneficiaryFund", int(type), owner, id, beneficiary)

    # ------------------------------------------------------------------
    # Sends
    # ------------------------------------------------------------------

    async def collateral(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        amount: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Record the sent amount as collateral credit for later withdrawal."""
        return await self._invoke("collateral", int(type), owner, id, amount, options=options)

    async def collateral_redeem(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Move expired collateral back to the available balance."""
        return await self._invoke("collateralRedeem", int(type), owner, id, options=options)

    async def withdraw(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke("withdraw", int(type), owner, id, options=options)

    async def payment(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        amount: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke("payment", int(type), owner, id, amount, options=options)

    async def payment_single_beneficiary(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        beneficiary: str,
        amount: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke(
            "paymentSingleBeneficiary", int(type), owner, id, beneficiary, amount, options=options
        )

    async def payment_withdraw(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        beneficiary: str,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        return await self._invoke("paymentWithdraw", int(type), owner, id, beneficiary, options=options)

    async def payment_transfer(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        amount: int,
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Transfer from payment to the available balance (data prepare fees)."""
        return await self._invoke("paymentTransfer", int(type), owner, id, amount, options=options)

    async def payment_refund(
        self,
        type: EscrowType,  # noqa: A002
        owner: str,
        id: int,  # noqa: A002
        *,
        options: TransactionOptions | dict[str, Any],
    ) -> Result[None]:
        """Refund an expired payment to the available balance."""
        return await self._invoke("paymentRefund", int(type), owner, id, options=options)
