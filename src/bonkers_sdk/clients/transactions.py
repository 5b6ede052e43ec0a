"""Contract read and write dispatch for the Bonkers SDK."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from hexbytes import HexBytes
from web3 import AsyncWeb3

from ..exceptions import ContractInteractionFailed
from ..types import ContractCall, ContractInteractionResult, Status
from ..utils import log_failure, serialise_receipt, to_checksum

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .connections import ClientManager


class ContractDispatcher:
    """Execute typed contract calls against the active client set.

    Every call captures its client snapshot when it starts; switching chain
    or account afterwards does not affect it. Nothing is retried.
    """

    def __init__(
        self,
        clients: ClientManager,
        logger: logging.Logger | None = None,
        *,
        receipt_timeout: float | None = None,
    ) -> None:
        self._clients = clients
        self.logger = logger or logging.getLogger(__name__)
        self._receipt_timeout = (
            receipt_timeout if receipt_timeout is not None else clients.config.receipt_timeout
        )

    async def read(self, call: ContractCall) -> Any:
        web3, chain = self._clients.reader()
        try:
            return await self._bind(web3, call).call()
        except ContractInteractionFailed as exc:
            log_failure(self.logger, type(self).__name__, "read", exc)
            raise
        except Exception as exc:
            error = ContractInteractionFailed(
                f"Failed To Read {call.function_name} On {chain.name} Chain | Cause: {exc}",
                function_name=call.function_name,
                cause=exc,
                details={"address": call.address, "args": list(call.args)},
            )
            log_failure(self.logger, type(self).__name__, "read", error)
            raise error from exc

    async def write(self, call: ContractCall) -> ContractInteractionResult:
        signer = self._clients.signer()
        receipts = self._clients.public_client(signer.chain.id)
        tx_params: dict[str, Any] = {"from": signer.address}
        if call.value:
            tx_params["value"] = int(call.value)

        tx_hex: str | None = None
        try:
            function = self._bind(signer.web3, call)
            result = await function.call(tx_params)
            tx_hash = HexBytes(await function.transact(tx_params))
            tx_hex = tx_hash.to_0x_hex()
            self.logger.info(
                "Transaction sent for %s on %s hash=%s",
                call.function_name,
                signer.chain.name,
                tx_hex,
            )

            receipt = await receipts.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self._receipt_timeout
            )
            if receipt is None or receipt.get("status") != 1:
                raise ContractInteractionFailed(
                    f"Transaction {tx_hex} reverted",
                    function_name=call.function_name,
                    details={"tx_hash": tx_hex, "receipt": serialise_receipt(receipt)},
                )
        except ContractInteractionFailed as exc:
            log_failure(self.logger, type(self).__name__, "write", exc)
            raise
        except Exception as exc:
            details: dict[str, Any] = {"address": call.address, "args": list(call.args)}
            if tx_hex is not None:
                details["tx_hash"] = tx_hex
            error = ContractInteractionFailed(
                f"Failed To Execute {call.function_name} On {signer.chain.name} Chain"
                f" | Cause: {exc}",
                function_name=call.function_name,
                cause=exc,
                details=details,
            )
            log_failure(self.logger, type(self).__name__, "write", error)
            raise error from exc

        self.logger.info(
            "Transaction confirmed for %s hash=%s block=%s",
            call.function_name,
            tx_hex,
            receipt.get("blockNumber"),
        )
        return ContractInteractionResult(
            status=Status.SUCCESS,
            result=result,
            tx_hash=tx_hex,
            receipt=serialise_receipt(dict(receipt)),
        )

    def _bind(self, web3: AsyncWeb3, call: ContractCall) -> Any:
        contract = web3.eth.contract(address=to_checksum(call.address), abi=list(call.abi))
        try:
            function = getattr(contract.functions, call.function_name)
        except AttributeError as exc:
            raise ContractInteractionFailed(
                f"Function {call.function_name} Not Found In The Contract Abi",
                function_name=call.function_name,
                cause=exc,
            ) from exc
        return function(*call.args)

