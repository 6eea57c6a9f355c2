"""Wallet methods: addresses, balances, assets, permissions, streams, filters, sends."""

from __future__ import annotations

from typing import Any

import result_models as m
from entities import (
    MAX_END_BLOCK,
    AssetEntity,
    PublishEntity,
    PublishMultiEntity,
    StreamEntity,
    StreamFilterEntity,
    TxFilterEntity,
    UpgradeEntity,
)
from param_binder import ALL, MAX_COUNT, Opt, bind_params
from result_decoder import result_type_for
from rpc_dispatch import RpcClient, rpc_method
from rpc_envelope import RpcResponse

Addresses = str | list[str]
AssetParams = AssetEntity | str | dict[str, Any]


def _asset_params(asset: AssetParams) -> str | dict[str, Any]:
    if isinstance(asset, AssetEntity):
        return asset.to_params()
    return asset


def _addresses(value: Addresses) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(value)
    return value


class WalletRpcClient(RpcClient):
    category = "wallet"

    # --- keys and addresses ---------------------------------------------

    @rpc_method("addmultisigaddress")
    def add_multi_sig_address(
        self,
        n_required: int,
        keys: list[str],
        account: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(n_required, list(keys), Opt(account))
        return self._call("addmultisigaddress", params, str, chain_name=chain_name, id=id)

    @rpc_method("dumpprivkey")
    def dump_priv_key(self, address: str, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("dumpprivkey", [address], str, chain_name=chain_name, id=id)

    @rpc_method("getaddresses")
    def get_addresses(
        self, verbose: bool = False, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[Any]:
        result_type = result_type_for("getaddresses", verbose)
        params = [verbose] if verbose else []
        return self._call("getaddresses", params, result_type, chain_name=chain_name, id=id)

    @rpc_method("getnewaddress")
    def get_new_address(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("getnewaddress", [], str, chain_name=chain_name, id=id)

    @rpc_method("getrawchangeaddress")
    def get_raw_change_address(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("getrawchangeaddress", [], str, chain_name=chain_name, id=id)

    @rpc_method("importaddress")
    def import_address(
        self,
        addresses: Addresses,
        label: str | None = None,
        rescan: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        params = bind_params(addresses, Opt(label, ""), Opt(rescan))
        return self._call("importaddress", params, None, chain_name=chain_name, id=id)

    @rpc_method("importprivkey")
    def import_priv_key(
        self,
        priv_keys: str | list[str],
        label: str | None = None,
        rescan: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        params = bind_params(priv_keys, Opt(label, ""), Opt(rescan))
        return self._call("importprivkey", params, None, chain_name=chain_name, id=id)

    @rpc_method("keypoolrefill")
    def key_pool_refill(
        self, new_size: int | None = None, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        return self._call("keypoolrefill", bind_params(Opt(new_size)), None, chain_name=chain_name, id=id)

    @rpc_method("listaddresses")
    def list_addresses(
        self,
        addresses: Addresses | None = None,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.ListAddressesResult]]:
        params = bind_params(Opt(addresses, ALL), Opt(verbose, False), Opt(count, MAX_COUNT), Opt(start))
        return self._call("listaddresses", params, list[m.ListAddressesResult], chain_name=chain_name, id=id)

    @rpc_method("listaddressgroupings")
    def list_address_groupings(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[Any]]:
        return self._call("listaddressgroupings", [], list[Any], chain_name=chain_name, id=id)

    @rpc_method("signmessage")
    def sign_message(
        self,
        address_or_priv_key: str,
        message: str,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self._call("signmessage", [address_or_priv_key, message], str, chain_name=chain_name, id=id)

    # --- wallet file and encryption -------------------------------------

    @rpc_method("backupwallet")
    def backup_wallet(
        self, destination: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        return self._call("backupwallet", [destination], None, chain_name=chain_name, id=id)

    @rpc_method("dumpwallet")
    def dump_wallet(self, filename: str, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[None]:
        return self._call("dumpwallet", [filename], None, chain_name=chain_name, id=id)

    @rpc_method("encryptwallet")
    def encrypt_wallet(
        self, passphrase: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("encryptwallet", [passphrase], str, chain_name=chain_name, id=id)

    @rpc_method("importwallet")
    def import_wallet(
        self,
        filename: str,
        rescan: bool | int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        return self._call("importwallet", bind_params(filename, Opt(rescan)), None, chain_name=chain_name, id=id)

    @rpc_method("getwalletinfo")
    def get_wallet_info(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[m.GetWalletInfoResult]:
        return self._call("getwalletinfo", [], m.GetWalletInfoResult, chain_name=chain_name, id=id)

    @rpc_method("walletlock")
    def wallet_lock(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[None]:
        return self._call("walletlock", [], None, chain_name=chain_name, id=id)

    @rpc_method("walletpassphrase")
    def wallet_passphrase(
        self, passphrase: str, timeout: int, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        return self._call("walletpassphrase", [passphrase, timeout], None, chain_name=chain_name, id=id)

    @rpc_method("walletpassphrasechange")
    def wallet_passphrase_change(
        self,
        old_passphrase: str,
        new_passphrase: str,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        params = [old_passphrase, new_passphrase]
        return self._call("walletpassphrasechange", params, None, chain_name=chain_name, id=id)

    # --- accounts (deprecated upstream, still served) -------------------

    @rpc_method("getaccount")
    def get_account(self, address: str, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[str]:
        return self._call("getaccount", [address], str, chain_name=chain_name, id=id)

    @rpc_method("getaccountaddress")
    def get_account_address(
        self, account: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("getaccountaddress", [account], str, chain_name=chain_name, id=id)

    @rpc_method("getaddressesbyaccount")
    def get_addresses_by_account(
        self, account: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[str]]:
        return self._call("getaddressesbyaccount", [account], list[str], chain_name=chain_name, id=id)

    @rpc_method("getreceivedbyaccount")
    def get_received_by_account(
        self,
        account: str,
        min_conf: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[float]:
        params = bind_params(account, Opt(min_conf))
        return self._call("getreceivedbyaccount", params, float, chain_name=chain_name, id=id)

    @rpc_method("listaccounts")
    def list_accounts(
        self,
        min_conf: int | None = None,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, float]]:
        params = bind_params(Opt(min_conf, 1), Opt(include_watch_only))
        return self._call("listaccounts", params, dict[str, float], chain_name=chain_name, id=id)

    @rpc_method("listreceivedbyaccount")
    def list_received_by_account(
        self,
        min_conf: int | None = None,
        include_empty: bool | None = None,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.ReceivedByResult]]:
        params = bind_params(Opt(min_conf, 1), Opt(include_empty, False), Opt(include_watch_only))
        return self._call("listreceivedbyaccount", params, list[m.ReceivedByResult], chain_name=chain_name, id=id)

    @rpc_method("move")
    def move(
        self,
        from_account: str,
        to_account: str,
        amount: float,
        min_conf: int | None = None,
        comment: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[bool]:
        params = bind_params(from_account, to_account, amount, Opt(min_conf, 1), Opt(comment))
        return self._call("move", params, bool, chain_name=chain_name, id=id)

    @rpc_method("sendfromaccount")
    def send_from_account(
        self,
        from_account: str,
        to_address: str,
        amount: float,
        min_conf: int | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(from_account, to_address, amount, Opt(min_conf, 1), Opt(comment, ""), Opt(comment_to))
        return self._call("sendfromaccount", params, str, chain_name=chain_name, id=id)

    @rpc_method("sendmany")
    def send_many(
        self,
        from_account: str,
        amounts: dict[str, Any],
        min_conf: int | None = None,
        comment: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(from_account, amounts, Opt(min_conf, 1), Opt(comment))
        return self._call("sendmany", params, str, chain_name=chain_name, id=id)

    @rpc_method("setaccount")
    def set_account(
        self, address: str, account: str, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[None]:
        return self._call("setaccount", [address, account], None, chain_name=chain_name, id=id)

    # --- balances and transactions --------------------------------------

    @rpc_method("getaddressbalances")
    def get_address_balances(
        self,
        address: str,
        min_conf: int | None = None,
        include_locked: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.AssetBalance]]:
        params = bind_params(address, Opt(min_conf, 1), Opt(include_locked))
        return self._call("getaddressbalances", params, list[m.AssetBalance], chain_name=chain_name, id=id)

    @rpc_method("getaddresstransaction")
    def get_address_transaction(
        self,
        address: str,
        txid: str,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.WalletTransactionResult]:
        params = bind_params(address, txid, Opt(verbose))
        return self._call("getaddresstransaction", params, m.WalletTransactionResult, chain_name=chain_name, id=id)

    @rpc_method("getassetbalances")
    def get_asset_balances(
        self,
        account: str | None = None,
        min_conf: int | None = None,
        include_watch_only: bool | None = None,
        include_locked: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.AssetBalance]]:
        params = bind_params(Opt(account, ""), Opt(min_conf, 1), Opt(include_watch_only, False), Opt(include_locked))
        return self._call("getassetbalances", params, list[m.AssetBalance], chain_name=chain_name, id=id)

    @rpc_method("getassettransaction")
    def get_asset_transaction(
        self,
        asset_identifier: str,
        txid: str,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, Any]]:
        params = bind_params(asset_identifier, txid, Opt(verbose))
        return self._call("getassettransaction", params, dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("getbalance")
    def get_balance(
        self,
        account: str | None = None,
        min_conf: int | None = None,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[float]:
        params = bind_params(Opt(account, ""), Opt(min_conf, 1), Opt(include_watch_only))
        return self._call("getbalance", params, float, chain_name=chain_name, id=id)

    @rpc_method("getmultibalances")
    def get_multi_balances(
        self,
        addresses: Addresses | None = None,
        assets: list[str] | None = None,
        min_conf: int | None = None,
        include_watch_only: bool | None = None,
        include_locked: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, list[m.AssetBalance]]]:
        params = bind_params(
            Opt(addresses, ALL),
            Opt(assets, []),
            Opt(min_conf, 1),
            Opt(include_watch_only, False),
            Opt(include_locked),
        )
        return self._call("getmultibalances", params, dict[str, list[m.AssetBalance]], chain_name=chain_name, id=id)

    @rpc_method("getreceivedbyaddress")
    def get_received_by_address(
        self,
        address: str,
        min_conf: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[float]:
        params = bind_params(address, Opt(min_conf))
        return self._call("getreceivedbyaddress", params, float, chain_name=chain_name, id=id)

    @rpc_method("gettotalbalances")
    def get_total_balances(
        self,
        min_conf: int | None = None,
        include_watch_only: bool | None = None,
        include_locked: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.AssetBalance]]:
        params = bind_params(Opt(min_conf, 1), Opt(include_watch_only, False), Opt(include_locked))
        return self._call("gettotalbalances", params, list[m.AssetBalance], chain_name=chain_name, id=id)

    @rpc_method("gettransaction")
    def get_transaction(
        self,
        txid: str,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.GetTransactionResult]:
        params = bind_params(txid, Opt(include_watch_only))
        return self._call("gettransaction", params, m.GetTransactionResult, chain_name=chain_name, id=id)

    @rpc_method("gettxoutdata")
    def get_tx_out_data(
        self,
        txid: str,
        vout: int,
        count_bytes: int | None = None,
        start_byte: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[Any]:
        params = bind_params(txid, vout, Opt(count_bytes, MAX_COUNT), Opt(start_byte))
        return self._call("gettxoutdata", params, Any, chain_name=chain_name, id=id)

    @rpc_method("getunconfirmedbalance")
    def get_unconfirmed_balance(self, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[float]:
        return self._call("getunconfirmedbalance", [], float, chain_name=chain_name, id=id)

    @rpc_method("getwallettransaction")
    def get_wallet_transaction(
        self,
        txid: str,
        include_watch_only: bool | None = None,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.WalletTransactionResult]:
        params = bind_params(txid, Opt(include_watch_only, False), Opt(verbose))
        return self._call("getwallettransaction", params, m.WalletTransactionResult, chain_name=chain_name, id=id)

    @rpc_method("listaddresstransactions")
    def list_address_transactions(
        self,
        address: str,
        count: int | None = None,
        skip: int | None = None,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.WalletTransactionResult]]:
        params = bind_params(address, Opt(count, 10), Opt(skip, 0), Opt(verbose))
        return self._call(
            "listaddresstransactions", params, list[m.WalletTransactionResult], chain_name=chain_name, id=id
        )

    @rpc_method("listassettransactions")
    def list_asset_transactions(
        self,
        asset_identifier: str,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        local_ordering: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[dict[str, Any]]]:
        params = bind_params(asset_identifier, Opt(verbose, False), Opt(count, 10), Opt(start), Opt(local_ordering))
        return self._call("listassettransactions", params, list[dict[str, Any]], chain_name=chain_name, id=id)

    @rpc_method("listreceivedbyaddress")
    def list_received_by_address(
        self,
        min_conf: int | None = None,
        include_empty: bool | None = None,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.ReceivedByResult]]:
        params = bind_params(Opt(min_conf, 1), Opt(include_empty, False), Opt(include_watch_only))
        return self._call("listreceivedbyaddress", params, list[m.ReceivedByResult], chain_name=chain_name, id=id)

    @rpc_method("listsinceblock")
    def list_since_block(
        self,
        block_hash: str | None = None,
        target_confirmations: int | None = None,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.ListSinceBlockResult]:
        params = bind_params(Opt(block_hash, ""), Opt(target_confirmations, 1), Opt(include_watch_only))
        return self._call("listsinceblock", params, m.ListSinceBlockResult, chain_name=chain_name, id=id)

    @rpc_method("listtransactions")
    def list_transactions(
        self,
        account: str | None = None,
        count: int | None = None,
        skip: int | None = None,
        include_watch_only: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[dict[str, Any]]]:
        params = bind_params(Opt(account, ""), Opt(count, 10), Opt(skip, 0), Opt(include_watch_only))
        return self._call("listtransactions", params, list[dict[str, Any]], chain_name=chain_name, id=id)

    @rpc_method("listwallettransactions")
    def list_wallet_transactions(
        self,
        count: int | None = None,
        skip: int | None = None,
        include_watch_only: bool | None = None,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.WalletTransactionResult]]:
        params = bind_params(Opt(count, 10), Opt(skip, 0), Opt(include_watch_only, False), Opt(verbose))
        return self._call(
            "listwallettransactions", params, list[m.WalletTransactionResult], chain_name=chain_name, id=id
        )

    @rpc_method("resendwallettransactions")
    def resend_wallet_transactions(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[str]]:
        return self._call("resendwallettransactions", [], list[str], chain_name=chain_name, id=id)

    @rpc_method("settxfee")
    def set_tx_fee(self, amount: float, *, chain_name: str | None = None, id: str | None = None) -> RpcResponse[bool]:
        return self._call("settxfee", [amount], bool, chain_name=chain_name, id=id)

    # --- unspent outputs ------------------------------------------------

    @rpc_method("combineunspent")
    def combine_unspent(
        self,
        addresses: Addresses | None = None,
        min_conf: int | None = None,
        max_combines: int | None = None,
        min_inputs: int | None = None,
        max_inputs: int | None = None,
        max_time: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[str]]:
        params = bind_params(
            Opt(addresses, ALL),
            Opt(min_conf, 1),
            Opt(max_combines, 100),
            Opt(min_inputs, 2),
            Opt(max_inputs, 100),
            Opt(max_time),
        )
        return self._call("combineunspent", params, list[str], chain_name=chain_name, id=id)

    @rpc_method("listlockunspent")
    def list_lock_unspent(
        self, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[list[m.LockedOutput]]:
        return self._call("listlockunspent", [], list[m.LockedOutput], chain_name=chain_name, id=id)

    @rpc_method("listunspent")
    def list_unspent(
        self,
        min_conf: int | None = None,
        max_conf: int | None = None,
        addresses: list[str] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.UnspentOutput]]:
        params = bind_params(Opt(min_conf, 1), Opt(max_conf, 9999999), Opt(addresses))
        return self._call("listunspent", params, list[m.UnspentOutput], chain_name=chain_name, id=id)

    @rpc_method("lockunspent")
    def lock_unspent(
        self,
        unlock: bool,
        outputs: list[dict[str, Any]] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[bool]:
        return self._call("lockunspent", bind_params(unlock, Opt(outputs)), bool, chain_name=chain_name, id=id)

    @rpc_method("preparelockunspent")
    def prepare_lock_unspent(
        self,
        asset_quantities: dict[str, Any],
        lock: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.LockedOutput]:
        params = bind_params(asset_quantities, Opt(lock))
        return self._call("preparelockunspent", params, m.LockedOutput, chain_name=chain_name, id=id)

    @rpc_method("preparelockunspentfrom")
    def prepare_lock_unspent_from(
        self,
        from_address: str,
        asset_quantities: dict[str, Any],
        lock: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.LockedOutput]:
        params = bind_params(from_address, asset_quantities, Opt(lock))
        return self._call("preparelockunspentfrom", params, m.LockedOutput, chain_name=chain_name, id=id)

    # --- entities -------------------------------------------------------

    @rpc_method("create")
    def create(
        self,
        entity_type: str,
        entity_name: str,
        restrictions_or_open: bool | dict[str, Any] | None = None,
        custom_fields: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(entity_type, entity_name, Opt(restrictions_or_open, False), Opt(custom_fields))
        return self._call("create", params, str, chain_name=chain_name, id=id)

    @rpc_method("createfrom")
    def create_from(
        self,
        from_address: str,
        entity_type: str,
        entity_name: str,
        restrictions_or_open: bool | dict[str, Any] | None = None,
        custom_fields: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address, entity_type, entity_name, Opt(restrictions_or_open, False), Opt(custom_fields)
        )
        return self._call("createfrom", params, str, chain_name=chain_name, id=id)

    def create_stream(
        self, stream: StreamEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self.create(
            stream.entity_type,
            stream.name,
            stream.restrictions_or_open(),
            stream.custom_fields,
            chain_name=chain_name,
            id=id,
        )

    def create_stream_from(
        self,
        from_address: str,
        stream: StreamEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self.create_from(
            from_address,
            stream.entity_type,
            stream.name,
            stream.restrictions_or_open(),
            stream.custom_fields,
            chain_name=chain_name,
            id=id,
        )

    def create_stream_filter(
        self, stream_filter: StreamFilterEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("create", stream_filter.create_params(), str, chain_name=chain_name, id=id)

    def create_stream_filter_from(
        self,
        from_address: str,
        stream_filter: StreamFilterEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = [from_address, *stream_filter.create_params()]
        return self._call("createfrom", params, str, chain_name=chain_name, id=id)

    def create_tx_filter(
        self, tx_filter: TxFilterEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self._call("create", tx_filter.create_params(), str, chain_name=chain_name, id=id)

    def create_tx_filter_from(
        self,
        from_address: str,
        tx_filter: TxFilterEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = [from_address, *tx_filter.create_params()]
        return self._call("createfrom", params, str, chain_name=chain_name, id=id)

    def create_upgrade(
        self, upgrade: UpgradeEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self.create(
            upgrade.entity_type, upgrade.name, False, upgrade.custom_fields(), chain_name=chain_name, id=id
        )

    def create_upgrade_from(
        self,
        from_address: str,
        upgrade: UpgradeEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self.create_from(
            from_address,
            upgrade.entity_type,
            upgrade.name,
            False,
            upgrade.custom_fields(),
            chain_name=chain_name,
            id=id,
        )

    @rpc_method("approvefrom")
    def approve_from(
        self,
        from_address: str,
        entity_identifier: str,
        approve: bool | dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self._call("approvefrom", [from_address, entity_identifier, approve], str, chain_name=chain_name, id=id)

    # --- assets ---------------------------------------------------------

    @rpc_method("issue")
    def issue(
        self,
        to_address: str,
        asset: AssetParams,
        quantity: float,
        smallest_unit: float | None = None,
        native_amount: float | None = None,
        custom_fields: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        """Issue a new asset; returns the issuance txid (also usable as its identifier)."""
        params = bind_params(
            to_address,
            _asset_params(asset),
            quantity,
            Opt(smallest_unit, 1),
            Opt(native_amount, 0),
            Opt(custom_fields),
        )
        return self._call("issue", params, str, chain_name=chain_name, id=id)

    @rpc_method("issuefrom")
    def issue_from(
        self,
        from_address: str,
        to_address: str,
        asset: AssetParams,
        quantity: float,
        smallest_unit: float | None = None,
        native_amount: float | None = None,
        custom_fields: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address,
            to_address,
            _asset_params(asset),
            quantity,
            Opt(smallest_unit, 1),
            Opt(native_amount, 0),
            Opt(custom_fields),
        )
        return self._call("issuefrom", params, str, chain_name=chain_name, id=id)

    @rpc_method("issuemore")
    def issue_more(
        self,
        to_address: str,
        asset_identifier: str,
        quantity: float,
        native_amount: float | None = None,
        custom_fields: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(to_address, asset_identifier, quantity, Opt(native_amount, 0), Opt(custom_fields))
        return self._call("issuemore", params, str, chain_name=chain_name, id=id)

    @rpc_method("issuemorefrom")
    def issue_more_from(
        self,
        from_address: str,
        to_address: str,
        asset_identifier: str,
        quantity: float,
        native_amount: float | None = None,
        custom_fields: dict[str, Any] | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address, to_address, asset_identifier, quantity, Opt(native_amount, 0), Opt(custom_fields)
        )
        return self._call("issuemorefrom", params, str, chain_name=chain_name, id=id)

    # --- permissions ----------------------------------------------------

    @rpc_method("grant")
    def grant(
        self,
        addresses: Addresses,
        permissions: str,
        native_amount: float | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            _addresses(addresses),
            permissions,
            Opt(native_amount, 0),
            Opt(start_block, 0),
            Opt(end_block, MAX_END_BLOCK),
            Opt(comment, ""),
            Opt(comment_to),
        )
        return self._call("grant", params, str, chain_name=chain_name, id=id)

    @rpc_method("grantfrom")
    def grant_from(
        self,
        from_address: str,
        to_addresses: Addresses,
        permissions: str,
        native_amount: float | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address,
            _addresses(to_addresses),
            permissions,
            Opt(native_amount, 0),
            Opt(start_block, 0),
            Opt(end_block, MAX_END_BLOCK),
            Opt(comment, ""),
            Opt(comment_to),
        )
        return self._call("grantfrom", params, str, chain_name=chain_name, id=id)

    @rpc_method("grantwithdata")
    def grant_with_data(
        self,
        addresses: Addresses,
        permissions: str,
        data: str | dict[str, Any],
        native_amount: float | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            _addresses(addresses),
            permissions,
            data,
            Opt(native_amount, 0),
            Opt(start_block, 0),
            Opt(end_block),
        )
        return self._call("grantwithdata", params, str, chain_name=chain_name, id=id)

    @rpc_method("grantwithdatafrom")
    def grant_with_data_from(
        self,
        from_address: str,
        to_addresses: Addresses,
        permissions: str,
        data: str | dict[str, Any],
        native_amount: float | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address,
            _addresses(to_addresses),
            permissions,
            data,
            Opt(native_amount, 0),
            Opt(start_block, 0),
            Opt(end_block),
        )
        return self._call("grantwithdatafrom", params, str, chain_name=chain_name, id=id)

    @rpc_method("revoke")
    def revoke(
        self,
        addresses: Addresses,
        permissions: str,
        native_amount: float | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            _addresses(addresses), permissions, Opt(native_amount, 0), Opt(comment, ""), Opt(comment_to)
        )
        return self._call("revoke", params, str, chain_name=chain_name, id=id)

    @rpc_method("revokefrom")
    def revoke_from(
        self,
        from_address: str,
        to_addresses: Addresses,
        permissions: str,
        native_amount: float | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address,
            _addresses(to_addresses),
            permissions,
            Opt(native_amount, 0),
            Opt(comment, ""),
            Opt(comment_to),
        )
        return self._call("revokefrom", params, str, chain_name=chain_name, id=id)

    # --- streams --------------------------------------------------------

    @rpc_method("getstreamitem")
    def get_stream_item(
        self,
        stream_identifier: str,
        txid: str,
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[m.StreamItem]:
        params = bind_params(stream_identifier, txid, Opt(verbose))
        return self._call("getstreamitem", params, m.StreamItem, chain_name=chain_name, id=id)

    @rpc_method("getstreamkeysummary")
    def get_stream_key_summary(
        self,
        stream_identifier: str,
        key: str,
        mode: str,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, Any]]:
        params = [stream_identifier, key, mode]
        return self._call("getstreamkeysummary", params, dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("getstreampublishersummary")
    def get_stream_publisher_summary(
        self,
        stream_identifier: str,
        address: str,
        mode: str,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[dict[str, Any]]:
        params = [stream_identifier, address, mode]
        return self._call("getstreampublishersummary", params, dict[str, Any], chain_name=chain_name, id=id)

    @rpc_method("liststreamblockitems")
    def list_stream_block_items(
        self,
        stream_identifier: str,
        block_set_identifier: str | int | list[Any],
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamItem]]:
        params = bind_params(
            stream_identifier, block_set_identifier, Opt(verbose, False), Opt(count, MAX_COUNT), Opt(start)
        )
        return self._call("liststreamblockitems", params, list[m.StreamItem], chain_name=chain_name, id=id)

    @rpc_method("liststreamitems")
    def list_stream_items(
        self,
        stream_identifier: str,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        local_ordering: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamItem]]:
        params = bind_params(stream_identifier, Opt(verbose, False), Opt(count, 10), Opt(start), Opt(local_ordering))
        return self._call("liststreamitems", params, list[m.StreamItem], chain_name=chain_name, id=id)

    @rpc_method("liststreamkeyitems")
    def list_stream_key_items(
        self,
        stream_identifier: str,
        key: str,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        local_ordering: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamItem]]:
        params = bind_params(
            stream_identifier, key, Opt(verbose, False), Opt(count, 10), Opt(start), Opt(local_ordering)
        )
        return self._call("liststreamkeyitems", params, list[m.StreamItem], chain_name=chain_name, id=id)

    @rpc_method("liststreamkeys")
    def list_stream_keys(
        self,
        stream_identifier: str,
        keys: str | list[str] | None = None,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        local_ordering: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamKeyResult]]:
        params = bind_params(
            stream_identifier,
            Opt(keys, ALL),
            Opt(verbose, False),
            Opt(count, MAX_COUNT),
            Opt(start),
            Opt(local_ordering),
        )
        return self._call("liststreamkeys", params, list[m.StreamKeyResult], chain_name=chain_name, id=id)

    @rpc_method("liststreampublisheritems")
    def list_stream_publisher_items(
        self,
        stream_identifier: str,
        address: str,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        local_ordering: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamItem]]:
        params = bind_params(
            stream_identifier, address, Opt(verbose, False), Opt(count, 10), Opt(start), Opt(local_ordering)
        )
        return self._call("liststreampublisheritems", params, list[m.StreamItem], chain_name=chain_name, id=id)

    @rpc_method("liststreampublishers")
    def list_stream_publishers(
        self,
        stream_identifier: str,
        addresses: Addresses | None = None,
        verbose: bool | None = None,
        count: int | None = None,
        start: int | None = None,
        local_ordering: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamPublisherResult]]:
        params = bind_params(
            stream_identifier,
            Opt(addresses, ALL),
            Opt(verbose, False),
            Opt(count, MAX_COUNT),
            Opt(start),
            Opt(local_ordering),
        )
        return self._call(
            "liststreampublishers", params, list[m.StreamPublisherResult], chain_name=chain_name, id=id
        )

    @rpc_method("liststreamqueryitems")
    def list_stream_query_items(
        self,
        stream_identifier: str,
        query: dict[str, Any],
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamItem]]:
        params = bind_params(stream_identifier, query, Opt(verbose))
        return self._call("liststreamqueryitems", params, list[m.StreamItem], chain_name=chain_name, id=id)

    @rpc_method("liststreamtxitems")
    def list_stream_tx_items(
        self,
        stream_identifier: str,
        txids: str | list[str],
        verbose: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[list[m.StreamItem]]:
        params = bind_params(stream_identifier, txids, Opt(verbose))
        return self._call("liststreamtxitems", params, list[m.StreamItem], chain_name=chain_name, id=id)

    @rpc_method("publish")
    def publish(
        self,
        stream_identifier: str,
        key_or_keys: str | list[str],
        data: str | dict[str, Any],
        options: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(stream_identifier, key_or_keys, data, Opt(options))
        return self._call("publish", params, str, chain_name=chain_name, id=id)

    @rpc_method("publishfrom")
    def publish_from(
        self,
        from_address: str,
        stream_identifier: str,
        key_or_keys: str | list[str],
        data: str | dict[str, Any],
        options: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(from_address, stream_identifier, key_or_keys, data, Opt(options))
        return self._call("publishfrom", params, str, chain_name=chain_name, id=id)

    @rpc_method("publishmulti")
    def publish_multi(
        self,
        stream_identifier: str,
        items: list[dict[str, Any]],
        options: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(stream_identifier, items, Opt(options))
        return self._call("publishmulti", params, str, chain_name=chain_name, id=id)

    @rpc_method("publishmultifrom")
    def publish_multi_from(
        self,
        from_address: str,
        stream_identifier: str,
        items: list[dict[str, Any]],
        options: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(from_address, stream_identifier, items, Opt(options))
        return self._call("publishmultifrom", params, str, chain_name=chain_name, id=id)

    def publish_stream_item_key(
        self, item: PublishEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self.publish(
            item.stream, item.single_key(), item.payload_data(), item.options, chain_name=chain_name, id=id
        )

    def publish_stream_item_keys(
        self, item: PublishEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self.publish(
            item.stream, item.key_list(), item.payload_data(), item.options, chain_name=chain_name, id=id
        )

    def publish_stream_item_key_from(
        self,
        from_address: str,
        item: PublishEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self.publish_from(
            from_address,
            item.stream,
            item.single_key(),
            item.payload_data(),
            item.options,
            chain_name=chain_name,
            id=id,
        )

    def publish_stream_item_keys_from(
        self,
        from_address: str,
        item: PublishEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self.publish_from(
            from_address,
            item.stream,
            item.key_list(),
            item.payload_data(),
            item.options,
            chain_name=chain_name,
            id=id,
        )

    def publish_multi_stream_items(
        self, multi: PublishMultiEntity, *, chain_name: str | None = None, id: str | None = None
    ) -> RpcResponse[str]:
        return self.publish_multi(multi.stream, multi.item_objects(), multi.options, chain_name=chain_name, id=id)

    def publish_multi_stream_items_from(
        self,
        from_address: str,
        multi: PublishMultiEntity,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self.publish_multi_from(
            from_address, multi.stream, multi.item_objects(), multi.options, chain_name=chain_name, id=id
        )

    @rpc_method("subscribe")
    def subscribe(
        self,
        entity_identifiers: str | list[str],
        rescan: bool | None = None,
        parameters: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        params = bind_params(entity_identifiers, Opt(rescan, True), Opt(parameters))
        return self._call("subscribe", params, None, chain_name=chain_name, id=id)

    @rpc_method("unsubscribe")
    def unsubscribe(
        self,
        entity_identifiers: str | list[str],
        purge: bool | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[None]:
        params = bind_params(entity_identifiers, Opt(purge))
        return self._call("unsubscribe", params, None, chain_name=chain_name, id=id)

    # --- sending --------------------------------------------------------

    @rpc_method("send")
    def send(
        self,
        to_address: str,
        amount_or_assets: float | dict[str, Any],
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(to_address, amount_or_assets, Opt(comment, ""), Opt(comment_to))
        return self._call("send", params, str, chain_name=chain_name, id=id)

    @rpc_method("sendasset")
    def send_asset(
        self,
        to_address: str,
        asset_identifier: str,
        quantity: float,
        native_amount: float | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            to_address, asset_identifier, quantity, Opt(native_amount, 0), Opt(comment, ""), Opt(comment_to)
        )
        return self._call("sendasset", params, str, chain_name=chain_name, id=id)

    @rpc_method("sendassetfrom")
    def send_asset_from(
        self,
        from_address: str,
        to_address: str,
        asset_identifier: str,
        quantity: float,
        native_amount: float | None = None,
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(
            from_address,
            to_address,
            asset_identifier,
            quantity,
            Opt(native_amount, 0),
            Opt(comment, ""),
            Opt(comment_to),
        )
        return self._call("sendassetfrom", params, str, chain_name=chain_name, id=id)

    @rpc_method("sendfrom")
    def send_from(
        self,
        from_address: str,
        to_address: str,
        amount_or_assets: float | dict[str, Any],
        comment: str | None = None,
        comment_to: str | None = None,
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = bind_params(from_address, to_address, amount_or_assets, Opt(comment, ""), Opt(comment_to))
        return self._call("sendfrom", params, str, chain_name=chain_name, id=id)

    @rpc_method("sendwithdata")
    def send_with_data(
        self,
        to_address: str,
        amount_or_assets: float | dict[str, Any],
        data: str | dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        return self._call("sendwithdata", [to_address, amount_or_assets, data], str, chain_name=chain_name, id=id)

    @rpc_method("sendwithdatafrom")
    def send_with_data_from(
        self,
        from_address: str,
        to_address: str,
        amount_or_assets: float | dict[str, Any],
        data: str | dict[str, Any],
        *,
        chain_name: str | None = None,
        id: str | None = None,
    ) -> RpcResponse[str]:
        params = [from_address, to_address, amount_or_assets, data]
        return self._call("sendwithdatafrom", params, str, chain_name=chain_name, id=id)
